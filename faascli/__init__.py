"""Helpers for building, deploying, describing and invoking container-packaged functions."""

__version__ = "0.1.0"