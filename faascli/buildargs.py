"""Parsing and validation of the build command's flags."""

from __future__ import annotations

from typing import Iterable

from faascli.builder import ADDITIONAL_PACKAGE_BUILD_ARG
from faascli.deploy import merge_slice


class BuildArgError(Exception):
    """Raised when a build flag has an invalid value."""


def parse_build_args(args: Iterable[str] | None) -> dict[str, str]:
    """Parse ``KEY=VALUE`` build-args into a dict.

    Keys and values are stripped of surrounding whitespace. Repeated
    ``ADDITIONAL_PACKAGE`` entries are joined with a space; any other
    repeated key keeps its last value.
    """
    mapped: dict[str, str] = {}
    for entry in args or ():
        key, separator, value = entry.partition("=")
        if not separator:
            raise BuildArgError("each build-arg must take the form key=value")
        key = key.strip()
        value = value.strip()
        if not key:
            raise BuildArgError("build-arg must have a non-empty key")
        if not value:
            raise BuildArgError("build-arg must have a non-empty value")
        if key == ADDITIONAL_PACKAGE_BUILD_ARG and mapped.get(key):
            mapped[key] = f"{mapped[key]} {value}"
        else:
            mapped[key] = value
    return mapped


def check_parallel(parallel: int) -> None:
    """Raise ``BuildArgError`` unless the parallel depth is at least 1."""
    if parallel < 1:
        raise BuildArgError("the --parallel flag must be great than 0")


def combine_build_opts(
    yaml_opts: Iterable[str] | None, flag_opts: Iterable[str] | None
) -> list[str]:
    """Combine build options: flag options first, then new ones from the stack file."""
    return merge_slice(yaml_opts, flag_opts)


def format_build_errors(errors: Iterable[BaseException]) -> str:
    """Summarise the errors collected while building several functions."""
    lines = "".join(f"- {error}\n" for error in errors)
    return "Errors received during build:\n" + lines