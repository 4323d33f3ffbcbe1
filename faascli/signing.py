"""HMAC signing of function invocation payloads."""

from __future__ import annotations

import hashlib
import hmac


def generate_signed_header(message: bytes | str, key: str, header_name: str) -> str:
    """Return ``<header_name>=sha1=<hex hmac>`` for the message signed with ``key``."""
    if not header_name:
        raise ValueError("signed header must have a non-zero length")
    if isinstance(message, str):
        message = message.encode()
    digest = hmac.new(key.encode(), message, hashlib.sha1).hexdigest()
    return f"{header_name}=sha1={digest}"


def missing_sign_flag(header: str, key: str) -> bool:
    """True when exactly one of the signing header and the key is given."""
    return bool(header) != bool(key)