"""Sorting and printing the list of deployed functions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

_ZERO_TIME = "0001-01-01 00:00:00 +0000 UTC"
_MIN_IMAGE_WIDTH = 40


@dataclass
class FunctionStatus:
    """A deployed function as reported by the gateway."""

    name: str
    image: str = ""
    invocation_count: float = 0.0
    replicas: int = 0
    created_at: datetime | None = None


def _creation_key(function: FunctionStatus) -> tuple[bool, float]:
    created = function.created_at
    if created is None:
        return (False, 0.0)
    return (True, created.timestamp())


def sort_functions(
    functions: Iterable[FunctionStatus], order: str
) -> list[FunctionStatus]:
    """Return the functions sorted by "name", "invocations" or "creation".

    Invocations sort from most to fewest; any other order keeps the input order.
    """
    items = list(functions)
    if order == "name":
        return sorted(items, key=lambda f: f.name)
    if order == "invocations":
        return sorted(items, key=lambda f: f.invocation_count, reverse=True)
    if order == "creation":
        return sorted(items, key=_creation_key)
    return items


def _format_time(value: datetime | None) -> str:
    if value is None:
        return _ZERO_TIME
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    if value.tzinfo is None:
        return f"{text} +0000 UTC"
    offset = value.strftime("%z")
    zone = value.tzname() or offset
    return f"{text} {offset} {zone}"


def format_function_list(
    functions: Sequence[FunctionStatus], quiet: bool = False, verbose: bool = False
) -> str:
    """Render the function list as printed by the list command."""
    if quiet:
        return "".join(f"{function.name}\n" for function in functions)

    if verbose:
        width = max([_MIN_IMAGE_WIDTH, *(len(f.image) for f in functions)])
        lines = [
            f"{'Function':<30}\t{'Image':<{width}}\t{'Invocations':<15}\t"
            f"{'Replicas':<5}\t{'CreatedAt':<5}\n"
        ]
        lines += [
            f"{f.name:<30}\t{f.image:<{width}}\t{int(f.invocation_count):<15d}\t"
            f"{f.replicas:<5d}\t\t{_format_time(f.created_at):<5}\n"
            for f in functions
        ]
        return "".join(lines)

    lines = [f"{'Function':<30}\t{'Invocations':<15}\t{'Replicas':<5}\n"]
    lines += [
        f"{f.name:<30}\t{int(f.invocation_count):<15d}\t{f.replicas:<5d}\n"
        for f in functions
    ]
    return "".join(lines)