"""Helpers for deploying functions: flag parsing, merging and status checks."""

from __future__ import annotations

from typing import Iterable, Mapping

_ACCEPTED = 202
_OK = 200

UPDATE_REPLACE_HELP = (
    "Cannot specify --update and --replace at the same time. "
    "One of --update or --replace must be false.\n"
    "  --replace    removes an existing deployment before re-creating it\n"
    "  --update     performs a rolling update to a new function image or "
    "configuration (default true)"
)


class DeployError(Exception):
    """Raised when deploy settings are invalid or a deployment failed."""


def check_update_replace(update: bool, replace: bool) -> None:
    """Raise ``DeployError`` when both --update and --replace are requested."""
    if update and replace:
        raise DeployError("cannot specify --update and --replace at the same time")


def parse_map(values: Iterable[str] | None, key_name: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a dict.

    Raises ``DeployError`` when an entry has no ``=``, or an empty key or value.
    """
    result: dict[str, str] = {}
    for entry in values or ():
        parts = entry.strip().split("=", 1)
        if len(parts) != 2:
            raise DeployError("label format is not correct, needs key=value")
        name, value = parts
        if not name:
            raise DeployError(f"empty {key_name} name: [{entry}]")
        if not value:
            raise DeployError(f"empty {key_name} value: [{entry}]")
        result[name] = value
    return result


def merge_map(
    base: Mapping[str, str] | None, overlay: Mapping[str, str] | None
) -> dict[str, str]:
    """Return a new dict of ``base`` updated with ``overlay``."""
    merged = dict(base or {})
    merged.update(overlay or {})
    return merged


def merge_slice(
    values: Iterable[str] | None, overlay: Iterable[str] | None
) -> list[str]:
    """Return ``overlay`` followed by the entries of ``values`` not already in it."""
    results = list(overlay or ())
    added = set(results)
    results.extend(value for value in values or () if value not in added)
    return results


def compile_environment(
    envvar_opts: Iterable[str] | None,
    yaml_environment: Mapping[str, str] | None,
    file_environment: Mapping[str, str] | None,
) -> dict[str, str]:
    """Combine stack, file and flag environments; flags win, then files."""
    try:
        arguments = parse_map(envvar_opts, "env")
    except DeployError as err:
        raise DeployError(f"error parsing envvars: {err}") from err
    return merge_map(merge_map(yaml_environment, file_environment), arguments)


def deploy_failed(status: Mapping[str, int]) -> None:
    """Raise ``DeployError`` listing every function whose deployment failed."""
    if not status:
        return None
    messages = [
        f"Function '{name}' failed to deploy with status code: {code}"
        for name, code in status.items()
    ]
    raise DeployError("\n".join(messages))


def bad_status_code(status_code: int) -> bool:
    """True unless the gateway answered 200 OK or 202 Accepted."""
    return status_code not in (_ACCEPTED, _OK)


def language_exists_not_dockerfile(language: str) -> bool:
    """True for a non-empty language other than the Dockerfile template."""
    return bool(language) and language.lower() != "dockerfile"