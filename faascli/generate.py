"""Helpers for generating Kubernetes resources from function definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

SECRETS_MOUNT_PATH = "/var/openfaas/secrets/"


class StoreLookupError(LookupError):
    """Raised when a function cannot be found in the function store."""


@dataclass
class EnvPair:
    """One environment variable of a container spec."""

    name: str
    value: str


def generate_function_order(functions: Mapping[str, Any]) -> list[str]:
    """Return the function names in lexical order."""
    return sorted(functions)


def order_env(environment: Mapping[str, str] | None) -> list[EnvPair]:
    """Return the environment as name/value pairs sorted by name."""
    return [EnvPair(name, value) for name, value in sorted((environment or {}).items())]


def _item_name(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("name")
    return getattr(item, "name", None)


def filter_store_item(items: Iterable[Any], name: str) -> Any:
    """Return the first store item called ``name``.

    Items may be objects with a ``name`` attribute or mappings with a "name" key.
    Raises ``StoreLookupError`` when no item matches.
    """
    for item in items:
        if _item_name(item) == name:
            return item
    raise StoreLookupError(f"unable to find '{name}' in store")


def secret_mounts(
    secrets: Iterable[str] | None,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Return the read-only volume mounts and the volumes for the given secrets."""
    mounts: list[dict[str, Any]] = []
    volumes: list[dict[str, Any]] = []
    for secret_name in secrets or ():
        mounts.append(
            {"name": secret_name, "mountPath": SECRETS_MOUNT_PATH + secret_name, "readOnly": True}
        )
        source = dict(secretName=secret_name)
        volume = dict(name=secret_name)
        volume["secret"] = source
        volumes.append(volume)
    return mounts, volumes