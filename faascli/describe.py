"""Describing a deployed function."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FunctionDescription:
    """Details of a deployed function as shown by the describe command."""

    name: str
    status: str = "Not Ready"
    replicas: int = 0
    available_replicas: int = 0
    invocation_count: int = 0
    image: str = ""
    env_process: str = ""
    url: str = ""
    async_url: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    memory_bytes: float | None = None
    cpu: float | None = None

    @property
    def has_usage(self) -> bool:
        """True when resource usage figures are known."""
        return self.memory_bytes is not None or self.cpu is not None


def get_function_urls(gateway: str, function_name: str, namespace: str) -> tuple[str, str]:
    """Return the synchronous and asynchronous invocation URLs of a function."""
    base = gateway.rstrip("/")
    suffix = f".{namespace}" if namespace else ""
    return (
        f"{base}/function/{function_name}{suffix}",
        f"{base}/async-function/{function_name}{suffix}",
    )


def _map_rows(name: str, values: dict[str, str] | None) -> list[tuple[str, str]]:
    if not values:
        return [(f"{name} ", " <none>")]
    rows = []
    for index, (key, value) in enumerate(values.items()):
        rows.append((f"{name} " if index == 0 else " ", f" {key} : {value}"))
    return rows


def format_function_description(desc: FunctionDescription) -> str:
    """Render the description as aligned ``label  value`` lines."""
    rows: list[tuple[str, str]] = [
        ("Name:", f" {desc.name}"),
        ("Status:", f" {desc.status}"),
        ("Replicas:", f" {desc.replicas}"),
        ("Available replicas:", f" {desc.available_replicas}"),
        ("Invocations:", f" {desc.invocation_count}"),
        ("Image:", f" {desc.image}"),
        ("Function process:", f" {desc.env_process}"),
        ("URL:", f" {desc.url}"),
        ("Async URL:", f" {desc.async_url}"),
    ]
    rows += _map_rows("Labels", desc.labels)
    rows += _map_rows("Annotations", desc.annotations)

    prefix = ""
    if desc.has_usage:
        # The blank line is written ahead of the buffered table.
        prefix = "\n"
        memory = (desc.memory_bytes or 0.0) / 1024 / 1024
        cpu = desc.cpu or 0.0
        if cpu < 0:
            cpu = 1
        rows.append(("RAM:", f" {memory:.2f} MB"))
        rows.append(("CPU:", f" {cpu:.0f} Mi"))

    width = max(len(label) for label, _ in rows) + 1
    body = "".join(f"{label.ljust(width)}{value}\n" for label, value in rows)
    return prefix + body