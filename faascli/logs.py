"""Building log requests from the logs command's flags."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass
class LogRequest:
    """A request for a function's logs."""

    name: str
    namespace: str = ""
    tail: int = -1
    since: datetime | None = None
    follow: bool = True


def since_value(
    since_time: datetime | None, since: timedelta, now: datetime | None = None
) -> datetime | None:
    """Return the time logs should start from.

    An explicit ``since_time`` wins; otherwise a non-zero ``since`` duration is
    counted back from ``now``; otherwise there is no lower bound.
    """
    if since_time is not None:
        return since_time
    if since:
        current = now if now is not None else datetime.now(timezone.utc)
        return current - since
    return None


def make_log_request(
    name: str,
    namespace: str = "",
    lines: int = -1,
    since_time: datetime | None = None,
    since: timedelta = timedelta(0),
    follow: bool = True,
    now: datetime | None = None,
) -> LogRequest:
    """Build a ``LogRequest`` from the logs command's settings."""
    return LogRequest(
        name=name,
        namespace=namespace,
        tail=lines,
        since=since_value(since_time, since, now),
        follow=follow,
    )