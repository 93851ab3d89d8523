# weatherdash/services/liveness.py
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from weatherdash.core.clock import to_naive_utc, utcnow

ONLINE_WINDOW = timedelta(minutes=10)


class Liveness(NamedTuple):
    is_online: bool
    formatted: str


def _plural(n: int, unit: str) -> str:
    if n == 1:
        return f"1 {unit} ago"
    return f"{n} {unit}s ago"


def format_time_ago(elapsed: timedelta) -> str:
    """
    Buckets an elapsed duration into a short relative string:
      < 1 minute  -> "just now"
      < 1 hour    -> "N minutes ago"
      < 24 hours  -> "N hours ago"
      otherwise   -> "N days ago"   (whole hours // 24)
    """
    if elapsed < timedelta(minutes=1):
        return "just now"

    seconds = elapsed.total_seconds()
    if elapsed < timedelta(hours=1):
        return _plural(int(seconds // 60), "minute")

    hours = int(seconds // 3600)
    if elapsed < timedelta(hours=24):
        return _plural(hours, "hour")

    return _plural(hours // 24, "day")


def liveness_status(last_seen: Optional[datetime], now: Optional[datetime] = None) -> Liveness:
    if last_seen is None:
        return Liveness(is_online=False, formatted="never")

    now = to_naive_utc(now) if now is not None else utcnow()
    elapsed = now - to_naive_utc(last_seen)

    return Liveness(
        is_online=elapsed < ONLINE_WINDOW,
        formatted=format_time_ago(elapsed),
    )
