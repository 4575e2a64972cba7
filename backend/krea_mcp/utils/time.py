from datetime import datetime, timezone
from typing import Optional
import time


def utc_now() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def parse_iso(value: str) -> Optional[datetime]:
    normalized = value.replace("Z", "+00:00") if value.endswith("Z") else value
    if len(normalized) == 10:
        normalized = f"{normalized}T00:00:00+00:00"
    try:
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_display(value: Optional[str]) -> str:
    """Render an ISO timestamp as e.g. ``Jan 5, 2025, 03:04 PM`` (UTC).

    Unparseable values are returned unchanged.
    """
    if not value:
        return "-"
    dt = parse_iso(value)
    if dt is None:
        return value
    dt = dt.astimezone(timezone.utc)
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}, {dt.strftime('%I:%M %p')}"
