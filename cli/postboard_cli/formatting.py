from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def field(item: dict[str, Any], key: str, default: Any = "-") -> Any:
    """Look up a snake_case key, falling back to the Go-style CamelCase spelling."""
    if key in item:
        return item[key]
    camel = "".join("ID" if part == "id" else part.capitalize() for part in key.split("_"))
    return item.get(camel, default)


def format_list_timestamp(value: datetime | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    ms = dt.microsecond // 1000
    if ms:
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ms:03d}Z"
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")
