from datetime import datetime, timedelta, timezone
from typing import Any

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def attach_local_time(
    data: Any,
    lat: float | None = None,
    lng: float | None = None,
    now: datetime | None = None,
) -> Any:
    """Return a copy of a weather payload with the location's local time added.

    Uses the payload's ``timezone`` offset (seconds from UTC) when present,
    otherwise approximates the offset as one hour per 15 degrees of longitude.
    Non-object payloads are returned unchanged.
    """
    if not isinstance(data, dict):
        return data

    utc = now if now is not None else datetime.now(timezone.utc)
    enriched = dict(data)
    offset = data.get("timezone")

    if isinstance(offset, (int, float)) and not isinstance(offset, bool):
        local = utc + timedelta(seconds=offset)
        enriched["local_time"] = local.strftime(LOCAL_TIME_FORMAT)
        enriched["timezone_offset_hours"] = int(offset / 3600)
    elif "timezone" not in data and lat is not None and lng is not None:
        hours_offset = int(lng / 15.0)  # rough, ignores political boundaries
        local = utc + timedelta(hours=hours_offset)
        enriched["local_time"] = local.strftime(LOCAL_TIME_FORMAT)
        enriched["timezone_offset"] = hours_offset

    return enriched
