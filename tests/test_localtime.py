from datetime import datetime, timezone

from openweather_tool.localtime import attach_local_time

NOW = datetime(2026, 2, 27, 12, 0, 0, tzinfo=timezone.utc)


def test_uses_timezone_offset_from_payload():
    data = {"name": "Tokyo", "timezone": 32400}

    enriched = attach_local_time(data, now=NOW)

    assert enriched["local_time"] == "2026-02-27 21:00:00"
    assert enriched["timezone_offset_hours"] == 9
    assert "local_time" not in data


def test_negative_half_hour_offset_truncates_hours():
    enriched = attach_local_time({"timezone": -12600}, now=NOW)

    assert enriched["local_time"] == "2026-02-27 08:30:00"
    assert enriched["timezone_offset_hours"] == -3


def test_falls_back_to_longitude_without_timezone():
    enriched = attach_local_time({"name": "Austin"}, lat=30.28, lng=-97.74, now=NOW)

    assert enriched["timezone_offset"] == -6
    assert enriched["local_time"] == "2026-02-27 06:00:00"


def test_no_enrichment_without_timezone_or_coordinates():
    assert attach_local_time({"name": "Austin"}, now=NOW) == {"name": "Austin"}


def test_non_numeric_timezone_is_left_alone():
    data = {"timezone": "America/Chicago"}

    assert attach_local_time(data, lat=30.28, lng=-97.74, now=NOW) == data


def test_non_object_payload_is_returned_unchanged():
    assert attach_local_time(["a", "b"], lat=1.0, lng=2.0) == ["a", "b"]
