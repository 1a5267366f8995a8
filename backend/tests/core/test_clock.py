"""Clock — whole-second UTC instants rendered with +00:00."""

from datetime import datetime, timedelta, timezone

from minisite.core.clock import iso_utc, utc_now


def test_utc_now_is_aware_and_truncated():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert now.microsecond == 0


def test_iso_utc_converts_offsets():
    moment = datetime(2026, 1, 1, 2, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert iso_utc(moment) == "2026-01-01T00:00:00+00:00"
