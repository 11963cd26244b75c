"""Unit tests for date conversion helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import re

import pytest

from core.dates import parse_utc_date, semver_date, to_epoch_nanoseconds
from core.errors import CoreModsDateError

_SEMVER_DATE_PATTERN = re.compile(r"^\d{4}\.\d{2}\.\d{2}-\d{6}\d{3}Z$")

def test_semver_date_formats_utc_moment() -> None:
    """Semver date should use dotted date and compact time fields."""
    moment = datetime(2023, 1, 5, 10, 20, 30, 123000, tzinfo=timezone.utc)

    assert semver_date(moment) == "2023.01.05-102030123Z"

def test_semver_date_defaults_to_current_time() -> None:
    """Semver date without input should render the current UTC time."""
    before = datetime.now(timezone.utc).strftime("%Y.%m.%d")

    rendered = semver_date()

    assert _SEMVER_DATE_PATTERN.match(rendered)
    assert rendered[:10] >= before

def test_semver_date_converts_offset_moments_to_utc() -> None:
    """Aware datetimes in other zones should render as UTC."""
    zone = timezone(timedelta(hours=2))
    moment = datetime(2023, 1, 5, 1, 0, 0, tzinfo=zone)

    assert semver_date(moment) == "2023.01.04-230000000Z"

def test_semver_date_matches_pattern_across_years() -> None:
    """Rendered values should keep fixed field widths."""
    moments = [
        datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
        datetime(2024, 2, 29, 0, 0, 0, tzinfo=timezone.utc),
        datetime(2030, 7, 4, 8, 5, 9, 1000),
    ]

    rendered = [semver_date(moment) for moment in moments]

    assert all(_SEMVER_DATE_PATTERN.match(value) for value in rendered)
    assert rendered[0] == "1999.12.31-235959999Z"

def test_parse_utc_date_reads_milliseconds() -> None:
    """Parser should keep the millisecond fraction."""
    parsed = parse_utc_date("2023-01-05T10:20:30.123Z")

    assert parsed == datetime(2023, 1, 5, 10, 20, 30, 123000, tzinfo=timezone.utc)

def test_parse_utc_date_defaults_missing_fraction_to_zero() -> None:
    """Parser should use zero milliseconds when no fraction is present."""
    parsed = parse_utc_date("2023-01-05T10:20:30Z")

    assert parsed.microsecond == 0 and parsed.tzinfo == timezone.utc

def test_parse_utc_date_accepts_missing_zone_and_long_fraction() -> None:
    """Parser should allow no trailing Z and ignore digits past milliseconds."""
    parsed = parse_utc_date("2023-01-05T10:20:30.123456")

    assert parsed.microsecond == 123000

def test_parse_utc_date_reads_short_fraction_as_milliseconds() -> None:
    """A one-digit fraction should count whole milliseconds."""
    parsed = parse_utc_date("2023-01-05T10:20:30.5Z")

    assert parsed.microsecond == 5000
    assert semver_date(parsed) == "2023.01.05-102030005Z"

@pytest.mark.parametrize("raw_value", ["not-a-date", "2023-01-05", "2023-01-05 10:20:30Z", ""])
def test_parse_utc_date_rejects_unmatched_text(raw_value: str) -> None:
    """Parser should fail for text outside the timestamp pattern."""
    with pytest.raises(CoreModsDateError, match="Invalid date format"):
        parse_utc_date(raw_value)

    assert True

@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("2023-13-05T10:20:30Z", datetime(2024, 1, 5, 10, 20, 30, tzinfo=timezone.utc)),
        ("2023-00-15T00:00:00Z", datetime(2022, 12, 15, tzinfo=timezone.utc)),
        ("2023-02-30T00:00:00Z", datetime(2023, 3, 2, tzinfo=timezone.utc)),
        ("2023-01-31T24:00:60Z", datetime(2023, 2, 1, 0, 1, tzinfo=timezone.utc)),
    ],
)
def test_parse_utc_date_rolls_over_out_of_range_fields(
    raw_value: str,
    expected: datetime,
) -> None:
    """Fields past their calendar range should carry into the next unit."""
    assert parse_utc_date(raw_value) == expected

def test_parse_utc_date_rejects_moment_beyond_datetime_range() -> None:
    """Parser should fail when rollover leaves the supported range."""
    with pytest.raises(CoreModsDateError, match="Invalid date format"):
        parse_utc_date("9999-12-31T23:59:60Z")

    assert True

def test_semver_date_pads_years_below_one_thousand() -> None:
    """Early years should still render with four digits."""
    moment = parse_utc_date("0005-01-02T00:00:00Z")

    rendered = semver_date(moment)

    assert rendered == "0005.01.02-000000000Z"
    assert _SEMVER_DATE_PATTERN.match(rendered)

def test_to_epoch_nanoseconds_is_exact() -> None:
    """Epoch conversion should not drift at millisecond precision."""
    moment = parse_utc_date("2023-01-05T10:20:30.123Z")

    assert to_epoch_nanoseconds(moment) == 1672914030_123_000_000
