"""Date helpers for descriptor versions and file timestamps.

Manifest timestamps are parsed into aware UTC datetimes, rendered into
semver-like version strings, and converted to exact epoch nanoseconds.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import re

from core.errors import CoreModsDateError

_UTC_DATE_PATTERN = re.compile(
    r"(\d+)-(\d+)-(\d+)T(\d+):(\d+):(\d+)(?:\.(\d{1,3}))?\d*Z?",
    re.ASCII,
)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def semver_date(input_date: datetime | None = None) -> str:
    """Render a datetime as ``YYYY.MM.DD-HHmmssSSSZ``.

    Args:
        input_date: Moment to render. Defaults to now. Naive values are
            read as UTC.

    Returns:
        Semver-like date string with a literal trailing ``Z``.
    """
    if input_date is None:
        moment = datetime.now(timezone.utc)
    elif input_date.tzinfo is None:
        moment = input_date.replace(tzinfo=timezone.utc)
    else:
        moment = input_date.astimezone(timezone.utc)
    milliseconds = moment.microsecond // 1000
    return (
        f"{moment.year:04d}.{moment.month:02d}.{moment.day:02d}-"
        f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}{milliseconds:03d}Z"
    )


def parse_utc_date(date_string: str) -> datetime:
    """Parse a ``YYYY-MM-DDTHH:mm:ss[.fff]Z`` timestamp as UTC.

    Fields past their calendar range roll over into the next unit, so
    month 13 is January of the following year. The fraction group is read
    as a whole number of milliseconds: ``.5`` is 5 ms.

    Args:
        date_string: Timestamp text. Fraction and trailing ``Z`` are optional.

    Returns:
        Timezone-aware UTC datetime with millisecond precision.

    Raises:
        CoreModsDateError: If the text does not match, or the rolled-over
            moment falls outside the supported datetime range.
    """
    match = _UTC_DATE_PATTERN.fullmatch(date_string)
    if match is None:
        raise CoreModsDateError(
            f"Invalid date format: '{date_string}'. "
            "Expected YYYY-MM-DDTHH:mm:ss[.fff]Z."
        )
    year, month, day, hour, minute, second = (int(value) for value in match.groups()[:6])
    fraction = match.group(7)
    milliseconds = int(fraction) if fraction else 0
    carry_years, month_index = divmod(month - 1, 12)
    try:
        month_start = datetime(year + carry_years, month_index + 1, 1, tzinfo=timezone.utc)
        return month_start + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=milliseconds,
        )
    except (OverflowError, ValueError) as error:
        raise CoreModsDateError(f"Invalid date format: '{date_string}'. {error}.") from error


def to_epoch_nanoseconds(moment: datetime) -> int:
    """Convert an aware datetime to integer nanoseconds since the epoch."""
    delta = moment - _EPOCH
    whole_seconds = delta.days * 86400 + delta.seconds
    return whole_seconds * 1_000_000_000 + delta.microseconds * 1000
