"""Date and date-range parsing for timeline records.

Two token shapes are accepted:

- a bare year of two to four digits (``"1976"``), read as the first moment of
  that year;
- a full calendar date in any common unambiguous notation (``"1976-09-10"``,
  ``"10-09-1976"``, ``"10 Sep 1976"``). Ambiguous numeric dates are read
  day-first, so ``"10-09-1976"`` is 10 September 1976.

A timestamp field may also hold a range, ``"<start>/<end>"``. All results are
naive datetimes in UTC; timezone-aware inputs are converted.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from dateutil import parser as date_parser

from .errors import DateFormatError

_YEAR_ONLY = re.compile(r"^\s*(\d{2,4})\s*$")
_YEAR_FIRST = re.compile(r"^\d{4}([-.T])")
RANGE_DELIMITER = "/"


def _to_utc(value: datetime) -> datetime:
    """Drop tzinfo after converting aware values to UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _partial_date_default() -> datetime:
    """Missing components of a partial date ("Sep 1976") fall on the first day."""
    return datetime(datetime.now(UTC).year, 1, 1)


def parse_date(token: str | None) -> datetime | None:
    """Parse a single date token.

    Returns ``None`` for a blank or missing token so the caller can decide
    whether that is an error. Raises :class:`DateFormatError` otherwise.
    """
    if token is None:
        return None
    text = str(token).strip()
    if not text:
        return None

    year_match = _YEAR_ONLY.match(text)
    if year_match:
        year = int(year_match.group(1))
        if year < 1:
            raise DateFormatError(text, "year must be at least 1")
        return datetime(year, 1, 1)

    # Year-first tokens are ISO or nothing: the day-first parser would turn
    # "1976-13-01" into 13 January and "2010-05-01" into 5 January.
    year_first = _YEAR_FIRST.match(text)
    if year_first:
        iso_text = text.replace(".", "-", 2) if year_first.group(1) == "." else text
        try:
            return _to_utc(date_parser.isoparse(iso_text))
        except (ValueError, OverflowError) as exc:
            raise DateFormatError(text, str(exc)) from exc

    try:
        return _to_utc(date_parser.parse(text, dayfirst=True, default=_partial_date_default()))
    except (ValueError, OverflowError) as exc:
        raise DateFormatError(text, str(exc)) from exc


def parse_range(raw: str | None) -> tuple[datetime, datetime | None] | None:
    """Split ``raw`` on ``/`` into a ``(start, end)`` pair.

    ``end`` is ``None`` unless the value carries a second segment. A blank
    ``raw`` yields ``None``; a range with a blank start is malformed.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None

    segments = text.split(RANGE_DELIMITER)
    start = parse_date(segments[0])
    if start is None:
        raise DateFormatError(text, "range has no start date")
    end = parse_date(segments[-1]) if len(segments) > 1 else None
    return start, end


def to_iso8601(value: datetime | None) -> str | None:
    """Format ``value`` as ``YYYY-MM-DDTHH:MM:SSZ``; ``None`` passes through.

    The year is always zero-padded to four digits, which ``strftime('%Y')``
    does not guarantee for years below 1000.
    """
    if value is None:
        return None
    value = _to_utc(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


__all__ = ["RANGE_DELIMITER", "parse_date", "parse_range", "to_iso8601"]
