"""Build canonical :class:`TimelineEvent` objects from input records.

Two entry points, one per input mode:

- :meth:`EventBuilder.from_record` for literal event mappings. Missing
  ``start``/``title`` is fatal (:class:`IncompleteRecordError`).
- :meth:`EventBuilder.from_source` for source objects. A source without a
  usable start value yields ``None`` and is skipped by the caller. A dated
  source that still ends up without a title (blank URI, no title or label)
  raises :class:`IncompleteRecordError`.

The asymmetry is intentional: raw records are authored for the timeline and
must be complete, while sources are arbitrary objects of which only some carry
a date.

Every date the builder sees, start and end, widens the shared :class:`YearSpan`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from .contracts.event import TimelineEvent
from .contracts.options import TimelineOptions
from .dates import parse_range, to_iso8601
from .errors import IncompleteRecordError
from .properties import (
    SourceObject,
    resolve_description,
    resolve_link,
    resolve_title,
    select_predicate,
    values,
)

# Snake-case spellings accepted on raw records, mapped to widget casing.
_RECORD_KEY_ALIASES = {
    "text_color": "textColor",
    "duration_event": "durationEvent",
}


@dataclass(slots=True)
class YearSpan:
    """Running minimum/maximum year over every observed date."""

    first: int | None = None
    last: int | None = None

    def observe(self, *dates: datetime | None) -> None:
        for value in dates:
            if value is None:
                continue
            year = value.year
            if self.first is None or year < self.first:
                self.first = year
            if self.last is None or year > self.last:
                self.last = year


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _dates_for(stamp: str, end_stamp: str | None) -> tuple[datetime, datetime | None]:
    """Parse ``stamp`` as a date or range; a non-blank ``end_stamp`` wins for the end."""
    parsed = parse_range(stamp)
    if parsed is None:
        raise IncompleteRecordError(f"Blank timestamp {stamp!r}")
    start, end = parsed
    if not _blank(end_stamp):
        override = parse_range(end_stamp)
        end = override[0] if override else None
    return start, end


class EventBuilder:
    """Turns records or sources into events under a fixed set of options."""

    __slots__ = ("_options", "span")

    def __init__(self, options: TimelineOptions) -> None:
        self._options = options
        self.span = YearSpan()

    def from_record(self, record: Any) -> TimelineEvent:
        """Build an event from a literal mapping.

        Extra keys pass through to the event unchanged. The input mapping is
        copied, never modified.
        """
        if not isinstance(record, Mapping):
            raise IncompleteRecordError(f"Illegal element in data {record!r}")

        item: dict[str, Any] = {}
        for key, value in record.items():
            item[_RECORD_KEY_ALIASES.get(str(key), str(key))] = value

        if _blank(item.get("start")) or _blank(item.get("title")):
            raise IncompleteRecordError(f"Incomplete data element {dict(record)!r}")
        item["title"] = str(item["title"])

        start, end = _dates_for(str(item["start"]), _str_or_none(item.get("end")))
        item["start"] = to_iso8601(start)
        item["end"] = to_iso8601(end)
        self.span.observe(start, end)

        if item["end"] is None and item.get("durationEvent") is None:
            item["durationEvent"] = True
        if _blank(item.get("description")):
            item["description"] = item["title"]
        if _blank(item.get("color")):
            item["color"] = self._options.color
        if _blank(item.get("textColor")):
            item["textColor"] = self._options.text_color

        try:
            return TimelineEvent.model_validate(item)
        except ValidationError as exc:
            raise IncompleteRecordError(f"Invalid data element {dict(record)!r}: {exc}") from exc

    def from_source(self, source: SourceObject) -> TimelineEvent | None:
        """Build an event from a source object, or ``None`` if it has no start."""
        opts = self._options
        start_predicate = select_predicate(opts.start_property, source)
        end_predicate = select_predicate(opts.end_property, source)

        start_values = values(source, start_predicate)
        if not start_values or _blank(start_values[0]):
            return None
        end_values = values(source, end_predicate)

        start, end = _dates_for(start_values[0], end_values[0] if end_values else None)
        self.span.observe(start, end)

        title = resolve_title(source, opts.title_property)
        try:
            return TimelineEvent(
                start=to_iso8601(start),
                end=to_iso8601(end),
                title=title,
                description=resolve_description(source, opts.description_property, title),
                link=resolve_link(source, opts.link_property),
                color=opts.color,
                text_color=opts.text_color,
                duration_event=True if end is None else None,
            )
        except ValidationError as exc:
            raise IncompleteRecordError(f"Invalid source {source.uri!r}: {exc}") from exc


def _str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


__all__ = ["EventBuilder", "YearSpan"]
