"""TimelineSource: the event collection behind one timeline widget.

A source is filled from exactly one input mode (see
:class:`~chronoline.core.contracts.options.TimelineOptions`):

>>> tl = TimelineSource(raw_events=[{"start": "1900/1950", "title": "A"}])
>>> tl.first_year(), tl.last_year()
(1900, 1950)
>>> tl.serialize()  # doctest: +SKIP
'{"dateTimeFormat":"iso8601","events":[{"start":"1900-01-01T00:00:00Z", ...}]}'

Construction does all the work and is all-or-nothing: the first malformed raw
record, unparseable date or configuration problem raises and no instance is
returned. Sources whose start property is blank are skipped silently. After
construction the instance is read-only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from .builder import EventBuilder
from .contracts.event import TimelineEvent, TimelinePayload
from .contracts.options import TimelineOptions, parse_options
from .errors import ConfigurationError
from .properties import SourceObject
from .settings import get_logger, load_settings

Finder = Callable[[Any], Iterable[SourceObject]]

logger = get_logger("chronoline.source")


class TimelineSource:
    """Ordered timeline events plus the year span they cover.

    Parameters
    ----------
    options:
        A :class:`TimelineOptions` instance or a mapping of option names.
        Keyword arguments are accepted instead of (or on top of) a mapping.
    finder:
        Callable resolving ``source_finder`` into source objects. Required
        only for the ``source_finder`` mode.
    """

    __slots__ = ("_events", "_first_year", "_last_year", "_options")

    def __init__(
        self,
        options: TimelineOptions | Mapping[str, Any] | None = None,
        *,
        finder: Finder | None = None,
        **kwargs: Any,
    ) -> None:
        self._options = parse_options(options, **kwargs)
        builder = EventBuilder(self._options)
        events: list[TimelineEvent] = []

        opts = self._options
        if opts.mode == "raw_events":
            for record in opts.raw_events or []:
                events.append(builder.from_record(record))
        else:
            if opts.mode == "sources":
                sources: Sequence[Any] = opts.sources or []
            else:
                if finder is None:
                    raise ConfigurationError("source_finder requires a finder callable")
                sources = list(finder(opts.source_finder))
                logger.debug("Finder returned %d sources", len(sources))
            for src in sources:
                event = builder.from_source(src)
                if event is None:
                    logger.debug("Skipping source without start date: %s", getattr(src, "uri", src))
                    continue
                events.append(event)

        self._events: tuple[TimelineEvent, ...] = tuple(events)
        self._first_year = opts.start_year if opts.start_year is not None else builder.span.first
        self._last_year = opts.final_year if opts.final_year is not None else builder.span.last
        logger.debug(
            "Built %d events from %s (years %s-%s)",
            len(self._events),
            opts.mode,
            self._first_year,
            self._last_year,
        )

    # ------------------------------ Read API --------------------------------

    @property
    def options(self) -> TimelineOptions:
        return self._options

    @property
    def events(self) -> tuple[TimelineEvent, ...]:
        """Events in input order."""
        return self._events

    def first_year(self) -> int:
        """First year of the timeline; settings default (1900) if nothing was seen."""
        if self._first_year is None:
            return load_settings().default_first_year
        return self._first_year

    def last_year(self) -> int:
        """Last year of the timeline; settings default (2000) if nothing was seen."""
        if self._last_year is None:
            return load_settings().default_last_year
        return self._last_year

    def is_empty(self) -> bool:
        return not self._events

    def to_payload(self) -> TimelinePayload:
        return TimelinePayload(events=list(self._events))

    def serialize(self) -> str:
        """JSON document for the timeline widget."""
        return self.to_payload().to_json()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TimelineEvent]:
        return iter(self._events)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return (
            f"TimelineSource(mode={self._options.mode!r}, events={len(self._events)}, "
            f"years={self.first_year()}-{self.last_year()})"
        )


__all__ = ["Finder", "TimelineSource"]
