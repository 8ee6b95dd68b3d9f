"""In-memory source objects and a matching finder.

:class:`RecordSource` is the simplest thing satisfying the
:class:`~chronoline.core.properties.SourceObject` protocol: a URI plus a dict
of property values. The CLI and API use it to feed JSON documents through the
``sources`` and ``source_finder`` modes.

JSON shape accepted by :func:`sources_from_records`::

    [{"uri": "http://example.org/works/Faust", "properties": {"http://...#date": ["1808"]}}]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from chronoline.core.errors import ConfigurationError
from chronoline.core.properties import values
from chronoline.core.source import Finder


@dataclass(frozen=True, slots=True)
class RecordSource:
    """A source object backed by a plain property dict."""

    uri: str
    properties: dict[str, list[str] | str] = field(default_factory=dict)

    def get(self, name: str) -> Sequence[str] | str | None:
        return self.properties.get(name)


def sources_from_records(items: Iterable[Any]) -> list[RecordSource]:
    """Build :class:`RecordSource` objects from JSON-like mappings."""
    out: list[RecordSource] = []
    for idx, item in enumerate(items):
        if not isinstance(item, Mapping) or not item.get("uri"):
            raise ConfigurationError(f"Source #{idx} needs a 'uri': {item!r}")
        props = item.get("properties") or {}
        if not isinstance(props, Mapping):
            raise ConfigurationError(f"Source #{idx} 'properties' must be an object")
        out.append(RecordSource(uri=str(item["uri"]), properties=dict(props)))
    return out


def make_finder(pool: Sequence[RecordSource]) -> Finder:
    """Return a finder selecting sources from ``pool``.

    The query descriptor is ``{"where": {property: value, ...}}``; a source
    matches when, for every pair, ``value`` is among its values for that
    property. An empty or missing ``where`` selects the whole pool.
    """

    def find(query: Any) -> list[RecordSource]:
        where: Mapping[str, Any] = {}
        if isinstance(query, Mapping):
            where = query.get("where") or {}
        return [
            src
            for src in pool
            if all(str(expected) in values(src, name) for name, expected in where.items())
        ]

    return find


__all__ = ["RecordSource", "make_finder", "sources_from_records"]
