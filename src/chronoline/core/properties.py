"""Property resolution on source objects.

A source object answers ``get(name)`` with a sequence of strings, a single
string, or nothing, and exposes a stable ``uri``. Everything here goes through
:func:`values`, which gives one uniform list view, so callers never branch on
the container type. Scalar fields always use the first value.

Fallback chains
---------------
- title:       title property -> ``rdfs:label`` -> name derived from the URI
- description: description property -> the resolved title
- link:        link property (or ``""``) when configured, else the source URI
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable
from urllib.parse import unquote

from .vocabulary import RDFS_LABEL


@runtime_checkable
class SourceObject(Protocol):
    """Anything with queryable named properties and a stable URI."""

    uri: str

    def get(self, name: str) -> Sequence[str] | str | None: ...


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def values(source: SourceObject, name: str | None) -> list[str]:
    """Return the values of ``name`` on ``source`` as a list of strings."""
    if name is None:
        return []
    raw = source.get(name)
    if raw is None:
        return []
    if isinstance(raw, str | bytes) or not isinstance(raw, Sequence):
        raw = [raw]
    return [v.decode() if isinstance(v, bytes) else str(v) for v in raw if v is not None]


def first_value(source: SourceObject, name: str | None) -> str | None:
    """Return the first value of ``name``, or ``None`` when it is blank."""
    found = values(source, name)
    if not found or _is_blank(found[0]):
        return None
    return found[0]


def select_predicate(candidates: str | Sequence[str] | None, source: SourceObject) -> str | None:
    """Pick the predicate to read from ``source``.

    A single name is returned unchanged. For a list, the first name with a
    non-blank value on this source wins; if none has one, the last candidate
    is returned so the caller still has a predicate to query.
    """
    if candidates is None or isinstance(candidates, str):
        return candidates
    selected: str | None = None
    for name in candidates:
        selected = name
        if first_value(source, name) is not None:
            break
    return selected


def name_from_uri(uri: str) -> str:
    """Human-readable name from the last path segment (or fragment) of ``uri``."""
    text = str(uri).rstrip("/#")
    local = text.rsplit("#", 1)[-1] if "#" in text else text.rsplit("/", 1)[-1]
    name = unquote(local).replace("_", " ").strip()
    return name or str(uri)


def resolve_title(source: SourceObject, title_property: str | None) -> str:
    """Title property, then ``rdfs:label``, then the name from the URI."""
    return (
        first_value(source, title_property)
        or first_value(source, RDFS_LABEL)
        or name_from_uri(source.uri)
    )


def resolve_description(
    source: SourceObject, description_property: str | None, title_fallback: str
) -> str:
    """Description property, falling back to the already resolved title."""
    return first_value(source, description_property) or title_fallback


def resolve_link(source: SourceObject, link_property: str | None) -> str:
    """Link from ``link_property`` when configured, else the source URI."""
    if link_property:
        return first_value(source, link_property) or ""
    return str(source.uri)


__all__ = [
    "SourceObject",
    "first_value",
    "name_from_uri",
    "resolve_description",
    "resolve_link",
    "resolve_title",
    "select_predicate",
    "values",
]
