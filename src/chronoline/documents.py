"""TimelineDocument: the JSON input format shared by the CLI and the API.

A document selects its input mode by which keys it carries:

.. code-block:: json

    {"events": [{"start": "1900/1950", "title": "A"}], "color": "red"}

    {"sources": [{"uri": "http://example.org/x", "properties": {"date": "1976"}}],
     "properties": {"start": ["date", "created"], "title": "name"},
     "finder": {"where": {"type": "Work"}}}

With ``finder`` present the listed sources become the pool the finder
searches, i.e. the ``source_finder`` mode. Validation of mode combinations is
left to :class:`~chronoline.core.contracts.options.TimelineOptions`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chronoline.core.errors import ConfigurationError
from chronoline.core.source import TimelineSource
from chronoline.sources import make_finder, sources_from_records


class PropertyBindings(BaseModel):
    """Property names used to read source objects."""

    model_config = ConfigDict(extra="forbid")

    start: str | list[str] | None = None
    end: str | list[str] | None = None
    title: str | None = None
    description: str | None = None
    link: str | None = None

    def as_options(self) -> dict[str, Any]:
        return {
            f"{name}_property": value
            for name, value in self.model_dump().items()
            if value is not None
        }


class TimelineDocument(BaseModel):
    """Serializable request for one timeline."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    events: list[Any] | None = Field(default=None, description="Raw event records")
    sources: list[dict[str, Any]] | None = Field(
        default=None, description="Source records: {'uri': ..., 'properties': {...}}"
    )
    finder: dict[str, Any] | None = Field(
        default=None, description="Finder query run against `sources`"
    )
    properties: PropertyBindings | None = None
    color: str | None = None
    text_color: str | None = Field(default=None, alias="textColor")
    start_year: int | None = Field(default=None, alias="startYear")
    final_year: int | None = Field(default=None, alias="finalYear")

    def build(self, **overrides: Any) -> TimelineSource:
        """Construct the :class:`TimelineSource`; ``overrides`` replace scalar options."""
        opts: dict[str, Any] = {
            "color": self.color,
            "text_color": self.text_color,
            "start_year": self.start_year,
            "final_year": self.final_year,
        }
        opts.update({k: v for k, v in overrides.items() if v is not None})
        if self.properties is not None:
            opts.update(self.properties.as_options())

        finder = None
        if self.events is not None:
            opts["raw_events"] = self.events
        if self.sources is not None:
            records = sources_from_records(self.sources)
            if self.finder is not None:
                finder = make_finder(records)
                opts["source_finder"] = self.finder
            else:
                opts["sources"] = records
        elif self.finder is not None:
            raise ConfigurationError("'finder' needs a 'sources' pool to search")

        return TimelineSource({k: v for k, v in opts.items() if v is not None}, finder=finder)


def load_document(path: Path) -> TimelineDocument:
    """Read and validate a JSON timeline document from ``path``."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path} is not valid JSON: {exc}") from exc
    try:
        return TimelineDocument.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"{path}: {exc.error_count()} invalid field(s)\n{exc}") from exc


__all__ = ["PropertyBindings", "TimelineDocument", "load_document"]
