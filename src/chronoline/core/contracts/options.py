"""TimelineOptions: the explicit configuration struct for a timeline source.

Exactly one input mode must be chosen:

- ``raw_events``    : literal event mappings (each needs ``start`` and ``title``);
- ``sources``       : source objects queried through property names;
- ``source_finder`` : an opaque query descriptor, resolved into sources by an
  injected finder callable.

The property options (``start_property`` ... ``link_property``) only make sense
for the two source modes and are rejected together with ``raw_events``.
Defaults are filled in once, after validation; use :func:`parse_options` to get
library errors as :class:`~chronoline.core.errors.ConfigurationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..errors import ConfigurationError
from ..settings import load_settings
from ..vocabulary import DC_DATE, DC_TITLE, DCTERMS_ABSTRACT

InputMode = Literal["raw_events", "sources", "source_finder"]

PropertyCandidates = str | list[str]

_PROPERTY_OPTIONS = (
    "start_property",
    "end_property",
    "title_property",
    "description_property",
    "link_property",
)


class TimelineOptions(BaseModel):
    """Every recognized option with its default."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    raw_events: list[Any] | None = Field(default=None, description="Literal event records")
    sources: list[Any] | None = Field(default=None, description="Queryable source objects")
    source_finder: Any | None = Field(default=None, description="Opaque finder query")

    start_property: PropertyCandidates | None = Field(
        default=None, description="Start date predicate, or candidates tried in order"
    )
    end_property: PropertyCandidates | None = Field(
        default=None, description="End date predicate; overrides '/' ranges"
    )
    title_property: str | None = None
    description_property: str | None = None
    link_property: str | None = Field(
        default=None, description="Link predicate; the source URI is used when unset"
    )

    color: str | None = None
    text_color: str | None = None
    start_year: int | None = Field(default=None, description="Overrides the computed first year")
    final_year: int | None = Field(default=None, description="Overrides the computed last year")

    @field_validator("sources", mode="before")
    @classmethod
    def _wrap_single_source(cls, v: Any) -> Any:
        """Accept a lone source object in place of a list."""
        if v is None or isinstance(v, list | tuple):
            return v
        return [v]

    @field_validator("start_property", "end_property")
    @classmethod
    def _non_empty_candidates(cls, v: PropertyCandidates | None) -> PropertyCandidates | None:
        if isinstance(v, list) and not v:
            raise ValueError("candidate property list must not be empty")
        return v

    @model_validator(mode="after")
    def _check_modes_and_fill_defaults(self) -> TimelineOptions:
        given = [
            name
            for name in ("raw_events", "sources", "source_finder")
            if getattr(self, name) is not None
        ]
        if len(given) != 1:
            raise ValueError("Must give exactly one of raw_events, sources or source_finder")

        if self.raw_events is not None:
            illegal = [name for name in _PROPERTY_OPTIONS if getattr(self, name) is not None]
            if illegal:
                raise ValueError(
                    "Property options are not allowed with raw_events: " + ", ".join(illegal)
                )
        else:
            if self.start_property is None:
                self.start_property = DC_DATE
            if self.title_property is None:
                self.title_property = DC_TITLE
            if self.description_property is None:
                self.description_property = DCTERMS_ABSTRACT

        conf = load_settings()
        if self.color is None:
            self.color = conf.default_color
        if self.text_color is None:
            self.text_color = conf.default_text_color
        return self

    @property
    def mode(self) -> InputMode:
        """Name of the input mode chosen for this timeline."""
        if self.raw_events is not None:
            return "raw_events"
        if self.sources is not None:
            return "sources"
        return "source_finder"


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def parse_options(
    options: TimelineOptions | Mapping[str, Any] | None = None, **kwargs: Any
) -> TimelineOptions:
    """Build a validated :class:`TimelineOptions`.

    ``options`` may already be a model (returned as is) or a mapping; keyword
    arguments are merged on top of a mapping.
    """
    if isinstance(options, TimelineOptions):
        if kwargs:
            raise ConfigurationError("Pass either a TimelineOptions instance or keyword options")
        return options

    data: dict[str, Any] = dict(options or {})
    data.update(kwargs)

    try:
        return TimelineOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


__all__ = ["InputMode", "PropertyCandidates", "TimelineOptions", "parse_options"]
