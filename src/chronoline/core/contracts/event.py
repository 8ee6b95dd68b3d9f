"""Output contracts: a single timeline event and the serialized payload.

Field names follow the Simile timeline widget (``textColor``,
``durationEvent``, ``dateTimeFormat``). Python attributes stay snake_case and
map to the widget names through aliases; always dump with ``by_alias=True``.

Fields that are ``None`` are omitted when serialized. In particular an event
without an end date carries no ``end`` key at all, never ``"end": null``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ISO8601_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$"

IsoTimestamp = Annotated[
    str,
    Field(pattern=ISO8601_PATTERN, description="UTC timestamp, YYYY-MM-DDTHH:MM:SSZ"),
]


class TimelineEvent(BaseModel):
    """One event on the timeline.

    Unknown fields supplied by raw records (``icon``, ``image``...) are kept
    as extras and serialized unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    start: IsoTimestamp
    end: IsoTimestamp | None = Field(default=None)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    link: str | None = Field(default=None)
    color: str
    text_color: str = Field(alias="textColor")
    duration_event: bool | None = Field(
        default=None,
        alias="durationEvent",
        description="True when no end date was determined for the event.",
    )

    def to_widget(self) -> dict[str, Any]:
        """Return the JSON-ready mapping in widget casing."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TimelinePayload(BaseModel):
    """Top-level document consumed by the timeline widget."""

    model_config = ConfigDict(populate_by_name=True)

    date_time_format: Literal["iso8601"] = Field(default="iso8601", alias="dateTimeFormat")
    events: list[TimelineEvent] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


__all__ = ["ISO8601_PATTERN", "IsoTimestamp", "TimelineEvent", "TimelinePayload"]
