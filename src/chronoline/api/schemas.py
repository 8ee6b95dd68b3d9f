"""Response models for the timeline API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TimelineResponse(BaseModel):
    """Widget payload plus the year span the page needs to size its bands."""

    model_config = ConfigDict(populate_by_name=True)

    first_year: int = Field(alias="firstYear")
    last_year: int = Field(alias="lastYear")
    empty: bool
    timeline: dict[str, Any] = Field(description="Widget payload: dateTimeFormat + events")


class HealthResponse(BaseModel):
    status: str = "ok"
    environment: str
    version: str


__all__ = ["HealthResponse", "TimelineResponse"]
