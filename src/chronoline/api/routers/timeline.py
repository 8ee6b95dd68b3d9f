"""
API route for building timelines.

Endpoints
---------
- `POST /timeline`: Build widget data from a :class:`TimelineDocument`.

Building is synchronous and cheap (one pass over the input), so the result is
returned directly. Library errors propagate to the handler registered in
:func:`chronoline.api.app.create_app`, which answers 400.
"""

from __future__ import annotations

import json

from fastapi import APIRouter

from chronoline.api.schemas import TimelineResponse
from chronoline.core.settings import get_logger
from chronoline.documents import TimelineDocument

router = APIRouter(tags=["Timeline"])
logger = get_logger("chronoline.api")


@router.post(
    "/timeline",
    response_model=TimelineResponse,
    response_model_by_alias=True,
    summary="Build timeline widget data",
)
async def build_timeline(document: TimelineDocument) -> TimelineResponse:
    """Normalize the posted events or sources into widget data."""
    timeline = document.build()
    logger.info(
        "Built timeline: %d events, %d-%d",
        len(timeline),
        timeline.first_year(),
        timeline.last_year(),
    )
    return TimelineResponse(
        first_year=timeline.first_year(),
        last_year=timeline.last_year(),
        empty=timeline.is_empty(),
        timeline=json.loads(timeline.serialize()),
    )
