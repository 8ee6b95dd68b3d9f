"""Pydantic contracts: timeline options in, timeline events and payload out."""

from __future__ import annotations

from .event import TimelineEvent, TimelinePayload
from .options import TimelineOptions, parse_options

__all__ = ["TimelineEvent", "TimelineOptions", "TimelinePayload", "parse_options"]
