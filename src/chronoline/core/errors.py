"""Exception taxonomy for timeline construction.

All errors surface synchronously from `TimelineSource(...)`; there is no
partial-result mode. The CLI maps them to exit code 1 and the API to HTTP 400.
"""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for every error raised while building a timeline."""


class ConfigurationError(TimelineError):
    """Options are inconsistent: wrong number of input modes, or property
    options combined with raw events."""


class IncompleteRecordError(TimelineError):
    """A raw event record is not a mapping or lacks ``start``/``title``."""


class DateFormatError(TimelineError):
    """A date token is neither a bare year nor a recognizable calendar date."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        self.token = token
        message = f"Unrecognized date {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "DateFormatError",
    "IncompleteRecordError",
    "TimelineError",
]
