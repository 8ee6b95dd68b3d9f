"""chronoline: normalize dated records into Simile-style timeline payloads.

The public entry point is :class:`chronoline.core.source.TimelineSource`; the
CLI (``chronoline``) and the FastAPI app are thin wrappers around it.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
