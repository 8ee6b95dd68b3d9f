"""Core package initializer for chronoline.

Downstream code imports from the submodules directly, e.g.:
    from chronoline.core.source import TimelineSource
    from chronoline.core.errors import ConfigurationError
"""

from __future__ import annotations

__all__ = ["__doc__"]
