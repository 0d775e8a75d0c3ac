"""Public package surface for ``config_finder``.

Exports the directory accumulator, the candidate iterator, the name pair value
object, the error taxonomy, and the logging hooks so that
``from config_finder import ConfigDirs`` is all a consumer needs.
"""

from __future__ import annotations

from .adapters.platform.default import DefaultPlatformDirs
from .application.candidates import ConfigCandidates
from .application.ports import PlatformDirs
from .core import CONFIG_SEGMENT, ROOT_ETC, ConfigDirs
from .domain.errors import ConfigFinderError, CurrentDirError, UnsupportedPlatformError
from .domain.with_local import LOCAL_MARKER, WithLocal
from .observability import bind_trace_id, get_logger

__all__ = [
    "CONFIG_SEGMENT",
    "ConfigCandidates",
    "ConfigDirs",
    "ConfigFinderError",
    "CurrentDirError",
    "DefaultPlatformDirs",
    "LOCAL_MARKER",
    "PlatformDirs",
    "ROOT_ETC",
    "UnsupportedPlatformError",
    "WithLocal",
    "bind_trace_id",
    "get_logger",
]
