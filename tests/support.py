"""Shared fakes for the ``config_finder`` test suite.

The accumulator depends on two collaborators (platform directories and the
working directory). These fakes make both deterministic and count how often
they are consulted so idempotency can be asserted directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FakePlatformDirs:
    """Scriptable :class:`config_finder.application.ports.PlatformDirs`."""

    platform: str = "linux"
    roaming: Path | None = None
    xdg: Path | None = None
    home: Path | None = None
    calls: list[str] = field(default_factory=list)

    def roaming_app_data(self) -> Path | None:
        self.calls.append("roaming")
        return self.roaming

    def xdg_config_home(self) -> Path | None:
        self.calls.append("xdg")
        return self.xdg

    def home_dir(self) -> Path | None:
        self.calls.append("home")
        return self.home


class FakeCwd:
    """Working directory provider that can move or fail between calls."""

    def __init__(self, *results: Path | OSError) -> None:
        self._results = list(results)
        self.calls = 0

    def __call__(self) -> Path:
        result = self._results[min(self.calls, len(self._results) - 1)]
        self.calls += 1
        if isinstance(result, OSError):
            raise result
        return result
