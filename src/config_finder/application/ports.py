"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the accumulator depends on so that it never
reads the operating environment directly. Tests swap in fakes; production
code uses :class:`config_finder.adapters.platform.default.DefaultPlatformDirs`.

Contents
--------
* :class:`PlatformDirs` – resolves the user configuration home.
* :data:`CurrentDirProvider` – zero-argument callable returning the working
  directory.

System Role
-----------
These protocols enforce Dependency Inversion: :class:`config_finder.core.ConfigDirs`
requests behaviour via abstraction and treats every returned value as
untrusted input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

CurrentDirProvider = Callable[[], Path]


@runtime_checkable
class PlatformDirs(Protocol):
    """Resolve platform-specific user configuration locations.

    Why
    ----
    Keep environment variable reads and home directory lookups behind one seam
    so the accumulator stays deterministic under test.

    Methods
    -------
    :meth:`roaming_app_data`
        The roaming application data folder (Windows family only).
    :meth:`xdg_config_home`
        The ``XDG_CONFIG_HOME`` override, when set to an absolute path.
    :meth:`home_dir`
        The user's home directory.

    Every method returns ``None`` on any resolution failure and never raises.
    """

    platform: str

    def roaming_app_data(self) -> Path | None:
        """Return the roaming application data folder or ``None``."""

    def xdg_config_home(self) -> Path | None:
        """Return the absolute configuration home override or ``None``."""

    def home_dir(self) -> Path | None:
        """Return the absolute home directory or ``None``."""
