"""Platform directory resolution backed by the process environment.

Purpose
-------
Implement :class:`config_finder.application.ports.PlatformDirs` by reading
``XDG_CONFIG_HOME``, ``HOME`` and ``APPDATA``. The adapter is the only
component that knows where each platform family keeps per-user configuration.

Contents
--------
* :class:`DefaultPlatformDirs` – environment-backed resolver.
* :func:`absolute_or_none` – validation applied to every resolved value.

System Role
-----------
Feeds :meth:`config_finder.core.ConfigDirs.add_platform_config_dir`. It
accepts an ``env`` mapping and a ``platform`` string so tests can exercise
every branch without touching the real environment.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Mapping


class DefaultPlatformDirs:
    """Resolve configuration homes from environment variables.

    |Platform | Source                                |
    | ------- | ------------------------------------- |
    | Unix    | ``$XDG_CONFIG_HOME`` or ``$HOME``     |
    | Windows | ``%APPDATA%`` (roaming app data)      |

    macOS is treated as Unix: for command line tools, configuration hidden in
    ``~/Library/Application Support`` is not practical.
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        """Store the environment overrides and platform identifier.

        Parameters
        ----------
        env:
            Optional mapping that overrides ``os.environ`` values. Keys not
            present here are read from ``os.environ`` on every lookup, so a
            retried resolution sees environment changes.
        platform:
            Platform identifier (``sys.platform`` clone). Defaults to the
            current interpreter platform.
        """

        self._overrides = dict(env or {})
        self.platform = platform or sys.platform

    def _lookup(self, key: str) -> str | None:
        """Return the override for *key*, else its current ``os.environ`` value."""

        return self._overrides.get(key, os.environ.get(key))

    @property
    def is_windows(self) -> bool:
        """Return ``True`` when running on Windows."""

        return self.platform.startswith("win")

    def roaming_app_data(self) -> Path | None:
        """Return ``%APPDATA%`` on Windows, ``None`` elsewhere or when unset."""

        if not self.is_windows:
            return None
        return absolute_or_none(self._lookup("APPDATA"), windows=True)

    def xdg_config_home(self) -> Path | None:
        """Return ``$XDG_CONFIG_HOME`` when it holds an absolute path.

        Examples
        --------
        >>> DefaultPlatformDirs(env={"XDG_CONFIG_HOME": "relative"}, platform="linux").xdg_config_home() is None
        True
        """

        if self.is_windows:
            return None
        return absolute_or_none(self._lookup("XDG_CONFIG_HOME"))

    def home_dir(self) -> Path | None:
        """Return the home directory from ``$HOME`` or the password database."""

        home = self._lookup("HOME")
        if home:
            return absolute_or_none(home, windows=self.is_windows)
        try:
            return absolute_or_none(str(Path.home()), windows=self.is_windows)
        except (RuntimeError, KeyError):
            return None


def absolute_or_none(value: str | None, *, windows: bool = False) -> Path | None:
    """Return ``value`` as a :class:`Path` when it is a syntactically absolute path.

    Empty and relative values yield ``None`` so callers fall through to their
    next resolution strategy.

    Examples
    --------
    >>> absolute_or_none("/home/alice").as_posix()
    '/home/alice'
    >>> absolute_or_none("home/alice") is None
    True
    >>> absolute_or_none("") is None
    True
    """

    flavour = PureWindowsPath if windows else PurePosixPath
    if not value or not flavour(value).is_absolute():
        return None
    return Path(value)
