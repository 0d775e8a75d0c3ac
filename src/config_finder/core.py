"""Composition root for ``config_finder``.

Purpose
-------
Provide :class:`ConfigDirs`, the ordered and duplicate-free list of
directories where an application should look for its configuration, and wire
it to the platform adapter and the candidate iterator.

Contents
--------
* :data:`CONFIG_SEGMENT` – directory appended to explicit and ancestor paths.
* :data:`ROOT_ETC` – system-wide configuration root.
* :class:`ConfigDirs` – accumulates locations and builds candidate sequences.

System Role
-----------
This module never touches the disk. It only reads the environment through
:class:`~config_finder.application.ports.PlatformDirs` and the working
directory provider, each at most once successfully per accumulator.
"""

from __future__ import annotations

import os
from itertools import takewhile
from pathlib import Path
from typing import Final

from .adapters.platform.default import DefaultPlatformDirs
from .application.candidates import ConfigCandidates
from .application.ports import CurrentDirProvider, PlatformDirs
from .domain.errors import CurrentDirError, UnsupportedPlatformError
from .domain.with_local import StrPath, WithLocal, raw_name
from .observability import log_debug, log_error, make_event

CONFIG_SEGMENT: Final[str] = ".config"
ROOT_ETC: Final[Path] = Path("/etc")


class ConfigDirs:
    """Ordered list of directories to search configuration in.

    Why
    ----
    The same directory can be reached several ways (an explicit path and the
    platform directory, say), so entries are deduplicated by value. Lookups of
    volatile state (working directory, environment) are guarded by per-kind
    flags so they are performed at most once successfully, even when a second
    lookup would resolve somewhere else.

    Examples
    --------
    >>> cd = ConfigDirs.empty()
    >>> cands = cd.add_path("start").add_path("end").search("my-app", "main", "kdl")
    >>> [c.path.as_posix() for c in cands]
    ['start/.config/my-app/main.kdl', 'end/.config/my-app/main.kdl']
    """

    def __init__(
        self,
        *,
        platform_dirs: PlatformDirs | None = None,
        cwd: CurrentDirProvider | None = None,
    ) -> None:
        """Create an empty accumulator.

        Parameters
        ----------
        platform_dirs:
            Resolver for the user configuration home. Defaults to
            :class:`DefaultPlatformDirs` reading the live environment.
        cwd:
            Zero-argument callable returning the working directory. Defaults to
            :meth:`pathlib.Path.cwd`.
        """

        self._platform_dirs = platform_dirs or DefaultPlatformDirs()
        self._cwd = cwd or Path.cwd
        self._paths: list[Path] = []
        self._added_cwd = False
        self._added_platform = False
        self._added_root_etc = False

    @classmethod
    def empty(cls) -> "ConfigDirs":
        """Return an accumulator with no paths, backed by the live environment.

        >>> ConfigDirs.empty().paths()
        ()
        """

        return cls()

    @property
    def added_cwd(self) -> bool:
        """Whether the working directory has already been added."""

        return self._added_cwd

    @property
    def added_platform(self) -> bool:
        """Whether the platform configuration directory has already been added."""

        return self._added_platform

    @property
    def added_root_etc(self) -> bool:
        """Whether ``/etc`` has already been added."""

        return self._added_root_etc

    def paths(self) -> tuple[Path, ...]:
        """Return the directories added so far, in insertion order."""

        return tuple(self._paths)

    def copy(self) -> "ConfigDirs":
        """Return an independent accumulator with the same paths and flags."""

        clone = ConfigDirs(platform_dirs=self._platform_dirs, cwd=self._cwd)
        clone._paths = list(self._paths)
        clone._added_cwd = self._added_cwd
        clone._added_platform = self._added_platform
        clone._added_root_etc = self._added_root_etc
        return clone

    def search(self, app: StrPath, base: StrPath, ext: str) -> ConfigCandidates:
        """Return the candidates for ``app/base.ext`` and ``app/base.local.ext``.

        If ``ext`` is empty the candidates are ``app/base`` and
        ``app/base.local``. An empty ``app`` searches for ``base`` directly in
        each directory. The returned sequence works on a snapshot: adding
        paths afterwards does not affect it.
        """

        conf = WithLocal.new(os.path.join(raw_name(app), raw_name(base)), ext)
        log_debug("candidates_created", **make_event("search", str(conf.path), {"count": len(self._paths)}))
        return ConfigCandidates(self._paths, conf)

    def add_path(self, path: StrPath) -> "ConfigDirs":
        """Add ``path`` to the directories to check, if not previously added.

        ``.config`` is appended unless ``path`` already ends with it, so the
        workspace of an application (e.g. the root of a git repository) can be
        passed directly.

        >>> cd = ConfigDirs.empty()
        >>> _ = cd.add_path("my/config/path").add_path("my/config/path/.config")
        >>> [p.as_posix() for p in cd.paths()]
        ['my/config/path/.config']
        """

        return self._add_path(path, append_segment=True, kind="path")

    def add_all_paths_until(self, start: StrPath, container: StrPath) -> "ConfigDirs":
        """Add ``start`` and each ancestor up to and including ``container``.

        Paths are added nearest first. If ``container`` is not a root of
        ``start`` nothing is added. Each path is handled like :meth:`add_path`.

        >>> cd = ConfigDirs.empty().add_all_paths_until("look/my/config", "look/my")
        >>> [p.as_posix() for p in cd.paths()]
        ['look/my/config/.config', 'look/my/.config']
        >>> ConfigDirs.empty().add_all_paths_until("my/config", "other").paths()
        ()
        """

        start_path = Path(start)
        container_path = Path(container)
        ancestors = takewhile(
            lambda candidate: candidate.is_relative_to(container_path),
            [start_path, *start_path.parents],
        )
        for ancestor in ancestors:
            self._add_path(ancestor, append_segment=True, kind="ancestor")
        return self

    def add_platform_config_dir(self) -> "ConfigDirs":
        """Add the platform's user configuration directory.

        |Platform | Value                                 |
        | ------- | ------------------------------------- |
        | Unix    | ``$XDG_CONFIG_HOME`` or ``$HOME/.config`` |
        | Windows | roaming app data (``%APPDATA%``)      |

        ``.config`` is not appended to ``$XDG_CONFIG_HOME`` or to the Windows
        folder. When nothing resolves the accumulator is left unchanged and a
        later call retries the lookup.
        """

        if self._added_platform:
            return self

        dirs = self._platform_dirs
        if dirs.platform.startswith("win"):
            roaming = dirs.roaming_app_data()
            if roaming is not None:
                self._add_path(roaming, append_segment=False, kind="platform")
                self._added_platform = True
            else:
                log_debug("platform_dir_unavailable", **make_event("platform", None, {"source": "roaming"}))
            return self

        xdg = dirs.xdg_config_home()
        if xdg is not None:
            self._add_path(xdg, append_segment=False, kind="platform")
            self._added_platform = True
            return self

        home = dirs.home_dir()
        if home is not None:
            self._add_path(home, append_segment=True, kind="platform")
            self._added_platform = True
        else:
            log_debug("platform_dir_unavailable", **make_event("platform", None, {"source": "home"}))
        return self

    def add_current_dir(self) -> "ConfigDirs":
        """Add the current working directory, like :meth:`add_path`.

        Raises
        ------
        CurrentDirError
            If the working directory cannot be resolved (removed, permission
            denied). The flag stays unset so the call may be retried.
        """

        if self._added_cwd:
            return self
        try:
            current = self._cwd()
        except OSError as exc:
            log_error("current_dir_failed", **make_event("cwd", None, {"error": str(exc)}))
            raise CurrentDirError(f"cannot resolve the current directory: {exc}") from exc
        self._add_path(current, append_segment=True, kind="cwd")
        self._added_cwd = True
        return self

    def add_root_etc(self) -> "ConfigDirs":
        """Add ``/etc`` without appending ``.config``.

        Raises
        ------
        UnsupportedPlatformError
            On Windows, which has no ``/etc`` convention.
        """

        if self._platform_dirs.platform.startswith("win"):
            raise UnsupportedPlatformError(f"/etc is not a configuration root on {self._platform_dirs.platform}")
        if not self._added_root_etc:
            self._add_path(ROOT_ETC, append_segment=False, kind="etc")
            self._added_root_etc = True
        return self

    def _add_path(self, path: StrPath, *, append_segment: bool, kind: str) -> "ConfigDirs":
        """Append ``.config`` when asked and missing, then insert if new."""

        candidate = Path(path)
        if append_segment and candidate.name != CONFIG_SEGMENT:
            candidate = candidate / CONFIG_SEGMENT
        if candidate in self._paths:
            log_debug("config_dir_skipped", **make_event(kind, str(candidate)))
            return self
        self._paths.append(candidate)
        log_debug("config_dir_added", **make_event(kind, str(candidate), {"position": len(self._paths) - 1}))
        return self

    def __repr__(self) -> str:
        paths = [str(path) for path in self._paths]
        return (
            f"ConfigDirs(paths={paths!r}, added_cwd={self._added_cwd}, "
            f"added_platform={self._added_platform}, added_root_etc={self._added_root_etc})"
        )
