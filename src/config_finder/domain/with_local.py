"""Value object pairing a configuration name with its local override form.

Purpose
-------
Every candidate location is checked for two names: the shared file
(``app.kdl``) and the machine-specific override layered on top of it
(``app.local.kdl``). :class:`WithLocal` builds and carries both.

Contents
--------
* :data:`LOCAL_MARKER` – the marker inserted before the extension.
* :class:`WithLocal` – immutable ``(path, local_path)`` pair.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Final, Union

LOCAL_MARKER: Final[str] = ".local"

StrPath = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class WithLocal:
    """Normal and local forms of a configuration path.

    The local form has ``.local`` inserted just before the extension. While
    this is mostly intended for files, nothing precludes an application from
    using it for directories.

    Examples
    --------
    >>> wl = WithLocal.new("cli-app", "kdl")
    >>> wl.path.as_posix(), wl.local_path.as_posix()
    ('cli-app.kdl', 'cli-app.local.kdl')
    >>> WithLocal.new("cli-app", "").local_path.as_posix()
    'cli-app.local'
    >>> WithLocal.new("", "kdl").local_path.as_posix()
    '.local.kdl'
    """

    path: Path
    local_path: Path

    @classmethod
    def new(cls, base: StrPath, ext: str) -> "WithLocal":
        """Compute both forms of ``base`` with the extension ``ext``.

        A dot is inserted between ``base`` and ``ext`` only when ``ext`` is
        non-empty. ``base`` is concatenated as raw text so an empty base (``""``
        or ``Path("")``) yields names such as ``.kdl``.
        """

        name = raw_name(base)
        local_name = name + LOCAL_MARKER
        if ext:
            name = f"{name}.{ext}"
            local_name = f"{local_name}.{ext}"
        return cls(path=Path(name), local_path=Path(local_name))

    def into_paths(self) -> tuple[Path, Path]:
        """Return the inner ``(path, local_path)`` pair."""

        return self.path, self.local_path

    def joined_to(self, base_dir: StrPath) -> "WithLocal":
        # Used by ConfigCandidates to place both names under one directory.
        directory = Path(base_dir)
        return WithLocal(path=directory / self.path, local_path=directory / self.local_path)


def raw_name(value: StrPath) -> str:
    """Return ``value`` as text, mapping an empty path-like to ``""``.

    ``Path("")`` renders as ``"."``, which would turn ``.kdl`` into ``..kdl``.

    >>> raw_name(Path("")), raw_name(""), raw_name(Path("app"))
    ('', '', 'app')
    """

    if isinstance(value, PurePath) and not value.parts:
        return ""
    return os.fspath(value)
