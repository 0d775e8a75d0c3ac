"""Lazy, double-ended sequence of configuration candidates.

Purpose
-------
Join one :class:`~config_finder.domain.with_local.WithLocal` name pair to each
directory accumulated by :class:`config_finder.core.ConfigDirs`, one directory
per step, without touching the filesystem.

Contents
--------
* :class:`ConfigCandidates` – iterator returned by ``ConfigDirs.search``.

System Role
-----------
The sequence walks an immutable tuple copied when ``search`` is called, so
later changes to the accumulator never leak into an iteration in progress.
Two cursors (front and back) converge on each other; once they meet the
sequence stays empty.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence

from ..domain.with_local import WithLocal


class ConfigCandidates:
    """Iterator yielding possible config files or directories.

    Forward steps (:func:`next`) consume from the front, :meth:`next_back`
    consumes from the back, and both share the same remaining window.

    Examples
    --------
    >>> from pathlib import Path
    >>> dirs = (Path("start/.config"), Path("second/.config"), Path("end/.config"))
    >>> cands = ConfigCandidates(dirs, WithLocal.new("my-app/main", "kdl"))
    >>> len(cands)
    3
    >>> next(cands).path.as_posix()
    'start/.config/my-app/main.kdl'
    >>> cands.next_back().local_path.as_posix()
    'end/.config/my-app/main.local.kdl'
    >>> [c.path.as_posix() for c in cands]
    ['second/.config/my-app/main.kdl']
    >>> cands.next_back() is None
    True
    """

    __slots__ = ("_conf", "_paths", "_front", "_back")

    def __init__(self, paths: Sequence[Path], conf: WithLocal) -> None:
        self._conf = conf
        self._paths = tuple(paths)
        self._front = 0
        self._back = len(self._paths)

    @property
    def conf(self) -> WithLocal:
        """Name pair joined to every directory."""

        return self._conf

    def __iter__(self) -> Iterator[WithLocal]:
        return self

    def __next__(self) -> WithLocal:
        if self._front >= self._back:
            raise StopIteration
        directory = self._paths[self._front]
        self._front += 1
        return self._conf.joined_to(directory)

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return len(self)

    def __reversed__(self) -> Iterator[WithLocal]:
        while True:
            item = self.next_back()
            if item is None:
                return
            yield item

    def next_back(self) -> WithLocal | None:
        """Consume the back-most remaining directory, or return ``None`` when exhausted."""

        if self._front >= self._back:
            return None
        self._back -= 1
        return self._conf.joined_to(self._paths[self._back])

    def nth(self, n: int) -> WithLocal | None:
        """Skip ``n`` candidates from the front and return the next one.

        Skipping past the back cursor exhausts the sequence and returns
        ``None``; ``nth(0)`` is equivalent to a single forward step.
        """

        if n < 0:
            raise ValueError(f"cannot skip a negative number of candidates: {n}")
        self._front = min(self._front + n, self._back)
        return next(self, None)

    def last(self) -> WithLocal | None:
        """Consume the sequence and return its back-most remaining item."""

        item = self.next_back()
        self._front = self._back
        return item

    def __repr__(self) -> str:
        remaining = [str(path) for path in self._paths[self._front : self._back]]
        return f"ConfigCandidates(conf={self._conf!r}, remaining={remaining!r})"
