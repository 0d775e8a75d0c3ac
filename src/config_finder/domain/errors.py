"""Domain-level exception hierarchy.

Purpose
-------
Expose the small error taxonomy raised while accumulating configuration
directories. Only failures the caller can act on are modelled: a lookup that
simply found nothing (no platform directory, malformed override) is reported
as "no change" rather than an exception.

Contents
--------
* :class:`ConfigFinderError` – umbrella base class for all library errors.
* :class:`CurrentDirError` – the working directory could not be resolved.
* :class:`UnsupportedPlatformError` – an operation has no meaning on the
  active platform.

System Role
-----------
:class:`config_finder.core.ConfigDirs` raises these exceptions; callers catch
:class:`ConfigFinderError` to handle every library failure uniformly.
"""

from __future__ import annotations


class ConfigFinderError(Exception):
    """Base type for all exceptions emitted by ``config_finder``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class CurrentDirError(ConfigFinderError, OSError):
    """Raised when the process working directory cannot be resolved.

    Why
    ----
    The directory may have been removed or become unreadable. The error keeps
    the :class:`OSError` family so ``except OSError`` callers still see it,
    while the original exception stays available as ``__cause__``.
    """


class UnsupportedPlatformError(ConfigFinderError):
    """Signals an operation whose location does not exist on this platform.

    Current Usage
    -------------
    Raised by :meth:`config_finder.core.ConfigDirs.add_root_etc` on Windows.
    """
