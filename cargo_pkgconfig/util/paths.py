# SPDX-License-Identifier: MIT
"""Path helpers for printing library locations.

Output paths always use forward slashes so they work with Linux-based
tooling, regardless of the convention cargo used to report them.

A string path is read as a Windows path only when it looks like one: it
has a drive letter, starts with a UNC prefix, or uses "\\" and never "/".
Anything else is a POSIX path, where "\\" is an ordinary file name
character.
"""

from __future__ import annotations

import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath

_WINDOWS_PREFIX = re.compile(r"^(?:[A-Za-z]:|\\\\)")


def is_windows_path(path: str) -> bool:
    """Check whether a path string is Windows-shaped."""
    if _WINDOWS_PREFIX.match(path):
        return True
    return "\\" in path and "/" not in path


def _pure_path(path: str | PurePath) -> PurePath:
    if isinstance(path, PurePath):
        return path
    if is_windows_path(path):
        return PureWindowsPath(path)
    return PurePosixPath(path)


def to_slash(path: str | PurePath) -> str:
    """Convert a path to forward-slash form.

    Examples:
        >>> to_slash("C:\\\\target\\\\debug")
        'C:/target/debug'
        >>> to_slash("/out/deps")
        '/out/deps'
    """
    return _pure_path(path).as_posix()


def split_library_path(path: str | PurePath) -> tuple[str, str]:
    """Split a library file path into its directory and file name.

    Returns:
        Tuple of (directory in forward-slash form, base file name).
    """
    pure = _pure_path(path)
    return to_slash(pure.parent), pure.name


def extension(path: str | PurePath) -> str:
    """Get a file's extension without the leading dot ("" if none)."""
    return _pure_path(path).suffix[1:]
