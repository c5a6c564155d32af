# SPDX-License-Identifier: MIT
"""Host platform detection.

The linker flavor is inferred from the host operating system. This is a
stand-in for inspecting the target triple cargo builds for, and
default_flavor_name() is the only place that decision is made.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Platform:
    """Information about the host platform.

    Attributes:
        system: OS name as reported by sys.platform ("linux", "darwin", "win32").
    """

    system: str

    @property
    def is_windows(self) -> bool:
        return self.system == "win32" or self.system.startswith("cygwin")


def get_platform() -> Platform:
    """Detect the host platform."""
    return Platform(system=sys.platform)


def default_flavor_name(platform: Platform | None = None) -> str:
    """Get the linker flavor to use when none is given explicitly.

    Args:
        platform: Platform to decide for (default: the host).

    Returns:
        "msvc" on Windows, "gcc" everywhere else.
    """
    # HACK: the host OS decides. Really should use the target's triple.
    if platform is None:
        platform = get_platform()
    return "msvc" if platform.is_windows else "gcc"
