# SPDX-License-Identifier: MIT
"""Linker flavors (GCC, MSVC)."""

from __future__ import annotations

from cargo_pkgconfig.configure.platform import default_flavor_name
from cargo_pkgconfig.toolchains.base import BaseFlavor, DumpType
from cargo_pkgconfig.toolchains.gcc import GccFlavor
from cargo_pkgconfig.toolchains.msvc import MsvcFlavor

FLAVORS: dict[str, type[BaseFlavor]] = {
    "gcc": GccFlavor,
    "msvc": MsvcFlavor,
}


def get_flavor(name: str | None = None) -> BaseFlavor:
    """Get a linker flavor by name.

    Args:
        name: "gcc" or "msvc". If None, the flavor is inferred from the
            host platform.

    Raises:
        ValueError: If the name is not a known flavor.
    """
    if name is None:
        name = default_flavor_name()
    try:
        return FLAVORS[name]()
    except KeyError:
        choices = ", ".join(sorted(FLAVORS))
        msg = f"unknown linker flavor {name!r} (expected {choices})"
        raise ValueError(msg) from None


__all__ = [
    "BaseFlavor",
    "DumpType",
    "FLAVORS",
    "GccFlavor",
    "MsvcFlavor",
    "get_flavor",
]
