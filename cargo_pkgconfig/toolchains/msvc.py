# SPDX-License-Identifier: MIT
"""MSVC linker flavor (link.exe / lib.exe)."""

from __future__ import annotations

from cargo_pkgconfig.toolchains.base import BaseFlavor, DumpType


class MsvcFlavor(BaseFlavor):
    """Microsoft Visual Studio style flags.

    link.exe and lib.exe take the same command line format, so the dump
    type does not change the output.
    """

    # Windows system libraries that Rust libraries link against.
    ADDITIONAL_LIBS: tuple[str, ...] = (
        "Bcrypt.lib",
        "Userenv.lib",
        "Ole32.lib",
        "OleAut32.lib",
    )

    def __init__(self) -> None:
        super().__init__("msvc")

    def format_flags(
        self,
        dump_type: DumpType,
        name: str,
        directory: str,
        filename: str,
    ) -> str:
        libs = " ".join(self.ADDITIONAL_LIBS)
        return f"/LIBPATH:{directory} {filename} {libs}"
