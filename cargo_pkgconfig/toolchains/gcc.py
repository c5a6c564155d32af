# SPDX-License-Identifier: MIT
"""GCC-style linker flavor (ld/ar and compatible drivers)."""

from __future__ import annotations

from cargo_pkgconfig.toolchains.base import BaseFlavor, DumpType


class GccFlavor(BaseFlavor):
    """GNU Compiler Collection style flags.

    The linker gets a search path and a library name; the archiver gets a
    bare path built from the directory and the requested name.
    """

    def __init__(self) -> None:
        super().__init__("gcc")

    def format_flags(
        self,
        dump_type: DumpType,
        name: str,
        directory: str,
        filename: str,
    ) -> str:
        if dump_type is DumpType.ARCHIVER:
            return f"{directory}/{name}"
        return f"-L{directory} -l{name}"
