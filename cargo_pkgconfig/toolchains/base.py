# SPDX-License-Identifier: MIT
"""Linker flavor protocol and base implementation.

A flavor is the command-line dialect of the linker and archiver that will
consume a library (e.g. GCC-style "-L/-l" vs MSVC-style "/LIBPATH:").
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class DumpType(Enum):
    """Tool to dump flags for."""

    #: Flags for ar / lib.exe.
    ARCHIVER = "ar"
    #: Flags for ld / link.exe.
    LINKER = "libs"


class BaseFlavor(ABC):
    """Abstract base class for linker flavors."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """Flavor name (e.g., 'gcc', 'msvc')."""
        return self._name

    @abstractmethod
    def format_flags(
        self,
        dump_type: DumpType,
        name: str,
        directory: str,
        filename: str,
    ) -> str:
        """Format the flags for a library.

        Args:
            dump_type: Whether archiver or linker flags are wanted.
            name: The requested library name.
            directory: Directory containing the library, forward-slash form.
            filename: Base name of the library file.

        Returns:
            The flags as a single line.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
