# SPDX-License-Identifier: MIT
"""
cargo-pkgconfig: pkg-config style linker flags for Rust libraries.

Runs ``cargo build`` with JSON message output, finds the library artifact
with the requested name, and prints the flags needed to link or archive
it from a C/C++ build (GCC or MSVC style).
"""

from __future__ import annotations

__version__ = "0.1.0"

from cargo_pkgconfig.core.collector import (  # noqa: E402
    ArtifactCollector,
    BuildOutcome,
    cargo_command,
)
from cargo_pkgconfig.core.messages import Artifact  # noqa: E402
from cargo_pkgconfig.core.resolver import resolve_flags  # noqa: E402
from cargo_pkgconfig.toolchains import DumpType, get_flavor  # noqa: E402

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Build output
    "Artifact",
    "ArtifactCollector",
    "BuildOutcome",
    "cargo_command",
    # Flags
    "DumpType",
    "get_flavor",
    "resolve_flags",
]
