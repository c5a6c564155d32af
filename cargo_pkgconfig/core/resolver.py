# SPDX-License-Identifier: MIT
"""Flag resolution for collected cargo artifacts.

The resolver is responsible for:
1. Finding the artifact for the requested library name
2. Picking the linkable library file among the artifact's outputs
3. Formatting the flags for that file in the requested linker flavor

When several artifacts share a name, the first one cargo reported wins.
Cargo reports dependencies before the targets that use them, so for a
single top-level target this is the one that was asked for.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cargo_pkgconfig.core.errors import ArtifactNotFoundError, NoLibraryFileError
from cargo_pkgconfig.util.paths import extension, split_library_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cargo_pkgconfig.core.messages import Artifact
    from cargo_pkgconfig.toolchains.base import BaseFlavor, DumpType

logger = logging.getLogger(__name__)

# Artifact kinds that produce something a linker or archiver can consume.
LIBRARY_KINDS: tuple[str, ...] = ("lib", "staticlib")

# Static/import library extensions, in no particular priority.
LIBRARY_EXTENSIONS: tuple[str, ...] = ("lib", "a", "rlib")


def find_artifact(name: str, artifacts: Sequence[Artifact]) -> Artifact | None:
    """Find the first artifact whose target name is ``name``."""
    for artifact in artifacts:
        if artifact.target_name == name:
            return artifact
    return None


def find_library_file(filenames: Sequence[str]) -> str | None:
    """Find the first file with a static or import library extension."""
    for filename in filenames:
        if extension(filename) in LIBRARY_EXTENSIONS:
            return filename
    return None


def resolve_flags(
    name: str,
    artifacts: Sequence[Artifact],
    dump_type: DumpType | None,
    flavor: BaseFlavor,
) -> str | None:
    """Resolve the flags for a library.

    Args:
        name: The requested library name.
        artifacts: Artifacts reported by cargo, in stream order.
        dump_type: Archiver or linker flags. None requests nothing.
        flavor: The linker flavor to format for.

    Returns:
        The flags, or None if the artifact is not a library or no output
        was requested.

    Raises:
        ArtifactNotFoundError: If no artifact is named ``name``.
        NoLibraryFileError: If the artifact has no library file.
    """
    artifact = find_artifact(name, artifacts)
    if artifact is None:
        raise ArtifactNotFoundError(name, artifacts)

    if dump_type is None or not artifact.has_kind(*LIBRARY_KINDS):
        logger.debug(
            "Nothing to output for %s (kind=%s)", name, ", ".join(artifact.kind)
        )
        return None

    filename = find_library_file(artifact.filenames)
    if filename is None:
        raise NoLibraryFileError(name, artifact.filenames)

    directory, basename = split_library_path(filename)
    logger.debug("Using %s from %s", basename, directory)
    return flavor.format_flags(dump_type, name, directory, basename)
