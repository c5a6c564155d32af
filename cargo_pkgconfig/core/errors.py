# SPDX-License-Identifier: MIT
"""Custom exceptions for cargo-pkgconfig.

All exceptions inherit from PkgconfigError. The CLI turns each of them
into a single error message on stderr and exit code 1.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cargo_pkgconfig.core.messages import Artifact


class PkgconfigError(Exception):
    """Base class for all cargo-pkgconfig exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MessageDecodeError(PkgconfigError):
    """A line of cargo output could not be decoded.

    Cargo's JSON message format is assumed to be stable, so this usually
    means an unexpected cargo version.

    Attributes:
        line: The offending line.
        reason: Why decoding failed.
    """

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"failed to decode cargo message ({reason}): {line!r}")


class BuildToolError(PkgconfigError):
    """The build tool could not be started."""


class NoOutputFormatError(PkgconfigError):
    """Neither --libs nor --ar was given."""

    def __init__(self) -> None:
        super().__init__("No output format specified!")


class ArtifactNotFoundError(PkgconfigError):
    """No artifact with the requested name appeared in the build output.

    The message lists every artifact that was seen, dependencies included,
    so the caller can find the correct name.

    Attributes:
        name: The requested library name.
        artifacts: The artifacts that were seen, in stream order.
    """

    def __init__(self, name: str, artifacts: Sequence[Artifact]) -> None:
        self.name = name
        self.artifacts = list(artifacts)
        lines = [f'Could not find an artifact named "{name}"!', "Possible artifacts:"]
        for artifact in self.artifacts:
            lines.append(f"  {artifact.target_name}: {json.dumps(list(artifact.kind))}")
        super().__init__("\n".join(lines))


class NoLibraryFileError(PkgconfigError):
    """The artifact was found but produced no linkable library file.

    Attributes:
        name: The requested library name.
        filenames: The files that were searched.
    """

    def __init__(self, name: str, filenames: Sequence[str]) -> None:
        self.name = name
        self.filenames = list(filenames)
        super().__init__(
            f'Found artifact "{name}", but did not find library artifact '
            f"from {json.dumps(self.filenames)}!"
        )
