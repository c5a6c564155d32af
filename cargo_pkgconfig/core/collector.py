# SPDX-License-Identifier: MIT
"""Collect build artifacts from a running cargo build.

ArtifactCollector runs cargo with JSON message output, reads its stdout a
line at a time while the build runs, and folds the messages into a
BuildOutcome. Lines are read as bytes and decoded one at a time, so bad
UTF-8 is reported like any other malformed message. Cargo's stderr is
left attached to ours so the rendered compiler diagnostics reach the user
unchanged.

Example:
    with ArtifactCollector(cargo_command(["--release"])) as collector:
        outcome = collector.collect()
        exit_code = collector.wait()
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cargo_pkgconfig.core.errors import BuildToolError
from cargo_pkgconfig.core.messages import BuildFinished, CompilerArtifact, parse_stream

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from cargo_pkgconfig.core.messages import Artifact

logger = logging.getLogger(__name__)

DEFAULT_CARGO = "cargo"
MESSAGE_FORMAT = "--message-format=json-render-diagnostics"


def cargo_command(
    cargo_args: Sequence[str] = (), cargo: str | None = None
) -> list[str]:
    """Build the cargo command line.

    Args:
        cargo_args: Extra arguments passed through to ``cargo build``.
        cargo: The cargo executable. Defaults to $CARGO, which cargo sets
            when it runs a subcommand, and then to "cargo".

    Returns:
        The full command as a list of arguments.
    """
    if cargo is None:
        cargo = os.environ.get("CARGO") or DEFAULT_CARGO
    return [cargo, "build", MESSAGE_FORMAT, *cargo_args]


def exit_code(returncode: int) -> int:
    """Map a subprocess return code to our exit code.

    A process killed by a signal has no exit code of its own (Python
    reports it as a negative number); report that as 1.
    """
    return returncode if returncode >= 0 else 1


@dataclass
class BuildOutcome:
    """What was learned from a build's message stream.

    Attributes:
        artifacts: Compiler artifacts in the order cargo reported them.
        success: The build-finished result, or None if cargo never
            reported one.
    """

    artifacts: list[Artifact] = field(default_factory=list)
    success: bool | None = None

    @property
    def failed(self) -> bool:
        return self.success is False


class ArtifactCollector:
    """Runs a build command and collects the artifacts it reports.

    Use as a context manager: leaving the block always waits for the
    process. If stdout was not fully read (a malformed message aborted
    collection), the process is killed first.

    Attributes:
        command: The command to run.
    """

    def __init__(self, command: Sequence[str]) -> None:
        self.command = list(command)
        self._process: subprocess.Popen[bytes] | None = None
        self._drained = False

    def __enter__(self) -> ArtifactCollector:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        process = self._process
        if process is None:
            return
        if not self._drained and process.poll() is None:
            logger.debug("Killing %s (output not fully read)", self.command[0])
            process.kill()
        if process.stdout is not None:
            process.stdout.close()
        process.wait()

    def start(self) -> None:
        """Start the build process.

        Raises:
            BuildToolError: If the process could not be started.
        """
        logger.info("Running: %s", " ".join(self.command))
        try:
            self._process = subprocess.Popen(
                self.command,
                stdout=subprocess.PIPE,
            )
        except OSError as e:
            raise BuildToolError(f"Failed to run {self.command[0]}: {e}") from e

    def collect(self) -> BuildOutcome:
        """Read the message stream to the end.

        Every compiler artifact is recorded until a failed build-finished
        message arrives; after that the rest of stdout is read and
        discarded.

        Raises:
            MessageDecodeError: If a line is not a valid cargo message.
        """
        if self._process is None:
            self.start()
        assert self._process is not None
        stdout = self._process.stdout
        assert stdout is not None

        outcome = BuildOutcome()
        for event in parse_stream(stdout):
            if isinstance(event, CompilerArtifact):
                logger.debug(
                    "Artifact %s [%s]",
                    event.artifact.target_name,
                    ", ".join(event.artifact.kind),
                )
                outcome.artifacts.append(event.artifact)
            elif isinstance(event, BuildFinished):
                logger.debug("Build finished (success=%s)", event.success)
                outcome.success = event.success
                if not event.success:
                    break

        # Never leave cargo blocked on a full pipe.
        for _ in stdout:
            pass
        self._drained = True
        return outcome

    def wait(self) -> int:
        """Wait for the build process and return its exit code."""
        if self._process is None:
            raise RuntimeError("build process was not started")
        return exit_code(self._process.wait())
