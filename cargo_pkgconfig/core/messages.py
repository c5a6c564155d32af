# SPDX-License-Identifier: MIT
"""Decoding of cargo's JSON build messages.

With ``--message-format=json-render-diagnostics`` cargo writes one JSON
object per line to stdout. Only two record shapes matter here:

    {"reason": "compiler-artifact", "target": {"name": ..., "kind": [...]},
     "filenames": [...], ...}
    {"reason": "build-finished", "success": true}

Every other record decodes to OtherMessage.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from cargo_pkgconfig.core.errors import MessageDecodeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Artifact:
    """A compiled target reported by cargo.

    Attributes:
        target_name: Name of the build target (usually the crate name).
        kind: Target kinds, e.g. ("lib",), ("staticlib", "rlib"), ("bin",).
        filenames: Output files produced for the target, in cargo's order.
    """

    target_name: str
    kind: tuple[str, ...]
    filenames: tuple[str, ...]

    def has_kind(self, *kinds: str) -> bool:
        """Check whether any of the given kinds apply to this artifact."""
        return any(k in self.kind for k in kinds)


@dataclass(frozen=True)
class CompilerArtifact:
    artifact: Artifact


@dataclass(frozen=True)
class BuildFinished:
    success: bool


@dataclass(frozen=True)
class OtherMessage:
    reason: str


BuildEvent = Union[CompilerArtifact, BuildFinished, OtherMessage]


def _string_list(line: str, value: Any, field: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MessageDecodeError(line, f"'{field}' is not a list of strings")
    return tuple(value)


def _decode_artifact(line: str, record: dict[str, Any]) -> Artifact:
    target = record.get("target")
    if not isinstance(target, dict):
        raise MessageDecodeError(line, "missing 'target'")

    name = target.get("name")
    if not isinstance(name, str):
        raise MessageDecodeError(line, "missing 'target.name'")

    return Artifact(
        target_name=name,
        kind=_string_list(line, target.get("kind"), "target.kind"),
        filenames=_string_list(line, record.get("filenames"), "filenames"),
    )


def parse_message(line: str | bytes) -> BuildEvent | None:
    """Decode a single line of cargo output.

    Args:
        line: One line of stdout, with or without its trailing newline.
            Raw bytes are decoded as UTF-8.

    Returns:
        The decoded event, or None for a blank line.

    Raises:
        MessageDecodeError: If the line is not a well-formed message.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            raw = line.strip().decode("utf-8", errors="replace")
            raise MessageDecodeError(raw, f"invalid UTF-8: {e.reason}") from e

    text = line.strip()
    if not text:
        return None

    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise MessageDecodeError(text, f"invalid JSON: {e.msg}") from e

    if not isinstance(record, dict):
        raise MessageDecodeError(text, "record is not an object")

    reason = record.get("reason")
    if not isinstance(reason, str):
        raise MessageDecodeError(text, "missing 'reason'")

    if reason == "compiler-artifact":
        return CompilerArtifact(_decode_artifact(text, record))

    if reason == "build-finished":
        success = record.get("success")
        if not isinstance(success, bool):
            raise MessageDecodeError(text, "'success' is not a boolean")
        return BuildFinished(success)

    return OtherMessage(reason)


def parse_stream(lines: Iterable[str | bytes]) -> Iterator[BuildEvent]:
    """Lazily decode a stream of cargo output lines.

    Blank lines are skipped. A malformed line raises MessageDecodeError
    and ends the stream.
    """
    for line in lines:
        event = parse_message(line)
        if event is not None:
            yield event
