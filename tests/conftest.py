# SPDX-License-Identifier: MIT
"""Shared fixtures for cargo-pkgconfig tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest


def _artifact_message(
    name: str, kind: list[str], filenames: list[str]
) -> dict[str, Any]:
    return {
        "reason": "compiler-artifact",
        "package_id": f"{name} 0.1.0 (path+file:///src/{name})",
        "target": {"name": name, "kind": kind, "src_path": f"/src/{name}/lib.rs"},
        "filenames": filenames,
        "fresh": False,
    }


def _encode_line(message: dict[str, Any] | str | bytes) -> bytes:
    if isinstance(message, bytes):
        return message
    if isinstance(message, str):
        return message.encode("utf-8")
    return json.dumps(message).encode("utf-8")


@pytest.fixture
def artifact_message() -> Callable[..., dict[str, Any]]:
    """Factory for compiler-artifact messages shaped like cargo's."""
    return _artifact_message


@pytest.fixture
def fake_cargo(tmp_path: Path) -> Callable[..., Path]:
    """Create a stand-in for cargo.

    The returned factory writes an executable script that prints the given
    messages (dicts are JSON-encoded, strings and bytes are written as-is),
    records its arguments to ``args.json`` and exits with ``returncode``.
    """
    if sys.platform == "win32":
        pytest.skip("fake cargo script needs a shebang")

    def make(
        messages: list[dict[str, Any] | str | bytes],
        returncode: int = 0,
        stderr: str = "",
    ) -> Path:
        lines = [_encode_line(m) for m in messages]
        script = tmp_path / "fake-cargo"
        script.write_text(
            f"#!{sys.executable}\n"
            "import json, sys\n"
            f"with open({str(tmp_path / 'args.json')!r}, 'w') as f:\n"
            "    json.dump(sys.argv[1:], f)\n"
            f"for line in {lines!r}:\n"
            "    sys.stdout.buffer.write(line + b'\\n')\n"
            "    sys.stdout.buffer.flush()\n"
            f"sys.stderr.write({stderr!r})\n"
            f"sys.exit({returncode})\n"
        )
        script.chmod(0o755)
        return script

    return make
