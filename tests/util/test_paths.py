# SPDX-License-Identifier: MIT
"""Tests for cargo_pkgconfig.util.paths."""

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from cargo_pkgconfig.util.paths import (
    extension,
    is_windows_path,
    split_library_path,
    to_slash,
)


class TestToSlash:
    def test_windows_path(self):
        assert to_slash("C:\\Users\\me\\target\\debug") == "C:/Users/me/target/debug"

    def test_posix_path_unchanged(self):
        assert to_slash("/home/me/target/debug") == "/home/me/target/debug"

    def test_mixed_separators(self):
        assert to_slash("C:\\target/debug\\deps") == "C:/target/debug/deps"

    def test_path_objects(self):
        assert to_slash(PureWindowsPath("C:\\target")) == "C:/target"
        assert to_slash(PurePosixPath("/target")) == "/target"

    def test_idempotent(self):
        once = to_slash("C:\\target\\debug")
        assert to_slash(once) == once


class TestSplitLibraryPath:
    def test_posix(self):
        assert split_library_path("/out/libfoo.rlib") == ("/out", "libfoo.rlib")

    def test_windows(self):
        assert split_library_path("C:\\target\\debug\\foo.lib") == (
            "C:/target/debug",
            "foo.lib",
        )

    def test_conventions_agree(self):
        assert split_library_path("/target/debug/libfoo.a") == split_library_path(
            "\\target\\debug\\libfoo.a"
        )

    def test_bare_file_name(self):
        assert split_library_path("libfoo.a") == (".", "libfoo.a")

    def test_backslash_in_posix_file_name(self):
        assert split_library_path("/out/we\\ird/libfoo.a") == (
            "/out/we\\ird",
            "libfoo.a",
        )

    def test_unc(self):
        assert split_library_path("\\\\server\\share\\foo.lib") == (
            "//server/share/",
            "foo.lib",
        )


class TestExtension:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/out/libfoo.rlib", "rlib"),
            ("/out/libfoo.a", "a"),
            ("C:\\out\\foo.lib", "lib"),
            ("/out/foo.d", "d"),
            ("/out/libfoo.so.1", "1"),
            ("/out/foo", ""),
            ("/out.dir/foo", ""),
        ],
    )
    def test_extension(self, path, expected):
        assert extension(path) == expected

    def test_backslash_in_posix_file_name(self):
        assert extension("/out/foo.d\\bar") == "d\\bar"


class TestIsWindowsPath:
    @pytest.mark.parametrize(
        "path",
        [
            "C:\\target\\debug",
            "c:/target/debug",
            "C:\\target/debug\\deps",
            "\\\\server\\share\\foo.lib",
            "\\target\\debug\\libfoo.a",
            "foo\\bar.lib",
        ],
    )
    def test_windows_shaped(self, path):
        assert is_windows_path(path)

    @pytest.mark.parametrize(
        "path",
        ["/out/libfoo.a", "/out/we\\ird/libfoo.a", "libfoo.a", ""],
    )
    def test_posix_shaped(self, path):
        assert not is_windows_path(path)
