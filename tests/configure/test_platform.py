# SPDX-License-Identifier: MIT
"""Tests for cargo_pkgconfig.configure.platform."""

import sys

from cargo_pkgconfig.configure.platform import (
    Platform,
    default_flavor_name,
    get_platform,
)


class TestPlatform:
    def test_windows(self):
        assert Platform(system="win32").is_windows

    def test_cygwin_is_windows(self):
        assert Platform(system="cygwin").is_windows

    def test_not_windows(self):
        for system in ("linux", "darwin", "freebsd14"):
            assert not Platform(system=system).is_windows


class TestGetPlatform:
    def test_matches_host(self):
        assert get_platform() == Platform(system=sys.platform)


class TestDefaultFlavorName:
    def test_windows(self):
        assert default_flavor_name(Platform(system="win32")) == "msvc"

    def test_other(self):
        assert default_flavor_name(Platform(system="linux")) == "gcc"
        assert default_flavor_name(Platform(system="darwin")) == "gcc"

    def test_host(self):
        expected = "msvc" if sys.platform == "win32" else "gcc"
        assert default_flavor_name() == expected
