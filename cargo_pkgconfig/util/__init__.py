# SPDX-License-Identifier: MIT
"""Utility helpers for cargo-pkgconfig."""
