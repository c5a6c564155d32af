# SPDX-License-Identifier: MIT
"""Message decoding, artifact collection and flag resolution."""
