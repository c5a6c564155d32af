# SPDX-License-Identifier: MIT
"""Allow running as ``python -m cargo_pkgconfig``."""

import sys

from cargo_pkgconfig.cli import main

sys.exit(main())
