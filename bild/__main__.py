# SPDX-License-Identifier: MIT
"""Allow running bild as ``python -m bild``."""

import sys

from bild.cli import main

sys.exit(main())
