# SPDX-License-Identifier: MIT
"""Convention-based discovery of sources and dependencies."""

from bild.discovery.dependencies import scan_dependencies, scan_library_dir
from bild.discovery.sources import find_sources, scan_sources

__all__ = [
    "find_sources",
    "scan_dependencies",
    "scan_library_dir",
    "scan_sources",
]
