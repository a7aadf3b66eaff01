# SPDX-License-Identifier: MIT
"""
bild: a one-shot build driver for small C/C++ projects.

bild reads a proj.bild descriptor, picks up sources from src/ and prebuilt
packages from depend/, and compiles everything with a single g++ call into
target/debug or target/release.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export the data model and pipeline stages for convenient imports.
# bild.build.build is not re-exported so that bild.build stays the subpackage.
from bild.configure.settings import Settings, load_settings  # noqa: E402
from bild.core.flags import BuildFlags, ProjectFlag  # noqa: E402
from bild.core.project import ProjectConfig  # noqa: E402
from bild.descriptor import parse_descriptor  # noqa: E402
from bild.discovery import (  # noqa: E402
    scan_dependencies,
    scan_library_dir,
    scan_sources,
)

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Data model
    "BuildFlags",
    "ProjectConfig",
    "ProjectFlag",
    # Settings
    "Settings",
    "load_settings",
    # Pipeline stages
    "parse_descriptor",
    "scan_dependencies",
    "scan_library_dir",
    "scan_sources",
]
