# SPDX-License-Identifier: MIT
"""Source file discovery.

Sources are collected from the top of the source root and from directories
named ``include`` below it. Other subdirectories are not searched:

    src/main.cpp                  collected
    src/include/util.c            collected
    src/include/include/deep.c    collected
    src/gui/window.cpp            skipped
"""

from __future__ import annotations

import logging
from pathlib import Path

from bild.core.project import ProjectConfig
from bild.discovery.walk import Entry, iter_entries
from bild.toolchains.gcc import GccToolchain

logger = logging.getLogger(__name__)

SOURCE_DIR = "src"
INCLUDE_DIR_NAME = "include"


def descend_into_include(entry: Entry) -> bool:
    """Only directories literally named ``include`` are searched."""
    return entry.name == INCLUDE_DIR_NAME


def find_sources(
    root: Path,
    source_dir: Path | str = SOURCE_DIR,
    toolchain: GccToolchain | None = None,
) -> list[Path]:
    """Return compile units under ``root / source_dir`` in walk order."""
    if toolchain is None:
        toolchain = GccToolchain()
    return [
        entry.path
        for entry in iter_entries(root, Path(source_dir), descend_into_include)
        if entry.is_file and entry.extension in toolchain.source_suffixes
    ]


def scan_sources(
    config: ProjectConfig,
    root: Path,
    source_dir: Path | str = SOURCE_DIR,
    toolchain: GccToolchain | None = None,
) -> ProjectConfig:
    """Add every compile unit under the source root to the configuration."""
    sources = find_sources(root, source_dir, toolchain)
    logger.debug("Found %d source file(s) in %s", len(sources), source_dir)
    return config.add_source_files(sources)
