# SPDX-License-Identifier: MIT
"""Dependency and library discovery.

Each subdirectory of the dependency root is one prebuilt package:

    depend/
        glfw/
            include/        -> -Idepend/glfw/include
            bin/            -> -Ldepend/glfw/bin
                glfw3.lib   -> -lglfw3
                libglfw3.a  -> -llibglfw3
"""

from __future__ import annotations

import logging
from pathlib import Path

from bild.core.project import ProjectConfig
from bild.discovery.walk import list_dir
from bild.toolchains.gcc import GccToolchain

logger = logging.getLogger(__name__)

DEPEND_DIR = "depend"


def scan_library_dir(
    config: ProjectConfig,
    root: Path,
    bin_dir: Path,
    toolchain: GccToolchain | None = None,
) -> ProjectConfig:
    """Register a dependency's binary directory and its libraries.

    If ``root / bin_dir`` exists it is added to the library search paths
    (even if it is already there), and the stem of every regular file with
    a library extension is added to the link libraries.

    Args:
        config: Configuration to extend.
        root: Project directory.
        bin_dir: Binary directory, relative to ``root``.
        toolchain: Toolchain supplying the library extensions.

    Returns:
        The extended configuration, or ``config`` if the directory is missing.
    """
    if toolchain is None:
        toolchain = GccToolchain()

    if not (root / bin_dir).is_dir():
        return config

    config = config.add_library_search_path(bin_dir)
    libs = [
        entry.stem
        for entry in list_dir(root, bin_dir)
        if entry.is_file and entry.extension in toolchain.library_suffixes
    ]
    if libs:
        logger.debug("Libraries in %s: %s", bin_dir, ", ".join(libs))
    return config.add_link_libraries(libs)


def scan_dependencies(
    config: ProjectConfig,
    root: Path,
    depend_dir: Path | str = DEPEND_DIR,
    toolchain: GccToolchain | None = None,
) -> ProjectConfig:
    """Add include paths and libraries for every dependency package.

    Args:
        config: Configuration to extend.
        root: Project directory.
        depend_dir: Dependency root, relative to ``root``.
        toolchain: Toolchain supplying the library extensions.

    Returns:
        The extended configuration. A missing dependency root adds nothing.
    """
    depend_dir = Path(depend_dir)
    for entry in list_dir(root, depend_dir):
        if entry.is_file:
            continue
        logger.debug("Found dependency %s", entry.name)
        config = config.add_include_path(entry.path / "include")
        config = scan_library_dir(config, root, entry.path / "bin", toolchain)
    return config
