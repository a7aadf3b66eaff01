# SPDX-License-Identifier: MIT
"""Project descriptor parser.

The descriptor (``proj.bild``) is a line-oriented ``key=value`` file:

    name = widget
    link = opengl32, glfw3

All whitespace is removed from a line before it is split, so
``link = a, b`` and ``link=a,b`` are the same. Unknown keys are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bild.core.project import ProjectConfig

logger = logging.getLogger(__name__)

DESCRIPTOR_NAME = "proj.bild"


def strip_whitespace(line: str) -> str:
    """Remove every whitespace character from a line."""
    return "".join(line.split())


def parse_line(line: str) -> tuple[str, str]:
    """Split a descriptor line into key and value.

    Whitespace is removed first. The line is split on the first ``=``;
    a line without ``=`` is all key with an empty value.

    Examples:
        >>> parse_line("name = widget")
        ('name', 'widget')
        >>> parse_line("orphan")
        ('orphan', '')
    """
    key, _, value = strip_whitespace(line).partition("=")
    return key, value


def parse_descriptor(path: Path | str, config: ProjectConfig) -> ProjectConfig:
    """Apply a descriptor file to a configuration.

    If the file cannot be opened a warning is logged and ``config`` is
    returned unchanged.

    Args:
        path: Path to the descriptor file.
        config: Configuration to extend.

    Returns:
        The configuration with ``name`` and ``link`` entries applied.
    """
    path = Path(path)
    try:
        with open(path) as f:
            lines = f.readlines()
    except OSError:
        logger.warning("Could not open project file: %s", path)
        return config

    for line in lines:
        key, value = parse_line(line)
        if key == "name":
            config = config.with_name(value)
        elif key == "link":
            config = config.add_link_libraries(value.split(","))
        elif key:
            logger.debug("Ignoring unknown key %r in %s", key, path)

    if not config.name:
        logger.warning("Project name not set in %s", path)

    return config
