# SPDX-License-Identifier: MIT
"""Settings for a bild run.

Settings decide where bild looks for things and which compiler it runs.
They are layered, highest precedence first:

    1. Command line: bild --compiler clang++
    2. Environment: BILD_COMPILER=clang++ bild
    3. bild.toml in the project directory:

           [bild]
           compiler = "clang++"
           source_dir = "src"

    4. Built-in defaults (g++, proj.bild, src, depend, target)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from bild.core.errors import SettingsError
from bild.descriptor import DESCRIPTOR_NAME
from bild.discovery.dependencies import DEPEND_DIR
from bild.discovery.sources import SOURCE_DIR

# Try to import tomllib (Python 3.11+) or tomli as fallback
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)

SETTINGS_FILE = "bild.toml"
COMPILER_ENV_VAR = "BILD_COMPILER"
TARGET_DIR = "target"


@dataclass(frozen=True)
class Settings:
    """Where bild looks for inputs and which compiler it runs.

    Directory and file settings are relative to the project directory.

    Attributes:
        compiler: Compiler driver command.
        descriptor: Project descriptor file.
        source_dir: Source root.
        depend_dir: Dependency root.
        target_dir: Output root.
    """

    compiler: str = "g++"
    descriptor: str = DESCRIPTOR_NAME
    source_dir: str = SOURCE_DIR
    depend_dir: str = DEPEND_DIR
    target_dir: str = TARGET_DIR

    @classmethod
    def from_mapping(
        cls, data: dict[str, Any], source: Path | None = None
    ) -> Settings:
        """Create settings from a ``[bild]`` table.

        Unknown keys are ignored.

        Raises:
            SettingsError: If a known key does not hold a string.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in known:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            if not isinstance(value, str):
                raise SettingsError(
                    f"setting {key!r} must be a string, got {type(value).__name__}",
                    source,
                )
            values[key] = value
        return cls(**values)


def load_settings_file(path: Path) -> Settings:
    """Load settings from a TOML file.

    Returns default settings if the file does not exist.

    Raises:
        SettingsError: If the file is not valid TOML or has bad values.
    """
    if not path.exists():
        return Settings()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"invalid TOML: {e}", path) from e

    table = data.get("bild", {})
    if not isinstance(table, dict):
        raise SettingsError("[bild] must be a table", path)

    logger.info("Loaded settings from %s", path)
    return Settings.from_mapping(table, path)


def load_settings(project_dir: Path, compiler: str | None = None) -> Settings:
    """Resolve the settings for a project directory.

    Args:
        project_dir: Directory holding bild.toml (if any).
        compiler: Compiler given on the command line, if any.

    Returns:
        The resolved settings.
    """
    settings = load_settings_file(project_dir / SETTINGS_FILE)

    env_compiler = os.environ.get(COMPILER_ENV_VAR)
    if env_compiler:
        settings = replace(settings, compiler=env_compiler)

    if compiler:
        settings = replace(settings, compiler=compiler)

    return settings
