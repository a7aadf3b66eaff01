# SPDX-License-Identifier: MIT
"""compile_commands.json generator for IDE integration.

Generates a compile_commands.json file that IDEs and tools like
clangd and clang-tidy can use for code intelligence.
"""

from __future__ import annotations

import json
import logging
import shlex
from pathlib import Path
from typing import Any

from bild.core.project import ProjectConfig
from bild.toolchains.gcc import GccToolchain

logger = logging.getLogger(__name__)

COMPILE_COMMANDS_FILE = "compile_commands.json"


class CompileCommandsGenerator:
    """Generator for compile_commands.json.

    bild compiles everything in one call, so each entry describes how a
    single source file would be compiled with the project's flags and
    include paths.

    Format:
        [
            {
                "directory": "/path/to/project",
                "file": "src/main.cpp",
                "command": "g++ -Wall -Idepend/glfw/include -c src/main.cpp"
            },
            ...
        ]

    Example:
        generator = CompileCommandsGenerator()
        generator.generate(config, root, root / "target")
    """

    name = "compile_commands"

    def __init__(self, toolchain: GccToolchain | None = None) -> None:
        self.toolchain = toolchain or GccToolchain()

    def generate(self, config: ProjectConfig, root: Path, output_dir: Path) -> Path:
        """Write compile_commands.json.

        Args:
            config: Fully discovered configuration.
            root: Project directory, recorded as each entry's directory.
            output_dir: Directory to write compile_commands.json to.

        Returns:
            Path of the written file.
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / COMPILE_COMMANDS_FILE

        commands = [
            self._make_entry(config, root, source) for source in config.source_files
        ]

        with open(output_file, "w") as f:
            json.dump(commands, f, indent=2)
            f.write("\n")

        logger.info("Wrote %s (%d entries)", output_file, len(commands))
        return output_file

    def _make_entry(
        self, config: ProjectConfig, root: Path, source: Path
    ) -> dict[str, Any]:
        parts = [self.toolchain.cmd]
        parts.extend(config.compiler_flags)
        parts.extend(self.toolchain.includes(config.include_paths))
        parts.extend(["-c", source.as_posix()])

        return {
            "directory": str(root.absolute()),
            "file": source.as_posix(),
            "command": " ".join(shlex.quote(p) for p in parts),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
