# SPDX-License-Identifier: MIT
"""Compiler command assembly and execution.

The whole project is compiled and linked by one compiler call:

    g++ <flags> <sources> -L<libdirs> -l<libs> -I<includes> -o target/<mode>/<name>

The command runs in the project directory and bild waits for it to finish.
Its exit status is reported back in a BuildResult but never turns into a
bild failure.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from bild.configure.settings import TARGET_DIR
from bild.core.errors import CommandFormatError
from bild.core.flags import BuildFlags
from bild.core.project import ProjectConfig
from bild.toolchains.gcc import GccToolchain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a build step.

    Attributes:
        command: The assembled command (empty if nothing was assembled).
        invoked: True if the compiler was actually run.
        returncode: Compiler exit status, or None if it was not run or
            could not be started.
    """

    command: tuple[str, ...] = ()
    invoked: bool = False
    returncode: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def prepare_output_dir(
    root: Path, flags: BuildFlags, target_dir: Path | str = TARGET_DIR
) -> Path:
    """Create the output root and its debug/release subdirectory.

    Existing directories are left alone.

    Returns:
        The mode directory, relative to ``root``.
    """
    target_dir = Path(target_dir)
    mode_dir = target_dir / flags.mode
    for directory in (target_dir, mode_dir):
        full = root / directory
        if not full.is_dir():
            logger.debug("Creating %s", full)
            full.mkdir()
    return mode_dir


def format_command(command: Sequence[str]) -> str:
    """Join a command into the line shown to the operator.

    Raises:
        CommandFormatError: If a token cannot be passed to a process.
    """
    for token in command:
        if "\0" in token:
            raise CommandFormatError(token)
    return " ".join(command)


def assemble_command(
    config: ProjectConfig,
    root: Path,
    target_dir: Path | str = TARGET_DIR,
    toolchain: GccToolchain | None = None,
    create_dirs: bool = True,
) -> list[str]:
    """Build the compiler argument list for a configuration.

    Args:
        config: Fully discovered configuration.
        root: Project directory.
        target_dir: Output root, relative to ``root``.
        toolchain: Compiler conventions to use.
        create_dirs: Create the output directories before naming the
            output path.

    Returns:
        The command as a list of tokens.
    """
    if toolchain is None:
        toolchain = GccToolchain()

    command = [toolchain.cmd]
    command.extend(config.compiler_flags)
    command.extend(p.as_posix() for p in config.source_files)
    command.extend(toolchain.libdirs(config.library_search_paths))
    command.extend(toolchain.libs(config.link_libraries))
    command.extend(toolchain.includes(config.include_paths))

    if create_dirs:
        prepare_output_dir(root, config.flags, target_dir)
    command.extend(toolchain.output(config.output_path(Path(target_dir))))
    return command


def _print_section(title: str, items: Sequence[object]) -> None:
    print(f"{title}:")
    for item in items:
        print(f"\t{item}")


def build(
    config: ProjectConfig,
    root: Path,
    target_dir: Path | str = TARGET_DIR,
    toolchain: GccToolchain | None = None,
    dry_run: bool = False,
) -> BuildResult:
    """Assemble and run the compiler command for a configuration.

    If no sources were found a warning is logged and nothing runs.

    Args:
        config: Fully discovered configuration.
        root: Project directory; the compiler runs there.
        target_dir: Output root, relative to ``root``.
        toolchain: Compiler conventions to use.
        dry_run: Print the command but neither create directories
            nor run it.

    Returns:
        What was assembled and how the compiler exited.

    Raises:
        CommandFormatError: If the command cannot be formatted.
    """
    if not config.source_files:
        logger.warning("No .c or .cpp file found in src directory.")
        return BuildResult()

    _print_section("Binary search locations", config.library_search_paths)
    _print_section("Linking", config.link_libraries)
    _print_section("Including", config.include_paths)

    command = assemble_command(
        config, root, target_dir, toolchain, create_dirs=not dry_run
    )
    print(f"Generated command: {format_command(command)}")

    if dry_run:
        return BuildResult(command=tuple(command))

    try:
        result = subprocess.run(command, cwd=root)
    except OSError as e:
        logger.error("Failed to run %s: %s", command[0], e)
        return BuildResult(command=tuple(command))

    logger.info("%s exited with status %d", command[0], result.returncode)
    return BuildResult(
        command=tuple(command), invoked=True, returncode=result.returncode
    )
