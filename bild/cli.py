# SPDX-License-Identifier: MIT
"""Command-line interface for bild."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from bild.build.assembler import BuildResult, build
from bild.configure.settings import Settings, load_settings
from bild.core.errors import SettingsError
from bild.core.project import ProjectConfig
from bild.descriptor import parse_descriptor
from bild.discovery.dependencies import scan_dependencies
from bild.discovery.sources import scan_sources
from bild.generators.compile_commands import CompileCommandsGenerator
from bild.toolchains.gcc import GccToolchain

# Set up logging
logger = logging.getLogger("bild")


def setup_logging(verbose: bool = False, trace: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if trace:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def load_project(
    root: Path,
    settings: Settings,
    modes: Sequence[str],
    toolchain: GccToolchain | None = None,
) -> ProjectConfig:
    """Run the descriptor parser and all scanners for a project.

    Args:
        root: Project directory.
        settings: Resolved settings.
        modes: Mode tokens from the command line.
        toolchain: Compiler conventions to use.

    Returns:
        The fully discovered configuration.
    """
    if toolchain is None:
        toolchain = GccToolchain(cmd=settings.compiler)

    config = ProjectConfig.from_args(modes, toolchain)
    config = parse_descriptor(root / settings.descriptor, config)
    config = scan_dependencies(config, root, settings.depend_dir, toolchain)
    config = scan_sources(config, root, settings.source_dir, toolchain)
    return config


def run_build(
    root: Path,
    settings: Settings,
    modes: Sequence[str],
    dry_run: bool = False,
    compile_commands: bool = False,
) -> BuildResult:
    """Discover a project and build it.

    Args:
        root: Project directory.
        settings: Resolved settings.
        modes: Mode tokens from the command line.
        dry_run: Print the command without running it.
        compile_commands: Also write compile_commands.json to the output root.
            Skipped on a dry run.

    Returns:
        The build result.
    """
    toolchain = GccToolchain(cmd=settings.compiler)
    config = load_project(root, settings, modes, toolchain)

    if compile_commands and dry_run:
        logger.info("Dry run: not writing compile_commands.json")
    elif compile_commands:
        generator = CompileCommandsGenerator(toolchain)
        generator.generate(config, root, root / settings.target_dir)

    return build(config, root, settings.target_dir, toolchain, dry_run=dry_run)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Mode tokens such as ``-debug`` are not declared here. They end up
    in the unparsed remainder and are interpreted by ProjectConfig.
    """
    from bild import __version__

    parser = argparse.ArgumentParser(
        prog="bild",
        description="Build a C/C++ project from proj.bild, src/ and depend/.",
        epilog="Pass -debug to build target/debug/<name> with debug symbols.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--trace", action="store_true", help="Debug output")
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        help="Project directory (default: current directory)",
    )
    parser.add_argument("--compiler", help="Compiler driver (default: g++)")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the compiler command without running it",
    )
    parser.add_argument(
        "--compile-commands",
        action="store_true",
        help="Write compile_commands.json to the output directory",
    )
    parser.add_argument("modes", nargs="*", help="Mode tokens (e.g. -debug)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the bild CLI.

    Returns 0 even if the compiler fails. Only a malformed bild.toml
    yields a non-zero exit code.
    """
    parser = create_parser()
    args, unknown = parser.parse_known_args(argv)
    setup_logging(args.verbose, args.trace)

    root = Path(args.directory)
    modes = [*args.modes, *unknown]

    try:
        settings = load_settings(root, args.compiler)
    except SettingsError as e:
        logger.error("%s", e)
        return 1

    run_build(
        root,
        settings,
        modes,
        dry_run=args.dry_run,
        compile_commands=args.compile_commands,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
