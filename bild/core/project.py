# SPDX-License-Identifier: MIT
"""Project configuration.

A ProjectConfig is the single aggregate that flows through a bild run:

    ProjectConfig.from_args() -> parse_descriptor() -> scan_dependencies()
        -> scan_sources() -> build()

It is immutable. Each stage returns an extended copy, so every snapshot can
be inspected (and tested) on its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from bild.core.flags import BuildFlags, ProjectFlag
from bild.toolchains.gcc import GccToolchain

# Mode token that selects a debug build.
DEBUG_TOKEN = "-debug"


@dataclass(frozen=True)
class ProjectConfig:
    """Everything needed to assemble one compiler invocation.

    Attributes:
        name: Name of the output binary. May be empty (a warning is logged).
        flags: Build mode flags.
        compiler_flags: Flags passed verbatim to the compiler.
        source_files: Compile units, relative to the project directory.
        link_libraries: Library names, without prefix or extension.
        include_paths: Header search directories, one per dependency.
        library_search_paths: Library search directories.
    """

    name: str = ""
    flags: BuildFlags = field(default_factory=BuildFlags)
    compiler_flags: tuple[str, ...] = ()
    source_files: tuple[Path, ...] = ()
    link_libraries: tuple[str, ...] = ()
    include_paths: tuple[Path, ...] = ()
    library_search_paths: tuple[Path, ...] = ()

    @classmethod
    def from_args(
        cls, args: Iterable[str], toolchain: GccToolchain | None = None
    ) -> ProjectConfig:
        """Create the initial configuration from mode tokens.

        Unrecognized tokens are ignored.

        Args:
            args: Mode tokens from the command line.
            toolchain: Toolchain supplying baseline and debug flags.

        Returns:
            A configuration with flags and compiler flags set.
        """
        if toolchain is None:
            toolchain = GccToolchain()

        flags = BuildFlags()
        compiler_flags = list(toolchain.warning_flags)
        for arg in args:
            if arg == DEBUG_TOKEN:
                flags = flags.with_flag(ProjectFlag.DEBUG)
                compiler_flags.extend(toolchain.debug_flags)

        return cls(flags=flags, compiler_flags=tuple(compiler_flags))

    @property
    def debug(self) -> bool:
        return self.flags.debug

    def with_name(self, name: str) -> ProjectConfig:
        return replace(self, name=name)

    def add_source_files(self, paths: Iterable[Path]) -> ProjectConfig:
        return replace(self, source_files=self.source_files + tuple(paths))

    def add_link_libraries(self, names: Iterable[str]) -> ProjectConfig:
        return replace(self, link_libraries=self.link_libraries + tuple(names))

    def add_include_path(self, path: Path) -> ProjectConfig:
        return replace(self, include_paths=self.include_paths + (path,))

    def add_library_search_path(self, path: Path) -> ProjectConfig:
        return replace(
            self, library_search_paths=self.library_search_paths + (path,)
        )

    def output_path(self, target_dir: Path) -> Path:
        """Path of the binary this configuration produces."""
        return target_dir / self.flags.mode / self.name
