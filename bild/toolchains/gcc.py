# SPDX-License-Identifier: MIT
"""GCC compiler driver.

bild compiles and links a whole project with a single call to the GCC
driver (``g++`` by default). This module knows the driver's command-line
conventions: which flags are always passed, which flags a debug build adds,
and how search paths and libraries are spelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GccToolchain:
    """Command-line conventions of the GCC driver.

    Attributes:
        cmd: Compiler driver command (default: 'g++').
        warning_flags: Flags passed on every build.
        debug_flags: Flags added for debug builds.
        include_prefix: Prefix for include directories.
        libdir_prefix: Prefix for library search directories.
        lib_prefix: Prefix for libraries to link.
        output_flag: Flag introducing the output binary path.
        source_suffixes: Extensions of compilable sources (without dot).
        library_suffixes: Extensions of linkable libraries (without dot).
    """

    cmd: str = "g++"
    warning_flags: tuple[str, ...] = ("-Wall",)
    debug_flags: tuple[str, ...] = ("-g",)
    include_prefix: str = "-I"
    libdir_prefix: str = "-L"
    lib_prefix: str = "-l"
    output_flag: str = "-o"
    source_suffixes: frozenset[str] = field(
        default_factory=lambda: frozenset({"c", "cpp"})
    )
    library_suffixes: frozenset[str] = field(
        default_factory=lambda: frozenset({"lib", "a"})
    )

    def includes(self, paths: tuple[Path, ...]) -> list[str]:
        return [f"{self.include_prefix}{p.as_posix()}" for p in paths]

    def libdirs(self, paths: tuple[Path, ...]) -> list[str]:
        return [f"{self.libdir_prefix}{p.as_posix()}" for p in paths]

    def libs(self, names: tuple[str, ...]) -> list[str]:
        return [f"{self.lib_prefix}{name}" for name in names]

    def output(self, path: Path) -> list[str]:
        return [self.output_flag, path.as_posix()]
