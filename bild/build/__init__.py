# SPDX-License-Identifier: MIT
"""Compiler command assembly."""

from bild.build.assembler import (
    BuildResult,
    assemble_command,
    build,
    format_command,
    prepare_output_dir,
)

__all__ = [
    "BuildResult",
    "assemble_command",
    "build",
    "format_command",
    "prepare_output_dir",
]
