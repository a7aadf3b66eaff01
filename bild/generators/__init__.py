# SPDX-License-Identifier: MIT
"""Auxiliary file generators for bild."""

from bild.generators.compile_commands import CompileCommandsGenerator

__all__ = [
    "CompileCommandsGenerator",
]
