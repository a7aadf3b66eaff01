# SPDX-License-Identifier: MIT
"""Compiler driver definitions."""

from bild.toolchains.gcc import GccToolchain

__all__ = [
    "GccToolchain",
]
