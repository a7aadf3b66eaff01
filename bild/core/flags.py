# SPDX-License-Identifier: MIT
"""Build mode flags.

A project carries a set of mode flags. Only DEBUG changes what bild does
today; SHARED_LIB and STATIC_LIB are reserved for library outputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class ProjectFlag(Enum):
    """A single build mode flag."""

    DEBUG = "debug"
    SHARED_LIB = "shared_lib"
    STATIC_LIB = "static_lib"


@dataclass(frozen=True)
class BuildFlags:
    """An immutable set of ProjectFlag values.

    Example:
        >>> flags = BuildFlags().with_flag(ProjectFlag.DEBUG)
        >>> flags.debug
        True
        >>> flags.mode
        'debug'
    """

    flags: frozenset[ProjectFlag] = field(default_factory=frozenset)

    @classmethod
    def of(cls, flags: Iterable[ProjectFlag]) -> BuildFlags:
        return cls(frozenset(flags))

    def with_flag(self, flag: ProjectFlag) -> BuildFlags:
        """Return a copy with ``flag`` set."""
        return BuildFlags(self.flags | {flag})

    def has(self, flag: ProjectFlag) -> bool:
        return flag in self.flags

    @property
    def debug(self) -> bool:
        return ProjectFlag.DEBUG in self.flags

    @property
    def shared_lib(self) -> bool:
        return ProjectFlag.SHARED_LIB in self.flags

    @property
    def static_lib(self) -> bool:
        return ProjectFlag.STATIC_LIB in self.flags

    @property
    def mode(self) -> str:
        """Name of the output subdirectory for this build."""
        return "debug" if self.debug else "release"
