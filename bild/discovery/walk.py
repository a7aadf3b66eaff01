# SPDX-License-Identifier: MIT
"""Directory traversal for the scanners.

All scanners see the project tree through iter_entries(), a lazy walk that
yields entries relative to the project directory. Which subdirectories are
descended into is decided by a single predicate.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path


def split_name(name: str) -> tuple[str, str]:
    """Split a file name on its first dot into (stem, extension).

    Examples:
        >>> split_name("libfoo.a")
        ('libfoo', 'a')
        >>> split_name("archive.tar.lib")
        ('archive', 'tar.lib')
        >>> split_name("README")
        ('README', '')
    """
    stem, _, extension = name.partition(".")
    return stem, extension


@dataclass(frozen=True)
class Entry:
    """A directory entry found during a walk.

    Attributes:
        path: Path relative to the walk's root directory.
        is_file: True for regular files (symlinks are followed).
    """

    path: Path
    is_file: bool

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return split_name(self.name)[0]

    @property
    def extension(self) -> str:
        return split_name(self.name)[1]


def list_dir(root: Path, directory: Path) -> Iterator[Entry]:
    """Yield the immediate entries of ``root / directory`` in name order.

    Nothing is yielded if the directory does not exist.
    """
    full = root / directory
    if not full.is_dir():
        return
    for child in sorted(full.iterdir(), key=lambda p: p.name):
        yield Entry(directory / child.name, child.is_file())


def iter_entries(
    root: Path,
    directory: Path,
    descend: Callable[[Entry], bool] | None = None,
) -> Iterator[Entry]:
    """Walk ``root / directory`` lazily.

    Every entry is yielded. A non-file entry is walked into, right after it
    is yielded, when ``descend(entry)`` is true.

    Args:
        root: Project directory. Yielded paths are relative to it.
        directory: Directory to walk, relative to ``root``.
        descend: Predicate choosing subdirectories to walk into.
            If None, the walk does not recurse.
    """
    for entry in list_dir(root, directory):
        yield entry
        if not entry.is_file and descend is not None and descend(entry):
            yield from iter_entries(root, entry.path, descend)
