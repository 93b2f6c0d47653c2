"""Filesystem access used by the resolver and the loader.

The engine only needs four capabilities, collected in :class:`FileSystem`.
:class:`LocalFileSystem` backs them with the real disk; tests pass an
in-memory implementation instead.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_dir: bool


class FileSystem(Protocol):
    """Minimal protocol implemented by filesystem backends."""

    def exists(self, path: str) -> bool:
        """Return ``True`` if ``path`` exists."""

    def is_dir(self, path: str) -> bool:
        """Return ``True`` if ``path`` is a directory."""

    def list_dir(self, path: str) -> List[DirEntry]:
        """Return the direct entries of directory ``path``."""

    def read_text(self, path: str) -> str:
        """Return the full UTF-8 content of ``path``."""


class LocalFileSystem:
    """Read from the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_dir(self, path: str) -> List[DirEntry]:
        # Sorted by name so discovery order does not depend on the platform.
        with os.scandir(path) as it:
            entries = [
                DirEntry(entry.name, entry.is_dir(follow_symlinks=False))
                for entry in it
            ]
        return sorted(entries, key=lambda entry: entry.name)

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")


__all__ = ["DirEntry", "FileSystem", "LocalFileSystem"]
