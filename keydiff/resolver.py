"""Turn the configured inputs into the list of files to compare.

Two mutually exclusive modes are supported:

* explicit files: a newline separated block of paths, used whenever it holds
  at least one non-blank line;
* search path: every direct, non-directory entry of ``search_path`` whose name
  matches ``search_pattern`` (unanchored ``re.search``).

Both modes return the paths in discovery order and require at least
:data:`MIN_FILES` entries.
"""

from __future__ import annotations

import logging
import os
import re
from typing import List

from .errors import (
    EmptySearchPath,
    InsufficientFiles,
    InvalidSearchPath,
    InvalidSearchPattern,
    PathNotFound,
)
from .fs import FileSystem, LocalFileSystem

DEFAULT_SEARCH_PATTERN = r"\.json$"
MIN_FILES = 2

logger = logging.getLogger("keydiff.resolver")


def normalize_dir(path: str) -> str:
    """Return ``path`` without trailing separators or redundant segments."""

    return os.path.normpath(path)


def resolve_explicit_files(files: str, fs: FileSystem) -> List[str]:
    """Split, deduplicate and validate an explicit file list.

    Raises :class:`PathNotFound` for the first listed path that does not
    exist and :class:`InsufficientFiles` when fewer than two unique paths
    remain.
    """

    lines = [line.strip() for line in files.split("\n")]
    unique = list(dict.fromkeys(line for line in lines if line))

    for path in unique:
        if not fs.exists(path):
            raise PathNotFound(path)

    if len(unique) < MIN_FILES:
        raise InsufficientFiles()
    return unique


def resolve_search_path(
    search_path: str, search_pattern: str, fs: FileSystem
) -> List[str]:
    """List files in ``search_path`` whose names match ``search_pattern``."""

    if not search_path or not search_path.strip():
        raise EmptySearchPath()

    if not fs.exists(search_path) or not fs.is_dir(search_path):
        raise InvalidSearchPath(search_path)

    try:
        regexp = re.compile(search_pattern)
    except re.error as exc:
        raise InvalidSearchPattern(search_pattern, str(exc)) from exc

    base = normalize_dir(search_path)
    found = [
        os.path.join(base, entry.name)
        for entry in fs.list_dir(search_path)
        if not entry.is_dir and regexp.search(entry.name)
    ]

    if len(found) < MIN_FILES:
        raise InsufficientFiles()
    return found


def resolve_files(
    files: str | None,
    search_path: str | None,
    search_pattern: str | None = "",
    fs: FileSystem | None = None,
) -> List[str]:
    """Return the files to compare for the given configuration."""

    fs = fs or LocalFileSystem()
    if files and files.strip():
        resolved = resolve_explicit_files(files, fs)
        mode = "explicit"
    else:
        resolved = resolve_search_path(
            search_path or "", search_pattern or DEFAULT_SEARCH_PATTERN, fs
        )
        mode = "search_path"
    logger.debug("Resolved %d files (%s mode)", len(resolved), mode)
    return resolved


__all__ = [
    "DEFAULT_SEARCH_PATTERN",
    "MIN_FILES",
    "normalize_dir",
    "resolve_explicit_files",
    "resolve_files",
    "resolve_search_path",
]
