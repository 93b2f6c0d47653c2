"""Report top-level keys missing between sibling JSON files."""

from .action import KeyDiffAction
from .diff import DiffReport, compute_diff
from .errors import (
    EmptySearchPath,
    InsufficientFiles,
    InvalidSearchPath,
    InvalidSearchPattern,
    KeyDiffError,
    ParseError,
    PathNotFound,
)
from .fs import DirEntry, FileSystem, LocalFileSystem
from .loader import ContentMap, load_contents
from .resolver import DEFAULT_SEARCH_PATTERN, resolve_files

__version__ = "1.0.0"

__all__ = [
    "ContentMap",
    "DEFAULT_SEARCH_PATTERN",
    "DiffReport",
    "DirEntry",
    "EmptySearchPath",
    "FileSystem",
    "InsufficientFiles",
    "InvalidSearchPath",
    "InvalidSearchPattern",
    "KeyDiffAction",
    "KeyDiffError",
    "LocalFileSystem",
    "ParseError",
    "PathNotFound",
    "compute_diff",
    "load_contents",
    "resolve_files",
]
