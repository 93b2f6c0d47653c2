"""Errors raised while resolving and comparing key files.

Every error is terminal for the current run. The command-line entry point
turns the message into a failure report and a non-zero exit status.
"""

from __future__ import annotations


class KeyDiffError(Exception):
    """Base class for configuration and content errors."""

    code = "keydiff_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptySearchPath(KeyDiffError):
    """Search-path mode selected but no directory configured."""

    code = "empty_search_path"

    def __init__(self) -> None:
        super().__init__("Search path can't be empty.")


class InvalidSearchPath(KeyDiffError):
    """Search path is missing or is not a directory."""

    code = "invalid_search_path"

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Invalid path '{path}', path should exist and be a directory."
        )
        self.path = path


class InvalidSearchPattern(KeyDiffError):
    """Search pattern is not a valid regular expression."""

    code = "invalid_search_pattern"

    def __init__(self, pattern: str, detail: str) -> None:
        super().__init__(f"Invalid search pattern '{pattern}': {detail}")
        self.pattern = pattern


class InsufficientFiles(KeyDiffError):
    """Fewer than two files are left to compare."""

    code = "insufficient_files"

    def __init__(self) -> None:
        super().__init__("You need at least 2 files to be compared.")


class PathNotFound(KeyDiffError):
    """An explicitly listed file does not exist."""

    code = "path_not_found"

    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} not found.")
        self.path = path


class ParseError(KeyDiffError):
    """A file could not be read as a JSON object document."""

    code = "parse_error"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "KeyDiffError",
    "EmptySearchPath",
    "InvalidSearchPath",
    "InvalidSearchPattern",
    "InsufficientFiles",
    "PathNotFound",
    "ParseError",
]
