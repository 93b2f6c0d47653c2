"""Entry object tying the resolver, loader and diff engine together."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .diff import DiffReport, compute_diff
from .fs import FileSystem, LocalFileSystem
from .loader import load_contents
from .resolver import resolve_files

if TYPE_CHECKING:  # pragma: no cover
    from .config import Settings


class KeyDiffAction:
    """Compare the top-level keys of a set of JSON files.

    The file list is resolved in the constructor so configuration errors
    surface before any file is read. :meth:`run` reads the files again on
    every call.
    """

    def __init__(
        self,
        files: str | None = "",
        search_path: str | None = "",
        search_pattern: str | None = "",
        fs: FileSystem | None = None,
    ) -> None:
        self._fs = fs or LocalFileSystem()
        self._file_list = resolve_files(files, search_path, search_pattern, self._fs)

    @classmethod
    def from_settings(
        cls, settings: "Settings", fs: FileSystem | None = None
    ) -> "KeyDiffAction":
        return cls(
            settings.files, settings.search_path, settings.search_pattern, fs=fs
        )

    @property
    def file_list(self) -> List[str]:
        return list(self._file_list)

    def run(self) -> DiffReport:
        """Load every file and return the missing keys per file."""

        contents = load_contents(self._file_list, self._fs)
        return compute_diff(contents)
