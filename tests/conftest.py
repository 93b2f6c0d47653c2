import logging
import sys
from pathlib import Path
from typing import Dict, List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from keydiff.config import get_settings  # noqa: E402
from keydiff.fs import DirEntry  # noqa: E402


class MemoryFileSystem:
    """In-memory stand-in for :class:`keydiff.fs.LocalFileSystem`."""

    def __init__(self) -> None:
        self.files: Dict[str, str] = {}
        self.dirs: Dict[str, List[DirEntry]] = {}
        self.reads: List[str] = []

    def add_file(self, path: str, text: str = "{}") -> None:
        self.files[path] = text

    def add_dir(self, path: str, entries: List[DirEntry]) -> None:
        self.dirs[path] = entries

    def exists(self, path: str) -> bool:
        return path in self.files or path in self.dirs

    def is_dir(self, path: str) -> bool:
        return path in self.dirs

    def list_dir(self, path: str) -> List[DirEntry]:
        return list(self.dirs[path])

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None


@pytest.fixture
def memfs():
    return MemoryFileSystem()


@pytest.fixture
def search_dir(memfs):
    """Directory with two matching files, a sub directory and a text file."""

    path = "/some/search/folder/"
    memfs.add_dir(
        path,
        [
            DirEntry("file1.json", False),
            DirEntry("file2.ejson", False),
            DirEntry("folder", True),
            DirEntry("file3.txt", False),
        ],
    )
    return path


@pytest.fixture(autouse=True)
def _clean_inputs(monkeypatch):
    for name in (
        "INPUT_FILES",
        "INPUT_SEARCH_PATH",
        "INPUT_SEARCH_PATTERN",
        "INPUT_LOG_LEVEL",
        "INPUT_LOG_FORMAT",
        "INPUT_REPORT_FILE",
        "GITHUB_ACTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("keydiff")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
