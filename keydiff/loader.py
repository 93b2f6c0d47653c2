"""Read each resolved file and collect its top-level keys."""

from __future__ import annotations

import json
import logging
from typing import Dict, Iterable, List

from .errors import ParseError
from .fs import FileSystem, LocalFileSystem

# File path -> top-level keys in document order.
ContentMap = Dict[str, List[str]]

logger = logging.getLogger("keydiff.loader")


def extract_keys(text: str, path: str) -> List[str]:
    """Parse ``text`` and return its top-level property names.

    Raises :class:`ParseError` when ``text`` is not JSON or when the
    top-level value is not an object.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            path, f"File {path} is not a valid JSON document: {exc}"
        ) from exc
    except RecursionError as exc:
        raise ParseError(path, f"File {path} is nested too deeply to parse.") from exc
    if not isinstance(data, dict):
        raise ParseError(
            path, f"File {path} must contain a JSON object at the top level."
        )
    return list(data)


def load_contents(file_list: Iterable[str], fs: FileSystem | None = None) -> ContentMap:
    fs = fs or LocalFileSystem()
    contents: ContentMap = {}
    for path in file_list:
        try:
            text = fs.read_text(path)
        except UnicodeDecodeError as exc:
            raise ParseError(
                path, f"File {path} is not a valid JSON document: {exc}"
            ) from exc
        contents[path] = extract_keys(text, path)
        logger.debug("Loaded %d keys from %s", len(contents[path]), path)
    return contents


__all__ = ["ContentMap", "extract_keys", "load_contents"]
