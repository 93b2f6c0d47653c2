"""All-pairs comparison of top-level key sets."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Set

# File path -> keys found in at least one sibling but not in the file itself.
DiffReport = Dict[str, List[str]]


def compute_diff(contents: Mapping[str, Sequence[str]]) -> DiffReport:
    """Return the keys each file is missing compared to its siblings.

    For every file, keys of every other file that the file does not have are
    collected once each, in the order they are first seen while walking the
    siblings in ``contents`` order. Files missing nothing are left out of the
    result, so identical key sets produce an empty mapping.
    """

    present = {path: set(keys) for path, keys in contents.items()}
    report: DiffReport = {}

    for path in contents:
        own = present[path]
        missing: List[str] = []
        seen: Set[str] = set()
        for sibling, keys in contents.items():
            if sibling == path:
                continue
            for key in keys:
                if key in own or key in seen:
                    continue
                seen.add(key)
                missing.append(key)
        if missing:
            report[path] = missing

    return report


__all__ = ["DiffReport", "compute_diff"]
