"""Turn comparison results into log lines and an exit status."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .diff import DiffReport

logger = logging.getLogger("keydiff.report")


def report_diff(report: DiffReport, log: logging.Logger | None = None) -> int:
    """Log ``report`` and return the process exit status.

    An empty report is informational and returns ``0``. Otherwise the failure
    is logged at ERROR followed by each file and its missing keys, and ``1``
    is returned.
    """

    log = log or logger
    if not report:
        log.info("No differences found in files!!")
        return 0

    log.error("Differences found on the next files:")
    for path, missing in report.items():
        log.info(path, extra={"file": path, "missing": missing})
        for key in missing:
            log.info("- %s", key)
    return 1


def report_error(exc: BaseException, log: logging.Logger | None = None) -> int:
    (log or logger).error(str(exc))
    return 1


def write_report(report: DiffReport, path: str | Path) -> None:
    """Write ``report`` to ``path`` as indented JSON."""

    Path(path).write_text(
        json.dumps(report, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )


__all__ = ["report_diff", "report_error", "write_report"]
