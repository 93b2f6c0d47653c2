"""Fail when sibling JSON files do not share the same top-level keys.

Files are given either explicitly (``--files``, one path per line) or found
in ``--search-path`` by a regular expression on their names. Every option
falls back to the matching ``INPUT_*`` environment variable.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Sequence

from pydantic import ValidationError

from .action import KeyDiffAction
from .config import Settings, effective_log_format, get_settings
from .errors import KeyDiffError
from .obs.logging import configure_logging
from .report import report_diff, report_error, write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keydiff",
        description="Report top-level keys missing between sibling JSON files",
    )
    parser.add_argument(
        "--files",
        action="append",
        help="Newline separated file paths; may be given more than once",
    )
    parser.add_argument(
        "--search-path", help="Directory to scan when no files are listed"
    )
    parser.add_argument(
        "--search-pattern",
        help=r"Regular expression for file names in the search path (default: \.json$)",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument(
        "--log-format",
        choices=["auto", "text", "json", "github"],
        help="Log output format (default: auto)",
    )
    parser.add_argument(
        "--report-file", help="Also write the missing keys to this JSON file"
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay command-line options that were given on ``base``.

    The merged values are validated again, so a bad ``--log-level`` fails the
    same way as a bad ``INPUT_LOG_LEVEL``.
    """

    update: Dict[str, Any] = {}
    if args.files:
        update["files"] = "\n".join(args.files)
    for name in ("search_path", "search_pattern", "log_level", "log_format", "report_file"):
        value = getattr(args, name)
        if value is not None:
            update[name] = value
    return Settings.model_validate({**base.model_dump(), **update})


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args, get_settings())
    except ValidationError as exc:
        log = configure_logging(
            logging.INFO, effective_log_format(Settings.model_construct())
        )
        return report_error(exc, log)
    log = configure_logging(settings.log_level, effective_log_format(settings))

    try:
        action = KeyDiffAction.from_settings(settings)
        report = action.run()
    except (KeyDiffError, OSError) as exc:
        return report_error(exc, log)

    status = report_diff(report, log)
    if settings.report_file:
        try:
            write_report(report, settings.report_file)
        except OSError as exc:
            return report_error(exc, log)
    return status
