import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

_ACTIONS_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def _escape_command_data(text: str) -> str:
    """Escape characters GitHub treats specially in workflow command data."""
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class JsonFormatter(logging.Formatter):
    """Render logs as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for attr in ("file", "missing"):
            value = getattr(record, attr, None)
            if value is not None:
                data[attr] = value
        return json.dumps(data)


class ActionsFormatter(logging.Formatter):
    """Render logs as GitHub Actions workflow commands."""

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        command = _ACTIONS_COMMANDS.get(record.levelno)
        if command is None:
            # Plain lines must not start a workflow command on a later line.
            return msg.replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{_escape_command_data(msg)}"


class TextFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("%(levelname)s %(message)s")


_FORMATTERS = {
    "json": JsonFormatter,
    "github": ActionsFormatter,
    "text": TextFormatter,
}


def configure_logging(
    level: int | str = logging.INFO, fmt: str = "text", stream: IO[str] | None = None
) -> logging.Logger:
    """Configure the ``keydiff`` logger with the formatter named ``fmt``."""

    try:
        formatter = _FORMATTERS[fmt]()
    except KeyError as exc:
        raise ValueError(f"Unsupported log format: {fmt}") from exc

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger("keydiff")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
