"""Observability helpers."""

from .logging import (  # re-export
    ActionsFormatter,
    JsonFormatter,
    TextFormatter,
    configure_logging,
)

__all__ = ["ActionsFormatter", "JsonFormatter", "TextFormatter", "configure_logging"]
