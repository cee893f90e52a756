"""Hookable Logging — logging port and structlog adapter."""

from hookable.logging.port import LoggingPort
from hookable.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
