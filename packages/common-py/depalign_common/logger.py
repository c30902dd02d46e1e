"""
depalign Logging

Thin structured wrapper over the standard logging module. Keyword arguments
passed to a log call are attached as context and rendered after the message:

    logger = get_logger(__name__)
    logger.info("Installing dev dependencies", count=3, installer="npm")
    # 2026-01-01 12:00:00 INFO depalign_sdk.align: Installing dev dependencies count=3 installer=npm
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

_ROOT_LOGGER_NAME = "depalign"
_CONTEXT_ATTR = "depalign_context"


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context: Dict[str, Any] = getattr(record, _CONTEXT_ATTR, {}) or {}
        if not context:
            return base
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{base} {pairs}"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, _CONTEXT_ATTR, {}) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class DepAlignLogger:
    """
    Logger accepting structured keyword context.

    Wraps a standard ``logging.Logger`` so handlers and levels configured via
    ``configure_logging`` apply unchanged.
    """

    def __init__(self, name: str):
        if name != _ROOT_LOGGER_NAME and not name.startswith(f"{_ROOT_LOGGER_NAME}."):
            name = f"{_ROOT_LOGGER_NAME}.{name}"
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, exc_info: Any = None, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, message, exc_info=exc_info, extra={_CONTEXT_ATTR: context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: Any = None, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def isEnabledFor(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)


_loggers: Dict[str, DepAlignLogger] = {}


def get_logger(name: str) -> DepAlignLogger:
    """
    Get (or create) a named logger under the ``depalign`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        DepAlignLogger instance
    """
    if name not in _loggers:
        _loggers[name] = DepAlignLogger(name)
    return _loggers[name]


def configure_logging(
    level: str = "info",
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> None:
    """
    Configure the ``depalign`` logger hierarchy.

    Calling it again replaces the previously installed handler, so the CLI
    can reconfigure per invocation.

    Args:
        level: debug, info, warning or error
        json_format: Emit one JSON object per line instead of text
        stream: Output stream (defaults to stderr)
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(
            _TextFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s", "%Y-%m-%d %H:%M:%S")
        )
    root.addHandler(handler)
    root.propagate = False
