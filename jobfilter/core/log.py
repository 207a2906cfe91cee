"""Structured logging system with JSON output and rich terminal formatting."""

import logging
from typing import Any, Dict, Optional, Union, Protocol
from pathlib import Path

from .log_formatters import _log_context
from .logger_factory import IsolatedLogManager


class Logger(Protocol):
    """Protocol for logger instances to enable dependency injection."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""


class LogManager:
    """Central logging configuration and management.

    Thin wrapper around one IsolatedLogManager so package code can call
    get_logger() at import time and have handlers attached later.
    """

    def __init__(self, namespace: str = "jobfilter") -> None:
        self._manager = IsolatedLogManager(namespace, context=_log_context)
        self._configured = False

    def configure(
        self,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        enable_json: bool = True,
        enable_console: bool = True,
        console_level: Optional[Union[int, str]] = None,
    ) -> None:
        """Configure logging system. Later calls are ignored until reset."""
        if self._configured:
            return

        self._manager.configure(
            level=level,
            log_file=log_file,
            enable_json=enable_json,
            enable_console=enable_console,
            console_level=console_level,
        )
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance."""
        return self._manager.create_logger(name)

    def shutdown(self) -> None:
        """Shutdown logging system."""
        self._manager.shutdown()
        self._configured = False

    def reset_configuration(self) -> None:
        """Reset configuration to allow reconfiguration."""
        self._configured = False
        self._manager.reset()


# Global log manager instance
_log_manager = LogManager()


def configure_logging(**kwargs: Any) -> None:
    """Configure the global logging system."""
    _log_manager.configure(**kwargs)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return _log_manager.get_logger(name)


def shutdown_logging() -> None:
    """Shutdown the logging system."""
    _log_manager.shutdown()


def reset_logging() -> None:
    """Reset logging configuration to allow reconfiguration."""
    _log_manager.reset_configuration()


def log_event(
    logger: Logger, event_type: str, message: str, **kwargs: Any
) -> None:
    """Log a structured event with context."""
    logger.info(message, extra={"event_type": event_type, **kwargs})


def log_filter_event(
    logger: Logger,
    event: str,
    regex: Optional[str] = None,
    value_type: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """Log a filter lifecycle event (created, restored)."""
    extra: Dict[str, Any] = {"event_type": "filter", "filter_event": event}
    if regex is not None:
        extra["regex"] = regex
    if value_type is not None:
        extra["value_type"] = value_type
    extra.update(kwargs)
    logger.debug("Filter %s %s (%s)", regex, event, value_type, extra=extra)


def log_selection_event(
    logger: Logger, event: str, selected: int, total: int, **kwargs: Any
) -> None:
    """Log a selection summary."""
    extra: Dict[str, Any] = {
        "event_type": "selection",
        "selection_event": event,
        "selected": selected,
        "total": total,
    }
    extra.update(kwargs)
    logger.info("Selection %s: %s/%s matched", event, selected, total, extra=extra)


# Context management shortcuts
def set_log_context(**kwargs: Any) -> None:
    """Set logging context for current thread."""
    _log_context.set_context(**kwargs)


def get_log_context() -> Dict[str, Any]:
    """Get current logging context."""
    return _log_context.get_context()


def clear_log_context() -> None:
    """Clear current logging context."""
    _log_context.clear_context()


def log_context(**kwargs: Any) -> Any:
    """Context manager for temporary logging context."""
    return _log_context.context(**kwargs)
