"""Logger factory for creating isolated logging environments."""

import logging
import threading
from typing import Any, Dict, Optional, Union, Protocol
from pathlib import Path
from contextlib import contextmanager


from .log_formatters import StructuredFormatter, JobFilterRichHandler, LogContext


class LoggerFactory(Protocol):
    """Protocol for logger factories to enable dependency injection."""

    def create_logger(self, name: str) -> logging.Logger:
        """Create a logger instance."""

    def shutdown(self) -> None:
        """Shutdown the logging system."""


class IsolatedLogManager:
    """Non-singleton log manager for isolated logging environments."""

    def __init__(self, namespace: str = "", context: Optional[LogContext] = None) -> None:
        """Initialize isolated log manager.

        Args:
            namespace: Namespace prefix for logger names to ensure isolation
            context: Shared context store, a private one is created if omitted
        """
        self._namespace = namespace
        self._configured = False
        self._log_file: Optional[Path] = None
        self._json_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None
        self._loggers: Dict[str, logging.Logger] = {}
        self._context = context if context is not None else LogContext()
        self._lock = threading.RLock()

    def configure(self,
                  level: Union[int, str] = logging.INFO,
                  log_file: Optional[Path] = None,
                  enable_json: bool = True,
                  enable_console: bool = True,
                  console_level: Optional[Union[int, str]] = None) -> None:
        """Configure this logging instance."""
        with self._lock:
            # Reconfiguration replaces handlers on every known logger
            if self._configured:
                self._clear_configuration()

            if isinstance(level, str):
                level = level.upper()

            if enable_json and log_file:
                self._log_file = Path(log_file)
                self._log_file.parent.mkdir(parents=True, exist_ok=True)

                self._json_handler = logging.FileHandler(self._log_file)
                self._json_handler.setFormatter(
                    StructuredFormatter(
                        include_context=True, context_getter=self._context.get_context
                    )
                )
                self._json_handler.setLevel(level)

            if enable_console:
                console_level = console_level or level
                if isinstance(console_level, str):
                    console_level = console_level.upper()
                self._console_handler = JobFilterRichHandler(
                    show_time=True,
                    show_path=False,
                    markup=True
                )
                self._console_handler.setLevel(console_level)

            for logger in self._loggers.values():
                self._attach_handlers(logger)

            self._configured = True

    def create_logger(self, name: str) -> logging.Logger:
        """Create a logger instance with namespace isolation."""
        with self._lock:
            full_name = f"{self._namespace}.{name}" if self._namespace else name

            if full_name in self._loggers:
                return self._loggers[full_name]

            logger = logging.getLogger(full_name)

            # Keep records out of the root logger
            logger.propagate = False
            logger.setLevel(logging.DEBUG)
            self._attach_handlers(logger)

            self._loggers[full_name] = logger
            return logger

    @contextmanager
    def context(self, **kwargs: Any):
        """Context manager for temporary context variables."""
        with self._context.context(**kwargs):
            yield

    def reset(self) -> None:
        """Drop handlers but keep the registry of created loggers."""
        with self._lock:
            self._clear_configuration()

    def shutdown(self) -> None:
        """Shutdown this logging instance."""
        with self._lock:
            self._clear_configuration()
            self._loggers.clear()
            self._context.clear_context()

    def _attach_handlers(self, logger: logging.Logger) -> None:
        if self._json_handler and self._json_handler not in logger.handlers:
            logger.addHandler(self._json_handler)
        if self._console_handler and self._console_handler not in logger.handlers:
            logger.addHandler(self._console_handler)

    def _clear_configuration(self) -> None:
        """Clear current configuration and handlers."""
        for logger in self._loggers.values():
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)

        if self._json_handler:
            try:
                self._json_handler.close()
            except (OSError, RuntimeError):
                pass  # Ignore handler close errors
            self._json_handler = None

        if self._console_handler:
            try:
                self._console_handler.close()
            except (OSError, RuntimeError):
                pass  # Ignore handler close errors
            self._console_handler = None

        self._log_file = None
        self._configured = False


class StandardLoggerFactory:
    """Standard implementation of LoggerFactory using IsolatedLogManager."""

    def __init__(self,
                 namespace: Optional[str] = None,
                 level: Union[int, str] = logging.INFO,
                 log_file: Optional[Path] = None,
                 enable_json: bool = True,
                 enable_console: bool = True,
                 console_level: Optional[Union[int, str]] = None) -> None:
        """Initialize standard logger factory.

        Args:
            namespace: Namespace for logger isolation
            level: Default logging level
            log_file: Optional log file path
            enable_json: Whether to enable JSON file logging
            enable_console: Whether to enable console logging
            console_level: Console logging level (defaults to level)
        """
        self._manager = IsolatedLogManager(namespace or "")
        self._manager.configure(
            level=level,
            log_file=log_file,
            enable_json=enable_json,
            enable_console=enable_console,
            console_level=console_level
        )

    def create_logger(self, name: str) -> logging.Logger:
        """Create a logger instance."""
        return self._manager.create_logger(name)

    def shutdown(self) -> None:
        """Shutdown the logging system."""
        self._manager.shutdown()

    @contextmanager
    def context(self, **kwargs: Any):
        """Context manager for temporary context variables."""
        with self._manager.context(**kwargs):
            yield
