"""
Logging configuration with optional Logfire export for the DocumentAtom SDK.

The SDK itself only reports through the severity sink handed to
``DocumentAtomSdk``; this module supplies the package loggers that such a
sink usually forwards to (see ``severity_sink``).
"""

import os
import sys
import logging
import functools
from typing import Optional, Dict, Any, Callable
from datetime import datetime

import logfire

from .enums import Severity
from .exceptions import DocumentAtomError


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_logfire_configured = False


class DocumentAtomLogger:
    """Logger wrapper that attaches structured context to every record."""

    def __init__(self, name: str, level: str = "INFO"):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Prevent duplicate handlers
        if not self.logger.handlers:
            self._setup_handlers(level)

    def _setup_handlers(self, level: str):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(console_handler)

        if _logfire_configured:
            self.logger.addHandler(logfire.LogfireLoggingHandler(getattr(logging, level.upper())))

    def set_level(self, level: str):
        """Change the threshold of the logger and its handlers."""
        numeric = getattr(logging, level.upper())
        self.logger.setLevel(numeric)
        for handler in self.logger.handlers:
            handler.setLevel(numeric)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, exc_info=None, **kwargs):
        self.logger.error(message, exc_info=exc_info, extra=kwargs)

    def critical(self, message: str, exc_info=None, **kwargs):
        self.logger.critical(message, exc_info=exc_info, extra=kwargs)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None):
        """Log error with full context."""
        error_info = {
            "error_type": type(error).__name__,
            "error_message": str(error)
        }

        if isinstance(error, DocumentAtomError):
            error_info.update({
                "error_code": error.error_code,
                "error_details": error.details
            })

        if context:
            error_info.update(context)

        self.error(
            f"Error occurred: {error}",
            exc_info=True,
            **error_info
        )


_loggers: Dict[str, DocumentAtomLogger] = {}


def get_logger(name: str, level: str = "INFO") -> DocumentAtomLogger:
    """Get or create a logger instance."""
    if name not in _loggers:
        _loggers[name] = DocumentAtomLogger(name, level)
    return _loggers[name]


def setup_logfire(
    token: Optional[str] = None,
    service_name: str = "documentatom-sdk",
    service_version: str = "0.1.0",
    environment: str = "production"
) -> bool:
    """Configure Logfire export; returns False when no token is available."""
    global _logfire_configured

    token = token or os.getenv("LOGFIRE_TOKEN")
    if not token:
        return False

    logfire.configure(
        token=token,
        service_name=service_name,
        service_version=service_version,
        environment=environment,
        send_to_logfire=True,
        console=False,  # console output goes through the stream handler
    )
    _logfire_configured = True

    for wrapper in _loggers.values():
        if not any(isinstance(h, logfire.LogfireLoggingHandler) for h in wrapper.logger.handlers):
            wrapper.logger.addHandler(logfire.LogfireLoggingHandler(wrapper.logger.level))
    return True


_SEVERITY_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.ALERT: logging.CRITICAL,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.EMERGENCY: logging.CRITICAL,
}


def severity_sink(logger: DocumentAtomLogger) -> Callable[[Severity, str], None]:
    """Adapt a package logger into the SDK's (severity, message) sink."""
    def sink(severity: Severity, message: str) -> None:
        logger.logger.log(_SEVERITY_LEVELS[severity], message, extra={"severity": str(severity)})
    return sink


def log_async_function_call(logger_name: Optional[str] = None):
    """Decorator to log entry, completion and failure of coroutines."""
    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(logger_name or func.__module__)

            logger.debug(
                f"Entering async {func.__name__}",
                function=func.__name__,
                args_count=len(args),
                kwargs_keys=list(kwargs.keys())
            )

            start_time = datetime.now()

            try:
                result = await func(*args, **kwargs)

                execution_time = (datetime.now() - start_time).total_seconds()
                logger.debug(
                    f"Completed async {func.__name__}",
                    function=func.__name__,
                    execution_time=execution_time,
                    success=True
                )

                return result

            except Exception as e:
                execution_time = (datetime.now() - start_time).total_seconds()
                logger.error(
                    f"Exception in async {func.__name__}: {e}",
                    function=func.__name__,
                    execution_time=execution_time,
                    success=False,
                    error_type=type(e).__name__,
                    exc_info=True
                )
                raise

        return wrapper
    return decorator
