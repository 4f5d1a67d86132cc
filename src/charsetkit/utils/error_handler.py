"""Standardized error handling utilities for charsetkit."""

from typing import Optional, Callable, Any, Dict
from aiologger import Logger


class ErrorSeverity:
    """Error severity levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class CharsetKitError(Exception):
    """Base exception class for charsetkit errors."""

    def __init__(self, message: str, severity: str = ErrorSeverity.ERROR,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.context = context or {}


class ErrorHandler:
    """Centralized error reporting for charsetkit front ends.

    The engine itself never raises for malformed input; what reaches this
    handler is I/O failure from the file collaborator or a usage error.
    """

    def __init__(self, logger: Logger, reporter: Optional[Callable[[str], None]] = None):
        self.logger = logger
        self.reporter = reporter
        self._error_callbacks = []

    def add_error_callback(self, callback: Callable[[CharsetKitError], None]):
        """Add a callback to be called when errors occur."""
        self._error_callbacks.append(callback)

    async def handle_error(self, error: Exception, context: Optional[Dict[str, Any]] = None,
                          user_message: Optional[str] = None) -> CharsetKitError:
        """Handle an error with appropriate logging and user notification."""

        if isinstance(error, CharsetKitError):
            wrapped = error
        else:
            wrapped = CharsetKitError(
                f"{type(error).__name__}: {error}",
                severity=ErrorSeverity.ERROR,
                context=context or {}
            )

        await self._log_error(wrapped)

        if self.reporter and user_message:
            self.reporter(user_message)

        for callback in self._error_callbacks:
            try:
                callback(wrapped)
            except Exception as cb_error:
                await self.logger.error(f"Error in error callback: {cb_error}")

        return wrapped

    async def _log_error(self, error: CharsetKitError) -> None:
        """Log an error with appropriate severity."""
        log_message = f"{error.message}"
        if error.context:
            log_message += f" Context: {error.context}"

        if error.severity == ErrorSeverity.DEBUG:
            await self.logger.debug(log_message)
        elif error.severity == ErrorSeverity.INFO:
            await self.logger.info(log_message)
        elif error.severity == ErrorSeverity.WARNING:
            await self.logger.warning(log_message)
        elif error.severity == ErrorSeverity.ERROR:
            await self.logger.error(log_message)
        elif error.severity == ErrorSeverity.CRITICAL:
            await self.logger.critical(log_message)


def create_error_handler(logger: Logger, reporter: Optional[Callable[[str], None]] = None) -> ErrorHandler:
    """Factory function to create an error handler."""
    return ErrorHandler(logger, reporter)
