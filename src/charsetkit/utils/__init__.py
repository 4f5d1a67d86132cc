"""Utility modules for charsetkit."""

from .config import (
    CharsetKitConfig,
    ServiceConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config_from_file
)

from .error_handler import (
    ErrorSeverity,
    CharsetKitError,
    ErrorHandler,
    create_error_handler
)

from .file_io import read_all_bytes, write_all_bytes

__all__ = [
    # Configuration
    "CharsetKitConfig",
    "ServiceConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config_from_file",

    # Error handling
    "ErrorSeverity",
    "CharsetKitError",
    "ErrorHandler",
    "create_error_handler",

    # File access
    "read_all_bytes",
    "write_all_bytes",
]
