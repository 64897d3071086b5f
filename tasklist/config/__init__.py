"""
Tasklist - Configuration
"""
from .settings import Settings, DatabaseSettings, StoreSettings, ServerSettings, settings
from .logging import (
    setup_logging,
    get_logger,
    log_error,
    request_id_var,
    JSONFormatter,
    ColoredFormatter,
)

__all__ = [
    "Settings",
    "DatabaseSettings",
    "StoreSettings",
    "ServerSettings",
    "settings",
    # Logging
    "setup_logging",
    "get_logger",
    "log_error",
    "request_id_var",
    "JSONFormatter",
    "ColoredFormatter",
]
