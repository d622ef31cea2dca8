"""
Utility modules for PropMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
- helpers: Display formatting (import from propmatch.utils.helpers)
"""

from propmatch.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    RESOURCES_DIR,
)
from propmatch.utils.constants import (
    APP_NAME,
    VERSION,
    ClientStatus,
    Furnishing,
    Intent,
    MatchReason,
    PropertyCategory,
    PropertyType,
)
from propmatch.utils.logger import (
    setup_logging,
    get_logger,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "RESOURCES_DIR",
    # Constants
    "APP_NAME",
    "VERSION",
    "ClientStatus",
    "Furnishing",
    "Intent",
    "MatchReason",
    "PropertyCategory",
    "PropertyType",
    # Logger
    "setup_logging",
    "get_logger",
    "LoggerMixin",
]
