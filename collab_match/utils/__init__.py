"""
Utility modules for collab-match.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from collab_match.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)
from collab_match.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    AuditAction,
    MatchScoreLevel,
    SkillLevel,
    SkillPriority,
)
from collab_match.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "AuditAction",
    "MatchScoreLevel",
    "SkillLevel",
    "SkillPriority",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
]
