"""Configuration subpackage."""

from service_message_formatting.config.config import (
    AppSettings,
    FormattingSettings,
    LoggingSettings,
    Settings,
    StyleSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "FormattingSettings",
    "LoggingSettings",
    "Settings",
    "StyleSettings",
    "get_settings",
]
