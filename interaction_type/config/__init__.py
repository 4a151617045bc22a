"""
Configuration Management

Centralized configuration for:
- Application settings (name, debug, log level)
- Notification output (format, console echo, logging)
"""

from .settings import (
    Settings,
    NotificationConfig,
    NotificationFormat,
    get_settings
)
from .providers import (
    get_renderer,
    get_channel,
    configure_logging
)

__all__ = [
    "Settings",
    "NotificationConfig",
    "NotificationFormat",
    "get_settings",
    "get_renderer",
    "get_channel",
    "configure_logging"
]
