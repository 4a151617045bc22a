"""
Renderer and Channel Provider Factory

Builds the notification renderer and channel described by the
configuration, so entry points never wire them by hand.
"""

from typing import Optional, Sequence, TextIO
import logging

from ..core.notifications import (
    CompositeChannel,
    ConsoleChannel,
    LoggingChannel,
    NotificationChannel
)
from ..presentation.renderers import HtmlRenderer, NotificationRenderer, TextRenderer
from .settings import NotificationConfig, NotificationFormat, get_settings


def get_renderer(config: NotificationConfig = None) -> NotificationRenderer:
    """Get the renderer for the configured notification format."""
    config = config or get_settings().notification
    notification_format = config.format

    if notification_format == NotificationFormat.TEXT:
        return TextRenderer()
    elif notification_format == NotificationFormat.HTML:
        return HtmlRenderer()
    else:
        raise ValueError(f"Unsupported notification format: {notification_format}")


def get_channel(
    config: NotificationConfig = None,
    stream: Optional[TextIO] = None,
    extra: Sequence[NotificationChannel] = ()
) -> CompositeChannel:
    """
    Get the notification channel for the configuration.

    Args:
        config: Notification configuration (defaults to the cached settings)
        stream: Stream for console output (defaults to stdout)
        extra: Additional channels appended after the configured ones

    Returns:
        A composite channel; it may be empty when both echo and log are off
    """
    config = config or get_settings().notification
    channel = CompositeChannel()

    if config.echo:
        channel.add(ConsoleChannel(get_renderer(config), stream))
    if config.log:
        channel.add(LoggingChannel())
    for other in extra:
        channel.add(other)

    return channel


def configure_logging(level: str = None, debug: bool = None) -> None:
    """Configure root logging for command line entry points; debug forces DEBUG."""
    settings = get_settings()
    level = level or settings.log_level
    debug = settings.debug if debug is None else debug
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
