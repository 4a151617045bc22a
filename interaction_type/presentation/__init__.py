"""
Presentation of notifications (plain text or HTML).
"""

from .renderers import HtmlRenderer, NotificationRenderer, TextRenderer

__all__ = [
    "NotificationRenderer",
    "TextRenderer",
    "HtmlRenderer"
]
