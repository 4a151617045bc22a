"""
Notification Renderers

Turn notifications and interaction type structures into strings. The
core never depends on a renderer; renderers are used by console
channels and by the demonstration entry point.
"""

from abc import ABC, abstractmethod
from html import escape

from ..core.entities import InteractionType
from ..core.notifications import Notification, NotificationKind


class NotificationRenderer(ABC):
    """Abstract renderer for notifications and structure information."""

    @abstractmethod
    def render(self, notification: Notification) -> str:
        """Render one notification."""
        pass

    @abstractmethod
    def render_structure(self, interaction: InteractionType) -> str:
        """Render the structure of an interaction type."""
        pass


class TextRenderer(NotificationRenderer):
    """Plain text output."""

    SENT_TEMPLATE = "The sender {sender} send the message '{text}' to the receiver {receiver}"
    RECEIVED_TEMPLATE = "The receiver {receiver} received the message '{text}' from the sender {sender}"

    def render(self, notification: Notification) -> str:
        if notification.kind == NotificationKind.SENT:
            template = self.SENT_TEMPLATE
        else:
            template = self.RECEIVED_TEMPLATE
        return template.format(
            sender=notification.sender,
            receiver=notification.receiver,
            text=notification.text
        )

    def render_structure(self, interaction: InteractionType) -> str:
        entities = "  ".join(
            f"{entity.name} ({entity.role.name})"
            for entity in interaction.relation.active_entities
        )
        lines = [
            "Structure information:",
            f"  Interaction Type: {interaction.name}",
            f"  Relationship: {interaction.relation.name}",
            f"  Active Entities: {entities}"
        ]
        return "\n".join(lines)


class HtmlRenderer(NotificationRenderer):
    """HTML fragments for web pages."""

    SENT_TEMPLATE = (
        "<p style='color: #1c7430'>The sender <b>{sender}</b> send the message "
        "'<b><i>{text}</i></b>' to the receiver <b>{receiver}</b></p>"
    )
    RECEIVED_TEMPLATE = (
        "<p style=\"color: red\">The receiver <b>{receiver}</b> received the message "
        "'<b><i>{text}</i></b>' from the sender <b>{sender}</b></p>"
    )

    def render(self, notification: Notification) -> str:
        if notification.kind == NotificationKind.SENT:
            template = self.SENT_TEMPLATE
        else:
            template = self.RECEIVED_TEMPLATE
        return template.format(
            sender=escape(notification.sender),
            receiver=escape(notification.receiver),
            text=escape(notification.text)
        )

    def render_structure(self, interaction: InteractionType) -> str:
        entities = "  ".join(
            f"<b>{escape(entity.name)}</b><sup>({entity.role.name})</sup>"
            for entity in interaction.relation.active_entities
        )
        return (
            "<p style='background-color: #d3d9df'>Structure information: <br>"
            f"Interaction Type: <b>{escape(interaction.name)}</b><br>"
            f"Relationship: <b>{escape(interaction.relation.name)}</b><br>"
            f"Active Entities: {entities}<br></p>"
        )
