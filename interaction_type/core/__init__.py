"""
Core structural elements of the Interaction Type approach.

- Message: text exchanged during an interaction
- Role: capability assumed by an active entity (Sender, Receiver)
- ActiveEntity: organization, individual or automated component
- Relationship: connection through which active entities interact
- InteractionType: the form given to one kind of interaction
- Notification: what a role publishes when it sends or receives
"""

from .entities import ActiveEntity, InteractionType, Message, Relationship
from .exceptions import InteractionTypeError, InvalidComponentError, RoleCapabilityError
from .notifications import (
    CompositeChannel,
    ConsoleChannel,
    LoggingChannel,
    Notification,
    NotificationChannel,
    NotificationKind,
    RecordingChannel,
    default_channel
)
from .roles import Receiver, Role, RoleKind, Sender

__all__ = [
    "ActiveEntity",
    "InteractionType",
    "Message",
    "Relationship",
    "Role",
    "RoleKind",
    "Sender",
    "Receiver",
    "Notification",
    "NotificationKind",
    "NotificationChannel",
    "LoggingChannel",
    "ConsoleChannel",
    "RecordingChannel",
    "CompositeChannel",
    "default_channel",
    "InteractionTypeError",
    "InvalidComponentError",
    "RoleCapabilityError"
]
