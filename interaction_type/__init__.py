"""
Interaction Type Framework

A micro framework implementing the Interaction Type approach to
Relationships Management, based on the paper "The interaction type
approach to relationships management" (G. Nota & R. Aiello,
Journal of Ambient Intelligence and Humanized Computing, Vol. 8).

Active entities (organizations, individuals or automated components)
take a role inside a relationship. An interaction type gives shape to
one kind of interaction, and the communication infrastructure activates
it by dispatching messages from senders to receivers.
"""

from .core.entities import ActiveEntity, InteractionType, Message, Relationship
from .core.exceptions import (
    InteractionTypeError,
    InvalidComponentError,
    RoleCapabilityError
)
from .core.roles import Receiver, Role, RoleKind, Sender
from .infrastructure.communication import CommunicationInfrastructure

__version__ = "0.1.0"

__all__ = [
    "ActiveEntity",
    "InteractionType",
    "Message",
    "Relationship",
    "Role",
    "RoleKind",
    "Sender",
    "Receiver",
    "CommunicationInfrastructure",
    "InteractionTypeError",
    "InvalidComponentError",
    "RoleCapabilityError"
]
