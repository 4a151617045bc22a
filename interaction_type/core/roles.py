"""
Roles

A role is the abstraction for the behaviour assumed by an active entity
during an interaction. Roles carry no entity-specific data, so a single
Sender or Receiver instance may be shared by many active entities and
reassigned between activations.

RoleKind is the one source of truth for both the role's display name and
the partitioning performed by the communication infrastructure.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .exceptions import RoleCapabilityError
from .notifications import (
    Notification,
    NotificationChannel,
    NotificationKind,
    default_channel
)

if TYPE_CHECKING:
    from .entities import ActiveEntity


class RoleKind(str, Enum):
    """Closed set of role kinds."""
    SENDER = "Sender"
    RECEIVER = "Receiver"


class Role(ABC):
    """
    Abstraction for the role assumed by an active entity during an interaction.
    """

    @property
    @abstractmethod
    def kind(self) -> RoleKind:
        """Kind of this role."""
        pass

    @property
    def name(self) -> str:
        return self.kind.value

    def send_message_to_from(
        self,
        text: Optional[str],
        to_receiver: "ActiveEntity",
        from_sender: "ActiveEntity",
        channel: Optional[NotificationChannel] = None
    ) -> None:
        raise RoleCapabilityError(f"Role {self.name} cannot send messages")

    def receive_message_from_to(
        self,
        text: Optional[str],
        from_sender: "ActiveEntity",
        to_receiver: "ActiveEntity",
        channel: Optional[NotificationChannel] = None
    ) -> None:
        raise RoleCapabilityError(f"Role {self.name} cannot receive messages")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Sender(Role):
    """
    Qualifies an active entity to send a message.

    The message to send is defined by the interaction type or by the
    active entity itself.
    """

    @property
    def kind(self) -> RoleKind:
        return RoleKind.SENDER

    def send_message_to_from(
        self,
        text: Optional[str],
        to_receiver: "ActiveEntity",
        from_sender: "ActiveEntity",
        channel: Optional[NotificationChannel] = None
    ) -> None:
        """
        Send the text to the given receiver from the given sender.

        Nothing happens when the text is empty. Otherwise the transmission
        is published and the receiver's role is invoked directly, before
        this call returns.
        """
        if not text:
            return

        channel = channel if channel is not None else default_channel()
        channel.publish(Notification(
            kind=NotificationKind.SENT,
            sender=from_sender.name,
            receiver=to_receiver.name,
            text=text
        ))
        to_receiver.role.receive_message_from_to(text, from_sender, to_receiver, channel)


class Receiver(Role):
    """
    Qualifies an active entity to receive a message.
    """

    @property
    def kind(self) -> RoleKind:
        return RoleKind.RECEIVER

    def receive_message_from_to(
        self,
        text: Optional[str],
        from_sender: "ActiveEntity",
        to_receiver: "ActiveEntity",
        channel: Optional[NotificationChannel] = None
    ) -> None:
        """Receive the text from the given sender. Terminal step of a dispatch."""
        if not text:
            return

        channel = channel if channel is not None else default_channel()
        channel.publish(Notification(
            kind=NotificationKind.RECEIVED,
            sender=from_sender.name,
            receiver=to_receiver.name,
            text=text
        ))
