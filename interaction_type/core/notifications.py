"""
Notifications - the Presentation Boundary

Every transmission and reception performed by a role produces a
Notification. The core only guarantees the content and order of
notifications; channels decide where they go (log, console, memory).
"""

from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import Optional, TextIO
import logging
import sys

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    """What happened to a message."""
    SENT = "sent"
    RECEIVED = "received"


class Notification(BaseModel):
    """A single transmission or reception, named by sender, receiver and text."""
    model_config = ConfigDict(frozen=True)

    kind: NotificationKind = Field(description="Whether the message was sent or received")
    sender: str = Field(description="Name of the active entity acting as sender")
    receiver: str = Field(description="Name of the active entity acting as receiver")
    text: str = Field(description="The dispatched message text")

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.sender} -> {self.receiver}: {self.text}"


class NotificationChannel(ABC):
    """
    Abstract sink for notifications.

    Channels are collaborators of the communication infrastructure and
    receive notifications synchronously, in dispatch order.
    """

    @abstractmethod
    def publish(self, notification: Notification) -> None:
        """Deliver one notification."""
        pass


class LoggingChannel(NotificationChannel):
    """Emits one structured log record per notification."""

    def __init__(self, level: int = logging.INFO, log: Optional[logging.Logger] = None):
        self.level = level
        self.logger = log or logger

    def publish(self, notification: Notification) -> None:
        self.logger.log(
            self.level,
            "%s %s -> %s: %s",
            notification.kind.value,
            notification.sender,
            notification.receiver,
            notification.text,
            extra={"notification": notification.model_dump(mode="json")}
        )


class ConsoleChannel(NotificationChannel):
    """Writes rendered notifications to a text stream."""

    def __init__(self, renderer, stream: Optional[TextIO] = None):
        self.renderer = renderer
        self.stream = stream

    def publish(self, notification: Notification) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.renderer.render(notification) + "\n")


class RecordingChannel(NotificationChannel):
    """Keeps every notification in memory, in publication order."""

    def __init__(self):
        self._notifications: list[Notification] = []

    def publish(self, notification: Notification) -> None:
        self._notifications.append(notification)

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def sent(self) -> list[Notification]:
        return [n for n in self._notifications if n.kind == NotificationKind.SENT]

    @property
    def received(self) -> list[Notification]:
        return [n for n in self._notifications if n.kind == NotificationKind.RECEIVED]

    def clear(self) -> None:
        self._notifications.clear()

    def __len__(self) -> int:
        return len(self._notifications)


class CompositeChannel(NotificationChannel):
    """Fans a notification out to several channels, in order."""

    def __init__(self, *channels: NotificationChannel):
        self.channels = list(channels)

    def add(self, channel: NotificationChannel) -> None:
        self.channels.append(channel)

    def publish(self, notification: Notification) -> None:
        for channel in self.channels:
            channel.publish(notification)


@lru_cache()
def default_channel() -> NotificationChannel:
    """Channel used when a role is invoked without an explicit one."""
    return LoggingChannel()
