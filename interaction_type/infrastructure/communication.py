"""
Communication Infrastructure

A basic infrastructure used for activating interaction types. Activating
an interaction type produces an interaction: every active entity acting
as a sender dispatches its message to every active entity acting as a
receiver, synchronously and in a deterministic order.
"""

from typing import Iterable, Optional
import logging

from ..core.entities import ActiveEntity, InteractionType, Message
from ..core.exceptions import InvalidComponentError
from ..core.notifications import NotificationChannel, default_channel
from ..core.roles import RoleKind


logger = logging.getLogger(__name__)


class CommunicationInfrastructure:
    """
    Creates the links and message interchange occurring when an
    interaction type is activated.

    The infrastructure keeps no state between activations; the channel
    is only the collaborator notifications are published to.
    """

    def __init__(self, channel: Optional[NotificationChannel] = None):
        self.channel = channel

    def activate_interaction(self, interaction: InteractionType) -> None:
        """
        Activate the interaction type.

        Senders form the outer loop and receivers the inner loop, both in
        relationship order. Each sender uses its own message text when it
        has one and the interaction type's default message otherwise.
        Dispatches with no text are skipped silently.
        """
        if not isinstance(interaction, InteractionType):
            raise InvalidComponentError(
                f"Expected an InteractionType, got {type(interaction).__name__}"
            )

        channel = self.channel if self.channel is not None else default_channel()
        default_message = interaction.message
        senders, receivers = self.partition(interaction.relation.active_entities)

        logger.debug(
            "Activating interaction type %r on relationship %r: %d sender(s) x %d receiver(s)",
            interaction.name,
            interaction.relation.name,
            len(senders),
            len(receivers)
        )

        for sender in senders:
            text = self.resolve_text(sender, default_message)
            for receiver in receivers:
                if not text:
                    logger.debug(
                        "No message text for %s -> %s, dispatch skipped",
                        sender.name,
                        receiver.name
                    )
                sender.role.send_message_to_from(text, receiver, sender, channel)

    def fetch_senders(self, active_entities: Iterable[ActiveEntity]) -> list[ActiveEntity]:
        """Active entities currently acting as senders, in order."""
        return self._fetch_by_kind(active_entities, RoleKind.SENDER)

    def fetch_receivers(self, active_entities: Iterable[ActiveEntity]) -> list[ActiveEntity]:
        """Active entities currently acting as receivers, in order."""
        return self._fetch_by_kind(active_entities, RoleKind.RECEIVER)

    def partition(
        self,
        active_entities: Iterable[ActiveEntity]
    ) -> tuple[list[ActiveEntity], list[ActiveEntity]]:
        """Split active entities into (senders, receivers); other kinds are dropped."""
        active_entities = list(active_entities)
        return self.fetch_senders(active_entities), self.fetch_receivers(active_entities)

    @staticmethod
    def resolve_text(sender: ActiveEntity, default_message: Optional[Message]) -> Optional[str]:
        """The sender's own text if it has one, else the default message text."""
        if not sender.message.is_empty:
            return sender.message.text
        if default_message is None:
            return None
        return default_message.text

    @staticmethod
    def _fetch_by_kind(active_entities: Iterable[ActiveEntity], kind: RoleKind) -> list[ActiveEntity]:
        return [entity for entity in active_entities if entity.role.kind == kind]
