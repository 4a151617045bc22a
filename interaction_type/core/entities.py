"""
Structural Entities

This module defines the elements that give structure to an interaction:

- Message: a basic text message representation
- ActiveEntity: an organization, an individual or an automated component
  capable of performing a behaviour during the interaction
- Relationship: a logical or physical connection through which
  communication between active entities becomes possible
- InteractionType: the structural element that gives form to one kind
  of interaction, binding a relationship to a default message

Entities are created once and mutated in place between activations.
A relationship holds shared references to its active entities; role and
message changes are visible to every holder of those references.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .exceptions import InvalidComponentError
from .roles import Role


@dataclass
class Message:
    """
    A text message.

    An empty or missing text is a valid state: it means "use the
    interaction type's default message instead".
    """
    text: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.text


class ActiveEntity:
    """
    A named participant holding a role and an optional custom message.
    """

    def __init__(self, name: str, role: Role):
        self._name = name
        self.role = role
        self._message = Message()

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> Role:
        return self._role

    @role.setter
    def role(self, role: Role) -> None:
        if not isinstance(role, Role):
            raise InvalidComponentError(
                f"Active entity {self._name!r} requires a Role, got {type(role).__name__}"
            )
        self._role = role

    @property
    def message(self) -> Message:
        """The custom message this entity sends when acting as a sender."""
        return self._message

    @message.setter
    def message(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise InvalidComponentError(
                f"Active entity {self._name!r} requires a Message, got {type(message).__name__}"
            )
        self._message = message

    def __repr__(self) -> str:
        return f"ActiveEntity(name={self._name!r}, role={self._role.name})"


class Relationship:
    """
    A named, ordered group of active entities that may interact.

    Entities are appended in order and never removed; the same entity
    may be shared by several relationships.
    """

    def __init__(self, name: str):
        self._name = name
        self._active_entities: list[ActiveEntity] = []

    @property
    def name(self) -> str:
        return self._name

    def add_entity(self, entity: ActiveEntity) -> None:
        """Add the given active entity to the relationship."""
        if not isinstance(entity, ActiveEntity):
            raise InvalidComponentError(
                f"Relationship {self._name!r} accepts ActiveEntity, got {type(entity).__name__}"
            )
        self._active_entities.append(entity)

    @property
    def active_entities(self) -> tuple[ActiveEntity, ...]:
        """Snapshot of the active entities, in insertion order."""
        return tuple(self._active_entities)

    def __iter__(self) -> Iterator[ActiveEntity]:
        return iter(self.active_entities)

    def __len__(self) -> int:
        return len(self._active_entities)

    def __repr__(self) -> str:
        return f"Relationship(name={self._name!r}, active_entities={len(self)})"


class InteractionType:
    """
    Gives form to one kind of interaction.

    An instance of InteractionType qualifies an interaction by providing
    its relationship and the default message produced on activation.
    """

    def __init__(self, name: str, relation: Relationship, message: Optional[Message] = None):
        if not isinstance(relation, Relationship):
            raise InvalidComponentError(
                f"Interaction type {name!r} requires a Relationship, got {type(relation).__name__}"
            )
        self._name = name
        self._relation = relation
        self.message = message

    @property
    def name(self) -> str:
        return self._name

    @property
    def relation(self) -> Relationship:
        return self._relation

    @property
    def message(self) -> Optional[Message]:
        """Default message, used when a sender has no custom text."""
        return self._message

    @message.setter
    def message(self, message: Optional[Message]) -> None:
        if message is not None and not isinstance(message, Message):
            raise InvalidComponentError(
                f"Interaction type {self._name!r} requires a Message or None, "
                f"got {type(message).__name__}"
            )
        self._message = message

    def __repr__(self) -> str:
        return f"InteractionType(name={self._name!r}, relation={self._relation.name!r})"
