"""
Purchase Quotations Scenario

The demonstration from the paper: a manufacturer (STAMEC) asks its
suppliers (OMCR, later DAYTON) for a cost estimation, and the suppliers
answer back by swapping roles.

The same cast is built once and mutated in place between four runs:

1. Activate the interaction type as built (STAMEC -> OMCR)
2. Add DAYTON as a new receiver
3. Define a new default message
4. Simulate the responses: interchange roles and give each new sender
   its own custom message
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..core.entities import ActiveEntity, InteractionType, Message, Relationship
from ..core.notifications import (
    CompositeChannel,
    Notification,
    NotificationChannel,
    RecordingChannel
)
from ..core.roles import Receiver, Sender
from ..infrastructure.communication import CommunicationInfrastructure


PART_01_REQUEST = "Please, provide me an estimation cost for Part Number 01"
PART_02_REQUEST = "Please, provide me an estimation cost for Part Number 02"
OMCR_RESPONSE = (
    "The parts number 01 and 02 you previously required cost, respectively, 1000 and 1020"
)
DAYTON_RESPONSE = (
    "The parts number 01 and 02 you previously required cost, respectively, 1200 and 1280. "
    "Discount of 20% within the end of current month"
)


@dataclass
class PurchaseQuotationCast:
    """The fixed cast of the purchase quotations scenario."""
    sender: Sender
    receiver: Receiver
    stamec: ActiveEntity
    omcr: ActiveEntity
    dayton: ActiveEntity
    message: Message
    relationship: Relationship
    interaction: InteractionType


@dataclass
class ScenarioStep:
    """One scripted change to the cast, followed by an activation."""
    title: str
    apply: Callable[[PurchaseQuotationCast], None]


@dataclass
class ScenarioRun:
    """What one step produced."""
    title: str
    entities: list[tuple[str, str]] = field(default_factory=list)  # (name, role name)
    notifications: list[Notification] = field(default_factory=list)


def build_purchase_quotation_cast() -> PurchaseQuotationCast:
    """Build the structure: two roles, three entities, one relationship, one interaction type."""
    sender = Sender()
    receiver = Receiver()

    omcr = ActiveEntity("OMCR Supplier", receiver)
    stamec = ActiveEntity("STAMEC Manufacturing", sender)
    dayton = ActiveEntity("DAYTON Supplier", receiver)

    message = Message(PART_01_REQUEST)

    relationship = Relationship("Manufacturing-Suppliers")
    relationship.add_entity(omcr)
    relationship.add_entity(stamec)

    interaction = InteractionType("Purchase Quotations", relationship, message)

    return PurchaseQuotationCast(
        sender=sender,
        receiver=receiver,
        stamec=stamec,
        omcr=omcr,
        dayton=dayton,
        message=message,
        relationship=relationship,
        interaction=interaction
    )


def _as_built(cast: PurchaseQuotationCast) -> None:
    pass


def _add_dayton(cast: PurchaseQuotationCast) -> None:
    cast.relationship.add_entity(cast.dayton)


def _new_default_message(cast: PurchaseQuotationCast) -> None:
    cast.message.text = PART_02_REQUEST


def _simulate_responses(cast: PurchaseQuotationCast) -> None:
    cast.stamec.role = cast.receiver
    cast.omcr.role = cast.sender
    cast.dayton.role = cast.sender
    cast.omcr.message.text = OMCR_RESPONSE
    cast.dayton.message.text = DAYTON_RESPONSE


PURCHASE_QUOTATION_STEPS = [
    ScenarioStep("Instantiate the interaction type from STAMEC to OMCR", _as_built),
    ScenarioStep("Re-instantiate the interaction type by adding DAYTON as new receiver", _add_dayton),
    ScenarioStep("Re-instantiate the interaction type by defining a new message", _new_default_message),
    ScenarioStep(
        "Re-instantiate the interaction type by simulating the responses from receivers",
        _simulate_responses
    ),
]


def run_purchase_quotation_demo(
    channel: Optional[NotificationChannel] = None,
    cast: Optional[PurchaseQuotationCast] = None,
    steps: Optional[list[ScenarioStep]] = None,
    before_activation: Optional[Callable[[ScenarioStep, PurchaseQuotationCast], None]] = None
) -> list[ScenarioRun]:
    """
    Run the scripted steps against one cast.

    Args:
        channel: Extra channel that also receives every notification
            (e.g. console output)
        cast: Cast to mutate; a fresh one is built when omitted
        steps: Steps to run; defaults to the four purchase quotation steps
        before_activation: Called after a step is applied and before the
            interaction type is activated

    Returns:
        One ScenarioRun per step, holding the notifications it produced
    """
    cast = cast or build_purchase_quotation_cast()
    recorder = RecordingChannel()
    fan_out = CompositeChannel(recorder)
    if channel is not None:
        fan_out.add(channel)
    communication = CommunicationInfrastructure(fan_out)

    runs = []
    for step in steps or PURCHASE_QUOTATION_STEPS:
        step.apply(cast)
        if before_activation is not None:
            before_activation(step, cast)
        recorder.clear()
        communication.activate_interaction(cast.interaction)
        runs.append(ScenarioRun(
            title=step.title,
            entities=[
                (entity.name, entity.role.name)
                for entity in cast.relationship.active_entities
            ],
            notifications=recorder.notifications
        ))

    return runs
