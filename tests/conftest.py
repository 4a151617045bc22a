import pytest

from interaction_type import (
    ActiveEntity,
    CommunicationInfrastructure,
    InteractionType,
    Message,
    Receiver,
    Relationship,
    Sender,
)
from interaction_type.config import get_settings
from interaction_type.core import RecordingChannel
from interaction_type.simulation import build_purchase_quotation_cast


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sender():
    return Sender()


@pytest.fixture
def receiver():
    return Receiver()


@pytest.fixture
def recorder():
    return RecordingChannel()


@pytest.fixture
def communication(recorder):
    return CommunicationInfrastructure(recorder)


@pytest.fixture
def relationship(sender, receiver):
    relation = Relationship("Manufacturing-Suppliers")
    relation.add_entity(ActiveEntity("OMCR", receiver))
    relation.add_entity(ActiveEntity("Stamec", sender))
    return relation


@pytest.fixture
def interaction(relationship):
    return InteractionType(
        "Purchase Quotations",
        relationship,
        Message("Please, provide me an estimation cost for Part Number 01"),
    )


@pytest.fixture
def cast():
    return build_purchase_quotation_cast()
