import logging

import pytest

from interaction_type import ActiveEntity, Receiver, RoleCapabilityError, RoleKind, Sender
from interaction_type.core import Notification, NotificationKind


def test_role_names_come_from_role_kind(sender, receiver):
    assert sender.kind is RoleKind.SENDER
    assert receiver.kind is RoleKind.RECEIVER
    assert sender.name == "Sender"
    assert receiver.name == "Receiver"


def test_roles_compare_by_kind():
    assert Sender() == Sender()
    assert Sender() != Receiver()
    assert len({Sender(), Sender(), Receiver()}) == 2


def test_send_publishes_then_delivers_synchronously(sender, receiver, recorder):
    stamec = ActiveEntity("Stamec", sender)
    omcr = ActiveEntity("OMCR", receiver)

    sender.send_message_to_from("quote please", omcr, stamec, recorder)

    assert recorder.notifications == [
        Notification(kind=NotificationKind.SENT, sender="Stamec", receiver="OMCR", text="quote please"),
        Notification(kind=NotificationKind.RECEIVED, sender="Stamec", receiver="OMCR", text="quote please"),
    ]


@pytest.mark.parametrize("text", [None, ""])
def test_send_with_empty_text_is_a_no_op(sender, receiver, recorder, text):
    stamec = ActiveEntity("Stamec", sender)
    omcr = ActiveEntity("OMCR", receiver)

    sender.send_message_to_from(text, omcr, stamec, recorder)

    assert len(recorder) == 0


@pytest.mark.parametrize("text", [None, ""])
def test_receive_with_empty_text_is_a_no_op(sender, receiver, recorder, text):
    stamec = ActiveEntity("Stamec", sender)
    omcr = ActiveEntity("OMCR", receiver)

    receiver.receive_message_from_to(text, stamec, omcr, recorder)

    assert len(recorder) == 0


def test_receive_publishes_one_notification(sender, receiver, recorder):
    stamec = ActiveEntity("Stamec", sender)
    omcr = ActiveEntity("OMCR", receiver)

    receiver.receive_message_from_to("hello", stamec, omcr, recorder)

    assert recorder.received == [
        Notification(kind=NotificationKind.RECEIVED, sender="Stamec", receiver="OMCR", text="hello")
    ]
    assert recorder.sent == []


def test_receiver_cannot_send(sender, receiver):
    a = ActiveEntity("A", receiver)
    b = ActiveEntity("B", receiver)

    with pytest.raises(RoleCapabilityError):
        receiver.send_message_to_from("text", b, a)


def test_sender_cannot_receive(sender):
    a = ActiveEntity("A", sender)
    b = ActiveEntity("B", sender)

    with pytest.raises(RoleCapabilityError):
        sender.receive_message_from_to("text", a, b)


def test_roles_fall_back_to_the_logging_channel(sender, receiver, caplog):
    stamec = ActiveEntity("Stamec", sender)
    omcr = ActiveEntity("OMCR", receiver)

    with caplog.at_level(logging.INFO, logger="interaction_type.core.notifications"):
        sender.send_message_to_from("logged", omcr, stamec)

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "sent Stamec -> OMCR: logged",
        "received Stamec -> OMCR: logged",
    ]
