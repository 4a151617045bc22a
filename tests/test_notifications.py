import io
import logging

import pytest
from pydantic import ValidationError

from interaction_type import ActiveEntity, InteractionType, Relationship
from interaction_type.core import (
    CompositeChannel,
    ConsoleChannel,
    LoggingChannel,
    Notification,
    NotificationKind,
    RecordingChannel,
    default_channel,
)
from interaction_type.presentation import HtmlRenderer, TextRenderer


SENT = Notification(kind=NotificationKind.SENT, sender="Stamec", receiver="OMCR", text="quote")
RECEIVED = Notification(kind=NotificationKind.RECEIVED, sender="Stamec", receiver="OMCR", text="quote")


def test_notifications_are_frozen_values():
    copy = Notification(kind="sent", sender="Stamec", receiver="OMCR", text="quote")

    assert copy == SENT
    with pytest.raises(ValidationError):
        SENT.text = "changed"


def test_notification_str():
    assert str(SENT) == "[sent] Stamec -> OMCR: quote"


def test_recording_channel_keeps_order_and_filters():
    recorder = RecordingChannel()
    recorder.publish(SENT)
    recorder.publish(RECEIVED)

    assert recorder.notifications == [SENT, RECEIVED]
    assert recorder.sent == [SENT]
    assert recorder.received == [RECEIVED]

    recorder.clear()
    assert len(recorder) == 0


def test_composite_channel_fans_out_in_order():
    first, second = RecordingChannel(), RecordingChannel()
    composite = CompositeChannel(first)
    composite.add(second)

    composite.publish(SENT)

    assert first.notifications == [SENT]
    assert second.notifications == [SENT]


def test_console_channel_writes_rendered_lines():
    stream = io.StringIO()
    channel = ConsoleChannel(TextRenderer(), stream)

    channel.publish(SENT)
    channel.publish(RECEIVED)

    assert stream.getvalue().splitlines() == [
        "The sender Stamec send the message 'quote' to the receiver OMCR",
        "The receiver OMCR received the message 'quote' from the sender Stamec",
    ]


def test_logging_channel_attaches_notification_fields(caplog):
    with caplog.at_level(logging.INFO, logger="interaction_type.core.notifications"):
        LoggingChannel().publish(SENT)

    record = caplog.records[-1]
    assert record.getMessage() == "sent Stamec -> OMCR: quote"
    assert record.notification == {
        "kind": "sent",
        "sender": "Stamec",
        "receiver": "OMCR",
        "text": "quote",
    }


def test_default_channel_is_shared():
    assert isinstance(default_channel(), LoggingChannel)
    assert default_channel() is default_channel()


def test_html_renderer_escapes_content():
    notification = Notification(
        kind=NotificationKind.SENT,
        sender="A&B",
        receiver="<C>",
        text="cost < 1000",
    )

    html = HtmlRenderer().render(notification)

    assert html.startswith("<p style='color: #1c7430'>")
    assert "<b>A&amp;B</b>" in html
    assert "<b>&lt;C&gt;</b>" in html
    assert "cost &lt; 1000" in html


def test_html_renderer_received_line():
    html = HtmlRenderer().render(RECEIVED)

    assert html == (
        "<p style=\"color: red\">The receiver <b>OMCR</b> received the message "
        "'<b><i>quote</i></b>' from the sender <b>Stamec</b></p>"
    )


def test_structure_rendering(sender, receiver):
    relation = Relationship("Manufacturing-Suppliers")
    relation.add_entity(ActiveEntity("OMCR", receiver))
    relation.add_entity(ActiveEntity("Stamec", sender))
    interaction = InteractionType("Purchase Quotations", relation)

    text = TextRenderer().render_structure(interaction)
    html = HtmlRenderer().render_structure(interaction)

    assert text.splitlines() == [
        "Structure information:",
        "  Interaction Type: Purchase Quotations",
        "  Relationship: Manufacturing-Suppliers",
        "  Active Entities: OMCR (Receiver)  Stamec (Sender)",
    ]
    assert "<b>OMCR</b><sup>(Receiver)</sup>" in html
    assert "<b>Stamec</b><sup>(Sender)</sup>" in html
    assert "Interaction Type: <b>Purchase Quotations</b>" in html
