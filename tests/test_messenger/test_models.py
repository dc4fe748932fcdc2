"""Tests for Messenger data models."""

from archive_clients.messenger.models import (
    Message,
    MessageData,
    MessageType,
    Participant,
    Reaction,
)


def test_display_properties_decode_on_read():
    msg = Message(sender_name="JosÃ©", timestamp_ms=1, content="olÃ¡")
    assert msg.display_sender == "José"
    assert msg.display_content == "olá"
    assert msg.sender_name == "JosÃ©"


def test_display_content_none():
    assert Message(sender_name="A", timestamp_ms=1).display_content is None


def test_participant_and_reaction_display():
    assert Participant("ZoÃ«").display_name == "Zoë"
    assert Reaction(reaction="+", actor="ZoÃ«").display_actor == "Zoë"


def test_message_type_parse():
    assert MessageType.parse("Call") is MessageType.CALL
    assert MessageType.parse(None) is MessageType.GENERIC


def test_message_data_counts():
    data = MessageData(
        title="t",
        participants=[Participant("A"), Participant("B")],
        messages=[Message(sender_name="A", timestamp_ms=1)],
    )
    assert data.member_count == 2
    assert data.message_count == 1


def test_message_is_mutable_and_unhashable():
    msg = Message(sender_name="A", timestamp_ms=1)
    msg.content = "edited"
    assert msg.content == "edited"
    assert Message.__hash__ is None
