"""Split a conversation into runs of consecutive same-sender messages."""

from __future__ import annotations

from archive_clients.messenger.models import Message


def group_messages(messages: list[Message]) -> list[list[Message]]:
    """Group time-ordered messages by consecutive ``sender_name``.

    The input is not modified. Messages with equal timestamps keep their
    relative input order. An empty input gives an empty list.
    """
    ordered = sorted(messages, key=lambda m: m.timestamp_ms)

    groups: list[list[Message]] = []
    for message in ordered:
        if groups and groups[-1][-1].sender_name == message.sender_name:
            groups[-1].append(message)
        else:
            groups.append([message])
    return groups
