"""Parse and merge raw message_N.json parts into MessageData records."""

from __future__ import annotations

import json

from archive_clients.exceptions import MalformedArchiveError
from archive_clients.messenger.models import (
    Message,
    MessageData,
    MessageType,
    Participant,
    Photo,
    Reaction,
    Share,
    Sticker,
)


def load_part(text: str, label: str = "part") -> dict:
    """Decode one part's JSON text; the top level must be an object with a messages list."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedArchiveError(f"{label} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedArchiveError(f"{label} is not a JSON object")
    if not isinstance(data.get("messages", []), list):
        raise MalformedArchiveError(f"{label} has a non-list 'messages' field")
    return data


def merge_parts(parts: list[dict]) -> dict:
    """Merge parts into one raw conversation.

    Record-level fields come from the first part; ``messages`` is the
    concatenation of every part's messages, in part order.
    """
    if not parts:
        raise MalformedArchiveError("No parts to merge")
    merged = dict(parts[0])
    merged["messages"] = [m for part in parts for m in part.get("messages", [])]
    return merged


def parse_message_data(raw: dict) -> MessageData:
    """Build a MessageData from a merged (or single-part) raw dict."""
    try:
        participants = [
            Participant(name=_text(p["name"], "participant name"))
            for p in raw.get("participants") or []
        ]
        messages = [parse_message(m) for m in raw.get("messages") or []]
        title = _text(raw.get("title"), "title", optional=True) or ""
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedArchiveError(f"Unexpected conversation shape: {e}") from e
    return MessageData(
        title=title,
        participants=participants,
        messages=messages,
        is_still_participant=bool(raw.get("is_still_participant", True)),
        thread_type=raw.get("thread_type") or "",
        thread_path=raw.get("thread_path") or "",
    )


def parse_message(raw: dict) -> Message:
    """Parse one raw message; ``sender_name`` and ``timestamp_ms`` are required."""
    sticker = raw.get("sticker")
    share = raw.get("share")
    call_duration = raw.get("call_duration")
    return Message(
        sender_name=_text(raw["sender_name"], "sender_name"),
        timestamp_ms=int(raw["timestamp_ms"]),
        content=_text(raw.get("content"), "content", optional=True),
        photos=[
            Photo(uri=p["uri"], creation_timestamp=p.get("creation_timestamp"))
            for p in raw.get("photos") or []
        ],
        sticker=Sticker(uri=sticker["uri"]) if sticker else None,
        share=Share(link=share.get("link")) if share else None,
        call_duration=int(call_duration) if call_duration is not None else None,
        is_unsent=bool(raw.get("is_unsent", False)),
        reactions=[
            Reaction(
                reaction=_text(r["reaction"], "reaction"),
                actor=_text(r["actor"], "reaction actor"),
            )
            for r in raw.get("reactions") or []
        ],
        users=[
            Participant(name=_text(u["name"], "user name"))
            for u in raw.get("users") or []
        ],
        type=MessageType.parse(raw.get("type")),
    )


def _text(value, label: str, optional: bool = False) -> str | None:
    """Exported text fields must be strings; anything else is a malformed archive."""
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise MalformedArchiveError(
            f"Expected a string for {label}, got {type(value).__name__}"
        )
    return value
