"""Data models for the Messenger archive module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from archive_clients.messenger.text import decode_string


class MessageType(str, Enum):
    """The ``type`` field of an exported message."""

    GENERIC = "Generic"
    UNSUBSCRIBE = "Unsubscribe"
    SUBSCRIBE = "Subscribe"
    CALL = "Call"
    SHARE = "Share"

    @classmethod
    def parse(cls, value: str | None) -> MessageType:
        try:
            return cls(value)
        except ValueError:
            return cls.GENERIC


@dataclass(frozen=True)
class Participant:
    """A chat member as named in the export (raw, mis-encoded text)."""

    name: str

    @property
    def display_name(self) -> str:
        return decode_string(self.name)


@dataclass(frozen=True)
class Reaction:
    """One emoji reaction on a message (actor is raw text)."""

    reaction: str
    actor: str

    @property
    def display_actor(self) -> str:
        return decode_string(self.actor)


@dataclass(frozen=True)
class Photo:
    """A photo attached to a message."""

    uri: str  # relative to the export root
    creation_timestamp: int | None = None


@dataclass(frozen=True)
class Sticker:
    """A sticker sent as a message."""

    uri: str


@dataclass(frozen=True)
class Share:
    """A link shared in a message."""

    link: str | None = None


@dataclass
class Message:
    """A single message from a message_N.json part.

    Text fields are kept exactly as exported; use the display_* properties
    to get repaired text.
    """

    sender_name: str
    timestamp_ms: int
    content: str | None = None
    photos: list[Photo] = field(default_factory=list)
    sticker: Sticker | None = None
    share: Share | None = None
    call_duration: int | None = None  # seconds
    is_unsent: bool = False
    reactions: list[Reaction] = field(default_factory=list)
    users: list[Participant] = field(default_factory=list)
    type: MessageType = MessageType.GENERIC

    @property
    def display_sender(self) -> str:
        return decode_string(self.sender_name)

    @property
    def display_content(self) -> str | None:
        if self.content is None:
            return None
        return decode_string(self.content)

    def to_dict(self) -> dict:
        """Return the message in the export's JSON shape."""
        data: dict = {
            "sender_name": self.sender_name,
            "timestamp_ms": self.timestamp_ms,
            "type": self.type.value,
            "is_unsent": self.is_unsent,
        }
        if self.content is not None:
            data["content"] = self.content
        if self.photos:
            data["photos"] = [
                {"uri": p.uri, "creation_timestamp": p.creation_timestamp}
                for p in self.photos
            ]
        if self.sticker is not None:
            data["sticker"] = {"uri": self.sticker.uri}
        if self.share is not None:
            data["share"] = {"link": self.share.link}
        if self.call_duration is not None:
            data["call_duration"] = self.call_duration
        if self.reactions:
            data["reactions"] = [
                {"reaction": r.reaction, "actor": r.actor} for r in self.reactions
            ]
        if self.users:
            data["users"] = [{"name": u.name} for u in self.users]
        return data


@dataclass
class MessageData:
    """One logical conversation: every message_N.json part of a folder merged.

    ``messages`` is in part order (part 1 first), not time order.
    """

    title: str
    participants: list[Participant]
    messages: list[Message] = field(default_factory=list)
    is_still_participant: bool = True
    thread_type: str = ""
    thread_path: str = ""

    @property
    def display_title(self) -> str:
        return decode_string(self.title)

    @property
    def message_count(self) -> int:
        return len(self.messages)

    @property
    def member_count(self) -> int:
        return len(self.participants)

    def to_dict(self) -> dict:
        return {
            "participants": [{"name": p.name} for p in self.participants],
            "messages": [m.to_dict() for m in self.messages],
            "title": self.title,
            "is_still_participant": self.is_still_participant,
            "thread_type": self.thread_type,
            "thread_path": self.thread_path,
        }


@dataclass(frozen=True)
class Chat:
    """Summary of one conversation folder, used for listing and search."""

    name: str  # decoded name of the first participant
    dir_name: str
    last_sent: int  # earliest message timestamp, see DESIGN.md
    title: str  # decoded


@dataclass(frozen=True)
class Loaded:
    """A conversation folder that was merged, cached and summarized."""

    chat: Chat


@dataclass(frozen=True)
class Skipped:
    """A conversation folder left out of the catalog."""

    dir_name: str
    reason: str


LoadOutcome = Loaded | Skipped
