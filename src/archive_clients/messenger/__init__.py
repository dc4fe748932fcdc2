"""Facebook Messenger export access (unpacked archive on disk)."""

from archive_clients.messenger.cache import ConversationCache
from archive_clients.messenger.files import ArchiveFileSystem
from archive_clients.messenger.grouping import group_messages
from archive_clients.messenger.models import (
    Chat,
    Loaded,
    Message,
    MessageData,
    MessageType,
    Participant,
    Photo,
    Reaction,
    Share,
    Skipped,
    Sticker,
)
from archive_clients.messenger.reactions import group_actors_by_reaction
from archive_clients.messenger.reader import (
    ConversationLoader,
    MessengerArchiveReader,
    filter_chats,
)
from archive_clients.messenger.statistics import ChatStatistics, chat_statistics
from archive_clients.messenger.text import decode_string, normalize

__all__ = [
    "MessengerArchiveReader",
    "ConversationLoader",
    "ConversationCache",
    "ArchiveFileSystem",
    "filter_chats",
    "group_messages",
    "chat_statistics",
    "ChatStatistics",
    "group_actors_by_reaction",
    "decode_string",
    "normalize",
    "Chat",
    "Message",
    "MessageData",
    "MessageType",
    "Participant",
    "Photo",
    "Reaction",
    "Share",
    "Sticker",
    "Loaded",
    "Skipped",
]
