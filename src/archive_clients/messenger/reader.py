"""Load a Messenger inbox into chat summaries and cached conversations."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from archive_clients.exceptions import (
    EmptyConversationError,
    MalformedArchiveError,
    MessengerError,
    MissingInboxError,
)
from archive_clients.messenger.cache import ConversationCache
from archive_clients.messenger.files import ArchiveFileSystem
from archive_clients.messenger.models import (
    Chat,
    Loaded,
    LoadOutcome,
    MessageData,
    Skipped,
)
from archive_clients.messenger.parser import load_part, merge_parts, parse_message_data
from archive_clients.messenger.text import decode_string

logger = logging.getLogger(__name__)


class ConversationLoader:
    """Merges one conversation folder, caches it and returns its summary."""

    def __init__(self, file_system: ArchiveFileSystem, cache: ConversationCache):
        self.file_system = file_system
        self.cache = cache

    def load(self, folder: Path) -> Chat | None:
        """Load a folder; None if it has no parts.

        Raises MalformedArchiveError when a part is not valid JSON or the
        merged conversation has no participants or messages.
        """
        try:
            return self._load(folder)
        except EmptyConversationError:
            return None

    def try_load(self, folder: Path) -> LoadOutcome:
        """Like load, but folder-level failures become Skipped instead of raising."""
        try:
            return Loaded(self._load(folder))
        except MessengerError as e:
            logger.warning(f"Skipping conversation {folder.name}: {e}")
            return Skipped(dir_name=folder.name, reason=str(e))

    def _load(self, folder: Path) -> Chat:
        texts = self.file_system.read_conversation_parts(folder)
        if not texts:
            raise EmptyConversationError(f"{folder.name} has no message_N.json parts")

        parts = [
            load_part(text, label=f"{folder.name} message_{i}.json")
            for i, text in enumerate(texts, start=1)
        ]
        merged = merge_parts(parts)
        record = parse_message_data(merged)
        chat = self._summarize(folder.name, record)

        # Only fully summarized folders reach the cache.
        self.cache.put(folder.name, merged)
        logger.debug(
            f"Cached {folder.name}: {len(parts)} part(s), {record.message_count} messages"
        )
        return chat

    @staticmethod
    def _summarize(dir_name: str, record: MessageData) -> Chat:
        if not record.participants:
            raise MalformedArchiveError(f"{dir_name} lists no participants")
        if not record.messages:
            raise MalformedArchiveError(f"{dir_name} contains no messages")
        return Chat(
            name=decode_string(record.participants[0].name),
            dir_name=dir_name,
            # Earliest message time, not the latest (see DESIGN.md).
            last_sent=min(m.timestamp_ms for m in record.messages),
            title=decode_string(record.title),
        )


class MessengerArchiveReader:
    """Read-only access to an unpacked Messenger export.

    Building the catalog (``load_chats``/``aload_chats``) also fills the
    conversation cache: summaries and full records come out of the same
    pass, so ``get_cached_conversation`` only knows folders that a catalog
    build has loaded.
    """

    def __init__(
        self,
        root: Path | str | None = None,
        cache: ConversationCache | None = None,
        file_system: ArchiveFileSystem | None = None,
    ):
        self.file_system = file_system or ArchiveFileSystem(root)
        self.cache = cache if cache is not None else ConversationCache()
        self.loader = ConversationLoader(self.file_system, self.cache)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find_inbox(self) -> Path | None:
        return self.file_system.find_inbox_folder()

    def open(self) -> Path:
        """Return the inbox folder or raise MissingInboxError."""
        inbox = self.find_inbox()
        if inbox is None:
            raise MissingInboxError("This is not a valid Messenger archive folder.")
        return inbox

    def scan(self, inbox: Path | None) -> list[LoadOutcome]:
        """Load every conversation folder sequentially, one outcome per folder."""
        if inbox is None:
            return []
        outcomes = [
            self.loader.try_load(folder)
            for folder in self.file_system.list_subfolders(inbox)
        ]
        self._log_totals(outcomes)
        return outcomes

    async def ascan(self, inbox: Path | None) -> list[LoadOutcome]:
        """Concurrent scan: each folder loads in its own worker thread."""
        if inbox is None:
            return []
        folders = await asyncio.to_thread(self.file_system.list_subfolders, inbox)
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.loader.try_load, folder) for folder in folders)
        )
        self._log_totals(outcomes)
        return list(outcomes)

    def load_chats(self, inbox: Path | None) -> list[Chat]:
        """Summaries of every loadable conversation; failed folders are dropped."""
        return [o.chat for o in self.scan(inbox) if isinstance(o, Loaded)]

    async def aload_chats(self, inbox: Path | None) -> list[Chat]:
        """Async version of load_chats, loading folders concurrently."""
        outcomes = await self.ascan(inbox)
        return [o.chat for o in outcomes if isinstance(o, Loaded)]

    def get_cached_conversation(self, dir_name: str | None) -> MessageData | None:
        if not dir_name:
            return None
        return self.cache.get(dir_name)

    def get_myself_name(self) -> str | None:
        """Decoded full name of the archive owner from autofill_information.json."""
        text = self.file_system.read_profile_info()
        if text is None:
            return None
        try:
            autofill = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedArchiveError(
                f"autofill_information.json is not valid JSON: {e}"
            ) from e
        info = autofill.get("autofill_information_v2") if isinstance(autofill, dict) else None
        if not isinstance(info, dict):
            return None
        names = info.get("FULL_NAME") or []
        if not isinstance(names, list) or not names or not isinstance(names[0], str):
            return None
        return decode_string(names[0])

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _log_totals(outcomes: list[LoadOutcome]) -> None:
        loaded = sum(1 for o in outcomes if isinstance(o, Loaded))
        logger.info(
            f"Loaded {loaded} conversation(s), skipped {len(outcomes) - loaded}"
        )


def filter_chats(chats: list[Chat], search: str = "") -> list[Chat]:
    """Chats ordered by last_sent descending, keeping title or folder matches."""
    ordered = sorted(chats, key=lambda c: c.last_sent, reverse=True)
    return [c for c in ordered if search in c.title or search in c.dir_name]
