"""Process-lifetime store of merged conversations, keyed by folder name."""

from __future__ import annotations

import json
import logging

from archive_clients.messenger.models import MessageData
from archive_clients.messenger.parser import parse_message_data

logger = logging.getLogger(__name__)


class ConversationCache:
    """Holds each loaded conversation as a serialized JSON snapshot.

    Create one at application start and keep it for the session; entries are
    never evicted. Every ``get`` deserializes afresh, so callers may mutate
    what they receive without affecting later reads.
    """

    def __init__(self):
        self._entries: dict[str, str] = {}

    def put(self, key: str, record: MessageData | dict) -> None:
        raw = record.to_dict() if isinstance(record, MessageData) else record
        if key in self._entries:
            logger.debug(f"Overwriting cached conversation {key}")
        self._entries[key] = json.dumps(raw, ensure_ascii=False)

    def get(self, key: str) -> MessageData | None:
        """Return a fresh copy of the cached conversation, or None if not loaded."""
        raw = self._entries.get(key)
        if raw is None:
            return None
        return parse_message_data(json.loads(raw))

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
