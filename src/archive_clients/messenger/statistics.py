"""Per-conversation figures shown in the chat information panel."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime

from archive_clients.messenger.models import Message


@dataclass(frozen=True)
class ChatStatistics:
    count_info: dict[str, int]  # raw sender_name -> message count
    created_at: int  # earliest timestamp_ms

    @property
    def total(self) -> int:
        return sum(self.count_info.values())

    @property
    def created_at_iso(self) -> str:
        try:
            return datetime.fromtimestamp(self.created_at / 1000).isoformat()
        except (OSError, ValueError, OverflowError):
            return ""

    def sorted_counts(self) -> list[tuple[str, int]]:
        """Senders with the most messages first."""
        return sorted(self.count_info.items(), key=lambda item: item[1], reverse=True)


def count_messages_by_sender(messages: list[Message]) -> dict[str, int]:
    return dict(Counter(m.sender_name for m in messages))


def chat_statistics(messages: list[Message]) -> ChatStatistics | None:
    if not messages:
        return None
    return ChatStatistics(
        count_info=count_messages_by_sender(messages),
        created_at=min(m.timestamp_ms for m in messages),
    )
