"""Tests for chat statistics."""

from datetime import datetime

from archive_clients.messenger.models import Message
from archive_clients.messenger.statistics import chat_statistics, count_messages_by_sender


def _m(sender, ts):
    return Message(sender_name=sender, timestamp_ms=ts)


def test_statistics_empty():
    assert chat_statistics([]) is None


def test_statistics_counts_and_created_at():
    stats = chat_statistics([_m("A", 3), _m("B", 1), _m("A", 5)])
    assert stats.count_info == {"A": 2, "B": 1}
    assert stats.created_at == 1
    assert stats.total == 3


def test_statistics_keeps_raw_sender_keys():
    stats = chat_statistics([_m("JosÃ©", 1)])
    assert stats.count_info == {"JosÃ©": 1}


def test_sorted_counts():
    stats = chat_statistics([_m("A", 1), _m("B", 2), _m("B", 3), _m("C", 4)])
    assert stats.sorted_counts()[0] == ("B", 2)


def test_created_at_iso():
    stats = chat_statistics([_m("A", 1700000000000)])
    assert stats.created_at_iso == datetime.fromtimestamp(1700000000).isoformat()


def test_count_messages_by_sender():
    assert count_messages_by_sender([_m("A", 1), _m("A", 2)]) == {"A": 2}
