"""Tests for sender-run message grouping."""

from archive_clients.messenger.grouping import group_messages
from archive_clients.messenger.models import Message


def _m(sender, ts, content=None):
    return Message(sender_name=sender, timestamp_ms=ts, content=content)


def test_group_empty():
    assert group_messages([]) == []


def test_group_single():
    m = _m("A", 1)
    assert group_messages([m]) == [[m]]


def test_group_sorts_then_splits_by_sender():
    messages = [_m("A", 5), _m("B", 2), _m("A", 1), _m("A", 6), _m("B", 9)]
    groups = group_messages(messages)
    assert [[m.timestamp_ms for m in g] for g in groups] == [[1], [2], [5, 6], [9]]
    assert [g[0].sender_name for g in groups] == ["A", "B", "A", "B"]


def test_group_flattens_to_sorted_input():
    messages = [_m("A", 3), _m("A", 1), _m("B", 2), _m("C", 2), _m("C", 0)]
    groups = group_messages(messages)
    flat = [m for g in groups for m in g]
    assert flat == sorted(messages, key=lambda m: m.timestamp_ms)
    for g in groups:
        assert len({m.sender_name for m in g}) == 1
    for prev, nxt in zip(groups, groups[1:]):
        assert prev[-1].sender_name != nxt[0].sender_name


def test_group_ties_keep_input_order():
    first, second = _m("A", 1, "first"), _m("A", 1, "second")
    assert group_messages([first, second]) == [[first, second]]


def test_group_does_not_mutate_input():
    messages = [_m("A", 2), _m("B", 1)]
    group_messages(messages)
    assert [m.timestamp_ms for m in messages] == [2, 1]
