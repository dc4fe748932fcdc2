"""Tests for reaction grouping."""

from archive_clients.messenger.models import Reaction
from archive_clients.messenger.reactions import group_actors_by_reaction


def test_group_empty():
    assert group_actors_by_reaction([]) == {}


def test_dedup_within_symbol_not_across():
    reactions = [
        Reaction(reaction="❤", actor="X"),
        Reaction(reaction="❤", actor="X"),
        Reaction(reaction="👍", actor="X"),
    ]
    assert group_actors_by_reaction(reactions) == {"❤": ["X"], "👍": ["X"]}


def test_first_seen_order():
    reactions = [
        Reaction(reaction="👍", actor="B"),
        Reaction(reaction="❤", actor="A"),
        Reaction(reaction="👍", actor="A"),
        Reaction(reaction="👍", actor="B"),
    ]
    grouped = group_actors_by_reaction(reactions)
    assert list(grouped) == ["👍", "❤"]
    assert grouped["👍"] == ["B", "A"]
