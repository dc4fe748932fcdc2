"""Group a message's reactions by emoji."""

from __future__ import annotations

from archive_clients.messenger.models import Reaction


def group_actors_by_reaction(reactions: list[Reaction]) -> dict[str, list[str]]:
    """Map each reaction symbol to the distinct actors who used it.

    Symbols and actors keep first-seen order. Actors stay raw (undecoded).
    """
    grouped: dict[str, list[str]] = {}
    for r in reactions:
        actors = grouped.setdefault(r.reaction, [])
        if r.actor not in actors:
            actors.append(r.actor)
    return grouped
