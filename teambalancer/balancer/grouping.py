"""
Position grouping: split the roster by position and randomize order within each
group, so players tied on rating are not assigned by input order.
"""
from __future__ import annotations

from typing import Iterable

from teambalancer.models import Player, Position

from .rng import SeededRNG

# Spine order: goalkeepers first (few of them, most consequential placement)
POSITION_ORDER: tuple[Position, ...] = (Position.GK, Position.DEF, Position.MID, Position.FWD)


def group_by_position(players: Iterable[Player], rng: SeededRNG) -> dict[Position, list[Player]]:
    """
    Partition players into one shuffled list per position, keyed in POSITION_ORDER.
    All four keys are always present; empty groups stay empty.
    Does not mutate the input.
    """
    groups: dict[Position, list[Player]] = {pos: [] for pos in POSITION_ORDER}
    for p in players:
        groups[p.position].append(p)
    for pos in POSITION_ORDER:
        rng.shuffle(groups[pos])
    return groups


def iter_spine(groups: dict[Position, list[Player]]) -> Iterable[Player]:
    """Players in spine order, then group order."""
    for pos in POSITION_ORDER:
        yield from groups.get(pos, [])
