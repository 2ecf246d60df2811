"""
Initial distribution of grouped players into two teams.

greedy_distribute: each player goes to the smaller team; on equal size, to the
team with the lower (or equal) star total, team A first. No look-ahead.
alternate_distribute: plain A, B, A, B deal in spine order (fallback mode).
"""
from __future__ import annotations

from teambalancer.models import Player, Position

from .grouping import iter_spine


def star_total(team: list[Player]) -> int:
    return sum(p.stars for p in team)


def joins_team_a(team_a: list[Player], team_b: list[Player]) -> bool:
    """True if the next player should join team A."""
    if len(team_a) != len(team_b):
        return len(team_a) < len(team_b)
    return star_total(team_a) <= star_total(team_b)


def greedy_distribute(groups: dict[Position, list[Player]]) -> tuple[list[Player], list[Player]]:
    team_a: list[Player] = []
    team_b: list[Player] = []
    for player in iter_spine(groups):
        if joins_team_a(team_a, team_b):
            team_a.append(player)
        else:
            team_b.append(player)
    return team_a, team_b


def alternate_distribute(groups: dict[Position, list[Player]]) -> tuple[list[Player], list[Player]]:
    team_a: list[Player] = []
    team_b: list[Player] = []
    for i, player in enumerate(iter_spine(groups)):
        (team_a if i % 2 == 0 else team_b).append(player)
    return team_a, team_b
