"""
Local-search refinement (hill climbing) over same-position swaps.

Cost is |stars(A) - stars(B)|. Each pass scans (i in A, j in B) in index order and
commits the first same-position swap that strictly lowers cost, then restarts.
A full pass with no improving swap ends the search. Every accepted swap lowers a
non-negative integer, so swaps <= initial cost; max_passes is only a safety bound.

Swaps exchange list slots, so team sizes and per-position counts never change.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from teambalancer.config import DEFAULT_MAX_PASSES
from teambalancer.models import Player

from .distribution import star_total

logger = logging.getLogger("teambalancer.refinement")


@dataclass(frozen=True)
class RefinementReport:
    initial_cost: int
    final_cost: int
    swaps: int
    passes: int
    converged: bool  # False only if max_passes cut the search short


def cost(team_a: list[Player], team_b: list[Player]) -> int:
    return abs(star_total(team_a) - star_total(team_b))


def find_improving_swap(team_a: list[Player], team_b: list[Player]) -> tuple[int, int, int] | None:
    """
    First (i, j, new_cost) in index order where swapping team_a[i] and team_b[j]
    (same position) strictly lowers cost. None if the pair is a local optimum.
    """
    sum_a = star_total(team_a)
    sum_b = star_total(team_b)
    current = abs(sum_a - sum_b)
    for i, pa in enumerate(team_a):
        for j, pb in enumerate(team_b):
            if pa.position != pb.position:
                continue
            delta = pb.stars - pa.stars
            new_cost = abs((sum_a + delta) - (sum_b - delta))
            if new_cost < current:
                return i, j, new_cost
    return None


def refine(
    team_a: list[Player],
    team_b: list[Player],
    max_passes: int = DEFAULT_MAX_PASSES,
) -> RefinementReport:
    """Improve team_a / team_b in place. Returns what happened."""
    initial = cost(team_a, team_b)
    current = initial
    swaps = 0
    passes = 0
    converged = False
    while passes < max_passes:
        passes += 1
        found = find_improving_swap(team_a, team_b)
        if found is None:
            converged = True
            break
        i, j, new_cost = found
        logger.debug(
            "swap %s (%s, %d) <-> %s (%s, %d): cost %d -> %d",
            team_a[i].name, team_a[i].position.value, team_a[i].stars,
            team_b[j].name, team_b[j].position.value, team_b[j].stars,
            current, new_cost,
        )
        team_a[i], team_b[j] = team_b[j], team_a[i]
        current = new_cost
        swaps += 1
    if not converged:
        logger.warning("refinement stopped at max_passes=%d with cost %d", max_passes, current)
    return RefinementReport(
        initial_cost=initial,
        final_cost=current,
        swaps=swaps,
        passes=passes,
        converged=converged,
    )
