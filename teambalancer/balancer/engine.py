"""
Balancing engine: roster in, two-team MatchResult out.

Pipeline: group by position (seeded shuffle) -> initial distribution ->
same-position hill climbing (OPTIMIZED only) -> averages and result.
Pure and synchronous; each call owns its working lists.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from teambalancer.config import BalancerConfig
from teambalancer.models import BalanceReport, MatchResult, Player, ValidationError

from .distribution import alternate_distribute, greedy_distribute
from .grouping import group_by_position
from .refinement import cost, refine
from .rng import SeededRNG, new_seed
from .stats import assemble_result

logger = logging.getLogger("teambalancer.engine")


class BalanceMode(str, Enum):
    OPTIMIZED = "optimized"      # greedy + refinement (default)
    GREEDY = "greedy"            # greedy only
    ALTERNATING = "alternating"  # A, B, A, B deal


def parse_mode(value: str | BalanceMode) -> BalanceMode:
    if isinstance(value, BalanceMode):
        return value
    try:
        return BalanceMode(str(value).strip().lower())
    except ValueError as e:
        allowed = ", ".join(m.value for m in BalanceMode)
        raise ValidationError(f"Unknown mode: {value!r}. Must be one of: {allowed}") from e


def validate_roster(players: Iterable[Player] | None) -> list[Player]:
    """Reject None, non-Player entries and duplicate ids. Returns a fresh list."""
    if players is None:
        raise ValidationError("Roster must not be None")
    roster = list(players)
    seen: set[str] = set()
    for p in roster:
        if not isinstance(p, Player):
            raise ValidationError(f"Roster entries must be Player, got {type(p).__name__}")
        if p.id in seen:
            raise ValidationError(f"Duplicate player id: {p.id}")
        seen.add(p.id)
    return roster


def balance_teams(
    players: Iterable[Player] | None,
    seed: int | None = None,
    rng: SeededRNG | None = None,
    mode: BalanceMode | str = BalanceMode.OPTIMIZED,
    config: BalancerConfig | None = None,
) -> MatchResult:
    """
    Split players into two teams as evenly as possible by total stars, swapping
    only same-position players during refinement.

    rng wins over seed. With neither, a seed is drawn and recorded in the report
    so the same split can be reproduced.
    Empty and single-player rosters are valid; the caller enforces any minimum.
    """
    roster = validate_roster(players)
    mode = parse_mode(mode)
    config = config or BalancerConfig()
    if rng is None:
        rng = SeededRNG(seed if seed is not None else new_seed())

    groups = group_by_position(roster, rng)
    if mode == BalanceMode.ALTERNATING:
        team_a, team_b = alternate_distribute(groups)
    else:
        team_a, team_b = greedy_distribute(groups)

    initial_cost = cost(team_a, team_b)
    swaps = passes = 0
    final_cost = initial_cost
    if mode == BalanceMode.OPTIMIZED:
        refinement = refine(team_a, team_b, max_passes=config.max_passes)
        swaps, passes, final_cost = refinement.swaps, refinement.passes, refinement.final_cost

    report = BalanceReport(
        mode=mode.value,
        seed=rng.seed,
        initial_cost=initial_cost,
        final_cost=final_cost,
        swaps=swaps,
        passes=passes,
    )
    logger.info(
        "balanced %d players (mode=%s, seed=%s): %d vs %d, cost %d -> %d after %d swaps",
        len(roster), mode.value, rng.seed, len(team_a), len(team_b),
        initial_cost, final_cost, swaps,
    )
    return assemble_result(team_a, team_b, config, report)
