"""
Team statistics and MatchResult assembly.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from teambalancer.config import BalancerConfig
from teambalancer.models import BalanceReport, MatchResult, Player, Team


def average_skill(players: Sequence[Player]) -> float:
    """
    Exact mean rounded half-up to one decimal; 0 for an empty team.
    Rounds the exact fraction, not its float: 9/4 -> 2.3 and 41/20 -> 2.1.
    """
    if not players:
        return 0.0
    mean = Decimal(sum(p.stars for p in players)) / Decimal(len(players))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def build_team(name: str, players: Sequence[Player]) -> Team:
    members = list(players)
    return Team(name=name, players=members, average_skill=average_skill(members))


def assemble_result(
    team_a: Sequence[Player],
    team_b: Sequence[Player],
    config: BalancerConfig,
    report: BalanceReport | None = None,
) -> MatchResult:
    return MatchResult(
        team_a=build_team(config.team_a_name, team_a),
        team_b=build_team(config.team_b_name, team_b),
        analysis=config.analysis,
        report=report,
    )
