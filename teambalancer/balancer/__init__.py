"""
Team balancing core: position grouping, greedy distribution, same-position
hill climbing, and result assembly. No I/O.
"""
from .rng import SeededRNG, new_seed
from .grouping import POSITION_ORDER, group_by_position, iter_spine
from .distribution import alternate_distribute, greedy_distribute, joins_team_a, star_total
from .refinement import RefinementReport, cost, find_improving_swap, refine
from .stats import assemble_result, average_skill, build_team
from .engine import BalanceMode, balance_teams, parse_mode, validate_roster

__all__ = [
    "SeededRNG",
    "new_seed",
    "POSITION_ORDER",
    "group_by_position",
    "iter_spine",
    "alternate_distribute",
    "greedy_distribute",
    "joins_team_a",
    "star_total",
    "RefinementReport",
    "cost",
    "find_improving_swap",
    "refine",
    "assemble_result",
    "average_skill",
    "build_team",
    "BalanceMode",
    "balance_teams",
    "parse_mode",
    "validate_roster",
]
