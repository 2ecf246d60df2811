"""
Service layer: caller-side rules around the balancing core.
No rule here changes how teams are balanced.
"""
from .balance_service import (
    MIN_PLAYERS,
    NotEnoughPlayersError,
    PlayerNotInResultError,
    balance_teams_async,
    ensure_min_players,
    generate_match,
    rename_teams,
    roster_from_dicts,
    update_player_in_result,
)

__all__ = [
    "MIN_PLAYERS",
    "NotEnoughPlayersError",
    "PlayerNotInResultError",
    "balance_teams_async",
    "ensure_min_players",
    "generate_match",
    "rename_teams",
    "roster_from_dicts",
    "update_player_in_result",
]
