"""
Caller-side logic around the balancing core: roster building, the minimum
roster rule, async wrapping for UIs, and patching a result after a player edit.
The core itself stays free of these preconditions.
"""
from __future__ import annotations

import asyncio
import uuid
from dataclasses import replace
from typing import Any, Iterable

from teambalancer.balancer import BalanceMode, balance_teams
from teambalancer.balancer.stats import build_team
from teambalancer.config import BalancerConfig, load_config
from teambalancer.models import MatchResult, Player, ValidationError

MIN_PLAYERS = 2


# ---------- Exceptions ----------


class NotEnoughPlayersError(ValueError):
    """Fewer players than needed to make a match."""


class PlayerNotInResultError(KeyError):
    """Player id not present in either team of a result."""


# ---------- Roster ----------


def roster_from_dicts(rows: Iterable[dict[str, Any]]) -> list[Player]:
    """
    Build Players from JSON-like rows {id?, name, position, stars}.
    Rows without an id get a fresh UUID, as new entries do in the roster UI.
    """
    players: list[Player] = []
    for idx, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValidationError(f"Roster row {idx} must be an object")
        data = dict(row)
        if not data.get("id"):
            data["id"] = str(uuid.uuid4())
        players.append(Player.from_dict(data))
    return players


def ensure_min_players(players: list[Player], minimum: int = MIN_PLAYERS) -> None:
    if len(players) < minimum:
        raise NotEnoughPlayersError(
            f"Need at least {minimum} players to make a match, got {len(players)}"
        )


# ---------- Generation ----------


def generate_match(
    players: Iterable[Player],
    seed: int | None = None,
    mode: BalanceMode | str = BalanceMode.OPTIMIZED,
    config: BalancerConfig | None = None,
) -> MatchResult:
    """Enforce the minimum roster size, then balance."""
    roster = list(players)
    ensure_min_players(roster)
    return balance_teams(roster, seed=seed, mode=mode, config=config or load_config())


async def balance_teams_async(
    players: Iterable[Player],
    seed: int | None = None,
    mode: BalanceMode | str = BalanceMode.OPTIMIZED,
    config: BalancerConfig | None = None,
) -> MatchResult:
    """
    Run generate_match off the event loop. config.generate_delay_seconds adds a
    pause first so a loading indicator stays visible; it does not affect the result.
    """
    config = config or load_config()
    if config.generate_delay_seconds > 0:
        await asyncio.sleep(config.generate_delay_seconds)
    return await asyncio.to_thread(generate_match, list(players), seed, mode, config)


# ---------- Result patching ----------


def update_player_in_result(result: MatchResult, player: Player) -> MatchResult:
    """
    Return a new result with the player of the same id replaced (name, position or
    stars edited after generation) and averages recomputed. Team membership does not
    change. The input result is left untouched.
    """
    found = False

    def _patch(members: list[Player]) -> list[Player]:
        nonlocal found
        out = []
        for p in members:
            if p.id == player.id:
                found = True
                out.append(player)
            else:
                out.append(p)
        return out

    players_a = _patch(result.team_a.players)
    players_b = _patch(result.team_b.players)
    if not found:
        raise PlayerNotInResultError(player.id)
    return MatchResult(
        team_a=build_team(result.team_a.name, players_a),
        team_b=build_team(result.team_b.name, players_b),
        analysis=result.analysis,
        report=result.report,
    )


def rename_teams(
    result: MatchResult,
    team_a_name: str | None = None,
    team_b_name: str | None = None,
) -> MatchResult:
    """New result with display names changed; None keeps the current name."""
    for label, name in (("team_a_name", team_a_name), ("team_b_name", team_b_name)):
        if name is not None and not name.strip():
            raise ValidationError(f"{label} must not be blank")
    return MatchResult(
        team_a=replace(
            result.team_a,
            name=team_a_name or result.team_a.name,
            players=list(result.team_a.players),
        ),
        team_b=replace(
            result.team_b,
            name=team_b_name or result.team_b.name,
            players=list(result.team_b.players),
        ),
        analysis=result.analysis,
        report=result.report,
    )
