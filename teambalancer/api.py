"""
REST API for the team balancer.
Thin wrappers around the balancing core and service layer; no state is kept
between requests.
"""
from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from teambalancer.balancer import POSITION_ORDER, BalanceMode, parse_mode
from teambalancer.config import BalancerConfig, load_config
from teambalancer.models import POSITION_LABELS, MatchResult, Player, ValidationError
from teambalancer.services import (
    NotEnoughPlayersError,
    PlayerNotInResultError,
    balance_teams_async,
    roster_from_dicts,
    update_player_in_result,
)

# ---------- FastAPI app ----------
app = FastAPI(
    title="Team Balancer API",
    description="Split a rated roster into two evenly matched teams",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://0.0.0.0:5173",
        "http://[::1]:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request/Response models ----------


class PlayerIn(BaseModel):
    id: str | None = Field(None, description="Opaque unique id; generated when omitted")
    name: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., description="One of: GK, DEF, MID, FWD")
    stars: int = Field(..., ge=1, le=5)


class BalanceRequest(BaseModel):
    players: list[PlayerIn]
    seed: int | None = Field(default=None, description="RNG seed for reproducibility")
    mode: str = Field(default=BalanceMode.OPTIMIZED.value, description="optimized, greedy or alternating")


class UpdatePlayerRequest(BaseModel):
    result: dict[str, Any] = Field(..., description="MatchResult as returned by POST /balance")
    player: PlayerIn


def get_config() -> BalancerConfig:
    return load_config()


# ---------- Endpoints ----------


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/positions")
def get_positions() -> dict[str, Any]:
    """Positions in spine order with their display labels."""
    return {
        "positions": [
            {"value": pos.value, "label": POSITION_LABELS[pos]}
            for pos in POSITION_ORDER
        ]
    }


@app.post("/balance")
async def balance(req: BalanceRequest, config: BalancerConfig = Depends(get_config)) -> dict[str, Any]:
    """
    Balance a roster into two teams.
    400 if fewer than 2 players; 422 for an unknown position or mode.
    """
    try:
        mode = parse_mode(req.mode)
        players = roster_from_dicts(p.model_dump() for p in req.players)
        result = await balance_teams_async(players, seed=req.seed, mode=mode, config=config)
    except NotEnoughPlayersError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result.to_dict()


@app.post("/balance/player")
def update_player(req: UpdatePlayerRequest) -> dict[str, Any]:
    """Apply a post-generation player edit to a result; averages are recomputed."""
    if not req.player.id:
        raise HTTPException(status_code=422, detail="player.id is required")
    try:
        result = MatchResult.from_dict(req.result)
        player = Player.from_dict(req.player.model_dump())
        patched = update_player_in_result(result, player)
    except PlayerNotInResultError:
        raise HTTPException(status_code=404, detail=f"Player not in result: {req.player.id}")
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except KeyError as e:
        raise HTTPException(status_code=422, detail=f"Malformed result, missing field: {e.args[0]}")
    except TypeError:
        raise HTTPException(status_code=422, detail="Malformed result")
    return patched.to_dict()
