"""
Data models for the team balancer.
Domain objects only. No balancing or API logic.

Players are immutable; team membership lives in Team.players, never on the Player.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationError(ValueError):
    """Malformed roster input (unknown position, rating out of range, missing id...)."""


# ---------- Position ----------
class Position(str, Enum):
    """Closed set of position categories. Only same-position players are swapped."""
    GK = "GK"    # Goalkeeper
    DEF = "DEF"  # Defender
    MID = "MID"  # Midfielder
    FWD = "FWD"  # Forward


POSITION_LABELS: dict[Position, str] = {
    Position.GK: "ARQ",
    Position.DEF: "DEF",
    Position.MID: "MED",
    Position.FWD: "DEL",
}

_POSITION_ALIASES: dict[str, Position] = {
    "goalkeeper": Position.GK,
    "defender": Position.DEF,
    "midfielder": Position.MID,
    "forward": Position.FWD,
}

MIN_STARS = 1
MAX_STARS = 5


def parse_position(value: Any) -> Position:
    """
    Accept a Position, its value ("GK"), or the long name ("goalkeeper").
    Case-insensitive. Raises ValidationError for anything else.
    """
    if isinstance(value, Position):
        return value
    if isinstance(value, str):
        key = value.strip()
        try:
            return Position(key.upper())
        except ValueError:
            pass
        if key.lower() in _POSITION_ALIASES:
            return _POSITION_ALIASES[key.lower()]
    raise ValidationError(
        f"Unknown position: {value!r}. Must be one of: {', '.join(p.value for p in Position)}"
    )


def validate_stars(value: Any) -> int:
    # bool is an int subclass; True would silently become a 1-star player
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Rating must be an integer, got {value!r}")
    if not MIN_STARS <= value <= MAX_STARS:
        raise ValidationError(f"Rating must be between {MIN_STARS} and {MAX_STARS}, got {value}")
    return value


# ---------- Player ----------
@dataclass(frozen=True)
class Player:
    """
    A rated player, validated at construction time.
    """
    id: str
    name: str
    position: Position
    stars: int  # 1-5

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Player id must be a non-empty string")
        if not isinstance(self.name, str):
            raise ValidationError(f"Player name must be a string, got {self.name!r}")
        # frozen: bypass __setattr__ to store the normalized enum
        object.__setattr__(self, "position", parse_position(self.position))
        validate_stars(self.stars)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.value,
            "stars": self.stars,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Player:
        try:
            return cls(id=d["id"], name=d["name"], position=d["position"], stars=d["stars"])
        except KeyError as e:
            raise ValidationError(f"Player is missing field: {e.args[0]}") from e


# ---------- Team ----------
@dataclass
class Team:
    """
    One side of a match. Player order is insertion order from the balancer and
    carries no meaning. average_skill is derived at assembly time.
    """
    name: str
    players: list[Player] = field(default_factory=list)
    average_skill: float = 0.0

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def total_stars(self) -> int:
        return sum(p.stars for p in self.players)

    @property
    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]

    def count_by_position(self) -> dict[Position, int]:
        counts = {pos: 0 for pos in Position}
        for p in self.players:
            counts[p.position] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
            "average_skill": self.average_skill,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Team:
        return cls(
            name=d["name"],
            players=[Player.from_dict(p) for p in d.get("players", [])],
            average_skill=d.get("average_skill", 0.0),
        )


# ---------- Balance diagnostics ----------
@dataclass(frozen=True)
class BalanceReport:
    """How a result was produced. Enough to replay it (mode + seed)."""
    mode: str
    seed: int | None
    initial_cost: int
    final_cost: int
    swaps: int = 0
    passes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "seed": self.seed,
            "initial_cost": self.initial_cost,
            "final_cost": self.final_cost,
            "swaps": self.swaps,
            "passes": self.passes,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> BalanceReport:
        return cls(
            mode=d["mode"],
            seed=d.get("seed"),
            initial_cost=d["initial_cost"],
            final_cost=d["final_cost"],
            swaps=d.get("swaps", 0),
            passes=d.get("passes", 0),
        )


# ---------- MatchResult ----------
@dataclass
class MatchResult:
    """
    Two-team partition of the input roster.
    Every input player appears in exactly one of team_a / team_b.
    """
    team_a: Team
    team_b: Team
    analysis: str
    report: BalanceReport | None = None

    @property
    def cost(self) -> int:
        return abs(self.team_a.total_stars - self.team_b.total_stars)

    def all_players(self) -> list[Player]:
        return self.team_a.players + self.team_b.players

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "team_a": self.team_a.to_dict(),
            "team_b": self.team_b.to_dict(),
            "analysis": self.analysis,
        }
        if self.report is not None:
            d["report"] = self.report.to_dict()
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MatchResult:
        report = d.get("report")
        return cls(
            team_a=Team.from_dict(d["team_a"]),
            team_b=Team.from_dict(d["team_b"]),
            analysis=d.get("analysis", ""),
            report=BalanceReport.from_dict(report) if report else None,
        )
