"""
Balancer configuration. Defaults match the app; environment variables override.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_PASSES = 100
DEFAULT_TEAM_A_NAME = "Equipo Pan"
DEFAULT_TEAM_B_NAME = "Equipo Queso"
DEFAULT_ANALYSIS = "Equipos optimizados para paridad de estrellas."


@dataclass(frozen=True)
class BalancerConfig:
    """Knobs for one balancing run."""
    max_passes: int = DEFAULT_MAX_PASSES  # safety ceiling on refinement passes
    team_a_name: str = DEFAULT_TEAM_A_NAME
    team_b_name: str = DEFAULT_TEAM_B_NAME
    analysis: str = DEFAULT_ANALYSIS
    # Cosmetic delay for async callers showing a loading indicator; the core ignores it
    generate_delay_seconds: float = 0.0

    def __post_init__(self) -> None:
        if self.max_passes < 0:
            raise ValueError(f"max_passes must be >= 0, got {self.max_passes}")
        if self.generate_delay_seconds < 0:
            raise ValueError(f"generate_delay_seconds must be >= 0, got {self.generate_delay_seconds}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_config() -> BalancerConfig:
    """Build config from TEAMBALANCER_* environment variables."""
    return BalancerConfig(
        max_passes=_env_int("TEAMBALANCER_MAX_PASSES", DEFAULT_MAX_PASSES),
        team_a_name=os.environ.get("TEAMBALANCER_TEAM_A_NAME", DEFAULT_TEAM_A_NAME),
        team_b_name=os.environ.get("TEAMBALANCER_TEAM_B_NAME", DEFAULT_TEAM_B_NAME),
        analysis=DEFAULT_ANALYSIS,
        generate_delay_seconds=_env_float("TEAMBALANCER_GENERATE_DELAY", 0.0),
    )
