#!/usr/bin/env python3
"""
Demo: build a sample roster → balance with each mode → patch a player → print.
Run from project root: python3 scripts/demo_balance.py [--seed N]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from teambalancer.balancer import BalanceMode
from teambalancer.models import Player, Position
from teambalancer.run_balance import print_result
from teambalancer.services import generate_match, update_player_in_result

SAMPLE = [
    ("Tano", Position.GK, 3),
    ("Flaco", Position.GK, 2),
    ("Ruso", Position.DEF, 4),
    ("Pelado", Position.DEF, 3),
    ("Negro", Position.DEF, 2),
    ("Colo", Position.MID, 5),
    ("Chino", Position.MID, 4),
    ("Gordo", Position.MID, 2),
    ("Rulo", Position.MID, 1),
    ("Pipa", Position.FWD, 5),
    ("Turco", Position.FWD, 3),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Balance a sample roster with every mode.")
    parser.add_argument("--seed", type=int, default=2024, help="RNG seed for reproducibility")
    args = parser.parse_args()

    players = [Player(id=f"p{i}", name=n, position=pos, stars=s) for i, (n, pos, s) in enumerate(SAMPLE)]
    print(f"Roster: {len(players)} players, {sum(p.stars for p in players)} stars")

    for mode in BalanceMode:
        print(f"\n--- {mode.value} ---")
        print_result(generate_match(players, seed=args.seed, mode=mode))

    # Edit a player after generation, as the field view does when dragging across zones
    result = generate_match(players, seed=args.seed)
    moved = result.team_a.players[-1]
    edited = Player(id=moved.id, name=moved.name, position=Position.FWD, stars=moved.stars)
    patched = update_player_in_result(result, edited)
    print(f"Moved {moved.name} to {Position.FWD.value}; team totals unchanged:")
    print(f"  {patched.team_a.name} {patched.team_a.total_stars}  |  {patched.team_b.name} {patched.team_b.total_stars}")


if __name__ == "__main__":
    main()
