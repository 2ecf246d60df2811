"""
Balance a roster file from the terminal and print both teams.

Roster file: JSON list of {"id"?, "name", "position", "stars"}.
Run from project root: python -m teambalancer.run_balance roster.json --seed 7
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from teambalancer.balancer import BalanceMode
from teambalancer.config import load_config
from teambalancer.models import POSITION_LABELS, MatchResult, Team, ValidationError
from teambalancer.services import NotEnoughPlayersError, generate_match, roster_from_dicts


def load_roster_file(path: Path) -> list[dict]:
    if not path.exists():
        raise SystemExit(f"Roster file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"Cannot read roster file: {e}")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SystemExit(f"Roster file is not valid JSON: {e}")
    # Accept a bare list or {"players": [...]}
    if isinstance(data, dict):
        data = data.get("players", [])
    if not isinstance(data, list):
        raise SystemExit("Roster file must contain a list of players")
    return data


def _print_team(team: Team) -> None:
    print(f"  {team.name}  (avg {team.average_skill:.1f}, total {team.total_stars})")
    print("  " + "-" * 40)
    for p in team.players:
        print(f"    [{POSITION_LABELS[p.position]}] {p.name:<24} {'*' * p.stars}")
    print()


def print_result(result: MatchResult) -> None:
    print()
    print("=" * 60)
    _print_team(result.team_a)
    _print_team(result.team_b)
    print("=" * 60)
    if result.report is not None:
        r = result.report
        print(
            f"  mode={r.mode} seed={r.seed} cost {r.initial_cost} -> {r.final_cost} "
            f"({r.swaps} swaps, {r.passes} passes)"
        )
    print(f"  {result.analysis}")
    print()


def run(
    roster_path: Path,
    seed: int | None = None,
    mode: str = BalanceMode.OPTIMIZED.value,
    as_json: bool = False,
) -> MatchResult:
    rows = load_roster_file(roster_path)
    try:
        players = roster_from_dicts(rows)
        result = generate_match(players, seed=seed, mode=mode, config=load_config())
    except NotEnoughPlayersError as e:
        raise SystemExit(str(e))
    except ValidationError as e:
        raise SystemExit(f"Invalid roster: {e}")
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_result(result)
    return result


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Split a rated roster into two balanced teams.")
    parser.add_argument("roster", type=Path, help="JSON roster file")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in BalanceMode],
        default=BalanceMode.OPTIMIZED.value,
        help="Distribution strategy",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each swap")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    run(args.roster, seed=args.seed, mode=args.mode, as_json=args.json)


if __name__ == "__main__":
    main()
