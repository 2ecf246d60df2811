"""
Tests for the command-line runner.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from teambalancer.run_balance import load_roster_file, main

ROSTER = [
    {"id": "1", "name": "Arquero Uno", "position": "GK", "stars": 3},
    {"id": "2", "name": "Arquero Dos", "position": "GK", "stars": 4},
    {"id": "3", "name": "Zaguero", "position": "DEF", "stars": 5},
    {"id": "4", "name": "Volante", "position": "MID", "stars": 2},
]


@pytest.fixture
def roster_file(tmp_path) -> Path:
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(ROSTER), encoding="utf-8")
    return path


def test_text_output(roster_file, capsys):
    main([str(roster_file), "--seed", "4"])
    out = capsys.readouterr().out
    assert "Equipo Pan" in out
    assert "Equipo Queso" in out
    assert "[ARQ] Arquero Uno" in out
    assert "seed=4" in out


def test_json_output(roster_file, capsys):
    main([str(roster_file), "--seed", "4", "--json"])
    data = json.loads(capsys.readouterr().out)
    ids = [p["id"] for p in data["team_a"]["players"] + data["team_b"]["players"]]
    assert sorted(ids) == ["1", "2", "3", "4"]
    assert data["report"]["mode"] == "optimized"


def test_wrapped_players_key(tmp_path):
    path = tmp_path / "wrapped.json"
    path.write_text(json.dumps({"players": ROSTER}), encoding="utf-8")
    assert load_roster_file(path) == ROSTER


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.json")])


def test_too_few_players(tmp_path):
    path = tmp_path / "one.json"
    path.write_text(json.dumps(ROSTER[:1]), encoding="utf-8")
    with pytest.raises(SystemExit, match="at least 2"):
        main([str(path)])


def test_invalid_roster(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"name": "X", "position": "MID", "stars": 9}] * 2), encoding="utf-8")
    with pytest.raises(SystemExit, match="Invalid roster"):
        main([str(path)])


def test_directory_path(tmp_path):
    with pytest.raises(SystemExit, match="Cannot read roster file"):
        load_roster_file(tmp_path)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b"\xff\xfe[garbage")
    with pytest.raises(SystemExit, match="Cannot read roster file"):
        main([str(path)])
