"""
Tests for domain models: construction-time validation, position parsing, dict round trips.
"""
from __future__ import annotations

from pathlib import Path

import pytest

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from teambalancer.models import (
    POSITION_LABELS,
    BalanceReport,
    MatchResult,
    Player,
    Position,
    Team,
    ValidationError,
    parse_position,
)


class TestParsePosition:
    def test_enum_passthrough(self):
        assert parse_position(Position.GK) is Position.GK

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("GK", Position.GK),
            ("def", Position.DEF),
            (" Mid ", Position.MID),
            ("Goalkeeper", Position.GK),
            ("DEFENDER", Position.DEF),
            ("midfielder", Position.MID),
            ("forward", Position.FWD),
        ],
    )
    def test_accepted_spellings(self, raw, expected):
        assert parse_position(raw) is expected

    @pytest.mark.parametrize("raw", ["", "STRIKER", "ARQ", None, 3])
    def test_unknown_position_rejected(self, raw):
        with pytest.raises(ValidationError):
            parse_position(raw)

    def test_every_position_has_label(self):
        assert set(POSITION_LABELS) == set(Position)
        assert POSITION_LABELS[Position.GK] == "ARQ"


class TestPlayer:
    def test_valid_player_normalizes_position(self):
        p = Player(id="p1", name="Lio", position="fwd", stars=5)
        assert p.position is Position.FWD
        assert p.stars == 5

    @pytest.mark.parametrize("stars", [0, 6, -1, 3.0, "3", True, None])
    def test_bad_rating_rejected(self, stars):
        with pytest.raises(ValidationError):
            Player(id="p1", name="X", position="MID", stars=stars)

    def test_bad_position_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            Player(id="p1", name="X", position="LIBERO", stars=3)

    @pytest.mark.parametrize("pid", ["", "   ", None])
    def test_empty_id_rejected(self, pid):
        with pytest.raises(ValidationError):
            Player(id=pid, name="X", position="MID", stars=3)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Player(id="p1", name="X", position="MID", stars=9)

    def test_immutable(self):
        p = Player(id="p1", name="X", position="MID", stars=3)
        with pytest.raises(AttributeError):
            p.stars = 4

    def test_dict_round_trip(self):
        p = Player(id="p1", name="Dibu", position=Position.GK, stars=4)
        d = p.to_dict()
        assert d == {"id": "p1", "name": "Dibu", "position": "GK", "stars": 4}
        assert Player.from_dict(d) == p

    def test_from_dict_missing_field(self):
        with pytest.raises(ValidationError, match="stars"):
            Player.from_dict({"id": "p1", "name": "X", "position": "MID"})


class TestTeamAndResult:
    def _team(self):
        return Team(
            name="A",
            players=[
                Player("1", "a", Position.GK, 3),
                Player("2", "b", Position.MID, 4),
                Player("3", "c", Position.MID, 2),
            ],
            average_skill=3.0,
        )

    def test_team_helpers(self):
        team = self._team()
        assert team.size == 3
        assert team.total_stars == 9
        assert team.player_ids == ["1", "2", "3"]
        assert team.count_by_position() == {
            Position.GK: 1,
            Position.DEF: 0,
            Position.MID: 2,
            Position.FWD: 0,
        }

    def test_empty_team(self):
        team = Team(name="B")
        assert team.size == 0
        assert team.total_stars == 0
        assert team.average_skill == 0.0

    def test_result_cost_and_dict(self):
        team_a = self._team()
        team_b = Team(name="B", players=[Player("4", "d", Position.FWD, 5)], average_skill=5.0)
        report = BalanceReport(mode="optimized", seed=7, initial_cost=4, final_cost=4)
        result = MatchResult(team_a=team_a, team_b=team_b, analysis="ok", report=report)
        assert result.cost == 4
        assert [p.id for p in result.all_players()] == ["1", "2", "3", "4"]
        d = result.to_dict()
        assert d["report"]["seed"] == 7
        restored = MatchResult.from_dict(d)
        assert restored.team_a.player_ids == ["1", "2", "3"]
        assert restored.team_b.average_skill == 5.0
        assert restored.report == report

    def test_result_dict_without_report(self):
        result = MatchResult(team_a=Team(name="A"), team_b=Team(name="B"), analysis="")
        assert "report" not in result.to_dict()
        assert MatchResult.from_dict(result.to_dict()).report is None
