"""
Tests for upcoming fixture selection.
"""
import pytest

from app.fixture_selector import index_teams_by_id, select_upcoming_fixtures

TEAM_ID = 1


def fixture(fixture_id, event, team_h=TEAM_ID, team_a=2, **extra):
    data = {
        "id": fixture_id,
        "event": event,
        "team_h": team_h,
        "team_a": team_a,
        "team_h_difficulty": 2,
        "team_a_difficulty": 4,
        "kickoff_time": f"2025-09-{fixture_id:02d}T14:00:00Z",
    }
    data.update(extra)
    return data


@pytest.fixture
def teams():
    return index_teams_by_id([
        {
            "id": 1, "name": "Arsenal",
            "strength_attack_home": 1300, "strength_attack_away": 1310,
            "strength_defence_home": 1320, "strength_defence_away": 1330,
        },
        {
            "id": 2, "name": "Chelsea",
            "strength_attack_home": 1200, "strength_attack_away": 1150,
            "strength_defence_home": 1210, "strength_defence_away": 1160,
        },
    ])


def test_sorts_by_gameweek_and_truncates(teams):
    gameweeks = [3, 1, None, 2, 5, 4, 6]
    fixtures = [fixture(i + 1, gw) for i, gw in enumerate(gameweeks)]

    selected = select_upcoming_fixtures(fixtures, TEAM_ID, teams, limit=5)

    assert [f.gw for f in selected] == [1, 2, 3, 4, 5]


def test_unscheduled_fixture_sorts_last(teams):
    fixtures = [fixture(1, None), fixture(2, 30), fixture(3, 2)]

    selected = select_upcoming_fixtures(fixtures, TEAM_ID, teams, limit=5)

    assert [f.gw for f in selected] == [2, 30, None]


def test_filters_to_team_fixtures(teams):
    fixtures = [
        fixture(1, 1, team_h=5, team_a=6),
        fixture(2, 2, team_h=2, team_a=TEAM_ID),
        fixture(3, 3),
    ]

    selected = select_upcoming_fixtures(fixtures, TEAM_ID, teams)

    assert [f.gw for f in selected] == [2, 3]


def test_same_gameweek_keeps_upstream_order(teams):
    fixtures = [fixture(1, 4, team_a=7), fixture(2, 4, team_a=8), fixture(3, 4, team_a=9)]

    selected = select_upcoming_fixtures(fixtures, TEAM_ID, teams, limit=2)

    assert [f.opponent_team_id for f in selected] == [7, 8]


def test_home_fixture_uses_opponent_away_strength(teams):
    selected = select_upcoming_fixtures([fixture(1, 1, team_h=TEAM_ID, team_a=2)], TEAM_ID, teams)
    home = selected[0]

    assert home.is_home is True
    assert home.opponent_team_id == 2
    assert home.opponent_name == "Chelsea"
    assert home.difficulty == 2
    assert home.opponent_att_strength == 1150
    assert home.opponent_def_strength == 1160


def test_away_fixture_uses_opponent_home_strength(teams):
    selected = select_upcoming_fixtures([fixture(1, 1, team_h=2, team_a=TEAM_ID)], TEAM_ID, teams)
    away = selected[0]

    assert away.is_home is False
    assert away.opponent_team_id == 2
    assert away.difficulty == 4
    assert away.opponent_att_strength == 1200
    assert away.opponent_def_strength == 1210


def test_unknown_opponent_has_null_strengths(teams):
    selected = select_upcoming_fixtures([fixture(1, 1, team_a=42)], TEAM_ID, teams)
    unknown = selected[0]

    assert unknown.opponent_name == "Unknown"
    assert unknown.opponent_att_strength is None
    assert unknown.opponent_def_strength is None


def test_to_dict_fields(teams):
    data = select_upcoming_fixtures([fixture(9, 7)], TEAM_ID, teams)[0].to_dict()

    assert data == {
        "gw": 7,
        "is_home": True,
        "opponent_team_id": 2,
        "opponent_name": "Chelsea",
        "difficulty": 2,
        "opponent_def_strength": 1160,
        "opponent_att_strength": 1150,
        "kickoff_time": "2025-09-09T14:00:00Z",
    }


def test_no_fixtures_for_team(teams):
    assert select_upcoming_fixtures([fixture(1, 1, team_h=5, team_a=6)], TEAM_ID, teams) == []
