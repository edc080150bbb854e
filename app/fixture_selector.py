"""
Upcoming fixture selection for a single team.
"""
from typing import Dict, Any, List, Optional

from app.view_models import FixtureView, UNKNOWN_TEAM_NAME

# Fixtures without a gameweek sort after every scheduled one
UNSCHEDULED_GAMEWEEK = 999
DEFAULT_FIXTURE_LIMIT = 5


def _gameweek_sort_key(fixture: Dict[str, Any]) -> int:
    return fixture.get("event") or UNSCHEDULED_GAMEWEEK


def _fixture_view(
    fixture: Dict[str, Any],
    team_id: int,
    teams_by_id: Dict[int, Dict[str, Any]],
) -> FixtureView:
    is_home = fixture.get("team_h") == team_id
    opponent_id = fixture.get("team_a") if is_home else fixture.get("team_h")
    opponent = teams_by_id.get(opponent_id)

    # Opponent strength at this venue: we are home, so they play away
    def_strength: Optional[int] = None
    att_strength: Optional[int] = None
    if opponent is not None:
        venue = "away" if is_home else "home"
        def_strength = opponent.get(f"strength_defence_{venue}")
        att_strength = opponent.get(f"strength_attack_{venue}")

    return FixtureView(
        gw=fixture.get("event"),
        is_home=is_home,
        opponent_team_id=opponent_id,
        opponent_name=opponent.get("name", UNKNOWN_TEAM_NAME) if opponent else UNKNOWN_TEAM_NAME,
        difficulty=fixture.get("team_h_difficulty") if is_home else fixture.get("team_a_difficulty"),
        opponent_def_strength=def_strength,
        opponent_att_strength=att_strength,
        kickoff_time=fixture.get("kickoff_time"),
    )


def select_upcoming_fixtures(
    fixtures: List[Dict[str, Any]],
    team_id: int,
    teams_by_id: Dict[int, Dict[str, Any]],
    limit: int = DEFAULT_FIXTURE_LIMIT,
) -> List[FixtureView]:
    """
    Pick the next fixtures for a team, nearest gameweek first.

    Args:
        fixtures: Raw upstream fixtures
        team_id: Team whose fixtures are selected
        teams_by_id: Team records keyed by id, for opponent lookup
        limit: Maximum number of fixtures returned

    Returns:
        Up to `limit` FixtureView objects in ascending gameweek order.
        Fixtures sharing a gameweek keep their upstream order.
    """
    team_fixtures = [
        f for f in fixtures
        if f.get("team_h") == team_id or f.get("team_a") == team_id
    ]
    team_fixtures.sort(key=_gameweek_sort_key)

    return [_fixture_view(f, team_id, teams_by_id) for f in team_fixtures[:limit]]


def index_teams_by_id(teams: List[Dict[str, Any]]) -> Dict[int, Dict[str, Any]]:
    """Index bootstrap team records by id."""
    return {t.get("id"): t for t in teams}
