"""
View Models for UI Rendering
Strict mapping layer that converts FPL API records into presentation-ready models.
Only the fields listed here are exposed to the frontend.
"""
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field


UNKNOWN_TEAM_NAME = "Unknown"
UNKNOWN_POSITION = "UNK"

# Upstream element fields copied verbatim into PlayerView.stats
PLAYER_STAT_FIELDS = (
    "now_cost",  # e.g. 55 = £5.5m
    "total_points",
    "minutes",
    "goals_scored",
    "assists",
    "clean_sheets",
    "goals_conceded",
    "own_goals",
    "penalties_saved",
    "penalties_missed",
    "yellow_cards",
    "red_cards",
    "saves",
    "bonus",
    "bps",
    "influence",
    "creativity",
    "threat",
    "ict_index",
    "form",
    "points_per_game",
    "selected_by_percent",
    "ep_next",
    "ep_this",
    # expected stats from FPL
    "expected_goals",
    "expected_assists",
    "expected_goal_involvements",
    "expected_goals_conceded",
)


def _find_by_id(records: List[Dict[str, Any]], record_id: Any) -> Optional[Dict[str, Any]]:
    for record in records:
        if record.get("id") == record_id:
            return record
    return None


@dataclass
class PlayerView:
    """
    Stable player payload for UI consumption.

    Stats absent upstream are left out of `stats` rather than zero-filled.
    """
    id: Any
    web_name: Optional[str]
    first_name: Optional[str]
    second_name: Optional[str]
    team_id: Any
    team: str
    position: str
    stats: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(
        cls,
        raw: Dict[str, Any],
        teams: List[Dict[str, Any]],
        element_types: List[Dict[str, Any]],
    ) -> "PlayerView":
        """Map a raw FPL element to a stable payload."""
        team = _find_by_id(teams, raw.get("team"))
        element_type = _find_by_id(element_types, raw.get("element_type"))

        return cls(
            id=raw.get("id"),
            web_name=raw.get("web_name"),
            first_name=raw.get("first_name"),
            second_name=raw.get("second_name"),
            team_id=raw.get("team"),
            team=team.get("name", UNKNOWN_TEAM_NAME) if team else UNKNOWN_TEAM_NAME,
            position=(
                element_type.get("singular_name_short", UNKNOWN_POSITION)
                if element_type else UNKNOWN_POSITION
            ),
            stats={name: raw[name] for name in PLAYER_STAT_FIELDS if name in raw},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "id": self.id,
            "web_name": self.web_name,
            "first_name": self.first_name,
            "second_name": self.second_name,
            "team_id": self.team_id,
            "team": self.team,
            "position": self.position,
            "stats": dict(self.stats),
        }


@dataclass
class FixtureView:
    """One upcoming fixture seen from a single team's side."""
    gw: Optional[int]
    is_home: bool
    opponent_team_id: Any
    opponent_name: str
    difficulty: Optional[int]
    opponent_def_strength: Optional[int]  # None means no data, not zero
    opponent_att_strength: Optional[int]
    kickoff_time: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "gw": self.gw,
            "is_home": self.is_home,
            "opponent_team_id": self.opponent_team_id,
            "opponent_name": self.opponent_name,
            "difficulty": self.difficulty,
            "opponent_def_strength": self.opponent_def_strength,
            "opponent_att_strength": self.opponent_att_strength,
            "kickoff_time": self.kickoff_time,
        }


# =============================================================================
# CONVERSION HELPERS
# =============================================================================

def project_player(
    raw: Dict[str, Any],
    teams: List[Dict[str, Any]],
    element_types: List[Dict[str, Any]],
) -> PlayerView:
    """Project a raw FPL element using the bootstrap lookup tables."""
    return PlayerView.from_raw(raw, teams, element_types)


def players_to_view_models(bootstrap: Dict[str, Any]) -> List[PlayerView]:
    """Project every element of a bootstrap payload, keeping upstream order."""
    teams = bootstrap.get("teams") or []
    element_types = bootstrap.get("element_types") or []
    return [
        project_player(raw, teams, element_types)
        for raw in bootstrap.get("elements") or []
    ]
