"""Plain records exchanged between the persistence layer and the engine.

The scheduler produces FixtureRecord lists, the standings calculator
consumes them. Neither touches the database.
"""
from dataclasses import dataclass, field
from typing import List, Optional
import enum


class PenaltyType(enum.Enum):
    SIN_BIN = "sin_bin"
    RED_CARD = "red_card"


@dataclass(frozen=True)
class GoalEvent:
    player: str
    team: str
    is_own_goal: bool = False


@dataclass(frozen=True)
class PenaltyEvent:
    player: str
    team: str
    type: PenaltyType


@dataclass
class MatchDetails:
    home_goals: List[GoalEvent] = field(default_factory=list)
    away_goals: List[GoalEvent] = field(default_factory=list)
    penalties: List[PenaltyEvent] = field(default_factory=list)


@dataclass
class FixtureRecord:
    id: str
    home_team: str
    away_team: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    played: bool = False
    home_score: int = 0
    away_score: int = 0
    details: Optional[MatchDetails] = None

    def mirrored(self, fixture_id, date, time):
        """Return leg of this fixture: home and away swapped, new slot."""
        return FixtureRecord(
            id=fixture_id,
            home_team=self.away_team,
            away_team=self.home_team,
            date=date,
            time=time,
        )


@dataclass
class TeamStanding:
    team: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0


@dataclass
class PlayerStats:
    goals: int = 0
    assists: int = 0  # no event populates this yet
    own_goals: int = 0
    sin_bins: int = 0
    red_cards: int = 0
