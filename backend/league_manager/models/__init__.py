from league_manager.models.league import League
from league_manager.models.season import Season
from league_manager.models.team import Team
from league_manager.models.fixture import Fixture, GoalEvent, GoalSide, PenaltyEvent
from league_manager.models.standing import Standing
from league_manager.models.player import Player, PlayerPosition

__all__ = [
    "League",
    "Season",
    "Team",
    "Fixture",
    "GoalEvent",
    "GoalSide",
    "PenaltyEvent",
    "Standing",
    "Player",
    "PlayerPosition",
]
