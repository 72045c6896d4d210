from league_manager.engine.records import (
    FixtureRecord,
    GoalEvent,
    MatchDetails,
    PenaltyEvent,
    PenaltyType,
    PlayerStats,
    TeamStanding,
)
from league_manager.engine.scheduler import (
    FixtureRuleset,
    WEEKDAYS,
    generate_fixtures,
    match_dates,
    round_robin_rounds,
)
from league_manager.engine.standings import (
    compute_player_stats,
    compute_standings,
    parse_int,
    sort_standings,
)

__all__ = [
    "FixtureRecord",
    "GoalEvent",
    "MatchDetails",
    "PenaltyEvent",
    "PenaltyType",
    "PlayerStats",
    "TeamStanding",
    "FixtureRuleset",
    "WEEKDAYS",
    "generate_fixtures",
    "match_dates",
    "round_robin_rounds",
    "compute_player_stats",
    "compute_standings",
    "parse_int",
    "sort_standings",
]
