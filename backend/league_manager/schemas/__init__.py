from league_manager.schemas.league import LeagueSchema, CreateLeagueSchema, UpdateLeagueSchema
from league_manager.schemas.season import SeasonSchema, CreateSeasonSchema, UpdateSeasonSchema
from league_manager.schemas.team import TeamSchema, TeamNameSchema
from league_manager.schemas.fixture import (
    FixtureSchema,
    CreateFixtureSchema,
    UpdateFixtureSchema,
    MatchDetailsSchema,
    GenerateFixturesSchema,
)
from league_manager.schemas.standing import (
    StandingSchema,
    OverrideStandingsSchema,
    PlayerStatsSchema,
)
from league_manager.schemas.player import PlayerSchema, CreatePlayerSchema, UpdatePlayerSchema
from league_manager.schemas.auth import LoginSchema

__all__ = [
    "LeagueSchema",
    "CreateLeagueSchema",
    "UpdateLeagueSchema",
    "SeasonSchema",
    "CreateSeasonSchema",
    "UpdateSeasonSchema",
    "TeamSchema",
    "TeamNameSchema",
    "FixtureSchema",
    "CreateFixtureSchema",
    "UpdateFixtureSchema",
    "MatchDetailsSchema",
    "GenerateFixturesSchema",
    "StandingSchema",
    "OverrideStandingsSchema",
    "PlayerStatsSchema",
    "PlayerSchema",
    "CreatePlayerSchema",
    "UpdatePlayerSchema",
    "LoginSchema",
]
