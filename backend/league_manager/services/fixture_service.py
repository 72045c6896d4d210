import logging
import uuid
from datetime import date

from league_manager.extensions import db
from league_manager.engine import generate_fixtures, parse_int
from league_manager.models.fixture import Fixture, GoalEvent, GoalSide, PenaltyEvent
from league_manager.models.season import Season
from league_manager.services.standings import recalculate_standings
from league_manager.services.errors import NotFound

logger = logging.getLogger(__name__)

DEFAULT_MATCH_TIME = "15:00"


def _get_fixture(season_id, code):
    return Fixture.query.filter_by(season_id=season_id, code=code).first()


def _next_position(season):
    return max((f.position for f in season.fixtures), default=-1) + 1


def generate_season_fixtures(season_id, ruleset, today=None):
    """Replace every fixture of a season with a freshly generated calendar.

    Uses the season's roster and scheduling defaults. Existing fixtures,
    results and match events are discarded.
    """
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    records, error = generate_fixtures(
        season.team_names,
        season.start_month,
        season.end_month,
        season.match_days,
        season.match_times,
        ruleset=ruleset,
        today=today,
    )
    if error:
        logger.warning("Fixture generation rejected for season %s: %s", season_id, error)
        return None, error

    for fixture in list(season.fixtures):
        db.session.delete(fixture)
    db.session.flush()
    db.session.expire(season, ["fixtures"])

    db.session.add_all([
        Fixture(
            season_id=season.id,
            code=record.id,
            position=position,
            home_team=record.home_team,
            away_team=record.away_team,
            match_date=date.fromisoformat(record.date),
            match_time=record.time,
        )
        for position, record in enumerate(records)
    ])
    db.session.flush()

    logger.info(
        "Generated %d fixtures (%s) for season %s",
        len(records), ruleset, season_id,
    )
    recalculate_standings(season)
    return list(season.fixtures), None


def add_fixture(season_id, data):
    """Add a single fixture by hand. Defaults to the first two teams, today."""
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    names = season.team_names
    fixture = Fixture(
        season_id=season.id,
        code=f"m-{uuid.uuid4().hex}",
        position=_next_position(season),
        home_team=data.get("home_team") or (names[0] if names else ""),
        away_team=data.get("away_team") or (names[1] if len(names) > 1 else ""),
        match_date=data.get("match_date") or date.today(),
        match_time=data.get("match_time") or DEFAULT_MATCH_TIME,
        played=data.get("played", False),
        home_score=parse_int(data.get("home_score")),
        away_score=parse_int(data.get("away_score")),
    )
    db.session.add(fixture)
    db.session.flush()
    db.session.expire(season, ["fixtures"])

    recalculate_standings(season)
    return fixture, None


def update_fixture(season_id, code, data):
    """Apply field updates to a fixture and rebuild standings.

    Each field is handled explicitly; scores go through ``parse_int`` so
    unparseable input lands as 0.
    """
    fixture = _get_fixture(season_id, code)
    if not fixture:
        return None, NotFound("Fixture not found")

    if "home_team" in data:
        fixture.home_team = data["home_team"]
    if "away_team" in data:
        fixture.away_team = data["away_team"]
    if "match_date" in data:
        fixture.match_date = data["match_date"]
    if "match_time" in data:
        fixture.match_time = data["match_time"]
    if "played" in data:
        fixture.played = data["played"]
    if "home_score" in data:
        fixture.home_score = parse_int(data["home_score"])
    if "away_score" in data:
        fixture.away_score = parse_int(data["away_score"])

    db.session.flush()
    recalculate_standings(fixture.season)
    return fixture, None


def set_match_details(season_id, code, data):
    """Replace the goal and penalty events recorded for a fixture."""
    fixture = _get_fixture(season_id, code)
    if not fixture:
        return None, NotFound("Fixture not found")

    goals = []
    for side, key in ((GoalSide.HOME, "home_goals"), (GoalSide.AWAY, "away_goals")):
        for goal in data.get(key, []):
            goals.append(GoalEvent(
                side=side,
                player=goal["player"],
                team=goal["team"],
                is_own_goal=goal.get("is_own_goal", False),
                position=len(goals),
            ))

    penalties = [
        PenaltyEvent(
            player=penalty["player"],
            team=penalty["team"],
            type=penalty["type"],
            position=position,
        )
        for position, penalty in enumerate(data.get("penalties", []))
    ]

    fixture.goals = goals
    fixture.penalties = penalties
    db.session.flush()

    recalculate_standings(fixture.season)
    return fixture, None


def delete_fixture(season_id, code):
    fixture = _get_fixture(season_id, code)
    if not fixture:
        return None, NotFound("Fixture not found")

    season = fixture.season
    db.session.delete(fixture)
    db.session.flush()
    db.session.expire(season, ["fixtures"])

    recalculate_standings(season)
    return code, None
