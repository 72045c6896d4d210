import logging

from league_manager.extensions import db
from league_manager.models.fixture import Fixture, GoalEvent, PenaltyEvent
from league_manager.models.season import Season
from league_manager.models.team import Team
from league_manager.services.standings import recalculate_standings
from league_manager.services.errors import NotFound, Conflict

logger = logging.getLogger(__name__)


def _get_team(season_id, team_id):
    team = db.session.get(Team, team_id)
    if not team or team.season_id != season_id:
        return None
    return team


def _referenced_by_fixtures(season, name):
    for fixture in season.fixtures:
        if name in (fixture.home_team, fixture.away_team):
            return True
        if any(event.team == name for event in fixture.goals + fixture.penalties):
            return True
    return False


def add_team(season_id, name):
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    name = name.strip()
    if not name:
        return None, "Team name is required"
    if name in season.team_names:
        return None, Conflict(f"Team {name} is already in this season")

    position = max((t.position for t in season.teams), default=-1) + 1
    team = Team(season_id=season.id, name=name, position=position)
    db.session.add(team)
    db.session.flush()
    db.session.expire(season, ["teams"])

    recalculate_standings(season)
    return team, None


def rename_team(season_id, team_id, new_name):
    """Rename a team and carry the new name into every reference.

    Fixtures and match events point at teams by name, so they are rewritten
    along with the roster entry before standings are rebuilt.
    """
    team = _get_team(season_id, team_id)
    if not team:
        return None, NotFound("Team not found")

    season = team.season
    new_name = new_name.strip()
    if not new_name:
        return None, "Team name is required"
    old_name = team.name
    if new_name == old_name:
        return team, None

    if new_name in season.team_names:
        return None, Conflict(f"Team {new_name} is already in this season")
    # Results left behind by a removed team must not be taken over
    if _referenced_by_fixtures(season, new_name):
        return None, Conflict(f"Team {new_name} is already referenced by fixtures")

    team.name = new_name

    fixture_ids = [f.id for f in season.fixtures]
    Fixture.query.filter(
        Fixture.season_id == season.id, Fixture.home_team == old_name
    ).update({"home_team": new_name}, synchronize_session=False)
    Fixture.query.filter(
        Fixture.season_id == season.id, Fixture.away_team == old_name
    ).update({"away_team": new_name}, synchronize_session=False)
    if fixture_ids:
        GoalEvent.query.filter(
            GoalEvent.fixture_id.in_(fixture_ids), GoalEvent.team == old_name
        ).update({"team": new_name}, synchronize_session=False)
        PenaltyEvent.query.filter(
            PenaltyEvent.fixture_id.in_(fixture_ids), PenaltyEvent.team == old_name
        ).update({"team": new_name}, synchronize_session=False)

    db.session.flush()
    db.session.expire_all()

    logger.info("Renamed team %r to %r in season %s", old_name, new_name, season_id)
    season = db.session.get(Season, season_id)
    recalculate_standings(season)
    return db.session.get(Team, team_id), None


def remove_team(season_id, team_id):
    """Drop a team from the roster. Its fixtures are kept as they are."""
    team = _get_team(season_id, team_id)
    if not team:
        return None, NotFound("Team not found")

    season = team.season
    db.session.delete(team)
    db.session.flush()
    db.session.expire(season, ["teams"])

    recalculate_standings(season)
    return team, None
