import logging
from datetime import datetime, timezone

from league_manager.extensions import db
from league_manager.engine import (
    FixtureRecord,
    GoalEvent as GoalRecord,
    MatchDetails,
    PenaltyEvent as PenaltyRecord,
    compute_player_stats,
    compute_standings,
    parse_int,
)
from league_manager.models.fixture import GoalSide
from league_manager.models.season import Season
from league_manager.models.standing import Standing
from league_manager.services.errors import NotFound, Conflict

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = (
    "played",
    "won",
    "drawn",
    "lost",
    "goals_for",
    "goals_against",
    "points",
)


def fixture_record(fixture):
    """Convert a Fixture row into the plain record the engine works on."""
    details = None
    if fixture.goals or fixture.penalties:
        details = MatchDetails(
            home_goals=[
                GoalRecord(player=g.player, team=g.team, is_own_goal=g.is_own_goal)
                for g in fixture.goals if g.side == GoalSide.HOME
            ],
            away_goals=[
                GoalRecord(player=g.player, team=g.team, is_own_goal=g.is_own_goal)
                for g in fixture.goals if g.side == GoalSide.AWAY
            ],
            penalties=[
                PenaltyRecord(player=p.player, team=p.team, type=p.type)
                for p in fixture.penalties
            ],
        )

    return FixtureRecord(
        id=fixture.code,
        home_team=fixture.home_team,
        away_team=fixture.away_team,
        date=fixture.match_date.isoformat() if fixture.match_date else "",
        time=fixture.match_time or "",
        played=fixture.played,
        home_score=fixture.home_score or 0,
        away_score=fixture.away_score or 0,
        details=details,
    )


def _clear_standings(season):
    # Deletes must reach the database before the new rows are inserted,
    # otherwise the (season, team) unique constraint trips.
    Standing.query.filter_by(season_id=season.id).delete()
    db.session.flush()
    db.session.expire(season, ["standings"])


def _replace_standings(season, rows):
    _clear_standings(season)

    now = datetime.now(timezone.utc)
    db.session.add_all([
        Standing(
            season_id=season.id,
            rank=rank,
            team=row.team,
            played=row.played,
            won=row.won,
            drawn=row.drawn,
            lost=row.lost,
            goals_for=row.goals_for,
            goals_against=row.goals_against,
            goal_difference=row.goal_difference,
            points=row.points,
            updated_at=now,
        )
        for rank, row in enumerate(rows, start=1)
    ])


def recalculate_standings(season):
    """Rebuild the cached standings of a season from its fixtures.

    Called explicitly by every service that mutates fixtures or the roster.
    Commits and returns the engine rows in rank order.
    """
    fixtures = [fixture_record(f) for f in season.fixtures]
    rows = compute_standings(season.team_names, fixtures)

    _replace_standings(season, rows)
    db.session.commit()

    logger.info(
        "Recalculated standings for season %s: %d teams, %d played fixtures",
        season.id, len(rows), sum(1 for f in fixtures if f.played),
    )
    return rows


def get_standings(season_id):
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")
    return list(season.standings), None


def override_standings(season_id, rows):
    """Replace the standings cache with hand-edited rows.

    Numbers go through the same coercion as score entry and goal difference
    is always GF - GA. The next fixture change rebuilds the table and
    discards the override.
    """
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    names = [str(row.get("team", "")).strip() for row in rows]
    if any(not name for name in names):
        return None, "Every standings row needs a team name"
    if len(set(names)) != len(names):
        return None, Conflict("Duplicate team in standings")

    _clear_standings(season)

    entries = []
    for rank, (name, row) in enumerate(zip(names, rows), start=1):
        entry = Standing(season_id=season.id, team=name, rank=rank)
        for field in _NUMERIC_FIELDS:
            setattr(entry, field, parse_int(row.get(field)))
        entry.goal_difference = entry.goals_for - entry.goals_against
        entries.append(entry)

    db.session.add_all(entries)
    db.session.commit()

    logger.warning("Standings for season %s overridden manually", season.id)
    return entries, None


def get_player_stats(season_id):
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")
    return compute_player_stats(fixture_record(f) for f in season.fixtures), None
