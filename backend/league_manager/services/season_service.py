from league_manager.extensions import db
from league_manager.models.league import League
from league_manager.models.season import Season
from league_manager.models.team import Team
from league_manager.services.standings import recalculate_standings
from league_manager.services.errors import NotFound


def clean_team_names(names):
    """Strip names, drop blanks and repeats, keep the first occurrence."""
    seen = set()
    cleaned = []
    for name in names:
        name = name.strip()
        if name and name not in seen:
            seen.add(name)
            cleaned.append(name)
    return cleaned


def create_season(league_id, data):
    league = db.session.get(League, league_id)
    if not league:
        return None, NotFound("League not found")

    team_names = clean_team_names(data.get("teams", []))
    if len(team_names) < 2:
        return None, "A season needs at least 2 teams"

    if not data.get("match_days") or not data.get("match_times"):
        return None, "Select at least one default match day and time"

    season = Season(
        league_id=league.id,
        name=data["name"].strip(),
        start_month=data.get("start_month", 0),
        end_month=data.get("end_month", 11),
        match_days=list(data["match_days"]),
        match_times=list(data["match_times"]),
        teams=[
            Team(name=name, position=position)
            for position, name in enumerate(team_names)
        ],
    )
    db.session.add(season)
    db.session.flush()

    recalculate_standings(season)
    return season, None


def update_season(season_id, data):
    """Update the name and scheduling defaults of a season.

    Existing fixtures keep their dates; the new defaults apply the next
    time fixtures are generated.
    """
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    if "match_days" in data and not data["match_days"]:
        return None, "Select at least one default match day"
    if "match_times" in data and not data["match_times"]:
        return None, "Select at least one default match time"

    if "name" in data:
        season.name = data["name"].strip()
    if "start_month" in data:
        season.start_month = data["start_month"]
    if "end_month" in data:
        season.end_month = data["end_month"]
    if "match_days" in data:
        season.match_days = list(data["match_days"])
    if "match_times" in data:
        season.match_times = list(data["match_times"])

    db.session.commit()
    return season, None


def delete_season(season_id):
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    db.session.delete(season)
    db.session.commit()
    return season, None
