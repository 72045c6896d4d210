from league_manager.extensions import db
from league_manager.models.season import Season
from league_manager.services.errors import NotFound


def search_season(season_id, query):
    """Case-insensitive substring search over a season's table and fixtures."""
    season = db.session.get(Season, season_id)
    if not season:
        return None, NotFound("Season not found")

    needle = (query or "").strip().lower()
    if not needle:
        return {"teams": [], "fixtures": []}, None

    teams = [s for s in season.standings if needle in s.team.lower()]
    fixtures = [
        f for f in season.fixtures
        if needle in f.home_team.lower() or needle in f.away_team.lower()
    ]
    return {"teams": teams, "fixtures": fixtures}, None
