from league_manager.extensions import db
from league_manager.models.league import League
from league_manager.services.errors import NotFound


def create_league(data):
    league = League(name=data["name"].strip())
    db.session.add(league)
    db.session.commit()
    return league


def update_league(league_id, data):
    league = db.session.get(League, league_id)
    if not league:
        return None, NotFound("League not found")

    if "name" in data:
        league.name = data["name"].strip()

    db.session.commit()
    return league, None


def delete_league(league_id):
    """Delete a league together with its seasons, fixtures and standings."""
    league = db.session.get(League, league_id)
    if not league:
        return None, NotFound("League not found")

    db.session.delete(league)
    db.session.commit()
    return league, None
