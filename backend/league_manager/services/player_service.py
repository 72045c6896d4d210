import logging

from league_manager.extensions import db
from league_manager.models.player import Player, PlayerPosition
from league_manager.models.team import Team
from league_manager.services.errors import NotFound

logger = logging.getLogger(__name__)


def _get_team(season_id, team_id):
    team = db.session.get(Team, team_id)
    if not team or team.season_id != season_id:
        return None
    return team


def _get_player(season_id, team_id, player_id):
    player = db.session.get(Player, player_id)
    if not player or player.team_id != team_id or player.team.season_id != season_id:
        return None
    return player


def _make_captain(player):
    """Hand the armband to ``player``, clearing it from the rest of the team."""
    for teammate in player.team.players:
        teammate.is_captain = teammate is player
    player.is_captain = True


def _position(value):
    return PlayerPosition(value) if value else None


def list_players(season_id, team_id):
    team = _get_team(season_id, team_id)
    if not team:
        return None, NotFound("Team not found")
    return list(team.players), None


def add_player(season_id, team_id, data):
    team = _get_team(season_id, team_id)
    if not team:
        return None, NotFound("Team not found")

    name = data["name"].strip()
    if not name:
        return None, "Player name is required"

    player = Player(
        name=name,
        position=_position(data.get("position")),
        age=data.get("age", 18),
        is_captain=False,
    )
    team.players.append(player)
    if data.get("is_captain"):
        _make_captain(player)

    db.session.commit()
    return player, None


def update_player(season_id, team_id, player_id, data):
    player = _get_player(season_id, team_id, player_id)
    if not player:
        return None, NotFound("Player not found")

    if "name" in data:
        name = data["name"].strip()
        if not name:
            return None, "Player name is required"
        player.name = name
    if "position" in data:
        player.position = _position(data["position"])
    if "age" in data:
        player.age = data["age"]
    if "is_captain" in data:
        if data["is_captain"]:
            _make_captain(player)
        else:
            player.is_captain = False

    db.session.commit()
    return player, None


def remove_player(season_id, team_id, player_id):
    player = _get_player(season_id, team_id, player_id)
    if not player:
        return None, NotFound("Player not found")

    logger.info("Removing player %r from team %s", player.name, team_id)
    db.session.delete(player)
    db.session.commit()
    return player, None
