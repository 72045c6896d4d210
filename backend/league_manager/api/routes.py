from flask import Blueprint, request, jsonify

from league_manager.extensions import db
from league_manager.models.league import League
from league_manager.models.season import Season

from league_manager.schemas import (
    LeagueSchema,
    CreateLeagueSchema,
    UpdateLeagueSchema,
    SeasonSchema,
    CreateSeasonSchema,
    UpdateSeasonSchema,
    TeamSchema,
    TeamNameSchema,
    FixtureSchema,
    CreateFixtureSchema,
    UpdateFixtureSchema,
    MatchDetailsSchema,
    GenerateFixturesSchema,
    StandingSchema,
    OverrideStandingsSchema,
    PlayerStatsSchema,
    PlayerSchema,
    CreatePlayerSchema,
    UpdatePlayerSchema,
)

from league_manager.auth.decorators import admin_required
from league_manager.services.league_service import create_league, update_league, delete_league
from league_manager.services.season_service import create_season, update_season, delete_season
from league_manager.services.team_service import add_team, rename_team, remove_team
from league_manager.services.player_service import (
    list_players,
    add_player,
    update_player,
    remove_player,
)
from league_manager.services.fixture_service import (
    generate_season_fixtures,
    add_fixture,
    update_fixture,
    set_match_details,
    delete_fixture,
)
from league_manager.services.standings import (
    get_standings,
    override_standings,
    get_player_stats,
)
from league_manager.services.search_service import search_season

api_bp = Blueprint("api", __name__)

# ── Schema instances ─────────────────────────────────────────────────────────
league_schema = LeagueSchema()
leagues_schema = LeagueSchema(many=True, exclude=("seasons",))
create_league_schema = CreateLeagueSchema()
update_league_schema = UpdateLeagueSchema()

season_schema = SeasonSchema()
seasons_schema = SeasonSchema(many=True, exclude=("teams",))
create_season_schema = CreateSeasonSchema()
update_season_schema = UpdateSeasonSchema()

team_schema = TeamSchema()
team_name_schema = TeamNameSchema()
player_schema = PlayerSchema(exclude=("team_id",))
players_schema = PlayerSchema(many=True, exclude=("team_id",))
create_player_schema = CreatePlayerSchema()
update_player_schema = UpdatePlayerSchema()

fixture_schema = FixtureSchema()
fixtures_schema = FixtureSchema(many=True)
create_fixture_schema = CreateFixtureSchema()
update_fixture_schema = UpdateFixtureSchema()
match_details_schema = MatchDetailsSchema()
generate_fixtures_schema = GenerateFixturesSchema()

standings_schema = StandingSchema(many=True)
override_standings_schema = OverrideStandingsSchema()
player_stats_schema = PlayerStatsSchema()


def _error(error):
    """Map a service error to a JSON response using the status it carries."""
    status = getattr(error, "status", 400)
    return jsonify({"error": str(error)}), status


# ─── Leagues ──────────────────────────────────────────────────────────────────

@api_bp.route("/leagues", methods=["GET"])
def get_leagues():
    leagues = League.query.order_by(League.id).all()
    return jsonify({"leagues": leagues_schema.dump(leagues)}), 200


@api_bp.route("/leagues", methods=["POST"])
@admin_required
def create_league_route():
    data = create_league_schema.load(request.get_json() or {})
    league = create_league(data)
    return jsonify({"league": league_schema.dump(league)}), 201


@api_bp.route("/leagues/<int:league_id>", methods=["GET"])
def get_league(league_id):
    league = db.get_or_404(League, league_id)
    return jsonify({"league": league_schema.dump(league)}), 200


@api_bp.route("/leagues/<int:league_id>", methods=["PUT"])
@admin_required
def update_league_route(league_id):
    data = update_league_schema.load(request.get_json() or {})
    league, error = update_league(league_id, data)
    if error:
        return _error(error)
    return jsonify({"league": league_schema.dump(league)}), 200


@api_bp.route("/leagues/<int:league_id>", methods=["DELETE"])
@admin_required
def delete_league_route(league_id):
    _, error = delete_league(league_id)
    if error:
        return _error(error)
    return jsonify({"message": "League deleted"}), 200


# ─── Seasons ──────────────────────────────────────────────────────────────────

@api_bp.route("/leagues/<int:league_id>/seasons", methods=["GET"])
def get_seasons(league_id):
    league = db.get_or_404(League, league_id)
    return jsonify({"seasons": seasons_schema.dump(league.seasons)}), 200


@api_bp.route("/leagues/<int:league_id>/seasons", methods=["POST"])
@admin_required
def create_season_route(league_id):
    data = create_season_schema.load(request.get_json() or {})
    season, error = create_season(league_id, data)
    if error:
        return _error(error)
    return jsonify({"season": season_schema.dump(season)}), 201


@api_bp.route("/seasons/<int:season_id>", methods=["GET"])
def get_season(season_id):
    season = db.get_or_404(Season, season_id)
    return jsonify({"season": season_schema.dump(season)}), 200


@api_bp.route("/seasons/<int:season_id>", methods=["PUT"])
@admin_required
def update_season_route(season_id):
    data = update_season_schema.load(request.get_json() or {})
    season, error = update_season(season_id, data)
    if error:
        return _error(error)
    return jsonify({"season": season_schema.dump(season)}), 200


@api_bp.route("/seasons/<int:season_id>", methods=["DELETE"])
@admin_required
def delete_season_route(season_id):
    _, error = delete_season(season_id)
    if error:
        return _error(error)
    return jsonify({"message": "Season deleted"}), 200


# ─── Teams ────────────────────────────────────────────────────────────────────

@api_bp.route("/seasons/<int:season_id>/teams", methods=["POST"])
@admin_required
def add_team_route(season_id):
    data = team_name_schema.load(request.get_json() or {})
    team, error = add_team(season_id, data["name"])
    if error:
        return _error(error)
    return jsonify({"team": team_schema.dump(team)}), 201


@api_bp.route("/seasons/<int:season_id>/teams/<int:team_id>", methods=["PUT"])
@admin_required
def rename_team_route(season_id, team_id):
    data = team_name_schema.load(request.get_json() or {})
    team, error = rename_team(season_id, team_id, data["name"])
    if error:
        return _error(error)
    return jsonify({"team": team_schema.dump(team)}), 200


@api_bp.route("/seasons/<int:season_id>/teams/<int:team_id>", methods=["DELETE"])
@admin_required
def remove_team_route(season_id, team_id):
    _, error = remove_team(season_id, team_id)
    if error:
        return _error(error)
    return jsonify({"message": "Team removed"}), 200


# ─── Players ──────────────────────────────────────────────────────────────────

@api_bp.route("/seasons/<int:season_id>/teams/<int:team_id>/players", methods=["GET"])
def get_players(season_id, team_id):
    players, error = list_players(season_id, team_id)
    if error:
        return _error(error)
    return jsonify({"players": players_schema.dump(players)}), 200


@api_bp.route("/seasons/<int:season_id>/teams/<int:team_id>/players", methods=["POST"])
@admin_required
def add_player_route(season_id, team_id):
    data = create_player_schema.load(request.get_json() or {})
    player, error = add_player(season_id, team_id, data)
    if error:
        return _error(error)
    return jsonify({"player": player_schema.dump(player)}), 201


@api_bp.route(
    "/seasons/<int:season_id>/teams/<int:team_id>/players/<int:player_id>",
    methods=["PUT"],
)
@admin_required
def update_player_route(season_id, team_id, player_id):
    data = update_player_schema.load(request.get_json() or {})
    player, error = update_player(season_id, team_id, player_id, data)
    if error:
        return _error(error)
    return jsonify({"player": player_schema.dump(player)}), 200


@api_bp.route(
    "/seasons/<int:season_id>/teams/<int:team_id>/players/<int:player_id>",
    methods=["DELETE"],
)
@admin_required
def remove_player_route(season_id, team_id, player_id):
    _, error = remove_player(season_id, team_id, player_id)
    if error:
        return _error(error)
    return jsonify({"message": "Player removed"}), 200


# ─── Fixtures ─────────────────────────────────────────────────────────────────

@api_bp.route("/seasons/<int:season_id>/fixtures", methods=["GET"])
def get_fixtures(season_id):
    season = db.get_or_404(Season, season_id)
    fixtures = season.fixtures

    team = request.args.get("team")
    if team:
        fixtures = [f for f in fixtures if team in (f.home_team, f.away_team)]

    played = request.args.get("played")
    if played is not None:
        want = played.lower() in ("1", "true", "yes")
        fixtures = [f for f in fixtures if f.played == want]

    return jsonify({"fixtures": fixtures_schema.dump(fixtures)}), 200


@api_bp.route("/seasons/<int:season_id>/fixtures", methods=["POST"])
@admin_required
def add_fixture_route(season_id):
    data = create_fixture_schema.load(request.get_json() or {})
    fixture, error = add_fixture(season_id, data)
    if error:
        return _error(error)
    return jsonify({"fixture": fixture_schema.dump(fixture)}), 201


@api_bp.route("/seasons/<int:season_id>/fixtures/generate", methods=["POST"])
@admin_required
def generate_fixtures_route(season_id):
    data = generate_fixtures_schema.load(request.get_json() or {})
    fixtures, error = generate_season_fixtures(season_id, data["ruleset"])
    if error:
        return _error(error)
    return jsonify({
        "message": "Fixtures generated",
        "ruleset": data["ruleset"],
        "fixture_count": len(fixtures),
        "fixtures": fixtures_schema.dump(fixtures),
    }), 201


@api_bp.route("/seasons/<int:season_id>/fixtures/<code>", methods=["PUT"])
@admin_required
def update_fixture_route(season_id, code):
    data = update_fixture_schema.load(request.get_json() or {})
    fixture, error = update_fixture(season_id, code, data)
    if error:
        return _error(error)
    return jsonify({"fixture": fixture_schema.dump(fixture)}), 200


@api_bp.route("/seasons/<int:season_id>/fixtures/<code>/details", methods=["PUT"])
@admin_required
def set_match_details_route(season_id, code):
    data = match_details_schema.load(request.get_json() or {})
    fixture, error = set_match_details(season_id, code, data)
    if error:
        return _error(error)
    return jsonify({"fixture": fixture_schema.dump(fixture)}), 200


@api_bp.route("/seasons/<int:season_id>/fixtures/<code>", methods=["DELETE"])
@admin_required
def delete_fixture_route(season_id, code):
    _, error = delete_fixture(season_id, code)
    if error:
        return _error(error)
    return jsonify({"message": "Fixture deleted"}), 200


# ─── Standings & player stats ─────────────────────────────────────────────────

@api_bp.route("/seasons/<int:season_id>/standings", methods=["GET"])
def get_standings_route(season_id):
    standings, error = get_standings(season_id)
    if error:
        return _error(error)
    return jsonify({"standings": standings_schema.dump(standings)}), 200


@api_bp.route("/seasons/<int:season_id>/standings", methods=["PUT"])
@admin_required
def override_standings_route(season_id):
    data = override_standings_schema.load(request.get_json() or {})
    standings, error = override_standings(season_id, data["standings"])
    if error:
        return _error(error)
    return jsonify({"standings": standings_schema.dump(standings)}), 200


@api_bp.route("/seasons/<int:season_id>/player-stats", methods=["GET"])
def get_player_stats_route(season_id):
    stats, error = get_player_stats(season_id)
    if error:
        return _error(error)
    return jsonify({
        "player_stats": {
            name: player_stats_schema.dump(line) for name, line in stats.items()
        }
    }), 200


# ─── Search ───────────────────────────────────────────────────────────────────

@api_bp.route("/seasons/<int:season_id>/search", methods=["GET"])
def search_route(season_id):
    results, error = search_season(season_id, request.args.get("q", ""))
    if error:
        return _error(error)
    return jsonify({
        "query": request.args.get("q", ""),
        "teams": standings_schema.dump(results["teams"]),
        "fixtures": fixtures_schema.dump(results["fixtures"]),
    }), 200
