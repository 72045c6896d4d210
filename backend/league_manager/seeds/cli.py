import click
from flask.cli import AppGroup
from league_manager.extensions import db
from league_manager.models.league import League
from league_manager.seeds.data import SAMPLE_LEAGUE, SAMPLE_FIXTURES
from league_manager.services.league_service import create_league
from league_manager.services.season_service import create_season
from league_manager.services.fixture_service import add_fixture

seed_cli = AppGroup("seed", help="Seed database commands.")


def load_sample_league():
    """Create the sample league with one season and a few results.

    Returns the league, or None when leagues already exist.
    """
    if League.query.first():
        return None

    league = create_league({"name": SAMPLE_LEAGUE["name"]})
    season, error = create_season(league.id, SAMPLE_LEAGUE["season"])
    if error:
        raise click.ClickException(error)

    for home, away, match_date, match_time, played, home_score, away_score in SAMPLE_FIXTURES:
        _, error = add_fixture(season.id, {
            "home_team": home,
            "away_team": away,
            "match_date": match_date,
            "match_time": match_time,
            "played": played,
            "home_score": home_score,
            "away_score": away_score,
        })
        if error:
            raise click.ClickException(error)

    return league


@seed_cli.command("sample")
def seed_sample():
    """Load the sample league if the database has no leagues."""
    league = load_sample_league()
    if league is None:
        click.echo("Leagues already exist, nothing to seed.")
        return
    click.echo(f"Seeded {league.name} with {len(SAMPLE_FIXTURES)} fixtures.")


@seed_cli.command("reset")
@click.confirmation_option(prompt="Drop all tables and recreate them?")
def seed_reset():
    """Drop and recreate all tables."""
    db.drop_all()
    db.create_all()
    click.echo("Database reset.")
