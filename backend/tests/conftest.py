import os
import pytest

os.environ["FLASK_ENV"] = "testing"

from league_manager import create_app
from league_manager.extensions import db as _db


@pytest.fixture(scope="session")
def app():
    app = create_app("testing")
    yield app


@pytest.fixture(autouse=True)
def tables(app):
    """Create all tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(client):
    resp = client.post(
        "/api/auth/login",
        json={"username": "admin", "password": "password"},
    )
    token = resp.get_json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def season(app):
    """League with a four-team season (A, B, C, D), no fixtures yet."""
    from league_manager.services.league_service import create_league
    from league_manager.services.season_service import create_season

    league = create_league({"name": "Test League"})
    season, error = create_season(league.id, {
        "name": "Season 1",
        "teams": ["A", "B", "C", "D"],
        "start_month": 0,
        "end_month": 11,
        "match_days": ["Saturday"],
        "match_times": ["15:00", "17:00"],
    })
    assert error is None
    return season
