from flask_jwt_extended import create_access_token


def test_login_success(client):
    resp = client.post(
        "/api/auth/login",
        json={"username": "admin", "password": "password"},
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert "access_token" in data
    assert "refresh_token" in data
    assert data["user"] == {"username": "admin", "is_admin": True}


def test_login_invalid_password(client):
    resp = client.post(
        "/api/auth/login",
        json={"username": "admin", "password": "wrong"},
    )
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid username or password"


def test_login_missing_fields(client):
    resp = client.post("/api/auth/login", json={"username": "admin"})
    assert resp.status_code == 400
    assert "password" in resp.get_json()["messages"]


def test_me_endpoint(client, admin_headers):
    resp = client.get("/api/auth/me", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.get_json()["user"]["username"] == "admin"


def test_me_without_auth(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401


def test_refresh_token(client):
    login_resp = client.post(
        "/api/auth/login",
        json={"username": "admin", "password": "password"},
    )
    refresh_token = login_resp.get_json()["refresh_token"]

    resp = client.post(
        "/api/auth/refresh",
        headers={"Authorization": f"Bearer {refresh_token}"},
    )
    assert resp.status_code == 200
    assert "access_token" in resp.get_json()


def test_write_endpoints_require_token(client):
    resp = client.post("/api/leagues", json={"name": "No Token League"})
    assert resp.status_code == 401


def test_write_endpoints_reject_non_admin_identity(client):
    token = create_access_token(identity="visitor")
    resp = client.post(
        "/api/leagues",
        headers={"Authorization": f"Bearer {token}"},
        json={"name": "Visitor League"},
    )
    assert resp.status_code == 403
