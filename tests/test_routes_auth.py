import pytest


def test_admin_login_succeeds(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert resp.status_code == 200
    assert resp.json() == {"user": {"id": 1, "username": "admin", "isAdmin": True}}
    assert "set-cookie" not in resp.headers


def test_wrong_password_and_unknown_user_fail_the_same_way(client):
    wrong = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    unknown = client.post("/api/auth/login", json={"username": "ghost", "password": "admin123"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"message": "Invalid credentials"}


def test_missing_credentials_are_rejected(client):
    resp = client.post("/api/auth/login", json={})

    assert resp.status_code == 401


def test_non_admin_user_reports_false(client, seeded_store):
    seeded_store.create_user({"username": "viewer", "password": "pw"})

    resp = client.post("/api/auth/login", json={"username": "viewer", "password": "pw"})

    assert resp.json()["user"]["isAdmin"] is False


def test_bad_login_body_is_400(client):
    resp = client.post("/api/auth/login", json={"username": ["admin"], "password": "x"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid login data"


def test_login_store_failure_is_500_with_login_message(client, seeded_store, monkeypatch):
    def boom(username):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(seeded_store, "get_user_by_username", boom)

    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert resp.status_code == 500
    assert resp.json() == {"message": "Login failed"}
    assert "secret internals" not in resp.text


def test_bodyless_login_is_rejected_as_bad_credentials(client):
    resp = client.post("/api/auth/login")

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid credentials"}


@pytest.mark.parametrize(
    "body",
    [
        {"username": None, "password": None},
        {"username": "admin", "password": None},
        {"username": None, "password": "admin123"},
        {"username": "admin"},
    ],
)
def test_null_or_missing_credentials_are_401(client, body):
    resp = client.post("/api/auth/login", json=body)

    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid credentials"}


def test_json_null_body_is_401(client):
    resp = client.post(
        "/api/auth/login",
        content=b"null",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 401
