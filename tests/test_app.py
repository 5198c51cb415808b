from fastapi.testclient import TestClient

from careers.config import Settings
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore
from careers.main import create_app


def test_health_reports_job_count(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "jobs": 8}


def test_unknown_route_has_message(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_method_not_allowed_has_message(client):
    resp = client.patch("/api/jobs/1", json={})

    assert resp.status_code == 405
    assert "message" in resp.json()


def test_apps_do_not_share_state(settings, job_payload):
    a = create_app(settings=settings, store=InMemoryRecordStore())
    b = create_app(settings=settings, store=InMemoryRecordStore())

    with TestClient(a) as ca, TestClient(b) as cb:
        ca.post("/api/jobs", json=job_payload)
        assert len(ca.get("/api/jobs").json()) == 1
        assert cb.get("/api/jobs").json() == []


def test_default_app_is_seeded_from_settings(tmp_path):
    settings = Settings(
        static_dir=str(tmp_path / "missing"),
        seed_sample_jobs=False,
        admin_username="boss",
        admin_password="pw",
    )

    with TestClient(create_app(settings=settings)) as c:
        assert c.get("/api/jobs").json() == []
        resp = c.post("/api/auth/login", json={"username": "boss", "password": "pw"})

    assert resp.json()["user"]["isAdmin"] is True


def test_custom_api_prefix(tmp_path):
    settings = Settings(api_prefix="/v2", static_dir=str(tmp_path / "missing"))

    with TestClient(create_app(settings=settings)) as c:
        assert c.get("/v2/jobs").status_code == 200
        assert c.get("/api/jobs").status_code == 404


def test_serves_frontend_when_static_dir_exists(tmp_path, seeded_store):
    static = tmp_path / "static"
    (static / "assets").mkdir(parents=True)
    (static / "index.html").write_text("<html>careers</html>")
    (static / "assets" / "app.js").write_text("console.log(1)")
    app = create_app(settings=Settings(static_dir=str(static)), store=seeded_store)

    with TestClient(app) as c:
        assert "careers" in c.get("/").text
        assert "careers" in c.get("/jobs/3").text
        assert c.get("/assets/app.js").text == "console.log(1)"
        assert c.get("/api/jobs").status_code == 200
        assert c.get("/api/unknown").status_code == 404


def test_unexpected_error_is_generic_500(seeded_store, settings, monkeypatch):
    def boom():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(seeded_store, "count_jobs", boom)
    app = create_app(settings=settings, store=seeded_store)

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/health")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
