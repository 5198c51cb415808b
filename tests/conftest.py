from datetime import date

import pytest
from fastapi.testclient import TestClient

from careers.config import Settings
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore
from careers.infrastructure.seed import seed_store
from careers.main import create_app

TODAY = date(2024, 3, 15)


@pytest.fixture
def store():
    """Empty store with a fixed clock."""
    return InMemoryRecordStore(today=lambda: TODAY)


@pytest.fixture
def seeded_store(store):
    seed_store(store)
    return store


@pytest.fixture
def settings(tmp_path):
    # Point static_dir somewhere empty so no SPA routes are mounted
    return Settings(static_dir=str(tmp_path / "no-static"))


@pytest.fixture
def client(seeded_store, settings):
    app = create_app(settings=settings, store=seeded_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def job_payload():
    return {
        "title": "Backend Engineer",
        "department": "engineering",
        "location": "remote",
        "type": "full-time",
        "salary": "$120,000 - $150,000",
        "summary": "Build and run our APIs.",
        "description": "Own services end to end.",
        "requirements": "• Python\n• HTTP APIs",
        "niceToHave": "• FastAPI",
    }


@pytest.fixture
def job_fields():
    return {
        "title": "Backend Engineer",
        "department": "engineering",
        "location": "remote",
        "type": "full-time",
        "salary": "$120,000 - $150,000",
        "summary": "Build and run our APIs.",
        "description": "Own services end to end.",
        "requirements": "• Python\n• HTTP APIs",
        "nice_to_have": "• FastAPI",
    }
