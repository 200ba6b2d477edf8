import pytest
from fastapi.testclient import TestClient

from main import create_app
from siglon.shared.config import Settings
from siglon.shared.local_store import LocalStore


@pytest.fixture()
def settings():
    settings = Settings()
    settings.store_backend = "local"
    settings.local_store_path = ""
    settings.admin_password = "admin123"
    settings.jwt_secret = "test-secret"
    settings.seed_data = False
    return settings


@pytest.fixture()
def store():
    return LocalStore()


@pytest.fixture()
def client(settings, store):
    app = create_app(settings, store)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def seeded_client(settings, store):
    settings.seed_data = True
    app = create_app(settings, store)
    with TestClient(app) as client:
        yield client


def login(client, password="admin123"):
    res = client.post("/api/auth/login", json={"password": password})
    res.raise_for_status()
    return {"Authorization": f"Bearer {res.json()['data']['token']}"}


@pytest.fixture()
def admin_headers(client):
    return login(client)


@pytest.fixture()
def seeded_admin_headers(seeded_client):
    return login(seeded_client)
