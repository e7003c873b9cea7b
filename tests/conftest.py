import json

import pytest
from fastapi.testclient import TestClient

from fleet_admin.config import Settings
from fleet_admin.main import create_app

ADMIN_PASSWORD = "s3cret"

DEFAULT_FLEET = {
    "me": [{"id": "golf", "title": "Golf", "price": "35 €"}],
    "en": [{"id": "golf", "title": "Golf", "price": "€35"}],
}

DEFAULT_GALLERY = {
    "me": [{"id": "g1", "title": "Prije i poslije", "before": "b.jpg", "after": "a.jpg"}],
}


@pytest.fixture
def settings(tmp_path) -> Settings:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "fleet.defaults.json").write_text(json.dumps(DEFAULT_FLEET), encoding="utf-8")
    (data_dir / "gallery.defaults.json").write_text(json.dumps(DEFAULT_GALLERY), encoding="utf-8")

    site_dir = tmp_path / "site"
    site_dir.mkdir()
    (site_dir / "index.html").write_text("<h1>Fleet</h1>", encoding="utf-8")
    (site_dir / "style.css").write_text("body { margin: 0 }", encoding="utf-8")

    return Settings(
        _env_file=None,
        APP_ENV="test",
        SESSION_SECRET="test-secret",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        ADMIN_PASSWORD_HASH="",
        DATA_DIR=data_dir,
        UPLOAD_DIR=tmp_path / "uploads",
        SITE_DIR=site_dir,
        CORS_ORIGINS="",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))
