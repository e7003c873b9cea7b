import pytest
from fastapi.testclient import TestClient

from fleet_admin.main import create_app
from fleet_admin.middleware.security_headers import SECURITY_HEADERS

from tests.conftest import ADMIN_PASSWORD, DEFAULT_FLEET, DEFAULT_GALLERY, read_json

EMPTY_VEHICLE = {
    "tag": "", "title": "", "text": "", "price": "", "image": "", "alt": "",
    "fuel": "", "transmission": "", "consumption": "", "passengers": "",
}


def test_startup_seeds_live_files(client, settings) -> None:
    assert read_json(settings.fleet_file) == DEFAULT_FLEET
    assert read_json(settings.gallery_file) == DEFAULT_GALLERY


@pytest.mark.parametrize("query, expected", [
    ("", DEFAULT_FLEET["me"]),
    ("?lang=en", DEFAULT_FLEET["en"]),
    ("?lang=%20en%20", DEFAULT_FLEET["en"]),
    ("?lang=%20%20", DEFAULT_FLEET["me"]),
    ("?lang=de", DEFAULT_FLEET["me"]),
])
def test_list_fleet(client, query, expected) -> None:
    resp = client.get(f"/api/fleet{query}")
    assert resp.status_code == 200
    assert resp.json() == expected


def test_replace_fleet(admin_client) -> None:
    resp = admin_client.put("/api/fleet?lang=en", json=[{"title": "Car A"}])
    assert resp.status_code == 200

    body = resp.json()
    assert len(body) == 1
    record = dict(body[0])
    assert record.pop("id")
    assert record == {**EMPTY_VEHICLE, "title": "Car A", "alt": "Car A"}

    assert admin_client.get("/api/fleet?lang=en").json() == body
    assert admin_client.get("/api/fleet?lang=me").json() == DEFAULT_FLEET["me"]


def test_replace_ids(admin_client) -> None:
    payload = [{"id": "keep-me", "title": " A "}, {"title": "B"}, {"id": "  ", "title": "C"}]
    body = admin_client.put("/api/fleet", json=payload).json()

    ids = [r["id"] for r in body]
    assert ids[0] == "keep-me"
    assert all(ids)
    assert len(set(ids)) == 3
    assert [r["title"] for r in body] == ["A", "B", "C"]


def test_replace_requires_array(admin_client, settings) -> None:
    before = settings.fleet_file.read_text(encoding="utf-8")
    resp = admin_client.put("/api/fleet", json={"title": "not a list"})
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert settings.fleet_file.read_text(encoding="utf-8") == before


def test_reset_fleet_after_replace(admin_client, settings) -> None:
    admin_client.put("/api/fleet?lang=en", json=[{"title": "Car A"}])

    resp = admin_client.post("/api/fleet/reset?lang=en")
    assert resp.status_code == 200
    assert resp.json() == DEFAULT_FLEET["en"]
    assert admin_client.get("/api/fleet?lang=en").json() == DEFAULT_FLEET["en"]
    assert read_json(settings.fleet_file)["en"] == DEFAULT_FLEET["en"]


def test_reset_unknown_language_uses_default_language(admin_client, settings) -> None:
    resp = admin_client.post("/api/fleet/reset?lang=de")
    assert resp.json() == DEFAULT_FLEET["me"]
    assert read_json(settings.fleet_file)["de"] == DEFAULT_FLEET["me"]


@pytest.mark.parametrize("method, path", [
    ("PUT", "/api/fleet"),
    ("POST", "/api/fleet/reset"),
    ("PUT", "/api/gallery"),
    ("POST", "/api/gallery/reset"),
])
def test_guarded_routes_reject_anonymous(client, settings, method, path) -> None:
    fleet_before = settings.fleet_file.read_text(encoding="utf-8")
    gallery_before = settings.gallery_file.read_text(encoding="utf-8")

    resp = client.request(method, f"{path}?lang=en", json=[{"title": "Intruder"}])

    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}
    assert settings.fleet_file.read_text(encoding="utf-8") == fleet_before
    assert settings.gallery_file.read_text(encoding="utf-8") == gallery_before


def test_guarded_routes_after_logout(admin_client) -> None:
    admin_client.post("/api/auth/logout")
    assert admin_client.put("/api/fleet", json=[]).status_code == 401


def test_gallery_roundtrip(admin_client) -> None:
    assert admin_client.get("/api/gallery?lang=en").json() == DEFAULT_GALLERY["me"]

    body = admin_client.put("/api/gallery?lang=en", json=[{"title": " Wash ", "after": "a.jpg"}]).json()
    assert body[0]["id"].startswith("gallery-")
    assert body[0] == {"id": body[0]["id"], "title": "Wash", "before": "", "after": "a.jpg"}
    assert admin_client.get("/api/gallery?lang=en").json() == body

    assert admin_client.post("/api/gallery/reset?lang=en").json() == DEFAULT_GALLERY["me"]
    assert admin_client.get("/api/gallery?lang=en").json() == DEFAULT_GALLERY["me"]


def test_write_failure_is_server_error(app, monkeypatch) -> None:
    def broken_save(document):
        raise OSError("disk full")

    with TestClient(app, raise_server_exceptions=False) as c:
        c.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
        monkeypatch.setattr(app.state.fleet_store, "_save", broken_save)

        resp = c.put("/api/fleet", json=[{"title": "A"}])

    assert resp.status_code == 500
    assert resp.json() == {"error": "Server error"}
    for name, value in SECURITY_HEADERS.items():
        assert resp.headers[name] == value


def test_anonymous_malformed_body_is_unauthorized(client, settings) -> None:
    before = settings.fleet_file.read_text(encoding="utf-8")
    resp = client.put("/api/fleet", content=b"[{not json", headers={"content-type": "application/json"})

    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}
    assert settings.fleet_file.read_text(encoding="utf-8") == before


def test_malformed_json_body(admin_client) -> None:
    resp = admin_client.put("/api/gallery", content=b"[{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON body"}


def test_replace_body_size_limit(settings) -> None:
    limited = settings.model_copy(update={"JSON_BODY_MAX_BYTES": 512})
    big = [{"title": f"Car {i}", "text": "x" * 40} for i in range(50)]

    with TestClient(create_app(limited)) as c:
        before = limited.fleet_file.read_text(encoding="utf-8")

        assert c.put("/api/fleet", json=big).status_code == 401

        c.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
        resp = c.put("/api/fleet", json=big)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Request body too large"}
        assert limited.fleet_file.read_text(encoding="utf-8") == before

        assert c.put("/api/fleet", json=big[:2]).status_code == 200
