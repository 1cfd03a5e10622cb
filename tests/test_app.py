import pytest

from backend.app import create_app
from backend.etl.import_session import ImportSession


@pytest.fixture
def captured():
    return []


@pytest.fixture
def client(captured):
    def runner(settings, log):
        captured.append(settings)
        log.add("Database population complete!")
        return {"courses_added": 3, "holes_added": 54, "errors": []}

    app = create_app(ImportSession(runner=runner))
    app.config.update(TESTING=True, IMPORT_IN_BACKGROUND=False)
    return app.test_client()


def _form(**overrides):
    data = {
        "supabase_url": "https://example.supabase.co",
        "supabase_key": "service-key",
        "api_key": "golf-key",
        "max_courses_per_term": 2
    }
    data.update(overrides)
    return data


def test_index_renders_form(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Supabase URL" in body
    assert "5 courses per term" in body


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_start_import_with_json(client, captured):
    response = client.post("/api/import", json=_form())

    assert response.status_code == 202
    assert captured[0].max_courses_per_term == 2
    assert captured[0].api_key == "golf-key"

    state = client.get("/api/import/status").get_json()
    assert state["phase"] == "complete"
    assert state["summary"] == {"courses": 3, "holes": 54}
    assert state["logs"] == ["Database population complete!"]


def test_start_import_with_form_data(client, captured):
    response = client.post("/api/import", data=_form(max_courses_per_term="5"))

    assert response.status_code == 202
    assert captured[0].max_courses_per_term == 5


def test_invalid_cap_is_rejected(client, captured):
    response = client.post("/api/import", json=_form(max_courses_per_term=4))

    assert response.status_code == 400
    fields = [d["field"] for d in response.get_json()["details"]]
    assert "max_courses_per_term" in fields
    assert captured == []


def test_blank_api_key_is_rejected(client, captured, monkeypatch):
    from config.config import config
    monkeypatch.setitem(config["golf_api"], "api_key", "")

    response = client.post("/api/import", json=_form(api_key="   "))

    assert response.status_code == 400
    assert captured == []


def test_reset_returns_to_credentials(client):
    client.post("/api/import", json=_form())
    response = client.post("/api/import/reset")

    assert response.status_code == 200
    assert response.get_json()["phase"] == "credentials"
    assert response.get_json()["logs"] == []
