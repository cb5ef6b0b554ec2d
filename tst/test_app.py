from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app import create_app
from src.shared.contact.config import ContactSettings


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Portfolio Contact API is running", "status": "ok"}
    assert client.get("/health").json() == {"status": "healthy"}


def test_unknown_route_returns_not_found(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Not found"}


def test_error_responses_carry_cors_headers(client):
    response = client.get("/api/contact", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 405
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_unhandled_exception_handler(settings):
    app = create_app(settings=settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error. Please try again later."}


def test_apps_do_not_share_state(settings, valid_payload):
    first = TestClient(create_app(settings=settings))
    second = TestClient(create_app(settings=settings))

    for _ in range(3):
        first.post("/api/contact", json=valid_payload)

    response = second.post("/api/contact", json=valid_payload)
    assert response.json()["submissionId"] == 1
    assert response.json()["remainingSubmissions"] == 2


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_abc")
    monkeypatch.setenv("CONTACT_EMAIL", "me@example.com")
    monkeypatch.setenv("ENVIRONMENT", "Development")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.dev, https://b.dev")

    settings = ContactSettings.from_env()

    assert settings.email_configured is True
    assert settings.contact_email == "me@example.com"
    assert settings.is_development is True
    assert settings.cors_origins == ["https://a.dev", "https://b.dev"]


def test_settings_defaults_without_key(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    monkeypatch.delenv("CONTACT_EMAIL", raising=False)

    settings = ContactSettings.from_env()

    assert settings.email_configured is False
    assert settings.contact_email == "luckyverma.ara2005@gmail.com"


def test_module_level_app_exists():
    from src.app import app

    assert isinstance(app, FastAPI)
