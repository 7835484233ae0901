# backend/tests/test_health.py
import os

os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

from fastapi.testclient import TestClient
from mail_relay.core.mailer import MailDeliveryError, get_transport
from mail_relay.main import app

client = TestClient(app)

ALLOWED = "http://localhost:3000"


class BrokenTransport:
    def send(self, msg):
        raise MailDeliveryError("connection refused")


def test_liveness():
    """Liveness endpoint returns the fixed message."""
    resp = client.get("/test")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Server is working!"}


def test_liveness_unaffected_by_failed_send():
    app.dependency_overrides[get_transport] = lambda: BrokenTransport()
    try:
        failed = client.post("/send-email", json={"name": "a", "email": "b", "message": "c"})
    finally:
        app.dependency_overrides.clear()
    assert failed.status_code == 500

    resp = client.get("/test")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Server is working!"}


def test_cors_allows_configured_origin():
    resp = client.get("/test", headers={"Origin": ALLOWED})
    assert resp.headers["access-control-allow-origin"] == ALLOWED
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_cors_preflight_for_configured_origin():
    resp = client.options(
        "/send-email",
        headers={
            "Origin": ALLOWED,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == ALLOWED
    assert "POST" in resp.headers["access-control-allow-methods"]


def test_cors_rejects_other_origin():
    resp = client.get("/test", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in resp.headers

    preflight = client.options(
        "/send-email",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert preflight.status_code == 400
    assert "access-control-allow-origin" not in preflight.headers


def test_cors_rejects_unlisted_method():
    resp = client.options(
        "/send-email",
        headers={
            "Origin": ALLOWED,
            "Access-Control-Request-Method": "DELETE",
        },
    )
    assert resp.status_code == 400


def test_entrypoint_logs_url_and_starts_uvicorn(monkeypatch):
    from mail_relay import __main__ as entry

    lines = []
    runs = []
    monkeypatch.setattr(entry.logging.config, "dictConfig", lambda cfg: None)
    monkeypatch.setattr(entry.log, "info", lines.append)
    monkeypatch.setattr(entry.uvicorn, "run", lambda *a, **kw: runs.append((a, kw)))
    monkeypatch.setattr(entry.settings, "port", 4010)

    entry.main()

    assert lines == [
        "[main] server running on port 4010",
        "[main] server URL: http://localhost:4010",
    ]
    assert runs == [(("mail_relay.main:app",), {"host": "0.0.0.0", "port": 4010})]
