from evlab import create_app
from evlab.config import Settings
from evlab.services.dataset_service import EMPTY_DATASET

from conftest import PASSWORD, FakeUpstream


def test_health(client, clock):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "time": clock.now}


def test_root_health_reports_service(client, clock):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "service": "ev-range-lab-test", "time": clock.now}


def test_evs_returns_loaded_bytes(client, dataset):
    resp = client.get("/api/evs")

    assert resp.status_code == 200
    assert resp.mimetype == "application/json"
    assert resp.data == dataset.raw


def test_evs_unavailable_when_empty(settings, upstream, clock):
    app = create_app(settings, upstream=upstream, clock=clock, dataset=EMPTY_DATASET)

    resp = app.test_client().get("/api/evs")

    assert resp.status_code == 503
    assert resp.get_json() == {"error": "Dataset unavailable"}


def test_unknown_path_is_json_404(client):
    resp = client.get("/api/unknown")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_wrong_method_is_json_404(client):
    resp = client.get("/api/chat")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_cors_allows_configured_origin(client):
    resp = client.get("/api/health", headers={"Origin": "https://ev.example.org"})

    assert resp.headers["Access-Control-Allow-Origin"] == "https://ev.example.org"


def test_cors_rejects_other_origin(client):
    resp = client.get("/api/health", headers={"Origin": "https://evil.example.com"})

    assert "Access-Control-Allow-Origin" not in resp.headers


def test_cors_preflight_for_chat(client):
    resp = client.options(
        "/api/chat",
        headers={
            "Origin": "https://ev.example.org",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "https://ev.example.org"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]


def test_security_headers_on_every_response(client):
    for path in ("/", "/api/health", "/missing"):
        resp = client.get(path)
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"


def test_trusted_proxy_uses_forwarded_address(clock, dataset):
    settings = Settings(OPENROUTER_API_KEY="sk-test", CHAT_PASSWORD=PASSWORD, TRUST_PROXY_HOPS=1)
    app = create_app(settings, upstream=FakeUpstream(), clock=clock, dataset=dataset)
    client = app.test_client()

    client.post("/api/chat", json={"password": PASSWORD}, headers={"X-Forwarded-For": "203.0.113.9"})

    state = app.extensions["evlab"]
    assert state.sessions.is_authenticated("203.0.113.9", clock.now)
    assert not state.sessions.is_authenticated("127.0.0.1", clock.now)
