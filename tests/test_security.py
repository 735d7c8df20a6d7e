import json
import logging

from fastapi.testclient import TestClient

from astrofriends.app import app

PAYLOAD = {"person_a": {"sun": "Aries"}, "person_b": {"sun": "Leo"}}


def test_reject_without_key(monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "true")
    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.post("/v1/compatibility/signs", json=PAYLOAD)
    assert r.status_code == 401


def test_reject_with_invalid_key(monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("API_KEYS", "valid123")
    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.post(
            "/v1/compatibility/signs",
            headers={"Authorization": "Bearer nope"},
            json=PAYLOAD,
        )
    assert r.status_code == 403


def test_allow_with_valid_key(monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("API_KEYS", "other, valid123")
    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.post(
            "/v1/compatibility/signs",
            headers={"Authorization": "Bearer valid123"},
            json=PAYLOAD,
        )
    assert r.status_code == 200


def test_health_skips_auth(monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "true")
    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.get("/__health")
    assert r.status_code == 200


def test_rate_limit(monkeypatch):
    from astrofriends.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "2")
    monkeypatch.setenv("AUTH_ENABLED", "false")
    _counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        for i in range(3):
            r = client.get("/v1/compatibility/dynamics", params={"sign_a": "Aries", "sign_b": "Leo"})
            if i < 2:
                assert r.status_code == 200
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "60"
    _counters.clear()


def test_access_log_line(monkeypatch, caplog):
    monkeypatch.setenv("LOGGING_ENABLED", "true")
    monkeypatch.setenv("AUTH_ENABLED", "false")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
    with caplog.at_level(logging.INFO, logger="astrofriends.access"):
        with TestClient(app, raise_server_exceptions=False) as client:
            client.get("/v1/sky", params={"date": "2024-01-01"})
    lines = [json.loads(rec.getMessage()) for rec in caplog.records if rec.name == "astrofriends.access"]
    assert lines
    entry = lines[-1]
    assert entry["endpoint"] == "/v1/sky"
    assert entry["status"] == 200
    assert set(entry) >= {"ts", "ip", "api_key", "endpoint", "status", "latency_ms"}


def test_rate_limit_ignores_unrecognised_tokens(monkeypatch):
    from astrofriends.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "2")
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("API_KEYS", "valid123")
    _counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        codes = [
            client.post(
                "/v1/compatibility/signs",
                headers={"Authorization": f"Bearer guess{i}"},
                json=PAYLOAD,
            ).status_code
            for i in range(6)
        ]
    assert codes == [403, 403, 429, 429, 429, 429]
    assert len(_counters) == 1
    _counters.clear()


def test_rate_limit_buckets_valid_keys_separately(monkeypatch):
    from astrofriends.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("API_KEYS", "alpha,beta")
    _counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        for key in ("alpha", "beta"):
            r = client.post("/v1/compatibility/signs", headers={"Authorization": f"Bearer {key}"}, json=PAYLOAD)
            assert r.status_code == 200
    assert set(_counters) == {"alpha", "beta"}
    _counters.clear()


def test_stale_buckets_are_evicted(monkeypatch):
    from astrofriends.middleware import ratelimit

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("AUTH_ENABLED", "false")
    ratelimit._counters.clear()
    ratelimit._counters["10.0.0.9"] = [0.0]
    with TestClient(app, raise_server_exceptions=False) as client:
        client.get("/v1/compatibility/dynamics", params={"sign_a": "Aries", "sign_b": "Leo"})
    assert "10.0.0.9" not in ratelimit._counters
    ratelimit._counters.clear()
