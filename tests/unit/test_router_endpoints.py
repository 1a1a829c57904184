"""Tests for API endpoints (health, classify, presets, sessions)."""

import pytest
from fastapi.testclient import TestClient

from riskgate.api.dependencies import get_classifier, get_settings_dependency, get_violation_tracker
from riskgate.app import app
from riskgate.config.settings import Settings
from riskgate.services.classifier.classifier import RiskClassifier
from riskgate.services.tracking.violations import ViolationTracker


@pytest.fixture
def api_settings():
    return Settings(max_batch_size=3)


@pytest.fixture
def client(api_settings):
    tracker = ViolationTracker()
    classifier = RiskClassifier(api_settings)
    app.dependency_overrides[get_settings_dependency] = lambda: api_settings
    app.dependency_overrides[get_classifier] = lambda: classifier
    app.dependency_overrides[get_violation_tracker] = lambda: tracker
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  HEALTH
# ==========================================


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "0.1.0"}


# ==========================================
#  CLASSIFY
# ==========================================


def test_classify_rejected(client):
    response = client.post("/api/classify", json={"text": "The rumor is spreading"})
    assert response.status_code == 200
    body = response.json()
    assert body["accepted"] is False
    assert body["triggered_signal"] == "wordIndicator"
    assert body["matched_token"] == "rumor"


def test_classify_accepted(client):
    response = client.post("/api/classify", json={"text": "This is a plain, confident statement."})
    assert response.status_code == 200
    body = response.json()
    assert body["accepted"] is True
    assert body["triggered_signal"] == "none"
    assert body["matched_token"] is None


def test_classify_empty_text(client):
    response = client.post("/api/classify", json={"text": ""})
    assert response.status_code == 200
    assert response.json()["accepted"] is True


def test_classify_with_disabled_preset(client):
    response = client.post("/api/classify", json={"text": "The rumor is spreading", "preset": "disabled"})
    assert response.json()["accepted"] is True


def test_classify_unknown_preset(client):
    response = client.post("/api/classify", json={"text": "hello", "preset": "nonexistent_preset_xyz"})
    assert response.status_code == 404


def test_classify_missing_text(client):
    response = client.post("/api/classify", json={})
    assert response.status_code == 422


def test_classify_input_too_large(client):
    app.dependency_overrides[get_classifier] = lambda: RiskClassifier(Settings(max_input_size=5))
    response = client.post("/api/classify", json={"text": "abcdefgh"})
    assert response.status_code == 413


# ==========================================
#  BATCH
# ==========================================


def test_classify_batch(client):
    response = client.post("/api/classify/batch", json={"texts": ["plain", "a rumor", "it could be"]})
    assert response.status_code == 200
    body = response.json()
    assert body["rejected"] == 2
    assert [r["triggered_signal"] for r in body["results"]] == ["none", "wordIndicator", "uncertaintyBudget"]


def test_classify_batch_too_large(client):
    response = client.post("/api/classify/batch", json={"texts": ["a", "b", "c", "d"]})
    assert response.status_code == 422


def test_classify_batch_unknown_preset(client):
    response = client.post("/api/classify/batch", json={"texts": ["a"], "preset": "nonexistent_preset_xyz"})
    assert response.status_code == 404


# ==========================================
#  PRESETS
# ==========================================


def test_list_presets(client):
    response = client.get("/api/presets")
    assert response.status_code == 200
    assert {"standard", "minimal", "disabled"} <= set(response.json())


def test_get_preset(client):
    response = client.get("/api/presets/standard")
    assert response.status_code == 200
    body = response.json()
    assert body["threshold"] == 0.1
    assert "rumor" in body["word_indicators"]


def test_get_unknown_preset(client):
    response = client.get("/api/presets/nonexistent_preset_xyz")
    assert response.status_code == 404


# ==========================================
#  SESSIONS
# ==========================================


def test_session_violations_counted(client):
    client.post("/api/classify", json={"text": "a rumor", "session_id": "s1"})
    client.post("/api/classify", json={"text": "it could be", "session_id": "s1"})
    client.post("/api/classify", json={"text": "plain", "session_id": "s1"})

    response = client.get("/api/sessions/s1/violations")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["by_signal"] == {"wordIndicator": 1, "uncertaintyBudget": 1}


def test_session_violations_reset(client):
    client.post("/api/classify", json={"text": "a rumor", "session_id": "s2"})
    response = client.delete("/api/sessions/s2/violations")
    assert response.json()["status"] == "success"
    assert client.get("/api/sessions/s2/violations").json()["total"] == 0
    assert client.delete("/api/sessions/s2/violations").json()["status"] == "not_found"
