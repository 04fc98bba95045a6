"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues
  - Middleware bugs
  - Response format regressions
"""

from __future__ import annotations

import dataclasses

import pytest
from fastapi.testclient import TestClient


ARTICLE = {
    "url": "https://www.bbc.com/news/science-123",
    "title": "Study finds sleep improves memory",
    "content": "According to a study published in Nature, researchers found that "
               "sleep improves memory. The effect is strongest in older adults.",
}


# --- Fixtures ---

@pytest.fixture(scope="module")
def client():
    """Create a test client for the FactCheck API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="module")
def analysis(client):
    r = client.post("/api/analyze", json=ARTICLE)
    assert r.status_code == 200
    return r.json()


# ============================================================
# HEALTH & META
# ============================================================

class TestHealth:

    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["version"] == "1.0.0"
        for key in ("articles", "analyses", "reports", "latest_available", "policy_source"):
            assert key in data

    def test_version_header(self, client):
        r = client.get("/health")
        assert r.headers["X-FactCheck-Version"] == "1.0.0"
        assert r.headers["X-Content-Type-Options"] == "nosniff"


class TestPolicy:

    def test_policy_sections(self, client):
        data = client.get("/api/policy").json()
        assert set(data["policy"]) == {"text", "classifier", "report"}
        assert data["policy"]["report"]["reliable_score"] == 75


# ============================================================
# ANALYZE
# ============================================================

class TestAnalyze:

    def test_response_shape(self, analysis):
        for key in ("id", "articleId", "credibilityScore", "classification",
                    "confidence", "criteria", "factChecks", "recommendations", "analyzedAt"):
            assert key in analysis
        assert 10 <= analysis["credibilityScore"] <= 90
        assert len(analysis["criteria"]) == 4
        assert 1 <= len(analysis["factChecks"]) <= 3
        assert analysis["recommendations"]

    def test_source_taken_from_url(self, analysis):
        assert analysis["source"] == "www.bbc.com"
        assert analysis["criteria"][0]["rating"] == "high"

    def test_defaults_without_url_or_title(self, client):
        r = client.post("/api/analyze", json={"content": "Plain text with nothing in it."})
        assert r.status_code == 200
        data = r.json()
        assert data["title"] == "Untitled Article"
        assert data["source"] == "unknown.source"

    def test_explicit_source_wins(self, client):
        body = dict(ARTICLE, source="fakenews.com")
        data = client.post("/api/analyze", json=body).json()
        assert data["criteria"][0]["rating"] == "low"

    def test_empty_content_rejected(self, client):
        r = client.post("/api/analyze", json={"content": ""})
        assert r.status_code == 422

    def test_content_too_long_rejected(self, client):
        r = client.post("/api/analyze", json={"content": "a" * 50_001})
        assert r.status_code == 422

    def test_invalid_url_rejected(self, client):
        r = client.post("/api/analyze", json=dict(ARTICLE, url="not a url"))
        assert r.status_code == 422

    def test_oversized_body_rejected(self, client):
        r = client.post("/api/analyze", json={"content": "a" * 1_100_000})
        assert r.status_code == 413

    def test_oversized_chunked_body_rejected(self, client):
        # No Content-Length header: the body itself is measured
        chunks = (b"a" * 100_000 for _ in range(12))
        r = client.post("/api/analyze", content=chunks,
                        headers={"Content-Type": "application/json"})
        assert r.status_code == 413

    def test_content_limit_from_settings(self, client, monkeypatch):
        import api.main
        monkeypatch.setattr(api.main, "settings",
                            dataclasses.replace(api.main.settings, MAX_CONTENT_CHARS=100))
        r = client.post("/api/analyze", json={"content": "a" * 200})
        assert r.status_code == 422
        assert "100-character limit" in r.json()["detail"]
        assert client.post("/api/analyze", json={"content": "a" * 100}).status_code == 200


class TestRetrieve:

    def test_latest_is_most_recent(self, client):
        posted = client.post("/api/analyze", json=ARTICLE).json()
        latest = client.get("/api/analyze/latest").json()
        assert latest["id"] == posted["id"]
        assert latest["credibilityScore"] == posted["credibilityScore"]

    def test_get_by_id(self, client, analysis):
        r = client.get(f"/api/analyze/{analysis['id']}")
        assert r.status_code == 200
        data = r.json()
        assert data["credibilityScore"] == analysis["credibilityScore"]
        assert data["criteria"] == analysis["criteria"]
        assert data["factChecks"] == analysis["factChecks"]

    def test_unknown_id(self, client):
        assert client.get("/api/analyze/999999").status_code == 404

    def test_non_integer_id(self, client):
        r = client.get("/api/analyze/abc")
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid ID"


# ============================================================
# REPORT & FEATURES
# ============================================================

class TestReport:

    def test_report_accepted(self, client, analysis):
        r = client.post("/api/report", json={"analysisId": analysis["id"], "details": "Wrong"})
        assert r.status_code == 200
        data = r.json()
        assert data["message"] == "Report received"
        assert isinstance(data["reportId"], int)

    def test_report_requires_fields(self, client):
        assert client.post("/api/report", json={"details": "x"}).status_code == 422


class TestFeatures:

    def test_feature_report(self, client):
        r = client.post("/api/features", json={"text": ARTICLE["content"]})
        assert r.status_code == 200
        data = r.json()
        assert set(data["features"]) == {
            "sentiment", "emotionalTone", "bias", "sensationalism",
            "factual", "evidence", "entityConsistency",
        }
        assert 0 <= data["readability"] <= 100
        assert "Nature" in " ".join(data["sourcesCited"])

    def test_empty_text_rejected(self, client):
        assert client.post("/api/features", json={"text": ""}).status_code == 422

    def test_text_limit_from_settings(self, client, monkeypatch):
        import api.main
        monkeypatch.setattr(api.main, "settings",
                            dataclasses.replace(api.main.settings, MAX_CONTENT_CHARS=10))
        r = client.post("/api/features", json={"text": "a" * 11})
        assert r.status_code == 422
