"""
Tests: HTTP API.

Run with:
    pytest qfd_engine/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from qfd_engine.api import create_app
from qfd_engine.models import sample_project


@pytest.fixture(scope="module")
def client():
    return TestClient(create_app())


@pytest.fixture
def sample_body():
    return sample_project().model_dump(mode="json")


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestReferenceRoutes:
    def test_sample_round_trips(self, client, sample_body):
        response = client.get("/api/qfd/sample")
        assert response.status_code == 200
        assert response.json() == sample_body

    def test_legend(self, client):
        payload = client.get("/api/qfd/legend").json()
        assert len(payload["correlations"]) == 5


class TestAnalysisRoutes:
    def test_priorities(self, client, sample_body):
        rows = client.post("/api/qfd/priorities", json=sample_body).json()
        assert [r["score"] for r in rows] == [51, 45, 45]
        assert sum(r["relative_weight"] for r in rows) == pytest.approx(100.0)

    def test_target_impact(self, client, sample_body):
        rows = client.post("/api/qfd/target-impact", json=sample_body).json()
        assert rows[0]["implementation_challenge"] == "Critical"
        assert rows[2]["correlation_impact"]["impact"] == "Synergistic"

    def test_correlations(self, client, sample_body):
        payload = client.post("/api/qfd/correlations", json=sample_body).json()
        assert len(payload["correlation_insights"]) == 3
        assert payload["correlation_insights"][2]["correlation"] == 2

    def test_full_analysis(self, client, sample_body):
        payload = client.post("/api/qfd/analysis", json=sample_body).json()
        assert payload["is_complete"] is True
        assert payload["total_score"] == 141
        assert payload["ranking"][0]["id"] == "tech1"

    def test_invalid_importance_is_422(self, client, sample_body):
        sample_body["customer_requirements"][0]["importance"] = 9
        response = client.post("/api/qfd/analysis", json=sample_body)
        assert response.status_code == 422

    def test_self_correlation_is_422(self, client, sample_body):
        sample_body["technical_correlations"][0]["tech_req2_id"] = "tech1"
        response = client.post("/api/qfd/analysis", json=sample_body)
        assert response.status_code == 422

    def test_full_analysis_orders_insights_and_targets(self, client, sample_body):
        payload = client.post("/api/qfd/analysis", json=sample_body).json()
        assert payload["correlation_insights"][0]["urgency"] == "critical"
        assert [t["id"] for t in payload["target_ranking"]] == ["tech1", "tech2", "tech3"]
