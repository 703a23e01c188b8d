"""Tests for the Flask app."""

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


class TestFlaskApp:
    """Test the local development server routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"

    def test_api_info(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert "calculate" in response.get_json()["endpoints"]

    def test_index_renders_default_scenario(self, client):
        response = client.get("/")
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert "ESI Channel Partner ROI Calculator" in html
        assert "$12,500" in html
        assert "$135,000" in html
        assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"

    def test_calculate(self, client):
        response = client.post("/calculate", json={"inputMode": "byWSE", "totalWseDirect": 400})
        body = response.get_json()

        assert response.status_code == 200
        assert body["results"]["wse"]["converted_wse"] == 100
        assert body["inputs"]["inputMode"] == "byWSE"

    def test_calculate_invalid_json(self, client):
        response = client.post("/calculate", data="not json", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json()["status"] == "failed"

    def test_calculate_no_tiers(self, client):
        response = client.post("/calculate", json={"tiers": []})

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_export_returns_pdf_attachment(self, client):
        response = client.post("/export", json={"clients": 5})

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/pdf"
        assert 'filename="ESI-Channel-ROI-Calculator.pdf"' in response.headers["Content-Disposition"]
        assert response.data.startswith(b"%PDF")

    def test_export_validation_error(self, client):
        response = client.post("/export", json={"inputMode": "sideways"})

        assert response.status_code == 400

    def test_export_invalid_json(self, client):
        """A malformed body is rejected, not rendered as the default scenario."""
        response = client.post("/export", data="{not json", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json()["status"] == "failed"

    def test_export_non_object_tier(self, client):
        response = client.post("/export", json={"tiers": [1]})

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_calculate_non_object_tier(self, client):
        response = client.post("/calculate", json={"tiers": [1]})

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_calculate_non_object_body(self, client):
        response = client.post("/calculate", json=[1, 2])

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"
