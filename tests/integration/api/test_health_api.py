"""
Integration tests for health and metrics endpoints.
"""

import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Integration tests for the operational endpoints."""

    def test_health(self, client):
        """Test liveness endpoint."""
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_db(self, client):
        """Test database health endpoint."""
        response = client.get(reverse("health-db"))

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_ready(self, client):
        """Test readiness endpoint."""
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}

    def test_metrics_exposes_counters(self, client):
        """Test Prometheus metrics are exposed after a request."""
        client.get(reverse("health"))

        response = client.get(reverse("metrics"))

        assert response.status_code == 200
        assert b"http_requests_total" in response.content

    def test_correlation_id_echoed(self, client):
        """Test an incoming correlation id is returned."""
        response = client.get(reverse("health"), HTTP_X_CORRELATION_ID="abc-123")

        assert response["X-Correlation-ID"] == "abc-123"
