"""Liveness and readiness endpoints."""

from src.catalog.api.http.app import app
from src.catalog.api.http.deps import get_database_service


class _UnreachableDatabase:
    def health_check(self) -> bool:
        return False


class TestHealthEndpoints:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "catalog"}

    def test_readiness_with_database(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_readiness_without_database(self, client):
        """Should report 503 when the database cannot be reached."""
        app.dependency_overrides[get_database_service] = _UnreachableDatabase

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["database"]["status"] == "unhealthy"
