"""Tests for application-level endpoints."""

from fastapi import status


class TestStatusEndpoints:
    """Tests for / and /health"""

    async def test_root(self, client):
        """Root reports the service as running."""
        response = await client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"

    async def test_health(self, client):
        """Health check reports healthy."""
        response = await client.get("/health")
        assert response.json() == {"status": "healthy"}
