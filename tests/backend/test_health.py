"""
Tests for health check endpoints.

These tests verify:
- Basic health endpoint returns 200
- Readiness reports the database and its unique indexes
- Readiness degrades gracefully when MongoDB is down or unindexed
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app.database.registry import missing_unique_indexes

UNIQUE_INDEXES = {
    "_id_": {"key": [("_id", 1)]},
    "name_1": {"key": [("name", 1)], "unique": True},
    "no_1": {"key": [("no", 1)], "unique": True},
}


def make_db(index_information: dict) -> MagicMock:
    """A mocked database whose pokemons collection reports the given indexes."""
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1})
    db.__getitem__.return_value.index_information = AsyncMock(return_value=index_information)
    return db


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_endpoint_returns_200_when_api_running(self, client):
        """Basic health check should return 200 if API is up."""
        response = client.get("/health")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_root_lists_api_information(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Pokedex API"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    def test_readiness_healthy_with_unique_indexes(self, client):
        db = make_db(UNIQUE_INDEXES)
        with patch("app.routers.health.get_database", AsyncMock(return_value=db)):
            response = client.get("/health/ready")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"mongodb": "healthy", "unique_indexes": "healthy"}
        db.command.assert_awaited_once_with("ping")
        db.__getitem__.assert_called_with("pokemons")

    def test_readiness_reports_configured_database(self, client):
        with patch("app.routers.health.get_database", AsyncMock(return_value=make_db(UNIQUE_INDEXES))), \
             patch("app.routers.health.get_settings") as mock_settings:
            mock_settings.return_value.mongo_db_name = "pokedex_staging"
            response = client.get("/health/ready")
        
        assert response.json()["database"] == "pokedex_staging"

    def test_readiness_degraded_when_number_index_missing(self, client):
        indexes = {k: v for k, v in UNIQUE_INDEXES.items() if k != "no_1"}
        with patch("app.routers.health.get_database", AsyncMock(return_value=make_db(indexes))):
            response = client.get("/health/ready")
        
        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["mongodb"] == "healthy"
        assert data["checks"]["unique_indexes"] == "missing: no"

    def test_readiness_degraded_when_connection_fails(self, client):
        with patch("app.routers.health.get_database", AsyncMock(side_effect=Exception("Connection refused"))):
            response = client.get("/health/ready")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert "unhealthy" in data["checks"]["mongodb"]
        assert data["checks"]["unique_indexes"] == "unknown"


class TestMissingUniqueIndexes:
    """Tests for missing_unique_indexes against the mock database."""

    @pytest.mark.asyncio
    async def test_none_missing_after_create_indexes(self, mock_pokedex_db):
        assert await missing_unique_indexes(mock_pokedex_db) == []

    @pytest.mark.asyncio
    async def test_non_unique_index_does_not_count(self, mock_async_mongo_client):
        db = mock_async_mongo_client["pokedex_db"]
        await db.pokemons.create_index("name")
        
        assert await missing_unique_indexes(db) == ["name", "no"]
