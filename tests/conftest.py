"""
Global test fixtures for the Pokedex API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Settings isolated from the environment
- Pokemon payload factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_pokedex_db(mock_async_mongo_client):
    """Provide mock pokedex_db database with the real unique indexes."""
    from app.database.registry import create_indexes

    db = mock_async_mongo_client["pokedex_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings that do not depend on the environment."""
    from app.config import Settings

    return Settings(
        mongo_uri="mongodb://test:27017",
        mongo_db_name="pokedex_db",
        default_limit=10,
        pokeapi_url="https://pokeapi.test/api/v2",
        seed_limit=5,
        log_level="DEBUG",
    )


# =============================================================================
# Pokemon Fixtures
# =============================================================================

@pytest.fixture
def pokemon_payloads() -> list[dict]:
    """Create payloads for four pokemons, deliberately out of order."""
    return [
        {"name": "Squirtle", "no": 7, "type": "water"},
        {"name": "Bulbasaur", "no": 1, "type": "grass"},
        {"name": "Pikachu", "no": 25, "type": "electric"},
        {"name": "Charmander", "no": 4, "type": "fire"},
    ]
