"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with service instances and a
TestClient wired to the mock database.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def pokemon_service(mock_pokedex_db, test_settings):
    """PokemonService bound to the mock database."""
    from app.services.pokemon_service import PokemonService

    return PokemonService(mock_pokedex_db, test_settings)


@pytest_asyncio.fixture
async def seeded_service(pokemon_service, pokemon_payloads):
    """PokemonService with every pokemon_payloads entry already created."""
    from app.schemas.pokemon import PokemonCreate

    for payload in pokemon_payloads:
        result = await pokemon_service.create(PokemonCreate(**payload))
        assert result.is_ok
    return pokemon_service


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """FastAPI app with dependency overrides cleared after each test."""
    from app.main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """
    TestClient with the startup and shutdown database calls mocked.

    Use this for endpoints that do not touch the pokemons collection.
    """
    from fastapi.testclient import TestClient

    with patch("app.main.get_database", AsyncMock(side_effect=Exception("no database in tests"))), \
         patch("app.main.close_connections", AsyncMock()):
        with TestClient(app) as c:
            yield c


@pytest_asyncio.fixture
async def async_client(app, mock_pokedex_db, test_settings):
    """
    Async client whose pokemon routes use the mock database.
    """
    from httpx import AsyncClient, ASGITransport
    from app.routers.pokemon import get_pokemon_service
    from app.services.pokemon_service import PokemonService

    async def _pokemon_service():
        return PokemonService(mock_pokedex_db, test_settings)

    app.dependency_overrides[get_pokemon_service] = _pokemon_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
