"""
Service layer for business logic.
"""
from app.services.pokemon_service import PokemonService
from app.services.seed_service import SeedService

__all__ = [
    "PokemonService",
    "SeedService",
]
