"""
Request/response schemas.
"""
from app.schemas.pagination import PaginationParams
from app.schemas.pokemon import (
    PokemonCreate,
    PokemonUpdate,
    PokemonResponse,
    SeedResponse,
)

__all__ = [
    "PaginationParams",
    "PokemonCreate",
    "PokemonUpdate",
    "PokemonResponse",
    "SeedResponse",
]
