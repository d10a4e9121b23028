"""
API Routers module.
"""
from app.routers import health, pokemon, seed

__all__ = ["health", "pokemon", "seed"]
