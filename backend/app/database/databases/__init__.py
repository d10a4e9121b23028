"""
Database definitions and collection constants.
"""
from app.database.databases import pokedex_db

__all__ = ["pokedex_db"]
