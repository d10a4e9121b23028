"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from app.database.databases import pokedex_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "pokedex_db",
]
