"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional

from app.config import get_settings

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def close_connections():
    """Close the MongoDB connection."""
    global _mongo_client
    
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Get a MongoDB database by name, defaulting to the configured one."""
    client = await get_mongo_client()
    return client[db_name or get_settings().mongo_db_name]
