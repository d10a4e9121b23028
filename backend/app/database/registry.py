"""
Index management.
Ensures the uniqueness constraints of the catalog exist on startup.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases import pokedex_db

# Fields that must each carry a unique index on the pokemons collection
UNIQUE_FIELDS = ("name", "no")


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes on the pokemons collection."""
    pokemons = db[pokedex_db.Collections.POKEMONS]
    for field in UNIQUE_FIELDS:
        await pokemons.create_index(field, unique=True)


async def missing_unique_indexes(db: AsyncIOMotorDatabase) -> list[str]:
    """Return the fields of UNIQUE_FIELDS that lack a single-field unique index."""
    indexes = await db[pokedex_db.Collections.POKEMONS].index_information()
    unique = {
        index["key"][0][0]
        for index in indexes.values()
        if index.get("unique") and len(index["key"]) == 1
    }
    return [field for field in UNIQUE_FIELDS if field not in unique]
