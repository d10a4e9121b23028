"""
Seed service that repopulates the catalog from PokeAPI.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import Settings
from app.core.result import ErrorKind, Result
from app.database.databases import pokedex_db
from app.database.databases.pokedex_db import BSON_INT64_MAX
from app.schemas.pokemon import SeedResponse
from app.services.pokeapi import PokeAPI

logger = logging.getLogger(__name__)


def number_from_url(url: str) -> Optional[int]:
    """Extract the pokedex number from a resource URL like .../pokemon/25/."""
    segment = url.rstrip("/").rsplit("/", 1)[-1]
    return int(segment) if segment.isdigit() else None


def to_seed_documents(results: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Turn PokeAPI list results into pokemon documents, skipping malformed and repeated ones."""
    now = datetime.now(timezone.utc)
    docs = []
    seen_names, seen_numbers = set(), set()
    for item in results:
        no = number_from_url(item.get("url", ""))
        name = item.get("name")
        if no is None or not name or not 1 <= no <= BSON_INT64_MAX:
            logger.debug(f"Skipping malformed PokeAPI result: {item}")
            continue
        name = name.lower()
        if name in seen_names or no in seen_numbers:
            logger.debug(f"Skipping repeated PokeAPI result: {item}")
            continue
        seen_names.add(name)
        seen_numbers.add(no)
        docs.append({"name": name, "no": no, "created_at": now, "updated_at": now})
    return docs


class SeedService:
    """Service that wipes and reloads the pokemons collection."""
    
    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings, api: PokeAPI):
        """Initialize with the pokedex database, settings and a PokeAPI client."""
        self.pokemons = db[pokedex_db.Collections.POKEMONS]
        self.seed_limit = settings.seed_limit
        self.api = api
    
    async def execute_seed(self) -> Result[SeedResponse]:
        """
        Replace the catalog with the first ``seed_limit`` pokemons from PokeAPI.
        
        Nothing is deleted until PokeAPI returned at least one usable pokemon.
        If the insert then fails, the previous catalog is written back.
        """
        try:
            results = await self.api.list_pokemon(limit=self.seed_limit)
        except httpx.HTTPError as e:
            logger.error(f"PokeAPI request failed: {e}")
            return Result.fail(ErrorKind.UPSTREAM_FAILURE, "PokeAPI request failed")
        
        docs = to_seed_documents(results)
        if not docs:
            logger.error("PokeAPI returned no usable pokemons, catalog left untouched")
            return Result.fail(ErrorKind.UPSTREAM_FAILURE, "PokeAPI returned no pokemons")
        
        try:
            previous = await self.pokemons.find({}).to_list(length=None)
            await self.pokemons.delete_many({})
        except PyMongoError:
            logger.exception("Seed failed before the catalog was replaced")
            return Result.fail(ErrorKind.INTERNAL_FAILURE, "Can't seed Pokemon - Check server logs")
        
        try:
            await self.pokemons.insert_many(docs)
        except PyMongoError:
            logger.exception("Seed insert failed, restoring the previous catalog")
            await self._restore(previous)
            return Result.fail(ErrorKind.INTERNAL_FAILURE, "Can't seed Pokemon - Check server logs")
        
        logger.info(f"Seed inserted {len(docs)} pokemons")
        return Result.ok(SeedResponse(message="Seed executed", inserted=len(docs)))
    
    async def _restore(self, previous: list[dict[str, Any]]) -> None:
        """Put back the documents that were in the catalog before the seed."""
        try:
            await self.pokemons.delete_many({})
            if previous:
                await self.pokemons.insert_many(previous)
        except PyMongoError:
            logger.exception(f"Could not restore {len(previous)} pokemons after a failed seed")
