"""
Pokemon service for catalog CRUD operations.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.config import Settings
from app.core.result import ErrorKind, Result
from app.database.databases import pokedex_db
from app.database.databases.pokedex_db import BSON_INT64_MAX, PUBLIC_PROJECTION, RESERVED_FIELDS
from app.schemas.pagination import PaginationParams
from app.schemas.pokemon import PokemonCreate, PokemonResponse, PokemonUpdate

logger = logging.getLogger(__name__)

FALLBACK_LIMIT = 10
DUPLICATE_KEY_CODE = 11000


def parse_number(term: str) -> Optional[Union[int, float]]:
    """Return the numeric value of ``term`` or None when it is not a number."""
    text = term.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def build_term_query(term: str) -> list[dict[str, Any]]:
    """
    Resolve a search term into the ordered list of filters to try.

    A numeric term is looked up by ``no``, anything else by lowercase ``name``.
    Numbers outside the int64 range cannot be stored, so they get no ``no``
    filter. If the term is also a valid ObjectId, an ``_id`` lookup is tried last.

    Args:
        term: Non-empty search term (name, pokedex number or ObjectId)

    Returns:
        Filters in resolution order; the first one that matches wins
    """
    queries = []
    number = parse_number(term)
    if number is None:
        queries.append({"name": term.lower()})
    else:
        if isinstance(number, float) and number.is_integer():
            number = int(number)
        if isinstance(number, float) or abs(number) <= BSON_INT64_MAX:
            queries.append({"no": number})

    if ObjectId.is_valid(term):
        queries.append({"_id": ObjectId(term)})

    return queries


def is_duplicate_key(error: PyMongoError) -> bool:
    return isinstance(error, DuplicateKeyError) or getattr(error, "code", None) == DUPLICATE_KEY_CODE


class PokemonService:
    """Service for pokemon catalog operations."""

    def __init__(self, db: AsyncIOMotorDatabase, settings: Settings):
        """Initialize with the pokedex database and explicit settings."""
        self.db = db
        self.pokemons = db[pokedex_db.Collections.POKEMONS]
        self.default_limit = settings.default_limit or FALLBACK_LIMIT

    # ==================== CRUD ====================

    async def create(self, request: PokemonCreate) -> Result[PokemonResponse]:
        """
        Insert a new pokemon.

        Args:
            request: Create payload; name is normalized to lowercase

        Returns:
            Result with the stored pokemon, or DUPLICATE_KEY / INTERNAL_FAILURE
        """
        now = datetime.now(timezone.utc)
        pokemon_doc = request.model_dump(exclude=set(RESERVED_FIELDS))
        pokemon_doc["name"] = request.name.lower()
        pokemon_doc["created_at"] = now
        pokemon_doc["updated_at"] = now

        try:
            result = await self.pokemons.insert_one(pokemon_doc)
        except PyMongoError as e:
            return self._handle_error(e, "create", pokemon_doc)

        pokemon_doc["_id"] = result.inserted_id
        return Result.ok(PokemonResponse.from_document(pokemon_doc))

    async def find_all(self, pagination: PaginationParams) -> Result[list[PokemonResponse]]:
        """List pokemons sorted by pokedex number."""
        limit = pagination.limit if pagination.limit is not None else self.default_limit

        cursor = (
            self.pokemons.find({}, PUBLIC_PROJECTION)
            .sort("no", 1)
            .skip(pagination.offset)
            .limit(limit)
        )
        docs = await cursor.to_list(length=limit)
        return Result.ok([PokemonResponse.from_document(doc) for doc in docs])

    async def find_one(self, term: str) -> Result[PokemonResponse]:
        """Find a pokemon by name, pokedex number or id, in that order."""
        if not term or not term.strip():
            return Result.fail(ErrorKind.INVALID_INPUT, "Search term is required")

        for query in build_term_query(term):
            doc = await self.pokemons.find_one(query, PUBLIC_PROJECTION)
            if doc:
                return Result.ok(PokemonResponse.from_document(doc))

        return Result.fail(ErrorKind.NOT_FOUND, f"Pokemon with term {term} not found")

    async def update(self, term: str, request: PokemonUpdate) -> Result[PokemonResponse]:
        """
        Apply a partial update to the pokemon matching ``term``.

        The returned pokemon is the stored one with the changes overlaid; it
        is not re-read from the database.
        """
        found = await self.find_one(term)
        if not found.is_ok:
            return found

        pokemon = found.value
        changes = {k: v for k, v in request.changes().items() if k not in RESERVED_FIELDS}
        if not changes:
            return found

        if "name" in changes:
            changes["name"] = changes["name"].lower()

        try:
            result = await self.pokemons.update_one(
                {"_id": ObjectId(pokemon.id)},
                {"$set": {**changes, "updated_at": datetime.now(timezone.utc)}},
            )
        except PyMongoError as e:
            return self._handle_error(e, "update", changes)

        if result.matched_count == 0:
            logger.warning(f"Pokemon {pokemon.id} vanished before update was applied")

        return Result.ok(PokemonResponse(**{**pokemon.model_dump(), **changes}))

    async def remove(self, pokemon_id: str) -> Result[Optional[PokemonResponse]]:
        """
        Delete a pokemon by id.

        A missing pokemon is not an error: the result value is simply None.
        """
        if not ObjectId.is_valid(pokemon_id):
            return Result.fail(ErrorKind.INVALID_INPUT, f"{pokemon_id} is not a valid MongoId")

        doc = await self.pokemons.find_one_and_delete(
            {"_id": ObjectId(pokemon_id)},
            projection=PUBLIC_PROJECTION,
        )
        if not doc:
            return Result.ok(None)
        return Result.ok(PokemonResponse.from_document(doc))

    # ==================== Helpers ====================

    def _handle_error(self, error: PyMongoError, action: str, payload: dict) -> Result:
        """Translate a store error into a service failure."""
        if is_duplicate_key(error):
            keys = {k: payload[k] for k in ("name", "no") if k in payload}
            logger.warning(f"Duplicate key on {action}: {keys}")
            return Result.fail(ErrorKind.DUPLICATE_KEY, f"Pokemon exists in db {keys}")

        logger.exception(f"Unexpected database error on {action}")
        return Result.fail(
            ErrorKind.INTERNAL_FAILURE,
            f"Can't {action} Pokemon - Check server logs",
        )
