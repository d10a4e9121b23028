"""
Pokemon router for catalog CRUD.
"""
from typing import Annotated, Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.config import get_settings
from app.database.connections import get_database
from app.schemas.pagination import PaginationParams
from app.schemas.pokemon import PokemonCreate, PokemonResponse, PokemonUpdate
from app.services.pokemon_service import PokemonService
from app.routers.responses import unwrap

router = APIRouter(prefix="/api/v2/pokemon", tags=["Pokemon"])


async def get_pokemon_service() -> PokemonService:
    """Dependency to get PokemonService instance."""
    db = await get_database()
    return PokemonService(db, get_settings())


def parse_mongo_id(pokemon_id: str) -> str:
    """Reject path values that are not valid ObjectIds."""
    if not ObjectId.is_valid(pokemon_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{pokemon_id} is not a valid MongoId",
        )
    return pokemon_id


@router.post(
    "",
    response_model=PokemonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create pokemon",
)
async def create_pokemon(
    body: PokemonCreate,
    pokemon_service: PokemonService = Depends(get_pokemon_service),
):
    """
    Add a pokemon to the catalog.
    
    - **name**: Unique name, stored lowercase
    - **no**: Unique pokedex number
    
    Any other fields are stored as-is.
    """
    return unwrap(await pokemon_service.create(body))


@router.get(
    "",
    response_model=list[PokemonResponse],
    summary="List pokemons",
)
async def list_pokemons(
    limit: Optional[int] = Query(None, ge=1, description="Max results (default from settings)"),
    offset: int = Query(0, ge=0, description="Results to skip"),
    pokemon_service: PokemonService = Depends(get_pokemon_service),
):
    """List pokemons sorted by pokedex number."""
    pagination = PaginationParams(limit=limit, offset=offset)
    return unwrap(await pokemon_service.find_all(pagination))


@router.get(
    "/{term}",
    response_model=PokemonResponse,
    summary="Get pokemon",
)
async def get_pokemon(
    term: str,
    pokemon_service: PokemonService = Depends(get_pokemon_service),
):
    """
    Get a pokemon by name (case-insensitive), pokedex number or id.
    """
    return unwrap(await pokemon_service.find_one(term))


@router.patch(
    "/{term}",
    response_model=PokemonResponse,
    summary="Update pokemon",
)
async def update_pokemon(
    term: str,
    body: PokemonUpdate,
    pokemon_service: PokemonService = Depends(get_pokemon_service),
):
    """
    Update the pokemon matching `term` with the supplied fields only.
    """
    return unwrap(await pokemon_service.update(term, body))


@router.delete(
    "/{pokemon_id}",
    response_model=Optional[PokemonResponse],
    summary="Delete pokemon",
)
async def delete_pokemon(
    pokemon_id: Annotated[str, Depends(parse_mongo_id)],
    pokemon_service: PokemonService = Depends(get_pokemon_service),
):
    """
    Delete a pokemon by id.
    
    Returns the deleted pokemon, or `null` if no pokemon had that id.
    """
    return unwrap(await pokemon_service.remove(pokemon_id))
