"""
Seed router to reload the catalog from PokeAPI.
"""
from fastapi import APIRouter, Depends

from app.config import get_settings
from app.database.connections import get_database
from app.schemas.pokemon import SeedResponse
from app.services.pokeapi import PokeAPI
from app.services.seed_service import SeedService
from app.routers.responses import unwrap

router = APIRouter(prefix="/api/v2/seed", tags=["Seed"])


async def get_seed_service() -> SeedService:
    """Dependency to get SeedService instance."""
    settings = get_settings()
    db = await get_database()
    return SeedService(db, settings, PokeAPI(settings.pokeapi_url))


@router.post(
    "",
    response_model=SeedResponse,
    summary="Seed the catalog",
)
async def execute_seed(seed_service: SeedService = Depends(get_seed_service)):
    """
    Delete every pokemon and reload the catalog from PokeAPI.
    
    **Warning**: This action cannot be undone.
    """
    try:
        return unwrap(await seed_service.execute_seed())
    finally:
        await seed_service.api.close()
