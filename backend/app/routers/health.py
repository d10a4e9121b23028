"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from app.config import get_settings
from app.database.connections import get_database
from app.database.registry import missing_unique_indexes

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """Returns 200 if the API is running."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check for the pokedex database",
)
async def readiness_check():
    """
    Check that the configured database answers and that the pokemons
    collection carries the unique indexes on name and no.
    
    Without those indexes duplicate names or numbers would be accepted,
    so their absence reports the service as degraded.
    """
    database = get_settings().mongo_db_name
    checks = {"mongodb": "unknown", "unique_indexes": "unknown"}
    
    try:
        db = await get_database()
        await db.command("ping")
        checks["mongodb"] = "healthy"
        
        missing = await missing_unique_indexes(db)
        checks["unique_indexes"] = (
            "healthy" if not missing else f"missing: {', '.join(missing)}"
        )
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {e}"
    
    ready = all(v == "healthy" for v in checks.values())
    
    return {
        "status": "healthy" if ready else "degraded",
        "database": database,
        "checks": checks,
    }
