"""
Pokedex Backend - FastAPI Application

A Pokemon catalog API backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.database.connections import get_database, close_connections
from app.database.registry import create_indexes
from app.routers import health, pokemon, seed

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("pokedex")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    
    Startup:
    - Initialize database connection
    - Create unique indexes
    
    Shutdown:
    - Close the database connection
    """

    logger.info("Starting up Pokedex Backend...")
    
    try:
        db = await get_database()
        await create_indexes(db)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")
    
    yield
    
    logger.info("Shutting down Pokedex Backend...")
    await close_connections()
    logger.info("Database connection closed")


# Create FastAPI application
app = FastAPI(
    title="Pokedex API",
    description="""
## Pokemon Catalog API

CRUD over a catalog of pokemons stored in MongoDB.

### Features
- **Pokemon**: Create, list, look up, update and delete catalog entries
- **Lookup**: `GET /api/v2/pokemon/{term}` accepts a name (case-insensitive),
  a pokedex number or a MongoDB id
- **Pagination**: `?limit=&offset=` on the list endpoint
- **Seed**: Reload the catalog from PokeAPI
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(pokemon.router)
app.include_router(seed.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Pokedex API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
