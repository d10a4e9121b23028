"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "pokedex_db"
    
    # Pagination
    default_limit: int = 10
    
    # PokeAPI (seed)
    pokeapi_url: str = "https://pokeapi.co/api/v2"
    seed_limit: int = 650
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
