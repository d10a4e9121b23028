"""
Database document models.
"""
from app.models.pokemon import Pokemon

__all__ = ["Pokemon"]
