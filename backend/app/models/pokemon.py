"""
Pokemon model for the pokedex database.
"""
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Pokemon(BaseModel):
    """
    Pokemon document model for MongoDB pokedex_db.pokemons collection.

    Unknown keys are descriptive payload and are kept as-is.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Unique lowercase name")
    no: int = Field(..., description="Unique Pokedex number")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value
