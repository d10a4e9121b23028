"""
Pokemon request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.database.databases.pokedex_db import BSON_INT64_MAX, INTERNAL_FIELDS, RESERVED_FIELDS
from app.models.pokemon import Pokemon


def reject_reserved_fields(data: Any) -> Any:
    """Refuse payloads that try to set the id or internal metadata."""
    if isinstance(data, dict):
        reserved = sorted(key for key in data if key in RESERVED_FIELDS)
        if reserved:
            raise ValueError(f"Fields cannot be set by the client: {', '.join(reserved)}")
    return data


class PokemonCreate(BaseModel):
    """Create pokemon request. Extra fields are stored verbatim."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Pokemon name (stored lowercase)")
    no: int = Field(..., ge=1, le=BSON_INT64_MAX, description="Pokedex number")

    @model_validator(mode="before")
    @classmethod
    def check_reserved_fields(cls, data: Any) -> Any:
        return reject_reserved_fields(data)


class PokemonUpdate(BaseModel):
    """Partial update request. Only the supplied fields are written."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, min_length=1, description="Pokemon name (stored lowercase)")
    no: Optional[int] = Field(None, ge=1, le=BSON_INT64_MAX, description="Pokedex number")

    @model_validator(mode="before")
    @classmethod
    def check_reserved_fields(cls, data: Any) -> Any:
        return reject_reserved_fields(data)

    def changes(self) -> dict:
        """Fields explicitly provided by the caller."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class PokemonResponse(BaseModel):
    """Pokemon response, internal metadata excluded."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Pokemon ID")
    name: str = Field(..., description="Pokemon name")
    no: int = Field(..., description="Pokedex number")

    @classmethod
    def from_document(cls, doc: dict) -> "PokemonResponse":
        """Build a response from a raw collection document."""
        pokemon = Pokemon(**doc)
        return cls(**pokemon.model_dump(exclude=set(INTERNAL_FIELDS)))


class SeedResponse(BaseModel):
    """Seed execution summary."""
    message: str = Field(..., description="Outcome message")
    inserted: int = Field(..., description="Number of pokemons inserted")
