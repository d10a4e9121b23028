"""
Pokedex database configuration.
Stores the Pokemon catalog.
"""


class Collections:
    """Collection names in pokedex_db."""
    POKEMONS = "pokemons"


# Fields maintained by the service, never returned to callers
INTERNAL_FIELDS = ("created_at", "updated_at")

# Projection that strips internal fields from read results
PUBLIC_PROJECTION = {field: 0 for field in INTERNAL_FIELDS}

# Keys a caller may never write: the identifier and the internal fields
RESERVED_FIELDS = ("_id", "id") + INTERNAL_FIELDS

# Largest integer BSON can store (int64)
BSON_INT64_MAX = 2**63 - 1
