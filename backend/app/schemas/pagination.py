"""
Pagination query parameters.
"""
from typing import Optional

from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    """Limit/offset pagination. A missing limit means the configured default."""
    limit: Optional[int] = Field(None, ge=1, description="Max results to return")
    offset: int = Field(0, ge=0, description="Number of results to skip")
