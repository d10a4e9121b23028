"""
PokeAPI client used to seed the catalog.

Only the listing endpoint is needed:
GET /pokemon?limit=N -> {"results": [{"name": ..., "url": ".../pokemon/25/"}]}
"""
from typing import Any, Optional

import httpx


class PokeAPI:
    """
    Async client for the public PokeAPI.
    """
    
    def __init__(self, base_url: str):
        """Initialize with the PokeAPI base URL (e.g. https://pokeapi.co/api/v2)."""
        self.base_url = base_url.rstrip("/")
        self._client: Optional[httpx.AsyncClient] = None
    
    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=30.0,
                follow_redirects=True,
            )
        return self._client
    
    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
    
    async def list_pokemon(self, limit: int, offset: int = 0) -> list[dict[str, Any]]:
        """
        Fetch the named pokemon resource list.
        
        Args:
            limit: Max results
            offset: Pagination offset
            
        Returns:
            List of {"name", "url"} dicts
            
        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses
        """
        client = await self._get_client()
        response = await client.get(
            f"{self.base_url}/pokemon",
            params={"limit": limit, "offset": offset},
        )
        response.raise_for_status()
        return response.json().get("results", [])
