import httpx
import logging
from fastapi import HTTPException
from pydantic import ValidationError
from pokedetail.config import get_settings
from pokedetail.models import RawPokemon

logger = logging.getLogger(__name__)

# Custom exception for upstream failures (5xx, network errors, malformed payloads)
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        # Fall back to environment-driven settings when not provided
        settings = get_settings()
        self.base_url = base_url or settings.pokeapi_base_url or self.BASE_URL
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.pokeapi_timeout,
        )

    async def _fetch_pokemon_data(self, pokemon_name: str) -> dict:
        """Internal method to fetch the raw /pokemon payload with error mapping."""
        normalized_name = pokemon_name.strip().lower()
        url = f"/pokemon/{normalized_name}"
        logger.info(f"Fetching Pokemon: {normalized_name}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
        except httpx.HTTPStatusError as e:
            logger.warning(f"PokeAPI returned {e.response.status_code} for {normalized_name}")
            if e.response.status_code == 404:
                raise HTTPException(status_code=404, detail=f"Pokemon '{pokemon_name}' not found.")
            raise APIClientError(status_code=503, detail=f"PokeAPI failed with status {e.response.status_code}")
        except httpx.RequestError as e:
            # Network failures/timeouts
            logger.error(f"PokeAPI network error: {str(e)}")
            raise APIClientError(status_code=503, detail=f"PokeAPI network error: {str(e)}")

        try:
            return response.json()
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for {normalized_name}")
            raise APIClientError(status_code=502, detail="PokeAPI returned a malformed payload.")

    async def get_pokemon(self, name: str) -> RawPokemon:
        """Fetches the Pokemon record and validates it against the RawPokemon schema."""
        data = await self._fetch_pokemon_data(name)

        try:
            return RawPokemon.model_validate(data)
        except ValidationError as e:
            logger.error(f"PokeAPI payload for {name} failed validation: {e.error_count()} error(s)")
            raise APIClientError(status_code=502, detail="PokeAPI returned a malformed payload.")

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
