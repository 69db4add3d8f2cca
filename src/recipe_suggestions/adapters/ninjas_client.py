"""API Ninjas nutrition endpoint client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MissingApiKeyError(RuntimeError):
    """Raised when the nutrition API key has not been provisioned."""


class NutritionApiClient(Protocol):
    """Interface for the natural-language nutrition API."""

    async def fetch_nutrition(self, query: str) -> object:
        """Return the raw JSON payload for a free-text ingredients query."""


@dataclass
class HttpxNinjasClient(NutritionApiClient):
    """HTTPX-backed API Ninjas client."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str | None, base_url: str) -> "HttpxNinjasClient":
        """Create a nutrition client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def fetch_nutrition(self, query: str) -> object:
        """Look up nutrition facts for ``query``."""
        if not self.api_key:
            raise MissingApiKeyError("API_NINJA_KEY environment variable is not set.")
        response = await self.http_client.get(
            f"{self.base_url}/nutrition",
            params={"query": query},
            headers={
                "Content-Type": "application/json",
                "X-Api-Key": self.api_key,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
