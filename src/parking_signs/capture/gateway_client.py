"""HTTP client for the analysis gateway."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from parking_signs.domain.verdict import AnalysisVerdict

DEFAULT_GATEWAY_URL = "http://localhost:3000"


class GatewayClient(Protocol):
    """Interface for submitting image sets to the gateway."""

    async def analyze(self, images: list[str]) -> AnalysisVerdict:
        """Return the verdict for an ordered set of images."""


@dataclass
class HttpxGatewayClient(GatewayClient):
    """Gateway client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str = DEFAULT_GATEWAY_URL) -> "HttpxGatewayClient":
        """Create a gateway client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def analyze(self, images: list[str]) -> AnalysisVerdict:
        """Post images to the gateway and validate the returned verdict."""
        response = await self.http_client.post(
            f"{self.base_url}/api/analyze",
            json={"images": images},
            timeout=120,
        )
        response.raise_for_status()
        return AnalysisVerdict.model_validate(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
