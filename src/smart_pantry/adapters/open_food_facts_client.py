"""Open Food Facts product API client."""

from dataclasses import dataclass

import httpx

from smart_pantry.domain.errors import ProductLookupError, ProductNotFoundError
from smart_pantry.services.products import ProductLookupClient


@dataclass
class HttpxOpenFoodFactsClient(ProductLookupClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, user_agent: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
        )

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch the raw product record for a barcode."""
        url = f"{self.base_url.rstrip('/')}/{barcode}.json"
        try:
            response = await self.http_client.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=15,
            )
            if response.status_code == httpx.codes.NOT_FOUND:
                raise ProductNotFoundError(barcode)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise ProductLookupError(
                f"API Error: {exc.response.reason_phrase}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProductLookupError(f"Product lookup failed: {exc}") from exc
        except ValueError as exc:
            raise ProductLookupError("Product lookup returned invalid JSON") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
