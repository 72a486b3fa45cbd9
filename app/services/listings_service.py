"""
app/services/listings_service.py

Purpose: Realtor (RapidAPI) listings client

- Nearby search by latitude/longitude
- For-sale search by postal code
- Latest for-sale listings (the only query that is cached)
- Tolerates both known response shapes
"""

import httpx
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.core.exceptions import UpstreamError
from app.core.logging import get_logger

logger = get_logger(__name__)

NEARBY_PATH = "/properties/v2/nearby"
FOR_SALE_PATH = "/properties/v2/list-for-sale"


def extract_results(body: Any) -> List[Any]:
    """
    Pulls the listing records out of an upstream response.

    The API answers with either a top-level "properties" list or a nested
    "data.home_search.results" list. The top-level field wins when both are
    present; anything else yields an empty list.
    """
    if not isinstance(body, dict):
        return []

    properties = body.get("properties")
    if isinstance(properties, list):
        return properties

    data = body.get("data")
    if isinstance(data, dict):
        home_search = data.get("home_search")
        if isinstance(home_search, dict):
            results = home_search.get("results")
            if isinstance(results, list):
                return results

    return []


class RealtorClient:
    """
    Thin async client for the Realtor listings API.
    Each call opens its own httpx.AsyncClient.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://realtor.p.rapidapi.com",
        api_host: str = "realtor.p.rapidapi.com",
        timeout: Optional[float] = 30.0,
        default_limit: int = 12,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._api_host = api_host
        self._timeout = timeout
        self._transport = transport
        self.default_limit = default_limit

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self._api_host,
        }

    async def _get(self, path: str, params: Dict[str, Any]) -> List[Any]:
        """
        Issues one GET and extracts the results list.

        Raises:
            UpstreamError: On network failure, timeout or a non-JSON body
        """
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport
            ) as client:
                response = await client.get(path, params=params, headers=self.headers)

            if response.status_code != 200:
                logger.warning(
                    f"Realtor API returned {response.status_code} for {path}",
                    extra={"query": params}
                )

            return extract_results(response.json())

        except httpx.TimeoutException as e:
            logger.error(f"Realtor API timeout on {path}")
            raise UpstreamError("Listings service timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Network error calling Realtor API: {e}")
            raise UpstreamError("Unable to reach listings service") from e
        except ValueError as e:
            logger.error(f"Realtor API returned a non-JSON body for {path}")
            raise UpstreamError("Listings service returned an invalid response") from e

    async def nearby(self, lat: str, lon: str) -> List[Any]:
        """Properties near a coordinate pair."""
        return await self._get(
            NEARBY_PATH,
            {"lat": lat, "lon": lon, "limit": self.default_limit}
        )

    async def by_postal_code(self, postal_code: str) -> List[Any]:
        """For-sale listings in a postal code, by relevance."""
        return await self._get(
            FOR_SALE_PATH,
            {
                "postal_code": postal_code,
                "limit": self.default_limit,
                "offset": 0,
                "sort": "relevance",
            }
        )

    async def latest(self, limit: Optional[int] = None) -> List[Any]:
        """Most recently listed for-sale properties."""
        return await self._get(
            FOR_SALE_PATH,
            {
                "limit": limit or self.default_limit,
                "offset": 0,
                "sort": "recently_listed",
            }
        )


# Global client instance
_realtor_client: Optional[RealtorClient] = None


def get_realtor_client() -> RealtorClient:
    """Get or create the global Realtor client."""
    global _realtor_client
    if _realtor_client is None:
        _realtor_client = RealtorClient(
            api_key=settings.realtor_api_key,
            base_url=settings.REALTOR_BASE_URL,
            api_host=settings.REALTOR_API_HOST,
            timeout=settings.REALTOR_TIMEOUT_SECONDS,
            default_limit=settings.LISTINGS_DEFAULT_LIMIT,
        )
    return _realtor_client


def close_realtor_client():
    """Drops the global client so the next call picks up fresh settings."""
    global _realtor_client
    _realtor_client = None
