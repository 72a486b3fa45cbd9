"""
app/api/listings.py

Purpose: Public listings endpoint

- lat + lon: nearby search
- postal_code: for-sale search in that postal code
- neither: latest listings through the cache
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Optional

from app.api.dependencies import get_listings_cache, get_listings_client
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.response import ErrorResponse, ListingsResponse
from app.services.listings_cache_service import ListingsCache
from app.services.listings_service import RealtorClient

logger = get_logger(__name__)
router = APIRouter()


@router.get("/listings", response_model=ListingsResponse)
async def get_listings(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    postal_code: Optional[str] = None,
    client: RealtorClient = Depends(get_listings_client),
    cache: ListingsCache = Depends(get_listings_cache)
):
    """
    Proxies the Realtor listings API. Only the unfiltered query is cached.
    """
    try:
        if lat and lon:
            logger.info("Nearby listings requested", extra={"query": {"lat": lat, "lon": lon}})
            results = await client.nearby(lat, lon)
        elif postal_code:
            logger.info("Postal code listings requested", extra={"query": {"postal_code": postal_code}})
            results = await client.by_postal_code(postal_code)
        else:
            results = await cache.get_or_refresh(settings.LISTINGS_DEFAULT_LIMIT)

        return {"results": results}

    except Exception as e:
        logger.error(f"Listings request failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="failed", code="LISTINGS_FAILED").model_dump()
        )
