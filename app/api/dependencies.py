"""
app/api/dependencies.py

Purpose: Shared FastAPI dependencies

- Store access
- Listings client and cache
- Bearer token authentication
"""

from fastapi import Depends, Header, Request
from typing import Optional

from app.core.config import settings
from app.core.exceptions import AuthError
from app.core.logging import get_logger
from app.db.memory import MemoryStore, get_store
from app.models.user import User
from app.services.listings_cache_service import ListingsCache
from app.services.listings_service import RealtorClient, get_realtor_client
from app.services.user_service import resolve_token
from utils.validation_utils import parse_bearer_token

logger = get_logger(__name__)


def get_listings_client() -> RealtorClient:
    return get_realtor_client()


def get_listings_cache(
    store: MemoryStore = Depends(get_store),
    client: RealtorClient = Depends(get_listings_client)
) -> ListingsCache:
    return ListingsCache(store, client, ttl_seconds=settings.LISTINGS_CACHE_TTL_SECONDS)


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    store: MemoryStore = Depends(get_store)
) -> User:
    """
    Resolves "Authorization: Bearer <token>" to a user and attaches it to
    request.state.user.

    Raises:
        AuthError: If the header is missing, malformed or the token is unknown
    """
    if not authorization:
        logger.info(f"Missing Authorization header on {request.url.path}")
        raise AuthError("Missing Authorization header")

    token = parse_bearer_token(authorization)
    if token is None:
        logger.info(f"Malformed Authorization header on {request.url.path}")
        raise AuthError("Malformed Authorization header")

    user = resolve_token(store, token)
    request.state.user = user
    return user
