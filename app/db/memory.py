"""
app/db/memory.py

Purpose: In-process store for users, workflows and the listings cache

- One explicit store object with a startup/shutdown lifecycle
- Users indexed by id and by email
- Workflows keyed by user id, created lazily
- Single listings cache slot
- Nothing survives a process restart
"""

import threading
from typing import Dict, Optional

from app.core.logging import get_logger
from app.models.listings_cache import ListingsCacheSlot
from app.models.user import User
from app.models.workflow import Workflow

logger = get_logger(__name__)


class MemoryStore:
    """
    Holds all mutable application state.

    Every mutation runs under a re-entrant lock so multi-step updates stay
    consistent when sync handlers are executed on a threadpool.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._user_ids_by_email: Dict[str, str] = {}
        self._workflows: Dict[str, Workflow] = {}
        self.listings_cache = ListingsCacheSlot()

    # Users

    def add_user(self, user: User) -> bool:
        """Inserts a user unless the email is taken. Returns False on conflict."""
        with self.lock:
            if user.email in self._user_ids_by_email:
                return False
            self._users[user.id] = user
            self._user_ids_by_email[user.email] = user.id
            return True

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        user_id = self._user_ids_by_email.get(email)
        return self._users.get(user_id) if user_id else None

    def user_count(self) -> int:
        return len(self._users)

    # Workflows

    def get_workflow(self, user_id: str) -> Optional[Workflow]:
        return self._workflows.get(user_id)

    def ensure_workflow(self, user_id: str) -> Workflow:
        with self.lock:
            workflow = self._workflows.get(user_id)
            if workflow is None:
                workflow = Workflow()
                self._workflows[user_id] = workflow
            return workflow

    # Listings cache

    def set_listings_cache(self, slot: ListingsCacheSlot):
        with self.lock:
            self.listings_cache = slot

    def clear(self):
        with self.lock:
            self._users.clear()
            self._user_ids_by_email.clear()
            self._workflows.clear()
            self.listings_cache = ListingsCacheSlot()


# Global store instance
_store: Optional[MemoryStore] = None


def connect_store() -> MemoryStore:
    """
    Creates the store.
    Called during application startup.
    """
    global _store

    if _store is not None:
        logger.warning("Store already initialized")
        return _store

    _store = MemoryStore()
    logger.info("In-memory store initialized")
    return _store


def close_store():
    """
    Discards the store and everything in it.
    Called during application shutdown.
    """
    global _store

    if _store is not None:
        logger.info(
            "Discarding in-memory store",
            extra={"users": _store.user_count()}
        )
        _store.clear()
        _store = None


def check_store_health() -> bool:
    return _store is not None


def get_store() -> MemoryStore:
    """
    Returns the store instance.

    Raises:
        RuntimeError: If the store is not initialized
    """
    if _store is None:
        raise RuntimeError(
            "Store not initialized. Call connect_store() during startup."
        )
    return _store
