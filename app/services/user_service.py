"""
app/services/user_service.py

Purpose: User registration, login and token resolution

- Registration rejects missing fields and duplicate emails
- Login matches email and password exactly
- Bearer tokens resolve to stored users
"""

import uuid
from typing import Optional, Tuple

from app.core.exceptions import AuthError, ConflictError, ValidationError
from app.core.logging import get_logger, LogContext
from app.db.memory import MemoryStore
from app.models.user import User
from app.services.credentials import CredentialScheme, get_credentials

logger = get_logger(__name__)


def new_user_id() -> str:
    return uuid.uuid4().hex


def register_user(
    store: MemoryStore,
    email: Optional[str],
    password: Optional[str],
    credentials: Optional[CredentialScheme] = None
) -> User:
    """
    Creates a user and an empty workflow for it.

    Args:
        store: Application store
        email: Email address, must be unique
        password: Password as sent by the client

    Returns:
        The new user

    Raises:
        ValidationError: If email or password is missing
        ConflictError: If the email is already registered
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    credentials = credentials or get_credentials()

    with store.lock:
        if store.find_user_by_email(email) is not None:
            logger.info("Registration rejected, email exists")
            raise ConflictError("Email already registered")

        user = User(
            id=new_user_id(),
            email=email,
            password=credentials.hash_password(password),
        )
        store.add_user(user)
        store.ensure_workflow(user.id)

    with LogContext(user_id=user.id):
        logger.info("User registered")

    return user


def login_user(
    store: MemoryStore,
    email: Optional[str],
    password: Optional[str],
    credentials: Optional[CredentialScheme] = None
) -> Tuple[str, User]:
    """
    Checks an email/password pair.

    Returns:
        (bearer token, user)

    Raises:
        AuthError: If no user has exactly this email and password
    """
    credentials = credentials or get_credentials()

    user = store.find_user_by_email(email) if email else None
    if user is None or password is None or not credentials.verify_password(password, user.password):
        logger.info("Login rejected")
        raise AuthError("Invalid email or password")

    with LogContext(user_id=user.id):
        logger.info("User logged in")

    return credentials.issue_token(user), user


def resolve_token(
    store: MemoryStore,
    token: str,
    credentials: Optional[CredentialScheme] = None
) -> User:
    """
    Maps a bearer token to its user.

    Raises:
        AuthError: If the token does not belong to any user
    """
    credentials = credentials or get_credentials()

    user_id = credentials.resolve_token(token)
    user = store.get_user(user_id) if user_id else None
    if user is None:
        logger.info("Unknown bearer token")
        raise AuthError("Invalid token")

    return user
