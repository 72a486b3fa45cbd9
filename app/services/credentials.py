"""
app/services/credentials.py

Purpose: Credential handling behind one seam

- Password storage and verification
- Bearer token issue and resolution

PlaintextCredentials is a prototype placeholder: passwords are stored as
given and the bearer token is the user id itself, with no expiry. Anyone who
learns a user id can act as that user. Replace it with a salted-hash and
signed, expiring token scheme before exposing this service to real users;
routers and services only talk to CredentialScheme.
"""

import hmac
from abc import ABC, abstractmethod
from typing import Optional

from app.models.user import User


class CredentialScheme(ABC):
    """Interface for password storage and bearer tokens."""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        ...

    @abstractmethod
    def verify_password(self, password: str, stored: str) -> bool:
        ...

    @abstractmethod
    def issue_token(self, user: User) -> str:
        ...

    @abstractmethod
    def resolve_token(self, token: str) -> Optional[str]:
        """Returns the user id a token stands for, or None."""


class PlaintextCredentials(CredentialScheme):
    """Stores passwords verbatim and uses the user id as the token."""

    def hash_password(self, password: str) -> str:
        return password

    def verify_password(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))

    def issue_token(self, user: User) -> str:
        return user.id

    def resolve_token(self, token: str) -> Optional[str]:
        return token or None


_credentials: Optional[CredentialScheme] = None


def get_credentials() -> CredentialScheme:
    """Get or create the active credential scheme."""
    global _credentials
    if _credentials is None:
        _credentials = PlaintextCredentials()
    return _credentials
