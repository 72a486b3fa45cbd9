"""
app/models/user.py

Purpose: User record

- Opaque id (also the bearer token, see services/credentials.py)
- Unique email
- Stored credential as produced by the active credential scheme
"""

from pydantic import BaseModel, Field
from datetime import datetime, timezone


class User(BaseModel):
    id: str
    email: str
    password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def public(self) -> dict:
        """Fields safe to return to clients."""
        return {"id": self.id, "email": self.email}
