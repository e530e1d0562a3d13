"""Auth Schemas — sign-in/sign-up bodies and the identity response.

Invariants:
    - Request schemas carry raw strings; core/validate_credentials.py owns the rules
    - Passwords never appear in any response model
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from sports_events.core.domain_types import Identity


class SignInRequest(BaseModel):
    email: str = ""
    password: str = ""


class SignUpRequest(BaseModel):
    email: str = ""
    password: str = ""
    confirm_password: str = ""


class IdentityResponse(BaseModel):
    id: UUID
    email: str
    created_at: datetime | None = None

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityResponse":
        return cls(id=identity.id, email=identity.email, created_at=identity.created_at)
