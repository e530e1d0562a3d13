"""Authorization Gate — resolves the request's identity and refuses anonymous callers.

Invariants:
    - IdentityResolver.resolve() never raises for "no session"; it returns None
    - AuthorizationGate.require_identity() raises AuthenticationError on None
    - The identity returned here is the ONLY owner id the repository ever sees;
      no client-supplied user id is trusted
    - Each gate resolves at most once (one provider round-trip per request)

Design Decisions:
    - Identity passed explicitly per request (gate built from the request's token)
      instead of read from ambient state: use cases are testable with a stub gate
"""

import logging

from sports_events.core.domain_types import Identity
from sports_events.core.errors import AuthenticationError
from sports_events.core.repository_protocols import IdentityProvider

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Turns an opaque session handle into an Identity, or None when anonymous."""

    def __init__(self, provider: IdentityProvider, access_token: str | None):
        self.provider = provider
        self.access_token = access_token

    async def resolve(self) -> Identity | None:
        if not self.access_token:
            return None
        return await self.provider.get_user(self.access_token)


class AuthorizationGate:
    """Single enforcement point for operations that need a signed-in actor."""

    def __init__(self, resolver: IdentityResolver):
        self.resolver = resolver
        self._resolved = False
        self._identity: Identity | None = None

    async def current_identity(self) -> Identity | None:
        if not self._resolved:
            self._identity = await self.resolver.resolve()
            self._resolved = True
        return self._identity

    async def require_identity(self) -> Identity:
        identity = await self.current_identity()
        if identity is None:
            logger.info("Rejected anonymous request")
            raise AuthenticationError("Not authenticated")
        return identity
