"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every EventRepository method takes owner_id first; it is never optional
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test doubles need no base class
    - Async in Protocol: boundary methods are async because implementations do IO,
      the pure validator never calls them
"""

from typing import Any, Protocol

from sports_events.core.domain_types import (
    EventFilters, EventId, EventRecord, Identity, UserId,
)
from sports_events.core.validate_event import ValidatedEvent


class EventRepository(Protocol):
    """Owner-scoped event persistence — implemented by shell."""
    async def find_all(
        self, owner_id: UserId, filters: EventFilters | None = None,
    ) -> list[EventRecord]: ...
    async def find_by_id(self, owner_id: UserId, event_id: EventId) -> EventRecord: ...
    async def insert(self, owner_id: UserId, record: ValidatedEvent) -> EventRecord: ...
    async def update(
        self, owner_id: UserId, event_id: EventId, patch: dict[str, Any],
    ) -> EventRecord: ...
    async def delete(self, owner_id: UserId, event_id: EventId) -> None: ...
    async def count(self, owner_id: UserId) -> int: ...


class AuthSession(Protocol):
    """Tokens the auth provider hands back after sign-in."""
    access_token: str
    refresh_token: str | None
    expires_in: int | None


class IdentityProvider(Protocol):
    """Hosted auth provider contract — implemented by infrastructure."""
    async def get_user(self, access_token: str) -> Identity | None: ...
    async def sign_in_with_password(self, email: str, password: str) -> AuthSession: ...
    async def sign_up(self, email: str, password: str, redirect_to: str) -> None: ...
    async def sign_out(self, access_token: str) -> None: ...
    def oauth_authorize_url(self, provider: str, redirect_to: str) -> str: ...


class ViewInvalidator(Protocol):
    """Receives logical page paths that went stale after a write."""
    def invalidate(self, path: str) -> None: ...
