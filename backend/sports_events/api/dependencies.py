"""Request Dependencies — builds the per-request pipeline from FastAPI's DI.

Invariants:
    - One AuthorizationGate per request, built from that request's token only
    - Token source: Authorization Bearer header first, then the session cookie
    - The identity provider is process-wide (app.state), created in the lifespan
    - Nothing here resolves the identity; the use cases ask the gate when they need it
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from sports_events.config import Settings, get_settings
from sports_events.core.repository_protocols import IdentityProvider
from sports_events.core.validate_event import EventRules
from sports_events.infrastructure.database import get_db
from sports_events.services.auth_actions import AuthActions
from sports_events.services.auth_gate import AuthorizationGate, IdentityResolver
from sports_events.services.event_actions import EventActions
from sports_events.services.event_repository import SqlAlchemyEventRepository
from sports_events.services.event_use_cases import EventUseCases
from sports_events.services.view_invalidation import RequestInvalidations


def extract_access_token(request: Request, cookie_name: str) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(cookie_name) or None


def get_identity_provider(request: Request) -> IdentityProvider:
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise RuntimeError("Identity provider not initialized")
    return provider


def get_gate(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
    settings: Settings = Depends(get_settings),
) -> AuthorizationGate:
    token = extract_access_token(request, settings.session_cookie_name)
    return AuthorizationGate(IdentityResolver(provider, token))


def get_invalidations() -> RequestInvalidations:
    return RequestInvalidations()


def get_event_actions(
    gate: AuthorizationGate = Depends(get_gate),
    db: AsyncSession = Depends(get_db),
    invalidations: RequestInvalidations = Depends(get_invalidations),
    settings: Settings = Depends(get_settings),
) -> EventActions:
    repository = SqlAlchemyEventRepository(
        db, default_page_size=settings.default_page_size,
    )
    use_cases = EventUseCases(
        gate, repository, EventRules.from_settings(settings), invalidations,
    )
    return EventActions(use_cases)


def get_auth_actions(
    gate: AuthorizationGate = Depends(get_gate),
    provider: IdentityProvider = Depends(get_identity_provider),
    settings: Settings = Depends(get_settings),
) -> AuthActions:
    return AuthActions(
        provider, gate, settings.site_url,
        min_password_length=settings.min_password_length,
    )
