"""Route Guard — redirects page requests based on whether the caller is signed in.

Invariants:
    - Only guarded page paths pay for an identity lookup; /api/* is never touched
    - Anonymous on /dashboard or /events/* -> 307 to /auth/login
    - Signed in on /auth/login or /auth/signup -> 307 to /dashboard
    - Missing identity provider means anonymous, never a crash

Design Decisions:
    - HTTP middleware over a per-route dependency: page routes are served by the
      static SPA mount, which has no dependencies to hang a check on
"""

import logging

from fastapi import Request, status
from fastapi.responses import RedirectResponse

from sports_events.api.dependencies import extract_access_token
from sports_events.config import get_settings
from sports_events.core.routes import is_guarded, resolve_redirect
from sports_events.services.auth_gate import IdentityResolver

logger = logging.getLogger(__name__)


async def route_guard(request: Request, call_next):
    path = request.url.path
    if not is_guarded(path):
        return await call_next(request)

    provider = getattr(request.app.state, "identity_provider", None)
    token = extract_access_token(request, get_settings().session_cookie_name)
    identity = None
    if provider is not None and token:
        identity = await IdentityResolver(provider, token).resolve()

    target = resolve_redirect(path, authenticated=identity is not None)
    if target is not None:
        logger.debug(f"Route guard redirect {path} -> {target}", extra={"path": path})
        return RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    return await call_next(request)
