"""Route Map — logical page paths used for redirects and view invalidation.

Invariants:
    - Protected prefixes require an identity; auth prefixes require its absence
    - /api/* is never redirected (API callers get the envelope instead)
    - resolve_redirect() is pure: path + authenticated flag in, target or None out
"""

HOME = "/"
LOGIN = "/auth/login"
SIGNUP = "/auth/signup"
AUTH_CALLBACK = "/auth/callback"
DASHBOARD = "/dashboard"
NEW_EVENT = "/events/new"

PROTECTED_PREFIXES = (DASHBOARD, "/events")
AUTH_PREFIXES = (LOGIN, SIGNUP)
API_PREFIX = "/api/"


def event_edit_path(event_id) -> str:
    return f"/events/{event_id}/edit"


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def is_guarded(path: str) -> bool:
    """True if the route guard has an opinion about this path."""
    if path.startswith(API_PREFIX):
        return False
    return any(_matches(path, p) for p in PROTECTED_PREFIXES + AUTH_PREFIXES)


def resolve_redirect(path: str, authenticated: bool) -> str | None:
    """Where to send a page request, or None to let it through."""
    if path.startswith(API_PREFIX):
        return None
    if not authenticated and any(_matches(path, p) for p in PROTECTED_PREFIXES):
        return LOGIN
    if authenticated and any(_matches(path, p) for p in AUTH_PREFIXES):
        return DASHBOARD
    return None
