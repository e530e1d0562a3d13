"""Supabase Auth Client — thin async wrapper over the GoTrue REST API.

Invariants:
    - get_user() never raises for "no session": missing/expired token or any
      provider failure returns None (the gate decides what that means)
    - Every other call maps provider failures to AuthenticationError with the
      provider's own message
    - No retries and no implicit token refresh
    - One shared httpx.AsyncClient per process, closed on shutdown

Design Decisions:
    - httpx over the supabase SDK: five endpoints, async-native, and the same
      client the tests drive through httpx.MockTransport
    - Tokens never logged; only status codes and provider messages
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urlencode
from uuid import UUID

import httpx

from sports_events.core.domain_types import Identity, UserId
from sports_events.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

SUPPORTED_OAUTH_PROVIDERS = frozenset({"google"})


@dataclass(frozen=True)
class AuthSessionTokens:
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of a GoTrue error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Auth provider returned {response.status_code}"
    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Auth provider returned {response.status_code}"


def _parse_created_at(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class SupabaseAuthClient:
    """IdentityProvider implementation backed by Supabase GoTrue."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=f"{self.base_url}/auth/v1",
            headers={"apikey": anon_key},
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def get_user(self, access_token: str) -> Identity | None:
        """Current-session accessor. None means anonymous."""
        if not access_token:
            return None
        try:
            response = await self.client.get(
                "/user", headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.HTTPError as e:
            logger.warning(f"Auth provider unreachable during session read: {e}")
            return None
        if response.status_code != 200:
            if response.status_code not in (401, 403):
                logger.warning(
                    f"Auth provider session read failed: {response.status_code}",
                )
            return None
        try:
            body = response.json()
        except ValueError:
            logger.warning("Auth provider returned a non-JSON user body")
            return None
        if not isinstance(body, dict):
            logger.warning("Auth provider returned a malformed user body")
            return None
        try:
            user_id = UserId(UUID(str(body["id"])))
        except (KeyError, ValueError):
            logger.warning("Auth provider returned a user without a valid id")
            return None
        return Identity(
            id=user_id,
            email=body.get("email") or "",
            created_at=_parse_created_at(body.get("created_at")),
        )

    async def sign_in_with_password(
        self, email: str, password: str,
    ) -> AuthSessionTokens:
        response = await self._post(
            "/token", params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict) or not body.get("access_token"):
            raise AuthenticationError("Auth provider did not return a session")
        return AuthSessionTokens(
            access_token=body["access_token"],
            refresh_token=body.get("refresh_token"),
            expires_in=body.get("expires_in"),
        )

    async def sign_up(self, email: str, password: str, redirect_to: str) -> None:
        await self._post(
            "/signup", params={"redirect_to": redirect_to},
            json={"email": email, "password": password},
        )

    async def sign_out(self, access_token: str) -> None:
        await self._post(
            "/logout", headers={"Authorization": f"Bearer {access_token}"},
        )

    def oauth_authorize_url(self, provider: str, redirect_to: str) -> str:
        if provider not in SUPPORTED_OAUTH_PROVIDERS:
            raise AuthenticationError(f"Unsupported OAuth provider: {provider}")
        query = urlencode({"provider": provider, "redirect_to": redirect_to})
        return f"{self.base_url}/auth/v1/authorize?{query}"

    async def _post(self, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.post(path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Auth provider request to {path} failed: {e}")
            raise AuthenticationError("Authentication service unavailable")
        if response.is_error:
            message = _error_message(response)
            logger.info(
                f"Auth provider rejected {path}: {response.status_code} {message}",
            )
            raise AuthenticationError(message)
        return response
