"""Supabase Auth Client — GoTrue REST calls driven through httpx.MockTransport.

Tests cover:
    - get_user: 200 -> Identity; 401, network failure, bad id, unreadable body -> None
    - sign-in returns tokens; provider rejections carry the provider message
    - sign-up passes the confirmation redirect; sign-out sends the bearer token
    - OAuth URL only for supported providers
"""

import json
from uuid import UUID

import httpx
import pytest

from sports_events.core.errors import AuthenticationError
from sports_events.infrastructure.supabase_auth import SupabaseAuthClient

USER_ID = "11111111-1111-1111-1111-111111111111"


def _client(handler) -> SupabaseAuthClient:
    return SupabaseAuthClient(
        "http://auth.test/", "anon-key", transport=httpx.MockTransport(handler),
    )


async def test_get_user_returns_identity():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["apikey"] = request.headers["apikey"]
        return httpx.Response(200, json={
            "id": USER_ID, "email": "alice@example.com",
            "created_at": "2025-01-01T00:00:00Z",
        })

    identity = await _client(handler).get_user("tok")
    assert identity.id == UUID(USER_ID)
    assert identity.email == "alice@example.com"
    assert identity.created_at.year == 2025
    assert seen == {"path": "/auth/v1/user", "auth": "Bearer tok", "apikey": "anon-key"}


@pytest.mark.parametrize("response", [
    httpx.Response(401, json={"msg": "JWT expired"}),
    httpx.Response(500, text="oops"),
    httpx.Response(200, json={"id": "not-a-uuid"}),
    httpx.Response(200, json={"email": "no-id@example.com"}),
])
async def test_get_user_failures_mean_anonymous(response):
    assert await _client(lambda request: response).get_user("tok") is None


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>oops</html>"),
    httpx.Response(200, json=["not", "an", "object"]),
    httpx.Response(200, json=None),
])
async def test_get_user_unreadable_body_means_anonymous(response):
    assert await _client(lambda request: response).get_user("tok") is None


async def test_get_user_network_failure_means_anonymous():
    def handler(request):
        raise httpx.ConnectError("refused")
    assert await _client(handler).get_user("tok") is None


async def test_get_user_without_token_makes_no_request():
    def handler(request):
        raise AssertionError("no request expected")
    assert await _client(handler).get_user("") is None


async def test_sign_in_returns_tokens():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/token"
        assert request.url.params["grant_type"] == "password"
        assert json.loads(request.content) == {
            "email": "alice@example.com", "password": "secret1",
        }
        return httpx.Response(200, json={
            "access_token": "a", "refresh_token": "r", "expires_in": 3600,
        })

    session = await _client(handler).sign_in_with_password("alice@example.com", "secret1")
    assert (session.access_token, session.refresh_token, session.expires_in) == ("a", "r", 3600)


@pytest.mark.parametrize("body,message", [
    ({"error": "invalid_grant", "error_description": "Invalid login credentials"},
     "Invalid login credentials"),
    ({"msg": "Email not confirmed"}, "Email not confirmed"),
    ({}, "Auth provider returned 400"),
])
async def test_sign_in_rejection_carries_provider_message(body, message):
    client = _client(lambda request: httpx.Response(400, json=body))
    with pytest.raises(AuthenticationError) as exc_info:
        await client.sign_in_with_password("alice@example.com", "wrong")
    assert exc_info.value.message == message


async def test_sign_in_provider_unreachable():
    def handler(request):
        raise httpx.ConnectTimeout("timeout")
    with pytest.raises(AuthenticationError) as exc_info:
        await _client(handler).sign_in_with_password("alice@example.com", "pw")
    assert exc_info.value.message == "Authentication service unavailable"


async def test_sign_up_sends_redirect():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["redirect_to"] = request.url.params["redirect_to"]
        return httpx.Response(200, json={"id": USER_ID})

    await _client(handler).sign_up("a@example.com", "secret1", "http://site/auth/callback")
    assert seen == {"path": "/auth/v1/signup", "redirect_to": "http://site/auth/callback"}


async def test_sign_up_rejection():
    client = _client(lambda request: httpx.Response(422, json={"msg": "User already registered"}))
    with pytest.raises(AuthenticationError) as exc_info:
        await client.sign_up("a@example.com", "secret1", "http://site/auth/callback")
    assert exc_info.value.message == "User already registered"


async def test_sign_out_sends_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(204)

    await _client(handler).sign_out("tok")
    assert seen == {"path": "/auth/v1/logout", "auth": "Bearer tok"}


def test_oauth_url_for_google():
    client = _client(lambda request: httpx.Response(200))
    url = client.oauth_authorize_url("google", "http://site/auth/callback")
    assert url.startswith("http://auth.test/auth/v1/authorize?")
    assert "provider=google" in url
    assert "redirect_to=http%3A%2F%2Fsite%2Fauth%2Fcallback" in url


def test_oauth_url_rejects_unsupported_provider():
    client = _client(lambda request: httpx.Response(200))
    with pytest.raises(AuthenticationError):
        client.oauth_authorize_url("myspace", "http://site/auth/callback")


async def test_sign_in_without_session_body_is_auth_error():
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(AuthenticationError) as exc_info:
        await client.sign_in_with_password("alice@example.com", "secret1")
    assert exc_info.value.message == "Auth provider did not return a session"
