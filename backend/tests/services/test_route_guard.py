"""Route Guard — page redirects driven by the caller's session.

Tests cover:
    - Anonymous on protected pages -> 307 /auth/login
    - Signed in on login/signup -> 307 /dashboard
    - API paths and public pages are never redirected
"""

import pytest

from tests.services.fake_identity_provider import ALICE_TOKEN


@pytest.mark.parametrize("path", ["/dashboard", "/events/new", "/events/abc/edit"])
async def test_anonymous_redirected_to_login(client, path):
    resp = await client.get(path)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/auth/login"


async def test_stale_cookie_redirected_to_login(client):
    resp = await client.get("/dashboard", headers={"Cookie": "sb-access-token=expired"})
    assert resp.status_code == 307
    assert resp.headers["location"] == "/auth/login"


@pytest.mark.parametrize("path", ["/auth/login", "/auth/signup"])
async def test_signed_in_redirected_to_dashboard(client, path):
    resp = await client.get(path, headers={"Cookie": f"sb-access-token={ALICE_TOKEN}"})
    assert resp.status_code == 307
    assert resp.headers["location"] == "/dashboard"


async def test_signed_in_passes_through_protected_page(client, alice_headers):
    resp = await client.get("/dashboard", headers=alice_headers)
    assert resp.status_code != 307


async def test_anonymous_passes_through_login_page(client):
    resp = await client.get("/auth/login")
    assert resp.status_code != 307


async def test_api_never_redirected(client):
    resp = await client.get("/api/v1/events")
    assert resp.status_code == 401
    assert resp.json()["code"] == "AUTH_ERROR"
