"""Auth Routes — sign-in/up/out, OAuth redirect URL and current identity.

Invariants:
    - Successful sign-in sets the session cookie (httponly, samesite=lax)
    - Sign-out always clears the cookie, even if the provider call failed
    - /me answers Success(null) for anonymous callers
"""

from fastapi import APIRouter, Depends

from sports_events.api.dependencies import get_auth_actions
from sports_events.api.responses import envelope_response
from sports_events.config import Settings, get_settings
from sports_events.core.action_result import Success
from sports_events.schemas.auth import IdentityResponse, SignInRequest, SignUpRequest
from sports_events.services.auth_actions import AuthActions

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/sign-in")
async def sign_in(
    body: SignInRequest,
    actions: AuthActions = Depends(get_auth_actions),
    settings: Settings = Depends(get_settings),
):
    result = await actions.sign_in(body.email, body.password)
    response = envelope_response(
        result,
        render=lambda s: {
            "access_token": s.access_token,
            "refresh_token": s.refresh_token,
            "expires_in": s.expires_in,
        },
    )
    if isinstance(result, Success):
        response.set_cookie(
            settings.session_cookie_name,
            result.data.access_token,
            max_age=result.data.expires_in,
            httponly=True,
            samesite="lax",
            secure=settings.site_url.startswith("https://"),
        )
    return response


@router.post("/sign-up")
async def sign_up(
    body: SignUpRequest, actions: AuthActions = Depends(get_auth_actions),
):
    result = await actions.sign_up(body.email, body.password, body.confirm_password)
    return envelope_response(result)


@router.post("/sign-out")
async def sign_out(
    actions: AuthActions = Depends(get_auth_actions),
    settings: Settings = Depends(get_settings),
):
    response = envelope_response(await actions.sign_out())
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/oauth/{provider}")
async def oauth_url(
    provider: str, actions: AuthActions = Depends(get_auth_actions),
):
    result = await actions.oauth_url(provider)
    return envelope_response(result, render=lambda url: {"url": url})


@router.get("/me")
async def current_user(actions: AuthActions = Depends(get_auth_actions)):
    result = await actions.current_user()
    return envelope_response(result, render=IdentityResponse.from_identity)
