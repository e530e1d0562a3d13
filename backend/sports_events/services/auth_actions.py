"""Auth Actions — sign-in, sign-up, sign-out and OAuth entry points.

Invariants:
    - Every method returns an ActionResult; none raises
    - Credentials validated before the provider is called
    - Provider failures arrive as AuthenticationError carrying the provider's message
    - current_user() reports anonymous as Success(None), not as a failure

Design Decisions:
    - Email confirmation and OAuth both return to site_url + /auth/callback,
      the one place the presentation layer finishes a provider handshake
"""

import logging

from sports_events.core.action_result import ActionResult
from sports_events.core.domain_types import Identity
from sports_events.core.repository_protocols import AuthSession, IdentityProvider
from sports_events.core.routes import AUTH_CALLBACK
from sports_events.core.validate_credentials import validate_sign_in, validate_sign_up
from sports_events.services.action_boundary import execute_action
from sports_events.services.auth_gate import AuthorizationGate

logger = logging.getLogger(__name__)


class AuthActions:
    def __init__(
        self,
        provider: IdentityProvider,
        gate: AuthorizationGate,
        site_url: str,
        min_password_length: int = 6,
    ):
        self.provider = provider
        self.gate = gate
        self.callback_url = f"{site_url.rstrip('/')}{AUTH_CALLBACK}"
        self.min_password_length = min_password_length

    async def sign_in(self, email: str, password: str) -> ActionResult[AuthSession]:
        async def run():
            normalized, secret = validate_sign_in(email, password)
            session = await self.provider.sign_in_with_password(normalized, secret)
            logger.info("User signed in")
            return session
        return await execute_action(run, "sign_in")

    async def sign_up(
        self, email: str, password: str, confirm_password: str,
    ) -> ActionResult[None]:
        async def run():
            normalized, secret = validate_sign_up(
                email, password, confirm_password, self.min_password_length,
            )
            await self.provider.sign_up(normalized, secret, self.callback_url)
            logger.info("User signed up, confirmation pending")
        return await execute_action(run, "sign_up")

    async def sign_out(self) -> ActionResult[None]:
        async def run():
            token = self.gate.resolver.access_token
            if token:
                await self.provider.sign_out(token)
        return await execute_action(run, "sign_out")

    async def oauth_url(self, provider_name: str) -> ActionResult[str]:
        async def run():
            return self.provider.oauth_authorize_url(provider_name, self.callback_url)
        return await execute_action(run, "oauth_url")

    async def current_user(self) -> ActionResult[Identity | None]:
        return await execute_action(self.gate.current_identity, "current_user")
