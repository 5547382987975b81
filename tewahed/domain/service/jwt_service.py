"""JWT token domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from tewahed.config import AuthSettings
from tewahed.domain.model import Viewer
from tewahed.domain.value import UserId
from tewahed.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, is_admin: bool = False) -> str:
        """Create JWT token for user.

        Tokens are normally issued by the sign-in service; this is used by
        tooling and tests that share the signing secret.

        Args:
            user_id: User ID
            is_admin: Whether the user moderates comments

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, is_admin, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, is_admin=is_admin)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except (JWTError, PydanticValidationError) as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise JWTError(str(e)) from e

            logfire.info("JWT token verified", user_id=payload.user_id)
            return payload

    def get_viewer_from_token(self, token: str | None) -> Viewer | None:
        """Resolve the requesting identity without raising.

        Routes that serve both anonymous and signed-in readers use this;
        an invalid or expired token counts as anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            Viewer if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        return Viewer(user_id=UserId(payload.user_id), is_admin=payload.is_admin)
