"""JWT token domain service."""

import logfire

from newsfeed.config import AuthSettings
from newsfeed.domain.value import UserId, Viewer
from newsfeed.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

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
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_viewer_from_token(self, token: str | None) -> Viewer | None:
        """Resolve the caller from a JWT token without raising exceptions.

        For routes that serve anonymous callers too: a missing or invalid
        token simply means nobody is signed in.

        Args:
            token: JWT token string (optional)

        Returns:
            The viewer if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None

        return Viewer(
            user_id=UserId(payload.user_id),
            role=payload.role,
            verified=payload.verified,
            handle=payload.handle,
        )
