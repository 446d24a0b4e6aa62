"""JWT token utilities.

The identity service issues tokens; this API only verifies them.
"""

from datetime import datetime
from typing import Optional

import jwt
from pydantic import BaseModel

from newsfeed.config import AuthSettings
from newsfeed.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: int
    role: UserRole = UserRole.USER
    verified: bool = False
    handle: Optional[str] = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
