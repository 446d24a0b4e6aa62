"""Caller identity for API routes."""

from fastapi import HTTPException, status

from newsfeed.domain.service import JWTService
from newsfeed.domain.value import Viewer


def require_viewer(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> Viewer:
    """Resolve the signed-in caller or refuse the request.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller tried to do, for the error message

    Raises:
        HTTPException: 401 if there is no valid token
    """
    viewer = jwt_service.get_viewer_from_token(auth_token)
    if viewer is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return viewer
