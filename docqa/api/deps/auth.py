"""
Bearer token authentication.

FastAPI dependencies guarding the question-answering route.

Dependencies: fastapi, docqa.configs
System role: Request authentication and provider precondition checks
"""

import hmac
import logging

from fastapi import Depends, Header, HTTPException, status

from docqa.api.deps.dependencies import get_settings_dependency
from docqa.configs import Settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Token from an "Authorization: Bearer <token>" header, None when malformed."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


async def require_bearer_token(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings_dependency),
) -> None:
    """
    Reject requests without the configured bearer token.

    Raises:
        HTTPException: 401 when the header is missing or malformed,
            403 when the token does not match (or none is configured)
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning(f"{__name__}:require_bearer_token - Missing or malformed Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header is missing or malformed. Expected 'Bearer <token>'.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expected = settings.api.auth_token
    if not expected or not hmac.compare_digest(token.encode(), expected.encode()):
        logger.warning(f"{__name__}:require_bearer_token - Invalid token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid authentication token.",
        )


async def require_gemini_key(settings: Settings = Depends(get_settings_dependency)) -> None:
    """Fail the request before any work when no Gemini API key is configured."""
    if not settings.gemini.api_key:
        logger.error(f"{__name__}:require_gemini_key - Gemini API key is not set")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Google Gemini API key not configured",
        )
