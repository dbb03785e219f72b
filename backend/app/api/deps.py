# app/api/deps.py
import logging

import jwt
from fastapi import Header

from app.core.errors import AuthenticationError
from app.core.security import decode_access_token

logger = logging.getLogger("uvicorn.error")

async def get_token_claims(authorization: str | None = Header(default=None)) -> dict:
    """
    FastAPI dependency returning the verified claims of the bearer token.

    The token is read from ``Authorization: Bearer <token>``; its signature
    and expiry are checked before any handler logic runs.

    Raises:
        AuthenticationError (401): No token was provided
        AuthenticationError (401): Token is malformed, badly signed or expired

    Usage:
        @router.put("/protected")
        async def protected_route(claims: dict = Depends(get_token_claims)):
            return {"user_id": claims["user_id"]}
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise AuthenticationError("Authentication token required")

    try:
        return decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        logger.info("[auth] rejected bearer token: %s", exc)
        raise AuthenticationError("Invalid or expired token")
