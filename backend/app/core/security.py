# app/core/security.py
"""
Security module for authentication.
Handles password hashing (bcrypt) and issuing/validating the signed bearer token.
"""
import datetime as dt
import jwt  # PyJWT
from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

from app.config import settings

# Password hashing context
# bcrypt with a fixed cost factor (10 by default, BCRYPT_ROUNDS to override)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# JWT configuration
JWT_SECRET = settings.jwt_secret  # Secret key for JWT signing (use strong secret in production)
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes  # 24h by default
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str | None) -> bool:
    """
    Verify a plain text password against a stored hash.

    Returns False instead of raising when the stored hash is missing or is
    not a recognisable bcrypt hash.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False

async def hash_password_async(plain: str) -> str:
    # bcrypt is CPU bound; keep it off the event loop
    return await run_in_threadpool(hash_password, plain)

async def verify_password_async(plain: str, hashed: str | None) -> bool:
    return await run_in_threadpool(verify_password, plain, hashed)

def create_access_token(subject: str, email: str, user_id: str) -> str:
    """
    Create a signed, expiring access token.

    Args:
        subject: Row id of the user (string)
        email: User email
        user_id: External user identifier

    Token payload includes:
        - sub: Subject (row id)
        - email, user_id: identity claims
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": subject,
        "email": email,
        "user_id": user_id,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Decode and validate an access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid, malformed or lacks sub/exp
    """
    return jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALG],
        options={"require": ["sub", "exp"]},
    )
