# app/api/routers/auth.py
import logging

from fastapi import APIRouter, Body, Depends, Request
from passlib.exc import PasswordValueError

from app.api.deps import get_token_claims
from app.core.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.core.security import create_access_token, hash_password_async, verify_password_async
from app.schemas.auth import LoginRequest, RegisterRequest, UpdateProfileRequest
from app.schemas.user import RegisteredUser, SessionUser, UpdatedUser, dump_user
from app.services import user_store
from app.services.user_store import STORE_ERRORS, InvalidUserError, UserExistsError

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/auth", tags=["auth"])

NAME_MAX_LENGTH = 100

@router.post("/login")
async def login(payload: LoginRequest | None = Body(default=None)):
    """
    Authenticate a user by email and password.

    Guards run in order and the first failing one answers:
        - 400: email or password missing
        - 401: no account for the email ("Invalid email or password")
        - 401: account has no password hash ("Account not properly set up")
        - 401: password does not match ("Invalid email or password")

    Returns:
        dict: success, token (signed, 24h), user (no password hash), message
    """
    payload = payload or LoginRequest()
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required")

    logger.info("[auth] login attempt for %s", payload.email)
    try:
        user = await user_store.get_by_email(payload.email)
    except STORE_ERRORS:
        logger.exception("[auth] login lookup failed for %s", payload.email)
        raise InternalError("Server error during authentication")

    if not user:
        logger.info("[auth] user not found: %s", payload.email)
        raise AuthenticationError("Invalid email or password")

    if not user.password_hash:
        logger.warning("[auth] no password hash for user: %s", payload.email)
        raise AuthenticationError("Account not properly set up")

    if not await verify_password_async(payload.password, user.password_hash):
        logger.info("[auth] invalid password for: %s", payload.email)
        raise AuthenticationError("Invalid email or password")

    token = create_access_token(str(user.id), user.email, user.user_id)
    logger.info("[auth] login successful for: %s", payload.email)
    return {
        "success": True,
        "token": token,
        "user": dump_user(SessionUser, user),
        "message": "Login successful",
    }

@router.post("/register")
async def register(body: RegisterRequest | None = Body(default=None)):
    """
    Register a new account.

    The password is hashed with bcrypt before the insert. Duplicate email or
    user_id is detected by the insert itself (unique constraints) and
    answered with 409.
    """
    body = body or RegisterRequest()
    if not body.email or not body.password or not body.name:
        raise ValidationError("Email, password, and name are required")

    try:
        password_hash = await hash_password_async(body.password)
    except PasswordValueError:
        raise ValidationError("Invalid password")

    try:
        user = await user_store.create_user(
            email=body.email,
            name=body.name,
            password_hash=password_hash,
            user_id=body.user_id or None,
        )
    except UserExistsError:
        raise ConflictError("User already exists")
    except InvalidUserError as exc:
        logger.info("[auth] registration rejected for %s: %s", body.email, exc)
        raise ValidationError("Email, name or user ID is too long")
    except STORE_ERRORS:
        logger.exception("[auth] registration failed for %s", body.email)
        raise InternalError("Registration failed")

    logger.info("[auth] registered user_id=%s email=%s", user.user_id, user.email)
    return {
        "success": True,
        "message": "Registration successful",
        "user": dump_user(RegisteredUser, user),
    }

@router.api_route("/update-profile", methods=["POST", "PUT"])
async def update_profile(
    request: Request,
    body: UpdateProfileRequest,
    claims: dict = Depends(get_token_claims),
):
    """
    Update the display name and/or profile picture of the token's owner.

    Accepts both POST and PUT. Omitted fields are left unchanged, except that
    PUT always carries a name. A supplied name must be non-blank and at most
    100 characters. The ``userId`` in the body must match the ``user_id``
    claim of the bearer token.
    """
    if not body.userId:
        raise ValidationError("User ID is required")

    name = body.name
    if name is None and request.method == "PUT":
        raise ValidationError("Name is required")
    if name is not None:
        name = name.strip()
        if not name:
            raise ValidationError("Name is required")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(f"Name must be {NAME_MAX_LENGTH} characters or less")

    if claims.get("user_id") != body.userId:
        logger.warning("[auth] token for %s tried to update %s", claims.get("user_id"), body.userId)
        raise PermissionDeniedError("Not allowed to update this user")

    try:
        user = await user_store.update_profile(
            body.userId,
            name=name,
            profile_picture=body.profile_picture,
        )
    except STORE_ERRORS:
        logger.exception("[auth] profile update failed for %s", body.userId)
        raise InternalError("Update failed")

    if not user:
        raise NotFoundError("User not found")

    return {
        "success": True,
        "message": "Profile updated successfully",
        "user": dump_user(UpdatedUser, user),
    }
