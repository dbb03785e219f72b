# app/services/user_store.py
"""
Credential store accessor.

Every function is a single awaited round trip through the shared Tortoise
pool. Nothing here retries; store failures propagate to the calling handler.
"""
import logging
import uuid

from tortoise import connections, timezone
from tortoise.exceptions import BaseORMException, IntegrityError
from tortoise.exceptions import ValidationError as FieldValidationError

from app.models.user import User

logger = logging.getLogger(__name__)

# Failures a handler treats as "store unavailable / unexpected fault"
STORE_ERRORS = (BaseORMException, OSError)


class UserExistsError(Exception):
    """Insert rejected by the unique email / user_id constraint."""


class InvalidUserError(ValueError):
    """Field value rejected by the model (e.g. longer than the column allows)."""


def generate_user_id() -> str:
    return f"user_{uuid.uuid4().hex[:16]}"


async def get_by_email(email: str) -> User | None:
    return await User.get_or_none(email=email)


async def get_by_user_id(user_id: str) -> User | None:
    return await User.get_or_none(user_id=user_id)


async def get_by_id(pk: int) -> User | None:
    return await User.get_or_none(id=pk)


async def create_user(
    email: str,
    name: str,
    password_hash: str,
    user_id: str | None = None,
) -> User:
    """
    Insert a new user.

    There is no separate existence check: the unique constraints on
    ``email`` and ``user_id`` reject duplicates atomically, which is
    reported as ``UserExistsError``.
    """
    try:
        return await User.create(
            user_id=user_id or generate_user_id(),
            email=email,
            name=name,
            password_hash=password_hash,
        )
    except IntegrityError as exc:
        logger.info("[store] duplicate user rejected email=%s user_id=%s", email, user_id)
        raise UserExistsError(email) from exc
    except FieldValidationError as exc:
        raise InvalidUserError(str(exc)) from exc


async def update_profile(
    user_id: str,
    name: str | None = None,
    profile_picture: str | None = None,
) -> User | None:
    """
    Partial update of the profile fields for ``user_id``.

    Omitted (None) fields are left unchanged; ``updated_at`` is always
    refreshed. Returns the updated row, or None when no row matched.
    """
    changes: dict = {"updated_at": timezone.now()}
    if name is not None:
        changes["name"] = name
    if profile_picture is not None:
        changes["profile_picture"] = profile_picture

    matched = await User.filter(user_id=user_id).update(**changes)
    if not matched:
        return None
    return await User.get_or_none(user_id=user_id)


async def ping() -> None:
    """Trivial liveness query against the default connection."""
    await connections.get("default").execute_query("SELECT 1")
