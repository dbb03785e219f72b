# app/api/routers/users.py
import logging

from fastapi import APIRouter

from app.core.errors import InternalError, NotFoundError
from app.schemas.user import PublicUser, dump_user
from app.services import user_store
from app.services.user_store import STORE_ERRORS

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/{user_id}")
async def get_user(user_id: str):
    """
    Look up a user by external ``user_id``.

    Returns:
        dict: success and the public projection of the user (no password hash)

    Raises:
        NotFoundError (404): No user with that identifier
    """
    try:
        user = await user_store.get_by_user_id(user_id)
    except STORE_ERRORS:
        logger.exception("[users] lookup failed for %s", user_id)
        raise InternalError("Server error")

    if not user:
        raise NotFoundError("User not found")
    return {"success": True, "user": dump_user(PublicUser, user)}

@router.get("/by-id/{id}")
async def get_user_by_id(id: int):
    """
    Look up a user by numeric row ``id``.

    Separate from the ``user_id`` lookup so the two identifier spaces are
    never matched against each other.
    """
    try:
        user = await user_store.get_by_id(id)
    except STORE_ERRORS:
        logger.exception("[users] lookup failed for id=%s", id)
        raise InternalError("Server error")

    if not user:
        raise NotFoundError("User not found")
    return {"success": True, "user": dump_user(PublicUser, user)}
