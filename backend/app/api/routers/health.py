# app/api/routers/health.py
import datetime as dt
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.config import settings
from app.services import user_store
from app.services.user_store import STORE_ERRORS

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "login": "POST /api/auth/login",
    "register": "POST /api/auth/register",
    "updateProfile": "POST|PUT /api/auth/update-profile",
    "user": "GET /api/users/{userId}",
    "userById": "GET /api/users/by-id/{id}",
}

@router.get("/health")
async def health():
    """Report liveness together with database reachability."""
    try:
        await user_store.ping()
    except STORE_ERRORS as exc:
        logger.warning("[health] database unreachable: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "database": "disconnected", "error": str(exc)},
        )
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(),
        "database": "connected",
        "endpoints": ENDPOINTS,
    }
