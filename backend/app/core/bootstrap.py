# app/core/bootstrap.py
"""
Bootstrap module for application initialization.
Probes the store once at startup so operators see connectivity in the log.
"""
import logging

from app.services import user_store
from app.services.user_store import STORE_ERRORS

logger = logging.getLogger("uvicorn.error")

async def check_database() -> bool:
    """
    Run the liveness query once and log the outcome.

    A failure is only logged: the service still starts, and /api/health
    keeps reporting the store as disconnected until it becomes reachable.
    """
    try:
        await user_store.ping()
    except STORE_ERRORS as exc:
        logger.error("[bootstrap] database connection error: %s", exc)
        return False
    logger.info("[bootstrap] connected to database")
    return True
