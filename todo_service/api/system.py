"""
System API

Greeting and health check endpoints.
"""

import logging

from fastapi import APIRouter

from todo_service.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/")
@router.get("/hello")
async def hello():
    """Greeting"""
    logger.info("Handling hello request")
    settings = get_settings()
    return {"message": f"Hello from {settings.APP_NAME}!"}


@router.get("/health")
async def health_check():
    """
    Health Check

    Used for service liveness checks.
    """
    settings = get_settings()
    return {"status": "ok", "version": settings.APP_VERSION}
