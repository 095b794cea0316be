"""Health check endpoint."""
import logging
from fastapi import APIRouter

from app.core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    logger.debug("[HEALTH] Health check requested")
    return {"status": "healthy", "sheets_backend": settings.sheets_backend}
