"""
Health check: жив ли сервис, доступна ли БД.

Эндпоинт для оркестраторов (Docker, k8s) и мониторинга.
"""
import logging

from fastapi import APIRouter
from pymongo.errors import PyMongoError

from housing_api.core.database import get_client
from housing_api.schemas.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=SuccessResponse[dict])
def health():
    """Проверка живости сервиса и MongoDB."""
    try:
        get_client().admin.command("ping")
        mongo = "connected"
    except (RuntimeError, PyMongoError) as exc:
        logger.warning("MongoDB ping failed: %s", exc)
        mongo = "disconnected"
    return SuccessResponse(data={"status": "ok", "mongo": mongo})
