"""
Точка входа FastAPI.

create_app собирает приложение: сервисы передаются явно (по умолчанию
Mongo-сервисы), из них строятся контроллеры и их роутеры.
lifespan: подключение/отключение MongoDB при старте/остановке.
CORS, перехватчик ответов, exception handlers (структурированные ответы).
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from housing_api.core.config import settings
from housing_api.core.database import close_mongo_connection, connect_to_mongo
from housing_api.middleware.exception_massage import ExceptionMassageInterceptor
from housing_api.routers import health
from housing_api.routers.resource import ResourceService
from housing_api.routers.unit_manage import UnitManageController
from housing_api.routers.user_manage import UserManageController
from housing_api.schemas.common import ErrorResponse, SuccessResponse
from housing_api.services.unit_manage import UnitManageService
from housing_api.services.user_manage import UserManageService

# Логирование
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл: при старте — подключение к Mongo, при остановке — отключение."""
    logger.info("Starting up: connecting to MongoDB...")
    connect_to_mongo()
    yield
    logger.info("Shutting down: closing MongoDB...")
    close_mongo_connection()


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    body = ErrorResponse(error="internal_server_error", message="An unexpected error occurred")
    return JSONResponse(status_code=500, content=body.model_dump())


# starlette HTTPException: покрывает и fastapi.HTTPException, и 404/405 роутера
async def http_exception_handler(request: Request, exc: HTTPException):
    body = ErrorResponse.from_detail(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = "; ".join(f"{e.get('loc', [])}: {e.get('msg', '')}" for e in errors[:3])
    body = ErrorResponse(error="validation_error", message=msg or "Validation failed")
    return JSONResponse(status_code=422, content=body.model_dump())


def root():
    return SuccessResponse(
        data={"message": "Housing Management API", "docs": "/docs", "health": "/health"}
    )


def create_app(
    unit_service: ResourceService | None = None,
    user_service: ResourceService | None = None,
) -> FastAPI:
    """Собрать приложение. Сервисы можно подменить (тесты, другое хранилище)."""
    app = FastAPI(
        title="Housing Management API",
        description="Помещения (unit-manage) и профили жителей (user-manage). "
        "Структурированные ответы: success, data / error, message.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Перехватчик добавляется последним — оборачивает всё остальное
    app.add_middleware(ExceptionMassageInterceptor)

    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_api_route("/", root, methods=["GET"], response_model=SuccessResponse[dict])

    # Роутеры
    app.include_router(health.router)
    app.include_router(UnitManageController(unit_service or UnitManageService()).router())
    app.include_router(UserManageController(user_service or UserManageService()).router())
    return app


app = create_app()
