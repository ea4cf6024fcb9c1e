"""
Структура ответов API: единый формат для успеха и ошибок.

Успех: { "success": true, "data": <payload> }
Ошибка: { "success": false, "error": "<code>", "message": "<text>" }

data может быть null: например, GET /unit-manage/{id} для несуществующего id.
"""
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Успешный ответ: success=true, data — то, что вернул сервис."""

    success: bool = True
    data: T | None = Field(default=None, description="Тело ответа")


class ErrorResponse(BaseModel):
    """Ответ с ошибкой: success=false, error и message."""

    success: bool = False
    error: str = Field(..., description="Код ошибки (например, validation_error)")
    message: str = Field(..., description="Человекочитаемое сообщение")

    @classmethod
    def from_detail(cls, detail: Any, default_error: str = "request_failed") -> "ErrorResponse":
        """detail из HTTPException → ErrorResponse. dict с error/message берётся как есть."""
        if isinstance(detail, dict) and "error" in detail and "message" in detail:
            return cls(error=detail["error"], message=detail["message"])
        return cls(error=default_error, message=str(detail) if detail else "Request failed")
