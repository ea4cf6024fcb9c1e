"""
Схемы для ресурса unit-manage (жилые помещения).

Create — тело POST, Update — тело PATCH (все поля необязательны),
UnitManage — запись в ответах API (с числовым id).
"""
from datetime import datetime

from pydantic import BaseModel, Field


class CreateUnitManageDto(BaseModel):
    """Создание помещения."""

    code: str = Field(min_length=1, max_length=50, description="Номер/код помещения, например A-1203")
    building: str | None = None
    floor: int | None = None
    area: float | None = Field(default=None, ge=0, description="Площадь, м²")
    status: str = "vacant"  # "vacant" | "occupied" | "reserved"
    description: str | None = None


class UpdateUnitManageDto(BaseModel):
    """Обновление помещения (частичное)."""

    code: str | None = Field(default=None, min_length=1, max_length=50)
    building: str | None = None
    floor: int | None = None
    area: float | None = Field(default=None, ge=0)
    status: str | None = None
    description: str | None = None


class UnitManage(CreateUnitManageDto):
    """Помещение в ответах API."""

    id: int
    created_at: datetime
    updated_at: datetime
