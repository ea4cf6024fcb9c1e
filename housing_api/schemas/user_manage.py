"""
Схемы для ресурса user-manage (профили жителей).
"""
from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field


class CreateUserManageDto(BaseModel):
    """Создание профиля жителя."""

    full_name: str = Field(min_length=1, max_length=255)
    phone: str | None = None
    email: EmailStr | None = None
    identity_number: str | None = None
    date_of_birth: date | None = None
    unit_id: int | None = Field(default=None, description="id помещения из unit-manage")


class UpdateUserManageDto(BaseModel):
    """Обновление профиля (частичное)."""

    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = None
    email: EmailStr | None = None
    identity_number: str | None = None
    date_of_birth: date | None = None
    unit_id: int | None = None


class UserManage(CreateUserManageDto):
    """Профиль жителя в ответах API."""

    id: int
    created_at: datetime
    updated_at: datetime
