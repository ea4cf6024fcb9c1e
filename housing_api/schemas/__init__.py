# schemas — Pydantic-модели для запроса/ответа API. Валидация и сериализация из коробки.
from housing_api.schemas.common import ErrorResponse, SuccessResponse
from housing_api.schemas.unit_manage import CreateUnitManageDto, UnitManage, UpdateUnitManageDto
from housing_api.schemas.user_manage import CreateUserManageDto, UpdateUserManageDto, UserManage

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "CreateUnitManageDto",
    "UpdateUnitManageDto",
    "UnitManage",
    "CreateUserManageDto",
    "UpdateUserManageDto",
    "UserManage",
]
