"""
CRUD для профилей жителей: /user-manage.
"""
from housing_api.routers.resource import ResourceController
from housing_api.schemas.user_manage import CreateUserManageDto, UpdateUserManageDto, UserManage


class UserManageController(ResourceController):
    prefix = "/user-manage"
    tags = ("user-manage",)
    create_dto = CreateUserManageDto
    update_dto = UpdateUserManageDto
    record_model = UserManage
