"""
CRUD для помещений: /unit-manage.
"""
from housing_api.routers.resource import ResourceController
from housing_api.schemas.unit_manage import CreateUnitManageDto, UnitManage, UpdateUnitManageDto


class UnitManageController(ResourceController):
    prefix = "/unit-manage"
    tags = ("unit-manage",)
    create_dto = CreateUnitManageDto
    update_dto = UpdateUnitManageDto
    record_model = UnitManage
