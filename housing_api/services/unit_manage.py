"""Сервис помещений: коллекция units, счётчик units."""
from housing_api.core.database import get_counters_collection, get_units_collection
from housing_api.schemas.unit_manage import UnitManage
from housing_api.services.mongo_resource import MongoResourceService


class UnitManageService(MongoResourceService[UnitManage]):
    def __init__(self, collection=get_units_collection, counters=get_counters_collection):
        super().__init__(collection, counters, "units", UnitManage)
