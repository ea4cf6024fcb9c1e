"""Сервис профилей жителей: коллекция citizens, счётчик citizens."""
from housing_api.core.database import get_citizens_collection, get_counters_collection
from housing_api.schemas.user_manage import UserManage
from housing_api.services.mongo_resource import MongoResourceService


class UserManageService(MongoResourceService[UserManage]):
    def __init__(self, collection=get_citizens_collection, counters=get_counters_collection):
        super().__init__(collection, counters, "citizens", UserManage)
