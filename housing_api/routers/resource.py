"""
Шаблон CRUD-контроллера и таблица маршрутов.

Контроллер получает сервис в конструкторе и передаёт ему всё как есть:
тело запроса без изменений, id из пути через to_number (без проверки,
"abc" уходит в сервис как nan). Роутер собирается из явной таблицы
(method, path, handler), а не декораторами.

Для новой сущности: подкласс с prefix, tags, create_dto, update_dto, record_model.
"""
from typing import Any, Callable, NamedTuple, Protocol

from fastapi import APIRouter
from pydantic import BaseModel

from housing_api.core.identifiers import to_number
from housing_api.schemas.common import SuccessResponse


class ResourceService(Protocol):
    def create(self, dto: BaseModel) -> Any: ...

    def find_all(self) -> Any: ...

    def find_one(self, id: int | float) -> Any: ...

    def update(self, id: int | float, dto: BaseModel) -> Any: ...

    def remove(self, id: int | float) -> Any: ...


class Route(NamedTuple):
    method: str
    path: str
    handler: Callable[..., Any]
    response_model: Any
    status_code: int = 200


class ResourceController:
    """create / find_all / find_one / update / remove → одноимённые методы сервиса."""

    prefix: str = ""
    tags: tuple[str, ...] = ()
    create_dto: type[BaseModel] = BaseModel
    update_dto: type[BaseModel] = BaseModel
    record_model: type[BaseModel] = BaseModel

    def __init__(self, service: ResourceService):
        self.service = service

    def create(self, payload: BaseModel) -> Any:
        return self.service.create(payload)

    def find_all(self) -> Any:
        return self.service.find_all()

    def find_one(self, id: str) -> Any:
        return self.service.find_one(to_number(id))

    def update(self, id: str, payload: BaseModel) -> Any:
        return self.service.update(to_number(id), payload)

    def remove(self, id: str) -> Any:
        return self.service.remove(to_number(id))

    def routes(self) -> list[Route]:
        """Таблица маршрутов. Аннотации берутся из DTO подкласса, FastAPI валидирует тело по ним."""
        create_dto, update_dto = self.create_dto, self.update_dto
        one = SuccessResponse[self.record_model]
        many = SuccessResponse[list[self.record_model]]

        def create(payload: create_dto):
            return SuccessResponse(data=self.create(payload))

        def find_all():
            return SuccessResponse(data=self.find_all())

        def find_one(id: str):
            return SuccessResponse(data=self.find_one(id))

        def update(id: str, payload: update_dto):
            return SuccessResponse(data=self.update(id, payload))

        def remove(id: str):
            return SuccessResponse(data=self.remove(id))

        return [
            Route("POST", "", create, one, 201),
            Route("GET", "", find_all, many),
            Route("GET", "/{id}", find_one, one),
            Route("PATCH", "/{id}", update, one),
            Route("DELETE", "/{id}", remove, one),
        ]

    def router(self) -> APIRouter:
        router = APIRouter(prefix=self.prefix, tags=list(self.tags))
        for route in self.routes():
            router.add_api_route(
                route.path,
                route.handler,
                methods=[route.method],
                response_model=route.response_model,
                status_code=route.status_code,
                name=f"{self.prefix.strip('/')}:{route.handler.__name__}",
            )
        return router
