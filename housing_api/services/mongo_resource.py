"""
Базовый сервис CRUD поверх коллекции MongoDB с числовыми id.

Сервис не знает про HTTP: принимает DTO и число, возвращает Pydantic-запись
или None, если документа нет. Коллекции берутся через функции-геттеры,
поэтому сервис можно создать до подключения к Mongo.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

from housing_api.core.database import next_sequence

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

CollectionGetter = Callable[[], Collection]


class MongoResourceService(Generic[RecordT]):
    """create / find_all / find_one / update / remove для одной коллекции."""

    def __init__(
        self,
        collection: CollectionGetter,
        counters: CollectionGetter,
        sequence_name: str,
        record_model: type[RecordT],
    ):
        self._collection = collection
        self._counters = counters
        self.sequence_name = sequence_name
        self.record_model = record_model

    def _to_record(self, doc: dict | None) -> RecordT | None:
        """Документ из Mongo → Pydantic. _id → id."""
        if doc is None:
            return None
        data = {k: v for k, v in doc.items() if k != "_id"}
        return self.record_model(id=doc["_id"], **data)

    def create(self, dto: BaseModel) -> RecordT:
        coll = self._collection()
        now = datetime.now(timezone.utc)
        # mode="json": date → строка, BSON не умеет datetime.date
        doc = dto.model_dump(mode="json")
        doc.update(
            _id=next_sequence(self._counters(), self.sequence_name),
            created_at=now,
            updated_at=now,
        )
        coll.insert_one(doc)
        logger.info("Created %s #%s", self.sequence_name, doc["_id"])
        return self._to_record(doc)

    def find_all(self) -> list[RecordT]:
        return [self._to_record(doc) for doc in self._collection().find().sort("_id", ASCENDING)]

    def find_one(self, id: int | float) -> RecordT | None:
        return self._to_record(self._collection().find_one({"_id": id}))

    def update(self, id: int | float, dto: BaseModel) -> RecordT | None:
        """Частичное обновление: только явно переданные поля."""
        fields = dto.model_dump(mode="json", exclude_unset=True)
        fields["updated_at"] = datetime.now(timezone.utc)
        doc = self._collection().find_one_and_update(
            {"_id": id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if doc is not None:
            logger.info("Updated %s #%s: %s", self.sequence_name, id, sorted(fields))
        return self._to_record(doc)

    def remove(self, id: int | float) -> RecordT | None:
        """Удалить и вернуть удалённую запись (None, если не было)."""
        doc = self._collection().find_one_and_delete({"_id": id})
        if doc is not None:
            logger.info("Removed %s #%s", self.sequence_name, id)
        return self._to_record(doc)
