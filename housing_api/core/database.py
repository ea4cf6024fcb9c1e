"""
Подключение к MongoDB.

Один клиент на приложение, подключение при старте (lifespan в main),
получение БД/коллекции через функции. URI только из config (.env).
Числовые id выдаются из коллекции counters (по одному счётчику на сущность).
"""
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from housing_api.core.config import settings

# Клиент создаётся при старте приложения (main.py lifespan), здесь только ссылка
_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Вернуть клиент MongoDB. Вызывать после connect_to_mongo()."""
    if _client is None:
        raise RuntimeError("MongoDB not connected. Call connect_to_mongo() first.")
    return _client


def get_db() -> Database:
    return get_client()[settings.MONGO_DB_NAME]


def get_units_collection() -> Collection:
    """Коллекция units (жилые помещения)."""
    return get_db()["units"]


def get_citizens_collection() -> Collection:
    """Коллекция citizens (профили жителей)."""
    return get_db()["citizens"]


def get_counters_collection() -> Collection:
    return get_db()["counters"]


def next_sequence(counters: Collection, name: str) -> int:
    """Следующее значение счётчика name. Атомарно: $inc + upsert."""
    doc = counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return doc["seq"]


def connect_to_mongo() -> None:
    """Подключиться к MongoDB. Вызывается в lifespan при старте."""
    global _client  # noqa: PLW0603
    # tz_aware: даты из Mongo с UTC, как и при создании записи
    _client = MongoClient(settings.MONGO_URI, tz_aware=True)
    # Проверка доступности
    _client.admin.command("ping")


def close_mongo_connection() -> None:
    """Закрыть соединение. Вызывается в lifespan при остановке."""
    global _client
    if _client:
        _client.close()
        _client = None
