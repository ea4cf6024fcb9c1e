"""
Конфигурация приложения из переменных окружения.

Один класс Settings (pydantic-settings), все настройки читаются из .env.
В коде используем только settings.*, не os.getenv.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки из env."""

    # MongoDB: URI из .env, по умолчанию локальный сервер
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "housing"

    # CORS: список origin через запятую в .env
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Логирование
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_list(self) -> list[str]:
        """CORS origins как список для CORSMiddleware."""
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]


# Глобальный экземпляр: from housing_api.core.config import settings
settings = Settings()
