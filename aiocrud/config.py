"""
Конфигурационные параметры HTTP-клиента aiocrud.
"""

from pathlib import Path  # Для построения пути к .env в корне проекта
from typing import Dict

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AioCrudConfig(BaseSettings):
    """
    Настройки HTTP-клиента.
    Читаются из переменных окружения (префикс AIOCRUD_) или .env файла.

    Attributes:
        base_url: Базовый URL API, относительно которого строятся пути ресурсов
        timeout: Таймаут запроса в секундах
        verify_ssl: Проверять SSL сертификаты
        max_connections: Максимальное количество одновременных соединений
        headers: Заголовки, отправляемые с каждым запросом
    """

    base_url: AnyHttpUrl = Field("http://localhost:8000/")
    timeout: int = Field(30, ge=1, le=3600)  # От 1 секунды до 1 часа
    verify_ssl: bool = True
    max_connections: int = Field(100, ge=1)
    headers: Dict[str, str] = Field(default_factory=lambda: {"Accept": "application/json"})

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, value: AnyHttpUrl) -> AnyHttpUrl:
        """
        Дополняет путь base_url завершающим "/": aiohttp не принимает base_url с путем без него.
        """
        if value.query or value.fragment:
            raise ValueError("base_url не должен содержать query или fragment")
        if value.path and not value.path.endswith("/"):
            return type(value)(f"{value}/")
        return value

    model_config = SettingsConfigDict(
        env_prefix="AIOCRUD_",
        # Сначала ищем .env в текущей директории, затем в корне проекта
        env_file=(
            ".env",
            str(Path(__file__).parent.parent / ".env"),
        ),
        env_file_encoding="utf-8",
        extra="ignore",
    )
