"""
Модуль с пользовательскими исключениями aiocrud.
"""

from typing import Any, Optional


class AioCrudError(Exception):
    """
    Базовый класс для всех исключений aiocrud.
    """

    def __init__(self, message: str, details: Any = None):
        """
        Инициализирует исключение.

        Args:
            message: Сообщение об ошибке
            details: Дополнительные детали ошибки
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(AioCrudError):
    """
    Исключение для некорректной конфигурации запроса или клиента.
    """

    pass


class RequestFailure(AioCrudError):
    """
    Запрос к API не выполнен.

    Единственный вид ошибки, который различает ресурсный слой: причина
    (сетевая ошибка, статус не 2xx, ошибка декодирования) хранится в атрибутах.

    Attributes:
        cause: Исходное исключение транспорта, если есть
        response: Ответ сервера, если он был получен
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        response: Any = None,
        details: Any = None,
    ):
        self.cause = cause
        self.response = response
        super().__init__(message, details)


class HttpStatusError(RequestFailure):
    """Сервер вернул статус ошибки (>= 400)."""

    def __init__(self, status_code: int, message: str, *, response: Any = None, details: Any = None):
        self.status_code = status_code
        super().__init__(f"Ошибка HTTP [{status_code}]: {message}", response=response, details=details)


class TransportError(RequestFailure):
    """Ошибка соединения или транспорта."""

    pass


class RequestTimeoutError(RequestFailure):
    """Таймаут запроса."""

    pass


class ResponseDecodeError(RequestFailure):
    """Тело успешного ответа не удалось декодировать как JSON."""

    pass
