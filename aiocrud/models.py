"""
Модели данных aiocrud: ответ HTTP-клиента и конфигурация колбэков.
"""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError


T = TypeVar("T")

ConfigT = TypeVar("ConfigT", bound="RequestConfig")


class Response(BaseModel, Generic[T]):
    """
    Успешный ответ HTTP-клиента.

    Attributes:
        data: Декодированное тело ответа (True для 204, None для пустого тела)
        status: HTTP-статус
        headers: Заголовки ответа
        url: Итоговый URL запроса
        method: HTTP-метод запроса
    """

    data: Optional[T] = None
    status: int = 200
    headers: Dict[str, str] = Field(default_factory=dict)
    url: str = ""
    method: str = "GET"


class RequestConfig(BaseModel):
    """
    Конфигурация колбэков одного запроса или экземпляра ResourceClient.

    Attributes:
        on_fail: Вызывается с исключением, если запрос не удался (ключ "onFail" тоже принимается)
        on_finally: Вызывается после обработки успеха или ошибки (ключ "finally" тоже принимается)
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    on_fail: Optional[Callable[[Exception], Any]] = Field(None, alias="onFail")
    on_finally: Optional[Callable[[], Any]] = Field(None, alias="finally")

    @classmethod
    def coerce(cls: type[ConfigT], value: Union["RequestConfig", Dict[str, Any], None]) -> ConfigT:
        """
        Приводит необязательный аргумент конфигурации к экземпляру модели.

        Отсутствующая конфигурация эквивалентна конфигурации без полей.

        Args:
            value: Экземпляр модели, словарь или None

        Returns:
            Экземпляр cls

        Raises:
            ConfigurationError: Если значение не удалось привести к модели
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, RequestConfig):
            return cls(on_fail=value.on_fail, on_finally=value.on_finally)
        if isinstance(value, dict):
            try:
                return cls.model_validate(value)
            except ValidationError as e:
                raise ConfigurationError(f"Некорректная конфигурация запроса: {e!s}", details=e.errors()) from e
        raise ConfigurationError(f"Ожидалась конфигурация {cls.__name__}, dict или None, получено: {type(value)}")


class ModelRequestConfig(RequestConfig):
    """
    Конфигурация запросов, отправляющих модель (create/update).

    Attributes:
        cb_with_model: Передавать в колбэк успеха отправленную модель вместо ответа сервера
            (ключ "cbWithModel" тоже принимается)
    """

    cb_with_model: bool = Field(False, alias="cbWithModel")
