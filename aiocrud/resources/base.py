"""
Базовый ресурсный класс: CRUD-операции над одним REST-ресурсом.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Protocol, TypeVar, Union

from ..models import ModelRequestConfig, RequestConfig, Response
from ..utils import call_maybe_async


# Настройка логгера
logger = logging.getLogger("aiocrud.resources")

T = TypeVar("T")

ItemId = Union[int, str]
ConfigArg = Union[RequestConfig, Dict[str, Any], None]
ModelConfigArg = Union[ModelRequestConfig, RequestConfig, Dict[str, Any], None]

_NO_MODEL = object()


class HttpClientProtocol(Protocol):
    """
    Контракт HTTP-клиента, который оборачивает ResourceClient.

    Каждая операция выполняет один запрос и возвращает ответ либо выбрасывает исключение.
    """

    async def get(self, path: str) -> Any: ...

    async def post(self, path: str, body: Any) -> Any: ...

    async def put(self, path: str, body: Any) -> Any: ...

    async def delete(self, path: str) -> Any: ...


class ResourceClient(Generic[T]):
    """
    CRUD-фасад над одним REST-ресурсом.

    Ошибки запросов никогда не выбрасываются наружу: они передаются в on_fail
    конфигурации вызова, иначе в on_fail конфигурации по умолчанию, иначе
    отбрасываются. on_finally выбирается по тому же правилу и вызывается
    ровно один раз на каждый вызов.

    Attributes:
        default_config: Конфигурация колбэков уровня экземпляра
    """

    def __init__(
        self,
        http_client: HttpClientProtocol,
        base_path: str,
        default_config: ConfigArg = None,
    ):
        """
        Инициализирует ресурс.

        Args:
            http_client: Настроенный HTTP-клиент (не закрывается ресурсом)
            base_path: Путь ресурса, например "classes"
            default_config: Колбэки по умолчанию. Переданный объект копируется.
        """
        self._http_client = http_client
        self._base_path = str(base_path)
        self.default_config: RequestConfig = RequestConfig.coerce(default_config).model_copy()

    @property
    def http_client(self) -> HttpClientProtocol:
        return self._http_client

    @property
    def base_path(self) -> str:
        return self._base_path

    def item_path(self, id: ItemId) -> str:
        """
        Возвращает путь к элементу ресурса: base_path и id через ровно один "/".

        Args:
            id: Идентификатор элемента

        Returns:
            str: Путь к элементу
        """
        item_id = str(id)
        if not self._base_path:
            return item_id if item_id.startswith("/") else "/" + item_id
        base_path = self._base_path[:-1] if self._base_path.endswith("/") else self._base_path
        if item_id.startswith("/"):
            item_id = item_id[1:]
        return base_path + "/" + item_id

    async def list(
        self,
        cb: Callable[[Response[List[T]]], Any],
        config: ConfigArg = None,
    ) -> Any:
        """
        Запрашивает список элементов ресурса.
        HTTP-метод: GET

        Args:
            cb: Колбэк, получающий ответ со списком элементов
            config: Конфигурация колбэков этого запроса

        Returns:
            Ответ HTTP-клиента или None, если запрос не удался
        """
        request_config = RequestConfig.coerce(config)
        path = self._base_path
        return await self._execute("list", path, lambda: self._http_client.get(path), cb, request_config)

    async def get(
        self,
        id: ItemId,
        cb: Callable[[Response[T]], Any],
        config: ConfigArg = None,
    ) -> Any:
        """
        Запрашивает один элемент по идентификатору.
        HTTP-метод: GET

        Args:
            id: Идентификатор элемента
            cb: Колбэк, получающий ответ с элементом
            config: Конфигурация колбэков этого запроса

        Returns:
            Ответ HTTP-клиента или None, если запрос не удался
        """
        request_config = RequestConfig.coerce(config)
        path = self.item_path(id)
        return await self._execute("get", path, lambda: self._http_client.get(path), cb, request_config)

    async def create(
        self,
        model: T,
        cb: Optional[Callable[[Union[Response[T], T]], Any]] = None,
        config: ModelConfigArg = None,
    ) -> Any:
        """
        Создает элемент ресурса.
        HTTP-метод: POST

        Args:
            model: Модель для создания
            cb: Необязательный колбэк, получающий ответ (или model при cb_with_model)
            config: Конфигурация колбэков этого запроса

        Returns:
            Ответ HTTP-клиента или None, если запрос не удался
        """
        request_config = ModelRequestConfig.coerce(config)
        path = self._base_path
        return await self._execute(
            "create",
            path,
            lambda: self._http_client.post(path, model),
            cb,
            request_config,
            model if request_config.cb_with_model else _NO_MODEL,
        )

    async def update(
        self,
        model: T,
        id: ItemId,
        cb: Callable[[Union[Response[T], T]], Any],
        config: ModelConfigArg = None,
    ) -> Any:
        """
        Обновляет элемент ресурса переданной моделью.
        HTTP-метод: PUT, путь всегда заканчивается на "/"

        Args:
            model: Модель для отправки
            id: Идентификатор элемента
            cb: Колбэк, получающий ответ (или model при cb_with_model)
            config: Конфигурация колбэков этого запроса

        Returns:
            Ответ HTTP-клиента или None, если запрос не удался
        """
        request_config = ModelRequestConfig.coerce(config)
        path = self.item_path(id) + "/"
        return await self._execute(
            "update",
            path,
            lambda: self._http_client.put(path, model),
            cb,
            request_config,
            model if request_config.cb_with_model else _NO_MODEL,
        )

    async def delete(
        self,
        id: ItemId,
        cb: Callable[[Response[T]], Any],
        config: ConfigArg = None,
    ) -> Any:
        """
        Удаляет элемент по идентификатору.
        HTTP-метод: DELETE

        Args:
            id: Идентификатор элемента
            cb: Колбэк, вызываемый после успешного удаления
            config: Конфигурация колбэков этого запроса

        Returns:
            Ответ HTTP-клиента или None, если запрос не удался
        """
        request_config = RequestConfig.coerce(config)
        path = self.item_path(id)
        return await self._execute("delete", path, lambda: self._http_client.delete(path), cb, request_config)

    async def _execute(
        self,
        operation: str,
        path: str,
        send: Callable[[], Awaitable[Any]],
        cb: Optional[Callable[[Any], Any]],
        config: RequestConfig,
        model: Any = _NO_MODEL,
    ) -> Any:
        """
        Выполняет запрос и вызывает колбэки: успех, затем ошибка, затем finally.
        """
        logger.debug(f"{operation}: {path}")
        try:
            try:
                response = await send()
                if cb is not None:
                    await call_maybe_async(cb, response if model is _NO_MODEL else model)
            except Exception as error:
                await self._handle_error(error, config, operation, path)
                return None
            return response
        finally:
            await self._handle_finally(config)

    async def _handle_error(self, error: Exception, config: RequestConfig, operation: str, path: str) -> None:
        if config.on_fail is not None:
            handler = config.on_fail
        else:
            handler = self.default_config.on_fail

        if handler is None:
            logger.debug(f"Ошибка {operation} {path} отброшена: {error!s}")
            return

        logger.debug(f"Ошибка {operation} {path} передана в on_fail: {error!s}")
        await call_maybe_async(handler, error)

    async def _handle_finally(self, config: RequestConfig) -> None:
        if config.on_finally is not None:
            handler = config.on_finally
        else:
            handler = self.default_config.on_finally

        if handler is not None:
            await call_maybe_async(handler)
