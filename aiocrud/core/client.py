"""
Асинхронный HTTP-клиент на aiohttp для ResourceClient.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from ..config import AioCrudConfig
from ..exceptions import (
    HttpStatusError,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from ..models import Response
from ..utils import dump_body, parse_error_response


# Настройка логгера
logger = logging.getLogger("aiocrud.core.client")


class HttpClient:
    """
    Асинхронный HTTP-клиент с четырьмя операциями: get, post, put, delete.

    Каждая операция выполняет ровно один запрос без повторов и возвращает Response
    либо выбрасывает RequestFailure.

    Attributes:
        settings: Настройки подключения
    """

    def __init__(
        self,
        settings: Optional[AioCrudConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Инициализация клиента.

        Args:
            settings: Настройки подключения. Если не указаны,
                      будут прочитаны из окружения.
            session: Готовая сессия aiohttp. Клиент не закрывает переданную сессию.
        """
        self.settings = settings or AioCrudConfig()
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def __aenter__(self) -> "HttpClient":
        """
        Асинхронный контекстный менеджер для инициализации сессии.

        Returns:
            HttpClient: Экземпляр клиента
        """
        if self._session is None or self._session.closed:
            await self._create_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _create_session(self) -> None:
        """
        Создает новую HTTP-сессию.
        """
        timeout = aiohttp.ClientTimeout(total=self.settings.timeout)
        self._session = aiohttp.ClientSession(
            base_url=str(self.settings.base_url),
            timeout=timeout,
            headers=self.settings.headers,
            connector=aiohttp.TCPConnector(limit=self.settings.max_connections),
        )
        self._owns_session = True

    async def close(self) -> None:
        """
        Закрывает HTTP-сессию, если она была создана клиентом.
        """
        if not self._owns_session:
            return
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """
        Возвращает текущую HTTP-сессию.

        Raises:
            RuntimeError: Если сессия не открыта
        """
        if self._session is None or self._session.closed:
            raise RuntimeError("HTTP сессия не инициализирована. Используйте 'async with' контекст")
        return self._session

    async def get(self, path: str) -> Response:
        return await self._request("GET", path)

    async def post(self, path: str, body: Any = None) -> Response:
        return await self._request("POST", path, data=body)

    async def put(self, path: str, body: Any = None) -> Response:
        return await self._request("PUT", path, data=body)

    async def delete(self, path: str) -> Response:
        return await self._request("DELETE", path)

    async def _request(self, method: str, path: str, *, data: Any = None) -> Response:
        """
        Выполняет HTTP-запрос.

        Args:
            method: HTTP-метод (GET, POST, PUT, DELETE)
            path: Путь относительно base_url
            data: Тело запроса (Pydantic-модель или JSON-совместимые данные)

        Returns:
            Response: Ответ с декодированным JSON

        Raises:
            HttpStatusError: Если статус ответа >= 400
            ResponseDecodeError: Если тело успешного ответа не является JSON
            TransportError: При ошибке соединения или клиента
            RequestTimeoutError: При таймауте запроса
        """
        json_data = dump_body(data)
        headers = {"Content-Type": "application/json"} if json_data is not None else None

        logger.debug(f"Запрос {method} {self.settings.base_url}{path}")
        if json_data:
            logger.debug(f"Данные запроса: {json_data[:200]}")

        try:
            async with self.session.request(
                method=method,
                url=path,
                data=json_data,
                headers=headers,
                ssl=self.settings.verify_ssl,
            ) as response:
                # 1. Проверяем на ошибки
                if response.status >= 400:
                    error_details = await parse_error_response(response)
                    logger.error(
                        f"Ошибка API: {error_details['status_code']} - {error_details['message']} (URL: {response.url})"
                    )
                    raise HttpStatusError(
                        status_code=error_details["status_code"],
                        message=error_details["message"],
                        response=self._build_response(response, method, error_details["data"]),
                        details=error_details["data"],
                    )

                # 2. Успешный ответ без тела
                if response.status == 204:
                    return self._build_response(response, method, True)

                body = await response.read()
                if not body:
                    return self._build_response(response, method, None)

                # 3. Иначе ожидаем JSON
                try:
                    payload = json.loads(body)
                except ValueError as e:
                    text = body[:200].decode("utf-8", errors="replace")
                    logger.error(
                        f"Ошибка декодирования JSON: {e!s}. Статус: {response.status}. Текст ответа: '{text}...'"
                    )
                    raise ResponseDecodeError(
                        f"Ожидался JSON, но получен другой тип контента: {response.content_type}",
                        cause=e,
                        response=self._build_response(response, method, None),
                    ) from e

                return self._build_response(response, method, payload)

        except asyncio.TimeoutError as e:
            logger.error(f"Таймаут запроса {method} {path}: {e!s}")
            raise RequestTimeoutError(f"Таймаут запроса: {e!s}", cause=e) from e
        except aiohttp.ClientConnectionError as e:
            logger.error(f"Ошибка соединения: {e!s}")
            raise TransportError(f"Ошибка соединения: {e!s}", cause=e) from e
        except aiohttp.ClientError as e:
            logger.error(f"Ошибка клиента: {e!s}")
            raise TransportError(f"Ошибка клиента: {e!s}", cause=e) from e

    @staticmethod
    def _build_response(response: aiohttp.ClientResponse, method: str, data: Any) -> Response:
        return Response(
            data=data,
            status=response.status,
            headers={str(key): value for key, value in response.headers.items()},
            url=str(response.url),
            method=method,
        )
