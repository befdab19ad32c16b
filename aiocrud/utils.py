"""
Утилиты aiocrud.
"""

import inspect
import json
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional
from uuid import UUID

import aiohttp
from pydantic import BaseModel


# Настройка логирования
logger = logging.getLogger("aiocrud")


class CustomJSONEncoder(json.JSONEncoder):
    """
    Кастомный JSON-энкодер для сериализации UUID, дат и Decimal.
    """

    def default(self, obj):
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", exclude_none=True)
        return super().default(obj)


def dump_body(data: Any) -> Optional[str]:
    """
    Сериализует тело запроса в JSON.

    Args:
        data: Pydantic-модель, список моделей или JSON-совместимые данные

    Returns:
        Optional[str]: JSON-строка или None, если данных нет
    """
    if data is None:
        return None
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, cls=CustomJSONEncoder)


async def call_maybe_async(func: Callable[..., Any], *args: Any) -> Any:
    """
    Вызывает колбэк и дожидается результата, если колбэк асинхронный.

    Args:
        func: Обычная функция или корутинная функция
        *args: Аргументы вызова

    Returns:
        Результат вызова
    """
    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def parse_error_response(response: aiohttp.ClientResponse) -> Dict[str, Any]:
    """
    Парсит ответ с ошибкой и возвращает информацию об ошибке.

    Args:
        response: Объект ответа aiohttp

    Returns:
        Dict[str, Any]: Словарь с ключами status_code, message, data
    """
    status_code = response.status

    try:
        response_text = await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError) as e:
        logger.error(f"Ошибка при чтении ответа с ошибкой: {e!s}")
        return {
            "status_code": status_code,
            "message": f"Ошибка при чтении ответа: {e!s}",
            "data": None,
        }

    message = response_text or (response.reason or "")
    response_data = None

    # Пытаемся распарсить JSON из тела ответа
    try:
        response_data = json.loads(response_text)
    except json.JSONDecodeError:
        pass

    if isinstance(response_data, dict):
        # Пытаемся извлечь сообщение об ошибке
        for key in ("error", "message", "Message", "detail"):
            if key in response_data:
                message = str(response_data[key])
                break

    return {"status_code": status_code, "message": message, "data": response_data}
