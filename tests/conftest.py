"""
Конфигурация pytest и общие фикстуры для тестов.
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from aiocrud.config import AioCrudConfig
from aiocrud.core.client import HttpClient
from aiocrud.models import Response
from aiocrud.resources.base import ResourceClient


@pytest.fixture
def classes_data():
    """Список классов, который возвращает сервер."""
    return [
        {"teacher": "Mr. T", "title": "Econ", "students": [1, 3, 5, 7]},
        {"teacher": "Mrs. M", "title": "Calculus", "students": [2, 4, 6, 8]},
    ]


@pytest.fixture
def mock_http_client():
    """Мок HTTP-клиента с четырьмя асинхронными операциями."""
    return AsyncMock(spec=HttpClient)


@pytest.fixture
def class_api(mock_http_client) -> ResourceClient:
    """Ресурс "classes" поверх мока HTTP-клиента."""
    return ResourceClient(mock_http_client, "classes")


@pytest.fixture
def make_response():
    """Фабрика ответов HTTP-клиента."""

    def _make(data=None, status=200, url="http://school.app/classes", method="GET"):
        return Response(data=data, status=status, url=url, method=method)

    return _make


def build_school_app(classes: list) -> web.Application:
    """Тестовое aiohttp-приложение с ресурсом /classes."""
    store = {str(index): dict(item) for index, item in enumerate(classes, start=1)}

    async def list_classes(request: web.Request) -> web.Response:
        return web.json_response(list(store.values()))

    async def get_class(request: web.Request) -> web.Response:
        class_id = request.match_info["id"]
        if class_id not in store:
            return web.json_response({"message": f"Класс {class_id} не найден"}, status=404)
        return web.json_response(store[class_id])

    async def create_class(request: web.Request) -> web.Response:
        body = await request.json()
        class_id = str(len(store) + 1)
        store[class_id] = body
        return web.json_response({**body, "id": int(class_id)}, status=201)

    async def update_class(request: web.Request) -> web.Response:
        class_id = request.match_info["id"]
        body = await request.json()
        store[class_id] = body
        return web.json_response({**body, "id": int(class_id), "updated": True})

    async def delete_class(request: web.Request) -> web.Response:
        store.pop(request.match_info["id"], None)
        return web.Response(status=204)

    async def plain_text(request: web.Request) -> web.Response:
        return web.Response(text="это не JSON")

    async def empty_body(request: web.Request) -> web.Response:
        return web.Response(status=200)

    async def server_error(request: web.Request) -> web.Response:
        return web.Response(status=500, text="Internal Server Error")

    app = web.Application()
    app.router.add_get("/classes", list_classes)
    app.router.add_post("/classes", create_class)
    app.router.add_get("/classes/{id}", get_class)
    app.router.add_delete("/classes/{id}", delete_class)
    app.router.add_put("/classes/{id}/", update_class)
    app.router.add_get("/text", plain_text)
    app.router.add_get("/empty", empty_body)
    app.router.add_get("/boom", server_error)
    return app


@pytest_asyncio.fixture
async def school_server(classes_data):
    """Локальный HTTP-сервер с ресурсом /classes."""
    async with TestServer(build_school_app(classes_data)) as server:
        yield server


@pytest.fixture
def server_settings(school_server) -> AioCrudConfig:
    """Настройки клиента, указывающие на локальный сервер."""
    return AioCrudConfig(base_url=str(school_server.make_url("/")), timeout=5)


@pytest_asyncio.fixture
async def http_client(server_settings):
    """Настоящий HTTP-клиент, подключенный к локальному серверу."""
    async with HttpClient(server_settings) as client:
        yield client
