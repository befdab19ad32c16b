"""
Тесты настроек HTTP-клиента.
"""

import pytest
from pydantic import ValidationError

from aiocrud.config import AioCrudConfig


def test_defaults():
    config = AioCrudConfig()

    assert config.timeout == 30
    assert config.verify_ssl is True
    assert config.headers == {"Accept": "application/json"}


def test_reads_environment(monkeypatch):
    """Тестирует чтение настроек из переменных окружения с префиксом AIOCRUD_."""
    monkeypatch.setenv("AIOCRUD_BASE_URL", "https://school.app/api/")
    monkeypatch.setenv("AIOCRUD_TIMEOUT", "15")
    monkeypatch.setenv("AIOCRUD_VERIFY_SSL", "false")
    monkeypatch.setenv("AIOCRUD_HEADERS", '{"Authorization": "Bearer token"}')

    config = AioCrudConfig()

    assert str(config.base_url) == "https://school.app/api/"
    assert config.timeout == 15
    assert config.verify_ssl is False
    assert config.headers == {"Authorization": "Bearer token"}


@pytest.mark.parametrize("timeout", [0, 3601])
def test_timeout_bounds(timeout):
    with pytest.raises(ValidationError):
        AioCrudConfig(timeout=timeout)


def test_base_url_must_be_http():
    with pytest.raises(ValidationError):
        AioCrudConfig(base_url="ftp://school.app/")


@pytest.mark.parametrize(
    "base_url, expected",
    [
        ("http://school.app/api", "http://school.app/api/"),
        ("http://school.app/api/v1/", "http://school.app/api/v1/"),
        ("http://school.app", "http://school.app/"),
    ],
)
def test_base_url_path_gets_trailing_slash(base_url, expected):
    """Тестирует, что путь base_url всегда заканчивается на '/', как требует aiohttp."""
    assert str(AioCrudConfig(base_url=base_url).base_url) == expected


def test_base_url_from_environment_gets_trailing_slash(monkeypatch):
    monkeypatch.setenv("AIOCRUD_BASE_URL", "http://school.app/api")

    assert str(AioCrudConfig().base_url) == "http://school.app/api/"


def test_base_url_with_query_rejected():
    with pytest.raises(ValidationError):
        AioCrudConfig(base_url="http://school.app/api?token=1")
