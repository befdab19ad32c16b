"""
Асинхронные CRUD-операции над REST-ресурсами поверх настроенного HTTP-клиента.
"""

from .config import AioCrudConfig
from .core import HttpClient
from .exceptions import (
    AioCrudError,
    ConfigurationError,
    HttpStatusError,
    RequestFailure,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from .models import ModelRequestConfig, RequestConfig, Response
from .resources import HttpClientProtocol, ResourceClient


__all__ = [
    "AioCrudConfig",
    "AioCrudError",
    "ConfigurationError",
    "HttpClient",
    "HttpClientProtocol",
    "HttpStatusError",
    "ModelRequestConfig",
    "RequestConfig",
    "RequestFailure",
    "RequestTimeoutError",
    "ResourceClient",
    "Response",
    "ResponseDecodeError",
    "TransportError",
]

__version__ = "0.1.0"
