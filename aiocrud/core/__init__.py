"""
Основные компоненты aiocrud: HTTP-клиент на aiohttp.
"""

from .client import HttpClient


__all__ = [
    "HttpClient",
]
