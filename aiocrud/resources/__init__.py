"""
Ресурсные классы aiocrud.
"""

from .base import HttpClientProtocol, ResourceClient


__all__ = [
    "HttpClientProtocol",
    "ResourceClient",
]
