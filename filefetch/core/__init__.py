"""
Infraestructura de filefetch: cliente HTTP y configuración de logging.
"""

from .http_client import HttpClient, HttpResponse, HttpxClient, get_http_client
from .logging import setup_logging

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "get_http_client",
    "setup_logging",
]
