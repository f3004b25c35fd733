"""
Cliente HTTP usado por fetch().

fetch() sólo necesita un objeto con ``get(url)`` que retorne una respuesta con
``status_code``, ``read()`` y ``close()``. Un ``httpx.Client`` ya cumple ese
contrato; HttpxClient es la implementación por defecto, configurada desde Settings.
"""

import logging
from typing import Protocol, runtime_checkable

import httpx

from filefetch.settings import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpResponse(Protocol):
    """Respuesta mínima que fetch() consume."""

    status_code: int

    def read(self) -> bytes: ...

    def close(self) -> None: ...


@runtime_checkable
class HttpClient(Protocol):
    """Capability HTTP inyectable: un único GET."""

    def get(self, url: str) -> HttpResponse: ...


class HttpxClient:
    """
    Cliente HTTP por defecto basado en httpx.

    Envía el GET en modo streaming para que los errores al leer el body se
    reporten desde read() y no desde get().
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        """
        Inicializar el cliente HTTP con settings.

        Args:
            settings: Settings con timeout, redirects y User-Agent
            client: httpx.Client opcional (ej. con MockTransport en tests).
                Si no se pasa, se crea uno propio.
        """
        self.settings = settings
        self._client = client or httpx.Client(
            timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
            headers={"User-Agent": settings.user_agent},
        )

    def get(self, url: str) -> httpx.Response:
        """
        Hacer un GET sin leer el body.

        Args:
            url: La URL a fetchear

        Returns:
            httpx.Response abierto; el caller debe llamar read() y close()

        Raises:
            httpx.HTTPError: Si el request falla (DNS, conexión, timeout, TLS)
        """
        logger.debug(f"GET {url}")
        request = self._client.build_request("GET", url)
        return self._client.send(request, stream=True)

    def close(self) -> None:
        """Cierra el cliente HTTP."""
        self._client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def get_http_client(settings: Settings) -> HttpxClient:
    """
    Factory function para crear una instancia de HttpxClient.

    Args:
        settings: Settings de filefetch

    Returns:
        Instancia configurada de HttpxClient
    """
    return HttpxClient(settings)
