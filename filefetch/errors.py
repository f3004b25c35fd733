"""
Jerarquía de excepciones del fetcher.

Cada fallo de fetch() aborta la operación y se reporta con una subclase de
FetchError, encadenando la causa original con ``raise ... from``.
"""


class FetchError(Exception):
    """Base para todos los errores de fetch()."""


class TransportError(FetchError):
    """El GET falló antes de obtener una respuesta (DNS, conexión, TLS, cliente)."""


class StatusError(FetchError):
    """
    La respuesta llegó con un status fuera de [200, 300).

    Attributes:
        url: URL solicitada
        status_code: Status HTTP recibido
    """

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"could not get url {url}, with status code {status_code}")


class BodyReadError(FetchError):
    """Fallo al leer el body de la respuesta."""


class FilesystemError(FetchError):
    """Fallo creando el directorio de descarga o escribiendo el archivo."""


__all__ = [
    "FetchError",
    "TransportError",
    "StatusError",
    "BodyReadError",
    "FilesystemError",
]
