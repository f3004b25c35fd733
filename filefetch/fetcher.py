"""
Descarga de un recurso remoto a disco.

fetch() hace un único GET, valida el status, bufferea el body completo en
memoria, lo escribe en ``directorio/nombre`` y retorna un DownloadedFile
pre-cargado con ese body.
"""

import logging
import os
import posixpath
import tempfile
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filefetch.core.http_client import HttpClient, get_http_client
from filefetch.downloaded_file import DownloadedFile, SimpleDownloadedFile
from filefetch.errors import (
    BodyReadError,
    FilesystemError,
    StatusError,
    TransportError,
)
from filefetch.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class FetchConfig(BaseModel):
    """
    Opciones de una llamada a fetch().

    Cualquier campo en None usa su default:
    - download_dir: Settings.download_dir, o un directorio temporal nuevo
    - filename: último segmento del path de la URL
    - http_client: HttpxClient construido desde Settings (se cierra al terminar)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    download_dir: Path | None = Field(
        default=None, description="Directorio donde se escribe el archivo"
    )
    filename: str | None = Field(
        default=None, description="Nombre del archivo destino"
    )
    http_client: HttpClient | None = Field(
        default=None, description="Cliente HTTP a usar para el GET"
    )

    @field_validator("filename", mode="before")
    @classmethod
    def parse_filename(cls, v: str | None) -> str | None:
        """Tratar un nombre vacío como no configurado."""
        if v is not None and not str(v).strip():
            return None
        return v


def filename_from_url(url: str) -> str:
    """
    Extraer el nombre de archivo desde una URL.

    Usa el último segmento no vacío del path ("http://host/foo/bar/" -> "bar").
    Si la URL no tiene path, usa el host.

    Args:
        url: URL del archivo

    Returns:
        Nombre del archivo ("" si la URL no tiene ni path ni host)
    """
    parts = urlsplit(url)
    name = posixpath.basename(parts.path.rstrip("/"))
    return name or parts.hostname or ""


def _read_body(client: HttpClient, url: str) -> bytes:
    """GET + validación de status + lectura del body. La respuesta siempre se cierra."""
    try:
        response = client.get(url)
    except Exception as e:
        raise TransportError(f"could not get url: {e}") from e

    try:
        if not 200 <= response.status_code < 300:
            logger.warning(f"Request to {url} failed with status {response.status_code}")
            raise StatusError(url, response.status_code)

        try:
            return response.read()
        except Exception as e:
            raise BodyReadError(f"could not read response: {e}") from e
    finally:
        response.close()


def _resolve_download_dir(config: FetchConfig, settings: Settings) -> str:
    if config.download_dir is not None:
        return str(config.download_dir)
    if settings.download_dir:
        return settings.download_dir

    try:
        directory = tempfile.mkdtemp(prefix=settings.temp_dir_prefix)
    except OSError as e:
        raise FilesystemError("could not create a temp dir") from e

    logger.debug(f"Created temp download dir: {directory}")
    return directory


def fetch(
    url: str,
    config: FetchConfig | None = None,
    settings: Settings | None = None,
) -> DownloadedFile:
    """
    Descargar una URL al filesystem local.

    Steps:
        1. GET de la URL con el cliente configurado
        2. Validar status en [200, 300)
        3. Leer el body completo en memoria
        4. Resolver directorio y nombre de archivo
        5. Escribir el body (sobreescribe si existe)

    No hay reintentos. Si la escritura falla, un directorio temporal creado
    en el paso 4 queda en disco.

    Args:
        url: URL a descargar
        config: Opciones de la descarga (None = todos los defaults)
        settings: Settings de filefetch (None = get_settings())

    Returns:
        DownloadedFile con la ruta del archivo y el contenido ya cacheado

    Raises:
        TransportError: Si el GET falla
        StatusError: Si el status está fuera de [200, 300)
        BodyReadError: Si falla la lectura del body
        FilesystemError: Si falla la creación del directorio o la escritura

    Example:
        with fetch("https://example.com/data.csv") as downloaded:
            print(downloaded.path, downloaded.sha256())
    """
    config = config or FetchConfig()
    settings = settings or get_settings()

    logger.info(f"Fetching {url}")

    if config.http_client is not None:
        body = _read_body(config.http_client, url)
    else:
        with get_http_client(settings) as client:
            body = _read_body(client, url)

    directory = _resolve_download_dir(config, settings)

    filename = config.filename or filename_from_url(url)
    if not filename:
        raise FilesystemError(f"could not determine a filename for url {url}")

    file_path = os.path.abspath(os.path.join(directory, filename))

    try:
        with open(file_path, "wb") as f:
            f.write(body)
    except OSError as e:
        raise FilesystemError(f"could not write to file: {e}") from e

    logger.info(f"Downloaded {url} -> {file_path} ({len(body)} bytes)")
    return SimpleDownloadedFile(file_path, body)


__all__ = ["FetchConfig", "fetch", "filename_from_url"]
