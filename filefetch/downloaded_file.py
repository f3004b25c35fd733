"""
Handle sobre un archivo ya descargado a disco.

El handle expone la ruta, el contenido (cargado de forma lazy) y el SHA-256
(calculado de forma lazy, siempre desde disco), más una operación cleanup()
que borra el archivo e invalida el estado cacheado.
"""

import hashlib
import logging
import os
import shutil
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Tamaño de bloque para hashear sin cargar el archivo completo en memoria
HASH_CHUNK_SIZE = 64 * 1024


class DownloadedFile(ABC):
    """
    Interfaz de un archivo descargado.

    Las implementaciones deciden si cachean contenido y hash. Soporta el
    protocolo de context manager: al salir del bloque se llama cleanup().
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Ruta completa del archivo descargado ("" una vez liberado)."""

    @abstractmethod
    def contents(self) -> bytes:
        """Retornar el contenido completo del archivo."""

    @abstractmethod
    def sha256(self) -> str:
        """Retornar el SHA-256 (hex en minúsculas) del contenido en disco."""

    @abstractmethod
    def cleanup(self) -> None:
        """Liberar el archivo: borrarlo de disco y descartar lo cacheado."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup()


class SimpleDownloadedFile(DownloadedFile):
    """
    Archivo en disco con contenido y hash cacheados en memoria.

    None marca "todavía no cargado" en ambos caches, de modo que un archivo
    vacío también queda cacheado después de la primera lectura.

    No es thread-safe: poblar los caches es un read-modify-write sin locks.
    """

    def __init__(self, path: str, contents: bytes | None = None):
        """
        Inicializar el handle.

        Args:
            path: Ruta del archivo en disco
            contents: Contenido ya conocido (ej. el body recién escrito por fetch),
                para evitar una lectura redundante de disco
        """
        self._path = path
        self._contents = contents
        self._sha256: str | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"

    @property
    def path(self) -> str:
        return self._path

    def contents(self) -> bytes:
        """
        Retornar el contenido del archivo, leyéndolo de disco la primera vez.

        Returns:
            Bytes del archivo

        Raises:
            OSError: Si el archivo no existe o no se puede leer. Después de
                cleanup() la ruta es "" y se levanta FileNotFoundError.
        """
        if self._contents is not None:
            return self._contents

        with open(self._path, "rb") as f:
            self._contents = f.read()
        return self._contents

    def sha256(self) -> str:
        """
        Calcular el SHA-256 de lo que realmente está en disco.

        El hash nunca se deriva del contenido cacheado: si el contenido dado en
        el constructor no coincide con el archivo, gana el archivo. Una vez
        calculado, el valor cacheado es el que se retorna aunque el archivo
        desaparezca.

        Returns:
            Digest SHA-256 en hex minúsculas

        Raises:
            OSError: Si el archivo no existe o no se puede leer
        """
        if self._sha256 is not None:
            return self._sha256

        digest = hashlib.sha256()
        with open(self._path, "rb") as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
                digest.update(chunk)

        self._sha256 = digest.hexdigest()
        return self._sha256

    def cleanup(self) -> None:
        """
        Borrar la ruta de disco (recursivamente si es un directorio) y resetear el handle.

        Una ruta que ya no existe no es error, así que llamar cleanup() dos
        veces es seguro. Cualquier otro error de borrado se propaga y el
        handle queda intacto.

        Raises:
            OSError: Si la ruta existe pero no se pudo borrar
        """
        try:
            if os.path.isdir(self._path) and not os.path.islink(self._path):
                shutil.rmtree(self._path)
            else:
                os.remove(self._path)
            logger.debug(f"Removed downloaded file: {self._path}")
        except FileNotFoundError:
            pass

        self._path = ""
        self._contents = None
        self._sha256 = None


__all__ = ["DownloadedFile", "SimpleDownloadedFile", "HASH_CHUNK_SIZE"]
