"""
filefetch: descarga un recurso HTTP(S) a disco y expone un handle sobre el archivo.

Usage:
    from filefetch import FetchConfig, fetch

    downloaded = fetch("https://example.com/file.pdf", FetchConfig(filename="doc.pdf"))
    print(downloaded.path, downloaded.sha256())
    downloaded.cleanup()
"""

__version__ = "0.1.0"

from filefetch.downloaded_file import DownloadedFile, SimpleDownloadedFile  # noqa: E402
from filefetch.errors import (  # noqa: E402
    BodyReadError,
    FetchError,
    FilesystemError,
    StatusError,
    TransportError,
)
from filefetch.fetcher import FetchConfig, fetch  # noqa: E402

__all__ = [
    "__version__",
    "fetch",
    "FetchConfig",
    "DownloadedFile",
    "SimpleDownloadedFile",
    "FetchError",
    "TransportError",
    "StatusError",
    "BodyReadError",
    "FilesystemError",
]
