"""
CLI de filefetch: descarga una URL e imprime la ruta y el SHA-256.

Usage:
    python -m filefetch https://example.com/file.pdf --dir downloads
"""

import argparse
import logging
import sys

from filefetch.core.logging import setup_logging
from filefetch.errors import FetchError
from filefetch.fetcher import FetchConfig, fetch
from filefetch.settings import LOG_LEVELS, get_settings

logger = logging.getLogger("filefetch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filefetch",
        description="Descarga un archivo por HTTP(S) y muestra su ruta y SHA-256",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos:
  # Descargar a un directorio temporal nuevo
  python -m filefetch https://example.com/data.csv

  # Descargar a ./downloads con otro nombre
  python -m filefetch https://example.com/data.csv --dir downloads --filename hoy.csv

  # Sólo calcular el hash y borrar el archivo
  python -m filefetch https://example.com/data.csv --cleanup
        """,
    )

    parser.add_argument("url", help="URL a descargar")

    parser.add_argument(
        "--dir",
        dest="download_dir",
        default=None,
        help="Directorio destino (default: FILEFETCH_DOWNLOAD_DIR o un directorio temporal)",
    )

    parser.add_argument(
        "--filename",
        default=None,
        help="Nombre del archivo destino (default: último segmento de la URL)",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Nivel de logging (default: FILEFETCH_LOG_LEVEL o INFO)",
    )

    parser.add_argument(
        "--cleanup",
        action="store_true",
        help="Borrar el archivo después de mostrar el hash",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Punto de entrada principal de la CLI.

    Args:
        argv: Argumentos de línea de comandos (None = sys.argv)

    Returns:
        Exit code: 0 si la descarga fue exitosa, 1 si falló
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=settings.log_file,
    )

    config = FetchConfig(download_dir=args.download_dir, filename=args.filename)

    try:
        downloaded = fetch(args.url, config, settings)
        print(downloaded.path)
        print(downloaded.sha256())
        if args.cleanup:
            downloaded.cleanup()
    except FetchError as e:
        logger.error(f"Download failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not access downloaded file: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
