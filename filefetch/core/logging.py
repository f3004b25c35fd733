"""
Configuración de logging usando Loguru.

Los módulos de filefetch loggean con ``logging.getLogger(__name__)``;
setup_logging() instala un handler que redirige stdlib logging a loguru.
El paquete nunca configura logging al importarse: sólo la CLI lo hace.

Usage:
    from filefetch.core.logging import setup_logging

    setup_logging("DEBUG", log_file="logs/filefetch.log")
"""

import logging
import sys
from pathlib import Path

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)

NOISY_LOGGERS = ["httpx", "httpcore"]


class InterceptHandler(logging.Handler):
    """Handler that intercepts stdlib logging and routes to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configurar loguru con output a stderr (y archivo opcional) e interceptar stdlib logging.

    Args:
        level: Nivel mínimo de logging (DEBUG, INFO, WARNING, ERROR)
        log_file: Ruta opcional de archivo para logging
    """
    level = level.upper()

    # Remove default loguru handler
    logger.remove()

    logger.add(sys.stderr, format=DEFAULT_FORMAT, level=level, colorize=True)

    if log_file:
        # Crear directorio del log si no existe
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, encoding="utf-8")

    # Intercept stdlib logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Silence noisy libraries
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


__all__ = ["InterceptHandler", "setup_logging"]
