"""
Configuración de filefetch usando pydantic-settings.

Este módulo carga los defaults del fetcher (cliente HTTP, directorio de descarga,
logging) desde variables de entorno con prefijo FILEFETCH_ o desde un archivo .env.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filefetch import __version__

# Niveles que loguru acepta como nivel de sink
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Settings de filefetch cargados desde variables de entorno.

    Todos los settings pueden ser sobreescritos via FILEFETCH_<NOMBRE> o archivo .env.
    Los valores explícitos de FetchConfig siempre tienen prioridad sobre estos.
    """

    model_config = SettingsConfigDict(
        env_prefix="FILEFETCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =============================================================================
    # CONFIGURACIÓN DE HTTP CLIENT
    # =============================================================================
    request_timeout: float = Field(
        default=30.0, description="Timeout de request HTTP en segundos"
    )
    follow_redirects: bool = Field(
        default=True, description="Seguir redirects en el cliente HTTP por defecto"
    )
    user_agent: str = Field(
        default=f"filefetch/{__version__}",
        description="User-Agent enviado por el cliente HTTP por defecto",
    )

    # =============================================================================
    # CONFIGURACIÓN DE DOWNLOADS
    # =============================================================================
    download_dir: str | None = Field(
        default=None,
        description="Directorio por defecto para descargas (None = directorio temporal nuevo)",
    )
    temp_dir_prefix: str = Field(
        default="filefetch-", description="Prefijo de los directorios temporales creados"
    )

    # =============================================================================
    # CONFIGURACIÓN DE LOGGING
    # =============================================================================
    log_level: str = Field(default="INFO", description="Nivel de logging")
    log_file: str | None = Field(
        default=None, description="Ruta de archivo de log (opcional)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        """Normalizar el nivel de logging y rechazar nombres desconocidos."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Obtener singleton de settings.

    Esto asegura que los settings se cargan solo una vez y se reusan en el paquete.

    Returns:
        Instancia de Settings con toda la configuración cargada
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Descartar el singleton para que el próximo get_settings() relea el entorno."""
    global _settings
    _settings = None
