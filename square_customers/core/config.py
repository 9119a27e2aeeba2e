"""
Configuración centralizada del cliente.

Este módulo maneja las variables de entorno usando Pydantic Settings para
validación automática, y define la configuración inmutable que comparten
el transporte HTTP y los clientes de recursos.
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from square_customers.version import VERSION

DEFAULT_SQUARE_VERSION = "2023-01-19"


class Environment(str, Enum):
    """Entornos disponibles de la API de Square."""

    PRODUCTION = "production"
    SANDBOX = "sandbox"
    CUSTOM = "custom"


ENVIRONMENT_URLS = {
    Environment.PRODUCTION: "https://connect.squareup.com",
    Environment.SANDBOX: "https://connect.squareupsandbox.com",
}


class Settings(BaseSettings):
    """
    Configuración del cliente usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno
    con valores por defecto apropiados para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "Square Customers Client"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_FILE_PATH: Optional[str] = None
    LOG_MAX_SIZE_MB: int = 10
    LOG_BACKUP_COUNT: int = 5

    # === CONFIGURACIÓN DE SQUARE ===
    SQUARE_ENVIRONMENT: str = "sandbox"
    SQUARE_CUSTOM_URL: Optional[str] = None
    SQUARE_BASE_URI: str = "/v2"
    SQUARE_ACCESS_TOKEN: str = ""
    SQUARE_VERSION: str = DEFAULT_SQUARE_VERSION
    SQUARE_TIMEOUT_SECONDS: float = 60.0
    SQUARE_CONNECT_TIMEOUT_SECONDS: float = 10.0

    # === CONFIGURACIÓN DE WEBHOOKS ===
    SQUARE_WEBHOOK_SIGNATURE_KEY: Optional[str] = None
    SQUARE_WEBHOOK_NOTIFICATION_URL: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("SQUARE_ENVIRONMENT")
    @classmethod
    def validate_square_environment(cls, v):
        """Valida que el entorno de Square sea válido."""
        valid_envs = [env.value for env in Environment]
        if v.lower() not in valid_envs:
            raise ValueError(f"SQUARE_ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @field_validator("SQUARE_BASE_URI")
    @classmethod
    def validate_base_uri(cls, v):
        """Normaliza el base URI para que empiece con '/' y no termine en '/'."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @property
    def is_production(self) -> bool:
        """Verifica si apunta al entorno de producción de Square."""
        return self.SQUARE_ENVIRONMENT == Environment.PRODUCTION.value


class Configuration(BaseModel):
    """
    Immutable configuration shared by the HTTP transport and resource clients.

    Attributes:
        environment: Square environment the client talks to
        custom_url: Root URL used when environment is CUSTOM
        base_uri: Path prefix appended to the environment URL
        access_token: Bearer token sent on every request
        square_version: Value of the Square-Version header
        timeout: Total request timeout in seconds
        connect_timeout: Connection timeout in seconds
        user_agent: Value of the User-Agent header
        additional_headers: Extra headers merged into every request
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Environment.SANDBOX
    custom_url: Optional[str] = None
    base_uri: str = "/v2"
    access_token: str = ""
    square_version: str = DEFAULT_SQUARE_VERSION
    timeout: float = 60.0
    connect_timeout: float = 10.0
    user_agent: str = f"square-customers-client/{VERSION}"
    additional_headers: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_custom_url(self) -> "Configuration":
        if self.environment == Environment.CUSTOM and not self.custom_url:
            raise ValueError("custom_url is required when environment is 'custom'")
        return self

    @classmethod
    def from_settings(cls, settings: Settings) -> "Configuration":
        """
        Build a Configuration from environment settings.

        Args:
            settings: Loaded Settings instance

        Returns:
            Configuration: Immutable client configuration
        """
        return cls(
            environment=Environment(settings.SQUARE_ENVIRONMENT),
            custom_url=settings.SQUARE_CUSTOM_URL,
            base_uri=settings.SQUARE_BASE_URI,
            access_token=settings.SQUARE_ACCESS_TOKEN,
            square_version=settings.SQUARE_VERSION,
            timeout=settings.SQUARE_TIMEOUT_SECONDS,
            connect_timeout=settings.SQUARE_CONNECT_TIMEOUT_SECONDS,
        )

    def get_base_url(self) -> str:
        """Environment URL followed by the base URI, e.g. https://connect.squareup.com/v2."""
        if self.environment == Environment.CUSTOM:
            root = self.custom_url
        else:
            root = ENVIRONMENT_URLS[self.environment]
        return f"{root.rstrip('/')}{self.base_uri}"

    def get_headers(self) -> Dict[str, str]:
        """
        Headers sent with every request to Square.

        Returns:
            dict: Authentication, versioning and content headers
        """
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Square-Version": self.square_version,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        headers.update(self.additional_headers)
        return headers


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Usa LRU cache para evitar recrear la configuración
    múltiples veces durante la ejecución.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()
