# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de ejecución leídos del entorno y de .env.
# --------------------------------------------------------------
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from textcrypt.errors import ConfigError

load_dotenv()

DEFAULT_FORMAT = "blake3"
DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    """Configuración inmutable de la herramienta.

    Attributes:
        default_format (str): Algoritmo usado cuando no se indica `--format`.
        max_input_bytes (int): Tope de bytes leídos por entrada; 0 sin límite.
        log_level (str): Nivel de logging de la CLI.

    """

    model_config = ConfigDict(frozen=True)

    default_format: str = DEFAULT_FORMAT
    max_input_bytes: int = Field(default=0, ge=0)
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Construye la configuración a partir de las variables de entorno actuales.

    Raises:
        ConfigError: Si alguna variable no tiene un valor válido.

    """

    try:
        return Settings(
            default_format=os.getenv("TEXTCRYPT_DEFAULT_FORMAT", DEFAULT_FORMAT),
            max_input_bytes=os.getenv("TEXTCRYPT_MAX_INPUT_BYTES", "0").strip() or "0",
            log_level=os.getenv("TEXTCRYPT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        raise ConfigError(f"Configuración inválida en: {fields}") from exc
