import os
from functools import lru_cache

from pydantic import BaseModel

# Settings field -> environment variable that overrides it
_ENV_VARS = {
    "pokeapi_base_url": "POKEAPI_BASE_URL",
    "translation_base_url": "TRANSLATION_BASE_URL",
    "http_timeout": "HTTP_TIMEOUT",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    translation_base_url: str = "https://api.funtranslations.com/translate"
    http_timeout: float = 5.0  # seconds, applied to every outbound call
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Builds the settings once from the environment. Bad values fail at startup."""
    overrides = {
        field: os.environ[var]
        for field, var in _ENV_VARS.items()
        if os.getenv(var)
    }
    return Settings(**overrides)
