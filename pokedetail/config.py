import logging
import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    pokeapi_base_url: str = DEFAULT_POKEAPI_BASE_URL
    pokeapi_timeout: float = 5.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Builds settings from environment variables, keeping defaults for unset ones."""
        return cls(
            pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/"),
            pokeapi_timeout=float(os.getenv("POKEAPI_TIMEOUT", "5.0")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or get_settings().log_level, format=LOG_FORMAT)
