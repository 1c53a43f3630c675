import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


DEFAULT_API_BASE = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT = 180.0


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return parsed


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    default_save: bool = True
    log_level: str = "INFO"

    @property
    def process_url(self) -> str:
        return f"{self.api_base}/api/process"


def load_settings() -> Settings:
    api_base = (os.getenv("IMAGERY_API_BASE") or DEFAULT_API_BASE).strip().rstrip("/")
    return Settings(
        api_base=api_base or DEFAULT_API_BASE,
        request_timeout=_get_float("IMAGERY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        default_save=_get_bool("IMAGERY_DEFAULT_SAVE", True),
        log_level=os.getenv("IMAGERY_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
