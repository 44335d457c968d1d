import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip()


@dataclass(frozen=True)
class Settings:
    default_region: str = field(default_factory=lambda: _env("MWS_DEFAULT_REGION", "US").upper())
    default_version: str = field(default_factory=lambda: _env("MWS_DEFAULT_VERSION", "2009-01-01"))
    log_level: str = field(default_factory=lambda: _env("MWS_LOG_LEVEL", "INFO").upper())


def get_settings() -> Settings:
    return Settings()
