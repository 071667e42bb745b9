"""Service settings, read from ``GRADEBOOK_*`` environment variables or ``.env``."""
import os
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

_BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRADEBOOK_", env_file=".env", extra="ignore")

    data_file: str = os.path.join(_BASE_DIR, "students.json")
    host: str = "127.0.0.1"
    port: int = 4000
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
