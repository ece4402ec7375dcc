# ecwid_catalog/core/config.py
from functools import lru_cache
from typing import Literal, Optional
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

ENV_FILES = {
    "development": ".env.development",
    "production": ".env.production",
}


class Settings(BaseSettings):
    """Store credentials and HTTP knobs for building an EcwidClient."""

    APP_ENV: EnvName = "development"
    APP_NAME: str = "ecwid-catalog"
    DEBUG: bool = False

    ECWID_STORE_ID: Optional[int] = None
    ECWID_TOKEN: str = ""
    ECWID_API_URL: str = "https://app.ecwid.com/api/v3"

    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    # env file is passed per instance by get_settings()
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment and the APP_ENV dotenv file."""
    app_env = os.getenv("APP_ENV", "development")
    return Settings(
        _env_file=ENV_FILES.get(app_env, ENV_FILES["production"]),
        _env_file_encoding="utf-8",
    )
