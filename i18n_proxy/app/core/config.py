from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


env_path = Path(__file__).parent.parent.parent.parent / ".envs" / ".env.development"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    PROJECT_NAME: str = "i18n-proxy"
    PROJECT_DESCRIPTION: str = "Locale-aware translation layer for API handlers"
    API_V1_STR: str = "/api/v1"
    LOG_DIR: str = ""

    # Internationalization settings
    NATIVE_LANGUAGE: str | None = "en"
    SUPPORTED_LANGUAGES: list[str] = [
        "en",
        "ar",
        "fr",
        "es",
    ]  # English, Arabic, French, Spanish


settings = Settings()
