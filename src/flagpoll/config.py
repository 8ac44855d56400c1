# src/flagpoll/config.py
import os
import logging
from enum import Enum
from typing import ClassVar, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class Settings(BaseSettings):
    ENVIRONMENT: str = Environment.PRODUCTION.value
    API_URL: str = "http://localhost:8080"
    POLL_INTERVAL: float = 5.0  # seconds
    FLAG_KEY: str = "feature-flag-1"
    REQUEST_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env.production",
        env_file_encoding="utf-8",
        from_attributes=True,
        extra="ignore",
        use_enum_values=True,
    )

    def get_base_url(self) -> str:
        return self.API_URL.rstrip("/")


class SettingsManager:
    _instance: ClassVar[Optional[Settings]] = None

    @classmethod
    def get_settings(cls) -> Settings:
        if cls._instance is None:
            env = os.getenv("ENVIRONMENT", Environment.PRODUCTION.value)
            logger.debug(f"Loading settings for environment: {env}")

            if env == Environment.DEVELOPMENT.value:
                cls._instance = Settings(_env_file=".env.development")
            elif env == Environment.TEST.value:
                cls._instance = Settings(_env_file=".env.test")
            else:
                cls._instance = Settings(_env_file=".env.production")

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def get_settings() -> Settings:
    return SettingsManager.get_settings()
