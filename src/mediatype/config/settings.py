"""Configuration settings for the mediatype package.

Settings are loaded from ``MEDIATYPE_``-prefixed environment variables
and an optional .env file. They only affect ambient behavior such as
logging, never how media types are parsed, serialized or compared.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Package settings loaded from environment variables.

    :param log_level: Logging level applied by ``setup_logging``
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param log_format: Format string for the log handler
    :type log_format: str
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATYPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated keys in a shared .env file
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case.

        :param v: Raw log level value
        :return: Upper-cased log level when given a string
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance.

    Created on first use; call ``get_settings.cache_clear()`` to reload.

    :return: Cached settings
    :rtype: Settings
    """
    return Settings()
