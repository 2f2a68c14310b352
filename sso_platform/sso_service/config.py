"""
Configuration management for the SSO service
"""
import os
from datetime import timedelta
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_PATH_ENV = "CONFIG_PATH"


class Settings(BaseSettings):
    """SSO service configuration loaded from environment variables, .env and an optional YAML file"""

    # Runtime environment (controls log format and level)
    ENV: Literal["local", "dev", "prod"] = "local"
    LOG_DIR: Optional[str] = None

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./sso.db"

    # Token Configuration
    TOKEN_TTL: timedelta = timedelta(hours=1)

    # RPC Server Configuration
    RPC_HOST: str = "0.0.0.0"
    RPC_PORT: int = 44044
    RPC_TIMEOUT: timedelta = timedelta(seconds=10)

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("TOKEN_TTL", "RPC_TIMEOUT")
    @classmethod
    def must_be_positive(cls, value: timedelta) -> timedelta:
        if value.total_seconds() <= 0:
            raise ValueError("duration must be positive")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings, dotenv_settings]
        config_path = os.getenv(CONFIG_PATH_ENV)
        if config_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=config_path))
        sources.append(file_secret_settings)
        return tuple(sources)


def load_settings(**overrides) -> Settings:
    """
    Build the service settings.

    A CONFIG_PATH pointing at a missing file is a startup error rather than
    a silent fallback to defaults.

    Raises:
        FileNotFoundError: If CONFIG_PATH is set but does not exist
    """
    config_path = os.getenv(CONFIG_PATH_ENV)
    if config_path and not os.path.isfile(config_path):
        raise FileNotFoundError(f"config file does not exist: {config_path}")
    return Settings(**overrides)


# Global settings instance
settings = load_settings()
