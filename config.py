from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import ConfigError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    telegram_bot_token: str
    synology_nas_base_url: str
    synology_username: str
    synology_password: str
    allowed_chat_id: int
    force_ipv4: bool = False
    log_level: str = "INFO"
    request_timeout: float = 30.0
    synology_verify_ssl: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("synology_nas_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("telegram_bot_token", "synology_username", "synology_password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("request_timeout")
    @classmethod
    def positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value


def load_settings(**overrides) -> Settings:
    """Read settings from the environment, raising ConfigError on any problem"""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"]).upper()
            problems.append(f"{name}: {error['msg']}")
        raise ConfigError(
            "Invalid configuration - " + "; ".join(problems)
        ) from e
