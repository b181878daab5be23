"""pathstream configuration settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathstream.infrastructure.config.settings_utils import (
    parse_bool,
    parse_int,
    parse_octal,
)
from pathstream.infrastructure.logging_setup import configure_logging


DEFAULT_FILE_MODE = 0o755


class Settings(BaseSettings):
    """Library settings, read from PATHSTREAM_* env vars or `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="PATHSTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_json: bool = False

    # File I/O
    file_mode: int = DEFAULT_FILE_MODE
    max_read_size: int = 0

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> str:
        return str(value or "INFO").strip().upper()

    @field_validator("log_json", mode="before")
    @classmethod
    def _lenient_bool(cls, value: object) -> bool:
        return parse_bool(value, default=False)

    @field_validator("file_mode", mode="before")
    @classmethod
    def _octal_mode(cls, value: object) -> int:
        return parse_octal(value, default=DEFAULT_FILE_MODE)

    @field_validator("max_read_size", mode="before")
    @classmethod
    def _non_negative_size(cls, value: object) -> int:
        return parse_int(value, default=0, minimum=0)

    def setup_logging(self) -> None:
        configure_logging(level=self.log_level, json_logs=self.log_json)


# Global settings instance
settings = Settings()
