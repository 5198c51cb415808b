import logging
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Careers API configuration.

    Every field can be overridden with the upper-cased environment variable of
    the same name (API_PREFIX, SEED_SAMPLE_JOBS, ...) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    api_prefix: str = Field(default="/api", description="Prefix for all API routes")
    seed_sample_jobs: bool = Field(default=True, description="Load sample postings at startup")
    admin_username: str = "admin"
    admin_password: str = "admin123"
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )
    static_dir: str = Field(default="static", description="Built frontend directory")
    log_level: str = "INFO"

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @field_validator("cors_origins")
    @classmethod
    def normalize_cors_origins(cls, v: str) -> str:
        origins = [origin.strip() for origin in v.split(",") if origin.strip()]
        return ",".join(origins) or "*"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        return self.cors_origins.split(",")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
