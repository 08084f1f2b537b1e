"""Service settings read from the environment.

Every field has a default, so the service starts with no environment at all.
Variable names match field names, case-insensitively (``LOG_LEVEL=debug``).

    from bank_accounts.core.config import settings

    if settings.is_testing:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bank_accounts.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_REPOSITORY_BACKENDS = {"memory"}


class Settings(BaseSettings):
    """Flat bank accounts service configuration.

    Environment variables override the defaults below; unknown variables are
    ignored.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment stage; testing and ci switch logs to JSON",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level name")

    app_name: str = Field(default="Bank Accounts", description="Name shown in docs")
    app_version: str = Field(default="0.1.0", description="Version shown in docs")

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL, prefix of Problem Details type URIs",
    )
    api_v1_prefix: str = Field(default="/api/v1", description="Mount point of v1")

    repository_backend: str = Field(
        default="memory",
        description="Bank account store implementation",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("repository_backend")
    @classmethod
    def validate_repository_backend(cls, v: str) -> str:
        """Lower-case the backend name and reject unsupported backends."""
        backend = v.lower()
        if backend not in _REPOSITORY_BACKENDS:
            raise ValueError(
                f"Unsupported repository_backend: {v}. Supported: 'memory'"
            )
        return backend

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment is Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment is Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process; tests call ``cache_clear()`` to reload."""
    return Settings()


settings = get_settings()
