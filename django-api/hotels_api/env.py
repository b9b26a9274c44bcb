"""Runtime configuration for the hotels API.

Relies on pydantic-settings so that environment variables (prefixed with
``HOTELS_``) or a ``.env`` file can override the defaults.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Captures deployment configuration for the Django project."""

    model_config = SettingsConfigDict(
        env_prefix="HOTELS_",
        env_file=".env",
        extra="ignore",
    )

    secret_key: str = Field(
        default="django-insecure-hotels-api-development-key",
        description="Django SECRET_KEY; override in every deployed environment",
    )
    debug: bool = False
    allowed_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])
    log_level: str = Field(default="INFO")
    time_zone: str = "UTC"

    database_engine: str = Field(
        default="django.db.backends.sqlite3",
        description="Django database backend; use django.db.backends.postgresql with the postgres extra",
    )
    database_name: str = Field(default=str(BASE_DIR / "db.sqlite3"))
    database_user: str = ""
    database_password: str = ""
    database_host: str = ""
    database_port: str = ""

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def database(self) -> dict[str, str]:
        """Return the ``DATABASES["default"]`` entry."""
        return {
            "ENGINE": self.database_engine,
            "NAME": self.database_name,
            "USER": self.database_user,
            "PASSWORD": self.database_password,
            "HOST": self.database_host,
            "PORT": self.database_port,
        }
