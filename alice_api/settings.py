# alice_api/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List
import logging
from pathlib import Path

from .errors import InsecureConfigurationError

logger = logging.getLogger(__name__)

# This file lives at <project>/alice_api/settings.py
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"

# Known placeholder secret. Anything signed with it can be forged by anyone.
INSECURE_DEFAULT_JWT_SECRET = "dev-secret-change-me"

PRODUCTION_ENVIRONMENTS = {"prod", "production"}
SUPPORTED_STORAGE_BACKENDS = {"memory", "sqlite"}


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "Alice Starter API"
    environment: str = "development"
    debug_mode: bool = False

    host: str = "127.0.0.1"
    port: int = 8080

    # Staff session tokens
    jwt_secret: str = Field(
        default=INSECURE_DEFAULT_JWT_SECRET,
        description="Secret used to sign staff session tokens. MUST be overridden in production.",
    )
    jwt_algorithm: str = "HS256"
    session_lifetime_hours: int = Field(default=8, gt=0)

    default_timezone: str = "Africa/Johannesburg"

    # Storage
    storage_backend: str = "memory"
    sqlite_db_path: str = "./alice_api_data.sqlite3"

    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins.",
    )

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding="utf-8",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS

    @property
    def uses_insecure_jwt_secret(self) -> bool:
        return self.jwt_secret == INSECURE_DEFAULT_JWT_SECRET

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def ensure_safe_for_startup(self) -> None:
        """
        Validate settings before the application is built.

        Raises:
            InsecureConfigurationError: if running in production with the
                placeholder JWT secret, or if the storage backend is unknown.
        """
        if self.storage_backend not in SUPPORTED_STORAGE_BACKENDS:
            raise InsecureConfigurationError(
                f"Unsupported storage_backend '{self.storage_backend}'. "
                f"Expected one of: {', '.join(sorted(SUPPORTED_STORAGE_BACKENDS))}."
            )

        if self.uses_insecure_jwt_secret:
            if self.is_production:
                logger.critical("JWT_SECRET is set to the insecure default in production. Refusing to start.")
                raise InsecureConfigurationError(
                    "JWT_SECRET must be overridden when ENVIRONMENT is production."
                )
            logger.warning(
                "JWT_SECRET is using the insecure default. "
                "Session tokens can be forged; never run like this in production."
            )

        logger.info(
            f"Settings OK: environment='{self.environment}', storage_backend='{self.storage_backend}', "
            f"jwt_secret={'********' if self.jwt_secret else 'None'}, "
            f"session_lifetime_hours={self.session_lifetime_hours}"
        )


def get_settings() -> Settings:
    """Build a fresh Settings instance from the environment and .env file."""
    if DOTENV_PATH.exists():
        logger.debug(f".env file found at {DOTENV_PATH}")
    return Settings()
