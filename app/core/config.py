"""
Application configuration.
Values are read from environment variables or a local .env file so the
same build runs against SQLite on a laptop and PostgreSQL in deployment.
"""
import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    DATABASE_URL: str = "sqlite+aiosqlite:///./outreach.db"

    # Bearer tokens are issued by the hosted auth provider; we only verify them
    JWT_SECRET_KEY: str = "changeme"
    JWT_ALGORITHM: str = "HS256"

    # Calendar days are bucketed in this zone
    DISPLAY_TIMEZONE: str = "UTC"

    RECENT_INTERACTIONS_LIMIT: int = 5
    UPCOMING_APPOINTMENTS_LIMIT: int = 5
    DEFAULT_APPOINTMENT_DURATION: int = 60

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()

if settings.APP_ENV == "production" and settings.JWT_SECRET_KEY == "changeme":
    raise ValueError(
        "JWT_SECRET_KEY is not set. It must match the signing key of the auth provider. "
        "Set it as a JWT_SECRET_KEY environment variable."
    )
