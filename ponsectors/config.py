"""Ponsectors Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Storage
    STORAGE_BACKEND: str = "sql"  # "sql" or "memory"
    DATABASE_URL: str = "sqlite:///./ponsectors.db"
    MAX_WRITE_RETRIES: int = 3

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 12

    # Admin override: these emails are always treated as Admin
    ADMIN_EMAILS: list[str] = ["admin@ponsectors.com", "admin@ponsectdors.com"]
    PERSIST_ADMIN_OVERRIDE: bool = True

    # Bootstrap
    DEFAULT_ADMIN_EMAIL: str = "admin@ponsectors.com"
    DEFAULT_ADMIN_PASSWORD: str = ""
    SEED_DEMO_DATA: bool = False

    # Timezone
    TIMEZONE: str = "UTC"

    # HTTP
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
