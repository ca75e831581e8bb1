from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Noticias API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Firestore document store
    firestore_project_id: str = ""
    firestore_database: str = "(default)"
    firestore_credentials_file: str = ""     # Service account JSON; empty → ADC
    firestore_timeout: float = 10.0          # Seconds per store call
    articles_collection: str = "articles"
    comments_collection: str = "comments"

    # External identity provider
    identity_provider_url: str = "http://localhost:8081"
    identity_provider_verify_path: str = "/verify-token"
    identity_provider_login_path: str = "/login"
    identity_provider_register_path: str = "/register"
    identity_provider_timeout: float = 5.0   # Seconds per provider call

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_firestore: str = "WARNING"     # google-cloud-firestore / grpc
    log_level_auth: str = "INFO"             # Token verification

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
