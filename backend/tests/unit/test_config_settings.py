"""Unit tests for application settings configuration."""

from pathlib import Path

from noticias.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_collaborator_config_from_environment(monkeypatch):
    """Identity provider and Firestore settings come from env variables."""
    monkeypatch.setenv("IDENTITY_PROVIDER_URL", "https://auth.example.com")
    monkeypatch.setenv("IDENTITY_PROVIDER_TIMEOUT", "2.5")
    monkeypatch.setenv("FIRESTORE_PROJECT_ID", "noticias-prod")

    settings = Settings(_env_file=None)

    assert settings.identity_provider_url == "https://auth.example.com"
    assert settings.identity_provider_timeout == 2.5
    assert settings.firestore_project_id == "noticias-prod"
    assert settings.articles_collection == "articles"
    assert settings.comments_collection == "comments"
