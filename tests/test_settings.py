import pytest

from alice_api.errors import InsecureConfigurationError
from alice_api.main import create_app
from alice_api.settings import INSECURE_DEFAULT_JWT_SECRET, Settings


def test_production_with_default_secret_refuses_to_start():
    settings = Settings(environment="production", jwt_secret=INSECURE_DEFAULT_JWT_SECRET)

    with pytest.raises(InsecureConfigurationError):
        settings.ensure_safe_for_startup()

    with pytest.raises(InsecureConfigurationError):
        create_app(settings=settings)


def test_production_with_real_secret_starts():
    settings = Settings(environment="prod", jwt_secret="a-long-random-secret")

    settings.ensure_safe_for_startup()
    assert create_app(settings=settings).title == settings.app_name


def test_development_with_default_secret_only_warns():
    settings = Settings(environment="development", jwt_secret=INSECURE_DEFAULT_JWT_SECRET)

    settings.ensure_safe_for_startup()
    assert settings.uses_insecure_jwt_secret


def test_unknown_storage_backend_is_rejected():
    settings = Settings(jwt_secret="x", storage_backend="redis")

    with pytest.raises(InsecureConfigurationError):
        settings.ensure_safe_for_startup()


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("SESSION_LIFETIME_HOURS", "2")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings()

    assert settings.port == 9090
    assert settings.session_lifetime_hours == 2
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]
