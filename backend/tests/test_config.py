"""Settings — production default, debug toggle, env shorthands."""

from minisite.config import Settings


def test_production_is_default(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_env == "production"
    assert not settings.debug


def test_development_enables_debug():
    assert Settings(app_env="development", _env_file=None).debug


def test_env_shorthands_and_case(monkeypatch):
    monkeypatch.setenv("APP_ENV", "DEV")
    assert Settings(_env_file=None).debug
    monkeypatch.setenv("APP_ENV", "prod")
    assert not Settings(_env_file=None).debug


def test_cookie_defaults():
    settings = Settings(_env_file=None)
    assert settings.session_cookie_name == "minisite_session"
    assert settings.session_ttl_seconds > 0
    assert settings.session_max_entries > 0
