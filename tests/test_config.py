from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, settings, validate_settings
from app.main import app


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.parametrize("primary,alternative,expected", [
    ("primary-key", "alt-key", "primary-key"),
    ("", "alt-key", "alt-key"),
    (None, "alt-key", "alt-key"),
    ("primary-key", None, "primary-key"),
    ("", "", ""),
    (None, None, ""),
])
def test_realtor_api_key_first_non_empty_wins(primary, alternative, expected):
    config = make_settings(REALTOR_API_KEY=primary, REALTOR_RAPIDAPI_KEY=alternative)
    assert config.realtor_api_key == expected


def test_defaults(monkeypatch):
    monkeypatch.delenv("UPLOADS_DIR", raising=False)
    config = make_settings()
    assert config.PORT == 4000
    assert config.LISTINGS_CACHE_TTL_SECONDS == 600
    assert config.LISTINGS_DEFAULT_LIMIT == 12
    assert config.UPLOADS_DIR == "uploads"


def test_validate_settings_accepts_development_without_key():
    config = make_settings(ENVIRONMENT="development", REALTOR_API_KEY="", REALTOR_RAPIDAPI_KEY="")
    assert validate_settings(config) is True


def test_validate_settings_requires_key_in_production():
    config = make_settings(ENVIRONMENT="production", REALTOR_API_KEY="", REALTOR_RAPIDAPI_KEY="")
    with pytest.raises(ValueError, match="REALTOR_API_KEY"):
        validate_settings(config)

    config = make_settings(ENVIRONMENT="production", REALTOR_API_KEY="", REALTOR_RAPIDAPI_KEY="alt-key")
    assert validate_settings(config) is True


def test_validate_settings_rejects_negative_ttl():
    config = make_settings(LISTINGS_CACHE_TTL_SECONDS=-1, REALTOR_API_KEY="key")
    with pytest.raises(ValueError, match="LISTINGS_CACHE_TTL_SECONDS"):
        validate_settings(config)


def test_uploads_dir_created_on_startup(tmp_path, monkeypatch):
    uploads_dir = tmp_path / "not-yet" / "uploads"
    assert not uploads_dir.exists()
    monkeypatch.setattr(settings, "UPLOADS_DIR", str(uploads_dir))

    with TestClient(app) as lifespan_client:
        assert lifespan_client.get("/live").status_code == 200
        assert Path(uploads_dir).is_dir()
