import pytest
from pydantic import ValidationError

from embedvideo.config.embedvideo.static import embedvideo_config_from_settings
from embedvideo.config.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    config = embedvideo_config_from_settings(settings)
    assert config.enabled_services is None
    assert config.require_consent is False
    assert config.fetch_external_thumbnails is True
    assert config.server_name == "localhost"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EMBEDVIDEO_ENABLED_SERVICES", '["youtube", "vimeo"]')
    monkeypatch.setenv("EMBEDVIDEO_REQUIRE_CONSENT", "true")
    monkeypatch.setenv("SERVER_NAME", "wiki.example.org")
    monkeypatch.setenv("PORT", "9090")
    settings = Settings(_env_file=None)
    config = embedvideo_config_from_settings(settings)
    assert settings.port == 9090
    assert config.enabled_services == ["youtube", "vimeo"]
    assert config.require_consent is True
    assert config.server_name == "wiki.example.org"


def test_port_out_of_range_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
