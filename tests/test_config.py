"""Tests for configuration loading."""

from classifier_app.config import AppConfig, get_config, set_config


class TestAppConfig:

    def test_defaults(self, monkeypatch):
        for var in ("API_BASE_URL", "API_TIMEOUT_SEC", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        config = AppConfig.from_env()

        assert config.api_base_url == "http://localhost:5000"
        assert config.api_timeout_sec == 30
        assert config.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://classifier.example")
        monkeypatch.setenv("API_TIMEOUT_SEC", "12")
        monkeypatch.setenv("IMAGES_PER_ROW", "3")

        config = AppConfig.from_env()

        assert config.api_base_url == "https://classifier.example"
        assert config.api_timeout_sec == 12
        assert config.images_per_row == 3

    def test_set_config_replaces_global(self):
        original = get_config()
        try:
            custom = AppConfig(api_base_url="http://other")
            set_config(custom)
            assert get_config() is custom
        finally:
            set_config(original)
