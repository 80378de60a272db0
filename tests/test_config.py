# ==============================================
# Tests for Configuration Management
# ==============================================

import pytest

from contactbook.config import AppConfig, get_config


ENV_VARS = [
    "CONTACTBOOK_CAPACITY",
    "CONTACTBOOK_CODEC_N",
    "CONTACTBOOK_CODEC_E",
    "CONTACTBOOK_CODEC_D",
    "CONTACTBOOK_DATA_FILE",
    "CONTACTBOOK_MAX_BUFFER_BYTES",
]


@pytest.fixture
def clean_env(monkeypatch, reset_config):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.setattr("contactbook.config.load_dotenv", lambda **kwargs: False)


class TestGetConfig:

    def test_defaults(self, clean_env):
        config = get_config()
        assert config.store.capacity == 1000
        assert (config.codec.n, config.codec.e, config.codec.d) == (3233, 17, 2753)
        assert config.persistence.data_file == "contacts.enc"
        assert config.persistence.max_buffer_bytes == 100_000

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("CONTACTBOOK_CAPACITY", "50")
        monkeypatch.setenv("CONTACTBOOK_DATA_FILE", "/tmp/book.enc")
        monkeypatch.setenv("CONTACTBOOK_MAX_BUFFER_BYTES", "2048")

        config = get_config()

        assert config.store.capacity == 50
        assert config.persistence.data_file == "/tmp/book.enc"
        assert config.persistence.max_buffer_bytes == 2048

    def test_singleton(self, clean_env):
        assert get_config() is get_config()

    def test_bad_integer(self, clean_env, monkeypatch):
        monkeypatch.setenv("CONTACTBOOK_CAPACITY", "lots")
        with pytest.raises(ValueError, match="CONTACTBOOK_CAPACITY"):
            get_config()

    def test_app_config_defaults_are_independent(self):
        first, second = AppConfig(), AppConfig()
        first.store.capacity = 1
        assert second.store.capacity == 1000
