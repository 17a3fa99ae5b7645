import pytest

from bookserver.config import Settings, load_settings, normalize_log_level
from bookserver.errors import ConfigError


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({"BOOKSERVER_JWT_SECRET": "s3cret"})
        assert settings.jwt_secret == "s3cret"
        assert settings.jwt_audience == "bookserver"
        assert settings.token_ttl_minutes == 20
        assert settings.cookie_name == "jwt"
        assert settings.cookie_secure is False
        assert settings.require_session is False
        assert settings.seed_demo is False
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = load_settings({
            "BOOKSERVER_JWT_SECRET": "s3cret",
            "BOOKSERVER_JWT_AUDIENCE": "library",
            "BOOKSERVER_TOKEN_TTL_MINUTES": "5",
            "BOOKSERVER_COOKIE_SECURE": "true",
            "BOOKSERVER_REQUIRE_SESSION": "1",
            "PORT": "9000",
            "LOG_LEVEL": "debug",
        })
        assert settings.jwt_audience == "library"
        assert settings.token_ttl_minutes == 5
        assert settings.cookie_secure is True
        assert settings.require_session is True
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("environ", [{}, {"BOOKSERVER_JWT_SECRET": "   "}])
    def test_missing_secret(self, environ):
        with pytest.raises(ConfigError):
            load_settings(environ)

    def test_bad_ttl(self):
        with pytest.raises(ConfigError):
            load_settings({"BOOKSERVER_JWT_SECRET": "s", "BOOKSERVER_TOKEN_TTL_MINUTES": "soon"})

    def test_non_positive_ttl(self):
        with pytest.raises(ConfigError):
            load_settings({"BOOKSERVER_JWT_SECRET": "s", "BOOKSERVER_TOKEN_TTL_MINUTES": "0"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("BOOKSERVER_JWT_SECRET", "from-env")
        monkeypatch.setenv("PORT", "8181")
        settings = load_settings()
        assert settings.jwt_secret == "from-env"
        assert settings.port == 8181


def test_invalid_log_level_falls_back():
    assert normalize_log_level("chatty") == "INFO"
    assert normalize_log_level(None) == "INFO"
    assert normalize_log_level("warning") == "WARNING"


def test_settings_requires_secret():
    with pytest.raises(ValueError):
        Settings(jwt_secret="")
