"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from neo_admin.common.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_format_string,
    get_log_level_from_verbosity,
)
from neo_admin.common.config.settings import Settings


class TestSettings:
    """Test settings normalization."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api/v1"
        assert settings.db_schema == "admin"
        assert settings.default_page_limit == 5
        assert settings.max_page_limit == 100

    def test_environment_is_lowercased(self):
        settings = Settings(_env_file=None, environment=" Production ")

        assert settings.environment == "production"
        assert settings.is_production

    def test_api_prefix_normalized(self):
        assert Settings(_env_file=None, api_prefix="api/v2/").api_prefix == "/api/v2"

    def test_invalid_schema_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, db_schema="admin; DROP TABLE users")

    def test_asyncpg_dsn_strips_driver(self):
        settings = Settings(_env_file=None, database_url="postgresql+asyncpg://u:p@db:5432/admin")

        assert settings.asyncpg_dsn == "postgresql://u:p@db:5432/admin"

    def test_pool_config(self):
        settings = Settings(_env_file=None, db_pool_min_size=1, db_pool_max_size=4)

        assert settings.get_pool_config() == {
            "min_size": 1,
            "max_size": 4,
            "command_timeout": 60.0,
        }


class TestLoggingConfig:
    """Test dictConfig generation."""

    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("loud", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_unknown_format_falls_back_to_simple(self):
        assert get_format_string("xml") == FORMAT_STRINGS[LogFormat.SIMPLE]

    def test_sql_logging_disabled_quiets_asyncpg(self):
        config = LoggingConfig.build_config(verbosity="DEBUG")

        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["asyncpg"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"

    def test_sql_logging_enabled(self):
        config = LoggingConfig.build_config(enable_sql_logging=True)

        assert "asyncpg" not in config["loggers"]

    def test_configure_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
        monkeypatch.setenv("LOG_FORMAT", "detailed")

        LoggingConfig.configure()

        assert logging.getLogger().level == logging.INFO
