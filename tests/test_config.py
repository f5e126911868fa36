"""Tests for the configuration system."""

import pytest

from spendwise_core.config import EngineSettings, SpendwiseConfig, configure_logging
from spendwise_core.exceptions import ConfigurationError


class TestEngineSettings:
    """Test suite for EngineSettings."""

    def test_default_values(self):
        """Defaults reproduce the dashboard's fixed behaviour."""
        settings = EngineSettings()

        assert settings.trend_window_months == 6
        assert settings.palette_size == 10
        assert settings.max_insights == 3
        assert settings.warning_threshold_percent == 80
        assert settings.sentinel_category == "uncategorized"
        assert settings.currency_symbol == "$"

    def test_range_validation(self):
        with pytest.raises(ValueError):
            EngineSettings(trend_window_months=0)

        with pytest.raises(ValueError):
            EngineSettings(palette_size=0)

        with pytest.raises(ValueError):
            EngineSettings(warning_threshold_percent=101)

    def test_sentinel_validation(self):
        """Sentinel category cannot be blank and is stripped."""
        with pytest.raises(ValueError):
            EngineSettings(sentinel_category="   ")

        assert EngineSettings(sentinel_category=" misc ").sentinel_category == "misc"

    def test_env_variables(self, monkeypatch):
        """Settings load from SPENDWISE_ENGINE_ variables."""
        monkeypatch.setenv("SPENDWISE_ENGINE_TREND_WINDOW_MONTHS", "12")
        monkeypatch.setenv("SPENDWISE_ENGINE_CURRENCY_SYMBOL", "£")

        settings = EngineSettings()

        assert settings.trend_window_months == 12
        assert settings.currency_symbol == "£"

    def test_defaults_ignore_environment(self, monkeypatch):
        """defaults() never reads SPENDWISE_ENGINE_ variables."""
        monkeypatch.setenv("SPENDWISE_ENGINE_TREND_WINDOW_MONTHS", "12")
        monkeypatch.setenv("SPENDWISE_ENGINE_PALETTE_SIZE", "zero")

        settings = EngineSettings.defaults()

        assert settings.trend_window_months == 6
        assert settings.palette_size == 10
        assert settings.sentinel_category == "uncategorized"


class TestSpendwiseConfig:
    """Test suite for SpendwiseConfig."""

    def test_default_values(self):
        config = SpendwiseConfig()

        assert config.env == "development"
        assert config.log_level == "INFO"
        assert config.log_format == "console"
        assert isinstance(config.engine, EngineSettings)
        assert config.is_production is False

    def test_normalization(self):
        config = SpendwiseConfig(env=" Production ", log_level="debug", log_format="JSON")

        assert config.env == "production"
        assert config.is_production is True
        assert config.log_level == "DEBUG"
        assert config.is_debug is True
        assert config.log_format == "json"

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            SpendwiseConfig(env="qa")

        with pytest.raises(ValueError):
            SpendwiseConfig(log_level="LOUD")

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("SPENDWISE_ENV", "test")
        monkeypatch.setenv("SPENDWISE_LOG_LEVEL", "warning")

        config = SpendwiseConfig()

        assert config.env == "test"
        assert config.log_level == "WARNING"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_known_formats(self, log_format):
        configure_logging(SpendwiseConfig(log_format=log_format))

    def test_unknown_format_raises(self):
        with pytest.raises(ConfigurationError) as excinfo:
            configure_logging(SpendwiseConfig(log_format="xml"))

        error = excinfo.value
        assert error.setting == "SPENDWISE_LOG_FORMAT"
        assert error.allowed == ("console", "json")
        assert error.details == {
            "setting": "SPENDWISE_LOG_FORMAT",
            "actual": "xml",
            "allowed": ["console", "json"],
        }
        assert "xml" in str(error)
