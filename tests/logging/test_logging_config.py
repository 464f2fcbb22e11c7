"""Tests for logging configuration."""

import os
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import sfc_pipeline.logging.logging_config as logging_config
from sfc_pipeline.logging import get_pipeline_logger, setup_logging
from sfc_pipeline.logging.logging_config import DEFAULT_LOG_LEVELS, LoggingConfig


class TestConfigPath:
    def test_pipeline_env_wins_over_prefect_env(self):
        env = {"SFC_PIPELINE_LOGGING_CONFIG": "/etc/sfc.yml", "PREFECT_LOGGING_SETTINGS_PATH": "/etc/prefect.yml"}
        with patch.dict(os.environ, env, clear=True):
            assert LoggingConfig().config_path == Path("/etc/sfc.yml")

    def test_prefect_env_used_as_fallback(self):
        with patch.dict(os.environ, {"PREFECT_LOGGING_SETTINGS_PATH": "/etc/prefect.yml"}, clear=True):
            assert LoggingConfig().config_path == Path("/etc/prefect.yml")

    def test_explicit_path_wins(self, tmp_path: Path):
        with patch.dict(os.environ, {"SFC_PIPELINE_LOGGING_CONFIG": "/etc/sfc.yml"}, clear=True):
            assert LoggingConfig(tmp_path / "mine.yml").config_path == tmp_path / "mine.yml"

    def test_no_env_means_defaults(self):
        with patch.dict(os.environ, clear=True):
            assert LoggingConfig().config_path is None


class TestLoadConfig:
    def test_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "logging.yml"
        config_file.write_text("version: 1\nloggers:\n  sfc_pipeline:\n    level: DEBUG\n")

        loaded = LoggingConfig(config_file).load_config()

        assert loaded["loggers"]["sfc_pipeline"]["level"] == "DEBUG"

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        loaded = LoggingConfig(tmp_path / "absent.yml").load_config()
        assert loaded["version"] == 1
        assert "sfc_pipeline" in loaded["loggers"]

    def test_default_level_from_env(self):
        with patch.dict(os.environ, {"SFC_PIPELINE_LOG_LEVEL": "WARNING"}, clear=True):
            loaded = LoggingConfig().load_config()
        assert loaded["loggers"]["sfc_pipeline"]["level"] == "WARNING"

    def test_config_is_cached(self, tmp_path: Path):
        config_file = tmp_path / "logging.yml"
        config_file.write_text("version: 1\n")
        config = LoggingConfig(config_file)
        first = config.load_config()
        config_file.write_text("version: 1\ndisable_existing_loggers: true\n")
        assert config.load_config() is first


class TestApply:
    @patch("logging.config.dictConfig")
    def test_applies_dict_config(self, mock_dict_config: Mock):
        LoggingConfig().apply()
        mock_dict_config.assert_called_once()
        assert mock_dict_config.call_args[0][0]["version"] == 1

    @patch("logging.config.dictConfig")
    def test_exports_prefect_level(self, mock_dict_config: Mock):
        with patch.dict(os.environ, clear=True):
            custom = {"version": 1, "loggers": {"prefect": {"level": "ERROR"}}}
            with patch.object(LoggingConfig, "load_config", return_value=custom):
                LoggingConfig().apply()
            assert os.environ["PREFECT_LOGGING_LEVEL"] == "ERROR"


class TestSetupLogging:
    @patch("sfc_pipeline.logging.logging_config.get_logger")
    @patch("sfc_pipeline.logging.logging_config.LoggingConfig.apply")
    def test_level_override_reaches_every_component(self, mock_apply: Mock, mock_get_logger: Mock):
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        with patch.dict(os.environ, {}, clear=False):
            setup_logging(level="DEBUG")
            assert os.environ["PREFECT_LOGGING_LEVEL"] == "DEBUG"

        mock_apply.assert_called_once()
        assert [c.args[0] for c in mock_get_logger.call_args_list] == list(DEFAULT_LOG_LEVELS)
        mock_logger.setLevel.assert_called_with("DEBUG")


class TestGetPipelineLogger:
    @patch("sfc_pipeline.logging.logging_config.setup_logging")
    @patch("sfc_pipeline.logging.logging_config.get_logger")
    def test_configures_on_first_use(self, mock_get_logger: Mock, mock_setup: Mock, monkeypatch):
        monkeypatch.setattr(logging_config, "_logging_config", None)

        get_pipeline_logger("sfc_pipeline.tags")

        mock_setup.assert_called_once()
        mock_get_logger.assert_called_with("sfc_pipeline.tags")

    @patch("sfc_pipeline.logging.logging_config.setup_logging")
    @patch("sfc_pipeline.logging.logging_config.get_logger")
    def test_reuses_existing_config(self, mock_get_logger: Mock, mock_setup: Mock, monkeypatch):
        monkeypatch.setattr(logging_config, "_logging_config", MagicMock())

        get_pipeline_logger("a")
        get_pipeline_logger("b")

        mock_setup.assert_not_called()
        assert mock_get_logger.call_count == 2
