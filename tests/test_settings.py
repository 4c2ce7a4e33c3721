"""
tests/test_settings.py
Loader settings, exceptions and logger setup.
"""

import logging

import pytest
from pydantic import ValidationError

from localenv.config.settings import DEFAULT_FILES, LoaderConfig
from localenv.core.exceptions import ConfigurationError, EnvironmentReadError, LocalEnvironmentException
from localenv.core.logging import get_project_logger


class TestLoaderConfig:
    """Defaults, validation and environment overrides."""

    def test_defaults(self):
        config = LoaderConfig()
        assert config.default_files == DEFAULT_FILES
        assert config.separator == "_"
        assert config.encoding == "utf-8"

    def test_default_files_not_shared(self):
        config = LoaderConfig()
        config.default_files.append("extra.json")
        assert LoaderConfig().default_files == ["env.json", ".env"]

    def test_file_names_trimmed(self):
        config = LoaderConfig(default_files=[" a.json ", "", "b.env"])
        assert config.default_files == ["a.json", "b.env"]

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            LoaderConfig(separator="")
        with pytest.raises(ValidationError):
            LoaderConfig(encoding="no-such-codec")
        with pytest.raises(ValidationError):
            LoaderConfig(default_files=[])

    def test_from_env_defaults(self):
        assert LoaderConfig.from_env() == LoaderConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LOCALENV_FILES", "base.json, local.env")
        monkeypatch.setenv("LOCALENV_SEPARATOR", ".")
        monkeypatch.setenv("LOCALENV_ENCODING", "latin-1")

        config = LoaderConfig.from_env()

        assert config.default_files == ["base.json", "local.env"]
        assert config.separator == "."
        assert config.encoding == "latin-1"

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("LOCALENV_ENCODING", "no-such-codec")

        with pytest.raises(ConfigurationError) as exc:
            LoaderConfig.from_env()
        assert exc.value.error_code == "CONFIG_ERROR"


class TestExceptions:
    """Error formatting and hierarchy."""

    def test_str_with_code(self):
        error = EnvironmentReadError("cannot read", error_code="ENV_READ_ERROR")
        assert str(error) == "[ENV_READ_ERROR] cannot read"

    def test_str_without_code(self):
        assert str(LocalEnvironmentException("plain")) == "plain"

    def test_details_default(self):
        assert LocalEnvironmentException("x").details == {}

    def test_hierarchy(self):
        assert issubclass(EnvironmentReadError, LocalEnvironmentException)
        assert issubclass(ConfigurationError, LocalEnvironmentException)


class TestLogging:
    """Project logger configuration."""

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOCALENV_LOG_LEVEL", "debug")
        logger = get_project_logger("localenv.tests.level")
        assert logger.level == logging.DEBUG

    def test_configured_once(self):
        logger = get_project_logger("localenv.tests.once")
        handlers = list(logger.handlers)
        assert get_project_logger("localenv.tests.once").handlers == handlers

    def test_console_only_by_default(self, monkeypatch):
        monkeypatch.delenv("LOCALENV_LOG_FILE", raising=False)
        monkeypatch.delenv("LOCALENV_LOG_LEVEL", raising=False)
        logger = get_project_logger("localenv.tests.console")
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path, monkeypatch):
        log_file = tmp_path / "logs" / "localenv.log"
        monkeypatch.setenv("LOCALENV_LOG_FILE", str(log_file))

        logger = get_project_logger("localenv.tests.file")
        logger.warning("written")
        for handler in logger.handlers:
            handler.flush()

        assert "written" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()
