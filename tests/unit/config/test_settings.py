"""Unit tests for LoaderSettings and the cached config entry points."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stageconf.config import get_config, load_config, reload_config
from stageconf.config.models import StageEnvironment
from stageconf.config.settings import LoaderSettings
from stageconf.errors import FileReadError
from stageconf.params import InMemoryParameterStore


class TestLoaderSettings:
    """Tests for LoaderSettings model."""

    def test_default_values(self) -> None:
        """Settings have sensible defaults."""
        settings = LoaderSettings()
        assert settings.defaults_file is None
        assert settings.ssm_enabled is True
        assert settings.ssm_endpoint_url is None
        assert settings.param_name_segment == 3
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """STAGECONF_* variables configure the loader."""
        monkeypatch.setenv("STAGECONF_DEFAULTS_FILE", "/etc/svc/defaults.yaml")
        monkeypatch.setenv("STAGECONF_SSM_ENABLED", "false")
        monkeypatch.setenv("STAGECONF_SSM_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.setenv("STAGECONF_PARAM_NAME_SEGMENT", "4")
        monkeypatch.setenv("STAGECONF_LOG_LEVEL", "DEBUG")

        settings = LoaderSettings()
        assert settings.defaults_file == Path("/etc/svc/defaults.yaml")
        assert settings.ssm_enabled is False
        assert settings.ssm_endpoint_url == "http://localhost:4566"
        assert settings.param_name_segment == 4
        assert settings.log_level == "DEBUG"

    def test_field_named_variables_not_read(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Service field variables never configure the loader."""
        monkeypatch.setenv("Stage", "prod")
        monkeypatch.setenv("SSM_ENABLED", "false")

        assert LoaderSettings().ssm_enabled is True

    def test_invalid_segment_rejected(self) -> None:
        """Segment index must be positive."""
        with pytest.raises(ValidationError):
            LoaderSettings(param_name_segment=0)

    def test_invalid_log_level_rejected(self) -> None:
        """Only known log levels are accepted."""
        with pytest.raises(ValidationError):
            LoaderSettings(log_level="VERBOSE")

    def test_resolve_defaults_file_uses_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The fallback path is resolved at call time."""
        monkeypatch.chdir(tmp_path)
        assert LoaderSettings().resolve_defaults_file() == tmp_path / "defaults.yaml"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_final_config(self, write_defaults: Callable[..., Path]) -> None:
        """load_config runs a full resolution."""
        config = load_config(
            write_defaults(stage="prod"),
            env={},
            store=InMemoryParameterStore({"/prod/myapp/S3Bucket": "my-bucket"}),
        )
        assert config.stage is StageEnvironment.PROD
        assert config.s3_bucket == "my-bucket"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing defaults file raises FileReadError."""
        with pytest.raises(FileReadError):
            load_config(tmp_path / "nope.yaml", env={}, store=InMemoryParameterStore())


class TestGetConfig:
    """Tests for get_config and reload_config."""

    @pytest.fixture
    def offline(
        self, write_defaults: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> Path:
        """Point the loader at a temp defaults file with SSM disabled."""
        path = write_defaults(stage="dev")
        monkeypatch.setenv("STAGECONF_DEFAULTS_FILE", str(path))
        monkeypatch.setenv("STAGECONF_SSM_ENABLED", "false")
        return path

    def test_returns_config(self, offline: Path) -> None:
        """get_config resolves from loader settings."""
        config = get_config()
        assert config.stage is StageEnvironment.DEV
        assert config.s3_bucket == "default-bucket"

    def test_config_cached(self, offline: Path) -> None:
        """get_config returns the cached instance."""
        assert get_config() is get_config()

    def test_reload_config_clears_cache(
        self, offline: Path, write_defaults: Callable[..., Path]
    ) -> None:
        """reload_config picks up file changes."""
        first = get_config()
        assert first.stage is StageEnvironment.DEV

        write_defaults(stage="test")

        second = reload_config()
        assert second is not first
        assert second.stage is StageEnvironment.TEST

    def test_configures_logging(self, offline: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Logging is set up from loader settings."""
        monkeypatch.setenv("STAGECONF_LOG_FORMAT", "console")

        with patch("stageconf.config.setup_logging") as setup:
            get_config()

        setup.assert_called_once_with(level="INFO", format="console")
