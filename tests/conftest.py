"""Shared test fixtures for the stageconf test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from stageconf.config.models import OVERRIDE_FIELDS

DEFAULTS_YAML = """\
AWSRegion: us-east-1
S3Bucket: default-bucket
S3FilePrefix: uploads/
CognitoClientID: client-123
CognitoPoolID: us-east-1_pool
CognitoRegion: us-east-1
APIVersion: "2012-08-10"
Region: us-west-2
GraphqlURI: http://localhost:4000/graphql
SsmPath: myapp
Stage: {stage}
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove field-named and STAGECONF_* variables from the environment."""
    for name in OVERRIDE_FIELDS:
        monkeypatch.delenv(name, raising=False)
    for name in (
        "STAGECONF_DEFAULTS_FILE",
        "STAGECONF_SSM_ENABLED",
        "STAGECONF_SSM_ENDPOINT_URL",
        "STAGECONF_PARAM_NAME_SEGMENT",
        "STAGECONF_LOG_LEVEL",
        "STAGECONF_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    """Clear the config cache before and after each test."""
    from stageconf.config import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))


@pytest.fixture
def write_defaults(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing a defaults.yaml into a temporary directory.

    Usage:
        def test_something(write_defaults):
            path = write_defaults(stage="prod")
            path = write_defaults(content="Stage: dev\\n")
    """

    def _write(stage: str = "dev", content: str | None = None) -> Path:
        path = tmp_path / "defaults.yaml"
        path.write_text(content if content is not None else DEFAULTS_YAML.format(stage=stage))
        return path

    return _write
