"""Settings controlling how configuration is resolved."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

DEFAULT_FILE_NAME = "defaults.yaml"


class LoaderSettings(BaseSettings):
    """Loader behaviour, read from STAGECONF_* environment variables.

    These settings configure the resolver itself. They are separate from the
    service configuration it resolves, and the prefix keeps them from ever
    matching a service field name.
    """

    model_config = SettingsConfigDict(
        env_prefix="STAGECONF_",
        case_sensitive=False,
        extra="ignore",
    )

    defaults_file: Path | None = Field(
        default=None,
        description="Path to the YAML defaults file (default: ./defaults.yaml)",
    )
    ssm_enabled: bool = Field(
        default=True,
        description="Fetch remote parameters from SSM Parameter Store",
    )
    ssm_endpoint_url: str | None = Field(
        default=None,
        description="Custom SSM endpoint, e.g. for localstack",
    )
    param_name_segment: int = Field(
        default=3,
        ge=1,
        description="Index of the '/'-separated parameter name segment used as field name",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="json", description="Log output format")

    def resolve_defaults_file(self) -> Path:
        """Return the defaults file path, falling back to the working directory."""
        if self.defaults_file is not None:
            return self.defaults_file
        return Path.cwd() / DEFAULT_FILE_NAME
