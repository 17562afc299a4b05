"""stageconf: layered service configuration from YAML, environment and SSM."""

from stageconf.config import (
    ConfigResolver,
    DynamoConfig,
    FinalConfig,
    StageEnvironment,
    get_config,
    load_config,
    reload_config,
)
from stageconf.errors import (
    ConfigError,
    FileReadError,
    InvalidStageError,
    ParseError,
    RemoteConnectionError,
)

__all__ = [
    "ConfigError",
    "ConfigResolver",
    "DynamoConfig",
    "FileReadError",
    "FinalConfig",
    "InvalidStageError",
    "ParseError",
    "RemoteConnectionError",
    "StageEnvironment",
    "get_config",
    "load_config",
    "reload_config",
]
