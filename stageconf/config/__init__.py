"""Configuration loading for stageconf.

Configuration is resolved from three layers, lowest priority first:

1. defaults.yaml (bundled defaults)
2. environment variables named exactly like the fields
3. SSM parameters under /<stage>/<SsmPath>

Usage:
    from stageconf.config import get_config

    config = get_config()
    bucket = config.s3_bucket
    stage = config.stage
"""

import os
from collections.abc import Mapping
from functools import lru_cache

from stageconf.config.models import (
    DynamoConfig,
    FinalConfig,
    StageEnvironment,
    WorkingDefaults,
    parse_stage,
)
from stageconf.config.resolver import ConfigResolver
from stageconf.config.settings import LoaderSettings
from stageconf.observability.logging import setup_logging
from stageconf.params import ParameterStore


def load_config(
    defaults_file: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    store: ParameterStore | None = None,
    settings: LoaderSettings | None = None,
) -> FinalConfig:
    """Resolve configuration once.

    Args:
        defaults_file: YAML defaults path (default: ./defaults.yaml)
        env: Environment mapping for overrides (defaults to os.environ)
        store: Parameter store to use instead of SSM
        settings: Loader settings (read from STAGECONF_* when omitted)

    Returns:
        Validated FinalConfig
    """
    resolver = ConfigResolver(defaults_file, env=env, store=store, settings=settings)
    return resolver.resolve()


@lru_cache(maxsize=1)
def get_config() -> FinalConfig:
    """Get the process-wide configuration.

    Logging is configured from the loader settings before resolving. The
    result is cached for the lifetime of the process. Call
    `get_config.cache_clear()` or `reload_config()` to resolve again.

    Returns:
        Validated FinalConfig
    """
    settings = LoaderSettings()
    setup_logging(level=settings.log_level, format=settings.log_format)
    return load_config(settings=settings)


def reload_config() -> FinalConfig:
    """Clear the configuration cache and resolve again.

    Returns:
        Fresh FinalConfig
    """
    get_config.cache_clear()
    return get_config()


__all__ = [
    "ConfigResolver",
    "DynamoConfig",
    "FinalConfig",
    "LoaderSettings",
    "StageEnvironment",
    "WorkingDefaults",
    "get_config",
    "load_config",
    "parse_stage",
    "reload_config",
]
