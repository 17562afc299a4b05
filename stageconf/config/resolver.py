"""Layered configuration resolver.

Resolution runs five steps in order, each taking the working record produced
by the previous one:

1. load the YAML defaults file
2. apply environment variable overrides
3. apply remote parameters from the parameter store
4. build the DynamoDB sub-configuration
5. finalize into a FinalConfig

The stage is validated after the defaults load, after any environment
override of Stage, and again when finalizing. The first failing step raises
and nothing after it runs.
"""

import os
from collections.abc import Callable, Mapping
from pathlib import Path

from stageconf.config.loader import apply_env_overrides, load_defaults
from stageconf.config.models import (
    OVERRIDE_FIELDS,
    STAGE_FIELD,
    DynamoConfig,
    FinalConfig,
    StageEnvironment,
    WorkingDefaults,
    parse_stage,
)
from stageconf.config.settings import LoaderSettings
from stageconf.observability.logging import get_logger
from stageconf.params import Parameter, ParameterStore, SSMParameterStore

logger = get_logger(__name__)

StoreFactory = Callable[[WorkingDefaults], ParameterStore]


def build_param_path(stage: StageEnvironment, ssm_path: str) -> str:
    """Build the parameter store path for a stage, e.g. ``/prod/myapp``."""
    return "/".join(["", stage.value, ssm_path])


def map_parameters(parameters: list[Parameter], segment: int = 3) -> dict[str, str]:
    """Map parameters to override names by one segment of their name.

    Parameters whose name is too short or whose segment is not a known
    field are dropped. Later parameters win on duplicate names.

    Args:
        parameters: Parameters returned by the store
        segment: Index of the '/'-separated name segment to match

    Returns:
        Override name -> value
    """
    values: dict[str, str] = {}
    for parameter in parameters:
        name = parameter.segment(segment)
        if name is None:
            logger.warning(
                "ssm_parameter_name_too_short",
                parameter=parameter.name,
                segment=segment,
            )
            continue
        if name not in OVERRIDE_FIELDS:
            logger.debug("ssm_parameter_ignored", parameter=parameter.name)
            continue
        values[name] = parameter.value
    return values


class ConfigResolver:
    """Resolves a FinalConfig from defaults file, environment and parameter store.

    A resolver holds no working state between steps; each step takes and
    returns a WorkingDefaults record, so the steps can also be run one at a
    time.
    """

    def __init__(
        self,
        defaults_file: str | os.PathLike[str] | None = None,
        *,
        env: Mapping[str, str] | None = None,
        store: ParameterStore | None = None,
        store_factory: StoreFactory | None = None,
        settings: LoaderSettings | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            defaults_file: YAML defaults path; falls back to loader settings,
                then ./defaults.yaml
            env: Environment mapping for overrides (defaults to os.environ)
            store: Parameter store to query instead of SSM
            store_factory: Builds the parameter store from the working record
                once environment overrides are applied
            settings: Loader settings (read from STAGECONF_* when omitted)
        """
        self._settings = settings if settings is not None else LoaderSettings()
        if defaults_file is not None:
            self._defaults_file = Path(defaults_file)
        else:
            self._defaults_file = self._settings.resolve_defaults_file()
        self._env = env
        self._store = store
        self._store_factory = store_factory or self._ssm_store

    @property
    def defaults_file(self) -> Path:
        """Path of the YAML defaults file."""
        return self._defaults_file

    def resolve(self) -> FinalConfig:
        """Run every step and return the validated configuration.

        Raises:
            FileReadError: If the defaults file can't be read
            ParseError: If the defaults file is malformed
            InvalidStageError: If the stage is invalid after any step
            RemoteConnectionError: If the parameter store can't be queried
        """
        defaults, stage = self.load_defaults()
        defaults, stage = self.apply_env(defaults, stage)
        defaults = self.apply_remote_params(defaults, stage)
        dynamo = self.build_dynamo(defaults)
        config = self.finalize(defaults, dynamo)
        logger.info("config_resolved", stage=config.stage.value)
        return config

    def load_defaults(self) -> tuple[WorkingDefaults, StageEnvironment]:
        """Load the defaults file and validate its stage."""
        defaults = load_defaults(self._defaults_file)
        stage = parse_stage(defaults.stage)
        logger.info(
            "defaults_loaded",
            path=str(self._defaults_file),
            stage=stage.value,
        )
        return defaults, stage

    def apply_env(
        self,
        defaults: WorkingDefaults,
        stage: StageEnvironment,
    ) -> tuple[WorkingDefaults, StageEnvironment]:
        """Apply environment overrides, re-validating Stage if it changed."""
        defaults, overridden = apply_env_overrides(defaults, self._env)
        if STAGE_FIELD in overridden:
            stage = parse_stage(defaults.stage)
        if overridden:
            logger.info("env_overrides_applied", fields=sorted(overridden))
        return defaults, stage

    def apply_remote_params(
        self,
        defaults: WorkingDefaults,
        stage: StageEnvironment,
    ) -> WorkingDefaults:
        """Override fields from parameters under ``/<stage>/<SsmPath>``.

        No parameters under the path is not an error; the record is
        returned unchanged.
        """
        if not self._settings.ssm_enabled and self._store is None:
            logger.info("ssm_disabled")
            return defaults

        path = build_param_path(stage, defaults.ssm_path)
        store = self._store if self._store is not None else self._store_factory(defaults)
        parameters = store.get_parameters_by_path(path)
        logger.info("ssm_parameters_fetched", path=path, count=len(parameters))
        if not parameters:
            return defaults

        values = map_parameters(parameters, self._settings.param_name_segment)
        if values:
            logger.info("ssm_overrides_applied", fields=sorted(values))
        return defaults.override(values)

    def build_dynamo(self, defaults: WorkingDefaults) -> DynamoConfig:
        """Build the DynamoDB connection descriptor."""
        return DynamoConfig(
            api_version=defaults.dynamo_api_version,
            region=defaults.dynamo_region,
        )

    def finalize(self, defaults: WorkingDefaults, dynamo: DynamoConfig) -> FinalConfig:
        """Copy resolved fields into a FinalConfig and re-validate the stage."""
        return FinalConfig(
            aws_region=defaults.aws_region,
            cognito_client_id=defaults.cognito_client_id,
            cognito_pool_id=defaults.cognito_pool_id,
            cognito_region=defaults.cognito_region,
            graphql_uri=defaults.graphql_uri,
            s3_bucket=defaults.s3_bucket,
            s3_file_prefix=defaults.s3_file_prefix,
            stage=parse_stage(defaults.stage),
            dynamo=dynamo,
        )

    def _ssm_store(self, defaults: WorkingDefaults) -> ParameterStore:
        return SSMParameterStore.from_region(
            defaults.aws_region,
            endpoint_url=self._settings.ssm_endpoint_url,
        )
