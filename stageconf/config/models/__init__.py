"""Configuration model exports.

    from stageconf.config.models import FinalConfig, StageEnvironment
"""

from stageconf.config.models.defaults import (
    OVERRIDE_FIELDS,
    STAGE_FIELD,
    WorkingDefaults,
)
from stageconf.config.models.final import DynamoConfig, FinalConfig
from stageconf.config.models.stage import (
    STAGE_ALIASES,
    StageEnvironment,
    parse_stage,
)

__all__ = [
    "OVERRIDE_FIELDS",
    "STAGE_ALIASES",
    "STAGE_FIELD",
    "DynamoConfig",
    "FinalConfig",
    "StageEnvironment",
    "WorkingDefaults",
    "parse_stage",
]
