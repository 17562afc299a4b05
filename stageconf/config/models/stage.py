"""Deployment stage enum and validation."""

from enum import Enum

from stageconf.errors import InvalidStageError


class StageEnvironment(str, Enum):
    """Deployment environment a service runs in.

    - DEV: local and shared development
    - STAGE: pre-production staging
    - TEST: automated test environments
    - PROD: production
    """

    DEV = "dev"
    STAGE = "stage"
    TEST = "test"
    PROD = "prod"


# Accepted literals, aliases included
STAGE_ALIASES: dict[str, StageEnvironment] = {
    "dev": StageEnvironment.DEV,
    "stage": StageEnvironment.STAGE,
    "test": StageEnvironment.TEST,
    "prod": StageEnvironment.PROD,
    "production": StageEnvironment.PROD,
}


def parse_stage(value: str | None) -> StageEnvironment:
    """Map a raw stage string to a StageEnvironment.

    Matching is exact and case-sensitive.

    Args:
        value: Raw stage value from defaults, environment or parameter store

    Returns:
        The matching StageEnvironment

    Raises:
        InvalidStageError: If the value is empty or not a known stage
    """
    stage = STAGE_ALIASES.get(value or "")
    if stage is None:
        raise InvalidStageError(value or "")
    return stage
