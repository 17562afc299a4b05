"""Working defaults record assembled from the configuration layers."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Override name (environment variable / parameter name) -> attribute name
OVERRIDE_FIELDS: dict[str, str] = {
    "AWSRegion": "aws_region",
    "S3Bucket": "s3_bucket",
    "S3FilePrefix": "s3_file_prefix",
    "CognitoClientID": "cognito_client_id",
    "CognitoPoolID": "cognito_pool_id",
    "CognitoRegion": "cognito_region",
    "DynamoAPIVersion": "dynamo_api_version",
    "DynamoRegion": "dynamo_region",
    "GraphqlURI": "graphql_uri",
    "SsmPath": "ssm_path",
    "Stage": "stage",
}

STAGE_FIELD = "Stage"


class WorkingDefaults(BaseModel):
    """In-progress configuration before finalization.

    Populated from the YAML defaults file (by alias) and then overridden by
    environment variables and remote parameters (by override name, see
    OVERRIDE_FIELDS). Records are immutable; every layer returns a new one.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    aws_region: str = Field(default="", alias="AWSRegion", description="AWS region for SSM")
    s3_bucket: str = Field(default="", alias="S3Bucket", description="S3 bucket name")
    s3_file_prefix: str = Field(
        default="", alias="S3FilePrefix", description="Key prefix for S3 objects"
    )
    cognito_client_id: str = Field(
        default="", alias="CognitoClientID", description="Cognito app client ID"
    )
    cognito_pool_id: str = Field(
        default="", alias="CognitoPoolID", description="Cognito user pool ID"
    )
    cognito_region: str = Field(
        default="", alias="CognitoRegion", description="Cognito region"
    )
    dynamo_api_version: str = Field(
        default="", alias="APIVersion", description="DynamoDB API version"
    )
    dynamo_region: str = Field(default="", alias="Region", description="DynamoDB region")
    graphql_uri: str = Field(default="", alias="GraphqlURI", description="GraphQL endpoint")
    ssm_path: str = Field(
        default="", alias="SsmPath", description="Parameter store subpath below the stage"
    )
    stage: str = Field(default="", alias="Stage", description="Raw deployment stage")

    @field_validator("*", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        """Null YAML values become empty strings."""
        if value is None:
            return ""
        return value

    def override(self, values: Mapping[str, str]) -> "WorkingDefaults":
        """Return a copy with fields replaced by override name.

        Names that are not in OVERRIDE_FIELDS are ignored.
        """
        update = {
            OVERRIDE_FIELDS[name]: value
            for name, value in values.items()
            if name in OVERRIDE_FIELDS
        }
        if not update:
            return self
        return self.model_copy(update=update)
