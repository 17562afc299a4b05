"""Published configuration models."""

from pydantic import BaseModel, ConfigDict, Field

from stageconf.config.models.stage import StageEnvironment


class DynamoConfig(BaseModel):
    """DynamoDB connection descriptor."""

    model_config = ConfigDict(frozen=True)

    api_version: str = Field(default="", description="DynamoDB API version")
    region: str = Field(default="", description="DynamoDB region")


class FinalConfig(BaseModel):
    """Validated configuration snapshot exposed to the host application."""

    model_config = ConfigDict(frozen=True)

    aws_region: str = Field(description="AWS region")
    s3_bucket: str = Field(description="S3 bucket name")
    s3_file_prefix: str = Field(description="Key prefix for S3 objects")
    cognito_client_id: str = Field(description="Cognito app client ID")
    cognito_pool_id: str = Field(description="Cognito user pool ID")
    cognito_region: str = Field(description="Cognito region")
    graphql_uri: str = Field(description="GraphQL endpoint URI")
    stage: StageEnvironment = Field(description="Validated deployment stage")
    dynamo: DynamoConfig = Field(description="DynamoDB connection descriptor")
