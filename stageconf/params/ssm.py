"""AWS Systems Manager Parameter Store implementation of ParameterStore."""

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from stageconf.errors import RemoteConnectionError
from stageconf.observability.logging import get_logger
from stageconf.params.models import Parameter
from stageconf.params.store import ParameterStore

logger = get_logger(__name__)


class SSMParameterStore(ParameterStore):
    """ParameterStore backed by SSM GetParametersByPath.

    Values are always requested with decryption. All result pages are
    followed, so the call returns every parameter under the path.
    """

    def __init__(self, client: Any) -> None:
        """Wrap an existing boto3 SSM client."""
        self._client = client

    @classmethod
    def from_region(
        cls,
        region: str | None,
        endpoint_url: str | None = None,
    ) -> "SSMParameterStore":
        """Create a store with a new SSM client.

        Args:
            region: AWS region; empty falls back to the boto3 default chain
            endpoint_url: Optional custom endpoint

        Raises:
            RemoteConnectionError: If the client can't be created
        """
        try:
            client = boto3.client(
                "ssm",
                region_name=region or None,
                endpoint_url=endpoint_url,
            )
        except BotoCoreError as e:
            raise RemoteConnectionError(
                f"Could not create SSM session for region {region!r}: {e}"
            ) from e
        return cls(client)

    def get_parameters_by_path(self, path: str) -> list[Parameter]:
        """Get all parameters directly under a path, decrypted."""
        parameters: list[Parameter] = []
        paginator = self._client.get_paginator("get_parameters_by_path")
        try:
            for page in paginator.paginate(Path=path, WithDecryption=True):
                for item in page.get("Parameters", []):
                    parameters.append(
                        Parameter(
                            name=item["Name"],
                            value=item["Value"],
                            type=item.get("Type", "String"),
                        )
                    )
        except (BotoCoreError, ClientError) as e:
            raise RemoteConnectionError(
                f"Failed to fetch SSM parameters under {path}: {e}"
            ) from e

        logger.debug("ssm_query_completed", path=path, count=len(parameters))
        return parameters
