"""Parameter store data models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ParameterType = Literal["String", "StringList", "SecureString"]


class Parameter(BaseModel):
    """A single parameter returned by a parameter store.

    SecureString values are already decrypted.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Full hierarchical name, e.g. /prod/myapp/S3Bucket")
    value: str = Field(description="Parameter value")
    type: ParameterType = Field(default="String", description="Parameter type")

    def segment(self, index: int) -> str | None:
        """Get a '/'-separated segment of the name, or None if out of range.

        The leading '/' yields an empty first segment, so for
        ``/prod/myapp/S3Bucket`` index 3 is ``S3Bucket``.
        """
        parts = self.name.split("/")
        if index >= len(parts):
            return None
        return parts[index]
