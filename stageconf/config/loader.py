"""YAML defaults loader and environment variable overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stageconf.config.models import OVERRIDE_FIELDS, WorkingDefaults
from stageconf.errors import FileReadError, ParseError

KEPT_IMPLICIT_TAGS = frozenset({"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"})


class StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as written.

    Only null and merge keys are resolved implicitly; ``0x10``, ``yes`` or ``2020-01-01``
    load as the strings they are spelled as.
    """


StringScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml(file_path: Path) -> dict[str, Any]:
    """Load a YAML file and return its top-level mapping.

    An empty document yields an empty dictionary.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the YAML data

    Raises:
        FileReadError: If the file doesn't exist or can't be read
        ParseError: If the YAML syntax is invalid or the document is not a mapping
    """
    try:
        with file_path.open("rb") as f:
            content = f.read()
    except OSError as e:
        raise FileReadError(
            f"Defaults file not readable: {file_path}", path=str(file_path)
        ) from e

    try:
        data = yaml.load(content, Loader=StringScalarLoader)  # noqa: S506
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"Defaults file {file_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def load_defaults(file_path: Path) -> WorkingDefaults:
    """Read the defaults file into a WorkingDefaults record.

    Raises:
        FileReadError: If the file doesn't exist or can't be read
        ParseError: If the content is not a valid defaults document
    """
    data = load_yaml(file_path)
    try:
        return WorkingDefaults.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid defaults in {file_path}: {e}") from e


def apply_env_overrides(
    defaults: WorkingDefaults,
    env: Mapping[str, str] | None = None,
) -> tuple[WorkingDefaults, set[str]]:
    """Override fields with identically named environment variables.

    Empty variables are treated as unset.

    Args:
        defaults: Current working record
        env: Environment mapping (defaults to os.environ)

    Returns:
        The updated record and the names of the overridden fields
    """
    environ = env if env is not None else os.environ
    overrides = {
        name: environ[name] for name in OVERRIDE_FIELDS if environ.get(name)
    }
    return defaults.override(overrides), set(overrides)
