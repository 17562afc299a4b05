"""In-memory implementation of ParameterStore."""

from stageconf.params.models import Parameter, ParameterType
from stageconf.params.store import ParameterStore


class InMemoryParameterStore(ParameterStore):
    """In-memory implementation of ParameterStore for testing and development.

    Mirrors a non-recursive GetParametersByPath: only parameters one level
    below the requested path are returned.
    """

    def __init__(self, parameters: dict[str, str] | None = None) -> None:
        """Initialize storage, optionally from a name -> value mapping."""
        self._parameters: dict[str, Parameter] = {}
        self.queried_paths: list[str] = []
        for name, value in (parameters or {}).items():
            self.put(name, value)

    def put(self, name: str, value: str, type: ParameterType = "String") -> None:
        """Add or replace a parameter."""
        self._parameters[name] = Parameter(name=name, value=value, type=type)

    def get_parameters_by_path(self, path: str) -> list[Parameter]:
        """Get parameters directly under a path."""
        self.queried_paths.append(path)
        prefix = path.rstrip("/") + "/"
        results = []
        for name, parameter in self._parameters.items():
            if not name.startswith(prefix):
                continue
            remainder = name[len(prefix):]
            if remainder and "/" not in remainder:
                results.append(parameter)
        return results
