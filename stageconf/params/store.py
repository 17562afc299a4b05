"""ParameterStore abstract interface."""

from abc import ABC, abstractmethod

from stageconf.params.models import Parameter


class ParameterStore(ABC):
    """Abstract interface for a hierarchical parameter store."""

    @abstractmethod
    def get_parameters_by_path(self, path: str) -> list[Parameter]:
        """Get all parameters directly under a path, decrypted.

        Raises:
            RemoteConnectionError: If the store can't be queried
        """
        pass
