"""Remote parameter stores.

    from stageconf.params import SSMParameterStore

    store = SSMParameterStore.from_region("eu-west-1")
    params = store.get_parameters_by_path("/prod/myapp")
"""

from stageconf.params.inmemory import InMemoryParameterStore
from stageconf.params.models import Parameter
from stageconf.params.ssm import SSMParameterStore
from stageconf.params.store import ParameterStore

__all__ = [
    "InMemoryParameterStore",
    "Parameter",
    "ParameterStore",
    "SSMParameterStore",
]
