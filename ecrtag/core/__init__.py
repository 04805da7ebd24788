from ._component import Component
from ._decorators import operation
from ._log_helper import configure_logging, warn
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from .data_model import DataModel

__all__ = [
    "Component",
    "DataModel",
    "Operation",
    "Provider",
    "Response",
    "configure_logging",
    "operation",
    "warn",
]
