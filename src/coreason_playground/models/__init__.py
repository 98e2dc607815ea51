"""
Data models for the playground.
"""

from .catalog import ExampleCatalog, sorted_identifiers
from .execution import ExecutionRequest, ExecutionResult, ResultState, ResultStyle, RuntimeReadiness

__all__ = [
    "ExampleCatalog",
    "ExecutionRequest",
    "ExecutionResult",
    "ResultState",
    "ResultStyle",
    "RuntimeReadiness",
    "sorted_identifiers",
]
