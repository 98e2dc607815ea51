# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

"""
coreason-playground
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .backend import PlaygroundBackend
from .backends.local import LocalBackend
from .backends.remote import RemoteBackend
from .config import PlaygroundConfig
from .controller import PlaygroundController
from .factory import BackendFactory
from .models import ExampleCatalog, ExecutionRequest, ExecutionResult, RuntimeReadiness
from .playground import PlaygroundAsync
from .runtime.loader import RuntimeLoader
from .views import PlaygroundView, StateView

__all__ = [
    "PlaygroundBackend",
    "LocalBackend",
    "RemoteBackend",
    "PlaygroundConfig",
    "PlaygroundController",
    "BackendFactory",
    "ExampleCatalog",
    "ExecutionRequest",
    "ExecutionResult",
    "RuntimeReadiness",
    "PlaygroundAsync",
    "RuntimeLoader",
    "PlaygroundView",
    "StateView",
]
