# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

"""Error taxonomy for the playground.

An execution that ran and failed is not an exception; it is reported as an
``ExecutionResult`` with ``succeeded=False``.
"""


class PlaygroundError(Exception):
    """Base class for all playground errors."""


class TransportError(PlaygroundError):
    """The execution service could not be reached or never answered."""


class RuntimeNotReadyError(PlaygroundError, RuntimeError):
    """The local runtime has not installed its execute entry point."""


class RuntimeLoadError(PlaygroundError, RuntimeError):
    """The local runtime module failed to load or start."""


class InvalidTransitionError(PlaygroundError, RuntimeError):
    """A readiness transition was attempted out of order."""


class CatalogError(PlaygroundError):
    """The example catalog endpoint answered with a non-200 status."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
