# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ExecutionRequest(BaseModel):
    """A single submission from the source field.

    Attributes:
        source: The source text exactly as typed by the user.
    """

    model_config = ConfigDict(frozen=True)

    source: str


class ExecutionResult(BaseModel):
    """Uniform outcome of a run, regardless of the backend that produced it.

    Attributes:
        output: Raw text produced by the backend. On failure this is the
            backend's error message.
        succeeded: Transport-level success. Always True for the local runtime,
            whose failures surface as the output text itself.
    """

    model_config = ConfigDict(frozen=True)

    output: str
    succeeded: bool


class RuntimeReadiness(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

    @property
    def settled(self) -> bool:
        return self in (RuntimeReadiness.READY, RuntimeReadiness.FAILED)


class ResultState(str, Enum):
    """States of the result field."""

    IDLE = "idle"
    WAITING = "waiting"
    SUCCESS = "success"
    FAILURE = "failure"


class ResultStyle(str, Enum):
    DEFAULT = "unset"
    FAILURE = "red"
