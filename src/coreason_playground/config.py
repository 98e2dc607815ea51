# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_EXAMPLES_DIR = Path(__file__).resolve().parent / "examples"


def _default_interpreter() -> list[str]:
    return [sys.executable, "-I", "-"]


class PlaygroundConfig(BaseSettings):
    """
    Configuration for the playground client and its execution service.
    """

    # Deployment-time backend choice; never consulted outside the factory.
    mode: Literal["local", "remote"] = "remote"

    # Remote mode
    base_url: str = "http://127.0.0.1:3826"
    request_timeout: float = 30.0

    # Local mode
    local_runtime: str = "coreason_playground.runtimes.python"

    # Controller placeholders
    waiting_text: str = "Waiting..."
    initializing_text: str = "Initializing..."

    enable_audit_logging: bool = True

    # Execution service
    host: str = "127.0.0.1"
    port: int = 3826
    examples_dir: Path | None = None
    example_suffix: str = ".py"
    interpreter: list[str] = Field(default_factory=_default_interpreter)
    execution_timeout: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="COREASON_PLAYGROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def resolved_examples_dir(self) -> Path:
        return self.examples_dir or BUNDLED_EXAMPLES_DIR
