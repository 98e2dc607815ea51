# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from abc import ABC, abstractmethod
from typing import ClassVar, Literal

from coreason_playground.models import ExecutionResult


class PlaygroundBackend(ABC):
    """
    Abstract base class for playground backends (local runtime, remote service).
    Follows the Strategy Pattern; one is chosen at composition time.
    """

    mode: ClassVar[Literal["local", "remote"]]

    # True when fetch_example completes without suspending, so the controller
    # can skip the waiting placeholder in the source field.
    immediate_catalog: ClassVar[bool] = False

    @abstractmethod
    async def start(self) -> None:
        """Prepare the backend for use.

        Raises:
            RuntimeLoadError: If a local runtime fails to load.
        """
        pass  # pragma: no cover

    @property
    @abstractmethod
    def ready(self) -> bool:
        """Whether ``run`` may be invoked now."""
        pass  # pragma: no cover

    @abstractmethod
    async def list_examples(self) -> list[str]:
        """List example identifiers, unsorted.

        Raises:
            TransportError: If the catalog could not be reached.
            CatalogError: If the catalog answered with an error.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def fetch_example(self, identifier: str) -> str:
        """Return the source text of one example.

        Raises:
            TransportError: If the catalog could not be reached.
            CatalogError: If the catalog answered with an error.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def run(self, source: str) -> ExecutionResult:
        """Run source and return the uniform result.

        Args:
            source: The source text to execute.

        Returns:
            ExecutionResult: Output text and the success flag.

        Raises:
            RuntimeNotReadyError: If the local runtime is not ready.
            TransportError: If the execution service could not be reached.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by the backend."""
        pass  # pragma: no cover
