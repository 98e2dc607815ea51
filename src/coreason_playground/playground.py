# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import httpx

from coreason_playground.backend import PlaygroundBackend
from coreason_playground.config import PlaygroundConfig
from coreason_playground.controller import PlaygroundController
from coreason_playground.factory import BackendFactory
from coreason_playground.integrations.audit import AuditLogger
from coreason_playground.models import ExecutionResult
from coreason_playground.utils.logger import logger
from coreason_playground.views import PlaygroundView, StateView


class PlaygroundAsync:
    """Async-native playground session (the composition root).

    Selects the backend once from configuration and wires it to the controller.
    """

    def __init__(
        self,
        config: PlaygroundConfig | None = None,
        client: httpx.AsyncClient | None = None,
        view: PlaygroundView | None = None,
    ):
        """Initializes the PlaygroundAsync session.

        Args:
            config: Configuration for the playground.
            client: Optional httpx.AsyncClient for connection pooling (remote mode).
            view: Where the form is rendered. Defaults to an in-memory StateView.
        """
        self.config = config or PlaygroundConfig()
        self.view: PlaygroundView = view or StateView()
        self.backend: PlaygroundBackend = BackendFactory.get_backend(self.config, client)
        self.controller = PlaygroundController(
            self.backend,
            self.view,
            waiting_text=self.config.waiting_text,
            initializing_text=self.config.initializing_text,
            auditor=AuditLogger(enabled=self.config.enable_audit_logging),
        )

    async def __aenter__(self) -> "PlaygroundAsync":
        """Starts the backend and populates the form."""
        logger.info(f"Starting playground in {self.backend.mode} mode")
        await self.controller.initialize()
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Releases the backend's resources."""
        await self.backend.close()

    async def submit(self, source: str) -> ExecutionResult | None:
        """Submits source through the controller.

        Args:
            source: The source text to run.

        Returns:
            ExecutionResult | None: The rendered result, or None if nothing was rendered.
        """
        return await self.controller.submit(source)

    async def select(self, identifier: str) -> None:
        """Loads an example into the source field.

        Args:
            identifier: The example identifier.
        """
        await self.controller.select(identifier)

    @property
    def identifiers(self) -> list[str]:
        return self.controller.identifiers
