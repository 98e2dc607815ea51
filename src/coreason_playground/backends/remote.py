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
from coreason_playground.catalog.remote import RemoteExampleCatalog
from coreason_playground.clients.remote import RemoteExecutionClient
from coreason_playground.models import ExecutionResult
from coreason_playground.utils.logger import logger


class RemoteBackend(PlaygroundBackend):
    """HTTP implementation of the PlaygroundBackend.

    Uses the execution service for both running source and the example catalog.
    """

    mode = "remote"

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        """Initializes the RemoteBackend.

        Args:
            base_url: Root URL of the execution service.
            client: Optional httpx.AsyncClient for connection pooling. When
                omitted an internal client is created and closed by ``close``.
            timeout: Timeout for the internal client, in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self.executor = RemoteExecutionClient(self.base_url, self._client)
        self.catalog = RemoteExampleCatalog(self.base_url, self._client)

    async def start(self) -> None:
        logger.info(f"Using execution service at {self.base_url}")

    @property
    def ready(self) -> bool:
        return True

    async def list_examples(self) -> list[str]:
        return await self.catalog.list_examples()

    async def fetch_example(self, identifier: str) -> str:
        return await self.catalog.fetch_example(identifier)

    async def run(self, source: str) -> ExecutionResult:
        return await self.executor.run(source)

    async def close(self) -> None:
        if self._internal_client:
            await self._client.aclose()
