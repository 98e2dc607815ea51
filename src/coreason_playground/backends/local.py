# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import anyio

from coreason_playground.backend import PlaygroundBackend
from coreason_playground.catalog.local import LocalExampleCatalog
from coreason_playground.models import ExecutionResult
from coreason_playground.runtime.loader import RuntimeLoader
from coreason_playground.utils.logger import logger


class LocalBackend(PlaygroundBackend):
    """In-process implementation of the PlaygroundBackend.

    Executes through the callable installed by the runtime module. There is
    no transport, so every result is a success; runtime errors arrive as the
    output text.
    """

    mode = "local"
    immediate_catalog = True

    def __init__(self, loader: RuntimeLoader):
        """Initializes the LocalBackend.

        Args:
            loader: Loader of the runtime module.
        """
        self.loader = loader
        self.catalog = LocalExampleCatalog(loader)

    async def start(self) -> None:
        await self.loader.load()

    @property
    def ready(self) -> bool:
        return self.loader.is_ready

    async def list_examples(self) -> list[str]:
        return await self.catalog.list_examples()

    async def fetch_example(self, identifier: str) -> str:
        return await self.catalog.fetch_example(identifier)

    async def run(self, source: str) -> ExecutionResult:
        execute = self.loader.require_execute()
        logger.info(f"Executing {len(source)} chars in local runtime")
        try:
            output = await anyio.to_thread.run_sync(execute, source)
        except (Exception, SystemExit) as e:
            logger.warning(f"Local runtime raised {type(e).__name__}: {e}")
            output = f"{type(e).__name__}: {e}"
        return ExecutionResult(output=output, succeeded=True)

    async def close(self) -> None:
        pass
