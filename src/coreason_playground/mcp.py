import asyncio
from typing import Any

from coreason_playground.config import PlaygroundConfig
from coreason_playground.models import ResultStyle
from coreason_playground.playground import PlaygroundAsync
from coreason_playground.utils.logger import logger
from coreason_playground.views import StateView


class PlaygroundMCP:
    """
    MCP-compliant server logic wrapper for the playground.
    Exposes the form operations as tools for the Agent.
    Owns a single playground session, started on first use.
    """

    def __init__(self, config: PlaygroundConfig | None = None):
        self.config = config or PlaygroundConfig()
        self.view = StateView()
        self.playground: PlaygroundAsync | None = None
        self._creation_lock = asyncio.Lock()

    async def _get_or_create_playground(self) -> PlaygroundAsync:
        """
        Return the session playground, starting it on first use.
        Thread-safe against concurrent creation.
        """
        if self.playground is not None:
            return self.playground

        async with self._creation_lock:
            # Double-check inside lock
            if self.playground is None:
                logger.info("Creating playground session")
                playground = PlaygroundAsync(self.config, view=self.view)
                await playground.__aenter__()
                self.playground = playground
            return self.playground

    async def _begin(self) -> PlaygroundAsync:
        """
        Return the playground with notices from earlier calls (or startup) cleared,
        so a snapshot only reports what the current operation caused.
        """
        playground = await self._get_or_create_playground()
        for notice in self.view.drain_notices():
            logger.warning(f"Dropping earlier notice: {notice}")
        return playground

    def _snapshot(self, rendered: bool = True) -> dict[str, Any]:
        return {
            "rendered": rendered,
            "options": list(self.view.options),
            "source": self.view.source,
            "result": self.view.result,
            "failed": self.view.result_style is ResultStyle.FAILURE,
            "notices": self.view.drain_notices(),
        }

    async def run_source(self, source: str) -> dict[str, Any]:
        """
        Submit source and return the rendered form state.
        """
        playground = await self._begin()
        result = await playground.submit(source)
        return self._snapshot(rendered=result is not None)

    async def list_examples(self) -> list[str]:
        """
        Return the example identifiers in display order.
        """
        playground = await self._get_or_create_playground()
        return list(playground.identifiers)

    async def load_example(self, identifier: str) -> dict[str, Any]:
        """
        Select an example and return the rendered form state.
        """
        playground = await self._begin()
        await playground.select(identifier)
        return self._snapshot()

    async def shutdown(self) -> None:
        """
        Close the playground session.
        """
        if self.playground is not None:
            logger.info("Shutting down playground session")
            await self.playground.__aexit__(None, None, None)
            self.playground = None
