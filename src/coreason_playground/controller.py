# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from coreason_playground.backend import PlaygroundBackend
from coreason_playground.exceptions import PlaygroundError, RuntimeLoadError, RuntimeNotReadyError
from coreason_playground.integrations.audit import AuditLogger
from coreason_playground.models import ExecutionResult, ResultState, ResultStyle, sorted_identifiers
from coreason_playground.utils.logger import logger
from coreason_playground.views import PlaygroundView

NOT_READY_NOTICE = "The local runtime has not finished loading."


class PlaygroundController:
    """Binds submit and selection-change to the active backend.

    Every backend error is caught here and turned into view state. Each field
    (source, result) carries a sequence number; a response is rendered only if
    no newer operation on the same field was issued after it, so the last
    issued submission or selection always wins.
    """

    def __init__(
        self,
        backend: PlaygroundBackend,
        view: PlaygroundView,
        waiting_text: str = "Waiting...",
        initializing_text: str = "Initializing...",
        auditor: AuditLogger | None = None,
    ):
        """Initializes the PlaygroundController.

        Args:
            backend: The backend chosen at composition time.
            view: Where selector, source and result are rendered.
            waiting_text: Placeholder while an operation is pending.
            initializing_text: Placeholder in the source field during startup.
            auditor: Optional audit trail for submissions.
        """
        self.backend = backend
        self.view = view
        self.waiting_text = waiting_text
        self.initializing_text = initializing_text
        self.auditor = auditor

        self.identifiers: list[str] = []
        self.selected: str | None = None
        self.result_state = ResultState.IDLE
        self.result_text = ""

        self._settled: tuple[ResultState, str] = (ResultState.IDLE, "")
        self._source_seq = 0
        self._result_seq = 0

    def _notify(self, message: str) -> None:
        logger.warning(f"Notice: {message}")
        self.view.notify(message)

    def _show_result(self, state: ResultState, text: str) -> None:
        self.result_state = state
        self.result_text = text
        style = ResultStyle.FAILURE if state is ResultState.FAILURE else ResultStyle.DEFAULT
        self.view.set_result(text, style)
        if state is not ResultState.WAITING:
            self._settled = (state, text)

    async def initialize(self) -> None:
        """Start the backend, populate the selector and load the first example."""
        self.view.set_source(self.initializing_text)
        try:
            await self.backend.start()
        except RuntimeLoadError as e:
            self._notify(f"The local runtime failed to load: {e}")
            return

        try:
            identifiers = await self.backend.list_examples()
        except PlaygroundError as e:
            self._notify(f"Could not load examples: {e}")
            return

        self.identifiers = sorted_identifiers(identifiers)
        self.view.set_options(self.identifiers)
        logger.info(f"Loaded {len(self.identifiers)} examples")

        if self.identifiers:
            await self.select(self.identifiers[0])

    async def select(self, identifier: str) -> None:
        """Load the example ``identifier`` into the source field."""
        self._source_seq += 1
        seq = self._source_seq
        self.selected = identifier

        if not self.backend.immediate_catalog:
            self.view.set_source(self.waiting_text)

        try:
            text = await self.backend.fetch_example(identifier)
        except (PlaygroundError, KeyError) as e:
            if seq == self._source_seq:
                self._notify(f"Could not load example {identifier}: {e}")
            return

        if seq != self._source_seq:
            logger.debug(f"Discarding stale example {identifier}")
            return
        self.view.set_source(text)

    async def submit(self, source: str) -> ExecutionResult | None:
        """Run ``source`` and render the outcome in the result field.

        Returns:
            The result if it was rendered, otherwise None (not ready, transport
            failure, or superseded by a newer submission).
        """
        if not self.backend.ready:
            self._notify(NOT_READY_NOTICE)
            return None

        self._result_seq += 1
        seq = self._result_seq
        self._show_result(ResultState.WAITING, self.waiting_text)

        try:
            if self.auditor:
                await self.auditor.log_submission(source, self.backend.mode)
            result = await self.backend.run(source)
        except RuntimeNotReadyError:
            if seq == self._result_seq:
                self._show_result(*self._settled)
                self._notify(NOT_READY_NOTICE)
            return None
        except PlaygroundError as e:
            if seq == self._result_seq:
                self._show_result(*self._settled)
                self._notify(f"Execution request failed: {e}")
            return None

        if seq != self._result_seq:
            logger.debug("Discarding stale execution result")
            return None

        self._show_result(ResultState.SUCCESS if result.succeeded else ResultState.FAILURE, result.output)
        return result
