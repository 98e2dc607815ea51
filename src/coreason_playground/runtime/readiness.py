# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

"""Readiness signal for the local runtime."""

from collections.abc import Callable

import anyio

from coreason_playground.exceptions import InvalidTransitionError
from coreason_playground.models import RuntimeReadiness
from coreason_playground.utils.logger import logger

ReadinessListener = Callable[[RuntimeReadiness], None]

_ALLOWED: dict[RuntimeReadiness, frozenset[RuntimeReadiness]] = {
    RuntimeReadiness.NOT_LOADED: frozenset({RuntimeReadiness.LOADING}),
    RuntimeReadiness.LOADING: frozenset({RuntimeReadiness.READY, RuntimeReadiness.FAILED}),
    RuntimeReadiness.READY: frozenset(),
    RuntimeReadiness.FAILED: frozenset(),
}


class Readiness:
    """Single-writer readiness state: NOT_LOADED -> LOADING -> READY | FAILED.

    Only the owning ``RuntimeLoader`` calls ``transition``. Everyone else reads
    ``state``, awaits ``wait()`` or registers a listener with ``subscribe``.
    """

    def __init__(self) -> None:
        self._state = RuntimeReadiness.NOT_LOADED
        self._settled: anyio.Event | None = None
        self._listeners: list[ReadinessListener] = []

    @property
    def state(self) -> RuntimeReadiness:
        return self._state

    def transition(self, new_state: RuntimeReadiness) -> None:
        """Move to ``new_state``.

        Raises:
            InvalidTransitionError: If the move is not allowed from the current state.
        """
        if new_state not in _ALLOWED[self._state]:
            raise InvalidTransitionError(f"Cannot move runtime readiness from {self._state.value} to {new_state.value}")

        logger.info(f"Runtime readiness: {self._state.value} -> {new_state.value}")
        self._state = new_state

        if new_state.settled:
            if self._settled is not None:
                self._settled.set()
            listeners = list(self._listeners)
            self._listeners.clear()
            for listener in listeners:
                listener(new_state)

    def subscribe(self, listener: ReadinessListener) -> None:
        """Call ``listener`` once with the terminal state.

        Runs immediately when the state has already settled.
        """
        if self._state.settled:
            listener(self._state)
        else:
            self._listeners.append(listener)

    async def wait(self) -> RuntimeReadiness:
        """Suspend until the state is READY or FAILED and return it."""
        if self._state.settled:
            return self._state
        if self._settled is None:
            self._settled = anyio.Event()
        await self._settled.wait()
        return self._state
