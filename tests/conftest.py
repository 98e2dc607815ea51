import sys
import types
from collections.abc import Callable
from typing import Any, Generator

import anyio
import pytest

from coreason_playground.backend import PlaygroundBackend
from coreason_playground.exceptions import RuntimeNotReadyError
from coreason_playground.models import ExecutionResult
from coreason_playground.runtime.loader import RuntimeHost
from coreason_playground.views import StateView


class FakeBackend(PlaygroundBackend):
    """Scriptable backend for controller tests.

    ``gates`` maps an identifier or source to an event that must be set before
    the matching call returns.
    """

    mode = "remote"

    def __init__(
        self,
        examples: dict[str, str] | None = None,
        listing: list[str] | None = None,
        results: dict[str, ExecutionResult] | None = None,
        ready: bool = True,
        immediate: bool = False,
    ):
        self.examples = examples or {}
        self.listing = listing if listing is not None else list(self.examples)
        self.results = results or {}
        self._ready = ready
        self.immediate_catalog = immediate  # type: ignore[misc]
        self.gates: dict[str, anyio.Event] = {}
        self.errors: dict[str, Exception] = {}
        self.started = False
        self.closed = False
        self.fetched: list[str] = []
        self.ran: list[str] = []

    async def start(self) -> None:
        self.started = True

    @property
    def ready(self) -> bool:
        return self._ready

    async def list_examples(self) -> list[str]:
        if "__list__" in self.errors:
            raise self.errors["__list__"]
        return list(self.listing)

    async def fetch_example(self, identifier: str) -> str:
        self.fetched.append(identifier)
        if identifier in self.gates:
            await self.gates[identifier].wait()
        if identifier in self.errors:
            raise self.errors[identifier]
        return self.examples[identifier]

    async def run(self, source: str) -> ExecutionResult:
        self.ran.append(source)
        if not self._ready:
            raise RuntimeNotReadyError("not ready")
        if source in self.gates:
            await self.gates[source].wait()
        if source in self.errors:
            raise self.errors[source]
        return self.results.get(source, ExecutionResult(output=source, succeeded=True))

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def state_view() -> StateView:
    return StateView()


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend(
        examples={"b.py": "print('b')", "a.py": "print('a')", "c.py": "print('c')"},
        listing=["b.py", "a.py", "c.py"],
    )


@pytest.fixture
def runtime_module() -> Generator[Callable[..., str], None, None]:
    """Register throwaway runtime modules under unique names in sys.modules."""
    registered: list[str] = []

    def register(main: Callable[[RuntimeHost], Any] | None, name: str | None = None) -> str:
        module_name = name or f"fake_runtime_{len(registered)}"
        module = types.ModuleType(module_name)
        if main is not None:
            module.main = main  # type: ignore[attr-defined]
        sys.modules[module_name] = module
        registered.append(module_name)
        return module_name

    yield register

    for module_name in registered:
        sys.modules.pop(module_name, None)


@pytest.fixture
def make_backend() -> type[FakeBackend]:
    return FakeBackend
