from typing import Any

import anyio
import pytest

from coreason_playground.controller import NOT_READY_NOTICE, PlaygroundController
from coreason_playground.exceptions import CatalogError, RuntimeLoadError, TransportError
from coreason_playground.integrations.audit import AuditLogger
from coreason_playground.models import ExecutionResult, ResultState, ResultStyle
from coreason_playground.views import StateView


@pytest.mark.asyncio
async def test_initialize_renders_sorted_and_loads_first(fake_backend: Any, state_view: StateView) -> None:
    controller = PlaygroundController(fake_backend, state_view)
    await controller.initialize()

    assert fake_backend.started
    assert state_view.options == ["a.py", "b.py", "c.py"]
    assert controller.selected == "a.py"
    assert state_view.source == "print('a')"
    assert state_view.notices == []


@pytest.mark.asyncio
async def test_initialize_with_empty_catalog(make_backend: Any, state_view: StateView) -> None:
    controller = PlaygroundController(make_backend(), state_view, initializing_text="Init")
    await controller.initialize()
    assert state_view.options == []
    assert state_view.source == "Init"
    assert controller.selected is None


@pytest.mark.asyncio
async def test_initialize_runtime_failure_is_notice(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend(examples={"a": "1"})

    async def failing_start() -> None:
        raise RuntimeLoadError("fetch failed")

    backend.start = failing_start
    controller = PlaygroundController(backend, state_view)
    await controller.initialize()

    assert len(state_view.notices) == 1
    assert "fetch failed" in state_view.notices[0]
    assert state_view.options == []


@pytest.mark.asyncio
async def test_initialize_catalog_failure_is_notice(fake_backend: Any, state_view: StateView) -> None:
    fake_backend.errors["__list__"] = TransportError("unreachable")
    controller = PlaygroundController(fake_backend, state_view)
    await controller.initialize()
    assert state_view.options == []
    assert "unreachable" in state_view.notices[0]


@pytest.mark.asyncio
async def test_select_remote_shows_waiting_then_text(fake_backend: Any, state_view: StateView) -> None:
    fake_backend.gates["b.py"] = anyio.Event()
    controller = PlaygroundController(fake_backend, state_view, waiting_text="Waiting...")

    async with anyio.create_task_group() as tg:
        tg.start_soon(controller.select, "b.py")
        await anyio.sleep(0)
        assert state_view.source == "Waiting..."
        fake_backend.gates["b.py"].set()

    assert state_view.source == "print('b')"


@pytest.mark.asyncio
async def test_select_immediate_catalog_skips_placeholder(make_backend: Any) -> None:
    backend = make_backend(examples={"a": "1"}, immediate=True)
    sources: list[str] = []

    class RecordingView(StateView):
        def set_source(self, text: str) -> None:
            sources.append(text)
            super().set_source(text)

    controller = PlaygroundController(backend, RecordingView())
    await controller.select("a")
    assert sources == ["1"]


@pytest.mark.asyncio
async def test_last_selection_wins(fake_backend: Any, state_view: StateView) -> None:
    # "a.py" is slow and completes after "b.py".
    fake_backend.gates["a.py"] = anyio.Event()
    controller = PlaygroundController(fake_backend, state_view)

    async with anyio.create_task_group() as tg:
        tg.start_soon(controller.select, "a.py")
        await anyio.sleep(0)
        await controller.select("b.py")
        assert state_view.source == "print('b')"
        fake_backend.gates["a.py"].set()

    assert state_view.source == "print('b')"
    assert controller.selected == "b.py"


@pytest.mark.asyncio
async def test_rapid_selections_end_on_last(fake_backend: Any, state_view: StateView) -> None:
    for identifier in ("a.py", "b.py", "c.py"):
        fake_backend.gates[identifier] = anyio.Event()
    controller = PlaygroundController(fake_backend, state_view)

    async with anyio.create_task_group() as tg:
        for identifier in ("a.py", "b.py", "c.py"):
            tg.start_soon(controller.select, identifier)
        await anyio.sleep(0)
        # Release in reverse issue order.
        for identifier in ("c.py", "b.py", "a.py"):
            fake_backend.gates[identifier].set()
            await anyio.sleep(0)

    assert state_view.source == "print('c')"


@pytest.mark.asyncio
async def test_select_failure_is_notice(fake_backend: Any, state_view: StateView) -> None:
    fake_backend.errors["a.py"] = CatalogError("gone", status_code=404)
    controller = PlaygroundController(fake_backend, state_view)
    await controller.select("a.py")
    assert "gone" in state_view.notices[0]


@pytest.mark.asyncio
async def test_submit_success_default_style(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend(results={"print(42)": ExecutionResult(output="42\n", succeeded=True)})
    controller = PlaygroundController(backend, state_view)

    result = await controller.submit("print(42)")

    assert result is not None and result.succeeded
    assert state_view.result == "42\n"
    assert state_view.result_style is ResultStyle.DEFAULT
    assert controller.result_state is ResultState.SUCCESS


@pytest.mark.asyncio
async def test_submit_failure_red_style(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend(results={"bad": ExecutionResult(output="syntax error at line 3", succeeded=False)})
    controller = PlaygroundController(backend, state_view)

    await controller.submit("bad")

    assert state_view.result == "syntax error at line 3"
    assert state_view.result_style is ResultStyle.FAILURE
    assert controller.result_state is ResultState.FAILURE


@pytest.mark.asyncio
async def test_submit_shows_waiting_while_pending(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend()
    backend.gates["slow"] = anyio.Event()
    controller = PlaygroundController(backend, state_view, waiting_text="Waiting...")

    async with anyio.create_task_group() as tg:
        tg.start_soon(controller.submit, "slow")
        await anyio.sleep(0)
        assert state_view.result == "Waiting..."
        assert controller.result_state is ResultState.WAITING
        backend.gates["slow"].set()

    assert state_view.result == "slow"


@pytest.mark.asyncio
async def test_submit_not_ready_never_calls_backend(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend(ready=False)
    state_view.set_result("previous", ResultStyle.DEFAULT)
    controller = PlaygroundController(backend, state_view)

    assert await controller.submit("print(1)") is None

    assert backend.ran == []
    assert state_view.notices == [NOT_READY_NOTICE]
    assert state_view.result == "previous"


@pytest.mark.asyncio
async def test_submit_transport_failure_restores_result(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend(results={"ok": ExecutionResult(output="first", succeeded=True)})
    backend.errors["down"] = TransportError("connection refused")
    controller = PlaygroundController(backend, state_view)

    await controller.submit("ok")
    assert await controller.submit("down") is None

    assert state_view.result == "first"
    assert state_view.result_style is ResultStyle.DEFAULT
    assert controller.result_state is ResultState.SUCCESS
    assert "connection refused" in state_view.notices[0]


@pytest.mark.asyncio
async def test_last_submission_wins(make_backend: Any, state_view: StateView) -> None:
    backend = make_backend()
    backend.gates["first"] = anyio.Event()
    controller = PlaygroundController(backend, state_view)

    async with anyio.create_task_group() as tg:
        tg.start_soon(controller.submit, "first")
        await anyio.sleep(0)
        await controller.submit("second")
        assert state_view.result == "second"
        backend.gates["first"].set()

    assert state_view.result == "second"


@pytest.mark.asyncio
async def test_submit_is_audited(make_backend: Any, state_view: StateView) -> None:
    auditor = AuditLogger(enabled=True)
    hashes: list[str] = []
    original = auditor.log_submission

    async def record(source: str, mode: str) -> str:
        hashes.append(await original(source, mode))
        return hashes[-1]

    auditor.log_submission = record  # type: ignore[method-assign]
    controller = PlaygroundController(make_backend(), state_view, auditor=auditor)
    await controller.submit("print(1)")
    assert len(hashes) == 1 and len(hashes[0]) == 64
