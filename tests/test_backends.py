from typing import Any

import httpx
import pytest

from coreason_playground.backends.local import LocalBackend
from coreason_playground.backends.remote import RemoteBackend
from coreason_playground.exceptions import RuntimeNotReadyError
from coreason_playground.runtime.loader import RuntimeHost, RuntimeLoader


def _echo_runtime(host: RuntimeHost) -> None:
    host.install(execute=lambda source: f"ran {source}", examples=lambda: {"hello": "print hi"})


@pytest.mark.asyncio
async def test_local_backend_not_ready_before_start(runtime_module: Any) -> None:
    backend = LocalBackend(RuntimeLoader(runtime_module(_echo_runtime)))
    assert backend.ready is False
    with pytest.raises(RuntimeNotReadyError):
        await backend.run("x")


@pytest.mark.asyncio
async def test_local_backend_lifts_output_to_success(runtime_module: Any) -> None:
    backend = LocalBackend(RuntimeLoader(runtime_module(_echo_runtime)))
    await backend.start()

    assert backend.ready is True
    result = await backend.run("x")
    assert result.output == "ran x"
    assert result.succeeded is True


@pytest.mark.asyncio
async def test_local_backend_error_text_is_still_success(runtime_module: Any) -> None:
    def main(host: RuntimeHost) -> None:
        host.install(execute=lambda source: "NameError: name 'y' is not defined")

    backend = LocalBackend(RuntimeLoader(runtime_module(main)))
    await backend.start()
    result = await backend.run("y")
    assert result.succeeded is True
    assert "NameError" in result.output


@pytest.mark.asyncio
async def test_local_backend_contains_runtime_exceptions(runtime_module: Any) -> None:
    def execute(source: str) -> str:
        if source == "exit":
            raise SystemExit(2)
        raise RuntimeError("runtime crashed")

    def main(host: RuntimeHost) -> None:
        host.install(execute=execute)

    backend = LocalBackend(RuntimeLoader(runtime_module(main)))
    await backend.start()

    crashed = await backend.run("x")
    assert crashed.succeeded is True
    assert crashed.output == "RuntimeError: runtime crashed"

    exited = await backend.run("exit")
    assert exited.succeeded is True
    assert exited.output == "SystemExit: 2"


@pytest.mark.asyncio
async def test_local_backend_catalog(runtime_module: Any) -> None:
    backend = LocalBackend(RuntimeLoader(runtime_module(_echo_runtime)))
    await backend.start()
    assert backend.immediate_catalog is True
    assert await backend.list_examples() == ["hello"]
    assert await backend.fetch_example("hello") == "print hi"
    await backend.close()


@pytest.mark.asyncio
async def test_remote_backend_routes_to_service() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/execute":
            return httpx.Response(200, text="42\n")
        if request.url.path == "/v1/examples":
            return httpx.Response(200, json=["b", "a"])
        return httpx.Response(200, text="src")

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    backend = RemoteBackend("http://play.test", client=client)
    await backend.start()

    assert backend.ready is True
    assert backend.immediate_catalog is False
    assert (await backend.run("print(42)")).output == "42\n"
    assert await backend.list_examples() == ["b", "a"]
    assert await backend.fetch_example("a") == "src"

    # External clients are left open for their owner.
    await backend.close()
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_remote_backend_closes_internal_client() -> None:
    backend = RemoteBackend("http://play.test")
    await backend.close()
    assert backend._client.is_closed
