# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

"""
Execution service for remote mode.
"""

import asyncio
import posixpath
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]
import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError

from coreason_playground.config import PlaygroundConfig
from coreason_playground.utils.logger import logger


class ExecuteBody(BaseModel):
    source: str


class InterpreterTimeout(Exception):
    pass


async def run_interpreter(command: list[str], source: str, timeout: float) -> tuple[int, str]:
    """Run ``command`` with ``source`` on stdin.

    Args:
        command: Interpreter argv.
        source: Program text written to stdin.
        timeout: Seconds before the process is killed.

    Returns:
        tuple[int, str]: Exit code and combined stdout/stderr.

    Raises:
        InterpreterTimeout: If the process outlives ``timeout``.
        OSError: If the interpreter cannot be started.
    """
    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
    )
    try:
        output, _ = await asyncio.wait_for(process.communicate(source.encode("utf-8")), timeout=timeout)
    except asyncio.TimeoutError as e:
        process.kill()
        await process.wait()
        raise InterpreterTimeout(f"execution timed out after {timeout}s") from e

    return process.returncode or 0, output.decode("utf-8", errors="replace")


def resolve_example(root: Path, name: str) -> Path:
    """Re-root ``name`` under ``root`` so that ``..`` cannot escape it."""
    cleaned = posixpath.normpath("/" + name).lstrip("/")
    return root / cleaned


def create_app(config: PlaygroundConfig | None = None) -> FastAPI:
    """Build the FastAPI application serving the ``/v1`` API."""
    config = config or PlaygroundConfig()
    examples_dir = config.resolved_examples_dir

    app = FastAPI(
        title="Coreason Playground",
        description="Execution service and example catalog for the playground",
        version="0.1.0",
        redirect_slashes=False,
    )
    router = APIRouter()

    @router.post("/execute")
    async def execute(request: Request) -> PlainTextResponse:
        try:
            body = ExecuteBody.model_validate_json(await request.body())
        except ValidationError as e:
            return PlainTextResponse(str(e), status_code=500)

        logger.info(f"Executing {len(body.source)} chars with {config.interpreter[0]}")
        try:
            exit_code, output = await run_interpreter(config.interpreter, body.source, config.execution_timeout)
        except InterpreterTimeout as e:
            logger.warning(str(e))
            return PlainTextResponse(str(e), status_code=500)
        except OSError as e:
            logger.error(f"Failed to start interpreter: {e}")
            return PlainTextResponse(f"failed to start interpreter: {e}", status_code=500)

        if exit_code != 0:
            logger.warning(f"Interpreter exited with status {exit_code}")
            return PlainTextResponse(output or f"exit status {exit_code}", status_code=500)
        return PlainTextResponse(output)

    @router.get("/examples")
    async def list_examples() -> JSONResponse:
        try:
            names = [
                entry.name
                for entry in examples_dir.iterdir()
                if entry.is_file() and entry.suffix == config.example_suffix
            ]
        except OSError as e:
            logger.error(f"Cannot list examples in {examples_dir}: {e}")
            return JSONResponse(str(e), status_code=500)
        return JSONResponse(names)

    @router.get("/examples/{name:path}")
    async def get_example(name: str) -> PlainTextResponse:
        path = resolve_example(examples_dir, name)
        try:
            async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
                source = await f.read()
        except (FileNotFoundError, IsADirectoryError):
            return PlainTextResponse(f"example not found: {name}", status_code=404)
        except OSError as e:
            logger.error(f"Cannot read example {path}: {e}")
            return PlainTextResponse(str(e), status_code=500)
        return PlainTextResponse(source)

    app.include_router(router, prefix="/v1", tags=["playground"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


def serve(config: PlaygroundConfig | None = None) -> None:
    """Entry point for the execution service."""
    config = config or PlaygroundConfig()
    logger.info(f"Serving playground API on {config.host}:{config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":  # pragma: no cover
    serve()
