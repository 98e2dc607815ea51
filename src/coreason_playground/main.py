# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from typing import Any, cast

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from coreason_playground.mcp import PlaygroundMCP

# Initialize Playground Logic
playground = PlaygroundMCP()

# Initialize MCP Server
mcp = FastMCP("coreason-playground")


def _render_notices(state: dict[str, Any]) -> list[TextContent]:
    notices = cast(list[str], state.get("notices", []))
    return [TextContent(type="text", text=f"Notice: {notice}") for notice in notices]


@mcp.tool()  # type: ignore[misc]
async def run_source(source: str) -> list[TextContent]:
    """
    Run source through the configured backend.
    Returns the result text and whether the run failed.
    """
    try:
        state = await playground.run_source(source)
    except Exception as e:
        return [TextContent(type="text", text=f"Error running source: {e!s}")]

    output = _render_notices(state)
    if not state.get("rendered", False):
        return output

    result = cast(str, state.get("result", ""))
    failed = cast(bool, state.get("failed", False))
    output.append(TextContent(type="text", text=f"RESULT:\n{result}"))
    output.append(TextContent(type="text", text=f"Status: {'failed' if failed else 'succeeded'}"))
    return output


@mcp.tool()  # type: ignore[misc]
async def list_examples() -> list[str]:
    """
    List the example identifiers, sorted.
    """
    try:
        return await playground.list_examples()
    except Exception as e:
        return [f"Error listing examples: {e!s}"]


@mcp.tool()  # type: ignore[misc]
async def load_example(identifier: str) -> list[TextContent]:
    """
    Load an example and return its source text.
    """
    try:
        state = await playground.load_example(identifier)
    except Exception as e:
        return [TextContent(type="text", text=f"Error loading example: {e!s}")]

    output = _render_notices(state)
    if output:
        return output
    return [TextContent(type="text", text=cast(str, state.get("source", "")))]


def main() -> None:
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
