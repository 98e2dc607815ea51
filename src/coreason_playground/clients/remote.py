# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import json

import httpx

from coreason_playground.exceptions import TransportError
from coreason_playground.models import ExecutionRequest, ExecutionResult
from coreason_playground.utils.logger import logger

EXECUTE_PATH = "/v1/execute"
JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


class RemoteExecutionClient:
    """Runs source on the execution service over HTTP.

    Any HTTP response is a result; only a missing response is an error.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient):
        """Initializes the RemoteExecutionClient.

        Args:
            base_url: Root URL of the execution service.
            client: Shared httpx.AsyncClient, owned by the caller.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client

    async def run(self, source: str) -> ExecutionResult:
        """Send ``source`` to ``POST /v1/execute``.

        Args:
            source: The source text, sent unmodified.

        Returns:
            ExecutionResult: Body text as output; ``succeeded`` is True only for HTTP 200.

        Raises:
            TransportError: If no response was received.
        """
        request = ExecutionRequest(source=source)
        body = json.dumps(request.model_dump(), ensure_ascii=False).encode("utf-8")
        url = f"{self.base_url}{EXECUTE_PATH}"

        logger.info(f"POST {url} ({len(source)} chars)")
        try:
            response = await self._client.post(
                url,
                content=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        except httpx.TransportError as e:
            logger.error(f"Execution request failed: {e!r}")
            raise TransportError(f"Could not reach execution service at {url}: {e}") from e

        succeeded = response.status_code == httpx.codes.OK
        if not succeeded:
            logger.warning(f"Execution service answered {response.status_code}")
        return ExecutionResult(output=response.text, succeeded=succeeded)
