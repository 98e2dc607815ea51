# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from urllib.parse import quote

import httpx

from coreason_playground.catalog.base import ExampleCatalogClient
from coreason_playground.exceptions import CatalogError, TransportError
from coreason_playground.utils.logger import logger

EXAMPLES_PATH = "/v1/examples"


class RemoteExampleCatalog(ExampleCatalogClient):
    """Catalog served by the execution service under ``/v1/examples``."""

    def __init__(self, base_url: str, client: httpx.AsyncClient):
        """Initializes the RemoteExampleCatalog.

        Args:
            base_url: Root URL of the execution service.
            client: Shared httpx.AsyncClient, owned by the caller.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client

    async def _get(self, url: str) -> httpx.Response:
        logger.info(f"GET {url}")
        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            logger.error(f"Catalog request failed: {e!r}")
            raise TransportError(f"Could not reach execution service at {url}: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Catalog request {url} answered {response.status_code}")
            raise CatalogError(
                f"Catalog request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return response

    async def list_examples(self) -> list[str]:
        """Fetch ``GET /v1/examples``.

        Raises:
            TransportError: If no response was received.
            CatalogError: On a non-200 status or a body that is not a list of strings.
        """
        response = await self._get(f"{self.base_url}{EXAMPLES_PATH}")
        try:
            identifiers = response.json()
        except ValueError as e:
            raise CatalogError(f"Catalog listing is not JSON: {e}", response.status_code, response.text) from e

        if not isinstance(identifiers, list) or not all(isinstance(i, str) for i in identifiers):
            raise CatalogError("Catalog listing must be a JSON array of strings", response.status_code, response.text)
        return identifiers

    async def fetch_example(self, identifier: str) -> str:
        """Fetch ``GET /v1/examples/{identifier}`` with the identifier URI-encoded.

        Raises:
            TransportError: If no response was received.
            CatalogError: On a non-200 status.
        """
        response = await self._get(f"{self.base_url}{EXAMPLES_PATH}/{quote(identifier, safe='')}")
        return response.text
