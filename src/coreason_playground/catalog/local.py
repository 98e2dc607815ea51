# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from coreason_playground.catalog.base import ExampleCatalogClient
from coreason_playground.models import ExampleCatalog
from coreason_playground.runtime.loader import RuntimeLoader


class LocalExampleCatalog(ExampleCatalogClient):
    """Catalog published by the loaded in-process runtime.

    The mapping is read once from the runtime and kept for the session. Both
    operations complete without suspending.
    """

    def __init__(self, loader: RuntimeLoader):
        self.loader = loader
        self._catalog: ExampleCatalog | None = None

    @property
    def catalog(self) -> ExampleCatalog:
        if self._catalog is None:
            self._catalog = ExampleCatalog(examples=self.loader.examples())
        return self._catalog

    async def list_examples(self) -> list[str]:
        return list(self.catalog.examples)

    async def fetch_example(self, identifier: str) -> str:
        return self.catalog.source_for(identifier)
