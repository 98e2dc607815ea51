# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from abc import ABC, abstractmethod


class ExampleCatalogClient(ABC):
    """
    Source of example identifiers and their source text.
    """

    @abstractmethod
    async def list_examples(self) -> list[str]:
        """List example identifiers.

        Returns:
            list[str]: Identifiers in whatever order the source provides; the
                caller sorts them for display.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def fetch_example(self, identifier: str) -> str:
        """Return the source text of one example.

        Membership is not checked here; an unknown identifier is reported by
        the underlying source.

        Args:
            identifier: The example identifier.

        Returns:
            str: The example source, unmodified.
        """
        pass  # pragma: no cover
