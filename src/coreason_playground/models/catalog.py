# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


def sorted_identifiers(identifiers: Iterable[str]) -> list[str]:
    """Return identifiers in display order (ascending, lexicographic, unique)."""
    return sorted(set(identifiers))


class ExampleCatalog(BaseModel):
    """Per-session mapping of example identifier to example source.

    Attributes:
        examples: Identifier to source text. The order of the underlying
            mapping is irrelevant; ``identifiers`` is always sorted.
    """

    model_config = ConfigDict(frozen=True)

    examples: dict[str, str]

    @property
    def identifiers(self) -> list[str]:
        return sorted_identifiers(self.examples)

    def source_for(self, identifier: str) -> str:
        """Look up the source of one example.

        Raises:
            KeyError: If the identifier is not in the catalog.
        """
        return self.examples[identifier]

    def __len__(self) -> int:
        return len(self.examples)
