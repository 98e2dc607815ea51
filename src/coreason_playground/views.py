# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

from dataclasses import dataclass, field
from typing import Protocol

from coreason_playground.models import ResultStyle


class PlaygroundView(Protocol):
    """The form as seen by the controller: selector, source field, result field."""

    def set_options(self, identifiers: list[str]) -> None:
        """Replace the selector entries, in the given order."""
        ...

    def set_source(self, text: str) -> None: ...

    def set_result(self, text: str, style: ResultStyle) -> None: ...

    def notify(self, message: str) -> None:
        """Show a user-visible notice (the browser's alert)."""
        ...


@dataclass
class StateView:
    """In-memory view that records what would be rendered."""

    options: list[str] = field(default_factory=list)
    source: str = ""
    result: str = ""
    result_style: ResultStyle = ResultStyle.DEFAULT
    notices: list[str] = field(default_factory=list)

    def set_options(self, identifiers: list[str]) -> None:
        self.options = list(identifiers)

    def set_source(self, text: str) -> None:
        self.source = text

    def set_result(self, text: str, style: ResultStyle) -> None:
        self.result = text
        self.result_style = style

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def drain_notices(self) -> list[str]:
        notices, self.notices = self.notices, []
        return notices
