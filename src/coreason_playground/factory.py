# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import httpx

from coreason_playground.backend import PlaygroundBackend
from coreason_playground.backends.local import LocalBackend
from coreason_playground.backends.remote import RemoteBackend
from coreason_playground.config import PlaygroundConfig
from coreason_playground.runtime.loader import RuntimeLoader


class BackendFactory:
    """
    Factory to create PlaygroundBackend instances based on configuration.
    """

    @staticmethod
    def get_backend(config: PlaygroundConfig, client: httpx.AsyncClient | None = None) -> PlaygroundBackend:
        """
        Returns an instance of the configured PlaygroundBackend.
        """
        if config.mode == "local":
            return LocalBackend(RuntimeLoader(config.local_runtime))
        elif config.mode == "remote":
            return RemoteBackend(
                base_url=config.base_url,
                client=client,
                timeout=config.request_timeout,
            )
        else:
            # This should be unreachable due to Pydantic validation, but for safety:
            raise ValueError(f"Unknown mode: {config.mode}")  # pragma: no cover
