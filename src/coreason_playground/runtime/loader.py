# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

import importlib
from collections.abc import Callable, Mapping

import anyio

from coreason_playground.exceptions import RuntimeLoadError, RuntimeNotReadyError
from coreason_playground.models import RuntimeReadiness
from coreason_playground.runtime.readiness import Readiness
from coreason_playground.utils.logger import logger

ExecuteFn = Callable[[str], str]
ExamplesFn = Callable[[], Mapping[str, str]]


class RuntimeHost:
    """Installation target handed to a runtime module's ``main(host)``.

    A runtime module announces itself by calling ``install``. The presence of
    ``execute`` is the authoritative readiness check.
    """

    def __init__(self) -> None:
        self.execute: ExecuteFn | None = None
        self.examples: ExamplesFn | None = None

    def install(self, execute: ExecuteFn, examples: ExamplesFn | None = None) -> None:
        if not callable(execute):
            raise TypeError("execute must be callable")
        self.execute = execute
        self.examples = examples

    def clear(self) -> None:
        self.execute = None
        self.examples = None


class RuntimeLoader:
    """Loads an in-process runtime module and tracks its readiness.

    The module at ``module_path`` must expose ``main(host: RuntimeHost)``,
    which installs the execute entry point (and optionally the examples
    mapping) before returning.
    """

    def __init__(self, module_path: str):
        """Initializes the RuntimeLoader.

        Args:
            module_path: Dotted import path of the runtime module.
        """
        self.module_path = module_path
        self.readiness = Readiness()
        self._host = RuntimeHost()

    @property
    def state(self) -> RuntimeReadiness:
        return self.readiness.state

    @property
    def execute(self) -> ExecuteFn | None:
        """The installed execute callable, or None until the runtime is ready."""
        if self.readiness.state is not RuntimeReadiness.READY:
            return None
        return self._host.execute

    @property
    def is_ready(self) -> bool:
        return self.execute is not None

    async def load(self) -> None:
        """Fetch, instantiate and start the runtime module.

        Only the first call performs the load; later calls wait for it to settle.

        Raises:
            RuntimeLoadError: If the module cannot be imported, its entry point
                fails, or it never installs ``execute``.
        """
        if self.readiness.state is not RuntimeReadiness.NOT_LOADED:
            if await self.readiness.wait() is RuntimeReadiness.FAILED:
                raise RuntimeLoadError(f"Runtime {self.module_path} failed to load")
            return

        self.readiness.transition(RuntimeReadiness.LOADING)
        logger.info(f"Loading runtime module {self.module_path}")

        try:
            module = await anyio.to_thread.run_sync(importlib.import_module, self.module_path)
            entry = getattr(module, "main", None)
            if not callable(entry):
                raise RuntimeLoadError(f"Runtime {self.module_path} has no main(host) entry point")
            await anyio.to_thread.run_sync(entry, self._host)
            if self._host.execute is None:
                raise RuntimeLoadError(f"Runtime {self.module_path} did not install an execute entry point")
        except Exception as e:
            self._host.clear()
            self.readiness.transition(RuntimeReadiness.FAILED)
            logger.error(f"Failed to load runtime {self.module_path}: {e}")
            if isinstance(e, RuntimeLoadError):
                raise
            raise RuntimeLoadError(f"Runtime {self.module_path} failed to load: {e}") from e

        self.readiness.transition(RuntimeReadiness.READY)
        logger.info(f"Runtime {self.module_path} ready")

    def require_execute(self) -> ExecuteFn:
        """Return the execute callable.

        Raises:
            RuntimeNotReadyError: If the callable is not installed.
        """
        execute = self.execute
        if execute is None:
            raise RuntimeNotReadyError("Local runtime has not finished loading")
        return execute

    def examples(self) -> dict[str, str]:
        """Return the examples mapping published by the loaded runtime.

        Raises:
            RuntimeNotReadyError: If the runtime is not ready.
        """
        self.require_execute()
        if self._host.examples is None:
            return {}
        return dict(self._host.examples())
