# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_playground

"""In-process Python runtime.

Loaded by ``RuntimeLoader`` in local mode. Source runs in a fresh namespace
whose ``print`` writes to a private buffer, so concurrent runs do not share
``sys.stdout``. No sandboxing is applied.
"""

import builtins
import io
from functools import partial
from pathlib import Path
from typing import Any

from coreason_playground.config import PlaygroundConfig
from coreason_playground.runtime.loader import RuntimeHost


def execute(source: str) -> str:
    """Run ``source`` and return its printed output.

    Errors are returned as text after whatever was printed before them.
    """
    buffer = io.StringIO()
    namespace: dict[str, Any] = {
        "__name__": "__main__",
        "__builtins__": builtins,
        "print": partial(print, file=buffer),
    }
    try:
        code = compile(source, "<playground>", "exec")
        exec(code, namespace)
    except (Exception, SystemExit) as e:
        return f"{buffer.getvalue()}{type(e).__name__}: {e}"
    return buffer.getvalue()


def _read_example(path: Path) -> str:
    # newline="" keeps CRLF files byte-identical to what the service serves.
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def examples() -> dict[str, str]:
    """Read the configured examples directory (the bundled one by default)."""
    config = PlaygroundConfig()
    return {
        path.name: _read_example(path)
        for path in config.resolved_examples_dir.glob(f"*{config.example_suffix}")
        if path.is_file()
    }


def main(host: RuntimeHost) -> None:
    host.install(execute=execute, examples=examples)
