"""Optional TypeScript compilation gate.

Runs the project's TypeScript compiler through ``npx`` against a single
generated file.  Disabled unless requested, since it needs Node.js and the
project's ``node_modules``.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from src.errors import GateFailure
from src.utils import print_success

TSC_COMMAND: tuple[str, ...] = ("npx", "tsc", "--noEmit", "--skipLibCheck", "--jsx", "preserve")

# Lines of compiler output quoted in the failure message.
_MAX_DIAGNOSTIC_LINES = 20


def check_typescript(page: Path, project_root: Path) -> None:
    """Gate 6: ``tsc --noEmit`` succeeds on *page*.

    Raises:
        GateFailure: If the compiler cannot be started or exits non-zero.
    """
    cmd = [*TSC_COMMAND, str(page)]
    try:
        result = subprocess.run(
            cmd,
            cwd=str(project_root),
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GateFailure(
            "typescript",
            "TypeScript compiler not available: 'npx' was not found in PATH",
        ) from None

    if result.returncode != 0:
        output = (result.stdout or result.stderr or "").strip().splitlines()
        diagnostics = "\n".join(output[:_MAX_DIAGNOSTIC_LINES])
        raise GateFailure(
            "typescript",
            f"TypeScript compilation failed (exit {result.returncode})"
            + (f":\n{diagnostics}" if diagnostics else ""),
        )
    print_success(f"TypeScript Compiles: {page.name}")
