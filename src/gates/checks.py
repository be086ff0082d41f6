"""Individual quality gates.

Every gate either returns after printing a one-line confirmation, or raises
:class:`~src.errors.GateFailure`.  There is no partial result.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from src.errors import DependencyGateFailure, GateFailure
from src.presets.models import RESERVED_FIELD_NAMES, SMART_CODE_PATTERN
from src.utils import print_success

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Markers the generated page must contain, checked in this order.
REQUIRED_MARKERS: dict[str, str] = {
    "'use client'": "Missing 'use client' directive",
    "useUniversalEntity": "Missing HERA Universal Entity integration",
    "MobilePageLayout": "Missing mobile-first layout",
}

_RE_COMPONENT_IMPORT = re.compile(
    r"""
    ^import\s+[^;'"]*?   # import clause
    \s+from\s+
    ['"]@/components/    # project component alias
    (?P<ref>[^'"]+)      # path below src/components
    ['"]
    """,
    re.MULTILINE | re.VERBOSE,
)

_COMPONENT_SUFFIXES: tuple[str, ...] = (".tsx", ".ts")


# ---------------------------------------------------------------------------
# Gates 1-3: preset checks (no file I/O)
# ---------------------------------------------------------------------------


def check_smart_code(smart_code: str) -> None:
    """Gate 1: the entity smart code matches the smart-code pattern."""
    if not SMART_CODE_PATTERN.fullmatch(smart_code):
        raise GateFailure("smart_code", f"Invalid smart code format: {smart_code}")
    print_success(f"Smart Code Valid: {smart_code}")


def check_entity_type(entity_type: str, registry: Mapping[str, object]) -> None:
    """Gate 2: the entity type exists in the registry."""
    if entity_type not in registry:
        raise GateFailure("entity_type", f"Unknown entity type: {entity_type}")
    print_success(f"Entity Type Valid: {entity_type}")


def check_field_names(fields: Iterable[str]) -> None:
    """Gate 3: no dynamic field uses a reserved column name."""
    fields = list(fields)
    conflicts = [name for name in fields if name in RESERVED_FIELD_NAMES]
    if conflicts:
        raise GateFailure(
            "field_names",
            f"Field name conflicts with reserved words: {', '.join(conflicts)}",
        )
    print_success(f"Field Names Valid: {', '.join(fields)}")


# ---------------------------------------------------------------------------
# Gates 4-5: generated file checks
# ---------------------------------------------------------------------------


def check_generated_content(page: Path) -> None:
    """Gate 4: the generated page carries every required marker.

    The first missing marker raises.  The caller decides whether the gate
    applies (it is skipped when the page does not exist yet).
    """
    content = page.read_text(encoding="utf-8")
    for marker, message in REQUIRED_MARKERS.items():
        if marker not in content:
            raise GateFailure("generated_content", message)
    print_success("Generated Code Passes Quality Gates")


def component_references(source: str) -> list[str]:
    """Return the ``@/components/...`` references imported by *source*, in order."""
    return [match.group("ref") for match in _RE_COMPONENT_IMPORT.finditer(source)]


def component_exists(components_root: Path, ref: str) -> bool:
    """True if ``<ref>.tsx``, ``<ref>.ts`` or ``<ref>/index.tsx`` exists."""
    base = components_root / ref
    for suffix in _COMPONENT_SUFFIXES:
        if base.with_name(base.name + suffix).is_file():
            return True
    return (base / "index.tsx").is_file()


def check_component_dependencies(files: Iterable[Path], components_root: Path) -> None:
    """Gate 5: every imported project component exists on disk.

    All unresolved references across *files* are collected and reported in
    one :class:`DependencyGateFailure`.
    """
    missing: list[str] = []
    checked = 0
    for path in files:
        if not path.is_file():
            continue
        for ref in component_references(path.read_text(encoding="utf-8")):
            checked += 1
            label = f"@/components/{ref}"
            if not component_exists(components_root, ref) and label not in missing:
                missing.append(label)

    if missing:
        raise DependencyGateFailure(missing)
    print_success(f"Component Dependencies Resolved: {checked} import(s)")
