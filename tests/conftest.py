"""Shared pytest fixtures for the CRUD generator test suite.

Provides reusable fixtures for:
- Temporary Next.js project trees with the mobile component stubs
- Catalog presets and deliberately malformed presets
- Generator configuration bound to the temporary project
- Mock subprocess helpers for the TypeScript gate
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.config import GeneratorConfig
from src.presets import ENTITY_PRESETS, EntityPreset, PresetRegistry, lookup

# Components the generated page imports from ``@/components``.
COMPONENT_STUBS: tuple[str, ...] = (
    "mobile/MobilePageLayout",
    "mobile/MobileFilters",
    "mobile/MobileDataTable",
    "mobile/MobileCard",
    "auth/HERAAuthProvider",
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Temporary project root with no ``src/`` tree at all."""
    root = tmp_path / "heraerp"
    root.mkdir()
    yield root


@pytest.fixture
def project_root(empty_project: Path) -> Path:
    """Temporary project root containing stub files for every page import."""
    components = empty_project / "src" / "components"
    for ref in COMPONENT_STUBS:
        stub = components / f"{ref}.tsx"
        stub.parent.mkdir(parents=True, exist_ok=True)
        stub.write_text(f"export function {Path(ref).name}() {{ return null }}\n", encoding="utf-8")
    yield empty_project


def _snapshot_tree(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def snapshot_tree():
    """Every file and directory below a root, as POSIX relative paths."""
    return _snapshot_tree


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


@pytest.fixture
def contact_preset() -> EntityPreset:
    return lookup("CONTACT")


@pytest.fixture
def unversioned_preset(contact_preset: EntityPreset) -> EntityPreset:
    """CONTACT with the ``.v1`` suffix dropped from its smart code."""
    return contact_preset.model_copy(update={"smart_code": "HERA.CRM.MCA.ENTITY.CONTACT"})


@pytest.fixture
def registry_with(contact_preset: EntityPreset):
    """Factory: a registry equal to the catalog with CONTACT replaced."""

    def _make(preset: EntityPreset) -> PresetRegistry:
        presets = dict(ENTITY_PRESETS)
        presets["CONTACT"] = preset
        return PresetRegistry(presets)

    return _make


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config(project_root: Path):
    """Factory: a ``GeneratorConfig`` rooted at the temporary project."""

    def _make(entity_type: str = "CONTACT", **overrides) -> GeneratorConfig:
        values = {"entity_type": entity_type, "project_root": project_root}
        values.update(overrides)
        return GeneratorConfig(**values)

    return _make


@pytest.fixture(autouse=True)
def _clean_hera_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's HERA_* variables from leaking into tests."""
    for name in (
        "HERA_PROJECT_ROOT",
        "HERA_APP_DIR",
        "HERA_TYPESCRIPT_CHECK",
        "HERA_DEV_SERVER_URL",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Subprocess helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def completed_process():
    """Factory for ``subprocess.CompletedProcess`` results."""

    def _make(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
        proc = MagicMock(spec=subprocess.CompletedProcess)
        proc.returncode = returncode
        proc.stdout = stdout
        proc.stderr = stderr
        return proc

    return _make
