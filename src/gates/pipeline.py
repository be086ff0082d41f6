"""Sequential, fail-fast quality gate pipeline.

The same pipeline runs twice per generation: before rendering (``pre``) and
against the staged output (``post``).  Gates run in a fixed order and the
first failure aborts the run.

1. smart-code format
2. entity type in the registry
3. reserved field names
4. generated content markers (post only)
5. component dependencies (post only)
6. TypeScript compilation (post only, opt-in)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path

from src.gates.checks import (
    check_component_dependencies,
    check_entity_type,
    check_field_names,
    check_generated_content,
    check_smart_code,
)
from src.gates.typescript import check_typescript
from src.presets.models import EntityPreset
from src.utils import console, print_success, print_warning


class GatePhase(str, Enum):
    """When a gate run happens relative to the write."""

    PRE = "pre"
    POST = "post"


class QualityGatePipeline:
    """Run the quality gates for one entity.

    Args:
        registry: Mapping used by the entity-type gate.
        project_root: Root of the Next.js project.
        components_root: Directory component imports resolve against.
            Defaults to ``<project_root>/src/components``.
        typescript_check: Enable gate 6 in the post phase.
    """

    def __init__(
        self,
        registry: Mapping[str, EntityPreset],
        project_root: str | Path = ".",
        components_root: str | Path | None = None,
        typescript_check: bool = False,
    ) -> None:
        self.registry = registry
        self.project_root = Path(project_root)
        if components_root is None:
            components_root = self.project_root / "src" / "components"
        self.components_root = Path(components_root)
        self.typescript_check = typescript_check

    def run(
        self,
        entity_type: str,
        preset: EntityPreset,
        output_path: str | Path,
        phase: GatePhase = GatePhase.PRE,
        artifact_paths: Iterable[str | Path] | None = None,
    ) -> None:
        """Run every gate applicable to *phase*.

        Args:
            entity_type: Registry key being generated.
            preset: The preset for *entity_type*.
            output_path: The page file the post-phase gates inspect.
            phase: ``pre`` runs gates 1-3; ``post`` runs all enabled gates.
            artifact_paths: Extra files scanned by the dependency gate.

        Raises:
            GateFailure: On the first failing gate.
        """
        phase = GatePhase(phase)
        output_path = Path(output_path)
        console.print(
            f"\n[bold cyan]Running HERA Quality Gates ({phase.value}-generation)...[/bold cyan]"
        )

        check_smart_code(preset.smart_code)
        check_entity_type(entity_type, self.registry)
        check_field_names(preset.default_fields)

        if phase is GatePhase.POST:
            self._run_post_gates(output_path, artifact_paths or [])

        print_success("All Quality Gates PASSED")

    # -- Internal helpers --------------------------------------------------

    def _run_post_gates(
        self, output_path: Path, artifact_paths: Iterable[str | Path]
    ) -> None:
        if not output_path.exists():
            print_warning(f"Generated file not found, skipping content gates: {output_path}")
            return

        check_generated_content(output_path)

        files = [output_path]
        files.extend(Path(p) for p in artifact_paths if Path(p) != output_path)
        check_component_dependencies(files, self.components_root)

        if self.typescript_check:
            check_typescript(output_path, self.project_root)
