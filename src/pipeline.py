"""HERA CRUD Page Generator -- pipeline orchestrator and CLI.

One generation run:

1. LOOKUP   -- Resolve the entity type in the preset registry.
2. PRE      -- Quality gates 1-3 against the preset (no file I/O).
3. RENDER   -- Render page, API route, README and entity config (pure).
4. STAGE    -- Write every artifact to a hidden sibling file.
5. POST     -- Quality gates 1-5 (+ optional tsc) against the staged page.
6. COMMIT   -- Atomically rename staged files into place, or roll back.

Usage::

    python -m src.pipeline CONTACT
    python -m src.pipeline PURCHASE_ORDER --project-root ../heraerp --dry-run
    python -m src.pipeline --list
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.config import GeneratorConfig
from src.errors import EntityTypeNotFound, GeneratorError
from src.gates import GatePhase, QualityGatePipeline
from src.presets import EntityPreset, PresetRegistry, default_registry
from src.presets.registry import normalize_key
from src.scaffolder.fields import derive_fields
from src.scaffolder.generator import CrudPageRenderer, GeneratedArtifact
from src.scaffolder.paths import page_path, resolve_path
from src.scaffolder.writer import StagedWrite
from src.utils import (
    console,
    format_duration,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Summary of one generation run."""

    entity_type: str
    preset: EntityPreset
    page_path: Path
    artifacts: list[str] = Field(
        default_factory=list, description="Artifact paths relative to the project root"
    )
    written: list[Path] = Field(default_factory=list)
    dry_run: bool = False
    duration_seconds: float = 0.0

    @property
    def page_route(self) -> str:
        return f"/{resolve_path(self.preset)}"


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class GenerationPipeline:
    """Drive one CRUD page generation from preset lookup to commit.

    Attributes:
        config: Immutable run configuration.
        registry: Preset registry used for lookup and the entity-type gate.
        renderer: Pure artifact renderer.
        gates: Quality gate pipeline, run before and after the write.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        registry: PresetRegistry | None = None,
        renderer: CrudPageRenderer | None = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else default_registry
        self.renderer = renderer or CrudPageRenderer(app_dir=config.app_dir)
        self.gates = QualityGatePipeline(
            self.registry,
            project_root=config.project_root,
            components_root=config.components_path,
            typescript_check=config.typescript_check,
        )

    def run(self) -> GenerationResult:
        """Execute the pipeline.

        Raises:
            EntityTypeNotFound: The entity type is not in the registry.
            GateFailure: A quality gate rejected the preset or the output.
            DuplicateImportError: The renderer produced a duplicate import.
        """
        start = time.monotonic()
        entity_type = normalize_key(self.config.entity_type)

        console.print(f"[bold]Generating Enterprise {entity_type} page...[/bold]")
        if self.config.industry:
            console.print(f"Using industry extension: {self.config.industry}")

        preset = self.registry.lookup(entity_type)
        page_final = self.config.project_root / page_path(preset, self.config.app_dir)

        # Pre-generation gates: no file I/O happens before these pass.
        self.gates.run(entity_type, preset, page_final, GatePhase.PRE)

        artifacts = self.renderer.render(entity_type, preset, derive_fields(preset))

        result = GenerationResult(
            entity_type=entity_type,
            preset=preset,
            page_path=page_final,
            artifacts=[artifact.path for artifact in artifacts],
            dry_run=self.config.dry_run,
        )

        if self.config.dry_run:
            print_warning("Dry run: nothing was written and post-generation gates were skipped")
            for artifact in artifacts:
                console.print(f"  [dim]would write[/dim] {artifact.path}")
        else:
            result.written = self._write(entity_type, preset, artifacts)

        result.duration_seconds = time.monotonic() - start
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(
        self,
        entity_type: str,
        preset: EntityPreset,
        artifacts: list[GeneratedArtifact],
    ) -> list[Path]:
        """Stage, gate and commit *artifacts*; roll back if a gate fails."""
        staged = StagedWrite(self.config.project_root, artifacts)
        page = artifacts[0].path
        try:
            staged.stage()
            self.gates.run(
                entity_type,
                preset,
                staged.staged_path(page),
                GatePhase.POST,
                artifact_paths=[staged.staged_path(a.path) for a in artifacts[1:]],
            )
        except Exception:
            staged.rollback()
            raise

        written = staged.commit()
        for path in written:
            print_success(f"Generated: {path}")
        return written


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------


def print_catalog(registry: Mapping[str, EntityPreset]) -> None:
    """Print usage plus the preset catalog as a table."""
    print_banner("HERA Enterprise CRUD Page Generator")
    console.print("[bold]Usage:[/bold]")
    console.print(escape("  generate-crud-page <ENTITY_TYPE> [--industry=<INDUSTRY>] [--dry-run]\n"))

    table = Table(title="Available Entity Types", show_header=True, header_style="bold cyan")
    table.add_column("Entity Type", style="bold", no_wrap=True)
    table.add_column("Module", style="dim")
    table.add_column("Path")
    table.add_column("Description")
    for key in sorted(registry):
        preset = registry[key]
        table.add_row(key, preset.module, resolve_path(preset), preset.description)
    console.print(table)

    console.print(
        Panel(
            "\n".join(
                [
                    "generate-crud-page OPPORTUNITY",
                    "generate-crud-page CONTACT --project-root ../heraerp",
                    "generate-crud-page PRODUCT --industry=RETAIL --dry-run",
                ]
            ),
            title="[bold]Examples[/bold]",
            border_style="cyan",
        )
    )


def print_result(result: GenerationResult, config: GeneratorConfig) -> None:
    """Print the summary table and next-step hints for a finished run."""
    summary = {
        "Entity type": result.entity_type,
        "Module": result.preset.module,
        "Smart code": result.preset.smart_code,
        "Page": str(result.page_path),
        "Artifacts": str(len(result.artifacts)),
        "Mode": "dry run" if result.dry_run else "written",
        "Duration": format_duration(result.duration_seconds),
    }
    if config.industry:
        summary["Industry"] = config.industry
    print_summary_table(summary, title="Generation Summary")

    if result.dry_run:
        return

    url = config.dev_server_url.rstrip("/") + result.page_route
    console.print("[bold]Next Steps:[/bold]")
    console.print(f"  1. Visit page: {url}")
    console.print("  2. Test CRUD operations")
    console.print("  3. Verify business rules and workflows")
    console.print()
    print_success("Enterprise-grade CRUD page generated successfully!")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-crud-page",
        description="HERA Enterprise CRUD Page Generator -- preset-driven Next.js pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  generate-crud-page OPPORTUNITY\n"
            "  generate-crud-page CONTACT --project-root ../heraerp\n"
            "  generate-crud-page PRODUCT --industry=RETAIL --dry-run\n"
        ),
    )
    parser.add_argument(
        "entity_type",
        nargs="?",
        default=None,
        help="Entity preset key, case-insensitive (omit to list the catalog)",
    )
    parser.add_argument(
        "--industry",
        default=None,
        help="Industry tag; recorded and echoed, does not change the output",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Root of the Next.js project (default: $HERA_PROJECT_ROOT or .)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Render and list the artifacts without writing anything",
    )
    parser.add_argument(
        "--typescript-check",
        action="store_true",
        default=None,
        help="Also run `npx tsc --noEmit` on the generated page",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available entity types and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``generate-crud-page`` / ``python -m src.pipeline``."""
    args = build_parser().parse_args(argv)

    if args.list or not args.entity_type:
        print_catalog(default_registry)
        return 0

    config = GeneratorConfig.from_env(
        entity_type=args.entity_type,
        industry=args.industry,
        project_root=Path(args.project_root) if args.project_root else None,
        dry_run=args.dry_run,
        typescript_check=args.typescript_check,
    )

    try:
        result = GenerationPipeline(config).run()
    except EntityTypeNotFound as exc:
        print_error(str(exc))
        console.print(f"Available entities: {', '.join(exc.available)}", highlight=False)
        return 1
    except GeneratorError as exc:
        print_error(str(exc))
        return 1

    print_result(result, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
