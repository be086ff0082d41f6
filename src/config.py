"""CRUD generator configuration.

A single typed, immutable settings object built once at the CLI entry point
and passed explicitly through the generation pipeline.  Uses Pydantic v2 so
values are validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Settings for one generation run.

    Instances are frozen; derive a variant with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    entity_type: str = Field(default="", description="Registry key to generate, e.g. CONTACT")
    industry: str | None = Field(
        default=None,
        description="Industry tag from --industry.  Echoed only; does not change output.",
    )
    project_root: Path = Field(default=Path("."))
    app_dir: str = Field(default="src/app", description="Next.js app directory, relative to the root")
    components_dir: str = Field(default="src/components")
    dry_run: bool = Field(default=False, description="Render and list artifacts without writing")
    typescript_check: bool = Field(default=False, description="Enable the tsc quality gate")
    dev_server_url: str = Field(default="http://localhost:3001")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def components_path(self) -> Path:
        """Directory the component dependency gate resolves imports against."""
        return self.project_root / self.components_dir

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            HERA_PROJECT_ROOT, HERA_APP_DIR, HERA_TYPESCRIPT_CHECK,
            HERA_DEV_SERVER_URL.

        Keyword *overrides* (typically parsed CLI flags) win over the
        environment.  Overrides whose value is ``None`` are ignored.
        """
        values: dict[str, Any] = {}
        if os.environ.get("HERA_PROJECT_ROOT"):
            values["project_root"] = Path(os.environ["HERA_PROJECT_ROOT"])
        if os.environ.get("HERA_APP_DIR"):
            values["app_dir"] = os.environ["HERA_APP_DIR"]
        if os.environ.get("HERA_TYPESCRIPT_CHECK"):
            values["typescript_check"] = (
                os.environ["HERA_TYPESCRIPT_CHECK"].strip().lower() in _TRUTHY
            )
        if os.environ.get("HERA_DEV_SERVER_URL"):
            values["dev_server_url"] = os.environ["HERA_DEV_SERVER_URL"]

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
