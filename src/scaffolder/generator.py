"""CRUD artifact renderer.

Takes one entity preset (plus its derived field configs) and renders the
four artifacts of a generated CRUD page: the React page, the API route, a
README and a machine-readable ``entity.config.json``.  Rendering is pure:
the same input always gives byte-identical output and nothing touches the
filesystem.
"""

from __future__ import annotations

import json
import re
from collections import Counter
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.errors import DuplicateImportError
from src.presets.models import CONSENT_RULES, BusinessRule, EntityPreset
from src.scaffolder.fields import DerivedFieldConfig
from src.scaffolder.paths import api_route_path, page_path, resolve_path
from src.scaffolder.templates import TemplateRenderer
from src.utils import camel_case, pascal_case

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASE_ICONS: tuple[str, ...] = (
    "TrendingUp",
    "Plus",
    "Edit",
    "Trash2",
    "X",
    "Save",
    "Eye",
    "Download",
    "Upload",
    "Search",
    "Filter",
    "MoreVertical",
    "AlertCircle",
    "CheckCircle",
    "Clock",
)

# Members the page interface declares itself; dynamic fields of the same name
# are not declared twice.
BASE_INTERFACE_MEMBERS: frozenset[str] = frozenset(
    {
        "id",
        "entity_id",
        "entity_name",
        "smart_code",
        "status",
        "created_at",
        "updated_at",
        "created_by",
        "updated_by",
        "approval_status",
        "workflow_stage",
    }
)

_STANDARD_EVENTS: tuple[str, ...] = ("CREATED", "UPDATED", "DELETED")

_IMPORT_RE = re.compile(
    r"^import\s+(?P<clause>[^;'\"]*?)\s+from\s+['\"][^'\"]+['\"]",
    re.MULTILINE | re.DOTALL,
)

# ---------------------------------------------------------------------------
# Artifact model
# ---------------------------------------------------------------------------


class GeneratedArtifact(BaseModel):
    """One rendered file, addressed relative to the project root."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str

    @property
    def is_typescript(self) -> bool:
        return self.path.endswith((".ts", ".tsx"))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def dedupe_imports(names: Iterable[str]) -> list[str]:
    """Remove duplicate import names and sort them case-insensitively."""
    return sorted(set(names), key=lambda n: (n.lower(), n))


def event_smart_code(entity_smart_code: str, event: str) -> str:
    """``HERA.CRM.MCA.ENTITY.CONTACT.v1`` + ``CREATED`` gives
    ``HERA.CRM.MCA.EVENT.CONTACT.v1.CREATED.V1``."""
    return f"{entity_smart_code.replace('ENTITY', 'EVENT', 1)}.{event}.V1"


def smart_code_constants(
    preset: EntityPreset, fields: list[DerivedFieldConfig]
) -> list[tuple[str, str]]:
    """Ordered ``(key, smart_code)`` pairs for the page constants object."""
    codes = [("ENTITY", preset.smart_code)]
    codes.extend((f"FIELD_{field.name.upper()}", field.smart_code) for field in fields)
    events = list(_STANDARD_EVENTS)
    if preset.has_rule(BusinessRule.STATUS_WORKFLOW):
        events.append("STATUS_CHANGED")
    codes.extend(
        (f"EVENT_{event}", event_smart_code(preset.smart_code, event))
        for event in events
    )
    return codes


def import_bindings(source: str) -> list[str]:
    """Return every local name bound by ``import ... from`` statements.

    Handles default imports, named imports, ``type`` modifiers and ``as``
    aliases.  Side-effect imports bind nothing and are ignored.
    """
    bindings: list[str] = []
    for match in _IMPORT_RE.finditer(source):
        clause = match.group("clause").strip()
        if clause.startswith("type "):
            clause = clause[len("type "):]
        named = ""
        if "{" in clause:
            clause, _, rest = clause.partition("{")
            named = rest.partition("}")[0]
        for part in clause.split(","):
            part = part.strip()
            if part.startswith("* as "):
                part = part[len("* as "):]
            if part:
                bindings.append(part)
        for part in named.split(","):
            part = " ".join(part.split())
            if not part:
                continue
            if part.startswith("type "):
                part = part[len("type "):]
            bindings.append(part.split(" as ")[-1].strip())
    return bindings


def check_import_bindings(artifact: GeneratedArtifact) -> None:
    """Raise :class:`DuplicateImportError` if a name is imported twice."""
    counts = Counter(import_bindings(artifact.content))
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateImportError(artifact.path, duplicates)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class CrudPageRenderer:
    """Render the CRUD artifacts for one entity preset."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        app_dir: str = "src/app",
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.app_dir = app_dir

    def render(
        self,
        entity_type: str,
        preset: EntityPreset,
        fields: list[DerivedFieldConfig],
    ) -> list[GeneratedArtifact]:
        """Render page, route, README and config, in that order.

        Raises:
            DuplicateImportError: If a rendered TypeScript artifact binds the
                same import name twice.
        """
        ctx = self._build_context(entity_type, preset, fields)
        page = page_path(preset, self.app_dir)
        page_dir = page.parent

        artifacts = [
            GeneratedArtifact(
                path=str(page),
                content=self.renderer.render("page.tsx.j2", ctx),
            ),
            GeneratedArtifact(
                path=str(api_route_path(preset, self.app_dir)),
                content=self.renderer.render("route.ts.j2", ctx),
            ),
            GeneratedArtifact(
                path=str(page_dir / "README.md"),
                content=self.renderer.render("README.md.j2", ctx),
            ),
            GeneratedArtifact(
                path=str(page_dir / "entity.config.json"),
                content=render_entity_config(entity_type, preset, fields, ctx["smart_codes"]),
            ),
        ]

        for artifact in artifacts:
            if artifact.is_typescript:
                check_import_bindings(artifact)
        return artifacts

    # -- Context building --------------------------------------------------

    def _build_context(
        self,
        entity_type: str,
        preset: EntityPreset,
        fields: list[DerivedFieldConfig],
    ) -> dict[str, Any]:
        """Build the Jinja2 template context for one preset."""
        status_workflow = preset.has_rule(BusinessRule.STATUS_WORKFLOW)
        requires_approval = preset.has_rule(BusinessRule.REQUIRES_APPROVAL)
        consent_filters = bool(preset.business_rules & CONSENT_RULES)
        field_names = {field.name for field in fields}

        interface_fields = [f for f in fields if f.name not in BASE_INTERFACE_MEMBERS]
        by_name = {field.name: field for field in fields}

        filter_keys = ["search", "status"]
        if status_workflow:
            filter_keys.append("workflow_stage")
        if requires_approval:
            filter_keys.append("approval_status")
        if consent_filters:
            filter_keys.append("consent_status")
        select_filter_fields = [
            f
            for f in interface_fields[:2]
            if f.type == "text" and f.name not in filter_keys
        ]
        filter_keys.extend(f.name for f in select_filter_fields)

        resolved = resolve_path(preset)
        return {
            "entity_type": entity_type,
            "entity_var": camel_case(entity_type),
            "type_name": pascal_case(preset.title),
            "record_type": pascal_case(preset.title) + "Record",
            "plural_type_name": pascal_case(preset.title_plural),
            "preset": preset,
            "fields": fields,
            "interface_fields": interface_fields,
            "card_fields": [
                by_name[name]
                for name in preset.mobile_card_fields
                if name in by_name
            ],
            "table_fields": [
                by_name[name]
                for name in preset.table_columns[1:]
                if name in by_name
            ],
            "filter_keys": filter_keys,
            "select_filter_fields": select_filter_fields,
            "smart_codes": smart_code_constants(preset, fields),
            "icon_imports": dedupe_imports([*BASE_ICONS, preset.icon]),
            "status_workflow": status_workflow,
            "requires_approval": requires_approval,
            "consent_filters": consent_filters,
            "consent_extra": consent_filters and "consent_status" not in field_names,
            "include_relationships": "true" if (status_workflow or requires_approval) else "false",
            "page_route": f"/{resolved}",
            "api_route": f"/api/v1/{resolved}",
        }


def render_entity_config(
    entity_type: str,
    preset: EntityPreset,
    fields: list[DerivedFieldConfig],
    smart_codes: list[tuple[str, str]],
) -> str:
    """Deterministic JSON description of the generated entity."""
    payload = {
        "entity_type": entity_type,
        "preset": preset.model_dump(mode="json", exclude={"business_rules"})
        | {"business_rules": preset.sorted_rules},
        "fields": [field.model_dump(mode="json") for field in fields],
        "smart_codes": dict(smart_codes),
        "paths": {
            "page": f"/{resolve_path(preset)}",
            "api": f"/api/v1/{resolve_path(preset)}",
        },
    }
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
