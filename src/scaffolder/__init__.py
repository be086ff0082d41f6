"""CRUD scaffolder -- turns an entity preset into Next.js source artifacts.

Quick usage::

    from src.presets import lookup
    from src.scaffolder import CrudPageRenderer, derive_fields

    preset = lookup("CONTACT")
    artifacts = CrudPageRenderer().render("CONTACT", preset, derive_fields(preset))
    artifacts[0].path  # 'src/app/crm/mca/contacts/page.tsx'
"""

from src.scaffolder.fields import DerivedFieldConfig, FieldClassification, classify, derive_fields
from src.scaffolder.generator import CrudPageRenderer, GeneratedArtifact, dedupe_imports
from src.scaffolder.paths import api_route_path, page_path, resolve_path
from src.scaffolder.templates import TemplateRenderer
from src.scaffolder.writer import StagedWrite

__all__ = [
    "CrudPageRenderer",
    "DerivedFieldConfig",
    "FieldClassification",
    "GeneratedArtifact",
    "StagedWrite",
    "TemplateRenderer",
    "api_route_path",
    "classify",
    "dedupe_imports",
    "derive_fields",
    "page_path",
    "resolve_path",
]
