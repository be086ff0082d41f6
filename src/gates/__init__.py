"""Quality gates run before and after generating a CRUD page."""

from src.gates.checks import (
    REQUIRED_MARKERS,
    check_component_dependencies,
    check_entity_type,
    check_field_names,
    check_generated_content,
    check_smart_code,
    component_references,
)
from src.gates.pipeline import GatePhase, QualityGatePipeline
from src.gates.typescript import check_typescript

__all__ = [
    "REQUIRED_MARKERS",
    "GatePhase",
    "QualityGatePipeline",
    "check_component_dependencies",
    "check_entity_type",
    "check_field_names",
    "check_generated_content",
    "check_smart_code",
    "check_typescript",
    "component_references",
]
