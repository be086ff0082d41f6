"""Entity preset catalog and registry.

Quick usage::

    from src.presets import lookup

    preset = lookup("contact")
    preset.smart_code  # 'HERA.CRM.MCA.ENTITY.CONTACT.v1'
"""

from src.presets.catalog import ENTITY_PRESETS
from src.presets.models import (
    RESERVED_FIELD_NAMES,
    SMART_CODE_PATTERN,
    BusinessRule,
    EntityPreset,
    Module,
)
from src.presets.registry import PresetRegistry, default_registry, lookup

__all__ = [
    "ENTITY_PRESETS",
    "RESERVED_FIELD_NAMES",
    "SMART_CODE_PATTERN",
    "BusinessRule",
    "EntityPreset",
    "Module",
    "PresetRegistry",
    "default_registry",
    "lookup",
]
