"""Pydantic models for entity presets.

An entity preset is the declarative description of one ERP business object:
its identity (smart code), its dynamic fields, the business rules that toggle
optional blocks in the generated page, and a few UI hints.  Presets are
frozen; the catalog is built once at import and never mutated.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Constants shared with the quality gates
# ---------------------------------------------------------------------------

SMART_CODE_PATTERN = re.compile(
    r"HERA\.[A-Z_]+\.[A-Z_]+\.[A-Z_]+\.[A-Z_]+(\.[A-Z_]+)?\.v\d+"
)
"""Smart-code format: four or five uppercase segments after ``HERA`` and a
lowercase ``v<digits>`` version marker.  Always used with ``fullmatch``."""

RESERVED_FIELD_NAMES: frozenset[str] = frozenset(
    {"id", "entity_id", "organization_id", "created_at", "updated_at"}
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Module(str, Enum):
    """Known module tags.  Each one has an output directory prefix."""

    CRM = "CRM"
    MCA = "MCA"
    INV = "INV"
    PROCUREMENT = "PROCUREMENT"
    WASTE_MANAGEMENT = "WASTE_MANAGEMENT"
    FINANCE = "FINANCE"
    HR = "HR"
    SALON = "SALON"
    JEWELRY = "JEWELRY"
    FURNITURE = "FURNITURE"
    AUDIT = "AUDIT"
    ISP = "ISP"
    RETAIL = "RETAIL"
    ICECREAM = "ICECREAM"


class BusinessRule(str, Enum):
    """Named boolean flags a preset can switch on."""

    AUDIT_TRAIL = "audit_trail"
    DUPLICATE_DETECTION = "duplicate_detection"
    STATUS_WORKFLOW = "status_workflow"
    REQUIRES_APPROVAL = "requires_approval"
    GDPR_COMPLIANCE = "gdpr_compliance"
    CONSENT_TRACKING = "consent_tracking"
    REQUIRES_VERIFICATION = "requires_verification"
    REQUIRES_EVIDENCE = "requires_evidence"
    VERSION_CONTROL = "version_control"
    WCAG_VALIDATION = "wcag_validation"
    DYNAMIC_COMPILATION = "dynamic_compilation"
    PERFORMANCE_MONITORING = "performance_monitoring"
    CONSENT_VALIDATION = "consent_validation"
    SCHEDULE_OPTIMIZATION = "schedule_optimization"
    REAL_TIME_TRACKING = "real_time_tracking"
    CLICK_TRACKING = "click_tracking"
    UTM_ATTRIBUTION = "utm_attribution"
    REAL_TIME_ANALYTICS = "real_time_analytics"
    BATCH_TRACKING = "batch_tracking"
    WEIGHT_VERIFICATION = "weight_verification"
    ROUTE_OPTIMIZATION = "route_optimization"
    MULTI_CURRENCY = "multi_currency"
    PERIOD_LOCKING = "period_locking"


# Rules that switch on the consent filters in the generated page.
CONSENT_RULES: frozenset[BusinessRule] = frozenset(
    {BusinessRule.GDPR_COMPLIANCE, BusinessRule.CONSENT_TRACKING}
)


# ---------------------------------------------------------------------------
# EntityPreset
# ---------------------------------------------------------------------------


class EntityPreset(BaseModel):
    """Declarative record describing one business-object type.

    The smart-code format and the reserved field names are *not* enforced
    here.  A malformed preset is a data defect that the quality gates report,
    so it must be constructible.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Singular display name, e.g. 'Contact'")
    title_plural: str = Field(..., description="Plural display name, drives the output path")
    smart_code: str = Field(..., description="Entity smart code, e.g. HERA.CRM.MCA.ENTITY.CONTACT.v1")
    module: str = Field(..., description="Module tag, usually a Module value")
    description: str = Field(default="")
    industry_agnostic: bool = Field(default=True)
    icon: str = Field(default="Database", description="lucide-react icon name")
    primary_color: str = Field(default="#0078d4")
    accent_color: str = Field(default="#005a9e")
    default_fields: tuple[str, ...] = Field(
        default=(), description="Ordered dynamic field names"
    )
    kpi_metrics: tuple[str, ...] = Field(default=())
    business_rules: frozenset[BusinessRule] = Field(default_factory=frozenset)

    @field_validator("module", mode="before")
    @classmethod
    def _plain_module_tag(cls, value: object) -> object:
        # Module members are stored as their bare tag string.
        if isinstance(value, Module):
            return value.value
        return value

    def has_rule(self, rule: BusinessRule | str) -> bool:
        """Return ``True`` if *rule* is switched on for this preset."""
        return BusinessRule(rule) in self.business_rules

    @property
    def mobile_card_fields(self) -> tuple[str, ...]:
        """The first four fields, shown on mobile cards."""
        return self.default_fields[:4]

    @property
    def table_columns(self) -> tuple[str, ...]:
        """``entity_name`` followed by the first five fields."""
        return ("entity_name", *self.default_fields[:5])

    @property
    def sorted_rules(self) -> list[str]:
        """Business rule names in a stable order for rendering."""
        return sorted(rule.value for rule in self.business_rules)
