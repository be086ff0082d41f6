"""Field classification for preset dynamic fields.

Maps a bare field name to the input type, display label and required flag
used by the generated form.  Classification is a pure function of the name:
an exact, case-sensitive table lookup with no inference from values.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from src.presets.models import EntityPreset

FieldType = Literal["text", "number", "date", "email", "phone", "url"]

FIELD_TYPES: dict[str, FieldType] = {
    "email": "email",
    "phone": "phone",
    "website": "url",
    "receipt_url": "url",
    "document_url": "url",
    "employees": "number",
    "revenue": "number",
    "price": "number",
    "cost": "number",
    "stock": "number",
    "score": "number",
    "value": "number",
    "probability": "number",
    "budget": "number",
    "amount": "number",
    "quantity": "number",
    "weight": "number",
    "capacity": "number",
    "close_date": "date",
    "due_date": "date",
    "start_date": "date",
    "end_date": "date",
    "hire_date": "date",
    "pickup_date": "date",
    "expense_date": "date",
    "issue_date": "date",
    "dob": "date",
}

REQUIRED_FIELDS: frozenset[str] = frozenset(
    {"email", "phone", "owner", "account", "company", "industry", "sku", "price"}
)


class FieldClassification(BaseModel):
    """Result of :func:`classify`."""

    model_config = ConfigDict(frozen=True)

    type: FieldType
    label: str
    required: bool


class DerivedFieldConfig(BaseModel):
    """Per-field generation input, computed from a preset.  Never persisted."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    label: str
    required: bool
    smart_code: str

    @property
    def ts_type(self) -> str:
        """TypeScript property type for the generated interface."""
        return "number" if self.type == "number" else "string"

    @property
    def input_type(self) -> str:
        """HTML ``<input type>`` for the generated form."""
        return {"phone": "tel"}.get(self.type, self.type)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def field_type(field_name: str) -> FieldType:
    """Exact-match type lookup; unmatched names are ``text``."""
    return FIELD_TYPES.get(field_name, "text")


def format_label(field_name: str) -> str:
    """Turn ``close_date`` into ``Close Date``.

    Underscores become spaces, then the first letter of every word is
    upper-cased.  The rest of each word is left as is.
    """
    words = field_name.replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def is_required(field_name: str) -> bool:
    """Heuristic default: a fixed set of typically-required names."""
    return field_name in REQUIRED_FIELDS


def classify(field_name: str) -> FieldClassification:
    """Classify a field name into ``{type, label, required}``."""
    return FieldClassification(
        type=field_type(field_name),
        label=format_label(field_name),
        required=is_required(field_name),
    )


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


def dynamic_field_smart_code(entity_smart_code: str, field_name: str) -> str:
    """Build the DYN smart code for one field of an entity.

    ``HERA.CRM.MCA.ENTITY.CONTACT.v1`` + ``email`` gives
    ``HERA.CRM.MCA.DYN.CONTACT.v1.EMAIL.V1``.
    """
    return f"{entity_smart_code.replace('ENTITY', 'DYN', 1)}.{field_name.upper()}.V1"


def derive_fields(preset: EntityPreset) -> list[DerivedFieldConfig]:
    """Classify every default field of *preset*, preserving order."""
    derived: list[DerivedFieldConfig] = []
    for name in preset.default_fields:
        classification = classify(name)
        derived.append(
            DerivedFieldConfig(
                name=name,
                type=classification.type,
                label=classification.label,
                required=classification.required,
                smart_code=dynamic_field_smart_code(preset.smart_code, name),
            )
        )
    return derived
