"""Tests for the preset models, catalog and registry (src.presets).

Covers:
- Every catalog preset passes the smart-code and reserved-name gates
- Case-insensitive lookup and the EntityTypeNotFound error
- Read-only mapping behaviour
- EntityPreset derived helpers and business rule coercion
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.errors import EntityTypeNotFound
from src.gates import check_field_names, check_smart_code
from src.presets import (
    ENTITY_PRESETS,
    RESERVED_FIELD_NAMES,
    SMART_CODE_PATTERN,
    BusinessRule,
    EntityPreset,
    Module,
    PresetRegistry,
    default_registry,
    lookup,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Catalog integrity
# ---------------------------------------------------------------------------


class TestCatalog:
    @pytest.mark.parametrize("key", sorted(ENTITY_PRESETS))
    def test_every_preset_passes_smart_code_gate(self, key):
        check_smart_code(ENTITY_PRESETS[key].smart_code)

    @pytest.mark.parametrize("key", sorted(ENTITY_PRESETS))
    def test_every_preset_passes_field_name_gate(self, key):
        check_field_names(ENTITY_PRESETS[key].default_fields)

    def test_smart_codes_end_with_lowercase_version(self):
        for preset in ENTITY_PRESETS.values():
            assert preset.smart_code.endswith(".v1"), preset.smart_code

    def test_no_reserved_field_names(self):
        for preset in ENTITY_PRESETS.values():
            assert not RESERVED_FIELD_NAMES & set(preset.default_fields)

    def test_catalog_covers_every_module(self):
        modules = {preset.module for preset in ENTITY_PRESETS.values()}
        assert modules == {m.value for m in Module}

    def test_catalog_size(self):
        assert len(ENTITY_PRESETS) >= 40

    def test_keys_are_uppercase(self):
        for key in ENTITY_PRESETS:
            assert key == key.upper()

    def test_contact_preset_contents(self):
        contact = ENTITY_PRESETS["CONTACT"]
        assert contact.smart_code == "HERA.CRM.MCA.ENTITY.CONTACT.v1"
        assert contact.module == "MCA"
        assert contact.has_rule(BusinessRule.GDPR_COMPLIANCE)
        assert contact.has_rule("consent_tracking")
        assert "email" in contact.default_fields


# ---------------------------------------------------------------------------
# Registry lookup
# ---------------------------------------------------------------------------


class TestRegistryLookup:
    def test_lookup_exact_key(self):
        assert lookup("CONTACT") is ENTITY_PRESETS["CONTACT"]

    @pytest.mark.parametrize("key", ["contact", "Contact", "  contact  "])
    def test_lookup_is_case_insensitive(self, key):
        assert lookup(key).title == "Contact"

    def test_unknown_key_raises_with_available_list(self):
        with pytest.raises(EntityTypeNotFound) as exc_info:
            lookup("NONEXISTENT_ENTITY")
        err = exc_info.value
        assert err.entity_type == "NONEXISTENT_ENTITY"
        assert err.available == sorted(ENTITY_PRESETS)
        assert "not found" in str(err)

    def test_contains_is_case_insensitive(self):
        assert "purchase_order" in default_registry
        assert "NOPE" not in default_registry
        assert 42 not in default_registry

    def test_getitem_raises_key_error(self):
        with pytest.raises(KeyError):
            default_registry["NOPE"]

    def test_len_and_iteration(self):
        assert len(default_registry) == len(ENTITY_PRESETS)
        assert set(default_registry) == set(ENTITY_PRESETS)

    def test_sorted_keys(self):
        keys = default_registry.sorted_keys()
        assert keys == sorted(keys)

    def test_registry_has_no_mutation_api(self):
        with pytest.raises(TypeError):
            default_registry["NEW"] = ENTITY_PRESETS["CONTACT"]  # type: ignore[index]

    def test_registry_copies_its_input(self):
        source = {"contact": ENTITY_PRESETS["CONTACT"]}
        registry = PresetRegistry(source)
        source["LEAD"] = ENTITY_PRESETS["LEAD"]
        assert "LEAD" not in registry
        assert "CONTACT" in registry


# ---------------------------------------------------------------------------
# EntityPreset model
# ---------------------------------------------------------------------------


def _preset(**overrides) -> EntityPreset:
    values = {
        "title": "Widget",
        "title_plural": "Widgets",
        "smart_code": "HERA.TEST.CORE.ENTITY.WIDGET.v1",
        "module": "CRM",
        "default_fields": ("a", "b", "c", "d", "e", "f", "g"),
    }
    values.update(overrides)
    return EntityPreset(**values)


class TestEntityPreset:
    def test_frozen(self):
        preset = _preset()
        with pytest.raises(ValidationError):
            preset.title = "Other"

    def test_module_enum_stored_as_tag(self):
        assert _preset(module=Module.WASTE_MANAGEMENT).module == "WASTE_MANAGEMENT"

    def test_unknown_module_tag_allowed(self):
        assert _preset(module="SPACE").module == "SPACE"

    def test_unknown_business_rule_rejected(self):
        with pytest.raises(ValidationError):
            _preset(business_rules={"audit_trial"})

    def test_business_rules_coerced_to_enum(self):
        preset = _preset(business_rules={"audit_trail", "status_workflow"})
        assert BusinessRule.AUDIT_TRAIL in preset.business_rules
        assert preset.sorted_rules == ["audit_trail", "status_workflow"]

    def test_malformed_smart_code_is_constructible(self):
        preset = _preset(smart_code="not-a-smart-code")
        assert not SMART_CODE_PATTERN.fullmatch(preset.smart_code)

    def test_mobile_card_fields_first_four(self):
        assert _preset().mobile_card_fields == ("a", "b", "c", "d")

    def test_table_columns(self):
        assert _preset().table_columns == ("entity_name", "a", "b", "c", "d", "e")

    def test_short_field_list(self):
        preset = _preset(default_fields=("only",))
        assert preset.mobile_card_fields == ("only",)
        assert preset.table_columns == ("entity_name", "only")

    def test_defaults(self):
        preset = _preset()
        assert preset.icon == "Database"
        assert preset.business_rules == frozenset()
        assert preset.industry_agnostic is True
