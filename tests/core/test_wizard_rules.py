"""Wizard Rules — pure build, validate and merge of questionnaire entries.

Tests cover:
    - build_entry fills empty values for absent fields
    - required fields are reported in human-readable order before enum checks
    - merge_update keeps unspecified fields and stamps updated_at
    - validate_update ignores enum fields that were not supplied
    - is_current_entry prefers the tracked id, falls back to created_at
"""

from datetime import datetime

from smartsales.core.errors import FieldErrors
from smartsales.core.wizard_rules import (
    build_entry, default_wizard_data, format_timestamp, is_current_entry,
    merge_update, validate_new_entry, validate_update,
)

COMPLETE = {
    "business_type": "restaurant",
    "inventory_range": "enterprise",
    "company_name": "Spice House",
    "industry_sector": "Food",
}


def test_format_timestamp():
    assert format_timestamp(datetime(2026, 3, 4, 5, 6, 7)) == "2026-03-04 05:06:07"


def test_build_entry_defaults_absent_fields():
    entry = build_entry({"company_name": "X"}, "2026-01-01 00:00:00")
    assert entry["company_name"] == "X"
    assert entry["has_outlet"] is False
    assert entry["sales_channel"] == []
    assert entry["target_market"] == ""
    assert entry["created_at"] == "2026-01-01 00:00:00"
    assert "updated_at" not in entry


def test_validate_new_entry_accepts_complete_entry():
    assert validate_new_entry(build_entry(COMPLETE, "t")) is None


def test_validate_new_entry_lists_missing_fields_humanized():
    error = validate_new_entry(build_entry({"company_name": "X"}, "t"))
    assert error.http_status == 400
    assert error.message == (
        "Required fields missing: Business type, Inventory range, Industry sector"
    )
    assert isinstance(error.detail, FieldErrors)
    assert set(error.detail.fields) == {"business_type", "inventory_range", "industry_sector"}


def test_validate_new_entry_whitespace_only_counts_as_missing():
    error = validate_new_entry(build_entry({**COMPLETE, "company_name": "   "}, "t"))
    assert error.message == "Required fields missing: Company name"


def test_validate_new_entry_checks_business_type_before_inventory_range():
    entry = build_entry({**COMPLETE, "business_type": "bank", "inventory_range": "tiny"}, "t")
    assert validate_new_entry(entry).message == "Invalid business type provided"


def test_merge_update_keeps_unspecified_fields():
    existing = build_entry(COMPLETE, "2026-01-01 00:00:00")
    merged = merge_update(existing, {"additional_notes": "note"}, "2026-02-02 00:00:00")
    assert merged["additional_notes"] == "note"
    assert merged["company_name"] == "Spice House"
    assert merged["created_at"] == "2026-01-01 00:00:00"
    assert merged["updated_at"] == "2026-02-02 00:00:00"
    assert existing.get("updated_at") is None


def test_merge_update_on_empty_singleton_uses_defaults():
    merged = merge_update({}, {"company_name": "New"}, "t")
    assert merged["business_type"] == default_wizard_data()["business_type"]
    assert merged["company_name"] == "New"


def test_validate_update_ignores_unsupplied_enum_fields():
    legacy = {"business_type": "legacy-value", "inventory_range": "small"}
    merged = merge_update(legacy, {"company_name": "X"}, "t")
    assert validate_update(merged, {"company_name": "X"}) is None


def test_validate_update_rejects_supplied_invalid_enum():
    merged = merge_update({}, {"inventory_range": "massive"}, "t")
    error = validate_update(merged, {"inventory_range": "massive"})
    assert error.message == "Invalid inventory range provided"


def test_is_current_entry_uses_tracked_id():
    entry = {"created_at": "same"}
    assert is_current_entry("wizard_a", entry, "wizard_a", {"created_at": "other"})
    assert not is_current_entry("wizard_b", entry, "wizard_a", {"created_at": "same"})


def test_is_current_entry_falls_back_to_created_at():
    entry = {"created_at": "2025-01-01 00:00:00"}
    assert is_current_entry("wizard_x", entry, None, {"created_at": "2025-01-01 00:00:00"})
    assert not is_current_entry("wizard_x", entry, None, None)
    assert not is_current_entry("wizard_x", {"created_at": ""}, None, {"created_at": ""})
