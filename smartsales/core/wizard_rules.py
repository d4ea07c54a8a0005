"""Wizard Rules — sanitize, validate and merge onboarding questionnaire entries.

Invariants:
    - build_entry sanitizes every field; missing fields get empty values
    - validate_new_entry checks required fields BEFORE enum membership
    - merge_update keeps prior values for fields absent from the payload
    - validate_update only checks enum fields the caller actually supplied
    - All functions are pure: timestamps are passed in, nothing is persisted here
"""

from datetime import datetime
from typing import Any

from smartsales.core.domain_types import (
    VALID_BUSINESS_TYPES, VALID_INVENTORY_RANGES,
)
from smartsales.core.errors import (
    FieldErrors, RequestValidationFailed, SmartSalesError,
)
from smartsales.core.sanitize import (
    humanize_field, sanitize_boolean, sanitize_text, sanitize_text_list,
    sanitize_textarea,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

REQUIRED_FIELDS: tuple[str, ...] = (
    "business_type", "inventory_range", "company_name", "industry_sector",
)

TEXT_FIELDS: tuple[str, ...] = (
    "business_type", "inventory_range", "company_name", "company_size",
    "industry_sector", "monthly_revenue", "target_market",
)

EDITABLE_FIELDS: tuple[str, ...] = TEXT_FIELDS + (
    "has_outlet", "additional_notes", "sales_channel",
)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def default_wizard_data() -> dict[str, Any]:
    """Shape returned when no wizard entry was ever saved."""
    return {
        "business_type": "retail",
        "inventory_range": "small",
        "has_outlet": False,
        "additional_notes": "",
        "company_name": "",
        "company_size": "",
        "industry_sector": "",
        "monthly_revenue": "",
        "sales_channel": [],
        "target_market": "",
        "created_at": "",
    }


def _sanitize_field(name: str, value: Any) -> Any:
    if name == "has_outlet":
        return sanitize_boolean(value)
    if name == "additional_notes":
        return sanitize_textarea(value)
    if name == "sales_channel":
        return sanitize_text_list(value)
    return sanitize_text(value)


def _supplied(params: dict[str, Any], name: str) -> bool:
    return params.get(name) is not None


def build_entry(params: dict[str, Any], created_at: str) -> dict[str, Any]:
    """Sanitized new entry. Absent text fields become "", flags False, lists []."""
    entry: dict[str, Any] = {}
    for name in (
        "business_type", "inventory_range", "has_outlet", "additional_notes",
        "company_name", "company_size", "industry_sector", "monthly_revenue",
        "sales_channel", "target_market",
    ):
        if _supplied(params, name):
            entry[name] = _sanitize_field(name, params[name])
        elif name == "has_outlet":
            entry[name] = False
        elif name == "sales_channel":
            entry[name] = []
        else:
            entry[name] = ""
    entry["created_at"] = created_at
    return entry


def _enum_errors(entry: dict[str, Any], fields: set[str]) -> SmartSalesError | None:
    if "business_type" in fields and entry.get("business_type") not in VALID_BUSINESS_TYPES:
        return RequestValidationFailed(
            "Invalid business type provided",
            FieldErrors({"business_type": "Invalid business type provided"}),
        )
    if "inventory_range" in fields and entry.get("inventory_range") not in VALID_INVENTORY_RANGES:
        return RequestValidationFailed(
            "Invalid inventory range provided",
            FieldErrors({"inventory_range": "Invalid inventory range provided"}),
        )
    return None


def validate_new_entry(entry: dict[str, Any]) -> SmartSalesError | None:
    missing = [name for name in REQUIRED_FIELDS if not entry.get(name)]
    if missing:
        labels = [humanize_field(name) for name in missing]
        return RequestValidationFailed(
            f"Required fields missing: {', '.join(labels)}",
            FieldErrors({
                name: f"{label} is required."
                for name, label in zip(missing, labels)
            }),
        )
    return _enum_errors(entry, {"business_type", "inventory_range"})


def merge_update(
    existing: dict[str, Any], params: dict[str, Any], updated_at: str,
) -> dict[str, Any]:
    """Field-level merge: only supplied fields overwrite prior values."""
    merged = dict(existing)
    for name in EDITABLE_FIELDS:
        if _supplied(params, name):
            merged[name] = _sanitize_field(name, params[name])
        else:
            merged.setdefault(name, default_wizard_data().get(name, ""))
    merged["updated_at"] = updated_at
    return merged


def validate_update(
    merged: dict[str, Any], params: dict[str, Any],
) -> SmartSalesError | None:
    supplied = {
        name for name in ("business_type", "inventory_range")
        if _supplied(params, name)
    }
    return _enum_errors(merged, supplied)


def is_current_entry(
    entry_id: str,
    existing: dict[str, Any],
    current_entry_id: str | None,
    current_data: dict[str, Any] | None,
) -> bool:
    """Whether a logged entry is the one mirrored by the current singleton.

    Entries saved since the current id is tracked compare ids. Older data,
    written before the id was recorded, falls back to matching created_at.
    """
    if current_entry_id is not None:
        return entry_id == current_entry_id
    if not current_data:
        return False
    created = existing.get("created_at")
    return bool(created) and current_data.get("created_at") == created
