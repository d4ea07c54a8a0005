"""App Settings Rules — assemble the store profile and plan partial updates.

Invariants:
    - has_outlet = stored wizard flag truthy OR a published outlet exists
    - plan_update never aborts on a bad field: invalid fields land in `errors`,
      valid fields still land in `option_writes` / `wizard_changes`
    - A field whose value is None counts as not supplied
    - Both functions are pure; the service applies the plan
"""

from dataclasses import dataclass, field
from typing import Any

from smartsales.core.domain_types import (
    ADMIN_EMAIL, SITE_NAME, STORE_FIELDS, VALID_BUSINESS_TYPES,
    VALID_INVENTORY_RANGES, WIZARD_PROFILE_FIELDS, OptionSpec,
)
from smartsales.core.locale_codes import is_valid_country, is_valid_currency
from smartsales.core.sanitize import (
    is_email, sanitize_boolean, sanitize_text, sanitize_textarea,
)


@dataclass
class UpdatePlan:
    """Writes to apply plus the per-field outcome report."""
    option_writes: list[tuple[OptionSpec, Any]] = field(default_factory=list)
    wizard_changes: dict[str, Any] = field(default_factory=dict)
    updated_fields: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)


def build_profile(
    store_values: dict[str, Any],
    wizard: dict[str, Any],
    inventory_size: int,
    outlets_exist: bool,
    metadata: dict[str, Any],
) -> dict[str, Any]:
    """Flatten store options, wizard singleton and environment metadata."""
    has_outlet = outlets_exist or sanitize_boolean(wizard.get("has_outlet") or False)
    return {
        "store_address": store_values["store_address"],
        "store_address_2": store_values["store_address_2"],
        "store_city": store_values["store_city"],
        "store_postcode": store_values["store_postcode"],
        "store_country": store_values["store_country"],
        "currency": store_values["currency"],
        "email": store_values["email"],
        "business_type": wizard.get("business_type") or "retail",
        "inventory_range": wizard.get("inventory_range") or "small",
        "inventory_size": inventory_size,
        "has_outlet": has_outlet,
        "additional_notes": wizard.get("additional_notes") or "",
        **metadata,
        "site_name": store_values["site_name"] or metadata.get("site_name", ""),
    }


def _plan_store_field(plan: UpdatePlan, name: str, raw: Any, option: OptionSpec, checks: tuple[str, ...]) -> None:
    value = sanitize_text(raw)
    if "currency" in checks:
        if not is_valid_currency(value):
            plan.errors.append(f"Invalid currency code: {value}")
            return
        value = value.upper()
    if "country" in checks:
        if not is_valid_country(value):
            plan.errors.append(f"Invalid country code: {value}")
            return
        value = value.upper()
    plan.option_writes.append((option, value))
    plan.updated_fields[name] = value


def _plan_wizard_field(plan: UpdatePlan, name: str, raw: Any) -> None:
    if name == "has_outlet":
        value: Any = sanitize_boolean(raw)
    elif name == "additional_notes":
        value = sanitize_textarea(raw)
    else:
        value = sanitize_text(raw)

    if name == "business_type" and value not in VALID_BUSINESS_TYPES:
        plan.errors.append(f"Invalid business type: {value}")
        return
    if name == "inventory_range" and value not in VALID_INVENTORY_RANGES:
        plan.errors.append(f"Invalid inventory range: {value}")
        return
    plan.wizard_changes[name] = value
    plan.updated_fields[name] = value


def plan_update(params: dict[str, Any]) -> UpdatePlan:
    plan = UpdatePlan()

    for binding in STORE_FIELDS:
        raw = params.get(binding.field)
        if raw is not None:
            _plan_store_field(plan, binding.field, raw, binding.option, binding.validators)

    email = params.get("email")
    if email is not None:
        email = str(email).strip()
        if is_email(email):
            plan.option_writes.append((ADMIN_EMAIL, email))
            plan.updated_fields["email"] = email
        else:
            plan.errors.append(f"Invalid email address: {email}")

    site_name = params.get("site_name")
    if site_name is not None:
        value = sanitize_text(site_name)
        plan.option_writes.append((SITE_NAME, value))
        plan.updated_fields["site_name"] = value

    for name in WIZARD_PROFILE_FIELDS:
        raw = params.get(name)
        if raw is not None:
            _plan_wizard_field(plan, name, raw)

    return plan
