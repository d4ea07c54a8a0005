"""Wizard Schemas — body shared by POST and PUT /wizard.

Invariants:
    - sales_channel accepts a single string or a list; core coerces both to a list
    - Numbers sent for text fields arrive as strings (coerce_numbers_to_str)
    - Required-field and enum checks are NOT done here (see core/wizard_rules.py)
"""

from pydantic import BaseModel, ConfigDict


class WizardPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    business_type: str | None = None
    inventory_range: str | None = None
    has_outlet: bool | str | int | None = None
    additional_notes: str | None = None
    company_name: str | None = None
    company_size: str | None = None
    industry_sector: str | None = None
    monthly_revenue: str | None = None
    sales_channel: list[str] | str | None = None
    target_market: str | None = None
