"""App Settings Schemas — partial update body for PUT /app."""

from pydantic import BaseModel, ConfigDict, Field


class AppSettingsUpdate(BaseModel):
    """Every field optional; omitted or null fields are left untouched."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    store_address: str | None = Field(None, description="Store address line 1")
    store_address_2: str | None = Field(None, description="Store address line 2")
    store_city: str | None = Field(None, description="Store city")
    store_postcode: str | None = Field(None, description="Store postal code")
    store_country: str | None = Field(None, description="Store country code")
    currency: str | None = Field(None, description="Store currency")
    email: str | None = Field(None, description="Admin email address")
    site_name: str | None = Field(None, description="Site name")
    business_type: str | None = Field(None, description="Type of business")
    inventory_range: str | None = Field(None, description="Inventory size range")
    has_outlet: bool | str | int | None = Field(
        None, description="Whether business has outlets",
    )
    additional_notes: str | None = Field(None, description="Additional business notes")
