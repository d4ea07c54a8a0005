"""App Settings Service — read and partially update the store profile.

Invariants:
    - get_app_data has no side effects
    - update_app_data applies every valid field even when other fields fail
    - Wizard-overlapping fields are merged into the wizard singleton, one write total
    - Errors → PartialUpdateError (400) carrying both `errors` and `updated_fields`
"""

import logging
from typing import Any

from smartsales.core.app_settings_rules import build_profile, plan_update
from smartsales.core.domain_types import (
    ADMIN_EMAIL, SITE_NAME, STORE_FIELDS, WIZARD_DATA,
)
from smartsales.core.errors import FieldErrors, RequestValidationFailed
from smartsales.core.repository_protocols import CatalogQueries, SettingsRepository

logger = logging.getLogger(__name__)


class PartialUpdateError(RequestValidationFailed):
    """Some fields failed validation; the valid ones were already saved."""
    def __init__(self, errors: list[str], updated_fields: dict[str, Any]):
        super().__init__(
            "Some fields could not be updated due to validation errors.",
            FieldErrors({"errors": errors, "updated_fields": updated_fields}),
        )
        self.errors = errors
        self.updated_fields = updated_fields


class AppSettingsService:
    def __init__(
        self,
        settings: SettingsRepository,
        catalog: CatalogQueries,
        metadata: dict[str, Any],
    ):
        self.settings = settings
        self.catalog = catalog
        self.metadata = metadata

    async def get_app_data(self) -> dict[str, Any]:
        store_values = {
            binding.field: await self.settings.read(binding.option)
            for binding in STORE_FIELDS
        }
        store_values["email"] = await self.settings.read(ADMIN_EMAIL)
        store_values["site_name"] = await self.settings.read(SITE_NAME)
        wizard = await self.settings.read(WIZARD_DATA) or {}

        return build_profile(
            store_values,
            wizard,
            inventory_size=await self.catalog.count_published_products(),
            outlets_exist=await self.catalog.has_published_outlets(),
            metadata=self.metadata,
        )

    async def update_app_data(self, params: dict[str, Any]) -> dict[str, Any]:
        plan = plan_update(params)

        for option, value in plan.option_writes:
            await self.settings.set(option.key, value)

        if plan.wizard_changes:
            wizard = await self.settings.read(WIZARD_DATA) or {}
            wizard.update(plan.wizard_changes)
            await self.settings.set(WIZARD_DATA.key, wizard)

        if plan.errors:
            logger.warning(
                f"App data partially updated, {len(plan.errors)} field(s) rejected",
                extra={"updated_count": len(plan.updated_fields)},
            )
            raise PartialUpdateError(plan.errors, plan.updated_fields)

        if not plan.updated_fields:
            raise RequestValidationFailed("No valid fields provided for update.")

        logger.info(
            "App data updated",
            extra={"updated_count": len(plan.updated_fields)},
        )
        return {
            "updated_fields": plan.updated_fields,
            "updated_count": len(plan.updated_fields),
        }
