"""Wizard Routes — GET/POST/PUT /api/v1/wizard.

Invariants:
    - All three verbs require the READ tier (any POS role)
    - `entry_id` query parameter targets a logged entry; absent → current singleton
"""

from fastapi import APIRouter, Depends, Query

from smartsales.api.dependencies import get_wizard_service, require_tier
from smartsales.core.domain_types import OperationTier
from smartsales.core.envelope import success_envelope
from smartsales.schemas.wizard import WizardPayload
from smartsales.services.wizard import WizardService

router = APIRouter(
    prefix="/api/v1/wizard",
    tags=["wizard"],
    dependencies=[Depends(require_tier(OperationTier.READ))],
)


@router.post("")
async def create_wizard_entry(
    body: WizardPayload,
    service: WizardService = Depends(get_wizard_service),
):
    data = await service.create(body.model_dump(exclude_none=True))
    return success_envelope("Business information saved successfully", data)


@router.get("")
async def get_wizard_entry(
    entry_id: str | None = Query(None),
    service: WizardService = Depends(get_wizard_service),
):
    data = await service.get(entry_id)
    return success_envelope("Wizard data retrieved successfully", data)


@router.put("")
async def update_wizard_entry(
    body: WizardPayload,
    entry_id: str | None = Query(None),
    service: WizardService = Depends(get_wizard_service),
):
    data = await service.update(body.model_dump(exclude_none=True), entry_id)
    return success_envelope("Wizard data updated successfully", data)
