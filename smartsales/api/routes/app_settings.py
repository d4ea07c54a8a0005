"""App Settings Routes — GET/PUT /api/v1/app.

Invariants:
    - GET requires the READ tier; PUT requires SETTINGS_WRITE (administrator)
    - PUT answers 400 when any field failed, even if others were saved
"""

from fastapi import APIRouter, Depends

from smartsales.api.dependencies import get_app_settings_service, require_tier
from smartsales.core.domain_types import OperationTier
from smartsales.core.envelope import success_envelope
from smartsales.schemas.app_settings import AppSettingsUpdate
from smartsales.services.app_settings import AppSettingsService

router = APIRouter(prefix="/api/v1/app", tags=["app"])


@router.get("", dependencies=[Depends(require_tier(OperationTier.READ))])
async def get_app_data(
    service: AppSettingsService = Depends(get_app_settings_service),
):
    """Store profile, wizard summary and site metadata."""
    data = await service.get_app_data()
    return success_envelope("App data retrieved successfully.", data)


@router.put("", dependencies=[Depends(require_tier(OperationTier.SETTINGS_WRITE))])
async def update_app_data(
    body: AppSettingsUpdate,
    service: AppSettingsService = Depends(get_app_settings_service),
):
    data = await service.update_app_data(body.model_dump(exclude_none=True))
    return success_envelope("App data updated successfully.", data)
