"""Dependencies — wire repositories, services and the permission policy per request.

Invariants:
    - One AsyncSession per request, shared by every repository built for it
    - Authorization runs before the handler body via require_tier(...)
    - Tests swap implementations through app.dependency_overrides
"""

from collections.abc import Awaitable, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from smartsales.config import get_settings
from smartsales.core.domain_types import Caller, OperationTier
from smartsales.core.permissions import PermissionPolicy
from smartsales.infrastructure.catalog_queries import SqlCatalogQueries
from smartsales.infrastructure.database import get_db
from smartsales.infrastructure.identity import SqlIdentityProvider
from smartsales.infrastructure.option_store import SqlSettingsRepository
from smartsales.infrastructure.term_store import SqlTaxonomyRepository
from smartsales.services.app_settings import AppSettingsService
from smartsales.services.categories import CategoryService
from smartsales.services.wizard import WizardService

_bearer = HTTPBearer(auto_error=False)
_policy = PermissionPolicy()


def get_policy() -> PermissionPolicy:
    return _policy


async def get_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> Caller:
    token = credentials.credentials if credentials else None
    return await SqlIdentityProvider(db).resolve(token)


def require_tier(tier: OperationTier) -> Callable[..., Awaitable[Caller]]:
    """Dependency factory: resolves the caller and enforces `tier`."""

    async def _require(
        caller: Caller = Depends(get_caller),
        policy: PermissionPolicy = Depends(get_policy),
    ) -> Caller:
        policy.require(tier, caller)
        return caller

    return _require


def site_metadata() -> dict:
    return get_settings().site_metadata()


def get_app_settings_service(
    db: AsyncSession = Depends(get_db),
) -> AppSettingsService:
    return AppSettingsService(
        SqlSettingsRepository(db), SqlCatalogQueries(db), site_metadata(),
    )


def get_wizard_service(db: AsyncSession = Depends(get_db)) -> WizardService:
    return WizardService(SqlSettingsRepository(db))


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(SqlTaxonomyRepository(db))
