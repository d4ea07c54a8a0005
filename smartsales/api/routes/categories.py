"""Category Routes — /api/v1/categories CRUD.

Invariants:
    - GET routes require READ; POST/PUT/DELETE require CATALOG_WRITE
    - POST answers 201; every other success answers 200
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from smartsales.api.dependencies import get_category_service, require_tier
from smartsales.core.domain_types import (
    CategoryFilters, CategoryOrderBy, OperationTier, SortOrder,
)
from smartsales.core.envelope import success_envelope
from smartsales.schemas.category import CategoryWrite
from smartsales.services.categories import CategoryService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])

_read = [Depends(require_tier(OperationTier.READ))]
_write = [Depends(require_tier(OperationTier.CATALOG_WRITE))]


@router.get("", dependencies=_read)
async def list_categories(
    hide_empty: bool = Query(False),
    orderby: CategoryOrderBy = Query(CategoryOrderBy.NAME),
    order: SortOrder = Query(SortOrder.ASC),
    limit: int = Query(0, ge=0),
    service: CategoryService = Depends(get_category_service),
):
    filters = CategoryFilters(
        hide_empty=hide_empty, orderby=orderby, order=order, limit=limit,
    )
    data = await service.list(filters)
    return success_envelope("Categories retrieved successfully.", data)


@router.get("/{category_id}", dependencies=_read)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    data = await service.get(category_id)
    return success_envelope("Category retrieved successfully.", data)


@router.post("", dependencies=_write)
async def create_category(
    body: CategoryWrite,
    service: CategoryService = Depends(get_category_service),
):
    data = await service.create(body.model_dump(exclude_none=True))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=success_envelope("Category created successfully.", data),
    )


@router.put("/{category_id}", dependencies=_write)
async def update_category(
    category_id: int,
    body: CategoryWrite,
    service: CategoryService = Depends(get_category_service),
):
    data = await service.update(category_id, body.model_dump(exclude_none=True))
    return success_envelope("Category updated successfully.", data)


@router.delete("/{category_id}", dependencies=_write)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    data = await service.delete(category_id)
    return success_envelope("Category deleted successfully.", data)
