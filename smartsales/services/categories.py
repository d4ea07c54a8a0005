"""Category Service — CRUD over product category terms.

Invariants:
    - Every mutation returns the term re-fetched from the store, not the write result
    - Missing terms → 404 with `error.id` naming the id
    - An empty listing is a 404, not an empty 200
    - Taxonomy failures → 500 with the store's message in `error.error`
"""

import logging
from typing import Any

from smartsales.core.domain_types import CategoryFilters
from smartsales.core.errors import (
    FieldErrors, MessageDetail, RequestValidationFailed, ResourceNotFoundError,
    TaxonomyError,
)
from smartsales.core.repository_protocols import TaxonomyRepository, TermLike

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: dict[str, str] = {"name": "name is required."}


def format_category(term: TermLike) -> dict[str, Any]:
    return {
        "id": term.id,
        "name": term.name,
        "slug": term.slug,
        "description": term.description,
        "count": term.count,
        "parent": term.parent,
    }


def _not_found(category_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Category not found.",
        FieldErrors({
            "id": f"The category with the ID '{category_id}' does not exist.",
        }),
    )


def _adapter_failure(message: str, error: TaxonomyError) -> TaxonomyError:
    return TaxonomyError(message, error.code, MessageDetail(error.message))


class CategoryService:
    def __init__(self, taxonomy: TaxonomyRepository):
        self.taxonomy = taxonomy

    async def _existing(self, category_id: int) -> TermLike:
        term = await self.taxonomy.get(category_id)
        if term is None:
            raise _not_found(category_id)
        return term

    async def _refetched(self, category_id: int) -> dict[str, Any]:
        return format_category(await self._existing(category_id))

    async def list(self, filters: CategoryFilters) -> list[dict[str, Any]]:
        try:
            terms = await self.taxonomy.list(filters)
        except TaxonomyError as e:
            raise _adapter_failure("Failed to retrieve categories.", e) from e
        if not terms:
            raise ResourceNotFoundError(
                "No categories found.",
                FieldErrors({
                    "categories": "No categories match the specified criteria.",
                }),
            )
        return [format_category(term) for term in terms]

    async def get(self, category_id: int) -> dict[str, Any]:
        return await self._refetched(category_id)

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        errors = {
            name: message for name, message in REQUIRED_FIELDS.items()
            if not data.get(name)
        }
        if errors:
            raise RequestValidationFailed(
                f"Missing required fields: {', '.join(errors)}",
                FieldErrors(errors),
            )

        try:
            category_id = await self.taxonomy.create(data["name"], {
                "description": data.get("description") or "",
                "slug": data.get("slug") or "",
                "parent": data.get("parent") or 0,
            })
        except TaxonomyError as e:
            raise _adapter_failure("Failed to create category.", e) from e

        logger.info("Category created", extra={"category_id": category_id})
        return await self._refetched(category_id)

    async def update(self, category_id: int, data: dict[str, Any]) -> dict[str, Any]:
        term = await self._existing(category_id)

        def pick(name: str) -> Any:
            value = data.get(name)
            return getattr(term, name) if value is None else value

        try:
            await self.taxonomy.update(category_id, {
                "name": pick("name"),
                "description": pick("description"),
                "slug": pick("slug"),
                "parent": pick("parent"),
            })
        except TaxonomyError as e:
            raise _adapter_failure("Failed to update category.", e) from e

        logger.info("Category updated", extra={"category_id": category_id})
        return await self._refetched(category_id)

    async def delete(self, category_id: int) -> dict[str, Any]:
        await self._existing(category_id)
        try:
            await self.taxonomy.delete(category_id)
        except TaxonomyError as e:
            raise _adapter_failure("Failed to delete category.", e) from e

        logger.info("Category deleted", extra={"category_id": category_id})
        return {"category_id": category_id}
