"""Term Store — TaxonomyRepository over the `terms` table (product categories).

Invariants:
    - Every query is scoped to one taxonomy (product_cat by default)
    - Names are unique per parent; slugs are unique per taxonomy
    - A generated slug gets a numeric suffix on collision; an explicit slug that collides fails
    - parent must be 0 or an existing term, and never the term itself or a descendant
    - delete() re-parents children to the deleted term's parent
    - Every failure surfaces as TaxonomyError with a term-level message
    - create/update/delete commit immediately and return ids, not rows;
      callers re-fetch through get()
"""

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from smartsales.core.domain_types import CategoryFilters, CategoryOrderBy, SortOrder
from smartsales.core.errors import TaxonomyError
from smartsales.core.sanitize import sanitize_slug, sanitize_text, sanitize_textarea
from smartsales.models.term import PRODUCT_CATEGORY, Term

logger = logging.getLogger(__name__)

_ORDER_COLUMNS = {
    CategoryOrderBy.NAME: Term.name,
    CategoryOrderBy.SLUG: Term.slug,
    CategoryOrderBy.ID: Term.id,
    CategoryOrderBy.COUNT: Term.count,
}


class SqlTaxonomyRepository:
    """Hierarchical term CRUD for a single taxonomy."""

    def __init__(self, db: AsyncSession, taxonomy: str = PRODUCT_CATEGORY):
        self.db = db
        self.taxonomy = taxonomy

    # ─── Reads ───────────────────────────────────────────────────

    async def list(self, filters: CategoryFilters) -> list[Term]:
        column = _ORDER_COLUMNS[filters.orderby]
        query = select(Term).where(Term.taxonomy == self.taxonomy)
        if filters.hide_empty:
            query = query.where(Term.count > 0)
        ordering = column.desc() if filters.order == SortOrder.DESC else column.asc()
        query = query.order_by(ordering, Term.id.asc())
        if filters.limit > 0:
            query = query.limit(filters.limit)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Term listing failed: {e}")
            raise TaxonomyError("Could not query terms.", "db_query_error") from e
        return list(result.scalars().all())

    async def get(self, term_id: int) -> Term | None:
        result = await self.db.execute(
            select(Term)
            .where(Term.id == term_id)
            .where(Term.taxonomy == self.taxonomy)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, name: str, attrs: dict[str, Any]) -> int:
        name = sanitize_text(name)
        if not name:
            raise TaxonomyError("A name is required for this term.", "empty_term_name")
        parent = await self._checked_parent(attrs.get("parent"))
        await self._ensure_name_free(name, parent)

        requested = sanitize_slug(attrs.get("slug") or "")
        if requested:
            await self._ensure_slug_free(requested)
            slug = requested
        else:
            slug = await self._unique_slug(sanitize_slug(name) or "term")

        term = Term(
            taxonomy=self.taxonomy,
            name=name,
            slug=slug,
            description=sanitize_textarea(attrs.get("description") or ""),
            parent=parent,
        )
        self.db.add(term)
        await self._commit("insert")
        logger.info(f"Term created: {term.id}", extra={"category_id": term.id})
        return term.id

    async def update(self, term_id: int, attrs: dict[str, Any]) -> int:
        term = await self.get(term_id)
        if term is None:
            raise TaxonomyError("Term does not exist.", "invalid_term")

        name = sanitize_text(attrs.get("name", term.name))
        if not name:
            raise TaxonomyError("A name is required for this term.", "empty_term_name")
        parent = await self._checked_parent(attrs.get("parent", term.parent), term_id)
        if (name, parent) != (term.name, term.parent):
            await self._ensure_name_free(name, parent, exclude_id=term_id)

        slug = sanitize_slug(attrs.get("slug") or term.slug) or term.slug
        if slug != term.slug:
            await self._ensure_slug_free(slug, exclude_id=term_id)

        term.name = name
        term.slug = slug
        term.parent = parent
        term.description = sanitize_textarea(attrs.get("description", term.description))
        await self._commit("update")
        return term_id

    async def delete(self, term_id: int) -> None:
        term = await self.get(term_id)
        if term is None:
            raise TaxonomyError("Term does not exist.", "invalid_term")
        await self.db.execute(
            update(Term)
            .where(Term.taxonomy == self.taxonomy)
            .where(Term.parent == term_id)
            .values(parent=term.parent),
        )
        await self.db.delete(term)
        await self._commit("delete")

    # ─── Helpers ─────────────────────────────────────────────────

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Term {operation} failed: {e}")
            raise TaxonomyError(
                f"Could not {operation} term in the database.", f"db_{operation}_error",
            ) from e

    async def _checked_parent(self, raw: Any, term_id: int | None = None) -> int:
        try:
            parent = int(raw or 0)
        except (TypeError, ValueError):
            raise TaxonomyError("Parent term does not exist.", "missing_parent")
        if parent == 0:
            return 0
        if term_id is not None and parent == term_id:
            raise TaxonomyError("A term cannot be its own parent.", "invalid_parent")
        ancestor = await self.get(parent)
        if ancestor is None:
            raise TaxonomyError("Parent term does not exist.", "missing_parent")
        if term_id is not None:
            while ancestor is not None and ancestor.parent:
                if ancestor.parent == term_id:
                    raise TaxonomyError(
                        "A term cannot be moved below its own descendant.",
                        "invalid_parent",
                    )
                ancestor = await self.get(ancestor.parent)
        return parent

    async def _ensure_name_free(
        self, name: str, parent: int, exclude_id: int | None = None,
    ) -> None:
        query = (
            select(Term.id)
            .where(Term.taxonomy == self.taxonomy)
            .where(Term.parent == parent)
            .where(Term.name == name)
        )
        if exclude_id is not None:
            query = query.where(Term.id != exclude_id)
        if (await self.db.execute(query)).first() is not None:
            raise TaxonomyError(
                "A term with the name provided already exists with this parent.",
                "term_exists",
            )

    async def _slug_taken(self, slug: str, exclude_id: int | None = None) -> bool:
        query = (
            select(Term.id)
            .where(Term.taxonomy == self.taxonomy)
            .where(Term.slug == slug)
        )
        if exclude_id is not None:
            query = query.where(Term.id != exclude_id)
        return (await self.db.execute(query)).first() is not None

    async def _ensure_slug_free(self, slug: str, exclude_id: int | None = None) -> None:
        if await self._slug_taken(slug, exclude_id):
            raise TaxonomyError(
                f"The slug “{slug}” is already in use by another term.",
                "duplicate_term_slug",
            )

    async def _unique_slug(self, base: str) -> str:
        slug, suffix = base, 2
        while await self._slug_taken(slug):
            slug = f"{base}-{suffix}"
            suffix += 1
        return slug
