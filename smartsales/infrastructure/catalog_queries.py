"""Catalog Queries — published product count and outlet existence."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smartsales.models.catalog_post import OUTLET, PRODUCT, PUBLISHED, CatalogPost


class SqlCatalogQueries:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count_published_products(self) -> int:
        result = await self.db.execute(
            select(func.count(CatalogPost.id))
            .where(CatalogPost.post_type == PRODUCT)
            .where(CatalogPost.status == PUBLISHED),
        )
        return int(result.scalar_one())

    async def has_published_outlets(self) -> bool:
        result = await self.db.execute(
            select(CatalogPost.id)
            .where(CatalogPost.post_type == OUTLET)
            .where(CatalogPost.status == PUBLISHED)
            .limit(1),
        )
        return result.scalar_one_or_none() is not None
