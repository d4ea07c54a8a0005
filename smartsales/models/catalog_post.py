"""CatalogPost ORM — published catalog records (products, outlets) used for counts.

Invariants:
    - post_type is "product" or "outlet"
    - only status == "publish" rows are counted
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from smartsales.db.base import Base

PRODUCT = "product"
OUTLET = "outlet"
PUBLISHED = "publish"


class CatalogPost(Base):
    __tablename__ = "catalog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PUBLISHED,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
