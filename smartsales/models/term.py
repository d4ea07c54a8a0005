"""Term ORM — hierarchical taxonomy terms (product categories).

Invariants:
    - slug is unique within a taxonomy
    - (taxonomy, parent, name) is unique: no duplicate names under one parent
    - parent = 0 means root; otherwise references another term id of the same taxonomy
    - count is maintained by the catalog, never written through the category API
"""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from smartsales.db.base import Base

PRODUCT_CATEGORY = "product_cat"


class Term(Base):
    __tablename__ = "terms"
    __table_args__ = (
        UniqueConstraint("taxonomy", "slug", name="uq_terms_taxonomy_slug"),
        UniqueConstraint(
            "taxonomy", "parent", "name", name="uq_terms_taxonomy_parent_name",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    taxonomy: Mapped[str] = mapped_column(
        String(32), nullable=False, default=PRODUCT_CATEGORY, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    parent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
