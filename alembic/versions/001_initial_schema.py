"""Initial schema — options, terms, catalog_posts, api_users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "options",
        sa.Column("name", sa.String(191), primary_key=True),
        sa.Column("value", sa.JSON, nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "terms",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("taxonomy", sa.String(32), nullable=False, server_default="product_cat"),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("parent", sa.Integer, nullable=False, server_default="0"),
        sa.Column("count", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint("taxonomy", "slug", name="uq_terms_taxonomy_slug"),
        sa.UniqueConstraint("taxonomy", "parent", "name", name="uq_terms_taxonomy_parent_name"),
    )
    op.create_index("ix_terms_taxonomy", "terms", ["taxonomy"])

    op.create_table(
        "catalog_posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("post_type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="publish"),
        sa.Column("title", sa.String(200), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_catalog_posts_post_type", "catalog_posts", ["post_type"])

    op.create_table(
        "api_users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("login", sa.String(60), nullable=False, unique=True),
        sa.Column("token_digest", sa.String(64), nullable=False),
        sa.Column("roles", sa.JSON, nullable=False),
        sa.Column("capabilities", sa.JSON, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_api_users_token_digest", "api_users", ["token_digest"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_api_users_token_digest", table_name="api_users")
    op.drop_table("api_users")
    op.drop_index("ix_catalog_posts_post_type", table_name="catalog_posts")
    op.drop_table("catalog_posts")
    op.drop_index("ix_terms_taxonomy", table_name="terms")
    op.drop_table("terms")
    op.drop_table("options")
