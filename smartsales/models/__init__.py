"""ORM Models — SQLAlchemy declarative models backing the repositories.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables mirror the host store layout: flat options, taxonomy terms, catalog posts

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from smartsales.models.option import Option  # noqa: F401
from smartsales.models.term import Term  # noqa: F401
from smartsales.models.catalog_post import CatalogPost  # noqa: F401
from smartsales.models.api_user import ApiUser  # noqa: F401
