"""ApiUser ORM — API callers issued by the host platform.

Invariants:
    - token_digest is the SHA-256 hex digest of the bearer token (plain token never stored)
    - roles and capabilities are JSON lists of strings
    - inactive users resolve as anonymous
"""

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from smartsales.db.base import Base


class ApiUser(Base):
    __tablename__ = "api_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    login: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    token_digest: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True,
    )
    roles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    capabilities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
