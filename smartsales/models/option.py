"""Option ORM — one row per settings key, value stored as JSON.

Invariants:
    - name is the primary key (one value per key, last write wins)
    - value may hold scalars, lists or nested dicts (wizard singleton, wizard log)
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from smartsales.db.base import Base


class Option(Base):
    __tablename__ = "options"

    name: Mapped[str] = mapped_column(String(191), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
