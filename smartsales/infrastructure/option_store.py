"""Option Store — SettingsRepository over the `options` table.

Invariants:
    - get() returns the default when the key is absent (a stored None is returned as None)
    - set() upserts and commits immediately; there is no cross-key transaction
    - Stored dicts/lists are deep-copied on write so JSON change detection always fires
"""

import copy
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from smartsales.core.domain_types import OptionSpec
from smartsales.core.errors import StoreError
from smartsales.models.option import Option

logger = logging.getLogger(__name__)


class SqlSettingsRepository:
    """Key-value settings persisted as JSON rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str, default: Any = None) -> Any:
        try:
            row = await self.db.get(Option, key)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read option {key}: {e}")
            raise StoreError(f"Could not read option '{key}'", "read") from e
        if row is None:
            return default
        return copy.deepcopy(row.value)

    async def read(self, option: OptionSpec) -> Any:
        return await self.get(option.key, option.fallback())

    async def set(self, key: str, value: Any) -> None:
        try:
            row = await self.db.get(Option, key)
            if row is None:
                self.db.add(Option(name=key, value=copy.deepcopy(value)))
            else:
                row.value = copy.deepcopy(value)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to write option {key}: {e}")
            raise StoreError(f"Could not save option '{key}'", "write") from e
