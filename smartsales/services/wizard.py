"""Wizard Service — onboarding entries: one current singleton plus an append-only log.

Invariants:
    - create() validates everything before the first write (all-or-nothing)
    - create() writes the log entry, the singleton and the current-entry id
    - update() with an entry id writes the log entry, and the singleton only if that
      entry is the current one
    - update() without an entry id writes only the singleton
    - Store failures on any read or write surface as StoreError
      "An error occurred: ..." (500)
"""

import logging
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from smartsales.core.domain_types import (
    WIZARD_CURRENT_ENTRY_ID, WIZARD_DATA, WIZARD_ENTRIES, WizardEntryId,
)
from smartsales.core.errors import (
    MessageDetail, ResourceNotFoundError, StoreError,
)
from smartsales.core.repository_protocols import SettingsRepository
from smartsales.core.wizard_rules import (
    build_entry, default_wizard_data, format_timestamp, is_current_entry,
    merge_update, validate_new_entry, validate_update,
)

logger = logging.getLogger(__name__)


def new_entry_id() -> WizardEntryId:
    return WizardEntryId(f"wizard_{uuid.uuid4().hex[:16]}")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _entry_not_found(entry_id: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Entry not found",
        MessageDetail(f"No wizard entry with id '{entry_id}'."),
    )


@contextmanager
def _store_failures() -> Iterator[None]:
    try:
        yield
    except StoreError as e:
        raise StoreError(f"An error occurred: {e.message}", e.operation) from e


class WizardService:
    def __init__(
        self,
        settings: SettingsRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], WizardEntryId] = new_entry_id,
    ):
        self.settings = settings
        self.clock = clock
        self.id_factory = id_factory

    async def create(self, params: dict[str, Any]) -> dict[str, Any]:
        entry = build_entry(params, format_timestamp(self.clock()))
        error = validate_new_entry(entry)
        if error is not None:
            raise error

        entry_id = self.id_factory()
        with _store_failures():
            entries = await self.settings.read(WIZARD_ENTRIES)
            entries[entry_id] = entry
            await self.settings.set(WIZARD_ENTRIES.key, entries)
            await self.settings.set(WIZARD_DATA.key, entry)
            await self.settings.set(WIZARD_CURRENT_ENTRY_ID.key, entry_id)

        logger.info("Wizard entry created", extra={"entry_id": entry_id})
        return {"entry_id": entry_id, "data": entry}

    async def get(self, entry_id: str | None = None) -> dict[str, Any]:
        with _store_failures():
            if entry_id:
                entries = await self.settings.read(WIZARD_ENTRIES)
                if entry_id not in entries:
                    raise _entry_not_found(entry_id)
                return entries[entry_id]
            return await self.settings.read(WIZARD_DATA) or default_wizard_data()

    async def update(
        self, params: dict[str, Any], entry_id: str | None = None,
    ) -> dict[str, Any]:
        with _store_failures():
            entries: dict[str, Any] = {}
            if entry_id:
                entries = await self.settings.read(WIZARD_ENTRIES)
                if entry_id not in entries:
                    raise _entry_not_found(entry_id)
                existing = entries[entry_id]
            else:
                existing = await self.settings.read(WIZARD_DATA) or {}

            merged = merge_update(existing, params, format_timestamp(self.clock()))
            error = validate_update(merged, params)
            if error is not None:
                raise error

            if entry_id:
                entries[entry_id] = merged
                await self.settings.set(WIZARD_ENTRIES.key, entries)
                current_id = await self.settings.read(WIZARD_CURRENT_ENTRY_ID)
                current = await self.settings.read(WIZARD_DATA)
                if is_current_entry(entry_id, existing, current_id, current):
                    await self.settings.set(WIZARD_DATA.key, merged)
            else:
                await self.settings.set(WIZARD_DATA.key, merged)

        logger.info("Wizard entry updated", extra={"entry_id": entry_id or "current"})
        return {"entry_id": entry_id, "data": merged}
