"""Wizard Service — orchestration against an in-memory SettingsRepository.

Tests cover:
    - deterministic ids and timestamps via injected clock/id_factory
    - legacy data (no current id recorded) syncs the singleton by created_at
    - store failures on reads and writes surface as "An error occurred: ..."
"""

import copy
from datetime import datetime, timezone

import pytest

from smartsales.core.domain_types import OptionSpec
from smartsales.core.errors import RequestValidationFailed, StoreError
from smartsales.services.wizard import WizardService


class InMemorySettings:
    def __init__(self, initial=None, fail_on=None, fail_reads_on=None):
        self.values = copy.deepcopy(initial or {})
        self.writes: list[str] = []
        self.fail_on = fail_on
        self.fail_reads_on = fail_reads_on

    async def get(self, key, default=None):
        if key == self.fail_reads_on:
            raise StoreError(f"Could not read option '{key}'", "read")
        return copy.deepcopy(self.values.get(key, default))

    async def read(self, option: OptionSpec):
        return await self.get(option.key, option.fallback())

    async def set(self, key, value):
        if key == self.fail_on:
            raise StoreError(f"Could not save option '{key}'", "write")
        self.writes.append(key)
        self.values[key] = copy.deepcopy(value)


def _service(store, ids=("wizard_a", "wizard_b")):
    id_iter = iter(ids)
    return WizardService(
        store,
        clock=lambda: datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        id_factory=lambda: next(id_iter),
    )


PAYLOAD = {
    "business_type": "pharmacy",
    "inventory_range": "small",
    "company_name": "Good Health",
    "industry_sector": "Healthcare",
}


async def test_create_uses_injected_clock_and_id():
    store = InMemorySettings()
    result = await _service(store).create(PAYLOAD)

    assert result["entry_id"] == "wizard_a"
    assert result["data"]["created_at"] == "2026-01-02 03:04:05"
    assert store.values["wizard_current_entry_id"] == "wizard_a"
    assert store.values["wizard_data"] == store.values["wizard_entries"]["wizard_a"]


async def test_create_validation_failure_performs_no_writes():
    store = InMemorySettings()
    with pytest.raises(RequestValidationFailed):
        await _service(store).create({"business_type": "retail"})
    assert store.writes == []


async def test_legacy_entry_syncs_singleton_by_created_at():
    entry = {**PAYLOAD, "created_at": "2025-05-05 10:00:00", "sales_channel": []}
    store = InMemorySettings({
        "wizard_entries": {"wizard_old": entry},
        "wizard_data": entry,
    })

    await _service(store).update({"company_name": "Renamed"}, "wizard_old")

    assert store.values["wizard_data"]["company_name"] == "Renamed"
    assert store.values["wizard_data"]["updated_at"] == "2026-01-02 03:04:05"


async def test_legacy_entry_with_different_created_at_is_not_synced():
    logged = {**PAYLOAD, "created_at": "2025-05-05 10:00:00"}
    current = {**PAYLOAD, "created_at": "2025-06-06 10:00:00"}
    store = InMemorySettings({
        "wizard_entries": {"wizard_old": logged},
        "wizard_data": current,
    })

    await _service(store).update({"company_name": "Renamed"}, "wizard_old")

    assert store.values["wizard_data"]["company_name"] == "Good Health"


async def test_store_failure_on_create_is_wrapped():
    store = InMemorySettings(fail_on="wizard_data")
    with pytest.raises(StoreError) as exc:
        await _service(store).create(PAYLOAD)
    assert exc.value.message.startswith("An error occurred: ")
    assert exc.value.http_status == 500


async def test_store_failure_reading_log_on_get_is_wrapped():
    store = InMemorySettings(fail_reads_on="wizard_entries")
    with pytest.raises(StoreError) as exc:
        await _service(store).get("wizard_a")
    assert exc.value.message == "An error occurred: Could not read option 'wizard_entries'"


async def test_store_failure_reading_singleton_on_update_is_wrapped():
    store = InMemorySettings(fail_reads_on="wizard_data")
    with pytest.raises(StoreError) as exc:
        await _service(store).update({"additional_notes": "x"})
    assert exc.value.message.startswith("An error occurred: ")
    assert store.writes == []
