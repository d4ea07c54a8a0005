"""Domain Types — verifies enum membership and typed option defaults.

Tests:
    - BusinessType has exactly 20 members, InventoryRange 4
    - Enums serialize to plain strings
    - OptionSpec.fallback returns fresh copies of mutable defaults
    - Caller.grants unions roles and capabilities
"""

from smartsales.core.domain_types import (
    ANONYMOUS, CURRENCY, STORE_ADDRESS, STORE_COUNTRY, WIZARD_DATA,
    WIZARD_ENTRIES, BusinessType, Caller, CategoryFilters, CategoryOrderBy,
    InventoryRange, SortOrder,
)


def test_business_type_has_twenty_members():
    assert len(BusinessType) == 20
    assert BusinessType.REAL_ESTATE.value == "real_estate"


def test_inventory_range_members():
    assert {r.value for r in InventoryRange} == {"small", "medium", "large", "enterprise"}


def test_enums_are_strings():
    assert BusinessType.RETAIL == "retail"
    assert SortOrder.DESC == "DESC"


def test_option_defaults():
    assert STORE_ADDRESS.fallback() == "123 Default St"
    assert STORE_COUNTRY.key == "default_country"
    assert CURRENCY.fallback() == "USD"
    assert WIZARD_DATA.fallback() is None


def test_mutable_fallback_is_not_shared():
    first = WIZARD_ENTRIES.fallback()
    first["wizard_x"] = {}
    assert WIZARD_ENTRIES.fallback() == {}


def test_caller_grants():
    caller = Caller(
        authenticated=True, login="a",
        roles=frozenset({"cashier"}), capabilities=frozenset({"manage_store"}),
    )
    assert caller.grants == {"cashier", "manage_store"}
    assert not ANONYMOUS.authenticated
    assert ANONYMOUS.grants == frozenset()


def test_category_filter_defaults():
    filters = CategoryFilters()
    assert filters.orderby is CategoryOrderBy.NAME
    assert filters.order is SortOrder.ASC
    assert filters.limit == 0
    assert filters.hide_empty is False
