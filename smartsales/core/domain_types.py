"""Domain Types — enums, identity types and typed option defaults.

Invariants:
    - BusinessType has exactly 20 members; InventoryRange has 4
    - Every settings key is declared once as an OptionSpec with its typed default
    - Role and capability names are plain strings on the wire; Enums inside

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - OptionSpec pairs key + default so readers never repeat fallback literals
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

WizardEntryId = NewType("WizardEntryId", str)
CategoryId = NewType("CategoryId", int)


# ─── Enums ───────────────────────────────────────────────────────

class BusinessType(str, Enum):
    """Business classification collected by the onboarding wizard."""
    RETAIL = "retail"
    WHOLESALE = "wholesale"
    MANUFACTURING = "manufacturing"
    SERVICE = "service"
    ECOMMERCE = "ecommerce"
    DROPSHIPPING = "dropshipping"
    RESTAURANT = "restaurant"
    PHARMACY = "pharmacy"
    GROCERY = "grocery"
    FASHION = "fashion"
    ELECTRONICS = "electronics"
    FURNITURE = "furniture"
    AUTOMOTIVE = "automotive"
    CONSTRUCTION = "construction"
    HOSPITALITY = "hospitality"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    CONSULTING = "consulting"
    REAL_ESTATE = "real_estate"
    OTHER = "other"


class InventoryRange(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class Role(str, Enum):
    """POS roles a caller may hold."""
    ADMINISTRATOR = "administrator"
    OUTLET_MANAGER = "outlet_manager"
    CASHIER = "cashier"
    SHOP_MANAGER = "shop_manager"


class Capability(str, Enum):
    """Fine-grained capabilities granted outside of roles."""
    MANAGE_STORE = "manage_store"


class OperationTier(str, Enum):
    """Authorization tiers evaluated by the permission policy."""
    READ = "read"
    SETTINGS_WRITE = "settings_write"
    CATALOG_WRITE = "catalog_write"


class CategoryOrderBy(str, Enum):
    NAME = "name"
    SLUG = "slug"
    ID = "id"
    COUNT = "count"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


VALID_BUSINESS_TYPES: frozenset[str] = frozenset(b.value for b in BusinessType)
VALID_INVENTORY_RANGES: frozenset[str] = frozenset(r.value for r in InventoryRange)


# ─── Caller ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Caller:
    """Resolved request identity. Anonymous callers have authenticated=False."""
    authenticated: bool = False
    login: str | None = None
    roles: frozenset[str] = frozenset()
    capabilities: frozenset[str] = frozenset()

    @property
    def grants(self) -> frozenset[str]:
        """Roles and capabilities as one set for rule matching."""
        return self.roles | self.capabilities


ANONYMOUS = Caller()


# ─── Category Filters ────────────────────────────────────────────

@dataclass(frozen=True)
class CategoryFilters:
    """Listing filters. limit=0 means no limit."""
    hide_empty: bool = False
    orderby: CategoryOrderBy = CategoryOrderBy.NAME
    order: SortOrder = SortOrder.ASC
    limit: int = 0


# ─── Settings Options ────────────────────────────────────────────

@dataclass(frozen=True)
class OptionSpec:
    """A settings key with its typed default."""
    key: str
    default: Any = None

    def fallback(self) -> Any:
        # fresh copy for mutable defaults
        if isinstance(self.default, (dict, list)):
            return type(self.default)(self.default)
        return self.default


STORE_ADDRESS = OptionSpec("store_address", "123 Default St")
STORE_ADDRESS_2 = OptionSpec("store_address_2", "")
STORE_CITY = OptionSpec("store_city", "Default City")
STORE_POSTCODE = OptionSpec("store_postcode", "00000")
STORE_COUNTRY = OptionSpec("default_country", "US")
CURRENCY = OptionSpec("currency", "USD")
ADMIN_EMAIL = OptionSpec("admin_email", "")
SITE_NAME = OptionSpec("site_name", "")
WIZARD_DATA = OptionSpec("wizard_data", None)
WIZARD_ENTRIES = OptionSpec("wizard_entries", {})
WIZARD_CURRENT_ENTRY_ID = OptionSpec("wizard_current_entry_id", None)


@dataclass(frozen=True)
class StoreFieldBinding:
    """Maps a public profile field onto its settings option."""
    field: str
    option: OptionSpec
    validators: tuple[str, ...] = field(default_factory=tuple)


STORE_FIELDS: tuple[StoreFieldBinding, ...] = (
    StoreFieldBinding("store_address", STORE_ADDRESS),
    StoreFieldBinding("store_address_2", STORE_ADDRESS_2),
    StoreFieldBinding("store_city", STORE_CITY),
    StoreFieldBinding("store_postcode", STORE_POSTCODE),
    StoreFieldBinding("store_country", STORE_COUNTRY, ("country",)),
    StoreFieldBinding("currency", CURRENCY, ("currency",)),
)

WIZARD_PROFILE_FIELDS: tuple[str, ...] = (
    "business_type", "inventory_range", "has_outlet", "additional_notes",
)
