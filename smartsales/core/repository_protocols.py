"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Adapter failures surface as StoreError / TaxonomyError, never as driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; core rules that consume the values are sync
"""

from typing import Any, Protocol

from smartsales.core.domain_types import Caller, CategoryFilters, OptionSpec


class TermLike(Protocol):
    """Structural contract for taxonomy terms returned by a TaxonomyRepository."""
    id: int
    name: str
    slug: str
    description: str
    parent: int
    count: int


class SettingsRepository(Protocol):
    """Flat key → value settings store."""
    async def get(self, key: str, default: Any = None) -> Any: ...
    async def set(self, key: str, value: Any) -> None: ...
    async def read(self, option: OptionSpec) -> Any: ...


class TaxonomyRepository(Protocol):
    """Hierarchical term store for product categories."""
    async def list(self, filters: CategoryFilters) -> list[TermLike]: ...
    async def get(self, term_id: int) -> TermLike | None: ...
    async def create(self, name: str, attrs: dict[str, Any]) -> int: ...
    async def update(self, term_id: int, attrs: dict[str, Any]) -> int: ...
    async def delete(self, term_id: int) -> None: ...


class CatalogQueries(Protocol):
    """Read-only counts over published catalog records."""
    async def count_published_products(self) -> int: ...
    async def has_published_outlets(self) -> bool: ...


class IdentityProvider(Protocol):
    """Resolves a bearer token into a Caller (anonymous when unknown)."""
    async def resolve(self, token: str | None) -> Caller: ...
