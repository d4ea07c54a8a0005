"""Permission Policy — tier → rule table evaluated against a caller's grants.

Invariants:
    - Each OperationTier has exactly one TierRule
    - Unauthenticated callers fail with AuthenticationError (401) on every tier
    - Authenticated callers with no matching grant fail with PermissionDeniedError (403)
    - evaluate() is pure: returns None or an error, never raises

Design Decisions:
    - Rules compare against Caller.grants (roles ∪ capabilities), so a tier can accept
      either a role or a capability without special cases
    - SETTINGS_WRITE carries descriptive messages; other tiers use the generic one
"""

from dataclasses import dataclass

from smartsales.core.domain_types import Caller, Capability, OperationTier, Role
from smartsales.core.errors import (
    AuthenticationError, PermissionDeniedError, SmartSalesError,
)

GENERIC_DENIAL = "Sorry, you are not allowed to do that."

POS_ROLES: frozenset[str] = frozenset(r.value for r in Role)


@dataclass(frozen=True)
class TierRule:
    """Grants accepted for a tier plus the messages used on failure."""
    any_of: frozenset[str]
    unauthenticated_message: str = GENERIC_DENIAL
    denied_message: str = GENERIC_DENIAL

    def matches(self, caller: Caller) -> bool:
        return bool(self.any_of & caller.grants)


DEFAULT_RULES: dict[OperationTier, TierRule] = {
    OperationTier.READ: TierRule(any_of=POS_ROLES),
    OperationTier.SETTINGS_WRITE: TierRule(
        any_of=frozenset({Role.ADMINISTRATOR.value}),
        unauthenticated_message="You must be logged in to access this resource.",
        denied_message=(
            "You do not have permission to update app data. "
            "Administrator role required."
        ),
    ),
    OperationTier.CATALOG_WRITE: TierRule(
        any_of=frozenset({
            Role.ADMINISTRATOR.value, Capability.MANAGE_STORE.value,
        }),
    ),
}


class PermissionPolicy:
    """Declares who may do what, independent of HTTP wiring."""

    def __init__(self, rules: dict[OperationTier, TierRule] | None = None):
        self.rules = dict(DEFAULT_RULES if rules is None else rules)

    def evaluate(
        self, tier: OperationTier, caller: Caller,
    ) -> SmartSalesError | None:
        rule = self.rules[tier]
        if not caller.authenticated:
            return AuthenticationError(rule.unauthenticated_message)
        if not rule.matches(caller):
            return PermissionDeniedError(rule.denied_message)
        return None

    def allows(self, tier: OperationTier, caller: Caller) -> bool:
        return self.evaluate(tier, caller) is None

    def require(self, tier: OperationTier, caller: Caller) -> None:
        """Raise the evaluation error, if any."""
        error = self.evaluate(tier, caller)
        if error is not None:
            raise error
