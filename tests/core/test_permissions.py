"""Permission Policy — tier rules evaluated without HTTP.

Tests cover:
    - anonymous callers → 401 on every tier
    - READ accepts any POS role
    - SETTINGS_WRITE accepts administrator only, with descriptive messages
    - CATALOG_WRITE accepts administrator or the manage_store capability
    - custom rule tables replace the defaults
"""

import pytest

from smartsales.core.domain_types import ANONYMOUS, Caller, OperationTier
from smartsales.core.errors import AuthenticationError, PermissionDeniedError
from smartsales.core.permissions import GENERIC_DENIAL, PermissionPolicy, TierRule


def _caller(*roles, capabilities=()):
    return Caller(
        authenticated=True,
        login="tester",
        roles=frozenset(roles),
        capabilities=frozenset(capabilities),
    )


policy = PermissionPolicy()


@pytest.mark.parametrize("tier", list(OperationTier))
def test_anonymous_is_unauthenticated_on_every_tier(tier):
    error = policy.evaluate(tier, ANONYMOUS)
    assert isinstance(error, AuthenticationError)
    assert error.http_status == 401


@pytest.mark.parametrize("role", ["administrator", "outlet_manager", "cashier", "shop_manager"])
def test_read_accepts_every_pos_role(role):
    assert policy.allows(OperationTier.READ, _caller(role))


def test_read_rejects_unrelated_role():
    error = policy.evaluate(OperationTier.READ, _caller("subscriber"))
    assert isinstance(error, PermissionDeniedError)
    assert error.message == GENERIC_DENIAL


def test_settings_write_is_admin_only():
    assert policy.allows(OperationTier.SETTINGS_WRITE, _caller("administrator"))
    error = policy.evaluate(OperationTier.SETTINGS_WRITE, _caller("shop_manager"))
    assert error.http_status == 403
    assert "Administrator role required" in error.message


def test_settings_write_unauthenticated_message():
    error = policy.evaluate(OperationTier.SETTINGS_WRITE, ANONYMOUS)
    assert error.message == "You must be logged in to access this resource."


def test_catalog_write_accepts_capability_without_admin_role():
    assert policy.allows(
        OperationTier.CATALOG_WRITE, _caller("cashier", capabilities=["manage_store"]),
    )
    assert not policy.allows(OperationTier.CATALOG_WRITE, _caller("cashier"))


def test_require_raises_evaluated_error():
    with pytest.raises(PermissionDeniedError):
        policy.require(OperationTier.CATALOG_WRITE, _caller("outlet_manager"))
    policy.require(OperationTier.CATALOG_WRITE, _caller("administrator"))


def test_custom_rules_override_defaults():
    custom = PermissionPolicy({
        tier: TierRule(any_of=frozenset({"auditor"})) for tier in OperationTier
    })
    assert custom.allows(OperationTier.READ, _caller("auditor"))
    assert not custom.allows(OperationTier.READ, _caller("administrator"))
