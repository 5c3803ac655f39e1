"""Tests for the access control gate."""

import pytest

from marketplace.exceptions import AuthorizationError
from marketplace.shared.access import (
    Actor,
    can_modify,
    can_publish,
    ensure_admin,
    ensure_can_modify,
    ensure_can_publish,
)

VENDOR = Actor(id="vendor-1", role="vendor")
OTHER_VENDOR = Actor(id="vendor-2", role="vendor")
ADMIN = Actor(id="admin-1", role="admin")
SHOPPER = Actor(id="user-1", role="user")


class TestPublishing:
    def test_vendor_and_admin_may_publish(self):
        assert can_publish(VENDOR)
        assert can_publish(ADMIN)

    def test_plain_user_may_not_publish(self):
        assert not can_publish(SHOPPER)
        with pytest.raises(AuthorizationError) as exc:
            ensure_can_publish(SHOPPER)
        assert "user-1" in exc.value.message


class TestModification:
    def test_owner_may_modify(self):
        assert can_modify(VENDOR, "vendor-1")

    def test_admin_may_modify_anything(self):
        assert can_modify(ADMIN, "vendor-1")

    def test_other_vendor_may_not_modify(self):
        assert not can_modify(OTHER_VENDOR, "vendor-1")
        with pytest.raises(AuthorizationError) as exc:
            ensure_can_modify(OTHER_VENDOR, "vendor-1", "update")
        assert exc.value.message == "User with ID vendor-2 is not authorized to update this product"


class TestAdminOnly:
    def test_admin_passes(self):
        ensure_admin(ADMIN, "update order status")

    def test_vendor_rejected(self):
        with pytest.raises(AuthorizationError):
            ensure_admin(VENDOR, "update order status")
