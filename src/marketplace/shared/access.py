"""Access control gate for vendor-owned and user-owned records.

Callers must establish that the record exists before consulting the gate, so
that a missing record always surfaces as not-found rather than forbidden.
"""

from dataclasses import dataclass

from marketplace.account.user import UserRole
from marketplace.exceptions import AuthorizationError

_PUBLISHING_ROLES = frozenset({UserRole.VENDOR.value, UserRole.ADMIN.value})


@dataclass(frozen=True)
class Actor:
    """The authenticated identity performing a request."""

    id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def can_publish(actor: Actor) -> bool:
    return actor.role in _PUBLISHING_ROLES


def can_modify(actor: Actor, owner_id) -> bool:
    return str(owner_id) == str(actor.id) or actor.is_admin


def ensure_can_publish(actor: Actor) -> None:
    if not can_publish(actor):
        raise AuthorizationError(f"User with ID {actor.id} is not authorized to create products")


def ensure_can_modify(actor: Actor, owner_id, action: str, resource: str = "product") -> None:
    if not can_modify(actor, owner_id):
        raise AuthorizationError(f"User with ID {actor.id} is not authorized to {action} this {resource}")


def ensure_admin(actor: Actor, action: str) -> None:
    if not actor.is_admin:
        raise AuthorizationError(f"User with ID {actor.id} is not authorized to {action}")
