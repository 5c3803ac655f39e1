"""User account aggregate.

Accounts exist to resolve the acting identity's role, to verify vendors and
to populate vendor summaries on product detail responses. Authentication
itself happens upstream.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from marketplace.domain import marketplace

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRole(Enum):
    USER = "user"
    VENDOR = "vendor"
    ADMIN = "admin"


@marketplace.aggregate
class User:
    name: String(required=True, max_length=50)
    email: String(required=True, max_length=254, unique=True)
    role: String(choices=UserRole, default=UserRole.USER.value)
    created_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, name, email, role=None):
        return cls(
            name=name.strip() if name else name,
            email=email.strip().lower() if email else email,
            role=role or UserRole.USER.value,
            created_at=datetime.now(UTC),
        )

    @property
    def is_vendor(self):
        return self.role == UserRole.VENDOR.value

    def summary(self):
        """Public vendor summary used when populating product responses."""
        return {"id": str(self.id), "name": self.name, "email": self.email}
