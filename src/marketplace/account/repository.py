"""Repository for the User aggregate."""

from protean.core.repository import BaseRepository

from marketplace.account.user import User
from marketplace.domain import marketplace


@marketplace.repository(part_of=User)
class UserRepository(BaseRepository):
    def find(self, user_id) -> User | None:
        """Like ``get``, but returns ``None`` for unknown ids."""
        if not user_id:
            return None
        return self._dao.query.filter(id=str(user_id)).all().first

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email.strip().lower()).all().first

    def find_vendor(self, vendor_id) -> User | None:
        """Return the user only if it exists and holds the vendor role."""
        user = self.find(vendor_id)
        if user is None or not user.is_vendor:
            return None
        return user
