"""Repository for the ShoppingCart aggregate."""

from protean.core.repository import BaseRepository

from marketplace.cart.cart import ShoppingCart
from marketplace.domain import marketplace


@marketplace.repository(part_of=ShoppingCart)
class ShoppingCartRepository(BaseRepository):
    def add(self, cart: ShoppingCart) -> ShoppingCart:
        # Totals are derived, never trusted from the caller
        return super().add(cart.prepare_for_persist())

    def for_user(self, user_id) -> ShoppingCart | None:
        return self._dao.query.filter(user_id=str(user_id)).all().first

    def get_or_create(self, user_id) -> ShoppingCart:
        """Return the user's cart, creating an unsaved empty one if needed."""
        return self.for_user(user_id) or ShoppingCart.create(user_id=str(user_id))
