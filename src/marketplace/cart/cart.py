"""Shopping cart aggregate — one cart per user.

Line items carry a snapshot of the product's unit price, name and image taken
when the item was added. The cart ``total`` is a derived field: it is
recomputed from the items by ``prepare_for_persist`` on every write, so a
stored cart never disagrees with its items.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from marketplace.domain import marketplace


@marketplace.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, default=1)
    price = Float(required=True, min_value=0.0)  # Unit price snapshot
    name = String(max_length=100)
    image = Text()  # URL length is unbounded on Product.images

    @property
    def line_total(self):
        return self.price * self.quantity


@marketplace.aggregate
class ShoppingCart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    total = Float(default=0.0)
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        return cls(user_id=user_id, total=0.0, updated_at=datetime.now(UTC))

    # -------------------------------------------------------------------
    # Derived fields
    # -------------------------------------------------------------------
    def calculate_total(self):
        return sum((item.line_total for item in self.items), 0.0)

    def prepare_for_persist(self):
        """Recompute the total and touch the timestamp before a write."""
        self.total = self.calculate_total()
        self.updated_at = datetime.now(UTC)
        return self

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, price, quantity=1, name=None, image=None):
        """Add a product line, or grow the existing line for the same product.

        The snapshot (price, name, image) is refreshed to the values passed in.
        """
        existing = self.find_item(product_id)
        if existing:
            existing.quantity += quantity
            existing.price = price
            existing.name = name
            existing.image = image
            return existing

        item = CartItem(
            product_id=product_id,
            quantity=quantity,
            price=price,
            name=name,
            image=image,
        )
        self.add_items(item)
        return item

    def update_item_quantity(self, product_id, quantity):
        item = self.find_item(product_id)
        if item is None:
            raise ObjectNotFoundError(f"Product {product_id} is not in the cart")
        item.quantity = quantity
        return item

    def remove_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ObjectNotFoundError(f"Product {product_id} is not in the cart")
        self.remove_items(item)

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)
