"""Cart item management — commands and handler.

Every command addresses the acting user's own cart; the cart is created on
first use.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.cart.cart import ShoppingCart
from marketplace.domain import marketplace
from marketplace.product.management import load_product

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="ShoppingCart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, default=1)


@marketplace.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.command(part_of="ShoppingCart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@marketplace.command(part_of="ShoppingCart")
class ClearCart:
    user_id = Identifier(required=True)


@marketplace.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = load_product(command.product_id)
        images = product.image_urls

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_or_create(command.user_id)
        cart.add_item(
            product_id=str(product.id),
            price=product.price,
            quantity=command.quantity,
            name=product.name,
            image=images[0] if images else None,
        )
        repo.add(cart)

        logger.info(
            "Item added to cart",
            cart_id=str(cart.id),
            product_id=str(product.id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_or_create(command.user_id)
        cart.update_item_quantity(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get_or_create(command.user_id)
        cart.remove_item(product_id=command.product_id)
        repo.add(cart)
        return str(cart.id)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            return None
        cart.clear()
        repo.add(cart)
        return str(cart.id)
