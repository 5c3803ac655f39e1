"""Product management — create, update and delete commands and handler.

Every mutation is gated: creation needs the vendor or admin role, update and
delete need ownership or the admin role. Existence is resolved before
ownership, so a missing product is always reported as not found.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.product.product import Product
from marketplace.shared.access import Actor, ensure_can_modify, ensure_can_publish

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Product")
class CreateProduct:
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=10)
    name: String(max_length=255)
    description: Text()
    price: Float()
    stock: Integer()
    category: String(max_length=50)
    images: Text()  # JSON array of image URLs
    featured: Boolean(default=False)


@marketplace.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=10)
    name: String(max_length=255)
    description: Text()
    price: Float()
    stock: Integer()
    category: String(max_length=50)
    images: Text()
    featured: Boolean()


@marketplace.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=10)


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError(f"Product not found with id of {product_id}") from None


def _images(raw):
    if raw is None:
        return None
    return json.loads(raw) if isinstance(raw, str) else raw


@marketplace.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        actor = Actor(id=str(command.actor_id), role=command.actor_role)
        ensure_can_publish(actor)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            category=command.category,
            vendor_id=actor.id,
            images=_images(command.images),
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product created", product_id=str(product.id), vendor_id=actor.id)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        actor = Actor(id=str(command.actor_id), role=command.actor_role)
        product = load_product(command.product_id)
        ensure_can_modify(actor, product.vendor_id, "update")

        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            category=command.category,
            images=_images(command.images),
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product updated", product_id=str(product.id), actor_id=actor.id)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        actor = Actor(id=str(command.actor_id), role=command.actor_role)
        product = load_product(command.product_id)
        ensure_can_modify(actor, product.vendor_id, "delete")

        current_domain.repository_for(Product).remove(product)

        logger.info("Product deleted", product_id=str(command.product_id), actor_id=actor.id)
