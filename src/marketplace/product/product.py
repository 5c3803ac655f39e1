"""Product aggregate root — a vendor-owned catalog listing."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.product.events import ProductCreated, ProductUpdated


class ProductCategory(Enum):
    """Closed set of catalog categories."""

    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    BEAUTY = "beauty"
    SPORTS = "sports"
    FOOD = "food"
    OTHER = "other"


# Fields a vendor may change after creation
UPDATABLE_FIELDS = ("name", "description", "price", "stock", "category", "images", "featured")


def _encode_images(images):
    if images is None:
        return json.dumps([])
    if isinstance(images, str):
        return images
    return json.dumps(list(images))


@marketplace.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=100)
    description: String(required=True, max_length=1000)
    price: Float(required=True, min_value=0.0)
    stock: Integer(required=True, min_value=0, default=0)
    category: String(required=True, choices=ProductCategory)
    vendor_id: Identifier(required=True)
    images: Text()  # JSON array of image URLs
    featured: Boolean(default=False)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews: Integer(default=0, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def images_must_be_a_list_of_urls(self):
        if not self.images:
            return

        try:
            urls = json.loads(self.images)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"images": ["Images must be a list of URLs"]}) from None

        if not isinstance(urls, list) or not all(isinstance(url, str) and url for url in urls):
            raise ValidationError({"images": ["Images must be a list of URLs"]})

    @property
    def image_urls(self):
        return json.loads(self.images) if self.images else []

    @property
    def url(self):
        return f"/products/{self.id}"

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        vendor_id,
        stock=0,
        images=None,
        featured=False,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name.strip() if isinstance(name, str) else name,
            description=description,
            price=price,
            stock=stock if stock is not None else 0,
            category=category,
            vendor_id=vendor_id,
            images=_encode_images(images),
            featured=bool(featured),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                vendor_id=str(vendor_id),
                name=product.name,
                category=product.category,
                price=product.price,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------
    def update(self, **changes):
        """Apply a partial update; every assignment re-runs field validation.

        Keys whose value is ``None`` are treated as absent.
        """
        applied = []
        for field_name in UPDATABLE_FIELDS:
            value = changes.get(field_name)
            if value is None:
                continue

            if field_name == "name" and isinstance(value, str):
                value = value.strip()
            elif field_name == "images":
                value = _encode_images(value)

            setattr(self, field_name, value)
            applied.append(field_name)

        if not applied:
            return

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                changed_fields=json.dumps(applied),
                price=self.price,
                stock=self.stock,
            )
        )
