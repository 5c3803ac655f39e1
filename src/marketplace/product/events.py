"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductCreated:
    """A vendor listed a new product in the catalog."""

    __version__ = 1

    product_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductUpdated:
    """One or more product fields changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: Text(required=True)  # JSON array of field names
    price: Float()
    stock: Integer()
