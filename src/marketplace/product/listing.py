"""Read side of the catalog: listings and single-product retrieval."""

from dataclasses import dataclass, field, replace

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.account.user import User
from marketplace.product.management import load_product
from marketplace.product.product import Product
from marketplace.product.query import ProductQuery
from marketplace.shared.pagination import pagination_links


@dataclass(frozen=True)
class ProductPage:
    products: list
    total: int
    pagination: dict = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.products)


def list_products(query: ProductQuery) -> ProductPage:
    result = current_domain.repository_for(Product).search(query)
    return ProductPage(
        products=list(result.items),
        total=result.total,
        pagination=pagination_links(query.page, query.limit, result.total),
    )


def list_vendor_products(vendor_id: str, query: ProductQuery) -> ProductPage:
    """List one vendor's products; the vendor must exist and hold the vendor role."""
    vendor = current_domain.repository_for(User).find_vendor(vendor_id)
    if vendor is None:
        raise ObjectNotFoundError(f"Vendor not found with id of {vendor_id}")

    return list_products(replace(query, vendor_id=str(vendor.id)))


def get_product_with_vendor(product_id: str) -> tuple[Product, dict | None]:
    """Fetch a product and join its vendor's public summary."""
    product = load_product(product_id)

    # A dangling vendor reference leaves the summary empty
    vendor = current_domain.repository_for(User).find(product.vendor_id)
    return product, vendor.summary() if vendor else None
