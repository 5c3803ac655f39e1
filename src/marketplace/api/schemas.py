"""Pydantic request/response schemas for the Marketplace API."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, Field

# --- Shared ---


class PageLink(BaseModel):
    page: int
    limit: int


class DeletedResponse(BaseModel):
    success: bool = True
    data: dict = Field(default_factory=dict)


# --- Product Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Noise Cancelling Headphones",
                    "description": "Over-ear wireless headphones with 30h battery life.",
                    "price": 199.99,
                    "stock": 25,
                    "category": "electronics",
                    "images": ["https://cdn.example.com/headphones.jpg"],
                    "featured": False,
                }
            ]
        }
    }

    name: str | None = None
    description: str | None = None
    price: float | None = None
    stock: int | None = None
    category: str | None = None
    images: list[str] | None = None
    featured: bool = False


class UpdateProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    stock: int | None = None
    category: str | None = None
    images: list[str] | None = None
    featured: bool | None = None


class VendorSummary(BaseModel):
    id: str
    name: str
    email: str


class ProductData(BaseModel):
    id: str
    name: str
    description: str
    price: float
    stock: int
    category: str
    vendor_id: str
    images: list[str] = Field(default_factory=list)
    featured: bool = False
    rating: float = 0.0
    num_reviews: int = 0
    url: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    vendor: VendorSummary | None = None

    @classmethod
    def from_product(cls, product, vendor: dict | None = None) -> ProductData:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            category=product.category,
            vendor_id=str(product.vendor_id),
            images=product.image_urls,
            featured=bool(product.featured),
            rating=product.rating or 0.0,
            num_reviews=product.num_reviews or 0,
            url=product.url,
            created_at=product.created_at,
            updated_at=product.updated_at,
            vendor=VendorSummary(**vendor) if vendor else None,
        )


class ProductResponse(BaseModel):
    success: bool = True
    data: ProductData


class ProductListResponse(BaseModel):
    success: bool = True
    count: int
    pagination: dict[str, PageLink]
    data: list[ProductData]


# --- User Schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Ada Vendor", "email": "ada@example.com", "role": "vendor"}]
        }
    }

    name: str = Field(..., max_length=50)
    email: str = Field(..., max_length=254)
    role: str | None = None


class UserData(BaseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime | None = None

    @classmethod
    def from_user(cls, user) -> UserData:
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )


class UserResponse(BaseModel):
    success: bool = True
    data: UserData


# --- Cart Schemas ---


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CartItemData(BaseModel):
    product_id: str
    quantity: int
    price: float
    name: str | None = None
    image: str | None = None


class CartData(BaseModel):
    id: str
    user_id: str
    items: list[CartItemData]
    total: float
    updated_at: datetime | None = None

    @classmethod
    def from_cart(cls, cart) -> CartData:
        return cls(
            id=str(cart.id),
            user_id=str(cart.user_id),
            items=[
                CartItemData(
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    price=item.price,
                    name=item.name,
                    image=item.image,
                )
                for item in cart.items
            ],
            total=cart.total or 0.0,
            updated_at=cart.updated_at,
        )


class CartResponse(BaseModel):
    success: bool = True
    data: CartData


# --- Order Schemas ---


class ShippingAddressSchema(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address": {
                        "street": "12 Market Street",
                        "city": "Springfield",
                        "state": "IL",
                        "zip_code": "62701",
                        "country": "US",
                    },
                    "payment_method": "credit_card",
                }
            ]
        }
    }

    shipping_address: ShippingAddressSchema
    payment_method: str

    def shipping_address_json(self) -> str:
        return json.dumps(self.shipping_address.model_dump())


class UpdateOrderStatusRequest(BaseModel):
    status: str | None = None
    payment_status: str | None = None
    transaction_id: str | None = None


class PaymentInfoData(BaseModel):
    method: str
    transaction_id: str | None = None
    status: str


class OrderItemData(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: float
    image: str | None = None


class OrderData(BaseModel):
    id: str
    user_id: str
    items: list[OrderItemData]
    shipping_address: ShippingAddressSchema
    payment_info: PaymentInfoData
    status: str
    tax: float
    shipping_fee: float
    total_amount: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
    delivered_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderData:
        address = order.shipping_address
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            items=[
                OrderItemData(
                    product_id=str(item.product_id),
                    name=item.name,
                    quantity=item.quantity,
                    price=item.price,
                    image=item.image,
                )
                for item in order.items
            ],
            shipping_address=ShippingAddressSchema(
                street=address.street,
                city=address.city,
                state=address.state,
                zip_code=address.zip_code,
                country=address.country,
            ),
            payment_info=PaymentInfoData(
                method=order.payment_info.method,
                transaction_id=order.payment_info.transaction_id,
                status=order.payment_info.status,
            ),
            status=order.status,
            tax=order.tax or 0.0,
            shipping_fee=order.shipping_fee or 0.0,
            total_amount=order.total_amount,
            created_at=order.created_at,
            updated_at=order.updated_at,
            delivered_at=order.delivered_at,
        )


class OrderResponse(BaseModel):
    success: bool = True
    data: OrderData


class OrderListResponse(BaseModel):
    success: bool = True
    count: int
    pagination: dict[str, PageLink]
    data: list[OrderData]
