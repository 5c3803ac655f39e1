"""FastAPI endpoints for the Marketplace domain."""

import json

from fastapi import APIRouter, Depends, Header, Query
from protean.utils.globals import current_domain

from marketplace.account.registration import RegisterUser
from marketplace.account.user import User
from marketplace.api.dependencies import current_actor, require_roles
from marketplace.api.schemas import (
    AddToCartRequest,
    CartData,
    CartResponse,
    CreateProductRequest,
    DeletedResponse,
    OrderData,
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductData,
    ProductListResponse,
    ProductResponse,
    RegisterUserRequest,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
    UserData,
    UserResponse,
)
from marketplace.cart.cart import ShoppingCart
from marketplace.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from marketplace.order.checkout import PlaceOrder
from marketplace.order.queries import get_order, list_orders, load_order
from marketplace.order.status import UpdateOrderStatus
from marketplace.product.listing import get_product_with_vendor, list_products, list_vendor_products
from marketplace.product.management import CreateProduct, DeleteProduct, UpdateProduct, load_product
from marketplace.product.query import ProductQuery
from marketplace.shared.access import Actor
from marketplace.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, parse_positive_int

product_router = APIRouter(prefix="/api/products", tags=["products"])
vendor_router = APIRouter(prefix="/api/vendors", tags=["products"])
user_router = APIRouter(prefix="/api/users", tags=["users"])
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])

_publisher = require_roles("vendor", "admin")


def _default_page_size() -> int:
    custom = current_domain.config.get("custom", {})
    return parse_positive_int(custom.get("default_page_size"), DEFAULT_LIMIT)


def _listing_query(
    page: str | None = None,
    limit: str | None = None,
    category: str | None = None,
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    search: str | None = None,
    sort: str | None = None,
) -> ProductQuery:
    return ProductQuery.from_params(
        page=page,
        limit=limit,
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort=sort,
        default_limit=_default_page_size(),
    )


def _product_list_response(result) -> ProductListResponse:
    return ProductListResponse(
        count=result.count,
        pagination=result.pagination,
        data=[ProductData.from_product(product) for product in result.products],
    )


def _encode_images(images):
    return json.dumps(images) if images is not None else None


# --- Product endpoints ---


@product_router.get("", response_model=ProductListResponse)
async def get_products(query: ProductQuery = Depends(_listing_query)) -> ProductListResponse:
    return _product_list_response(list_products(query))


@product_router.get("/vendor/{vendor_id}", response_model=ProductListResponse)
async def get_vendor_products_alias(
    vendor_id: str, query: ProductQuery = Depends(_listing_query)
) -> ProductListResponse:
    return _product_list_response(list_vendor_products(vendor_id, query))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product, vendor = get_product_with_vendor(product_id)
    return ProductResponse(data=ProductData.from_product(product, vendor))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, actor: Actor = Depends(_publisher)) -> ProductResponse:
    command = CreateProduct(
        actor_id=actor.id,
        actor_role=actor.role,
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        category=body.category,
        images=_encode_images(body.images),
        featured=body.featured,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse(data=ProductData.from_product(load_product(product_id)))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, actor: Actor = Depends(_publisher)
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        actor_id=actor.id,
        actor_role=actor.role,
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        category=body.category,
        images=_encode_images(body.images),
        featured=body.featured,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse(data=ProductData.from_product(load_product(product_id)))


@product_router.delete("/{product_id}", response_model=DeletedResponse)
async def delete_product(product_id: str, actor: Actor = Depends(_publisher)) -> DeletedResponse:
    command = DeleteProduct(product_id=product_id, actor_id=actor.id, actor_role=actor.role)
    current_domain.process(command, asynchronous=False)
    return DeletedResponse()


@vendor_router.get("/{vendor_id}/products", response_model=ProductListResponse)
async def get_vendor_products(vendor_id: str, query: ProductQuery = Depends(_listing_query)) -> ProductListResponse:
    return _product_list_response(list_vendor_products(vendor_id, query))


# --- User endpoints ---


@user_router.post("", status_code=201, response_model=UserResponse)
async def register_user(body: RegisterUserRequest, x_user_id: str | None = Header(default=None)) -> UserResponse:
    # An admin may create further admins by identifying themselves
    command = RegisterUser(name=body.name, email=body.email, role=body.role, registered_by=x_user_id)
    user_id = current_domain.process(command, asynchronous=False)
    return UserResponse(data=UserData.from_user(current_domain.repository_for(User).get(user_id)))


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return UserResponse(data=UserData.from_user(current_domain.repository_for(User).get(user_id)))


# --- Cart endpoints ---


def _cart_response(actor: Actor) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get_or_create(actor.id)
    return CartResponse(data=CartData.from_cart(cart))


@cart_router.get("", response_model=CartResponse)
async def get_cart(actor: Actor = Depends(current_actor)) -> CartResponse:
    return _cart_response(actor)


@cart_router.post("/items", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, actor: Actor = Depends(current_actor)) -> CartResponse:
    command = AddToCart(user_id=actor.id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _cart_response(actor)


@cart_router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str, body: UpdateCartItemRequest, actor: Actor = Depends(current_actor)
) -> CartResponse:
    command = UpdateCartQuantity(user_id=actor.id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _cart_response(actor)


@cart_router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(product_id: str, actor: Actor = Depends(current_actor)) -> CartResponse:
    current_domain.process(RemoveFromCart(user_id=actor.id, product_id=product_id), asynchronous=False)
    return _cart_response(actor)


@cart_router.delete("", response_model=CartResponse)
async def clear_cart(actor: Actor = Depends(current_actor)) -> CartResponse:
    current_domain.process(ClearCart(user_id=actor.id), asynchronous=False)
    return _cart_response(actor)


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, actor: Actor = Depends(current_actor)) -> OrderResponse:
    command = PlaceOrder(
        user_id=actor.id,
        shipping_address=body.shipping_address_json(),
        payment_method=body.payment_method,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse(data=OrderData.from_order(load_order(order_id)))


@order_router.get("", response_model=OrderListResponse)
async def get_orders(
    page: str | None = None, limit: str | None = None, actor: Actor = Depends(current_actor)
) -> OrderListResponse:
    result = list_orders(
        actor,
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, _default_page_size()),
    )
    return OrderListResponse(
        count=result.count,
        pagination=result.pagination,
        data=[OrderData.from_order(order) for order in result.orders],
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order_by_id(order_id: str, actor: Actor = Depends(current_actor)) -> OrderResponse:
    return OrderResponse(data=OrderData.from_order(get_order(actor, order_id)))


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, actor: Actor = Depends(current_actor)
) -> OrderResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        actor_id=actor.id,
        actor_role=actor.role,
        status=body.status,
        payment_status=body.payment_status,
        transaction_id=body.transaction_id,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse(data=OrderData.from_order(load_order(order_id)))
