import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from marketplace.api import (
    cart_router,
    order_router,
    product_router,
    register_error_handlers,
    user_router,
    vendor_router,
)
from marketplace.domain import marketplace


@pytest.fixture()
def client():
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with marketplace.domain_context():
            return await call_next(request)

    for router in (product_router, vendor_router, user_router, cart_router, order_router):
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)
