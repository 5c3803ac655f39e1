"""Cart and checkout load test scenarios.

Each journey seeds its own vendor and products so it can run against an
empty catalog.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import checkout_data, product_data, user_data
from loadtests.helpers.state import ShopperState, VendorState


class CartToCheckoutJourney(SequentialTaskSet):
    """Seed Catalog -> Register Shopper -> Fill Cart -> Adjust -> Checkout -> View Orders."""

    def on_start(self):
        self.vendor = VendorState()
        self.state = ShopperState()

    @task
    def seed_catalog(self):
        resp = self.client.post("/api/users", json=user_data(role="vendor"), name="POST /api/users")
        if resp.status_code != 201:
            self.interrupt()
            return
        self.vendor.vendor_id = resp.json()["data"]["id"]

        for _ in range(2):
            resp = self.client.post(
                "/api/products",
                json=product_data(),
                headers=self.vendor.headers,
                name="POST /api/products",
            )
            if resp.status_code == 201:
                self.vendor.product_ids.append(resp.json()["data"]["id"])

        if not self.vendor.product_ids:
            self.interrupt()

    @task
    def register_shopper(self):
        with self.client.post(
            "/api/users",
            json=user_data(),
            catch_response=True,
            name="POST /api/users",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["data"]["id"]
            else:
                resp.failure(f"Register shopper failed: {resp.status_code}")
                self.interrupt()

    @task
    def fill_cart(self):
        for product_id in self.vendor.product_ids:
            with self.client.post(
                "/api/cart/items",
                json={"product_id": product_id, "quantity": random.randint(1, 3)},
                headers=self.state.headers,
                catch_response=True,
                name="POST /api/cart/items",
            ) as resp:
                if resp.status_code == 200:
                    self.state.cart_product_ids.append(product_id)
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code}")

    @task
    def adjust_quantity(self):
        if not self.state.cart_product_ids:
            self.interrupt()
            return
        with self.client.put(
            f"/api/cart/items/{self.state.cart_product_ids[0]}",
            json={"quantity": random.randint(1, 5)},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /api/cart/items/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update cart item failed: {resp.status_code}")

    @task
    def checkout(self):
        with self.client.post(
            "/api/orders",
            json=checkout_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["data"]["id"])
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")

    @task
    def view_orders(self):
        self.client.get("/api/orders", headers=self.state.headers, name="GET /api/orders")
        for order_id in self.state.order_ids:
            self.client.get(f"/api/orders/{order_id}", headers=self.state.headers, name="GET /api/orders/{id}")

    @task
    def done(self):
        self.interrupt()


class CartAbandonmentJourney(SequentialTaskSet):
    """Register Shopper -> Add Listed Product -> Remove It -> Clear Cart."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register_shopper(self):
        resp = self.client.post("/api/users", json=user_data(), name="POST /api/users")
        if resp.status_code != 201:
            self.interrupt()
            return
        self.state.user_id = resp.json()["data"]["id"]

    @task
    def add_listed_product(self):
        resp = self.client.get("/api/products", params={"limit": 5}, name="GET /api/products")
        products = resp.json().get("data", []) if resp.status_code == 200 else []
        if not products:
            self.interrupt()
            return

        product_id = random.choice(products)["id"]
        resp = self.client.post(
            "/api/cart/items",
            json={"product_id": product_id, "quantity": 1},
            headers=self.state.headers,
            name="POST /api/cart/items",
        )
        if resp.status_code == 200:
            self.state.cart_product_ids.append(product_id)

    @task
    def remove_item(self):
        for product_id in self.state.cart_product_ids:
            self.client.delete(
                f"/api/cart/items/{product_id}",
                headers=self.state.headers,
                name="DELETE /api/cart/items/{id}",
            )

    @task
    def clear_cart(self):
        self.client.delete("/api/cart", headers=self.state.headers, name="DELETE /api/cart")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = {CartToCheckoutJourney: 3, CartAbandonmentJourney: 2}
