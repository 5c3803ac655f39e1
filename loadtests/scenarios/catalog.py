"""Catalog load test scenarios.

A vendor journey that registers, lists and maintains products, and a browsing
journey that hammers the filtered listing endpoints. Vendor steps execute in
order; each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import listing_params, product_data, product_update_data, user_data
from loadtests.helpers.state import VendorState


class VendorCatalogJourney(SequentialTaskSet):
    """Register Vendor -> Create 3 Products -> Update One -> Delete One."""

    def on_start(self):
        self.state = VendorState()

    @task
    def register_vendor(self):
        with self.client.post(
            "/api/users",
            json=user_data(role="vendor"),
            catch_response=True,
            name="POST /api/users",
        ) as resp:
            if resp.status_code == 201:
                self.state.vendor_id = resp.json()["data"]["id"]
            else:
                resp.failure(f"Register vendor failed: {resp.status_code}")
                self.interrupt()

    @task
    def create_products(self):
        for _ in range(3):
            with self.client.post(
                "/api/products",
                json=product_data(),
                headers=self.state.headers,
                catch_response=True,
                name="POST /api/products",
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["data"]["id"])
                else:
                    resp.failure(f"Create product failed: {resp.status_code}")

        if not self.state.product_ids:
            self.interrupt()

    @task
    def update_product(self):
        product_id = random.choice(self.state.product_ids)
        with self.client.put(
            f"/api/products/{product_id}",
            json=product_update_data(),
            headers=self.state.headers,
            catch_response=True,
            name="PUT /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code}")

    @task
    def list_own_products(self):
        self.client.get(
            f"/api/vendors/{self.state.vendor_id}/products",
            params=listing_params(),
            name="GET /api/vendors/{id}/products",
        )

    @task
    def delete_product(self):
        product_id = self.state.product_ids.pop()
        with self.client.delete(
            f"/api/products/{product_id}",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete product failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class BrowseCatalogJourney(SequentialTaskSet):
    """Filtered listing -> Product detail for one of the results."""

    def on_start(self):
        self.product_ids = []

    @task
    def list_products(self):
        with self.client.get(
            "/api/products",
            params=listing_params(),
            catch_response=True,
            name="GET /api/products",
        ) as resp:
            if resp.status_code == 200:
                self.product_ids = [p["id"] for p in resp.json()["data"]]
            else:
                resp.failure(f"List products failed: {resp.status_code}")

    @task
    def view_product(self):
        if not self.product_ids:
            self.interrupt()
            return
        self.client.get(
            f"/api/products/{random.choice(self.product_ids)}",
            name="GET /api/products/{id}",
        )

    @task
    def done(self):
        self.interrupt()


class CatalogUser(HttpUser):
    """Vendors maintaining listings alongside anonymous browsers."""

    wait_time = between(0.5, 2.0)
    tasks = {VendorCatalogJourney: 1, BrowseCatalogJourney: 4}
