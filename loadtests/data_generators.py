"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
and match the field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["electronics", "clothing", "books", "home", "beauty", "sports", "food", "other"]
PAYMENT_METHODS = ["credit_card", "paypal", "stripe", "cash_on_delivery"]

# ---------- Accounts ----------


def valid_email() -> str:
    """Unique, well-formed, lowercase email address."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}".lower()


def user_data(role: str = "user") -> dict:
    """RegisterUserRequest payload."""
    return {"name": fake.name()[:50], "email": valid_email(), "role": role}


# ---------- Catalog ----------


def product_data() -> dict:
    """CreateProductRequest payload."""
    return {
        "name": fake.catch_phrase()[:100],
        "description": fake.paragraph(nb_sentences=3)[:1000],
        "price": round(random.uniform(1.0, 500.0), 2),
        "stock": random.randint(0, 200),
        "category": random.choice(CATEGORIES),
        "images": [fake.image_url() for _ in range(random.randint(0, 3))],
        "featured": random.random() < 0.1,
    }


def product_update_data() -> dict:
    """UpdateProductRequest payload changing price and stock."""
    return {
        "price": round(random.uniform(1.0, 500.0), 2),
        "stock": random.randint(0, 200),
    }


def listing_params() -> dict:
    """Random filter/sort combination for the listing endpoints."""
    params = {"page": random.randint(1, 3), "limit": random.choice([5, 10, 20])}
    if random.random() < 0.5:
        params["category"] = random.choice(CATEGORIES)
    if random.random() < 0.3:
        params["minPrice"] = random.randint(1, 100)
        params["maxPrice"] = params["minPrice"] + random.randint(50, 400)
    if random.random() < 0.3:
        params["search"] = fake.word()
    params["sort"] = random.choice(["-createdAt", "price", "-price", "name", "-rating"])
    return params


# ---------- Cart & Orders ----------


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "zip_code": fake.zipcode()[:20],
        "country": fake.country_code(),
    }


def checkout_data() -> dict:
    """PlaceOrderRequest payload."""
    return {"shipping_address": shipping_address(), "payment_method": random.choice(PAYMENT_METHODS)}
