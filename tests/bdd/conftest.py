"""Shared BDD fixtures and step definitions for the marketplace."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then, when

from marketplace.account.user import User
from marketplace.exceptions import AuthorizationError
from marketplace.product.management import CreateProduct, UpdateProduct
from marketplace.product.product import Product


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def outcome():
    """Container for the result or error of the last action."""
    return {"result": None, "order_id": None, "exc": None}


def user_by_email(email):
    return current_domain.repository_for(User).find_by_email(email)


def product_by_name(name):
    return current_domain.repository_for(Product)._dao.query.filter(name=name).all().first


def _register(role, email):
    user = User.register(name=email.split("@")[0].title(), email=email, role=role)
    current_domain.repository_for(User).add(user)


def attempt(outcome, action):
    try:
        outcome["result"] = action()
    except (AuthorizationError, ObjectNotFoundError) as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a {role} "{email}"'))
def registered_user(role, email):
    _register({"shopper": "user"}.get(role, role), email)


@given(parsers.cfparse('an admin "{email}"'))
def registered_admin(email):
    _register("admin", email)


@given(parsers.cfparse('"{email}" listed a product "{name}" priced {price:f}'))
def listed_product(email, name, price):
    vendor = user_by_email(email)
    current_domain.process(
        CreateProduct(
            actor_id=str(vendor.id),
            actor_role=vendor.role,
            name=name,
            description=f"{name} for testing",
            price=price,
            stock=10,
            category="home",
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Shared action steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{email}" updates the price of "{name}" to {price:f}'))
def update_price(outcome, email, name, price):
    actor = user_by_email(email)
    product = product_by_name(name)
    attempt(
        outcome,
        lambda: current_domain.process(
            UpdateProduct(product_id=str(product.id), actor_id=str(actor.id), actor_role=actor.role, price=price),
            asynchronous=False,
        ),
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request succeeds")
def request_succeeds(outcome):
    assert outcome["exc"] is None


@then("the request is forbidden")
def request_forbidden(outcome):
    assert isinstance(outcome["exc"], AuthorizationError)


@then(parsers.cfparse('the price of "{name}" is {price:f}'))
def price_is(name, price):
    assert product_by_name(name).price == pytest.approx(price)
