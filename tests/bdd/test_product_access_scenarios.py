"""BDD tests for product ownership rules."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when

from marketplace.account.user import User
from marketplace.exceptions import AuthorizationError
from marketplace.product.management import CreateProduct, DeleteProduct
from marketplace.product.product import Product

scenarios("features/product_access.feature")


def user_by_email(email):
    return current_domain.repository_for(User).find_by_email(email)


def product_by_name(name):
    return current_domain.repository_for(Product)._dao.query.filter(name=name).all().first


def attempt(outcome, action):
    try:
        outcome["result"] = action()
    except (AuthorizationError, ObjectNotFoundError) as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{email}" deletes "{name}"'))
def delete_product(outcome, email, name):
    actor = user_by_email(email)
    product = product_by_name(name)
    attempt(
        outcome,
        lambda: current_domain.process(
            DeleteProduct(product_id=str(product.id), actor_id=str(actor.id), actor_role=actor.role),
            asynchronous=False,
        ),
    )


@when(parsers.cfparse('"{email}" deletes a product that does not exist'))
def delete_missing_product(outcome, email):
    actor = user_by_email(email)
    attempt(
        outcome,
        lambda: current_domain.process(
            DeleteProduct(product_id="does-not-exist", actor_id=str(actor.id), actor_role=actor.role),
            asynchronous=False,
        ),
    )


@when(parsers.cfparse('"{email}" lists a product "{name}" priced {price:f}'))
def list_product(outcome, email, name, price):
    actor = user_by_email(email)
    attempt(
        outcome,
        lambda: current_domain.process(
            CreateProduct(
                actor_id=str(actor.id),
                actor_role=actor.role,
                name=name,
                description="Not allowed",
                price=price,
                category="other",
            ),
            asynchronous=False,
        ),
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" no longer exists'))
def product_gone(name):
    assert product_by_name(name) is None


@then("the product is not found")
def product_not_found(outcome):
    assert isinstance(outcome["exc"], ObjectNotFoundError)
