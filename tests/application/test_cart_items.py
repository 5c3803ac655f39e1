"""Application tests for the cart item handler."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from marketplace.cart.cart import ShoppingCart
from marketplace.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from marketplace.product.product import Product


@pytest.fixture()
def mug(vendor):
    product = Product.create(
        name="Mug",
        description="Stoneware mug",
        price=12.5,
        stock=40,
        category="home",
        vendor_id=str(vendor.id),
        images=["https://cdn.example.com/mug-front.jpg", "https://cdn.example.com/mug-back.jpg"],
    )
    current_domain.repository_for(Product).add(product)
    return product


@pytest.fixture()
def pen(vendor):
    product = Product.create(
        name="Pen",
        description="Gel pen",
        price=2.0,
        category="other",
        vendor_id=str(vendor.id),
    )
    current_domain.repository_for(Product).add(product)
    return product


def _cart_of(user):
    return current_domain.repository_for(ShoppingCart).for_user(user.id)


def _add(user, product, quantity=1):
    return current_domain.process(
        AddToCart(user_id=str(user.id), product_id=str(product.id), quantity=quantity),
        asynchronous=False,
    )


class TestAddToCart:
    def test_first_add_creates_cart(self, shopper, mug):
        cart_id = _add(shopper, mug, quantity=2)

        cart = _cart_of(shopper)
        assert str(cart.id) == cart_id
        assert len(cart.items) == 1
        assert cart.total == pytest.approx(25.0)

    def test_snapshot_of_price_name_and_first_image(self, shopper, mug):
        _add(shopper, mug)

        item = _cart_of(shopper).items[0]
        assert item.price == 12.5
        assert item.name == "Mug"
        assert item.image == "https://cdn.example.com/mug-front.jpg"

    def test_product_without_images(self, shopper, pen):
        _add(shopper, pen)
        assert _cart_of(shopper).items[0].image is None

    def test_adding_again_increases_quantity(self, shopper, mug):
        _add(shopper, mug, quantity=1)
        _add(shopper, mug, quantity=2)

        cart = _cart_of(shopper)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3
        assert cart.total == pytest.approx(37.5)

    def test_total_spans_all_lines(self, shopper, mug, pen):
        _add(shopper, mug, quantity=2)
        _add(shopper, pen, quantity=3)
        assert _cart_of(shopper).total == pytest.approx(31.0)

    def test_unknown_product_is_not_found(self, shopper):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                AddToCart(user_id=str(shopper.id), product_id="missing", quantity=1),
                asynchronous=False,
            )

    def test_zero_quantity_rejected(self, shopper, mug):
        with pytest.raises(ValidationError):
            AddToCart(user_id=str(shopper.id), product_id=str(mug.id), quantity=0)

    def test_carts_are_per_user(self, shopper, vendor, mug):
        _add(shopper, mug)
        _add(vendor, mug, quantity=4)

        assert _cart_of(shopper).items[0].quantity == 1
        assert _cart_of(vendor).items[0].quantity == 4


class TestChangeCart:
    def test_update_quantity_recomputes_total(self, shopper, mug):
        _add(shopper, mug)
        current_domain.process(
            UpdateCartQuantity(user_id=str(shopper.id), product_id=str(mug.id), quantity=4),
            asynchronous=False,
        )
        cart = _cart_of(shopper)
        assert cart.items[0].quantity == 4
        assert cart.total == pytest.approx(50.0)

    def test_update_item_not_in_cart(self, shopper, mug, pen):
        _add(shopper, mug)
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateCartQuantity(user_id=str(shopper.id), product_id=str(pen.id), quantity=2),
                asynchronous=False,
            )

    def test_remove_item_recomputes_total(self, shopper, mug, pen):
        _add(shopper, mug)
        _add(shopper, pen)
        current_domain.process(
            RemoveFromCart(user_id=str(shopper.id), product_id=str(mug.id)),
            asynchronous=False,
        )
        cart = _cart_of(shopper)
        assert [str(i.product_id) for i in cart.items] == [str(pen.id)]
        assert cart.total == pytest.approx(2.0)

    def test_clear_cart(self, shopper, mug, pen):
        _add(shopper, mug)
        _add(shopper, pen)
        current_domain.process(ClearCart(user_id=str(shopper.id)), asynchronous=False)

        cart = _cart_of(shopper)
        assert len(cart.items) == 0
        assert cart.total == 0.0

    def test_clear_without_cart_is_a_no_op(self, shopper):
        assert current_domain.process(ClearCart(user_id=str(shopper.id)), asynchronous=False) is None
        assert _cart_of(shopper) is None


class TestDerivedFieldsOnSave:
    def test_each_mutation_refreshes_total_and_timestamp(self, shopper, mug, pen):
        _add(shopper, mug)
        first = _cart_of(shopper)
        assert first.total == pytest.approx(12.5)

        _add(shopper, pen, quantity=3)
        second = _cart_of(shopper)
        assert second.total == pytest.approx(18.5)
        assert second.updated_at > first.updated_at

        current_domain.process(
            UpdateCartQuantity(user_id=str(shopper.id), product_id=str(mug.id), quantity=2),
            asynchronous=False,
        )
        third = _cart_of(shopper)
        assert third.total == pytest.approx(31.0)
        assert third.updated_at > second.updated_at

        current_domain.process(
            RemoveFromCart(user_id=str(shopper.id), product_id=str(pen.id)),
            asynchronous=False,
        )
        fourth = _cart_of(shopper)
        assert fourth.total == pytest.approx(25.0)
        assert fourth.updated_at > third.updated_at

    def test_stale_total_is_replaced_on_save(self, shopper, mug):
        _add(shopper, mug, quantity=2)
        repo = current_domain.repository_for(ShoppingCart)

        cart = _cart_of(shopper)
        cart.total = 999.0
        repo.add(cart)

        assert repo.get(cart.id).total == pytest.approx(25.0)
