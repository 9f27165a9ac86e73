"""Unit tests for the checkout session state machine."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.checkout import (
    COUNTRY_HINT_MESSAGE,
    CheckoutSession,
    CheckoutStage,
    is_shippable_country,
)
from storefront.domain.model.order import PaymentMethod
from storefront.domain.model.value_objects import Quantity

CART = [CartLineItem(product_id=1, quantity=Quantity(2))]


def _ready_session(country: str = "India") -> CheckoutSession:
    session = CheckoutSession()
    session.update_address(ShippingAddress(full_name="Asha", country=country))
    session.select_payment(PaymentMethod.COD)
    return session


class TestCountryGate:

    @pytest.mark.parametrize("country", ["India", "India ", "INDIA", " india", "iNdIa"])
    def test_india_passes(self, country):
        assert is_shippable_country(country)

    @pytest.mark.parametrize("country", ["USA", "", "   ", "Indian", "Bharat"])
    def test_others_fail(self, country):
        assert not is_shippable_country(country)

    def test_live_hint_for_other_country(self):
        session = CheckoutSession(country="USA")
        assert session.country_error == COUNTRY_HINT_MESSAGE

    def test_no_hint_while_country_blank(self):
        assert CheckoutSession(country="  ").country_error is None

    def test_no_hint_for_india(self):
        assert CheckoutSession(country=" INDIA").country_error is None


class TestPreconditions:

    def test_ready_session_passes(self):
        _ready_session().check_ready(CART)

    def test_blank_address_first(self):
        session = CheckoutSession(shipping_address="  ", country="USA")
        with pytest.raises(ValidationError, match="shipping address"):
            session.check_ready([])

    def test_blank_country(self):
        session = CheckoutSession(shipping_address="Somewhere", country=" ")
        with pytest.raises(ValidationError, match="enter your country"):
            session.check_ready(CART)

    def test_other_country_blocked(self):
        session = _ready_session(country="USA")
        with pytest.raises(ValidationError, match="only accept orders from India"):
            session.check_ready(CART)

    def test_payment_method_required(self):
        session = CheckoutSession()
        session.update_address(ShippingAddress(full_name="Asha", country="india"))
        with pytest.raises(ValidationError, match="payment method"):
            session.check_ready(CART)

    def test_empty_cart_last(self):
        with pytest.raises(ValidationError, match="cart is empty"):
            _ready_session().check_ready([])

    def test_details_need_no_cart(self):
        _ready_session().check_details()

    def test_details_stop_at_payment(self):
        session = _ready_session()
        session.payment_method = None
        with pytest.raises(ValidationError, match="payment method"):
            session.check_details()

    def test_ensure_submittable_checks_details(self):
        with pytest.raises(ValidationError, match="only accept orders from India"):
            _ready_session(country="Nepal").ensure_submittable()

    def test_ensure_submittable_rejects_placed_session(self):
        session = _ready_session()
        session.mark_placed(3)
        with pytest.raises(ValidationError, match="Order #3 has already been placed"):
            session.ensure_submittable()


class TestStages:

    def test_starts_composing_address(self):
        assert CheckoutSession().stage == CheckoutStage.COMPOSING_ADDRESS

    def test_non_shippable_country_keeps_composing(self):
        session = CheckoutSession()
        session.update_address(ShippingAddress(full_name="Asha", country="USA"))
        session.select_payment(PaymentMethod.COD)
        assert session.stage == CheckoutStage.COMPOSING_ADDRESS

    def test_selecting_payment(self):
        session = CheckoutSession()
        session.update_address(ShippingAddress(full_name="Asha", country="India"))
        assert session.stage == CheckoutStage.SELECTING_PAYMENT

    def test_ready(self):
        assert _ready_session().stage == CheckoutStage.READY

    def test_submitting_then_placed(self):
        session = _ready_session()
        session.begin_submission(CART)
        assert session.stage == CheckoutStage.SUBMITTING
        session.mark_placed(42)
        assert session.stage == CheckoutStage.PLACED
        assert session.order_id == 42

    def test_rejection_returns_to_ready(self):
        session = _ready_session()
        session.begin_submission(CART)
        session.mark_rejected()
        assert session.stage == CheckoutStage.READY
        session.begin_submission(CART)
        assert session.stage == CheckoutStage.SUBMITTING

    def test_double_submit_rejected(self):
        session = _ready_session()
        session.begin_submission(CART)
        with pytest.raises(ValidationError, match="already being placed"):
            session.begin_submission(CART)

    def test_placed_is_terminal(self):
        session = _ready_session()
        session.begin_submission(CART)
        session.mark_placed(7)
        with pytest.raises(ValidationError, match="already been placed"):
            session.begin_submission(CART)

    def test_failed_precondition_does_not_submit(self):
        session = _ready_session()
        with pytest.raises(ValidationError):
            session.begin_submission([])
        assert session.stage == CheckoutStage.READY


class TestAddressUpdates:

    def test_update_address_sets_block_and_country(self):
        session = CheckoutSession()
        address = ShippingAddress(full_name="Asha", city="Pune", country="India")
        session.update_address(address)
        assert session.shipping_address == address.compose()
        assert session.country == "India"

    def test_every_change_propagates(self):
        session = CheckoutSession()
        address = ShippingAddress(full_name="Asha", country="India")
        session.update_address(address)
        session.update_address(address.with_field("country", "Nepal"))
        assert session.country == "Nepal"
        assert session.shipping_address.endswith("Nepal")
