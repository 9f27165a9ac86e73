"""Checkout session: the order placement state machine.

Stages::

    COMPOSING_ADDRESS -> SELECTING_PAYMENT -> READY -> SUBMITTING -> PLACED
                                                ^          |
                                                +----------+  (backend rejection)

The first three stages are derived from what the shopper has entered so
far. SUBMITTING and PLACED are entered explicitly by the placement
handler around the remote call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.order import PaymentMethod

# Orders are only accepted for a single destination country for now.
SHIPPING_COUNTRY = "india"

COUNTRY_CONSTRAINT_MESSAGE = "We currently only accept orders from India"
COUNTRY_HINT_MESSAGE = (
    'We currently only accept orders from India. Please enter "India" as your country.'
)


class CheckoutStage(Enum):
    COMPOSING_ADDRESS = "composing_address"
    SELECTING_PAYMENT = "selecting_payment"
    READY = "ready"
    SUBMITTING = "submitting"
    PLACED = "placed"


def is_shippable_country(country: str) -> bool:
    return country.strip().lower() == SHIPPING_COUNTRY


@dataclass
class CheckoutSession:
    """Everything the shopper has entered on the way to placing an order.

    ``shipping_address`` is the composed free-text block; it stays empty
    until an address sub-field has been entered.
    """

    shipping_address: str = ""
    country: str = ""
    payment_method: PaymentMethod | None = None
    order_id: int | None = None
    submitting: bool = False

    # --- Input ----------------------------------------------------------------

    def update_address(self, address: ShippingAddress) -> None:
        """Take the recomputed block and country from the address form."""
        self.shipping_address = address.compose()
        self.country = address.country

    def select_payment(self, method: PaymentMethod) -> None:
        self.payment_method = method

    # --- Derived state --------------------------------------------------------

    @property
    def stage(self) -> CheckoutStage:
        if self.order_id is not None:
            return CheckoutStage.PLACED
        if self.submitting:
            return CheckoutStage.SUBMITTING
        if not self._address_complete():
            return CheckoutStage.COMPOSING_ADDRESS
        if self.payment_method is None:
            return CheckoutStage.SELECTING_PAYMENT
        return CheckoutStage.READY

    @property
    def country_error(self) -> str | None:
        """Live hint shown as soon as a non-shippable country is typed."""
        if self.country.strip() and not is_shippable_country(self.country):
            return COUNTRY_HINT_MESSAGE
        return None

    # --- Preconditions --------------------------------------------------------

    def check_details(self) -> None:
        """Enforce the preconditions that need nothing from the backend.

        Raises ValidationError on the first failure.
        """
        if not self.shipping_address.strip():
            raise ValidationError("Please fill in your shipping address")
        if not self.country.strip():
            raise ValidationError("Please enter your country")
        if not is_shippable_country(self.country):
            raise ValidationError(COUNTRY_CONSTRAINT_MESSAGE)
        if self.payment_method is None:
            raise ValidationError("Please select a payment method")

    def check_ready(self, cart_items: Sequence[CartLineItem]) -> None:
        """Enforce every submission precondition in order."""
        self.check_details()
        if not cart_items:
            raise ValidationError("Your cart is empty")

    # --- Transitions ----------------------------------------------------------

    def ensure_submittable(self) -> None:
        """Everything ``begin_submission`` checks before the cart is read."""
        if self.stage == CheckoutStage.PLACED:
            raise ValidationError(f"Order #{self.order_id} has already been placed")
        if self.stage == CheckoutStage.SUBMITTING:
            raise ValidationError("Order is already being placed")
        self.check_details()

    def begin_submission(self, cart_items: Sequence[CartLineItem]) -> None:
        self.ensure_submittable()
        if not cart_items:
            raise ValidationError("Your cart is empty")
        self.submitting = True

    def mark_placed(self, order_id: int) -> None:
        self.submitting = False
        self.order_id = order_id

    def mark_rejected(self) -> None:
        """Back to READY; the same input can be submitted again."""
        self.submitting = False

    # --- Internal helpers -----------------------------------------------------

    def _address_complete(self) -> bool:
        return bool(self.shipping_address.strip()) and is_shippable_country(self.country)
