"""Order aggregate.

Orders are created and priced by the backend. Once placed an order never
changes, so the client models it as a frozen snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from storefront.domain.model.cart import CartLineItem, count_items
from storefront.domain.model.value_objects import Money


class PaymentMethod(Enum):
    """Supported payment methods.

    A closed set: adding a method means adding a member and a label,
    call sites match on the enum and need no restructuring.
    """

    COD = "cod"

    @property
    def label(self) -> str:
        return _PAYMENT_LABELS[self]

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        try:
            return PaymentMethod(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported payment method: {raw!r}") from None


_PAYMENT_LABELS = {
    PaymentMethod.COD: "Cash on Delivery (COD)",
}


@dataclass(frozen=True)
class Order:
    """A placed order.

    ``total`` was computed by the backend at placement time and is the
    only authoritative amount; clients may preview it but never derive it.
    """

    id: int
    items: tuple[CartLineItem, ...]
    total: Money
    payment_method: PaymentMethod
    shipping_address: str
    placed_at: datetime
    user: str

    @property
    def item_count(self) -> int:
        return count_items(self.items)


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_from_nanos(nanos: int) -> datetime:
    """Backend timestamps are nanoseconds since the Unix epoch."""
    return _EPOCH + timedelta(microseconds=nanos // 1_000)


def timestamp_to_nanos(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(microseconds=1) * 1_000
