"""Shipping address composition.

The backend stores the shipping address as one free-text block. The
client collects it as separate sub-fields and interpolates them in a
fixed order; the block is recomputed whenever any sub-field changes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class ShippingAddress:
    """Sub-fields of a shipping address.

    No per-field validation happens here (phone and pincode formats are
    not checked); only the composed block is checked at submission.
    """

    full_name: str = ""
    phone: str = ""
    address_line: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    country: str = ""

    def compose(self) -> str:
        return (
            f"{self.full_name}\n"
            f"{self.phone}\n"
            f"{self.address_line}\n"
            f"{self.city}, {self.state} - {self.pincode}\n"
            f"{self.country}"
        )

    def with_field(self, name: str, value: str) -> ShippingAddress:
        if name not in _FIELD_NAMES:
            raise KeyError(f"Unknown address field: {name!r}")
        return replace(self, **{name: value})


_FIELD_NAMES = frozenset(f.name for f in fields(ShippingAddress))
