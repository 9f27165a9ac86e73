"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from storefront.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "₹"


@dataclass(frozen=True)
class Money:
    """Monetary amount in integer minor units (cents, paise).

    The backend speaks minor units only, so amounts are never floats.
    Display divides by 100; form input multiplies by 100.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an int of minor units, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def format_amount(self) -> str:
        """Major units with two decimals, e.g. 1999 -> '19.99'."""
        major, minor = divmod(self.amount, 100)
        return f"{major}.{minor:02d}"

    def __str__(self) -> str:
        return f"{self.currency}{self.format_amount()}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(0, currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line can never hold zero or
    negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Optional values
# ---------------------------------------------------------------------------
T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present optional value."""

    value: T

    @property
    def is_present(self) -> bool:
        return True


@dataclass(frozen=True)
class Nothing:
    """An absent optional value."""

    @property
    def is_present(self) -> bool:
        return False


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def option_from_nullable(value: T | None) -> Option[T]:
    """Lift a wire-level ``null``-able value into an explicit option."""
    return NOTHING if value is None else Some(value)


def option_to_nullable(option: Option[T]) -> T | None:
    return option.value if isinstance(option, Some) else None
