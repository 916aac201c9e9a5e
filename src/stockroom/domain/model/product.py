"""Product entity.

The Product is both the data holder and the only behavioural unit of the
domain: it validates its own construction and every mutation. A failed
call never leaves a partial change behind.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from stockroom.domain.exceptions import (
    DomainRuleViolation,
    InvalidArgumentError,
    OutOfRangeError,
)
from stockroom.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


def _require_int(field: str, value: object) -> int:
    """Return ``value`` if it is a plain int; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            field, f"{field} must be an integer, got {type(value).__name__}"
        )
    return value


class Product:
    """A single product with a price and a stock level.

    Invariants:
    - ``name`` is never empty or whitespace-only, and never changes
    - ``price`` is always >= 0
    - ``stock`` is always >= 0
    """

    def __init__(
        self,
        name: str,
        price: Decimal | int | float | str,
        initial_stock: int,
        currency: str = "USD",
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("name", "Name cannot be empty or blank")

        amount = Money.of(price, currency, field="price").amount
        if amount < 0:
            raise OutOfRangeError("price", "Price cannot be negative")

        initial_stock = _require_int("initial_stock", initial_stock)
        if initial_stock < 0:
            raise OutOfRangeError("initial_stock", "Initial stock cannot be negative")

        if not isinstance(currency, str) or not currency.strip():
            raise InvalidArgumentError("currency", "Currency cannot be empty or blank")

        self._name = name
        self._price = amount
        self._stock = initial_stock
        self._currency = currency

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def currency(self) -> str:
        return self._currency

    def add_stock(self, quantity: int) -> None:
        """Receive ``quantity`` more units. There is no upper bound."""
        quantity = _require_int("quantity", quantity)
        if quantity <= 0:
            raise OutOfRangeError("quantity", "Quantity to add must be greater than zero")
        self._stock += quantity
        logger.debug("Added %d to %s, stock now %d", quantity, self._name, self._stock)

    def remove_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises DomainRuleViolation if fewer than ``quantity`` units are
        currently in stock.
        """
        quantity = _require_int("quantity", quantity)
        if quantity <= 0:
            raise OutOfRangeError("quantity", "Quantity to remove must be greater than zero")
        if quantity > self._stock:
            raise DomainRuleViolation(
                f"Insufficient stock. Current stock: {self._stock}, requested: {quantity}",
                current_value=self._stock,
                requested_value=quantity,
            )
        self._stock -= quantity
        logger.debug("Removed %d from %s, stock now %d", quantity, self._name, self._stock)

    def update_price(self, new_price: Decimal | int | float | str) -> None:
        amount = Money.of(new_price, self._currency, field="price").amount
        if amount < 0:
            raise OutOfRangeError("price", "Price cannot be negative")
        self._price = amount
        logger.debug("Price of %s set to %s", self._name, amount)

    # --- Display --------------------------------------------------------------

    def describe(self) -> str:
        return (
            f"Product: {self._name}, "
            f"Price: {Money(self._price, self._currency)}, "
            f"Stock: {self._stock}"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Product(name={self._name!r}, price={self._price!r}, "
            f"stock={self._stock!r}, currency={self._currency!r})"
        )
