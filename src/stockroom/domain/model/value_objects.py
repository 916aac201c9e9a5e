"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from stockroom.domain.exceptions import InvalidArgumentError

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "BRL": "R$",
}

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors. Money itself does
    not forbid negative amounts; the Product decides what a valid price is.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidArgumentError(
                "amount",
                f"Money amount must be a Decimal, got {type(self.amount).__name__}",
            )
        if not self.amount.is_finite():
            raise InvalidArgumentError("amount", f"Money amount must be finite, got {self.amount}")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        with localcontext() as ctx:
            ctx.prec = max(28, self.amount.adjusted() + 3)
            rounded = self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
            sign = "-" if rounded < 0 else ""
            digits = f"{abs(rounded):,.2f}"
        symbol = _CURRENCY_SYMBOLS.get(self.currency.upper())
        if symbol is None:
            return f"{sign}{self.currency} {digits}"
        return f"{sign}{symbol}{digits}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: str = "USD",
        field: str = "amount",
    ) -> Money:
        """Convenient factory that coerces to Decimal safely.

        ``field`` names the offending input in the raised error.
        """
        if isinstance(amount, bool):
            raise InvalidArgumentError(field, f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(field, f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise InvalidArgumentError(field, f"Invalid money amount: {amount!r}")
        return Money(value, currency)
