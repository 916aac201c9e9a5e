"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the Product itself to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.exceptions import InvalidArgumentError
from stockroom.domain.model.product import Product
from stockroom.domain.model.value_objects import Money

OPERATION_KINDS = ("add", "remove", "price")


@dataclass(frozen=True)
class OperationSpec:
    """Input: one step to apply to a product, e.g. ``add`` with ``"5"``."""

    kind: str
    value: str

    def __post_init__(self) -> None:
        if self.kind not in OPERATION_KINDS:
            raise InvalidArgumentError(
                "operation",
                f"Unknown operation {self.kind!r} (expected one of: {', '.join(OPERATION_KINDS)})",
            )

    @staticmethod
    def parse(text: str) -> OperationSpec:
        """Parse the ``kind:value`` form used on the command line."""
        kind, sep, value = text.partition(":")
        if not sep or not value.strip():
            raise InvalidArgumentError(
                "operation", f"Operation must look like 'kind:value', got {text!r}"
            )
        return OperationSpec(kind.strip().lower(), value.strip())

    def __str__(self) -> str:
        return f"{self.kind}:{self.value}"


@dataclass(frozen=True)
class ProductSnapshot:
    """Output: the product's fields at one point in time."""

    name: str
    price: str  # formatted, e.g. "$2,500.00"
    stock: int
    summary: str

    @staticmethod
    def of(product: Product) -> ProductSnapshot:
        return ProductSnapshot(
            name=product.name,
            price=str(Money(product.price, product.currency)),
            stock=product.stock,
            summary=product.describe(),
        )


@dataclass(frozen=True)
class OperationOutcome:
    """Output: the result of one step of a run."""

    operation: str
    succeeded: bool
    snapshot: ProductSnapshot | None = None
    error_kind: str | None = None
    field: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class RunReport:
    """Output: every outcome of a run, in order."""

    outcomes: list[OperationOutcome] = field(default_factory=list)

    @property
    def created(self) -> bool:
        return bool(self.outcomes) and self.outcomes[0].succeeded

    @property
    def failures(self) -> list[OperationOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def final(self) -> ProductSnapshot | None:
        for outcome in reversed(self.outcomes):
            if outcome.snapshot is not None:
                return outcome.snapshot
        return None


@dataclass(frozen=True)
class ScenarioReport:
    """Output: a titled run, as shown by the demonstration."""

    title: str
    report: RunReport
