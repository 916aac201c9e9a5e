"""Application service: Apply Operations use case.

Builds a fresh Product and drives it through a sequence of operations,
recording each step as an outcome instead of letting the first domain
error end the run.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from stockroom.application.dto import (
    OperationOutcome,
    OperationSpec,
    ProductSnapshot,
    RunReport,
)
from stockroom.domain.exceptions import DomainException, InvalidArgumentError
from stockroom.domain.model.product import Product

logger = logging.getLogger(__name__)


def _parse_quantity(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidArgumentError("quantity", f"Quantity must be an integer, got {value!r}") from exc


def _failed(operation: str, exc: DomainException) -> OperationOutcome:
    return OperationOutcome(
        operation=operation,
        succeeded=False,
        error_kind=exc.kind,
        field=getattr(exc, "field", None),
        message=exc.message,
    )


class ApplyOperationsHandler:

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    def handle(
        self,
        name: str,
        price: Decimal | int | float | str,
        initial_stock: int,
        operations: list[OperationSpec],
        stop_on_error: bool = False,
    ) -> RunReport:
        """Create a product and apply ``operations`` to it in order.

        A construction failure yields a report with a single failed
        ``create`` outcome. A failed operation leaves the product untouched
        and, unless ``stop_on_error`` is set, the run carries on.
        """
        outcomes: list[OperationOutcome] = []

        try:
            product = Product(name, price, initial_stock, currency=self._currency)
        except DomainException as exc:
            logger.info("Could not create product %r: %s", name, exc.message)
            outcomes.append(_failed("create", exc))
            return RunReport(outcomes)

        outcomes.append(
            OperationOutcome("create", succeeded=True, snapshot=ProductSnapshot.of(product))
        )

        for spec in operations:
            try:
                self._apply(product, spec)
            except DomainException as exc:
                logger.info("Operation %s on %r failed: %s", spec, product.name, exc.message)
                outcomes.append(_failed(str(spec), exc))
                if stop_on_error:
                    break
                continue
            outcomes.append(
                OperationOutcome(str(spec), succeeded=True, snapshot=ProductSnapshot.of(product))
            )

        return RunReport(outcomes)

    @staticmethod
    def _apply(product: Product, spec: OperationSpec) -> None:
        if spec.kind == "add":
            product.add_stock(_parse_quantity(spec.value))
        elif spec.kind == "remove":
            product.remove_stock(_parse_quantity(spec.value))
        else:
            product.update_price(spec.value)
