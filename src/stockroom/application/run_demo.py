"""Application service: Run Demo use case.

Replays the canned demonstration: one product that runs out of stock and
two products that cannot be created at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from stockroom.application.apply_operations import ApplyOperationsHandler
from stockroom.application.dto import OperationSpec, ScenarioReport


@dataclass(frozen=True)
class Scenario:
    title: str
    name: str
    price: Decimal
    initial_stock: int
    operations: tuple[OperationSpec, ...] = ()


DEMO_SCENARIOS = (
    Scenario(
        title="Stock movements",
        name="Notebook",
        price=Decimal("2500.00"),
        initial_stock=10,
        operations=(
            OperationSpec("add", "5"),
            OperationSpec("remove", "8"),
            OperationSpec("remove", "20"),
        ),
    ),
    Scenario(
        title="Negative price",
        name="Tablet",
        price=Decimal("-100.00"),
        initial_stock=5,
    ),
    Scenario(
        title="Negative initial stock",
        name="Mouse",
        price=Decimal("50.00"),
        initial_stock=-2,
    ),
)


class RunDemoHandler:

    def __init__(
        self,
        currency: str = "USD",
        scenarios: tuple[Scenario, ...] = DEMO_SCENARIOS,
    ) -> None:
        self._runner = ApplyOperationsHandler(currency=currency)
        self._scenarios = scenarios

    def handle(self) -> list[ScenarioReport]:
        return [
            ScenarioReport(
                title=s.title,
                report=self._runner.handle(
                    s.name, s.price, s.initial_stock, list(s.operations)
                ),
            )
            for s in self._scenarios
        ]
