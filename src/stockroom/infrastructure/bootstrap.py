"""Composition root — wires settings into the application handlers.

This is the only place that knows where defaults come from; the CLI asks
it for ready-to-use handlers.
"""

from __future__ import annotations

from stockroom.application.apply_operations import ApplyOperationsHandler
from stockroom.application.run_demo import RunDemoHandler
from stockroom.infrastructure.settings import settings


def apply_operations_handler(currency: str | None = None) -> ApplyOperationsHandler:
    return ApplyOperationsHandler(currency=currency or settings.currency)


def run_demo_handler(currency: str | None = None) -> RunDemoHandler:
    return RunDemoHandler(currency=currency or settings.currency)
