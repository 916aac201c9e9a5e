"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from stockroom.application.dto import OperationOutcome, OperationSpec
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import apply_operations_handler, run_demo_handler


def _echo_outcome(outcome: OperationOutcome) -> None:
    if outcome.succeeded:
        label = "Created" if outcome.operation == "create" else f"After {outcome.operation}"
        click.echo(f"{label}: {outcome.snapshot.summary}")
    else:
        click.echo(f"Error ({outcome.error_kind}) in {outcome.operation}: {outcome.message}")


@click.command("demo")
@click.pass_obj
def product_demo(obj: dict) -> None:
    """Replay the demonstration scenarios."""
    handler = run_demo_handler(currency=obj["currency"])

    for i, scenario in enumerate(handler.handle()):
        if i:
            click.echo()
        click.echo(f"--- {scenario.title} ---")
        for outcome in scenario.report.outcomes:
            _echo_outcome(outcome)


@click.command("run")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 2500.00).")
@click.option("--stock", required=True, type=int, help="Initial stock.")
@click.option(
    "--op",
    "ops",
    multiple=True,
    help="Operation as kind:value, e.g. add:5, remove:3, price:19.90. Repeatable.",
)
@click.option("--stop-on-error", is_flag=True, help="Stop at the first failed operation.")
@click.pass_context
def product_run(
    ctx: click.Context, name: str, price: str, stock: int, ops: tuple[str, ...], stop_on_error: bool
) -> None:
    """Create a product and apply operations to it in order."""
    try:
        operations = [OperationSpec.parse(op) for op in ops]
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--op")

    handler = apply_operations_handler(currency=ctx.obj["currency"])
    report = handler.handle(name, price, stock, operations, stop_on_error=stop_on_error)

    if not report.created:
        failure = report.outcomes[0]
        raise click.ClickException(f"Could not create product: {failure.message}")

    for outcome in report.outcomes:
        _echo_outcome(outcome)

    if report.failures:
        ctx.exit(1)
