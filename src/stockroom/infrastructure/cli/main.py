import click

from stockroom.infrastructure.cli.product_commands import product_demo, product_run
from stockroom.infrastructure.logger_config import setup_logging
from stockroom.infrastructure.settings import settings


@click.group()
@click.option(
    "--log-level",
    envvar="STOCKROOM_LOG_LEVEL",
    default=settings.log_level,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging verbosity.",
)
@click.option(
    "--currency",
    envvar="STOCKROOM_CURRENCY",
    default=settings.currency,
    show_default=True,
    help="Currency code used to display prices.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, currency: str) -> None:
    """stockroom — validated single-product inventory record"""
    setup_logging(log_level)
    ctx.obj = {"currency": currency.upper()}


# Register subcommands
cli.add_command(product_demo)
cli.add_command(product_run)
