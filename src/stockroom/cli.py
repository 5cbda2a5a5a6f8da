# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""Command line entry point for stockroom."""

from __future__ import annotations

import click

from stockroom.inventory.formatting import display_items
from stockroom.logging import LoggerProtocol, LoggingSettings, LogLevel, get_logger
from stockroom.warehouse import WarehouseManager


@click.group()
@click.version_option(package_name="stockroom")
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default=LogLevel.ERROR.value,
    show_default=True,
    help="Level for structured log records.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """stockroom - typed in-memory inventory stores."""
    settings = LoggingSettings(level=log_level)
    ctx.obj = get_logger("stockroom", settings=settings)


@cli.command()
@click.pass_obj
def demo(logger: LoggerProtocol) -> None:
    """Seed both stores and run the warehouse scenario."""
    WarehouseManager(logger=logger).run()


@cli.command()
@click.pass_obj
def show(logger: LoggerProtocol) -> None:
    """Seed both stores and show them as tables."""
    manager = WarehouseManager(logger=logger)
    manager.seed_data()
    display_items(manager.electronics.get_all(), title="Electronics")
    display_items(manager.groceries.get_all(), title="Groceries")


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
