# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# stockroom: tests for the command line interface
from click.testing import CliRunner

from stockroom.cli import cli


def test_demo() -> None:
    result = CliRunner().invoke(cli, ["demo"])

    assert result.exit_code == 0, result.output
    assert "Grocery items:" in result.output
    assert "[E] 1 - Laptop (Acer) Qty: 5 Warranty: 24mo" in result.output
    assert "Duplicate add caught" in result.output
    assert "Error removing item: Item with ID 999 not found." in result.output
    assert "Invalid quantity caught" in result.output


def test_demo_with_info_logging() -> None:
    result = CliRunner().invoke(cli, ["--log-level", "info", "demo"])

    assert result.exit_code == 0, result.output
    assert "Seeded warehouse" in result.output


def test_show() -> None:
    result = CliRunner().invoke(cli, ["show"])

    assert result.exit_code == 0, result.output
    assert "Electronics" in result.output
    assert "Smartphone" in result.output
    assert "Milk" in result.output


def test_rejects_unknown_level() -> None:
    result = CliRunner().invoke(cli, ["--log-level", "loud", "demo"])
    assert result.exit_code != 0
