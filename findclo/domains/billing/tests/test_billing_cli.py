"""
Tests for the billing CLI
"""

from datetime import date
from unittest.mock import patch

import pytest

from findclo.core.exceptions import InvalidPeriodError
from findclo.domains.billing.models import BillingPeriod
from findclo.scripts import billing_cli
from findclo.scripts.billing_cli import build_parser, resolve_period, run_command


class TestParser:
    def test_generate_with_explicit_period(self):
        args = build_parser().parse_args(
            ["generate", "--period-start", "2024-03-01", "--period-end", "2024-03-31"]
        )
        assert resolve_period(args) == BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
        assert args.max_concurrent_brands is None

    def test_generate_previous_month(self):
        args = build_parser().parse_args(["generate", "--previous-month"])
        with patch.object(billing_cli, "now_utc") as now_utc:
            now_utc.return_value.date.return_value = date(2024, 1, 10)
            period = resolve_period(args)
        assert period == BillingPeriod(date(2023, 12, 1), date(2023, 12, 31))

    def test_generate_without_period(self):
        args = build_parser().parse_args(["generate"])
        with pytest.raises(InvalidPeriodError):
            resolve_period(args)

    def test_list_requires_period_or_brand(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list"])
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "--period", "2024-03", "--brand-id", "1"])

    def test_toggle_paid_takes_bill_id(self):
        args = build_parser().parse_args(["toggle-paid", "42"])
        assert args.bill_id == 42

    @pytest.mark.parametrize("value", ["0", "-1", "many"])
    def test_max_concurrent_brands_must_be_positive(self, value, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["generate", "--previous-month", "--max-concurrent-brands", value]
            )
        assert "--max-concurrent-brands" in capsys.readouterr().err

    def test_max_concurrent_brands(self):
        args = build_parser().parse_args(
            ["generate", "--previous-month", "--max-concurrent-brands", "3"]
        )
        assert args.max_concurrent_brands == 3


class TestCommands:
    @pytest.fixture(autouse=True)
    async def shared_engine(self):
        # Commands run against the process-wide engine configured by DATABASE_URL
        yield
        await billing_cli.close_engine()
        billing_cli.reset_session_factory()

    async def test_create_tables_then_list(self, capsys):
        parser = build_parser()

        assert await run_command(parser.parse_args(["create-tables"])) == 0
        assert await run_command(parser.parse_args(["list", "--period", "2024-03"])) == 0

        out = capsys.readouterr().out
        assert "Tables created" in out
        assert "No bills found" in out

    async def test_generate_with_no_brands_succeeds(self, capsys):
        parser = build_parser()
        await run_command(parser.parse_args(["create-tables"]))

        exit_code = await run_command(
            parser.parse_args(
                ["generate", "--period-start", "2024-03-01", "--period-end", "2024-03-31"]
            )
        )

        assert exit_code == 0
        assert "Brands: 0 | succeeded: 0 | failed: 0" in capsys.readouterr().out

    async def test_main_reports_errors_with_exit_code(self, capsys):
        await run_command(build_parser().parse_args(["create-tables"]))

        exit_code = await billing_cli._main(["toggle-paid", "7"])

        assert exit_code == 1
        assert "Bill 7 not found" in capsys.readouterr().err
