#!/usr/bin/env python3
"""
Billing CLI

Command-line interface for running the billing batch and inspecting bills
outside of HTTP, e.g. from cron.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from findclo.core.database import (
    close_engine,
    get_engine,
    get_session_context,
    get_transaction_context,
    reset_session_factory,
)
from findclo.core.database.create_tables import create_all_tables
from findclo.core.exceptions import FindCloException
from findclo.core.logging import get_logger
from findclo.domains.billing.jobs import MonthlyBillingJob
from findclo.domains.billing.models import (
    BatchBillingResult,
    BillingPeriod,
    BillView,
)
from findclo.domains.billing.services import BillReader, BillWriter
from findclo.shared.helpers import now_utc

logger = get_logger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="findclo-billing", description="FindClo billing CLI"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate bills for every brand"
    )
    generate_parser.add_argument("--period-start", help="Period start (YYYY-MM-DD)")
    generate_parser.add_argument("--period-end", help="Period end (YYYY-MM-DD)")
    generate_parser.add_argument(
        "--previous-month",
        action="store_true",
        help="Use the previous calendar month as billing period",
    )
    generate_parser.add_argument(
        "--max-concurrent-brands",
        type=positive_int,
        default=None,
        help="Brands billed in parallel (default from settings)",
    )

    list_parser = subparsers.add_parser("list", help="List bills")
    list_group = list_parser.add_mutually_exclusive_group(required=True)
    list_group.add_argument("--period", help="Month key (YYYY-MM)")
    list_group.add_argument("--brand-id", type=int, help="Brand id")

    toggle_parser = subparsers.add_parser(
        "toggle-paid", help="Flip the paid flag of a bill"
    )
    toggle_parser.add_argument("bill_id", type=int)

    subparsers.add_parser("create-tables", help="Create the database schema")

    return parser


def resolve_period(args: argparse.Namespace) -> BillingPeriod:
    """Billing period from ``generate`` arguments"""
    if args.previous_month:
        return BillingPeriod.previous_month(now_utc().date())
    return BillingPeriod.from_strings(args.period_start, args.period_end)


def print_batch_result(result: BatchBillingResult) -> None:
    print(
        f"Brands: {result.total} | succeeded: {result.succeeded} | failed: {result.failed}"
    )
    for detail in result.details:
        line = f"  [{detail.status.value}] {detail.brand_id} {detail.brand_name}"
        if detail.bill_id is not None:
            line += f" bill={detail.bill_id} amount={detail.amount}"
        if detail.error:
            line += f" error={detail.error}"
        print(line)


def print_bills(bills: List[BillView]) -> None:
    if not bills:
        print("No bills found")
        return
    for bill in bills:
        paid = "paid" if bill.is_paid else "unpaid"
        print(
            f"#{bill.bill_id} {bill.brand_name} {bill.period.start_date}..{bill.period.end_date} "
            f"{bill.total_amount} ({paid})"
        )
        for item in bill.billable_items:
            print(
                f"    {item.item_name}: {item.quantity} x {item.unit_price} = {item.total_price}"
            )


async def run_command(args: argparse.Namespace) -> int:
    """Execute one CLI command; returns the process exit code"""
    if args.command == "generate":
        result = await MonthlyBillingJob(
            max_concurrent_brands=args.max_concurrent_brands
        ).run(resolve_period(args))
        print_batch_result(result)
        if result.failed:
            logger.warning(f"{result.failed} brand(s) failed billing")
            return 1
        return 0

    if args.command == "list":
        async with get_session_context() as session:
            reader = BillReader(session)
            if args.brand_id is not None:
                bills = await reader.list_brand_bills_with_details(args.brand_id)
            else:
                bills = await reader.list_bills_with_details(args.period)
        print_bills(bills)
        return 0

    if args.command == "toggle-paid":
        async with get_transaction_context() as session:
            bill = await BillWriter(session).change_bill_status(args.bill_id)
            print(f"Bill {bill.id} is now {'paid' if bill.is_paid else 'unpaid'}")
        return 0

    if args.command == "create-tables":
        await create_all_tables(await get_engine())
        print("Tables created")
        return 0

    return 2


async def _main(argv: Optional[List[str]]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 2

    try:
        return await run_command(args)
    except FindCloException as e:
        logger.error(f"Billing CLI command {args.command} failed: {e.message}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        await close_engine()
        reset_session_factory()


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(asyncio.run(_main(argv)))


if __name__ == "__main__":
    main()
