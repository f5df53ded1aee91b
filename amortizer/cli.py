"""Printable amortization report.

Usage:
    python -m amortizer.cli 275000 6.5 30 --start 2025-01 --tax 3600 --tax-frequency annual
    python -m amortizer.cli 275000 6.5 30 --extra 200 --extra-start 2026-06 --original 300000
    python -m amortizer.cli 275000 6.5 30 --yearly
"""

import argparse
import sys

from amortizer.engine.amortization import compute_schedule, yearly_summary
from amortizer.engine.comparison import compare_to_baseline, paid_down_summary
from amortizer.engine.formatting import format_currency, format_duration, format_percent
from amortizer.engine.inputs import build_inputs
from amortizer.logging_config import configure_logging
from amortizer.models.loan import LoanInputs
from amortizer.models.results import ScheduleResult

WIDTH = 100


def _header(title: str) -> None:
    print(f"\n{'=' * WIDTH}")
    print(f"  {title}")
    print(f"{'=' * WIDTH}")


def print_summary(result: ScheduleResult) -> None:
    _header("Loan Summary")
    print(f"  Loan Balance:           {format_currency(result.principal)}")
    print(f"  Monthly P&I:            {format_currency(result.monthly_payment)}")
    print(f"  Monthly Taxes:          {format_currency(result.monthly_tax)}")
    if result.monthly_extra > 0:
        print(f"  Extra Payment:          {format_currency(result.monthly_extra)}/mo"
              f" from {result.extra_start_date.long_label}")
    print(f"  Total Monthly Payment:  {format_currency(result.total_monthly_payment)}")
    print()
    print(f"  Total Interest:         {format_currency(result.total_interest)}")
    print(f"  Total Taxes:            {format_currency(result.total_tax)}")
    print(f"  Total Paid:             {format_currency(result.total_paid)}")
    print(f"  Payments:               {result.payment_count}"
          f" ({format_duration(result.payoff_duration)})")
    print(f"  Payoff Date:            {result.payoff_date.long_label}")


def print_paid_down(inputs: LoanInputs) -> None:
    summary = paid_down_summary(inputs)
    if summary is None:
        return
    _header("Loan Progress")
    print(f"  Original Amount:        {format_currency(summary.original_amount)}")
    print(f"  Remaining Balance:      {format_currency(summary.remaining_balance)}")
    print(f"  Paid Down So Far:       {format_currency(summary.paid_down)}"
          f" ({format_percent(summary.paid_down_pct)})")


def print_savings(inputs: LoanInputs, result: ScheduleResult) -> None:
    comparison = compare_to_baseline(inputs, result)
    if comparison is None:
        return
    baseline = comparison.baseline
    _header("Extra Payment Savings")
    print(f"  Interest Saved:         {format_currency(comparison.interest_saved)}")
    print(f"  Time Saved:             {format_duration(comparison.time_saved)}")
    print(f"  Payoff Date:            {result.payoff_date.long_label}"
          f" vs {baseline.payoff_date.long_label}")
    print(f"  Total Interest:         {format_currency(result.total_interest)}"
          f" vs {format_currency(baseline.total_interest)}")
    print(f"  Total Paid:             {format_currency(result.total_paid)}"
          f" vs {format_currency(baseline.total_paid)}")
    print(f"  Payments:               {result.payment_count} vs {baseline.payment_count}")
    print()
    print(f"  Paying an extra {format_currency(result.monthly_extra)}/month saves"
          f" {format_currency(comparison.interest_saved)} in interest and pays the loan off"
          f" {format_duration(comparison.time_saved, long=True)} early.")


def print_schedule(result: ScheduleResult) -> None:
    _header("Amortization Schedule")
    print(f"  {'#':>4}  {'Date':<9} {'Beginning':>14} {'Payment':>12} {'Principal':>12}"
          f" {'Interest':>11} {'Extra':>10} {'Ending':>14} {'Cum. Interest':>14}")
    for row in result.rows:
        extra = format_currency(row.extra_payment) if row.extra_payment > 0 else "-"
        print(f"  {row.payment_number:>4}  {row.payment_date.short_label:<9}"
              f" {format_currency(row.beginning_balance):>14}"
              f" {format_currency(row.total_payment):>12}"
              f" {format_currency(row.principal):>12}"
              f" {format_currency(row.interest):>11}"
              f" {extra:>10}"
              f" {format_currency(row.ending_balance):>14}"
              f" {format_currency(row.cumulative_interest):>14}")


def print_yearly(result: ScheduleResult) -> None:
    _header("Yearly Summary")
    print(f"  {'Year':>4}  {'Principal':>14} {'Interest':>14} {'Extra':>12} {'Paid':>14} {'Ending':>14}")
    for y in yearly_summary(result):
        print(f"  {y.year:>4}  {format_currency(y.principal):>14} {format_currency(y.interest):>14}"
              f" {format_currency(y.extra):>12} {format_currency(y.total_payment):>14}"
              f" {format_currency(y.ending_balance):>14}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Loan amortization schedule")
    parser.add_argument("principal", help="Remaining balance to amortize")
    parser.add_argument("rate", help="Annual interest rate in percent, e.g. 6.5")
    parser.add_argument("term", help="Loan term in years")
    parser.add_argument("--start", help="First payment month, YYYY-MM (default: this month)")
    parser.add_argument("--original", help="Original loan amount (for paid-down figures)")
    parser.add_argument("--tax", help="Property tax amount")
    parser.add_argument("--tax-frequency", choices=["monthly", "annual"], default="annual")
    parser.add_argument("--extra", help="Extra principal payment")
    parser.add_argument("--extra-frequency", choices=["monthly", "annual"], default="monthly")
    parser.add_argument("--extra-start", help="First month with extra payments, YYYY-MM (default: --start)")
    parser.add_argument("--yearly", action="store_true", help="Print yearly totals instead of every payment")
    parser.add_argument("--summary-only", action="store_true", help="Skip the payment table")
    parser.add_argument("--log-level", default=None, help="Override AMORTIZER_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    inputs = build_inputs(
        principal=args.principal,
        interest_rate_pct=args.rate,
        term_years=args.term,
        start_date=args.start,
        original_amount=args.original,
        tax_amount=args.tax,
        tax_frequency=args.tax_frequency,
        extra_amount=args.extra,
        extra_frequency=args.extra_frequency,
        extra_start_date=args.extra_start,
    )
    result = compute_schedule(inputs)
    if result is None:
        print("Enter a principal, interest rate and loan term greater than zero.", file=sys.stderr)
        return 2

    if not result.converged:
        print(
            f"Warning: loan not paid off after {result.payment_count} payments;"
            " schedule truncated.",
            file=sys.stderr,
        )

    print_summary(result)
    print_paid_down(inputs)
    print_savings(inputs, result)
    if not args.summary_only:
        if args.yearly:
            print_yearly(result)
        else:
            print_schedule(result)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
