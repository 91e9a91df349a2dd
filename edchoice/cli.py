"""Command-line entry point: estimate an award or serve the API."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from edchoice.config import get_settings
from edchoice.core.award import PROGRAM_YEAR, explain_award
from edchoice.core.formatting import DISCLAIMER, GRADE_BAND_LABELS, format_award
from edchoice.logging_config import configure_logging
from edchoice.schemas.award import parse_award_input

EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edchoice",
        description=f"EdChoice Expansion award calculator ({PROGRAM_YEAR} schedule)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    estimate = subparsers.add_parser("estimate", help="Estimate the award per student")
    # kept as strings so the same validation path as the API applies
    estimate.add_argument("--agi", required=True, help="Adjusted gross income, e.g. 45000")
    estimate.add_argument("--household-size", required=True, help="Number of people, e.g. 4")

    serve = subparsers.add_parser("serve", help="Run the HTTP API (development server)")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def _run_estimate(agi: str, household_size: str) -> int:
    try:
        award_input = parse_award_input({"agi": agi, "householdSize": household_size})
    except ValidationError as exc:
        for error in exc.errors(include_url=False):
            field = ".".join(str(part) for part in error["loc"])
            print(f"{field}: {error['msg']}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    breakdown = explain_award(award_input.agi, award_input.household_size)
    amounts = breakdown.amounts

    print(f"=== EdChoice Expansion {PROGRAM_YEAR} - Estimate ===")
    print(f"AGI: ${award_input.agi:,.2f}")
    print(f"Household size: {award_input.household_size}")
    print(f"Income as % of FPL: {breakdown.fpl_ratio * 100:.1f}%")
    print(f"Share of maximum award: {breakdown.award_ratio * 100:.1f}%")
    print()
    print(f"{GRADE_BAND_LABELS['k8']:<12} {format_award(amounts.k8)}")
    print(f"{GRADE_BAND_LABELS['high']:<12} {format_award(amounts.high)}")
    print()
    print(DISCLAIMER)
    return 0


def _run_server(host: Optional[str], port: Optional[int]) -> int:
    from edchoice.app import create_app

    settings = get_settings()
    app = create_app(settings)
    app.run(
        host=host or settings.api_host,
        port=port or settings.api_port,
        debug=settings.debug,
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "estimate":
        return _run_estimate(args.agi, args.household_size)
    return _run_server(args.host, args.port)


if __name__ == "__main__":
    sys.exit(main())
