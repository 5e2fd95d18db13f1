"""
Command line reports for realty-analytics
"""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd
from pandera.errors import SchemaError

from .config import Settings, get_default_settings
from .data import save_results
from .engine import InvestmentAnalytics
from .models import correlations_to_frame, forecast_to_frame
from .utils.exceptions import RealtyAnalyticsError
from .utils.logging_config import setup_logging

logger = logging.getLogger("realty_analytics.cli")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="realty-analytics",
        description="Investment analytics reports over the property dataset",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("--config", default=None, help="Path to JSON settings file")
    parser.add_argument("--properties", default=None, help="Alternate property data file")
    parser.add_argument("--quarter", default=None, help="Quarter label, e.g. 2024-Q3")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--output", default=None, help="Also write the report to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    scores = subparsers.add_parser("scores", help="Property investment scores")
    scores.add_argument("--by", default="score", help="Column to sort by")
    scores.add_argument("--ascending", action="store_true", help="Sort ascending")
    scores.add_argument("--top", type=int, default=50, help="Rows to keep (0 = all)")

    forecast = subparsers.add_parser("forecast", help="Average price forecast")
    forecast.add_argument("--quarters-ahead", type=int, default=None, help="Quarters to project")

    subparsers.add_parser("correlations", help="Price vs economic indicator correlations")

    stress = subparsers.add_parser("stress", help="Portfolio stress scenario")
    stress.add_argument("--rate", type=float, default=0.0, help="Interest rate change (points)")
    stress.add_argument("--vacancy", type=float, default=0.0, help="Vacancy change (points)")
    stress.add_argument("--rent", type=float, default=0.0, help="Rent growth change (points)")
    stress.add_argument("--base-value", type=float, default=None, help="Portfolio value to stress")

    subparsers.add_parser("cycle", help="Market cycle phase")
    subparsers.add_parser("trend", help="Quarterly market price trend")
    subparsers.add_parser("summary", help="Portfolio KPI summary")

    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_json(args.config) if args.config else get_default_settings()
    if args.properties:
        settings.properties_path = args.properties
    if args.log_level:
        settings.log_level = args.log_level
    settings.validate()
    return settings


def build_report(analytics: InvestmentAnalytics, args: argparse.Namespace) -> pd.DataFrame:
    """Run the requested sub-command and return its report frame."""
    quarter = args.quarter or analytics.settings.anchor_quarter

    if args.command == "scores":
        return analytics.ranked_scores(quarter, by=args.by, ascending=args.ascending, top=args.top or None)
    if args.command == "forecast":
        return forecast_to_frame(analytics.forecast(args.quarters_ahead))
    if args.command == "correlations":
        return correlations_to_frame(analytics.correlations())
    if args.command == "stress":
        scenario = analytics.stress_test(
            args.rate, args.vacancy, args.rent, base_value=args.base_value, quarter=quarter
        )
        return pd.DataFrame([scenario.to_dict()])
    if args.command == "cycle":
        cycle = analytics.market_cycle(quarter)
        return pd.DataFrame([{
            "quarter": quarter,
            "phase": cycle.phase.value,
            "confidence": cycle.confidence,
            "description": cycle.description,
        }])
    if args.command == "trend":
        return analytics.market_trend()
    if args.command == "summary":
        return pd.DataFrame([analytics.portfolio_summary(quarter).to_dict()])

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function"""
    args = parse_arguments(argv)

    try:
        settings = load_settings(args)
        setup_logging("realty_analytics", level=settings.log_level, log_file=settings.log_file)
        logger.info(f"Running '{args.command}' report")

        analytics = InvestmentAnalytics(settings=settings)
        report = build_report(analytics, args)

        print(report.to_string(index=False))

        output = args.output or settings.output_path
        if output:
            save_results(report, output)

    except (RealtyAnalyticsError, SchemaError, ValueError, FileNotFoundError) as e:
        logger.error(f"Report failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
