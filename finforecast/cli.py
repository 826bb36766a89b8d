"""
Financial Metric Forecasting - Command Line Interface

Runs the engine over a CSV export or generated demo data and prints the
result as JSON.

Usage:
    finforecast forecast --csv mrr.csv --horizon 6 --confidence 0.90
    finforecast forecast --demo retail
    finforecast anomalies --csv expenses.csv --threshold 2.5
    finforecast burn --csv expenses.csv --months 6
    finforecast runway --cash 500000 --burn 50000 --revenue 10000 --growth 5

CSV files need a header row with `date` and `value` columns, dates in ISO
format (YYYY-MM-DD).
"""

import argparse
import csv
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from config.settings import get_config

from .demo_data import INDUSTRY_PROFILES, DemoDataGenerator
from .forecasting import (
    ForecastError,
    ForecastOptions,
    Observation,
    detect_anomalies,
    forecast,
    predict_burn_rate,
    validate_observations
)
from .scenarios import calculate_runway_scenarios

logger = logging.getLogger(__name__)


def load_csv(path: Path) -> List[Observation]:
    """
    Read observations from a `date,value` CSV file.

    Raises:
        ValueError: on a missing column or an unparseable row
        InvalidObservationError: on non-finite values
    """
    observations = []
    with open(path, newline='') as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or not {'date', 'value'} <= set(reader.fieldnames):
            raise ValueError(f"{path}: expected 'date' and 'value' columns")

        for line_no, row in enumerate(reader, start=2):
            try:
                observations.append(Observation(
                    timestamp=date.fromisoformat(row['date'].strip()),
                    value=float(row['value'])
                ))
            except (TypeError, ValueError) as e:
                raise ValueError(f"{path}:{line_no}: {e}") from e

    logger.info(f"Loaded {len(observations)} observations from {path}")
    return validate_observations(observations)


def _load_series(args, expenses: bool = False) -> List[Observation]:
    if args.csv:
        return load_csv(Path(args.csv))

    generator = DemoDataGenerator(seed=args.seed)
    if expenses:
        return generator.generate_expense_series(args.demo, months=args.history)
    return generator.generate_revenue_series(args.demo, months=args.history)


def _add_series_arguments(parser: argparse.ArgumentParser, cfg) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--csv', help='CSV file with date,value columns')
    source.add_argument(
        '--demo',
        choices=sorted(INDUSTRY_PROFILES),
        help='Use a generated series for this industry'
    )
    parser.add_argument(
        '--history',
        type=int,
        default=24,
        help='Months of demo history to generate (default: 24)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=cfg.DEMO_SEED,
        help='Random seed for demo data'
    )


def build_parser(cfg) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='finforecast',
        description='Financial metric forecasting and runway analysis'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_forecast = subparsers.add_parser('forecast', help='Holt-Winters forecast')
    _add_series_arguments(p_forecast, cfg)
    p_forecast.add_argument('--horizon', type=int, default=cfg.FORECAST_HORIZON_MONTHS,
                            help='Months to forecast')
    p_forecast.add_argument('--confidence', type=float, default=cfg.FORECAST_CONFIDENCE_LEVEL,
                            help='Confidence level: 0.90, 0.95 or 0.99')
    p_forecast.add_argument('--period', type=int, default=cfg.FORECAST_SEASONAL_PERIOD,
                            help='Seasonal period in months')

    p_anomalies = subparsers.add_parser('anomalies', help='Flag unusual months')
    _add_series_arguments(p_anomalies, cfg)
    p_anomalies.add_argument('--threshold', type=float, default=cfg.ANOMALY_THRESHOLD_STD_DEVS,
                             help='Threshold in standard deviations')

    p_burn = subparsers.add_parser('burn', help='Project burn rate from expenses')
    _add_series_arguments(p_burn, cfg)
    p_burn.add_argument('--months', type=int, default=cfg.BURN_PREDICTION_MONTHS,
                        help='Months to project')

    p_runway = subparsers.add_parser('runway', help='Runway scenarios')
    p_runway.add_argument('--cash', type=float, required=True, help='Cash on hand')
    p_runway.add_argument('--burn', type=float, required=True, help='Monthly burn')
    p_runway.add_argument('--revenue', type=float, default=0.0, help='Monthly revenue')
    p_runway.add_argument('--growth', type=float, default=0.0,
                          help='Monthly revenue growth in percent')

    return parser


def run(args) -> dict:
    """Execute a parsed command and return its JSON-ready result"""
    if args.command == 'forecast':
        options = ForecastOptions(
            horizon_months=args.horizon,
            confidence_level=args.confidence,
            seasonal_period=args.period
        )
        return forecast(_load_series(args), options).to_dict()

    if args.command == 'anomalies':
        anomalies = detect_anomalies(_load_series(args), args.threshold)
        return {"anomalies": [a.to_dict() for a in anomalies]}

    if args.command == 'burn':
        return predict_burn_rate(_load_series(args, expenses=True), args.months).to_dict()

    if args.command == 'runway':
        return calculate_runway_scenarios(
            args.cash, args.burn, args.revenue, args.growth
        ).to_dict()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, str(cfg.LOG_LEVEL).upper(), logging.INFO),
        stream=sys.stderr
    )

    args = build_parser(cfg).parse_args(argv)

    try:
        result = run(args)
    except (ForecastError, OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
