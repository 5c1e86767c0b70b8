"""
Command line entry point: load a dataset, rank sellers, print or save the report.
"""

import argparse
import json
import logging
import sys

from config import configure_logging, get_log_level, get_output_dir, load_env
from data_loader import load_dataset
from report_export import get_run_id, reports_to_json, save_definitions, save_reports_csv, save_reports_json
from sales_analysis import SalesAnalysisError, analyze_sales_data
from strategies import calculate_bonus_by_profit, calculate_simple_revenue
from template_report import generate_template_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seller sales performance report")
    parser.add_argument(
        "dataset",
        help="JSON file with sellers/products/customers/purchase_records, or a directory of per-collection JSON files",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Where --save writes artifacts (default: SALES_OUTPUT_DIR or ./outputs)",
    )
    parser.add_argument("--save", action="store_true", help="Save JSON, CSV and definitions")
    parser.add_argument("--json", action="store_true", help="Print the report list as JSON instead of Markdown")
    parser.add_argument("--log-level", default=None, help="Logging level (default: SALES_LOG_LEVEL or INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_env()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_log_level())

    try:
        dataset = load_dataset(args.dataset)
        reports = analyze_sales_data(
            dataset,
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        )
    except (SalesAnalysisError, FileNotFoundError, json.JSONDecodeError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    if args.json:
        print(reports_to_json(reports))
    else:
        print(generate_template_report(reports))

    if args.save:
        output_dir = args.output_dir or get_output_dir()
        run_id = get_run_id()
        json_path = save_reports_json(reports, run_id, output_dir)
        csv_path = save_reports_csv(reports, run_id, output_dir)
        save_definitions(output_dir)
        logger.info(f"Saved {json_path} and {csv_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
