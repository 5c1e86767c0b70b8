"""
Report persistence: seller reports to a DataFrame, JSON and CSV.

Saves artifacts under <output_dir>/reports and <output_dir>/definitions so a
run can be reproduced from its run id.
"""

import json
import os
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import pandas as pd

from config import get_output_dir
from metric_definitions import get_metric_definitions, get_report_fields
from sales_analysis import SellerReport
from strategies import get_bonus_tier, get_bonus_tier_definitions


def get_run_id() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _reports_dir(output_dir: str | Path | None = None) -> Path:
    return Path(output_dir or get_output_dir()) / "reports"


def _definitions_dir(output_dir: str | Path | None = None) -> Path:
    return Path(output_dir or get_output_dir()) / "definitions"


def ensure_output_dirs(output_dir: str | Path | None = None) -> None:
    for d in [_reports_dir(output_dir), _definitions_dir(output_dir)]:
        os.makedirs(d, exist_ok=True)


def format_top_products(top_products: Sequence[dict]) -> str:
    return "; ".join(f"{p['sku']} x {p['quantity']}" for p in top_products)


def reports_to_dataframe(reports: Sequence[SellerReport]) -> pd.DataFrame:
    """One row per seller in ranked order, plus 1-based rank and bonus tier."""
    fields = get_report_fields()
    total = len(reports)
    rows = []
    for rank, report in enumerate(reports):
        row = report.to_dict()
        row["top_products"] = format_top_products(row["top_products"])
        row["rank"] = rank + 1
        row["bonus_tier"] = get_bonus_tier(rank, total)
        rows.append(row)
    return pd.DataFrame(rows, columns=["rank", *fields, "bonus_tier"])


def reports_to_json(reports: Sequence[SellerReport]) -> str:
    return json.dumps([r.to_dict() for r in reports], indent=2, ensure_ascii=False)


def save_reports_json(
    reports: Sequence[SellerReport],
    run_id: str,
    output_dir: str | Path | None = None,
) -> str:
    """Write the report list to reports/seller_report_<run_id>.json. Returns the path."""
    ensure_output_dirs(output_dir)
    path = os.path.join(_reports_dir(output_dir), f"seller_report_{run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        f.write(reports_to_json(reports))
    return path


def save_reports_csv(
    reports: Sequence[SellerReport],
    run_id: str,
    output_dir: str | Path | None = None,
) -> str:
    ensure_output_dirs(output_dir)
    path = os.path.join(_reports_dir(output_dir), f"seller_report_{run_id}.csv")
    reports_to_dataframe(reports).to_csv(path, index=False)
    return path


def save_definitions(output_dir: str | Path | None = None) -> tuple[str, str]:
    """Save metric and bonus tier definitions for reproducibility."""
    ensure_output_dirs(output_dir)
    metrics_path = os.path.join(_definitions_dir(output_dir), "metric_definitions.json")
    tiers_path = os.path.join(_definitions_dir(output_dir), "bonus_tier_definitions.json")
    with open(metrics_path, "w", encoding="utf-8") as f:
        json.dump(get_metric_definitions(), f, indent=2, ensure_ascii=False)
    with open(tiers_path, "w", encoding="utf-8") as f:
        json.dump(get_bonus_tier_definitions(), f, indent=2, ensure_ascii=False)
    return metrics_path, tiers_path
