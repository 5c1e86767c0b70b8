import json
import os

import pandas as pd
import pytest

from metric_definitions import get_report_fields
from report_export import (
    format_top_products,
    get_run_id,
    reports_to_dataframe,
    reports_to_json,
    save_definitions,
    save_reports_csv,
    save_reports_json,
)
from sales_analysis import analyze_sales_data
from strategies import calculate_bonus_by_profit, calculate_simple_revenue


@pytest.fixture
def reports(sample_dataset):
    return analyze_sales_data(
        sample_dataset,
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
    )


def test_dataframe_layout(reports):
    df = reports_to_dataframe(reports)
    assert list(df.columns) == ["rank", *get_report_fields(), "bonus_tier"]
    assert df["rank"].tolist() == [1, 2, 3]
    assert df["seller_id"].tolist() == ["seller_2", "seller_1", "seller_3"]
    assert df["bonus_tier"].tolist() == ["top", "runner_up", "runner_up"]
    assert df.loc[0, "top_products"] == "SKU_003 x 4; SKU_002 x 1"


def test_dataframe_empty():
    df = reports_to_dataframe([])
    assert df.empty
    assert "bonus" in df.columns


def test_format_top_products_empty():
    assert format_top_products([]) == ""


def test_reports_to_json(reports):
    payload = json.loads(reports_to_json(reports))
    assert payload[0]["seller_id"] == "seller_2"
    assert payload[0]["bonus"] == 6.0
    assert payload[1]["top_products"] == [{"sku": "SKU_001", "quantity": 2}]


def test_save_json_and_csv(tmp_path, reports):
    json_path = save_reports_json(reports, "20260101_000000", tmp_path)
    csv_path = save_reports_csv(reports, "20260101_000000", tmp_path)

    assert os.path.dirname(json_path) == str(tmp_path / "reports")
    with open(json_path, encoding="utf-8") as f:
        assert [r["seller_id"] for r in json.load(f)] == ["seller_2", "seller_1", "seller_3"]

    df = pd.read_csv(csv_path)
    assert df["profit"].tolist() == [40.0, 20.0, 0.0]
    assert df["sales_count"].tolist() == [1, 2, 1]


def test_save_uses_configured_output_dir(tmp_path, monkeypatch, reports):
    monkeypatch.setenv("SALES_OUTPUT_DIR", str(tmp_path))
    path = save_reports_json(reports, "run")
    assert path == os.path.join(tmp_path / "reports", "seller_report_run.json")


def test_save_definitions(tmp_path):
    metrics_path, tiers_path = save_definitions(tmp_path)
    with open(metrics_path, encoding="utf-8") as f:
        assert "profit" in json.load(f)
    with open(tiers_path, encoding="utf-8") as f:
        assert json.load(f)["top"]["multiplier"] == 0.15


def test_run_id_format():
    run_id = get_run_id()
    assert len(run_id) == 15
    assert run_id[8] == "_"
