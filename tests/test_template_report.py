from sales_analysis import SellerReport, analyze_sales_data
from strategies import calculate_bonus_by_profit, calculate_simple_revenue
from template_report import generate_template_report


def _report(seller_id, name, profit, sales_count=1, top_products=()):
    return SellerReport(
        seller_id=seller_id,
        name=name,
        revenue=max(profit, 0),
        profit=profit,
        sales_count=sales_count,
        top_products=tuple(top_products),
        bonus=0.0,
    )


def test_sections_present(sample_dataset):
    reports = analyze_sales_data(
        sample_dataset,
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
    )
    text = generate_template_report(reports)

    assert "## 1. Overview" in text
    assert "3 sellers closed 4 sales with revenue of 165.00 and profit of 60.00" in text
    assert "bonus pool amounts to 8.00" in text
    assert "1. Anna Smirnova (seller_2): profit 40.00, bonus 6.00 [top, 15%]" in text
    assert "- SKU_003: 4 units" in text
    assert "Every seller recorded sales with non-negative profit." in text


def test_empty_reports():
    assert generate_template_report([]) == "No sellers to report on."


def test_notes_flag_idle_and_losing_sellers():
    text = generate_template_report([
        _report("a", "Alpha One", 10.0),
        _report("b", "Beta Two", 0.0, sales_count=0),
        _report("c", "Gamma Three", -5.0),
    ])
    assert "No sales recorded for: Beta Two." in text
    assert "Negative profit for: Gamma Three." in text
    assert "Alpha One has no products sold." in text
