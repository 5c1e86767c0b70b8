"""
Seller report field definitions: source, formula, and rounding.

Each field of a SellerReport is defined with:
- formula: short text describing the computation
- business_question: what the figure answers
- output_type: scalar | table
- rounding: "2dp" for money values, None otherwise

The dict order is the column order of every export.
"""

METRIC_DEFINITIONS = {
    "seller_id": {
        "name": "seller_id",
        "formula": "sellers[].id",
        "business_question": "Which seller is this row about?",
        "output_type": "scalar",
        "rounding": None,
    },
    "name": {
        "name": "name",
        "formula": "first_name + ' ' + last_name",
        "business_question": "Who is the seller?",
        "output_type": "scalar",
        "rounding": None,
    },
    "revenue": {
        "name": "revenue",
        "formula": "sum(calculate_revenue(item)) over the seller's line items",
        "business_question": "How much did the seller bring in after discounts?",
        "output_type": "scalar",
        "rounding": "2dp",
    },
    "profit": {
        "name": "profit",
        "formula": "sum(calculate_revenue(item) - purchase_price * quantity)",
        "business_question": "How much did the seller earn over cost?",
        "output_type": "scalar",
        "rounding": "2dp",
    },
    "sales_count": {
        "name": "sales_count",
        "formula": "count(purchase_records where seller_id == id)",
        "business_question": "How many receipts did the seller close, including empty ones?",
        "output_type": "scalar",
        "rounding": None,
    },
    "top_products": {
        "name": "top_products",
        "formula": "sum(quantity) by sku, sorted descending, first 10",
        "business_question": "What does the seller sell most of?",
        "output_type": "table",
        "rounding": None,
    },
    "bonus": {
        "name": "bonus",
        "formula": "calculate_bonus(rank by profit desc, seller count, seller)",
        "business_question": "What bonus does the seller's rank earn?",
        "output_type": "scalar",
        "rounding": "2dp",
    },
}


def get_metric_definitions() -> dict[str, dict]:
    return METRIC_DEFINITIONS


def get_report_fields() -> list[str]:
    """Report field names in output order."""
    return list(METRIC_DEFINITIONS)
