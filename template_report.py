"""
Template-based seller performance report.
"""

from collections.abc import Sequence

from sales_analysis import SellerReport, round_money
from strategies import BONUS_TIER_DEFINITIONS, get_bonus_tier


def generate_template_report(reports: Sequence[SellerReport]) -> str:
    if not reports:
        return "No sellers to report on."

    sections = []
    total = len(reports)

    sections.append("## 1. Overview")
    total_revenue = round_money(sum(r.revenue for r in reports))
    total_profit = round_money(sum(r.profit for r in reports))
    bonus_pool = round_money(sum(r.bonus for r in reports))
    total_sales = sum(r.sales_count for r in reports)
    sections.append(
        f"{total} sellers closed {total_sales} sales with revenue of {total_revenue:.2f} "
        f"and profit of {total_profit:.2f}. The bonus pool amounts to {bonus_pool:.2f}."
    )
    sections.append("")

    sections.append("## 2. Ranking by profit")
    for rank, r in enumerate(reports):
        tier = get_bonus_tier(rank, total)
        multiplier = BONUS_TIER_DEFINITIONS[tier]["multiplier"]
        sections.append(
            f"{rank + 1}. {r.name} ({r.seller_id}): profit {r.profit:.2f}, "
            f"bonus {r.bonus:.2f} [{tier}, {multiplier:.0%}]"
        )
    sections.append("")

    sections.append("## 3. Top products of the leader")
    leader = reports[0]
    if leader.top_products:
        for p in leader.top_products:
            sections.append(f"- {p['sku']}: {p['quantity']} units")
    else:
        sections.append(f"{leader.name} has no products sold.")
    sections.append("")

    sections.append("## 4. Notes")
    idle = [r.name for r in reports if r.sales_count == 0]
    losing = [r.name for r in reports if r.profit < 0]
    if idle:
        sections.append(f"- No sales recorded for: {', '.join(idle)}.")
    if losing:
        sections.append(f"- Negative profit for: {', '.join(losing)}.")
    if not idle and not losing:
        sections.append("- Every seller recorded sales with non-negative profit.")

    return "\n".join(sections)
