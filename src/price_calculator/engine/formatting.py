"""
Display formatting for money, percentages and the copyable summary.
"""
import math
from typing import Optional

from .models import RawInputs, DerivedResult


PLACEHOLDER = "—"


def _is_known(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def format_money(value: Optional[float], symbol: str) -> str:
    """Format as '<symbol> 1,234.50', or a dash when the value is unknown."""
    if not _is_known(value):
        return PLACEHOLDER
    return f"{symbol} {value + 0.0:,.2f}"


def format_percent(value: Optional[float]) -> str:
    """Format with one or two decimals and a trailing '%', or a dash when unknown."""
    if not _is_known(value):
        return PLACEHOLDER
    text = f"{value + 0.0:,.2f}"
    if text.endswith("0"):
        text = text[:-1]
    return f"{text}%"


def format_unit_cost_field(value: float) -> str:
    """Text written into the unit cost field while it is auto-calculated."""
    return f"{value:.4f}"


def format_summary(
    inputs: RawInputs,
    results: DerivedResult,
    symbol: str,
    title: str = "Product Price Calculator",
    byline: str = ""
) -> str:
    """
    Build the plain-text report copied by 'Copy All Prices'.

    Raw inputs are echoed as typed; derived values use the money and
    percent formats.
    """
    def money(value):
        return format_money(value, symbol)

    lines = [f"{title} — All values"]
    if byline:
        lines.append(byline)
    lines.extend([
        "",
        "——— INPUTS ———",
        f"Cost price (box / ctn / pck): {inputs.cost_box}",
        f"Quantity in box / ctn / pck: {inputs.qty}",
        f"Unit cost price: {money(results.unit_cost)}",
        f"Profit %: {format_percent(results.profit_percent)}",
        f"Deduction: {inputs.deduction}",
        "",
        "——— RESULTS ———",
        f"Unit cost price: {money(results.unit_cost)}",
        f"Unit profit: {money(results.unit_profit)}",
        f"Unit selling price: {money(results.unit_selling)}",
        f"Selling price (box / ctn / pck): {money(results.selling_box)}",
        f"Unit profit margin: {money(results.unit_margin)}",
        f"Box / ctn / pck profit margin: {money(results.box_margin)}",
    ])
    return "\n".join(lines)
