"""
Pricing Engine - Derives unit/box pricing, profit and margins from raw form text.

Every derived value is a pure function of the current RawInputs:
- Unit cost is either entered manually or cost ÷ quantity
- Profit mode derives the selling price from a markup percentage
- Selling mode derives the markup percentage from a selling price
- Box price, unit margin and box margin follow from those

Unknown values are None and propagate; nothing here raises for user input.
"""
import math
from typing import Callable, Optional

from .models import PricingMode, RawInputs, DerivedResult


_INT_PREFIXES = ('0x', '0o', '0b')


def parse_number(text) -> Optional[float]:
    """
    Parse user-entered text into a finite number.

    Returns None for empty or whitespace-only text, malformed numbers and
    non-finite values (nan, inf).
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
        return value if math.isfinite(value) else None

    text = str(text).strip()
    # Only ASCII numerals, as in browser number coercion
    if not text or not text.isascii() or '_' in text:
        return None

    try:
        value = float(text)
    except ValueError:
        if text[:2].lower() not in _INT_PREFIXES:
            return None
        try:
            value = float(int(text, 0))
        except (ValueError, OverflowError):
            return None

    return value if math.isfinite(value) else None


def auto_unit_cost(cost_box: str, qty: str) -> Optional[float]:
    """Unit cost as cost per box ÷ quantity, or None if qty is unknown or not positive."""
    cost = parse_number(cost_box)
    quantity = parse_number(qty)
    if cost is not None and quantity is not None and quantity > 0:
        return cost / quantity
    return None


def derive_unit_cost(
    cost_box: str,
    qty: str,
    manual_unit_cost: bool,
    unit_cost_input: str
) -> Optional[float]:
    """
    Resolve the unit cost used for pricing.

    The manual entry wins when manual_unit_cost is set, even if it does not
    parse; otherwise the value is computed from the box cost and quantity.
    """
    if manual_unit_cost:
        return parse_number(unit_cost_input)
    return auto_unit_cost(cost_box, qty)


def _fmt(value: Optional[float], places: int = 2) -> Optional[str]:
    if value is None:
        return None
    return f"{value:.{places}f}"


def compute_results(inputs: RawInputs, unit_cost: Optional[float]) -> DerivedResult:
    """
    Derive every result field from the raw inputs and a resolved unit cost.

    Args:
        inputs: RawInputs snapshot from the form
        unit_cost: Output of derive_unit_cost for the same snapshot

    Returns:
        DerivedResult with a trace of each calculation step
    """
    cost_box = parse_number(inputs.cost_box)
    qty = parse_number(inputs.qty)
    deduction = parse_number(inputs.deduction)
    if deduction is None:
        deduction = 0.0

    result = DerivedResult(unit_cost=unit_cost)
    source = "manual entry" if inputs.manual_unit_cost else "cost ÷ quantity"
    if unit_cost is None:
        result.add_trace("Unit Cost", f"Not available from {source}")
    else:
        result.add_trace("Unit Cost", f"From {source}", _fmt(unit_cost, 4))

    mode = PricingMode(inputs.pricing_mode)

    if mode is PricingMode.PROFIT:
        result.profit_percent = parse_number(inputs.profit_pct_input)
        if unit_cost is not None and result.profit_percent is not None:
            result.unit_profit = unit_cost * (result.profit_percent / 100)
            result.unit_selling = unit_cost + result.unit_profit
            result.add_trace(
                "Profit Mode",
                f"Unit cost × {result.profit_percent:g}% markup",
                _fmt(result.unit_selling),
            )
        else:
            result.add_trace("Profit Mode", "Needs unit cost and profit %")
    else:
        result.unit_selling = parse_number(inputs.unit_sell_input)
        if result.unit_selling is not None:
            if unit_cost is not None:
                result.unit_profit = result.unit_selling - unit_cost
            # No markup can be expressed on a zero or negative cost
            if unit_cost is not None and unit_cost > 0:
                result.profit_percent = (result.unit_selling - unit_cost) / unit_cost * 100
            result.add_trace(
                "Selling Mode",
                "Unit selling price entered",
                _fmt(result.unit_selling),
            )
        else:
            result.add_trace("Selling Mode", "Needs unit selling price")

    if result.unit_selling is not None and qty is not None:
        result.selling_box = result.unit_selling * qty - deduction
        result.add_trace(
            "Box Price",
            f"{_fmt(result.unit_selling)} × {qty:g} − {_fmt(deduction)} deduction",
            _fmt(result.selling_box),
        )

    if result.unit_selling is not None and unit_cost is not None:
        result.unit_margin = result.unit_selling - unit_cost

    if result.selling_box is not None and cost_box is not None:
        result.box_margin = result.selling_box - cost_box
        result.add_trace("Box Margin", "Box price − box cost", _fmt(result.box_margin))

    return result


class PricingEngine:
    """
    Stateless entry point used by the form after every input change.

    evaluate() performs one full recomputation; the automatically derived
    unit cost is reported through an explicit callback so the caller can
    mirror it into its own UI state.
    """

    def evaluate(
        self,
        inputs: RawInputs,
        on_auto_unit_cost: Optional[Callable[[float], None]] = None
    ) -> DerivedResult:
        """
        Calculate all derived values for a RawInputs snapshot.

        Args:
            inputs: Current form values
            on_auto_unit_cost: Called with cost ÷ quantity after the
                calculation when the unit cost is not entered manually
                and the value is known

        Returns:
            DerivedResult for the snapshot
        """
        unit_cost = derive_unit_cost(
            inputs.cost_box,
            inputs.qty,
            inputs.manual_unit_cost,
            inputs.unit_cost_input,
        )
        result = compute_results(inputs, unit_cost)

        if on_auto_unit_cost is not None and not inputs.manual_unit_cost and unit_cost is not None:
            on_auto_unit_cost(unit_cost)

        return result
