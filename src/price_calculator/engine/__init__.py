"""Engine subpackage - core pricing logic and formatting."""
from .pricing_engine import (
    PricingEngine,
    parse_number,
    auto_unit_cost,
    derive_unit_cost,
    compute_results,
)
from .models import PricingMode, RawInputs, DerivedResult
from .formatting import format_money, format_percent, format_summary

__all__ = [
    'PricingEngine', 'parse_number', 'auto_unit_cost', 'derive_unit_cost', 'compute_results',
    'PricingMode', 'RawInputs', 'DerivedResult',
    'format_money', 'format_percent', 'format_summary',
]
