"""
Form State - Holds the calculator's UI state and recomputes on every change.

The page keeps one FormState per session. Each mutator updates the raw
inputs and immediately runs a full recomputation, so `results` always
matches the current field values.
"""
from dataclasses import replace
from typing import Optional

from ..config.settings import get_settings, Settings
from ..engine.models import PricingMode, RawInputs, DerivedResult
from ..engine.pricing_engine import PricingEngine, parse_number
from ..engine.formatting import format_summary, format_unit_cost_field


# Raw text fields that update() accepts
TEXT_FIELDS = (
    'cost_box',
    'qty',
    'unit_cost_input',
    'profit_pct_input',
    'unit_sell_input',
    'deduction',
)


class FormState:
    """
    UI-side state machine around the pricing engine.

    Two independent switches:
    - pricing_mode: PROFIT or SELLING, toggled freely
    - manual_unit_cost: false → true clears the unit cost field;
      true → false resumes auto-population on the next recompute
    """

    def __init__(self, settings: Optional[Settings] = None, engine: Optional[PricingEngine] = None):
        self.settings = settings or get_settings()
        self.engine = engine or PricingEngine()

        self.inputs = RawInputs(
            profit_pct_input=self.settings.default_profit_percent,
            deduction=self.settings.default_deduction,
        )
        initial = parse_number(self.settings.default_profit_percent)
        self.slider_value = self.settings.clamp_slider(initial if initial is not None else self.settings.slider_min)
        self.currency = self.settings.default_currency
        self.results: DerivedResult = DerivedResult()

        self.recompute()

    def recompute(self) -> DerivedResult:
        """Run a full calculation for the current inputs."""
        self.results = self.engine.evaluate(self.inputs, on_auto_unit_cost=self._apply_auto_unit_cost)
        return self.results

    def _apply_auto_unit_cost(self, value: float):
        """Mirror the auto-calculated unit cost into the (read-only) unit cost field."""
        self.inputs.unit_cost_input = format_unit_cost_field(value)

    def update(self, **fields) -> DerivedResult:
        """
        Set one or more raw text fields and recompute.

        Raises:
            ValueError: If a field name is not a raw text field
        """
        unknown = [name for name in fields if name not in TEXT_FIELDS]
        if unknown:
            raise ValueError(f"Unknown input field(s): {', '.join(unknown)}")

        self.inputs = replace(self.inputs, **{name: str(value) for name, value in fields.items()})
        return self.recompute()

    def set_manual_unit_cost(self, manual: bool) -> DerivedResult:
        """Switch between manual and auto unit cost."""
        manual = bool(manual)
        if manual and not self.inputs.manual_unit_cost:
            # Force explicit re-entry of the manual value
            self.inputs.unit_cost_input = ""
        self.inputs.manual_unit_cost = manual
        return self.recompute()

    def set_pricing_mode(self, mode) -> DerivedResult:
        """
        Switch which field drives the selling price.

        Accepts a PricingMode or its string value ("profit", "selling").
        """
        try:
            self.inputs.pricing_mode = PricingMode(mode)
        except ValueError:
            raise ValueError(f"Unknown pricing mode: {mode!r}") from None
        return self.recompute()

    def set_profit_percent_text(self, text: str) -> DerivedResult:
        """Set the profit % field, moving the slider when the text parses."""
        self.inputs.profit_pct_input = str(text)
        value = parse_number(text)
        if value is not None:
            self.slider_value = self.settings.clamp_slider(value)
        return self.recompute()

    def set_slider(self, value: float) -> DerivedResult:
        """Set the profit % from the slider."""
        self.slider_value = float(value)
        self.inputs.profit_pct_input = f"{self.slider_value:.1f}"
        return self.recompute()

    def set_currency(self, symbol: str):
        """Change the cosmetic currency symbol."""
        if symbol not in self.settings.currency_symbols:
            raise ValueError(f"Unknown currency: {symbol!r}")
        self.currency = symbol

    def summary(self) -> str:
        """Plain-text report of all inputs and results."""
        return format_summary(
            self.inputs,
            self.results,
            self.currency,
            title=self.settings.app_title,
            byline=self.settings.byline,
        )
