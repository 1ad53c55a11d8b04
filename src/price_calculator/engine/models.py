"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PricingMode(str, Enum):
    """Which raw field drives the unit selling price."""
    PROFIT = "profit"    # profit % entered, selling price derived
    SELLING = "selling"  # selling price entered, profit % derived


@dataclass
class TraceStep:
    """A single step in the calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class RawInputs:
    """The form's text fields and switches, exactly as the user left them."""
    cost_box: str = ""
    qty: str = ""
    unit_cost_input: str = ""
    manual_unit_cost: bool = False
    profit_pct_input: str = "25"
    unit_sell_input: str = ""
    deduction: str = "0"
    pricing_mode: PricingMode = PricingMode.PROFIT


@dataclass
class DerivedResult:
    """Every value derived from one snapshot of RawInputs."""
    unit_cost: Optional[float] = None
    profit_percent: Optional[float] = None
    unit_profit: Optional[float] = None
    unit_selling: Optional[float] = None
    selling_box: Optional[float] = None
    unit_margin: Optional[float] = None
    box_margin: Optional[float] = None
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the calculation trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to a label → value dict for tabular display."""
        return {
            "Unit Cost Price": self.unit_cost,
            "Profit Percentage": self.profit_percent,
            "Unit Profit": self.unit_profit,
            "Unit Selling Price": self.unit_selling,
            "Box / Ctn / Pck Selling Price": self.selling_box,
            "Unit Profit Margin": self.unit_margin,
            "Box / Ctn / Pck Profit Margin": self.box_margin,
        }
