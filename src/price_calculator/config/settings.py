"""
Centralized settings for the price calculator.
"""
import os
from dataclasses import dataclass, field
from typing import Optional


# (symbol, label) pairs offered by the currency selector
DEFAULT_CURRENCIES = (
    ("GH₵", "🇬🇭 GH₵ — Ghana Cedis"),
    ("CFA", "🇨🇮 CFA — CFA Franc"),
    ("₦", "🇳🇬 ₦ — Nigerian Naira"),
    ("$", "🇺🇸 $ — US Dollar"),
    ("¥", "🇨🇳 ¥ — Chinese Yuan"),
    ("€", "🇪🇺 € — Euro"),
    ("£", "🇬🇧 £ — British Pound"),
)

THEMES = ('dark', 'light')


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Branding used on the page and in the copied summary
    app_title: str = "Product Price Calculator"
    byline: str = "By Fosberg Addai · Addapaul Ventures"

    # Currency symbols are cosmetic labels only
    currencies: tuple = DEFAULT_CURRENCIES
    default_currency: str = "GH₵"

    # Initial form values
    default_profit_percent: str = "25"
    default_deduction: str = "0"

    # Profit % slider domain
    slider_min: float = 0.5
    slider_max: float = 500.0
    slider_step: float = 0.5

    # Seconds the "Copied!" confirmation stays visible
    copy_reset_seconds: float = 2.0

    default_theme: str = "dark"

    currency_symbols: tuple = field(init=False)

    def __post_init__(self):
        self.currency_symbols = tuple(symbol for symbol, _ in self.currencies)

    def currency_label(self, symbol: str) -> str:
        """Get the selector label for a currency symbol."""
        for value, label in self.currencies:
            if value == symbol:
                return label
        return symbol

    def clamp_slider(self, value: float) -> float:
        """Clamp a profit percentage into the slider domain."""
        return max(self.slider_min, min(self.slider_max, value))

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> 'Settings':
        """
        Load settings, applying environment overrides.

        PRICE_CALC_CURRENCY picks the initial currency symbol and
        PRICE_CALC_THEME the initial display theme.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        currency = env.get('PRICE_CALC_CURRENCY', '').strip()
        if currency:
            if currency not in settings.currency_symbols:
                raise ValueError(
                    f"Unknown currency '{currency}' in PRICE_CALC_CURRENCY. "
                    f"Expected one of: {', '.join(settings.currency_symbols)}"
                )
            settings.default_currency = currency

        theme = env.get('PRICE_CALC_THEME', '').strip().lower()
        if theme:
            if theme not in THEMES:
                raise ValueError(
                    f"Unknown theme '{theme}' in PRICE_CALC_THEME. Expected 'dark' or 'light'"
                )
            settings.default_theme = theme

        return settings


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
