import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from price_calculator.config.settings import Settings


def test_defaults():
    settings = Settings.load(environ={})

    assert settings.default_currency == "GH₵"
    assert settings.currency_symbols == ("GH₵", "CFA", "₦", "$", "¥", "€", "£")
    assert settings.slider_min == 0.5
    assert settings.slider_max == 500
    assert settings.copy_reset_seconds == 2.0
    assert settings.default_theme == "dark"


def test_environment_overrides():
    settings = Settings.load(environ={'PRICE_CALC_CURRENCY': '€', 'PRICE_CALC_THEME': 'Light'})

    assert settings.default_currency == "€"
    assert settings.default_theme == "light"


def test_unknown_currency_override():
    with pytest.raises(ValueError, match="PRICE_CALC_CURRENCY"):
        Settings.load(environ={'PRICE_CALC_CURRENCY': 'BTC'})


def test_unknown_theme_override():
    with pytest.raises(ValueError, match="PRICE_CALC_THEME"):
        Settings.load(environ={'PRICE_CALC_THEME': 'sepia'})


def test_currency_label():
    settings = Settings()

    assert settings.currency_label("$") == "🇺🇸 $ — US Dollar"
    assert settings.currency_label("XYZ") == "XYZ"


def test_clamp_slider():
    settings = Settings()

    assert settings.clamp_slider(0) == 0.5
    assert settings.clamp_slider(25) == 25
    assert settings.clamp_slider(1000) == 500
