"""
Streamlit UI for the Product Price Calculator.

Features:
- Cost per box / quantity with auto or manual unit cost
- Profit % (text + slider) or selling price entry
- Deduction from the box price
- Results card with highlights and a detailed breakdown
- Copy all prices as plain text
- Light/dark display toggle
"""
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from price_calculator.config.settings import get_settings
from price_calculator.engine import PricingMode, format_money, format_percent
from price_calculator.services.form_state import FormState
from price_calculator.services.clipboard import ClipboardCopier, CopyConfirmation, browser_report_writer
from price_calculator.ui.copy_button import copy_button


st.set_page_config(
    page_title="Product Price Calculator",
    layout="wide",
    initial_sidebar_state="collapsed"
)


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    settings = get_settings_cached()
except Exception as e:
    st.error(f"Configuration Error: {e}")
    st.stop()


# Session state: one form and one copy confirmation per browser session
if 'form' not in st.session_state:
    st.session_state.form = FormState(settings)
if 'copy_confirmation' not in st.session_state:
    st.session_state.copy_confirmation = CopyConfirmation(reset_after=settings.copy_reset_seconds)
if 'theme' not in st.session_state:
    st.session_state.theme = settings.default_theme

form: FormState = st.session_state.form
confirmation: CopyConfirmation = st.session_state.copy_confirmation


# ============================================================================
# WIDGET CALLBACKS
# ============================================================================
def _sync_widget(key: str, value):
    """Push form state into a widget before it is drawn."""
    st.session_state[key] = value


def _on_text(field: str):
    form.update(**{field: st.session_state[f"w_{field}"]})


def _on_profit_text():
    form.set_profit_percent_text(st.session_state.w_profit_pct_input)


def _on_slider():
    form.set_slider(st.session_state.w_slider)


def _on_manual_toggle():
    form.set_manual_unit_cost(st.session_state.w_manual_unit_cost)


def _on_mode():
    form.set_pricing_mode(st.session_state.w_pricing_mode)


def _on_currency():
    form.set_currency(st.session_state.w_currency)


def _on_theme():
    st.session_state.theme = "light" if st.session_state.w_light_mode else "dark"


# ============================================================================
# CUSTOM CSS & STYLING
# ============================================================================
if st.session_state.theme == "light":
    palette = {"bg": "#f8fafc", "card": "#ffffff", "text": "#0f172a", "muted": "#64748b", "border": "#e2e8f0"}
else:
    palette = {"bg": "#0c0f14", "card": "#171d2a", "text": "#eaf0f7", "muted": "#64748b", "border": "#252e40"}

st.markdown(f"""
    <style>
        .stApp {{
            background-color: {palette['bg']};
            color: {palette['text']};
        }}
        .block-container {{
            padding-top: 2rem;
            padding-bottom: 2rem;
            max-width: 1000px;
        }}
        h1 {{
            font-family: 'Inter', 'Helvetica Neue', Helvetica, Arial, sans-serif;
            font-weight: 800;
            text-align: center;
        }}
        .stMetric {{
            background-color: {palette['card']};
            padding: 10px;
            border-radius: 10px;
            border: 1px solid {palette['border']};
            text-align: center;
        }}
    </style>
""", unsafe_allow_html=True)


# ============================================================================
# HEADER
# ============================================================================
st.title(settings.app_title)
if settings.byline:
    st.caption(settings.byline)

head1, head2 = st.columns([3, 1])
with head1:
    _sync_widget("w_currency", form.currency)
    st.selectbox(
        "Currency",
        options=list(settings.currency_symbols),
        format_func=settings.currency_label,
        key="w_currency",
        on_change=_on_currency,
        label_visibility="collapsed",
    )
with head2:
    _sync_widget("w_light_mode", st.session_state.theme == "light")
    st.toggle("☀️ Light mode", key="w_light_mode", on_change=_on_theme)

symbol = form.currency


def m(value):
    return format_money(value, symbol)


col1, col2 = st.columns(2, gap="large")

# ============================================================================
# INPUTS CARD
# ============================================================================
with col1:
    with st.container(border=True):
        st.subheader("✏️ Input Values")

        _sync_widget("w_cost_box", form.inputs.cost_box)
        st.text_input(
            f"Cost Price (Box / Ctn / Pck) · {symbol}",
            key="w_cost_box",
            placeholder="0.00",
            on_change=_on_text,
            args=("cost_box",),
        )

        _sync_widget("w_qty", form.inputs.qty)
        st.text_input(
            "Quantity in Box / Ctn / Pck",
            key="w_qty",
            placeholder="e.g. 12",
            on_change=_on_text,
            args=("qty",),
        )

        _sync_widget("w_unit_cost_input", form.inputs.unit_cost_input)
        st.text_input(
            f"Unit Cost Price · {symbol}",
            key="w_unit_cost_input",
            placeholder="Auto-calculated",
            disabled=not form.inputs.manual_unit_cost,
            on_change=_on_text,
            args=("unit_cost_input",),
        )
        _sync_widget("w_manual_unit_cost", form.inputs.manual_unit_cost)
        st.toggle(
            "Entering unit cost manually" if form.inputs.manual_unit_cost
            else "Auto-calculated from cost ÷ quantity",
            key="w_manual_unit_cost",
            on_change=_on_manual_toggle,
        )

        _sync_widget("w_pricing_mode", form.inputs.pricing_mode.value)
        st.radio(
            "Pricing Method",
            options=[PricingMode.PROFIT.value, PricingMode.SELLING.value],
            format_func=lambda v: "Set Profit %" if v == PricingMode.PROFIT.value else "Set Selling Price",
            key="w_pricing_mode",
            on_change=_on_mode,
            horizontal=True,
        )

        if form.inputs.pricing_mode is PricingMode.PROFIT:
            _sync_widget("w_profit_pct_input", form.inputs.profit_pct_input)
            st.text_input(
                "Profit %",
                key="w_profit_pct_input",
                placeholder="e.g. 25",
                on_change=_on_profit_text,
            )
            _sync_widget("w_slider", form.slider_value)
            st.slider(
                "Profit % slider",
                min_value=settings.slider_min,
                max_value=settings.slider_max,
                step=settings.slider_step,
                key="w_slider",
                on_change=_on_slider,
                label_visibility="collapsed",
            )
        else:
            _sync_widget("w_unit_sell_input", form.inputs.unit_sell_input)
            st.text_input(
                f"Unit Selling Price · {symbol}",
                key="w_unit_sell_input",
                placeholder="Enter unit selling price",
                on_change=_on_text,
                args=("unit_sell_input",),
            )

        _sync_widget("w_deduction", form.inputs.deduction)
        st.text_input(
            f"Deduction from Box / Ctn / Pck Price · {symbol}",
            key="w_deduction",
            placeholder="e.g. 5",
            on_change=_on_text,
            args=("deduction",),
        )

# ============================================================================
# RESULTS CARD
# ============================================================================
results = form.results

RESULT_DETAILS = {
    "Unit Cost Price": "Cost per single unit",
    "Profit Percentage": "Markup on cost",
    "Unit Profit": "Profit per unit sold",
    "Unit Selling Price": "Price per single unit",
    "Box / Ctn / Pck Selling Price": "After deduction applied",
    "Unit Profit Margin": "Selling price − cost per unit",
    "Box / Ctn / Pck Profit Margin": "Box selling price − box cost price",
}

with col2:
    with st.container(border=True):
        st.subheader("📈 Results")

        h1, h2 = st.columns(2)
        h1.metric("Unit Selling Price", m(results.unit_selling))
        h2.metric("Box / Ctn / Pck Price", m(results.selling_box))

        st.divider()

        st.dataframe(
            pd.DataFrame([
                {
                    'Result': label,
                    'Detail': RESULT_DETAILS.get(label, ""),
                    'Value': format_percent(value) if label == "Profit Percentage" else m(value),
                }
                for label, value in results.to_dict().items()
            ]),
            use_container_width=True,
            hide_index=True,
        )

        for label, value in (("Unit profit margin", results.unit_margin), ("Box profit margin", results.box_margin)):
            if value is not None and value < 0:
                st.markdown(f":red[**{label} is negative: {m(value)}**]")

        with st.expander("🔍 Calculation Details"):
            for step in results.trace:
                if step.value:
                    st.caption(f"**{step.step}**: {step.description} = `{step.value}`")
                else:
                    st.caption(f"**{step.step}**: {step.description}")

# ============================================================================
# COPY ACTION
# ============================================================================
summary = form.summary()

c1, c2, c3 = st.columns([1, 1, 1])
with c2:
    report = copy_button(
        summary,
        label="📋 Copy All Prices",
        copied_label="Copied!",
        copied=confirmation.copied,
        reset_after=confirmation.reset_after,
        remaining=confirmation.remaining,
        key="copy_all",
    )

# The component keeps returning its last report; only a new nonce is a new click
if report and report.get('nonce') != st.session_state.get('copy_nonce'):
    st.session_state.copy_nonce = report.get('nonce')
    if ClipboardCopier(browser_report_writer(report), confirmation).copy(summary):
        st.toast("Copied!")

with st.expander("📄 Summary Text"):
    st.code(summary, language=None)

st.caption(f"{settings.app_title} · {settings.byline}" if settings.byline else settings.app_title)
