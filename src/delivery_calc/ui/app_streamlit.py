"""
Streamlit UI for the Delivery Calculator.

Features:
- Order form with price, quantity, discount and distance
- Order summary with free-delivery indicator
- Step-by-step calculation trace
- Export to CSV
"""
import streamlit as st
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from delivery_calc.engine import PricingCalculator, OrderInput
from delivery_calc.config.settings import get_settings
from delivery_calc.ui.render import (
    breakdown_csv,
    breakdown_frame,
    format_money,
    render_html,
    render_welcome,
)


st.set_page_config(
    page_title="Delivery Calculator",
    layout="centered",
)


@st.cache_resource
def get_calculator():
    """Get cached calculator instance."""
    return PricingCalculator()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    calculator = get_calculator()
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# HEADER
# ============================================================================
st.title("Delivery Calculator")
st.caption(f"v1.0 | {datetime.now().strftime('%Y-%m-%d')}")
st.markdown(render_welcome(), unsafe_allow_html=True)


# ============================================================================
# ORDER FORM
# ============================================================================
with st.form("order_form"):
    c1, c2 = st.columns(2)
    with c1:
        unit_price = st.number_input(f"Unit Price ({settings.currency_symbol})", min_value=0.0, value=0.0, step=0.5)
        discount_percent = st.number_input("Discount (%)", min_value=0.0, max_value=100.0, value=0.0, step=1.0)
    with c2:
        quantity = st.number_input("Quantity", min_value=0, value=1, step=1)
        distance_km = st.number_input("Distance (km)", min_value=0.0, value=0.0, step=0.5)

    submitted = st.form_submit_button("Calculate", type="primary")


# ============================================================================
# RESULTS
# ============================================================================
if submitted:
    order = OrderInput.from_raw({
        'unit_price': unit_price,
        'quantity': quantity,
        'discount_percent': discount_percent,
        'distance_km': distance_km,
    })
    breakdown, trace = calculator.compute_breakdown_with_trace(order)

    with st.container(border=True):
        st.markdown(render_html(breakdown, settings), unsafe_allow_html=True)

    m1, m2 = st.columns(2)
    m1.metric("Total", format_money(breakdown.total, settings))
    if breakdown.free_delivery_applied:
        m2.metric("Delivery", "Free")
    else:
        m2.metric("Delivery", format_money(breakdown.delivery_fee, settings))

    if not breakdown.free_delivery_applied:
        missing = settings.free_delivery_threshold - breakdown.discounted_subtotal
        st.caption(f"Free delivery on orders above {format_money(settings.free_delivery_threshold, settings)} "
                   f"({format_money(max(missing, 0), settings)} to go)")

    st.dataframe(breakdown_frame(breakdown, settings), use_container_width=True, hide_index=True)

    with st.expander("🔍 Calculation Details"):
        for t in trace:
            if t.value:
                st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
            else:
                st.caption(f"**{t.step}**: {t.description}")

    st.download_button(
        "📥 CSV",
        data=breakdown_csv(breakdown, settings),
        file_name="order_breakdown.csv",
        mime="text/csv",
    )
