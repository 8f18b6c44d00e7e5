# compare_tab.py
# -----------------------------------------------------------------------------
# "Rate Comparison" tab: up to five countries side by side.
# - Map: shaded by divorce rate, selected countries take their slot colour
# - Summary: one card per selected country + bar chart in the same colours
# -----------------------------------------------------------------------------

import html

import numpy as np
import pandas as pd
import plotly.express as px
import streamlit as st

from dataset import FILES, Dataset, read_rates
from geo import build_country_map, route_click, world_shapes
from overview import info_button
from selection import ComparisonSelection

# ================= Config =================
MAP_CENTER = {"lon": 85, "lat": 25}
MAP_SCALE = 4.0
MAP_HEIGHT = 520
RATE_UNIT = "per 1000"

K_SELECTION = "compare_selection"
K_NONCE = "compare_map_nonce"

# ================= Loaders =================
@st.cache_data(show_spinner=False)
def load_rates() -> pd.Series:
    try:
        return read_rates(FILES["rates"])
    except (ValueError, FileNotFoundError) as e:
        st.error(f"Could not load divorce rates file: {e}")
        return pd.Series(dtype=float, name="rate")

def _selection() -> ComparisonSelection:
    if K_SELECTION not in st.session_state:
        st.session_state[K_SELECTION] = ComparisonSelection(Dataset.from_series(load_rates()))
    return st.session_state[K_SELECTION]

def _fmt_rate(rate) -> str:
    if rate is None or (isinstance(rate, float) and np.isnan(rate)):
        return "–"
    return f"{float(rate):g}"

# ================= UI helpers =================
CSS = """
<style>
  .cmp-card { padding:10px 12px; border-radius:10px; min-height:84px; }
  .cmp-card .n { font-size:1.1rem; font-weight:600; color:#fff; margin:0; }
  .cmp-card .r { color:#fff; margin:4px 0 0 0; }
</style>
"""

def _style_compare_bar(fig):
    """Consistent styling/hover for the comparison bar chart."""
    fig.update_traces(hovertemplate=f"%{{x}}<br>Rate: %{{y:.2f}} {RATE_UNIT}<extra></extra>")
    fig.update_xaxes(type="category", showgrid=False, title=None)
    fig.update_yaxes(showgrid=False, title=None, rangemode="tozero")
    fig.update_layout(showlegend=False, margin=dict(l=10, r=10, t=10, b=10), height=260)
    return fig

def _card(country: str, rate, color: str):
    st.markdown(f"""
      <div class="cmp-card" style="background:{color};">
        <div class="n">{html.escape(country)}</div>
        <div class="r">Rate: {_fmt_rate(rate)} {RATE_UNIT}</div>
      </div>
    """, unsafe_allow_html=True)

def _render_map(sel: ComparisonSelection):
    names = world_shapes(sel.dataset)
    fills = [sel.fill_for(n) for n in names]
    hover = [
        f"Rate: {_fmt_rate(sel.dataset.lookup(n))} {RATE_UNIT}" if sel.dataset.is_relevant(n) else "No data"
        for n in names
    ]
    fig = build_country_map(names, fills, hover=hover, center=MAP_CENTER,
                            projection_scale=MAP_SCALE, height=MAP_HEIGHT)

    nonce = st.session_state.get(K_NONCE, 0)
    key = f"compare_map_{nonce}"

    def _on_click():
        route_click(st.session_state.get(key), sel)
        st.session_state[K_NONCE] = nonce + 1

    st.plotly_chart(fig, use_container_width=True, key=key,
                    on_select=_on_click, selection_mode="points")

def _render_summary(sel: ComparisonSelection):
    entries = sel.entries()

    title_l, title_r = st.columns([5, 1], gap="small")
    with title_l:
        st.markdown("#### Country Comparison")
    with title_r:
        st.caption(f"{len(entries)}/{sel.CAPACITY} selected")

    cols = st.columns(len(entries), gap="small")
    for col, e in zip(cols, entries):
        with col:
            _card(e.country, e.rate, e.color)

    bars = pd.DataFrame({
        "country": [e.country for e in entries],
        "rate":    [e.rate for e in entries],
    })
    fig = px.bar(
        bars, x="country", y="rate", color="country",
        color_discrete_map={e.country: e.color for e in entries},
        category_orders={"country": bars["country"].tolist()},
    )
    st.plotly_chart(_style_compare_bar(fig), use_container_width=True)

    st.button("Clear All", key="compare_clear", on_click=sel.clear_all)

# ================= Public entrypoint =================
def render_compare_tab():
    rates = load_rates()
    if rates.empty:
        st.info("Divorce rate data required.")
        return

    st.markdown(CSS, unsafe_allow_html=True)
    sel = _selection()

    top_l, top_r = st.columns([30, 1], gap="small")
    with top_l:
        st.caption(f"Divorce rates comparison • click up to {sel.CAPACITY} countries")
    with top_r:
        info_button("compare")

    _render_map(sel)

    if len(sel):
        st.markdown("---")
        _render_summary(sel)
