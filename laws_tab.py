# laws_tab.py
# -----------------------------------------------------------------------------
# "Divorce Laws" tab: one country at a time.
# - Map: highlighted countries have a legal profile, the open one is orange
# - Side panel: all four topics for the open country + topic buttons
# -----------------------------------------------------------------------------

import html

import pandas as pd
import streamlit as st

from dataset import FILES, LAW_FIELDS, Dataset, read_laws
from geo import build_country_map, route_click, world_shapes
from overview import info_button
from selection import DetailSelection

# ================= Config =================
MAP_CENTER = {"lon": 85, "lat": 15}
MAP_SCALE = 1.0
MAP_HEIGHT = 560

K_SELECTION = "laws_selection"
K_NONCE = "laws_map_nonce"

# ================= Loaders =================
@st.cache_data(show_spinner=False)
def load_laws() -> pd.DataFrame:
    try:
        return read_laws(FILES["laws"])
    except (ValueError, FileNotFoundError) as e:
        st.error(f"Could not load divorce laws file: {e}")
        return pd.DataFrame(columns=LAW_FIELDS)

def _selection() -> DetailSelection:
    """Per-session state machine, built on first use."""
    if K_SELECTION not in st.session_state:
        st.session_state[K_SELECTION] = DetailSelection(Dataset.from_frame(load_laws()))
    return st.session_state[K_SELECTION]

# ================= UI helpers =================
CSS = """
<style>
  .law-h { font-size:1.25rem; font-weight:600; margin:0 0 .5rem 0; }
  .law-p { color:#4b5563; margin:0; }
  .law-country { font-size:1.6rem; font-weight:800; color:#1f2937; margin:0; }
</style>
"""

def _render_map(sel: DetailSelection):
    names = world_shapes(sel.dataset)
    fills = [sel.fill_for(n) for n in names]
    fig = build_country_map(names, fills, center=MAP_CENTER, projection_scale=MAP_SCALE, height=MAP_HEIGHT)

    nonce = st.session_state.get(K_NONCE, 0)
    key = f"laws_map_{nonce}"

    def _on_click():
        route_click(st.session_state.get(key), sel)
        # fresh chart key -> plotly forgets the point, the next click is a new event
        st.session_state[K_NONCE] = nonce + 1

    st.plotly_chart(fig, use_container_width=True, key=key,
                    on_select=_on_click, selection_mode="points")

def _render_panel(sel: DetailSelection):
    head_l, head_r = st.columns([5, 1], gap="small")
    with head_l:
        st.markdown(f"<div class='law-country'>{html.escape(sel.country)}</div>", unsafe_allow_html=True)
    with head_r:
        st.button("✕", key="laws_close", help="Close", on_click=sel.close)

    entries = sel.topic_entries()

    cols = st.columns(len(entries), gap="small")
    for col, e in zip(cols, entries):
        with col:
            st.button(
                e.topic.icon, key=f"laws_topic_{e.topic.key}", help=e.title,
                type="primary" if e.is_current else "secondary",
                on_click=sel.click_topic, args=(e.topic.key,),
                use_container_width=True,
            )

    for e in entries:
        st.markdown("<hr style='margin:12px 0; opacity:.35'>", unsafe_allow_html=True)
        st.markdown(f"<div class='law-h' style='color:{e.color}'>{e.title}</div>", unsafe_allow_html=True)
        if e.text:
            st.markdown(f"<p class='law-p'>{html.escape(e.text)}</p>", unsafe_allow_html=True)
        else:
            st.caption("No information available.")

# ================= Public entrypoint =================
def render_laws_tab():
    laws = load_laws()
    if laws.empty:
        st.info("Divorce law data required.")
        return

    st.markdown(CSS, unsafe_allow_html=True)
    sel = _selection()

    top_l, top_r = st.columns([30, 1], gap="small")
    with top_l:
        st.caption("Geographical divorce laws • click a highlighted country to learn more")
    with top_r:
        info_button("laws")

    if sel.is_viewing:
        map_col, panel_col = st.columns([2.2, 1], gap="large")
        with map_col:
            _render_map(sel)
        with panel_col:
            _render_panel(sel)
    else:
        _render_map(sel)
