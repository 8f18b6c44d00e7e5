# app.py
import logging

import streamlit as st

from compare_tab import render_compare_tab
from laws_tab import render_laws_tab
from overview import emit_auto_jump_script, render_overview_tab

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# ──────────────────────────────────────────────────────────────────────────────
# App chrome / theme
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="Geographical Divorce Laws", page_icon="⚖️", layout="wide")

st.markdown(
    """
    <style>
      .block-container { padding-top: 1rem; }
      .stApp { background:#EFF6FF; }
      .header-row { display:flex; flex-direction:column; align-items:center; margin: 16px 0 20px 0; }
      .header-title { font-size: 40px; font-weight: 800; line-height:1.2; margin:0; color:#1E40AF; }
      .header-sub { color:#2563EB; text-align:center; max-width:42rem; margin:.4rem 0 0 0; }
      .stTabs [data-baseweb="tab-list"] { display:flex; justify-content:space-between; width:100%; }
      .stTabs [data-baseweb="tab"] { flex-grow:1; text-align:center; padding:14px 0; font-size:1.1rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown(
    """
    <div class="header-row">
      <div class="header-title">⚖️ Geographical Divorce Laws</div>
      <p class="header-sub">
        Explore divorce laws across different countries. Click on a highlighted country to learn more.
      </p>
    </div>
    """,
    unsafe_allow_html=True,
)

# ──────────────────────────────────────────────────────────────────────────────
# Tabs
# ──────────────────────────────────────────────────────────────────────────────
tab_overview, tab_laws, tab_compare = st.tabs(["Overview", "Divorce Laws", "Rate Comparison"])

with tab_overview:
    render_overview_tab()

with tab_laws:
    render_laws_tab()

with tab_compare:
    render_compare_tab()

emit_auto_jump_script()
