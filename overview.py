# overview.py
# -----------------------------------------------------------------------------
# Overview tab for the Divorce Law Atlas.
# - What the two map views do and how to read their colours
# - The four legal topics shown in the country panel
# - In-page anchors so the ℹ️ buttons on other tabs can jump here
# -----------------------------------------------------------------------------

from __future__ import annotations
import streamlit as st
from streamlit.components.v1 import html as st_html

from colors import (
    BASE_SCALE, COMPARISON_PALETTE, INERT_FILL, RATE_SCALE, SELECTED_SCALE,
)
from dataset import TOPICS

# ─────────────────────────────────────────────────────────────────────────────
# Section map: title + anchor id
# ─────────────────────────────────────────────────────────────────────────────
SECTIONS = {
    "laws":    ("Divorce Laws by Country",   "ov-laws"),
    "topics":  ("The Four Legal Topics",     "ov-topics"),
    "compare": ("Comparing Divorce Rates",   "ov-compare"),
    "colors":  ("Reading the Map Colours",   "ov-colors"),
}

# ─────────────────────────────────────────────────────────────────────────────
# Copy
# ─────────────────────────────────────────────────────────────────────────────
_TOPIC_COPY = {
    "registration": "How a marriage is formally recorded, which statutes apply, and whether registration is compulsory.",
    "jurisdiction": "Which court hears a divorce, where a petition can be filed, and the grounds or procedure involved.",
    "custody":      "Who looks after the children after separation and the principle courts apply when deciding.",
    "division":     "What happens to property, dower and maintenance when the marriage ends.",
}

_LAWS_HOW = [
    "Shaded countries have a legal profile; grey countries are not covered yet.",
    "Click a shaded country to open its panel. All four topics are listed together.",
    "The topic buttons at the top of the panel mark the topic you last picked.",
    "Click a grey country or the ✕ button to close the panel.",
]

_COMPARE_HOW = [
    "Click up to five shaded countries to add them to the comparison.",
    "Click a selected country again to remove it.",
    "Colours follow the order of selection: the first country always takes the first colour, so removing one moves the others up.",
    "A sixth pick is ignored until a slot is free. “Clear All” empties the comparison.",
]


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────
def _anchor(title: str, anchor_id: str):
    st.markdown(f"""<div id="{anchor_id}" style="scroll-margin-top: 80px;"></div>""", unsafe_allow_html=True)
    st.subheader(title)


def _bullets(items: list[str]):
    st.markdown("\n".join(f"- {x}" for x in items))


def _swatch(color: str, label: str) -> str:
    return (
        f"<span style='display:inline-flex; align-items:center; gap:6px; margin-right:14px;'>"
        f"<span style='width:16px; height:16px; border-radius:4px; background:{color}; "
        f"border:1px solid #e6e6e6; display:inline-block;'></span>{label}</span>"
    )


def _topics_section():
    for t in TOPICS:
        st.markdown(f"**{t.icon} {t.title}:** {_TOPIC_COPY.get(t.key, '')}")


def _colors_section():
    rows = [
        ("Divorce Laws map", [
            _swatch(BASE_SCALE.colors[1], "country with a profile"),
            _swatch(SELECTED_SCALE.colors[1], "open country"),
            _swatch(INERT_FILL, "no data"),
        ]),
        ("Rate Comparison map", [
            _swatch(RATE_SCALE.colors[0], f"{RATE_SCALE.domain[0]:g} per 1000"),
            _swatch(RATE_SCALE.colors[1], f"{RATE_SCALE.domain[1]:g}+ per 1000"),
            _swatch(INERT_FILL, "no data"),
        ]),
        ("Comparison slots", [
            _swatch(c, f"#{i + 1}") for i, c in enumerate(COMPARISON_PALETTE)
        ]),
    ]
    for title, chips in rows:
        st.markdown(f"**{title}**<br>{''.join(chips)}", unsafe_allow_html=True)


def _auto_jump():
    """Support URL param ?jump=<key> or session_state['overview_focus'] to auto-scroll."""
    params = st.query_params
    if "jump" in params:
        key = params.get("jump")
    else:
        key = st.session_state.get("overview_focus")

    if key and key in SECTIONS:
        _scroll_to(SECTIONS[key][1], click_overview=False)


def _scroll_to(anchor_id: str, click_overview: bool):
    select_tab = """
              root.querySelectorAll('[role="tab"], [data-baseweb="tab"]').forEach(t => {
                if ((t.innerText || '').trim().toLowerCase().includes('overview')) t.click();
              });
    """ if click_overview else ""
    st_html(
        f"""
        <script>
          setTimeout(function() {{
            try {{
              const root = window.parent.document;
              {select_tab}
              setTimeout(function() {{
                const el = root.getElementById("{anchor_id}");
                if (el) el.scrollIntoView({{ behavior: "smooth", block: "start" }});
              }}, 300);
            }} catch (e) {{}}
          }}, 60);
        </script>
        """,
        height=0,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Main renderer
# ─────────────────────────────────────────────────────────────────────────────
def render_overview_tab():
    st.markdown(
        "Explore how divorce works across South Asia. The **Divorce Laws** tab opens a "
        "legal profile per country; the **Rate Comparison** tab puts up to five "
        "countries' crude divorce rates side by side."
    )

    _anchor(*SECTIONS["laws"])
    _bullets(_LAWS_HOW)

    _anchor(*SECTIONS["topics"])
    _topics_section()

    _anchor(*SECTIONS["compare"])
    _bullets(_COMPARE_HOW)

    _anchor(*SECTIONS["colors"])
    _colors_section()

    st.caption("Legal summaries are simplified and are not legal advice.")

    _auto_jump()


# ─────────────────────────────────────────────────────────────────────────────
# Public helpers used by other tabs
# ─────────────────────────────────────────────────────────────────────────────
def info_button(section_key: str, help_text: str = "What is this?", key_suffix: str | None = None):
    """
    Small ℹ️ button that jumps to `section_key` on the Overview tab.
    Pass a unique `key_suffix` when the same section is linked twice on a page.
    """
    unique_key = f"info_{key_suffix or section_key}"
    if st.button("ℹ️", key=unique_key, help=help_text):
        st.session_state["overview_focus"] = section_key
        st.session_state["_force_overview"] = True


def emit_auto_jump_script():
    """If `_force_overview` is set, switch to Overview and smooth-scroll to the target anchor."""
    if not st.session_state.get("_force_overview"):
        return
    st.session_state["_force_overview"] = False

    key = st.session_state.get("overview_focus")
    if key in SECTIONS:
        _scroll_to(SECTIONS[key][1], click_overview=True)
