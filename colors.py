# colors.py
# -----------------------------------------------------------------------------
# Colour encoding for the map views.
# - Two-colour linear scales (clamped, RGB interpolation)
# - Fixed comparison palette (one colour per comparison slot)
# - Per-shape fill rules for the detail and comparison maps
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

import numpy as np
from plotly.colors import hex_to_rgb

_HEX = re.compile(r"^#[0-9a-fA-F]{6}$")


class LinearColorScale:
    """
    Map a number in `domain` onto a light -> dark two-colour gradient.

    Values outside the domain are clamped, so anything <= lo returns the
    low colour and anything >= hi returns the high colour, verbatim as
    configured. Missing values (None / NaN) render as the low colour.
    """

    def __init__(self, domain, colors):
        lo, hi = (float(d) for d in domain)
        if lo == hi:
            raise ValueError(f"Colour scale domain must not be empty, got {domain!r}")
        low, high = colors
        for c in (low, high):
            if not isinstance(c, str) or not _HEX.match(c):
                raise ValueError(f"Expected a #rrggbb colour, got {c!r}")
        self.domain = (lo, hi)
        self.colors = (low, high)
        self._low = np.array(hex_to_rgb(low), dtype=float)
        self._high = np.array(hex_to_rgb(high), dtype=float)

    def __call__(self, value) -> str:
        if value is None or np.isnan(float(value)):
            return self.colors[0]
        lo, hi = self.domain
        t = float(np.clip((float(value) - lo) / (hi - lo), 0.0, 1.0))
        if t == 0.0:
            return self.colors[0]
        if t == 1.0:
            return self.colors[1]
        rgb = np.floor(self._low + (self._high - self._low) * t + 0.5)
        return "#{:02x}{:02x}{:02x}".format(*(int(c) for c in rgb))

    def __repr__(self) -> str:
        return f"LinearColorScale(domain={self.domain}, colors={self.colors})"


# ─────────────────────────────────────────────────────────────────────────────
# Configured scales + palette
# ─────────────────────────────────────────────────────────────────────────────
BASE_SCALE = LinearColorScale((0, 1), ("#E6F3FF", "#90CDF4"))       # light blue -> blue
SELECTED_SCALE = LinearColorScale((0, 1), ("#FFE0B2", "#FFAB40"))   # light orange -> orange
RATE_SCALE = LinearColorScale((0, 1.5), ("#e6f2ff", "#0066cc"))

COMPARISON_PALETTE = ("#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A", "#98D8C8")

INERT_FILL = "#F5F4F6"
BORDER = "#FFFFFF"

# topic colour tags -> header/button colour
TOPIC_COLORS = {
    "blue":   "#2563EB",
    "red":    "#DC2626",
    "green":  "#16A34A",
    "yellow": "#CA8A04",
}


# ─────────────────────────────────────────────────────────────────────────────
# Fill rules
# ─────────────────────────────────────────────────────────────────────────────
def detail_fill(is_relevant: bool, is_selected: bool, value=1.0,
                base: LinearColorScale = BASE_SCALE,
                selected: LinearColorScale = SELECTED_SCALE) -> str:
    if not is_relevant:
        return INERT_FILL
    return selected(value) if is_selected else base(value)


def comparison_fill(is_relevant: bool, position_index: int | None, value=None,
                    base: LinearColorScale = RATE_SCALE,
                    palette=COMPARISON_PALETTE) -> str:
    if position_index is not None:
        return palette[position_index]
    if not is_relevant:
        return INERT_FILL
    return base(value)
