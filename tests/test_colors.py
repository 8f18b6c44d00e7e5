"""Tests for the colour scales, the comparison palette and the fill rules."""
from __future__ import annotations

import math

import pytest

from colors import (
    BASE_SCALE,
    COMPARISON_PALETTE,
    INERT_FILL,
    RATE_SCALE,
    SELECTED_SCALE,
    LinearColorScale,
    comparison_fill,
    detail_fill,
)


# ── Scales ───────────────────────────────────────────────────


@pytest.mark.parametrize("scale", [BASE_SCALE, SELECTED_SCALE, RATE_SCALE])
def test_endpoints_are_exact(scale):
    lo, hi = scale.domain
    assert scale(lo) == scale.colors[0]
    assert scale(hi) == scale.colors[1]


def test_configured_endpoints():
    assert BASE_SCALE.domain == (0.0, 1.0)
    assert BASE_SCALE.colors == ("#E6F3FF", "#90CDF4")
    assert SELECTED_SCALE.colors == ("#FFE0B2", "#FFAB40")
    assert RATE_SCALE.domain == (0.0, 1.5)
    assert RATE_SCALE.colors == ("#e6f2ff", "#0066cc")


def test_midpoints_interpolate_per_channel():
    assert BASE_SCALE(0.5) == "#bbe0fa"
    assert RATE_SCALE(0.75) == "#73ace6"


@pytest.mark.parametrize("value", [-10, -0.001, 0])
def test_below_domain_clamps_to_low(value):
    assert RATE_SCALE(value) == "#e6f2ff"


@pytest.mark.parametrize("value", [1.5, 1.51, 99])
def test_above_domain_clamps_to_high(value):
    assert RATE_SCALE(value) == "#0066cc"


def test_missing_value_renders_low():
    assert RATE_SCALE(None) == "#e6f2ff"
    assert RATE_SCALE(math.nan) == "#e6f2ff"


def test_scale_is_deterministic():
    for v in (0.1, 0.33, 0.9, 1.2):
        assert RATE_SCALE(v) == RATE_SCALE(v)


def test_scale_is_monotonic_in_each_channel():
    # light -> dark: every channel of the rate scale only goes down
    prev = None
    for i in range(16):
        c = RATE_SCALE(i / 10)
        rgb = tuple(int(c[k:k + 2], 16) for k in (1, 3, 5))
        if prev is not None:
            assert all(a <= b for a, b in zip(rgb, prev))
        prev = rgb


@pytest.mark.parametrize("domain, colors", [
    ((1, 1), ("#000000", "#ffffff")),
    ((0, 1), ("#000", "#ffffff")),
    ((0, 1), ("red", "#ffffff")),
    ((0, 1), ("#000000", None)),
])
def test_invalid_configuration_raises(domain, colors):
    with pytest.raises(ValueError):
        LinearColorScale(domain, colors)


def test_reversed_domain():
    scale = LinearColorScale((1, 0), ("#000000", "#ffffff"))
    assert scale(1) == "#000000"
    assert scale(0) == "#ffffff"
    assert scale(0.5) == "#808080"


# ── Palette + fill rules ─────────────────────────────────────


def test_palette_has_five_distinct_colours():
    assert len(COMPARISON_PALETTE) == 5
    assert len(set(COMPARISON_PALETTE)) == 5


def test_detail_fill():
    assert detail_fill(False, False) == INERT_FILL
    assert detail_fill(False, True) == INERT_FILL
    assert detail_fill(True, False) == BASE_SCALE(1)
    assert detail_fill(True, True) == SELECTED_SCALE(1)


def test_comparison_fill():
    assert comparison_fill(False, None) == INERT_FILL
    assert comparison_fill(True, None, 0.75) == RATE_SCALE(0.75)
    for i, c in enumerate(COMPARISON_PALETTE):
        assert comparison_fill(True, i, 0.75) == c
