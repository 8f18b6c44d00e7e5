# geo.py
# -----------------------------------------------------------------------------
# Map plumbing shared by both views.
# - Drawable country shapes (every ISO 3166 country, drawn by ISO-3 code)
# - Choropleth figure with one exact fill colour per shape
# - Click routing: Streamlit selection event -> country name -> state machine
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache

import plotly.graph_objects as go
import pycountry

from colors import BORDER

# Short display names where the ISO 3166 name reads awkwardly on a map
COMMON_NAMES = {
    "BOL": "Bolivia",
    "BRN": "Brunei",
    "COD": "DR Congo",
    "FSM": "Micronesia",
    "IRN": "Iran",
    "KOR": "South Korea",
    "LAO": "Laos",
    "MDA": "Moldova",
    "PRK": "North Korea",
    "PSE": "Palestine",
    "RUS": "Russia",
    "SYR": "Syria",
    "TWN": "Taiwan",
    "TZA": "Tanzania",
    "VEN": "Venezuela",
    "VNM": "Vietnam",
}


@lru_cache(maxsize=1)
def _iso_names() -> dict:
    """ISO-3 code -> display name for every country pycountry knows."""
    out = {}
    for c in pycountry.countries:
        out[c.alpha_3] = COMMON_NAMES.get(c.alpha_3) or getattr(c, "common_name", None) or c.name
    return out


@lru_cache(maxsize=1024)
def iso3_for(name) -> str | None:
    """ISO-3 code for a country name, or None if it is not a real country."""
    if not isinstance(name, str) or not name.strip():
        return None
    for iso, display in _iso_names().items():
        if display == name:
            return iso
    try:
        return pycountry.countries.lookup(name).alpha_3
    except LookupError:
        return None


def world_shapes(*datasets) -> list[str]:
    """
    Every country drawn on the map, by the exact name a click reports.

    Dataset keys replace the default name of the country they resolve to;
    keys that are not real countries have no shape and are left out.
    """
    by_iso = dict(_iso_names())
    for ds in datasets:
        for name in ds:
            iso = iso3_for(name)
            if iso is not None:
                by_iso[iso] = name
    return sorted(by_iso.values())


def _discrete_colorscale(colors: list[str]) -> list:
    # z == i lands exactly on stop i, so shape i is painted colors[i]
    if len(colors) == 1:
        return [[0.0, colors[0]], [1.0, colors[0]]]
    n = len(colors) - 1
    return [[i / n, c] for i, c in enumerate(colors)]


def build_country_map(names: list[str], fills: list[str], hover: list[str] | None = None,
                      center: dict | None = None, projection_scale: float = 1.0,
                      height: int = 520) -> go.Figure:
    """
    One choropleth trace over `names` (drawn by ISO-3 code), shape i filled with `fills[i]`.

    `hovertext` always carries the exact country name (click routing reads
    it back); optional `hover` lines are shown under the name.
    """
    if len(names) != len(fills):
        raise ValueError(f"Got {len(fills)} fills for {len(names)} shapes")
    locations = [iso3_for(n) for n in names]
    unknown = [n for n, iso in zip(names, locations) if iso is None]
    if unknown:
        raise ValueError(f"No map shape for: {', '.join(map(str, unknown))}")
    if hover is not None and len(hover) != len(names):
        raise ValueError(f"Got {len(hover)} hover labels for {len(names)} shapes")

    fig = go.Figure()
    if names:
        if hover is None:
            extra = {"hovertemplate": "%{hovertext}<extra></extra>"}
        else:
            extra = {"customdata": list(hover),
                     "hovertemplate": "%{hovertext}<br>%{customdata}<extra></extra>"}
        fig.add_trace(go.Choropleth(
            locations=locations,
            locationmode="ISO-3",
            z=list(range(len(names))),
            zmin=0, zmax=max(len(names) - 1, 1),
            colorscale=_discrete_colorscale(list(fills)),
            showscale=False,
            hovertext=list(names),
            **extra,
            marker_line_color=BORDER,
            marker_line_width=0.5,
            selected=dict(marker=dict(opacity=1)),
            unselected=dict(marker=dict(opacity=1)),
        ))

    fig.update_geos(
        projection_type="mercator",
        projection_scale=projection_scale,
        center=center or {},
        resolution=50,
        showcountries=True, countrycolor=BORDER,
        showcoastlines=False,
        showland=True, landcolor="#F5F4F6",
        showocean=True, oceancolor="#DCEBF7",
        showframe=False,
        bgcolor="rgba(0,0,0,0)",
    )
    fig.update_layout(
        clickmode="event+select",
        dragmode=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=0, r=0, t=0, b=0),
        height=height,
    )
    return fig


def clicked_country(event) -> str | None:
    """Country name of the first selected point of a Plotly selection event."""
    if not event:
        return None
    selection = event.get("selection") or {}
    for p in selection.get("points") or []:
        name = p.get("hovertext") or p.get("location")
        if name:
            return name
    return None


def route_click(event, machine) -> str | None:
    """Feed the clicked country (if any) to `machine.click_country`."""
    name = clicked_country(event)
    if name is not None:
        machine.click_country(name)
    return name
