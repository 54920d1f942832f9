from __future__ import annotations

_GRID = "rgba(255,255,255,0.06)"
_ZEROLINE = "rgba(255,255,255,0.08)"

# No title; section headers above each chart handle labelling.
_CHART_LAYOUT = {
    "paper_bgcolor": "rgba(0,0,0,0)",
    "plot_bgcolor": "rgba(0,0,0,0)",
    "font": {"color": "#E8EAED", "size": 13},
    "margin": {"l": 20, "r": 20, "t": 10, "b": 30},
    "showlegend": False,
    "hoverlabel": {
        "bgcolor": "#1E2130",
        "font_size": 13,
        "font_color": "#F0F2F5",
        "align": "left",
    },
}


def _hex_to_rgba(hex_color: str, alpha: float) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


def _dash_pattern(dash: tuple[int, ...]) -> str:
    """Plotly dash string for an on/off pixel pattern, e.g. (5, 5) -> '5px,5px'."""
    return ",".join(f"{int(step)}px" for step in dash)


def _merge_axis(base: dict, extra: dict) -> dict:
    merged = dict(base)
    merged.update(extra)
    return merged
