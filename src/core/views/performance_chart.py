"""QuickChart radar chart for the performance index."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

from src.core.scoring.models import PerformanceMetrics

QUICKCHART_URL = "https://quickchart.io/chart"

METRIC_LABELS: tuple[tuple[str, str], ...] = (
    ("aggression", "Aggression"),
    ("farming", "Farming"),
    ("vision", "Vision"),
    ("consistency", "Consistency"),
    ("teamfighting", "Teamfighting"),
    ("survivability", "Survivability"),
)

_ACCENT = "205, 92, 147"
_GRID = "rgba(255, 255, 255, 0.06)"


def build_chart_config(metrics: PerformanceMetrics) -> dict[str, Any]:
    return {
        "type": "radar",
        "data": {
            "labels": [label for _, label in METRIC_LABELS],
            "datasets": [
                {
                    "label": "Performance",
                    "data": [getattr(metrics, name) for name, _ in METRIC_LABELS],
                    "backgroundColor": f"rgba({_ACCENT}, 0.25)",
                    "borderColor": f"rgba({_ACCENT}, 0.9)",
                    "borderWidth": 2,
                    "pointBackgroundColor": f"rgb({_ACCENT})",
                    "pointBorderColor": "rgba(255, 255, 255, 0.8)",
                    "pointRadius": 3,
                }
            ],
        },
        "options": {
            "scales": {
                "r": {
                    "beginAtZero": True,
                    "min": 0,
                    "max": 100,
                    "ticks": {"display": False, "stepSize": 20},
                    "grid": {"color": _GRID},
                    "angleLines": {"color": _GRID},
                    "pointLabels": {
                        "color": "rgba(255, 255, 255, 0.85)",
                        "font": {"size": 13, "weight": "500"},
                        "padding": 8,
                    },
                }
            },
            "plugins": {"legend": {"display": False}, "title": {"display": False}},
            "elements": {"line": {"tension": 0.15}},
        },
    }


def build_performance_chart_url(metrics: PerformanceMetrics) -> str:
    """Radar chart image URL for the six sub-metrics (0-100 axis)."""
    encoded = quote(json.dumps(build_chart_config(metrics), separators=(",", ":")), safe="")
    return (
        f"{QUICKCHART_URL}?c={encoded}"
        "&backgroundColor=rgb(26,28,34)&width=700&height=450&devicePixelRatio=2"
    )
