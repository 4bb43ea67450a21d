"""Performance Index - six-dimensional skill proxy over recent matches.

Six Dimensions:
1. Aggression (20%)
2. Farming (15%)
3. Vision (15%)
4. Consistency (20%)
5. Teamfighting (15%)
6. Survivability (15%)
"""

from src.core.scoring.models import PerformanceIndex, PerformanceMetrics
from src.core.scoring.performance_index import (
    METRIC_WEIGHTS,
    calculate_metrics,
    calculate_overall,
    calculate_performance_index,
    calculate_primary_role,
)

__all__ = [
    "PerformanceIndex",
    "PerformanceMetrics",
    "METRIC_WEIGHTS",
    "calculate_metrics",
    "calculate_overall",
    "calculate_performance_index",
    "calculate_primary_role",
]
