"""Performance index calculation - pure domain functions with zero I/O.

CRITICAL: This module MUST NOT contain any:
- Riot API calls
- File I/O
- Network requests
All I/O operations belong in adapters layer.

Six Dimensions:
1. Aggression (20%) - mean KDA, Perfect counted as 5, 5 KDA = 100
2. Farming (15%) - mean CS/min, 8 CS/min = 100
3. Vision (15%) - mean vision score/min, 2/min = 100
4. Consistency (20%) - win rate
5. Teamfighting (15%) - mean kill participation
6. Survivability (15%) - 100 - 10 per average death
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from statistics import fmean
from types import MappingProxyType
from typing import Final, Mapping

from src.contracts.common import Role
from src.contracts.match import MatchStat
from src.core.scoring.models import PerformanceIndex, PerformanceMetrics

logger = logging.getLogger(__name__)

METRIC_WEIGHTS: Final[Mapping[str, Decimal]] = MappingProxyType(
    {
        "aggression": Decimal("0.20"),
        "farming": Decimal("0.15"),
        "vision": Decimal("0.15"),
        "consistency": Decimal("0.20"),
        "teamfighting": Decimal("0.15"),
        "survivability": Decimal("0.15"),
    }
)

PERFECT_KDA_VALUE: Final[float] = 5.0
_KDA_FOR_MAX = 5.0
_CS_PER_MIN_FOR_MAX = 8.0
_VISION_PER_MIN_FOR_MAX = 2.0
_SURVIVABILITY_PENALTY_PER_DEATH = 10.0


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer, .5 away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _kda_value(match: MatchStat) -> float:
    # Raw ratio; MatchStat.kda is rounded for display
    if match.deaths == 0:
        return PERFECT_KDA_VALUE
    return (match.kills + match.assists) / match.deaths


def _capped_ratio(value: float, full_mark: float) -> float:
    return min(100.0, value / full_mark * 100)


def calculate_metrics(matches: Sequence[MatchStat]) -> PerformanceMetrics:
    """Compute the six sub-metrics; all zeros for an empty sequence."""
    if not matches:
        return PerformanceMetrics()

    aggression = _capped_ratio(fmean(_kda_value(m) for m in matches), _KDA_FOR_MAX)
    farming = _capped_ratio(fmean(m.cs_per_min for m in matches), _CS_PER_MIN_FOR_MAX)
    vision = _capped_ratio(fmean(m.vision_per_min for m in matches), _VISION_PER_MIN_FOR_MAX)

    wins = sum(1 for m in matches if m.win)
    consistency = wins / len(matches) * 100

    teamfighting = min(100.0, fmean(m.kill_participation for m in matches))

    avg_deaths = fmean(m.deaths for m in matches)
    survivability = max(0.0, 100 - avg_deaths * _SURVIVABILITY_PENALTY_PER_DEATH)

    return PerformanceMetrics(
        aggression=round_half_up(aggression),
        farming=round_half_up(farming),
        vision=round_half_up(vision),
        consistency=round_half_up(consistency),
        teamfighting=round_half_up(teamfighting),
        survivability=round_half_up(survivability),
    )


def calculate_overall(metrics: PerformanceMetrics) -> int:
    """Weighted composite of the rounded sub-metrics."""
    total = sum(
        (weight * getattr(metrics, name) for name, weight in METRIC_WEIGHTS.items()),
        Decimal(0),
    )
    return round_half_up(total)


def calculate_performance_index(matches: Sequence[MatchStat]) -> PerformanceIndex:
    """Build the performance index for an ordered sequence of matches."""
    metrics = calculate_metrics(matches)
    overall = calculate_overall(metrics)
    logger.debug("Performance index over %d matches: %d", len(matches), overall)
    return PerformanceIndex(overall=overall, metrics=metrics)


def calculate_primary_role(matches: Sequence[MatchStat]) -> Role:
    """Most played role; ties go to the role seen first."""
    if not matches:
        return Role.UNKNOWN
    # most_common keeps first-encountered order among equal counts
    role, _ = Counter(m.role for m in matches).most_common(1)[0]
    return Role(role)
