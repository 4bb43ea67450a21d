"""Platform → routing cluster mapping.

Account-V1 and Match-V5 are served per routing cluster, while Summoner-V4 and
League-V4 are served per platform. The two must never be swapped.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping

from src.contracts.common import Platform, RoutingCluster
from src.core.errors import UnsupportedRegionError

PLATFORM_TO_CLUSTER: Final[Mapping[Platform, RoutingCluster]] = MappingProxyType(
    {
        Platform.NA1: RoutingCluster.AMERICAS,
        Platform.BR1: RoutingCluster.AMERICAS,
        Platform.LA1: RoutingCluster.AMERICAS,
        Platform.LA2: RoutingCluster.AMERICAS,
        Platform.OC1: RoutingCluster.AMERICAS,
        Platform.EUW1: RoutingCluster.EUROPE,
        Platform.EUN1: RoutingCluster.EUROPE,
        Platform.TR1: RoutingCluster.EUROPE,
        Platform.RU: RoutingCluster.EUROPE,
        Platform.KR: RoutingCluster.ASIA,
        Platform.JP1: RoutingCluster.ASIA,
        Platform.SG2: RoutingCluster.ASIA,
        Platform.TW2: RoutingCluster.ASIA,
        Platform.VN2: RoutingCluster.ASIA,
        Platform.TH2: RoutingCluster.ASIA,
        Platform.PH2: RoutingCluster.ASIA,
    }
)


def normalize_platform(code: Any) -> Platform:
    """Lower-case and validate a platform code such as ``NA1`` or ``euw1``."""
    if isinstance(code, Platform):
        return code
    if not isinstance(code, str):
        raise UnsupportedRegionError(code)
    try:
        return Platform(code.strip().lower())
    except ValueError:
        raise UnsupportedRegionError(code) from None


def routing_cluster_for(platform: Platform | str) -> RoutingCluster:
    return PLATFORM_TO_CLUSTER[normalize_platform(platform)]
