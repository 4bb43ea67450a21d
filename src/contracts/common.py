"""
Common data types and base models for the LoLdle bot.
All models use Pydantic V2 with strict type checking.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RoutingCluster(str, Enum):
    """Riot API regional routing clusters (account and match endpoints)."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"


class Platform(str, Enum):
    """Riot API Platforms (game servers)."""

    BR1 = "br1"  # Brazil
    EUN1 = "eun1"  # Europe Nordic & East
    EUW1 = "euw1"  # Europe West
    JP1 = "jp1"  # Japan
    KR = "kr"  # Korea
    LA1 = "la1"  # Latin America North
    LA2 = "la2"  # Latin America South
    NA1 = "na1"  # North America
    OC1 = "oc1"  # Oceania
    PH2 = "ph2"  # Philippines
    RU = "ru"  # Russia
    SG2 = "sg2"  # Singapore
    TH2 = "th2"  # Thailand
    TR1 = "tr1"  # Turkey
    TW2 = "tw2"  # Taiwan
    VN2 = "vn2"  # Vietnam


class Role(str, Enum):
    """Human-readable lane roles."""

    TOP = "Top"
    JUNGLE = "Jungle"
    MID = "Mid"
    ADC = "ADC"
    SUPPORT = "Support"
    UNKNOWN = "Unknown"


SOLO_QUEUE_TYPE = "RANKED_SOLO_5x5"

# KDA marker for games without a death
PERFECT_KDA = "Perfect"


class BaseContract(BaseModel):
    """Base model for all data contracts with common configuration."""

    model_config = ConfigDict(
        # Contracts are built once per lookup and never mutated
        frozen=True,
        # Forbid extra fields to ensure data integrity
        extra="forbid",
    )
