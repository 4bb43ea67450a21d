"""
Data contracts for Discord interactions and commands.
"""

from enum import Enum


class CommandName(str, Enum):
    """Available slash commands."""

    LOLDLE = "loldle"
    STATS = "stats"


class EmbedColor(int, Enum):
    """Discord embed colors for different states."""

    INFO = 0x3498DB  # Blue
    SUCCESS = 0x2ECC71  # Green
    WARNING = 0xF39C12  # Orange
    ERROR = 0xE74C3C  # Red
    STATS = 0xCD5C93  # Pink, matches the radar chart
