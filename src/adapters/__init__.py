"""Adapter implementations for external services."""

from .riot_api import RiotAPIAdapter, RiotAPIConfig

__all__ = ["RiotAPIAdapter", "RiotAPIConfig"]
