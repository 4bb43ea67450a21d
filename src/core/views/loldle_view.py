"""LoLdle announcement and /loldle reply content."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Final

import discord

FALLBACK_EMOTE: Final[str] = "🎮"

CUTE_MESSAGES: Final[tuple[str, ...]] = (
    "may your ranked games go well today",
    "good luck on the rift today",
    "time to test your League knowledge",
    "may the odds be ever in your favor",
    "let's see if you can guess today's champion",
    "hope you get a pentakill today",
    "time to prove you're a true League veteran",
    "may your queues be short and your LP high",
    "ready to flex that League knowledge",
    "let's get this bread... I mean RP",
    "time to show off those big brain plays",
    "may RNG bless you today",
)


def pick_message(rng: random.Random | None = None, messages: Sequence[str] = CUTE_MESSAGES) -> str:
    return (rng or random).choice(messages)


def pick_emote(guild: discord.Guild | None, rng: random.Random | None = None) -> str:
    """Random custom emoji from the guild, or a controller when it has none."""
    if guild is None or not guild.emojis:
        return FALLBACK_EMOTE
    return str((rng or random).choice(list(guild.emojis)))


def build_loldle_button(url: str) -> discord.ui.View:
    view = discord.ui.View(timeout=None)
    view.add_item(
        discord.ui.Button(label="Open today's LoLdle", style=discord.ButtonStyle.link, url=url)
    )
    return view


def format_loldle_reply(user_mention: str, message: str, emote: str) -> str:
    return f"{user_mention} used `/loldle`, {message} {emote}"


def format_daily_announcement(emote: str) -> str:
    return f"🌅 **A new LoLdle has arrived!** Time to guess today's champions {emote}"
