"""Helpers for keeping text inside Discord embed limits."""

from __future__ import annotations

from typing import Final

ELLIPSIS: Final[str] = "…"

# Discord caps embed field values at 1024 characters
EMBED_FIELD_LIMIT: Final[int] = 1024


def clamp_text(text: str, limit: int) -> str:
    """Clamp text to ``limit`` characters with a trailing ellipsis."""
    if not text or limit <= 0:
        return ""

    value = text.strip()
    if len(value) <= limit:
        return value
    return value[: max(0, limit - len(ELLIPSIS))] + ELLIPSIS


def clamp_field(text: str, limit: int = EMBED_FIELD_LIMIT) -> str:
    """Clamp an embed field value, cutting at the last full line when possible."""
    value = (text or "").strip()
    if len(value) <= limit:
        return value
    head = value[: max(0, limit - len(ELLIPSIS) - 1)]
    if "\n" in head:
        head = head.rsplit("\n", 1)[0]
    return f"{head}\n{ELLIPSIS}"
