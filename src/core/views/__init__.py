"""View exports

This package exposes the renderers that turn lookup results into Discord UI
components (Embeds, Buttons).
"""

from src.core.views.player_stats_view import (
    render_error_embed,
    render_lookup_error_embed,
    render_player_stats_embed,
)

__all__ = ["render_player_stats_embed", "render_error_embed", "render_lookup_error_embed"]
