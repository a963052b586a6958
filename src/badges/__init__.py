"""Trust score badge generation."""

from src.badges.badge import (
    Badge,
    badge_for_record,
    get_badge_color,
    get_badge_message,
    render_badge_svg,
)

__all__ = [
    "Badge",
    "badge_for_record",
    "get_badge_color",
    "get_badge_message",
    "render_badge_svg",
]
