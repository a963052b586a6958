"""Trust score badges rendered as shields-style SVG."""

from dataclasses import dataclass
from html import escape

from src.consts import (
    BADGE_CALCULATING_MESSAGE,
    BADGE_CHAR_WIDTH,
    BADGE_COLOR_STEPS,
    BADGE_GOOD_MESSAGE_THRESHOLD,
    BADGE_HEIGHT,
    BADGE_LABEL,
    BADGE_LABEL_COLOR,
    BADGE_LOWEST_COLOR,
    BADGE_PADDING,
    BADGE_PENDING_COLOR,
    BADGE_PENDING_MAX_AGE,
    BADGE_PENDING_MESSAGE,
    BADGE_SCORE_MESSAGE_THRESHOLD,
    BADGE_SCORED_MAX_AGE,
)
from src.models.model_server import ServerRecord


@dataclass(frozen=True)
class Badge:
    label: str
    message: str
    color: str
    max_age: int

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.max_age}"

    def render(self) -> str:
        return render_badge_svg(self.label, self.message, self.color)


def get_badge_color(score: int) -> str:
    """Color for a score: eight steps at 90/80/70/60/50/40/30."""
    for threshold, color in BADGE_COLOR_STEPS:
        if score >= threshold:
            return color
    return BADGE_LOWEST_COLOR


def get_badge_message(score: int) -> str:
    if score >= BADGE_SCORE_MESSAGE_THRESHOLD:
        return f"{score}/100"
    if score >= BADGE_GOOD_MESSAGE_THRESHOLD:
        return "Good"
    return "Developing"


def badge_for_record(record: ServerRecord | None) -> Badge:
    """Pick label, message, color and cache lifetime for a record.

    Always returns a displayable badge: unknown servers render as
    "Calculating..." and unscored ones as "Pending", both briefly cached.
    """
    if record is None:
        return Badge(BADGE_LABEL, BADGE_CALCULATING_MESSAGE, BADGE_PENDING_COLOR, BADGE_PENDING_MAX_AGE)

    score = record.quality_score
    if score is None:
        return Badge(BADGE_LABEL, BADGE_PENDING_MESSAGE, BADGE_PENDING_COLOR, BADGE_PENDING_MAX_AGE)

    return Badge(BADGE_LABEL, get_badge_message(score), get_badge_color(score), BADGE_SCORED_MAX_AGE)


def segment_width(text: str) -> int:
    return len(text) * BADGE_CHAR_WIDTH + BADGE_PADDING


def render_badge_svg(label: str, message: str, color: str) -> str:
    """Render a two-segment badge.

    Segment widths come from the unescaped text length. Text is drawn twice,
    offset, to give the usual drop shadow.
    """
    label_width = segment_width(label)
    message_width = segment_width(message)
    total_width = label_width + message_width
    label_x = label_width * 5
    message_x = (label_width * 2 + message_width) * 5

    label = escape(label)
    message = escape(message)
    color = escape(color)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="{total_width}" height="{BADGE_HEIGHT}" role="img" aria-label="{label}: {message}">
  <title>{label}: {message}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{total_width}" height="{BADGE_HEIGHT}" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{label_width}" height="{BADGE_HEIGHT}" fill="{BADGE_LABEL_COLOR}"/>
    <rect x="{label_width}" width="{message_width}" height="{BADGE_HEIGHT}" fill="{color}"/>
    <rect width="{total_width}" height="{BADGE_HEIGHT}" fill="url(#s)"/>
  </g>
  <g fill="#fff" text-anchor="middle" font-family="Verdana,Geneva,DejaVu Sans,sans-serif" text-rendering="geometricPrecision" font-size="110">
    <text aria-hidden="true" x="{label_x}" y="150" fill="#010101" fill-opacity=".3" transform="scale(.1)">{label}</text>
    <text x="{label_x}" y="140" transform="scale(.1)" fill="#fff">{label}</text>
    <text aria-hidden="true" x="{message_x}" y="150" fill="#010101" fill-opacity=".3" transform="scale(.1)">{message}</text>
    <text x="{message_x}" y="140" transform="scale(.1)" fill="#fff">{message}</text>
  </g>
</svg>"""
