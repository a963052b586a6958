"""Tests for trust score badges."""

import re

import pytest

from src.badges.badge import (
    Badge,
    badge_for_record,
    get_badge_color,
    get_badge_message,
    render_badge_svg,
    segment_width,
)
from tests.factories import make_record


class TestBadgeColor:
    @pytest.mark.parametrize(
        "score,color",
        [
            (100, "#059669"),
            (90, "#059669"),
            (89, "#10b981"),
            (80, "#10b981"),
            (79, "#34d399"),
            (60, "#6ee7b7"),
            (50, "#5eead4"),
            (49, "#eab308"),
            (30, "#f97316"),
            (29, "#ef4444"),
            (0, "#ef4444"),
        ],
    )
    def test_steps(self, score, color):
        assert get_badge_color(score) == color


class TestBadgeMessage:
    @pytest.mark.parametrize(
        "score,message",
        [(100, "100/100"), (80, "80/100"), (79, "Good"), (50, "Good"), (49, "Developing"), (0, "Developing")],
    )
    def test_thresholds(self, score, message):
        assert get_badge_message(score) == message


class TestBadgeForRecord:
    def test_unknown_server(self):
        badge = badge_for_record(None)

        assert badge == Badge("Trust Score", "Calculating...", "#9f9f9f", 300)
        assert badge.cache_control == "public, max-age=300"

    def test_unscored_server(self):
        badge = badge_for_record(make_record(quality_score=None))

        assert badge.message == "Pending"
        assert badge.color == "#9f9f9f"
        assert badge.max_age == 300

    def test_scored_server(self):
        badge = badge_for_record(make_record(quality_score=85))

        assert badge.message == "85/100"
        assert badge.color == "#10b981"
        assert badge.cache_control == "public, max-age=3600"


class TestRenderBadgeSvg:
    def test_segment_width(self):
        assert segment_width("Trust Score") == 11 * 6 + 20

    def test_dimensions(self):
        svg = render_badge_svg("Trust Score", "85/100", "#10b981")
        total = (11 * 6 + 20) + (6 * 6 + 20)

        assert svg.startswith("<svg")
        assert f'width="{total}" height="20"' in svg
        assert 'fill="#555"' in svg
        assert 'fill="#10b981"' in svg

    def test_text_drawn_with_shadow(self):
        svg = render_badge_svg("Trust Score", "Good", "#5eead4")

        assert len(re.findall(r">Good</text>", svg)) == 2
        assert 'y="150"' in svg
        assert 'y="140"' in svg

    def test_text_x_positions(self):
        svg = render_badge_svg("ab", "cd", "#000")
        # both segments are 32 wide: centers at 160 and 480 in tenth-units
        assert 'x="160"' in svg
        assert 'x="480"' in svg

    def test_escapes_text(self):
        svg = render_badge_svg("<label>", "a & b", "#000")

        assert "<label>" not in svg
        assert "&lt;label&gt;" in svg
        assert "a &amp; b" in svg

    def test_width_uses_unescaped_length(self):
        svg = render_badge_svg("&", "x", "#000")
        assert f'width="{26 + 26}"' in svg

    def test_badge_render_matches_function(self):
        badge = Badge("Trust Score", "Pending", "#9f9f9f", 300)
        assert badge.render() == render_badge_svg("Trust Score", "Pending", "#9f9f9f")
