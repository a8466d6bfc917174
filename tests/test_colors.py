"""Tests for brainrecall.ui.colors – palette, status colours and blending."""

from __future__ import annotations

from brainrecall.ui.colors import (
    GameColors,
    blend_hex,
    lit_color,
    pad_color,
    status_color,
)


# ===========================================================================
# Status colour categories
# ===========================================================================

class TestStatusColor:
    def test_known_categories(self):
        assert status_color("ready") == GameColors.LIGHT_RED
        assert status_color("player") == GameColors.GREEN
        assert status_color("over") == GameColors.WHITE

    def test_unknown_category_is_white(self):
        assert status_color("mystery") == GameColors.WHITE


# ===========================================================================
# Pads
# ===========================================================================

class TestPadColors:
    def test_four_distinct_pads(self):
        assert len(set(GameColors.PADS)) == 4

    def test_pad_color_wraps(self):
        assert pad_color(4) == pad_color(0)

    def test_lit_is_lighter(self):
        for i in range(4):
            base = int(pad_color(i)[1:3], 16) + int(pad_color(i)[3:5], 16) + int(pad_color(i)[5:7], 16)
            lit = int(lit_color(i)[1:3], 16) + int(lit_color(i)[3:5], 16) + int(lit_color(i)[5:7], 16)
            assert lit > base


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert 126 <= int(result[1:3], 16) <= 128

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_wrong_length_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_invalid_hex_chars_returns_a(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_whitespace_padding(self):
        assert blend_hex("  #FF0000  ", "  #0000FF  ", 0.0) == "#FF0000"
