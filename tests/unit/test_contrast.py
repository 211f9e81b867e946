"""Tests for WCAG contrast checks."""

from __future__ import annotations

import logging

import pytest

from tincture.core.algebra import BLACK, WHITE
from tincture.core.contrast import (
    LUMINANCE_MIDPOINT,
    check_contrast,
    classify_contrast,
    contrast_ratio,
    is_light,
    relative_luminance,
    validate_contrast,
)
from tincture.core.errors import ContrastError
from tincture.core.ir.colors import Color
from tincture.core.ir.registry import ContrastLevel

TEAL = Color(red=13, green=118, blue=128)
PAPER = Color(red=255, green=241, blue=229)


class TestLuminance:
    """Test relative luminance and ratios."""

    def test_extremes(self):
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_black_on_white(self):
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_ratio_is_symmetric(self):
        assert contrast_ratio(TEAL, WHITE) == pytest.approx(contrast_ratio(WHITE, TEAL))

    def test_same_color(self):
        assert contrast_ratio(TEAL, TEAL) == pytest.approx(1.0)

    def test_midpoint(self):
        assert LUMINANCE_MIDPOINT == pytest.approx(0.179, abs=0.001)
        assert is_light(PAPER)
        assert not is_light(TEAL)


class TestClassify:
    """Test WCAG level boundaries, which are inclusive."""

    @pytest.mark.parametrize(
        "ratio,level",
        [
            (21.0, ContrastLevel.AAA),
            (7.0, ContrastLevel.AAA),
            (6.99, ContrastLevel.AA),
            (4.5, ContrastLevel.AA),
            (4.49, ContrastLevel.AA_LARGE),
            (3.0, ContrastLevel.AA_LARGE),
            (2.99, ContrastLevel.FAIL),
            (1.0, ContrastLevel.FAIL),
        ],
    )
    def test_levels(self, ratio, level):
        assert classify_contrast(ratio) == level

    def test_check_never_raises(self):
        result = check_contrast(WHITE, WHITE)
        assert result.level == ContrastLevel.FAIL
        assert not result.passes


class TestValidateContrast:
    """Test validation of text/background pairs."""

    def test_passing_pair(self):
        warnings: list[str] = []
        result = validate_contrast(WHITE, BLACK, warnings)
        assert result.level == ContrastLevel.AAA
        assert result.passes
        assert warnings == []

    def test_failing_pair_raises(self):
        with pytest.raises(ContrastError) as exc_info:
            validate_contrast(WHITE, WHITE)
        assert exc_info.value.ratio == pytest.approx(1.0)
        assert "1.00:1" in str(exc_info.value)

    def test_large_text_only_is_a_warning(self, caplog):
        warnings: list[str] = []
        with caplog.at_level(logging.WARNING, logger="tincture.core.contrast"):
            result = validate_contrast(TEAL, Color(red=207, green=228, blue=230), warnings)
        assert result.level == ContrastLevel.AA_LARGE
        assert result.large_text_only
        assert result.ratio == pytest.approx(4.05, abs=0.01)
        assert len(warnings) == 1
        assert "large text" in warnings[0]
        assert "large text" in caplog.text

    def test_warnings_list_is_optional(self):
        result = validate_contrast(TEAL, Color(red=207, green=228, blue=230))
        assert result.level == ContrastLevel.AA_LARGE

    def test_context_validates_names(self, ctx):
        result = ctx.validate_contrast("paper", "black-80")
        assert result.passes
        assert ctx.warnings == []
