"""
WCAG contrast checks.

Relative luminance and contrast ratio follow WCAG 2.x:
https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from __future__ import annotations

import logging

from .errors import ContrastError
from .ir.colors import Color
from .ir.registry import ContrastLevel, ContrastResult

logger = logging.getLogger(__name__)

# Minimum ratios per level; boundaries are inclusive.
AAA_RATIO = 7.0
AA_RATIO = 4.5
AA_LARGE_RATIO = 3.0

# Luminance at which black and white text contrast equally with a background.
LUMINANCE_MIDPOINT = (1.05 * 0.05) ** 0.5 - 0.05


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Relative luminance (0 for black, 1 for white)."""
    r, g, b = (_linearize(ch) for ch in color.channels)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: Color, second: Color) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    lighter, darker = sorted(
        (relative_luminance(first), relative_luminance(second)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


def is_light(color: Color) -> bool:
    """Whether dark text reads better than light text on ``color``."""
    return relative_luminance(color) > LUMINANCE_MIDPOINT


def classify_contrast(ratio: float) -> ContrastLevel:
    if ratio >= AAA_RATIO:
        return ContrastLevel.AAA
    if ratio >= AA_RATIO:
        return ContrastLevel.AA
    if ratio >= AA_LARGE_RATIO:
        return ContrastLevel.AA_LARGE
    return ContrastLevel.FAIL


def check_contrast(background: Color, foreground: Color) -> ContrastResult:
    """Compute and classify the contrast of a pair without raising."""
    ratio = contrast_ratio(background, foreground)
    return ContrastResult(ratio=ratio, level=classify_contrast(ratio))


def validate_contrast(
    background: Color,
    foreground: Color,
    warnings: list[str] | None = None,
) -> ContrastResult:
    """Check that ``foreground`` is legible on ``background``.

    Args:
        background: Background color.
        foreground: Text color.
        warnings: Optional list collecting non-fatal accessibility warnings.

    Returns:
        ContrastResult for the pair.

    Raises:
        ContrastError: If the ratio is below 3:1.
    """
    result = check_contrast(background, foreground)

    if result.level == ContrastLevel.FAIL:
        raise ContrastError(
            f"{foreground} on {background} has a contrast ratio of {result.ratio:.2f}:1, "
            f"below the WCAG minimum of {AA_LARGE_RATIO}:1",
            ratio=result.ratio,
        )

    if result.level == ContrastLevel.AA_LARGE:
        message = (
            f"{foreground} on {background} has a contrast ratio of {result.ratio:.2f}:1 "
            "and only passes WCAG AA for large text (18px and above)"
        )
        logger.warning(message)
        if warnings is not None:
            warnings.append(message)

    return result
