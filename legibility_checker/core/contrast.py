"""Contrast guarantee: pick a foreground that is readable on a backdrop.

ensure_contrast(c1, c2, min_ratio) accepts c1 when it already meets the
ratio against c2. Otherwise a chromatic c1 is pushed along HSL lightness
(darker on light backdrops, brighter on dark ones) keeping its hue, and the
first step that meets the ratio wins. When a logo colour is given, its
complement and its blend over the backdrop are tried next, so text can echo
the brand. Achromatic colours and colours that cannot be rescued snap to
pure white or pure black, whichever contrasts better with c2.

The result is always a renderable #RRGGBB; nothing here raises.
"""

from __future__ import annotations

import colorsys
import logging
import math
from collections.abc import Sequence
from typing import Any

from legibility_checker.core.blend import DEFAULT_PROBE_ALPHA, composite
from legibility_checker.core.color import (
    BLACK,
    WHITE,
    Color,
    coerce_color,
    contrast_ratio,
    parse_color,
    relative_luminance,
)
from legibility_checker.core.types import ContrastDecision

logger = logging.getLogger(__name__)

DEFAULT_MIN_RATIO = 4.5  # WCAG AA, normal text
LIGHTNESS_STEP = 0.02
LUMINANCE_GAP = 0.1  # below this luminance difference a swatch is too close

# Saturated swatches checked against every backdrop
PROBE_SWATCHES = ('#FF0000', '#00FF00', '#0000FF', '#FFFF00', '#FF00FF', '#00FFFF')


def normalise_min_ratio(value: Any) -> float:
    """Float ratio of at least 1; unusable values fall back to the default."""
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        ratio = math.nan
    if not math.isfinite(ratio):
        logger.warning('invalid min_ratio %r, using %s', value, DEFAULT_MIN_RATIO)
        return DEFAULT_MIN_RATIO
    return max(1.0, ratio)


def black_or_white(backdrop: Color) -> Color:
    """Pure white or black, whichever contrasts better with backdrop (white on ties)."""
    if contrast_ratio(WHITE, backdrop) >= contrast_ratio(BLACK, backdrop):
        return WHITE
    return BLACK


def complementary_color(color: Color) -> Color:
    """Channel-wise inverse: #202020 -> #DFDFDF."""
    return Color(255 - color.r, 255 - color.g, 255 - color.b)


def _logo_candidate(logo: Color, backdrop: Color, min_ratio: float) -> Color | None:
    """Best of the logo's complement and its blend over the backdrop, if either meets min_ratio."""
    best: Color | None = None
    best_ratio = 0.0
    for candidate in (complementary_color(logo), composite(logo.opaque(), backdrop, DEFAULT_PROBE_ALPHA)):
        ratio = contrast_ratio(candidate, backdrop)
        if ratio >= min_ratio and ratio > best_ratio:
            best, best_ratio = candidate, ratio
    return best


def _push_lightness(color: Color, backdrop: Color, min_ratio: float) -> Color | None:
    """Step color's HSL lightness away from the backdrop until the ratio is met."""
    h, lightness, s = colorsys.rgb_to_hls(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    if s == 0.0:
        return None
    darken = contrast_ratio(BLACK, backdrop) > contrast_ratio(WHITE, backdrop)
    step = -LIGHTNESS_STEP if darken else LIGHTNESS_STEP
    lightness += step
    while 0.0 < lightness < 1.0:
        r, g, b = colorsys.hls_to_rgb(h, lightness, s)
        candidate = Color(int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))
        if contrast_ratio(candidate, backdrop) >= min_ratio:
            return candidate
        lightness += step
    return None


def unsuitable_colors(backdrop: Color, min_ratio: float, logo_color: Color | None = None) -> tuple[str, ...]:
    """Swatches that fail against backdrop, by ratio or by near-equal luminance."""
    candidates = list(PROBE_SWATCHES) + [backdrop.hex]
    if logo_color is not None:
        candidates.append(logo_color.hex)
    backdrop_lum = relative_luminance(backdrop)
    found: list[str] = []
    for swatch in candidates:
        if swatch in found:
            continue
        too_low = contrast_ratio(swatch, backdrop) < min_ratio
        too_close = abs(relative_luminance(swatch) - backdrop_lum) < LUMINANCE_GAP
        if too_low or too_close:
            found.append(swatch)
    return tuple(found)


def ensure_contrast(
    c1: Any,
    c2: Any,
    min_ratio: float = DEFAULT_MIN_RATIO,
    logo_color: Any = None,
) -> ContrastDecision:
    """Return a foreground for backdrop c2 that meets min_ratio whenever possible."""
    ratio_floor = normalise_min_ratio(min_ratio)
    backdrop = coerce_color(c2, label='backdrop colour')
    logo = parse_color(logo_color) if logo_color is not None else None
    unsuitable = unsuitable_colors(backdrop, ratio_floor, logo)

    foreground = parse_color(c1)
    if foreground is None or parse_color(c2) is None:
        logger.warning('ensure_contrast got invalid input (%r, %r), falling back to white', c1, c2)
        return ContrastDecision(WHITE.hex, contrast_ratio(WHITE, backdrop), unsuitable)

    foreground = foreground.opaque()
    ratio = contrast_ratio(foreground, backdrop)
    if ratio >= ratio_floor:
        return ContrastDecision(foreground.hex, ratio, unsuitable)

    adjusted = _push_lightness(foreground, backdrop, ratio_floor)
    if adjusted is not None:
        logger.debug('adjusted %s -> %s on %s', foreground.hex, adjusted.hex, backdrop.hex)
        return ContrastDecision(adjusted.hex, contrast_ratio(adjusted, backdrop), unsuitable)

    if logo is not None:
        branded = _logo_candidate(logo, backdrop, ratio_floor)
        if branded is not None:
            logger.debug('logo-derived %s on %s', branded.hex, backdrop.hex)
            return ContrastDecision(branded.hex, contrast_ratio(branded, backdrop), unsuitable)

    fallback = black_or_white(backdrop)
    logger.debug('%s unreadable on %s (%.2f), falling back to %s', foreground.hex, backdrop.hex, ratio, fallback.hex)
    return ContrastDecision(fallback.hex, contrast_ratio(fallback, backdrop), unsuitable)


def select_text_color(background: Any, options: Sequence[Any] = ('#000000', '#FFFFFF')) -> str:
    """Highest-contrast option against background (first wins ties)."""
    backdrop = coerce_color(background, label='background colour')
    best: Color | None = None
    best_ratio = 0.0
    for option in options:
        color = parse_color(option)
        if color is None:
            logger.warning('skipping invalid text colour option %r', option)
            continue
        ratio = contrast_ratio(color, backdrop)
        if ratio > best_ratio:
            best, best_ratio = color, ratio
    if best is None:
        return WHITE.hex
    logger.debug('best text colour for %s: %s (%.2f:1)', backdrop.hex, best.hex, best_ratio)
    return best.hex
