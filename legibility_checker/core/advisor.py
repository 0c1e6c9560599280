"""Logo legibility advisory over a photographic background.

Compares the logo's primary and glow colours against every palette entry.
An entry conflicts when neither of them reaches min_ratio against it: a
strong glow halo carries a weak mark. Entries are weighted by dominance:
with n colours, index 0 weighs n, the last weighs 1. When at least half of
the palette weight conflicts, the advisory suggests:

  - a 135deg gradient scrim, lightening when the palette is mostly dark and
    darkening otherwise (towards the under-represented end)
  - a backing plate in black or white (whichever carries the logo better),
    a border in the glow colour and a drop shadow in the opposite tone

An empty palette, an invalid logo colour or an invalid palette entry gives
no enhancement: render the logo unmodified. An invalid glow colour never
carries the mark and borders in white.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from legibility_checker.core.color import (
    BLACK,
    BLACK_WHITE_CROSSOVER,
    WHITE,
    Color,
    coerce_color,
    luminances,
    parse_color,
    parse_palette,
    relative_luminance,
)
from legibility_checker.core.contrast import DEFAULT_MIN_RATIO, black_or_white, normalise_min_ratio
from legibility_checker.core.types import LegibilityAdvisory, LogoEffect

logger = logging.getLogger(__name__)

CONFLICT_SHARE = 0.5
PLATE_ALPHA = 0.8
SHADOW_ALPHA = 0.3
GRADIENT_STOPS = ((0.5, '0%'), (0.3, '30%'))


def dominance_weights(count: int) -> np.ndarray:
    """Linear weights n..1, normalised to sum to 1."""
    if count == 0:
        return np.zeros(0)
    weights = np.arange(count, 0, -1, dtype=float)
    return weights / weights.sum()


def scrim_gradient(tone: Color) -> str:
    stops = ', '.join(f'{tone.rgba_css(alpha)} {pos}' for alpha, pos in GRADIENT_STOPS)
    return f'linear-gradient(135deg, {stops}, transparent 70%)'


def _conflicts(palette_lum: np.ndarray, mark_lum: float, min_ratio: float) -> np.ndarray:
    lighter = np.maximum(palette_lum, mark_lum)
    darker = np.minimum(palette_lum, mark_lum)
    ratios = (lighter + 0.05) / (darker + 0.05)
    return ratios < min_ratio


def check_logo_contrast(
    image_colors: Sequence[Any],
    logo_primary: Any,
    glow_color: Any,
    min_ratio: float = DEFAULT_MIN_RATIO,
) -> LegibilityAdvisory:
    """Decide whether a logo over this palette needs a scrim or backing plate."""
    if isinstance(image_colors, str):
        image_colors = [image_colors]
    if not image_colors:
        return LegibilityAdvisory()

    logo = parse_color(logo_primary)
    palette = parse_palette(image_colors)
    if logo is None or palette is None:
        logger.warning(
            'invalid colours for logo contrast check: logo=%r palette=%r',
            logo_primary,
            list(image_colors),
        )
        return LegibilityAdvisory()

    glow = coerce_color(glow_color, label='glow colour')
    halo = parse_color(glow_color)
    min_ratio = normalise_min_ratio(min_ratio)
    palette_lum = luminances(palette)
    weights = dominance_weights(len(palette))

    conflicts = _conflicts(palette_lum, relative_luminance(logo), min_ratio)
    if halo is not None:
        conflicts &= _conflicts(palette_lum, relative_luminance(halo), min_ratio)
    share = float(weights[conflicts].sum())
    logger.debug('logo %s conflicts with %.0f%% of palette weight', logo.hex, share * 100)

    if share < CONFLICT_SHARE:
        return LegibilityAdvisory()

    dark_weight = float(weights[palette_lum < BLACK_WHITE_CROSSOVER].sum())
    light_weight = 1.0 - dark_weight
    scrim_tone = WHITE if dark_weight >= light_weight else BLACK

    plate = black_or_white(logo)
    shadow = BLACK if plate == WHITE else WHITE
    effect = LogoEffect(
        background=plate.rgba_css(PLATE_ALPHA),
        border=f'2px solid {glow.hex}',
        shadow=f'0 4px 8px {shadow.rgba_css(SHADOW_ALPHA)}',
    )
    return LegibilityAdvisory(
        needs_enhancement=True,
        suggested_gradient=scrim_gradient(scrim_tone),
        suggested_logo_effect=effect,
    )
