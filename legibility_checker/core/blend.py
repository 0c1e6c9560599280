"""Alpha compositing of an overlay colour over a base colour.

blend_colors(overlay, base) is overlay-over-base and NOT commutative.
The overlay's own alpha is used unless an explicit alpha is passed; a plain
#rrggbb overlay is opaque and comes back unchanged.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from legibility_checker.core.color import BLACK, WHITE, Color, coerce_color

logger = logging.getLogger(__name__)

# Averages probe and image colour channel by channel
DEFAULT_PROBE_ALPHA = 0.5


def composite(overlay: Color, base: Color, alpha: float | None = None) -> Color:
    """Composite overlay over base. Result is opaque."""
    a = overlay.alpha if alpha is None else float(alpha)
    if not math.isfinite(a):
        logger.warning('non-finite alpha %r, using overlay alpha %s', alpha, overlay.alpha)
        a = overlay.alpha
    a = min(max(a, 0.0), 1.0)
    if a >= 1.0:
        return overlay.opaque()
    channels = [int(round(a * o + (1.0 - a) * b)) for o, b in zip(overlay.rgb, base.rgb)]
    return Color(*channels)


def blend_colors(overlay: Any, base: Any, alpha: float | None = None) -> str:
    """Perceived colour of overlay laid over base, as #RRGGBB."""
    top = coerce_color(overlay, label='overlay colour')
    bottom = coerce_color(base, label='base colour')
    result = composite(top, bottom, alpha)
    logger.debug('blend %s over %s (alpha=%s) -> %s', top.hex, bottom.hex, alpha, result.hex)
    return result.hex


def probe_extremes(c1: Any, c2: Any, probe_alpha: float = DEFAULT_PROBE_ALPHA) -> tuple[str, str]:
    """Estimate how an overlay reads on the darkest and lightest image regions.

    A black probe is composited over c1 and a white probe over c2. The pair
    bounds the backdrop the overlay will actually land on.
    """
    dark = blend_colors(BLACK, c1, alpha=probe_alpha)
    light = blend_colors(WHITE, c2, alpha=probe_alpha)
    return dark, light
