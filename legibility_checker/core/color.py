"""Colour model: parsing, relative luminance and WCAG contrast ratio.

Accepted inputs:
  - hex strings: #rgb, #rrggbb, #rrggbbaa (leading # optional)
  - any CSS colour string Pillow's ImageColor understands (rgb(), hsl(), names)
  - RGB / RGBA tuples with 0-255 channels
  - an existing Color

Anything else is invalid. parse_color() returns None for it; coerce_color()
substitutes white and logs the substitution. Nothing in this package raises
for a bad colour: a wrong-but-renderable colour beats a failed render.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import ImageColor

logger = logging.getLogger(__name__)

# sRGB linearisation threshold and channel weights (WCAG 2.x)
LINEAR_THRESHOLD = 0.03928
CHANNEL_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Luminance at which black and white give the same contrast ratio
BLACK_WHITE_CROSSOVER = (1.05 * 0.05) ** 0.5 - 0.05

_BARE_HEX = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8}')


@dataclass(frozen=True)
class Color:
    """An sRGB colour with 0-255 channels and a 0-1 alpha."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02X}{self.g:02X}{self.b:02X}'

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def opaque(self) -> Color:
        """Same channels with alpha dropped."""
        return Color(self.r, self.g, self.b)

    def rgba_css(self, alpha: float) -> str:
        return f'rgba({self.r}, {self.g}, {self.b}, {alpha:g})'

    def __str__(self) -> str:
        return self.hex


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def _channel_ok(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool) and 0 <= v <= 255


def parse_color(value: Any) -> Color | None:
    """Parse a colour value. Returns None when the input is not a valid colour."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _BARE_HEX.fullmatch(text):
            text = '#' + text
        try:
            parsed = ImageColor.getrgb(text)
        except ValueError:
            return None
        if not all(0 <= v <= 255 for v in parsed):
            return None
        if len(parsed) == 4:
            r, g, b, a = parsed
            return Color(r, g, b, a / 255.0)
        r, g, b = parsed
        return Color(r, g, b)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if not all(_channel_ok(v) for v in value):
            return None
        channels = [int(v) for v in value]
        if len(channels) == 4:
            return Color(channels[0], channels[1], channels[2], channels[3] / 255.0)
        return Color(channels[0], channels[1], channels[2])
    return None


def coerce_color(value: Any, default: Color = WHITE, label: str = 'colour') -> Color:
    """Parse value, falling back to default (white) and logging the substitution."""
    color = parse_color(value)
    if color is None:
        logger.warning('invalid %s %r, substituting %s', label, value, default.hex)
        return default
    return color


def to_hex(value: Any) -> str:
    """Normalise any colour input to #RRGGBB (invalid input becomes white)."""
    return coerce_color(value).hex


def _linearise(channel: float) -> float:
    if channel <= LINEAR_THRESHOLD:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(value: Any) -> float:
    """Relative luminance in [0, 1]. Alpha is ignored."""
    color = coerce_color(value)
    wr, wg, wb = CHANNEL_WEIGHTS
    return (
        wr * _linearise(color.r / 255.0) + wg * _linearise(color.g / 255.0) + wb * _linearise(color.b / 255.0)
    )


def luminances(colors: Sequence[Color]) -> np.ndarray:
    """Vectorised relative luminance for a palette of parsed colours."""
    if not colors:
        return np.zeros(0)
    arr = np.array([c.rgb for c in colors], dtype=float) / 255.0
    linear = np.where(arr <= LINEAR_THRESHOLD, arr / 12.92, ((arr + 0.055) / 1.055) ** 2.4)
    return linear @ np.array(CHANNEL_WEIGHTS)


def ratio_from_luminance(l1: float, l2: float) -> float:
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(a: Any, b: Any) -> float:
    """WCAG contrast ratio between two colours, in [1, 21]. Symmetric."""
    return ratio_from_luminance(relative_luminance(a), relative_luminance(b))


def parse_palette(values: Iterable[Any]) -> list[Color] | None:
    """Parse every entry of a palette. None if any entry is invalid."""
    palette = []
    for value in values:
        color = parse_color(value)
        if color is None:
            return None
        palette.append(color)
    return palette
