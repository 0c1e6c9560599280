"""ColorContext: the immutable colour bundle handed to every template render.

Built once per render from whatever upstream image analysis produced, then
passed by reference. Missing entries take the generator's defaults; invalid
entries become white (logged), so renderers never need to check fields.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from legibility_checker.core.advisor import check_logo_contrast
from legibility_checker.core.blend import DEFAULT_PROBE_ALPHA, probe_extremes
from legibility_checker.core.color import to_hex
from legibility_checker.core.contrast import DEFAULT_MIN_RATIO, ensure_contrast, normalise_min_ratio
from legibility_checker.core.types import ContrastDecision, LegibilityAdvisory, LogoColors

logger = logging.getLogger(__name__)

DEFAULT_LOGO_COLORS = LogoColors(primary='#4A90E2', secondary='#50E3C2', accent=('#50E3C2', '#F5A623'))
DEFAULT_IMAGE_COLORS = ('#4A90E2', '#50E3C2')
DEFAULT_GLOW_COLOR = '#FF5733'
DEFAULT_BACKGROUND_COLOR = '#FFFFFF'


def _lookup(data: Mapping[str, Any], camel: str, snake: str, default: Any) -> Any:
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def _logo_colors(raw: Any) -> LogoColors:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning('logo colours must be a mapping, got %r; using defaults', raw)
        return DEFAULT_LOGO_COLORS
    accent = raw.get('accent', DEFAULT_LOGO_COLORS.accent)
    if isinstance(accent, str):
        accent = [accent]
    elif not isinstance(accent, (list, tuple)):
        accent = DEFAULT_LOGO_COLORS.accent
    return LogoColors(
        primary=to_hex(raw.get('primary', DEFAULT_LOGO_COLORS.primary)),
        secondary=to_hex(raw.get('secondary', DEFAULT_LOGO_COLORS.secondary)),
        accent=tuple(to_hex(c) for c in accent),
    )


def _probe_alpha(value: Any) -> float:
    try:
        alpha = float(value)
    except (TypeError, ValueError):
        alpha = math.nan
    if not math.isfinite(alpha):
        logger.warning('invalid probe alpha %r, using %s', value, DEFAULT_PROBE_ALPHA)
        return DEFAULT_PROBE_ALPHA
    return min(max(alpha, 0.0), 1.0)


@dataclass(frozen=True)
class ColorContext:
    """Palette and logo colours for one render, plus the contrast floor to apply."""

    image_colors: tuple[str, ...] = DEFAULT_IMAGE_COLORS
    logo_colors: LogoColors = DEFAULT_LOGO_COLORS
    glow_color: str = DEFAULT_GLOW_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR
    min_ratio: float = DEFAULT_MIN_RATIO
    probe_alpha: float = DEFAULT_PROBE_ALPHA

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        min_ratio: float | None = None,
        probe_alpha: float | None = None,
    ) -> ColorContext:
        """Build a context from a camelCase or snake_case mapping.

        Explicit min_ratio / probe_alpha arguments override the mapping.
        """
        image_colors = _lookup(data, 'imageColors', 'image_colors', DEFAULT_IMAGE_COLORS)
        if isinstance(image_colors, str):
            image_colors = [image_colors]
        elif not isinstance(image_colors, (list, tuple)):
            logger.warning('image colours must be a list, got %r; using defaults', image_colors)
            image_colors = DEFAULT_IMAGE_COLORS
        if min_ratio is None:
            min_ratio = _lookup(data, 'minRatio', 'min_ratio', DEFAULT_MIN_RATIO)
        if probe_alpha is None:
            probe_alpha = _lookup(data, 'probeAlpha', 'probe_alpha', DEFAULT_PROBE_ALPHA)
        return cls(
            image_colors=tuple(to_hex(c) for c in image_colors),
            logo_colors=_logo_colors(_lookup(data, 'logoColors', 'logo_colors', None)),
            glow_color=to_hex(_lookup(data, 'glowColor', 'glow_color', DEFAULT_GLOW_COLOR)),
            background_color=to_hex(_lookup(data, 'backgroundColor', 'background_color', DEFAULT_BACKGROUND_COLOR)),
            min_ratio=normalise_min_ratio(min_ratio),
            probe_alpha=_probe_alpha(probe_alpha),
        )

    @property
    def dominant_color(self) -> str:
        return self.image_colors[0] if self.image_colors else self.background_color

    def ensure_contrast(self, foreground: Any, backdrop: Any = None) -> ContrastDecision:
        """ensure_contrast against backdrop (the context background by default)."""
        bg = self.background_color if backdrop is None else backdrop
        return ensure_contrast(foreground, bg, self.min_ratio)

    def text_color(self) -> ContrastDecision:
        """Body text colour over the image.

        Probes the two most prominent palette colours (black over the first,
        white over the second) and makes the dark estimate legible on the
        light one.
        """
        first = self.dominant_color
        second = self.image_colors[1] if len(self.image_colors) > 1 else first
        dark, light = probe_extremes(first, second, self.probe_alpha)
        return ensure_contrast(dark, light, self.min_ratio, logo_color=self.logo_colors.primary)

    def footer_color(self) -> ContrastDecision:
        """Logo secondary colour made legible on the dominant image colour."""
        return ensure_contrast(self.logo_colors.secondary, self.dominant_color, self.min_ratio)

    def logo_advisory(self) -> LegibilityAdvisory:
        return check_logo_contrast(self.image_colors, self.logo_colors.primary, self.glow_color, self.min_ratio)

    def to_dict(self) -> dict[str, Any]:
        return {
            'imageColors': list(self.image_colors),
            'logoColors': {
                'primary': self.logo_colors.primary,
                'secondary': self.logo_colors.secondary,
                'accent': list(self.logo_colors.accent),
            },
            'glowColor': self.glow_color,
            'backgroundColor': self.background_color,
            'minRatio': self.min_ratio,
            'probeAlpha': self.probe_alpha,
        }


def parse_context_string(
    text: str,
    min_ratio: float | None = None,
    probe_alpha: float | None = None,
) -> ColorContext:
    """Parse a JSON colour context. Raises ValueError if it is not a JSON object."""
    data = json.loads(text)
    if not isinstance(data, Mapping):
        raise ValueError(f'colour context must be a JSON object, got {type(data).__name__}')
    return ColorContext.from_mapping(data, min_ratio=min_ratio, probe_alpha=probe_alpha)


def parse_context_file(
    path: str,
    min_ratio: float | None = None,
    probe_alpha: float | None = None,
) -> ColorContext:
    """Parse a JSON colour context file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_context_string(text, min_ratio=min_ratio, probe_alpha=probe_alpha)
