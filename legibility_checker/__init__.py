"""legibility-tool: readable text and logo colours over arbitrary images."""

from legibility_checker.core.advisor import check_logo_contrast
from legibility_checker.core.blend import blend_colors, probe_extremes
from legibility_checker.core.color import Color, contrast_ratio, parse_color, relative_luminance
from legibility_checker.core.context import ColorContext
from legibility_checker.core.contrast import complementary_color, ensure_contrast, select_text_color
from legibility_checker.core.decor import decor_positions
from legibility_checker.core.types import ContrastDecision, LegibilityAdvisory, LogoColors, LogoEffect

__all__ = [
    'Color',
    'ColorContext',
    'ContrastDecision',
    'LegibilityAdvisory',
    'LogoColors',
    'LogoEffect',
    'blend_colors',
    'check_logo_contrast',
    'complementary_color',
    'contrast_ratio',
    'decor_positions',
    'ensure_contrast',
    'parse_color',
    'probe_extremes',
    'relative_luminance',
    'select_text_color',
]
