"""Tests for legibility_checker.core.context: the per-render ColorContext."""

import dataclasses
import json
from pathlib import Path

import pytest
from legibility_checker.core.blend import probe_extremes
from legibility_checker.core.color import contrast_ratio
from legibility_checker.core.context import (
    DEFAULT_IMAGE_COLORS,
    DEFAULT_LOGO_COLORS,
    ColorContext,
    parse_context_file,
    parse_context_string,
)

DARK_SLIDE = {
    'imageColors': ['#202020', '#1a1a1a'],
    'logoColors': {'primary': '#101010', 'secondary': '#50E3C2', 'accent': ['#F5A623']},
    'glowColor': '#ff0000',
}


class TestFromMapping:
    def test_empty_gives_defaults(self):
        ctx = ColorContext.from_mapping({})
        assert ctx == ColorContext()
        assert ctx.image_colors == DEFAULT_IMAGE_COLORS
        assert ctx.logo_colors == DEFAULT_LOGO_COLORS
        assert ctx.glow_color == '#FF5733'
        assert ctx.min_ratio == 4.5

    def test_camel_case(self):
        ctx = ColorContext.from_mapping(DARK_SLIDE)
        assert ctx.image_colors == ('#202020', '#1A1A1A')
        assert ctx.logo_colors.primary == '#101010'
        assert ctx.logo_colors.accent == ('#F5A623',)
        assert ctx.glow_color == '#FF0000'

    def test_snake_case(self):
        ctx = ColorContext.from_mapping({'image_colors': ['#000'], 'glow_color': '#fff', 'min_ratio': 7})
        assert ctx.image_colors == ('#000000',)
        assert ctx.glow_color == '#FFFFFF'
        assert ctx.min_ratio == 7.0

    def test_invalid_colours_become_white(self):
        ctx = ColorContext.from_mapping({'imageColors': ['#000000', 'nope'], 'glowColor': 12})
        assert ctx.image_colors == ('#000000', '#FFFFFF')
        assert ctx.glow_color == '#FFFFFF'

    def test_bad_shapes_use_defaults(self):
        ctx = ColorContext.from_mapping({'imageColors': 5, 'logoColors': 'red', 'probeAlpha': 'x'})
        assert ctx.image_colors == DEFAULT_IMAGE_COLORS
        assert ctx.logo_colors == DEFAULT_LOGO_COLORS
        assert ctx.probe_alpha == 0.5

    def test_non_finite_probe_alpha_uses_default(self):
        ctx = ColorContext.from_mapping({'probeAlpha': 'nan'})
        assert ctx.probe_alpha == 0.5
        assert ctx.text_color() == ColorContext().text_color()
        assert ColorContext.from_mapping({}, probe_alpha=float('inf')).probe_alpha == 0.5

    def test_explicit_overrides(self):
        ctx = ColorContext.from_mapping({'minRatio': 3}, min_ratio=7, probe_alpha=0.25)
        assert ctx.min_ratio == 7.0
        assert ctx.probe_alpha == 0.25

    def test_frozen(self):
        ctx = ColorContext()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.glow_color = '#000000'  # type: ignore[misc]


class TestDecisions:
    def test_text_colour_from_probes(self):
        ctx = ColorContext()
        dark, light = probe_extremes('#4A90E2', '#50E3C2')
        decision = ctx.text_color()
        # the dark probe already reads on the light one
        assert decision.suggested_text_color == dark
        assert contrast_ratio(dark, light) >= 4.5

    @pytest.mark.parametrize(
        'palette',
        [['#202020', '#1a1a1a'], ['#FFFFFF'], ['#808080', '#7A7A7A'], [], ['#FF0000', '#00FF00', '#0000FF']],
    )
    def test_text_colour_always_legible_on_light_probe(self, palette: list[str]) -> None:
        ctx = ColorContext.from_mapping({'imageColors': palette})
        first = ctx.dominant_color
        second = ctx.image_colors[1] if len(ctx.image_colors) > 1 else first
        _dark, light = probe_extremes(first, second)
        assert contrast_ratio(ctx.text_color().suggested_text_color, light) >= 4.5

    def test_empty_palette_uses_background(self):
        ctx = ColorContext.from_mapping({'imageColors': [], 'backgroundColor': '#123456'})
        assert ctx.dominant_color == '#123456'

    def test_footer_colour(self):
        ctx = ColorContext.from_mapping(DARK_SLIDE)
        decision = ctx.footer_color()
        assert contrast_ratio(decision.suggested_text_color, '#202020') >= 4.5

    def test_ensure_contrast_default_backdrop(self):
        ctx = ColorContext.from_mapping({'backgroundColor': '#000000'})
        assert ctx.ensure_contrast('#000000').suggested_text_color == '#FFFFFF'

    def test_ensure_contrast_uses_context_ratio(self):
        ctx = ColorContext.from_mapping({'minRatio': 7})
        assert ctx.ensure_contrast('#767676', '#FFFFFF').suggested_text_color == '#000000'

    def test_logo_advisory(self):
        advisory = ColorContext.from_mapping(DARK_SLIDE).logo_advisory()
        assert advisory.needs_enhancement is True
        assert advisory.suggested_logo_effect.border == '2px solid #FF0000'

    def test_to_dict_round_trips(self):
        ctx = ColorContext.from_mapping(DARK_SLIDE)
        assert ColorContext.from_mapping(ctx.to_dict()) == ctx


class TestParseContext:
    def test_string(self):
        ctx = parse_context_string(json.dumps(DARK_SLIDE))
        assert ctx.logo_colors.primary == '#101010'

    def test_not_an_object(self):
        with pytest.raises(ValueError, match='JSON object'):
            parse_context_string('["#000000"]')

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            parse_context_string('{not json')

    def test_file(self, tmp_path: Path) -> None:
        f = tmp_path / 'slide.json'
        f.write_text(json.dumps(DARK_SLIDE))
        ctx = parse_context_file(str(f), min_ratio=3)
        assert ctx.min_ratio == 3.0
        assert ctx.image_colors[0] == '#202020'
