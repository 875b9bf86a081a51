"""Unit tests for the prompt builder (core/prompt_builder.py)."""

import pytest

from core.editor_state import DEFAULT_CONFIG, update_field
from core.gemini_client import extract_json_metadata
from core.prompt_builder import (
    FIXED_NEGATIVE_TERMS,
    PHRASES,
    attachment_caption,
    build_prompt,
    build_summary_template,
    format_number,
)

NIGHT_CLAUSE = "Illumination MUST ONLY come from artificial light sources"


def _config(**changes):
    config = DEFAULT_CONFIG
    for name, value in changes.items():
        config = update_field(config, name, value)
    return config


@pytest.fixture
def zen_night_config():
    return _config(target_aspect='16:9', bloom=0.15, night_mode=True, selected_style='Zen')


# =========================================================================
# 1. Example configuration
# =========================================================================

class TestExampleConfiguration:

    def test_contains_aspect_bloom_and_night(self, zen_night_config):
        prompt = build_prompt(zen_night_config, 'en')
        assert "**16:9**" in prompt
        assert "intensity of approximately 0.15" in prompt
        assert NIGHT_CLAUSE in prompt
        assert "'Zen'" in prompt

    def test_embedded_summary(self, zen_night_config):
        prompt = build_prompt(zen_night_config, 'en')
        summary = extract_json_metadata(prompt)
        assert summary["applied_style"] == "Zen"
        assert summary["ambiance"] == "night"
        assert summary["cinematic_effects"]["bloom"] == 0.15

    def test_prompt_ends_with_fence(self, zen_night_config):
        assert build_prompt(zen_night_config).endswith("```")


# =========================================================================
# 2. Clauses
# =========================================================================

class TestClauses:

    def test_day_mode_has_no_night_clause(self):
        prompt = build_prompt(DEFAULT_CONFIG, 'en')
        assert NIGHT_CLAUSE not in prompt
        assert "bright, natural daylight" in prompt

    @pytest.mark.parametrize("lang", ['en', 'zh'])
    @pytest.mark.parametrize("field_name,phrase", [
        ('bloom', 'bloom'),
        ('vignette', 'vignette'),
        ('film_grain', 'grain'),
    ])
    def test_zero_effect_uses_off_phrasing(self, field_name, phrase, lang):
        prompt = build_prompt(_config(**{field_name: 0}), lang)
        assert PHRASES[lang][f'{phrase}_off'] in prompt
        assert PHRASES[lang][f'{phrase}_on'].split('{value}')[0] not in prompt

    @pytest.mark.parametrize("lang", ['en', 'zh'])
    @pytest.mark.parametrize("field_name,phrase,value,shown", [
        ('bloom', 'bloom', 0.35, '0.35'),
        ('vignette', 'vignette', 0.4, '0.4'),
        ('film_grain', 'grain', 0.05, '0.05'),
        ('vignette', 'vignette', 1.0, '1'),
    ])
    def test_positive_effect_uses_on_phrasing(self, field_name, phrase, value, shown, lang):
        prompt = build_prompt(_config(**{field_name: value}), lang)
        assert PHRASES[lang][f'{phrase}_on'].format(value=shown) in prompt
        assert PHRASES[lang][f'{phrase}_off'] not in prompt

    @pytest.mark.parametrize("lang", ['en', 'zh'])
    def test_lens_flare_phrasing(self, lang):
        off_prompt = build_prompt(_config(lens_flare=False), lang)
        assert PHRASES[lang]['flare_off'] in off_prompt
        assert PHRASES[lang]['flare_on'] not in off_prompt
        on_prompt = build_prompt(_config(lens_flare=True), lang)
        assert PHRASES[lang]['flare_on'] in on_prompt
        assert PHRASES[lang]['flare_off'] not in on_prompt

    def test_light_temperature_vs_color(self):
        assert "Primary light temperature: 4000K." in build_prompt(DEFAULT_CONFIG)
        config = _config(use_light_temp=False, light_color_hex='#FFD8A8')
        prompt = build_prompt(config)
        assert "Primary light color: #FFD8A8." in prompt
        assert "light temperature" not in prompt

    def test_bathroom_clause(self):
        assert "Do not modify bathroom fixtures." in build_prompt(DEFAULT_CONFIG)
        config = _config(bathroom_replace=True, bath_style='classic', fixture_color_hex='#C0C0C0')
        assert "**'classic'** style, colored **#C0C0C0**" in build_prompt(config)

    def test_empty_values_use_neutral_clauses(self):
        prompt = build_prompt(DEFAULT_CONFIG)
        assert "No specific wall color." in prompt
        assert "No specific floor material." in prompt
        assert "Use subtle, integrated lighting." in prompt
        assert "Apply standard professional color grading" in prompt
        assert "'modern'" in prompt

    def test_cinematic_look(self):
        prompt = build_prompt(_config(cinematic_look='teal_orange'))
        assert "Apply a professional 'teal orange' cinematic color grade." in prompt

    def test_negative_prompts_include_fixed_terms(self):
        prompt = build_prompt(_config(negative_prompts='blurry'))
        assert f"blurry, {FIXED_NEGATIVE_TERMS['en']}." in prompt


# =========================================================================
# 3. Languages
# =========================================================================

class TestLanguages:

    def test_chinese_prompt(self, zen_night_config):
        prompt = build_prompt(zen_night_config, 'zh')
        assert "首要指令" in prompt
        assert "照明「只能」來自房間內部的人造光源" in prompt
        assert "強度約為 0.15" in prompt
        assert NIGHT_CLAUSE not in prompt

    def test_chinese_summary_matches_english(self, zen_night_config):
        en = extract_json_metadata(build_prompt(zen_night_config, 'en'))
        zh = extract_json_metadata(build_prompt(zen_night_config, 'zh'))
        assert en == zh

    def test_unknown_language_falls_back_to_english(self):
        assert build_prompt(DEFAULT_CONFIG, 'fr') == build_prompt(DEFAULT_CONFIG, 'en')

    @pytest.mark.parametrize("kind", ['wall_texture', 'cabinet_texture', 'floor_texture', 'mask'])
    def test_captions_exist_in_both_languages(self, kind):
        assert attachment_caption(kind, 'en')
        assert attachment_caption(kind, 'zh')
        assert attachment_caption(kind, 'en') != attachment_caption(kind, 'zh')


# =========================================================================
# 4. Helpers
# =========================================================================

class TestHelpers:

    @pytest.mark.parametrize("value,expected", [
        (1.0, '1'),
        (0.15, '0.15'),
        (4000, '4000'),
        (True, 'true'),
        (False, 'false'),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_summary_template_defaults(self):
        summary = build_summary_template(DEFAULT_CONFIG)
        assert summary["applied_style"] == "modern"
        assert summary["ambiance"] == "day"
        assert summary["materials"]["wall_color"] == "unchanged"
        assert summary["lighting"] == {
            "type": "temperature",
            "value": "4000",
            "intensity": 0.6,
            "shadow_softness": 0.5,
            "contact_shadows": True,
        }
        assert summary["cinematic_effects"]["look"] == "none"

    def test_summary_numbers_match_prompt(self):
        config = _config(light_intensity=1.0, bloom=0.0, vignette=0.25)
        prompt = build_prompt(config, 'en')
        summary = extract_json_metadata(prompt)
        assert "Intensity: **1**." in prompt
        assert summary["lighting"]["intensity"] == 1
        assert isinstance(summary["lighting"]["intensity"], int)
        assert summary["cinematic_effects"]["bloom"] == 0
        assert summary["cinematic_effects"]["vignette"] == 0.25
        assert '"intensity": 1,' in prompt
