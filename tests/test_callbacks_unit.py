"""Unit tests for UI callbacks (ui/callbacks.py).

Callbacks are plain functions returning gr.update() dicts, so they are
exercised directly without launching the app.
"""

import base64
import json
import os
from io import BytesIO
from types import SimpleNamespace

import pytest
from PIL import Image

from config import ServerConfig
from core.catalog import INTERIOR_STYLES
from core.editor_state import DEFAULT_CONFIG, update_file
from core.gemini_client import GenerationResult
from core.i18n import I18n
from core.session import SubmissionStatus
from ui.callbacks import (
    FORM_BINDINGS,
    form_updates,
    format_metadata,
    make_color_pick_handler,
    make_color_text_handler,
    normalize_color,
    on_aspect_change,
    on_base_image_change,
    on_bathroom_toggle,
    on_field_input,
    on_fixed_seed_toggle,
    on_generate,
    on_light_temp_toggle,
    on_mask_mode_change,
    on_preset,
    on_style_clear,
    on_style_select,
    option_choices,
)


def _png_b64():
    buf = BytesIO()
    Image.new('RGB', (4, 4), (120, 90, 60)).save(buf, format='PNG')
    return base64.b64encode(buf.getvalue()).decode('ascii')


# =========================================================================
# 1. Field inputs
# =========================================================================

class TestFieldInputs:

    def test_generic_update(self):
        config = on_field_input('roughness', DEFAULT_CONFIG, 0.8)
        assert config.roughness == 0.8

    def test_invalid_value_keeps_config(self):
        assert on_field_input('floor_material', DEFAULT_CONFIG, 'carpet') is DEFAULT_CONFIG

    def test_aspect_change_updates_readout(self):
        config, size, dropdown = on_aspect_change(DEFAULT_CONFIG, '4:3', 'en')
        assert (config.output_px_w, config.output_px_h) == (1920, 1440)
        assert '1920 × 1440' in size['value']
        assert '1600×1200' in dropdown['info']

    def test_fixed_seed_toggle(self):
        config, seed = on_fixed_seed_toggle(DEFAULT_CONFIG, False)
        assert config.use_fixed_seed is False
        assert seed['interactive'] is False

    def test_light_temp_locks_light_color(self):
        config, text, picker = on_light_temp_toggle(DEFAULT_CONFIG, True)
        assert text['interactive'] is False and picker['interactive'] is False
        config, text, picker = on_light_temp_toggle(config, False)
        assert text['interactive'] is True and picker['interactive'] is True

    def test_bathroom_toggle_visibility(self):
        config, group = on_bathroom_toggle(DEFAULT_CONFIG, True)
        assert config.bathroom_replace is True
        assert group['visible'] is True

    def test_mask_mode_visibility(self):
        _, upload = on_mask_mode_change(DEFAULT_CONFIG, 'manual')
        assert upload['visible'] is True
        _, upload = on_mask_mode_change(DEFAULT_CONFIG, 'auto')
        assert upload['visible'] is False


class TestColorSync:

    def test_text_syncs_picker_when_complete(self):
        config, picker = make_color_text_handler('wall_color_hex')(DEFAULT_CONFIG, '#112233')
        assert config.wall_color_hex == '#112233'
        assert picker['value'] == '#112233'

    def test_partial_text_leaves_picker(self):
        config, picker = make_color_text_handler('wall_color_hex')(DEFAULT_CONFIG, '#11')
        assert config.wall_color_hex == '#11'
        assert 'value' not in picker

    def test_picker_syncs_text(self):
        config, text = make_color_pick_handler('ceiling_color_hex')(DEFAULT_CONFIG, '#aabbcc')
        assert config.ceiling_color_hex == '#AABBCC'
        assert text['value'] == '#AABBCC'

    @pytest.mark.parametrize("value,expected", [
        ('#abcdef', '#ABCDEF'),
        ('rgba(255, 128, 0, 1)', '#FF8000'),
        ('rgb(0,0,0)', '#000000'),
        ('', ''),
        (None, ''),
        ('blue', ''),
    ])
    def test_normalize_color(self, value, expected):
        assert normalize_color(value) == expected


# =========================================================================
# 2. Choices, presets, styles
# =========================================================================

class TestChoicesAndPresets:

    def test_optional_dropdown_has_none(self):
        choices = option_choices('floor_material', 'en')
        assert choices[0] == (I18n.get('none', 'en'), '')
        assert ('Marble', 'marble') in choices

    def test_required_dropdown_has_no_none(self):
        values = [value for _, value in option_choices('mask_mode', 'zh')]
        assert values == ['auto', 'manual']

    def test_form_updates_length(self):
        assert len(form_updates(DEFAULT_CONFIG, 'en')) == len(FORM_BINDINGS) + 4

    def test_preset_updates_form(self):
        result = on_preset('industrial', DEFAULT_CONFIG, 'en')
        config, updates = result[0], result[1:]
        assert config.floor_material == 'concrete'
        assert len(updates) == len(FORM_BINDINGS) + 4
        index = [key for _, key in FORM_BINDINGS].index('textbox_light_color')
        assert updates[index]['value'] == '#FFD8A8'
        assert updates[index]['interactive'] is True

    def test_unknown_preset_changes_nothing(self):
        result = on_preset('baroque', DEFAULT_CONFIG, 'en')
        assert result[0] is DEFAULT_CONFIG

    def test_style_select_and_clear(self):
        evt = SimpleNamespace(index=len(INTERIOR_STYLES) - 1)
        config, readout = on_style_select(DEFAULT_CONFIG, 'en', evt)
        assert config.selected_style == 'Zen'
        assert 'Zen' in readout['value']
        config, readout = on_style_clear(config, 'en')
        assert config.selected_style == ''
        assert I18n.get('none', 'en') in readout['value']


# =========================================================================
# 3. Uploads and generation
# =========================================================================

class TestBaseImagePreview:

    def test_preview_before_result(self):
        config, image = on_base_image_change(DEFAULT_CONFIG, '/tmp/room.png', None)
        assert config.base_image == '/tmp/room.png'
        assert image['value'] == '/tmp/room.png'


class TestGenerate:

    def test_two_states(self, tmp_path, monkeypatch):
        monkeypatch.setattr(ServerConfig, 'DOWNLOAD_DIR', str(tmp_path))
        config = update_file(DEFAULT_CONFIG, 'base_image', '/tmp/room.png')
        metadata = {"applied_style": "Zen", "ambiance": "night"}

        def generate(submitted, lang):
            return GenerationResult(image_b64=_png_b64(), metadata=metadata)

        states = list(on_generate(config, 'en', generate=generate))
        assert len(states) == 2

        btn, status, _, _, _, outcome = states[0]
        assert btn['interactive'] is False
        assert status['value'] == I18n.get('status_loading', 'en')
        assert outcome is None

        btn, status, image, code, download, outcome = states[1]
        assert btn['interactive'] is True
        assert outcome.status == SubmissionStatus.SUCCEEDED
        assert isinstance(image['value'], Image.Image)
        assert json.loads(code['value']) == metadata
        assert os.path.dirname(download['value']) == str(tmp_path)
        assert os.path.basename(download['value']).startswith('interior-design_')

    def test_save_failure_keeps_success(self, monkeypatch):
        def failing_save(image_b64, output_dir=None):
            raise OSError("disk full")
        monkeypatch.setattr('ui.callbacks.save_result_png', failing_save)
        config = update_file(DEFAULT_CONFIG, 'base_image', '/tmp/room.png')

        def generate(submitted, lang):
            return GenerationResult(image_b64=_png_b64(), metadata={"ambiance": "day"})

        _, status, image, code, download, outcome = list(on_generate(config, 'en', generate=generate))[-1]
        assert outcome.status == SubmissionStatus.SUCCEEDED
        assert outcome.error is None
        assert I18n.get('error_model_no_image', 'en') not in status['value']
        assert isinstance(image['value'], Image.Image)
        assert json.loads(code['value']) == {"ambiance": "day"}
        assert download['value'] is None

    def test_undecodable_image_fails(self, tmp_path, monkeypatch):
        monkeypatch.setattr(ServerConfig, 'DOWNLOAD_DIR', str(tmp_path))
        config = update_file(DEFAULT_CONFIG, 'base_image', '/tmp/room.png')

        def generate(submitted, lang):
            return GenerationResult(image_b64=base64.b64encode(b"not a png").decode('ascii'))

        _, status, image, _, download, outcome = list(on_generate(config, 'en', generate=generate))[-1]
        assert outcome.status == SubmissionStatus.FAILED
        assert I18n.get('error_model_no_image', 'en') in status['value']
        assert image['value'] == '/tmp/room.png'
        assert download['value'] is None
        assert os.listdir(tmp_path) == []

    def test_missing_base_image(self):
        states = list(on_generate(DEFAULT_CONFIG, 'en'))
        _, status, image, code, download, outcome = states[-1]
        assert outcome.status == SubmissionStatus.FAILED
        assert I18n.get('error_base_image_missing', 'en') in status['value']
        assert code['value'] is None
        assert download['value'] is None

    def test_format_metadata(self):
        assert format_metadata(None) is None
        assert format_metadata({"a": "禪"}) == '{\n  "a": "禪"\n}'
