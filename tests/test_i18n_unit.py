"""Unit tests for the translation table (core/i18n.py)."""

import pytest

from core import errors
from core.catalog import ENUM_FIELDS, PRESETS, STYLE_NAMES
from core.i18n import I18n

REMOTE_ERROR_KEYS = (
    'error_api_key_invalid',
    'error_unauthenticated',
    'error_quota',
    'error_permission',
    'error_rate_limit',
    'error_safety',
)


class TestCompleteness:

    @pytest.mark.parametrize("key", sorted(I18n.TEXTS))
    def test_every_key_has_both_languages(self, key):
        entry = I18n.TEXTS[key]
        assert entry.get('en')
        assert entry.get('zh')

    @pytest.mark.parametrize("cls", [
        errors.StudioError,
        errors.MissingInputError,
        errors.ConfigurationError,
        errors.ImageReadError,
        errors.RemoteCallError,
        errors.PartialResponseError,
        errors.MalformedMetadataError,
    ])
    def test_error_classes_have_messages(self, cls):
        assert cls.message_key in I18n.TEXTS

    @pytest.mark.parametrize("key", REMOTE_ERROR_KEYS)
    def test_remote_error_keys(self, key):
        assert key in I18n.TEXTS

    def test_styles_and_presets_translated(self):
        for name in STYLE_NAMES:
            assert f"style_{name}" in I18n.TEXTS
        for preset in PRESETS:
            assert f"preset_{preset.name}" in I18n.TEXTS

    def test_enum_options_translated(self):
        for field_name, (options, _) in ENUM_FIELDS.items():
            if field_name == 'target_aspect':
                continue
            for option in options:
                assert f"{field_name}_{option}" in I18n.TEXTS, (field_name, option)


class TestLookup:

    def test_get(self):
        assert I18n.get('night_mode', 'en') == 'Night Mode'
        assert I18n.get('night_mode', 'zh') == '夜間模式'

    def test_unknown_key_returns_key(self):
        assert I18n.get('no_such_key', 'en') == 'no_such_key'

    def test_unknown_language_falls_back_to_english(self):
        assert I18n.get('night_mode', 'fr') == 'Night Mode'

    def test_get_all(self):
        texts = I18n.get_all('zh')
        assert set(texts) == set(I18n.TEXTS)
        assert texts['generate_btn'] == I18n.get('generate_btn', 'zh')

    def test_option_label(self):
        assert I18n.option_label('floor_material', 'marble', 'en') == 'Marble'
        assert I18n.option_label('floor_material', '', 'zh') == I18n.get('none', 'zh')
        assert I18n.option_label('target_aspect', '16:9', 'en') == '16:9'
