"""Unit tests for the submission lifecycle (core/session.py)."""

import random

import pytest

from core.editor_state import DEFAULT_CONFIG, update_field, update_file
from core.errors import ConfigurationError, MissingInputError, RemoteCallError
from core.gemini_client import GenerationResult
from core.i18n import I18n
from core.session import (
    SubmissionStatus,
    begin_submission,
    error_message,
    run_submission,
)


def _returning(result):
    calls = []

    def generate(config, lang):
        calls.append((config, lang))
        return result
    generate.calls = calls
    return generate


def _raising(exc):
    def generate(config, lang):
        raise exc
    return generate


@pytest.fixture
def config():
    return update_file(DEFAULT_CONFIG, 'base_image', '/tmp/room.png')


class TestBeginSubmission:

    def test_clears_previous_state(self):
        outcome = begin_submission()
        assert outcome.status == SubmissionStatus.SUBMITTING
        assert outcome.result is None
        assert outcome.error is None


class TestRunSubmission:

    def test_success(self, config):
        generate = _returning(GenerationResult(image_b64="aGVsbG8=", metadata={"ambiance": "day"}))
        outcome = run_submission(config, 'en', generate=generate)
        assert outcome.status == SubmissionStatus.SUCCEEDED
        assert outcome.image_b64 == "aGVsbG8="
        assert outcome.metadata == {"ambiance": "day"}
        assert outcome.error is None
        assert outcome.seed == 42

    def test_language_passed_through(self, config):
        generate = _returning(GenerationResult(image_b64="aGVsbG8="))
        run_submission(config, 'zh', generate=generate)
        assert generate.calls[0][1] == 'zh'

    def test_missing_input_message(self):
        outcome = run_submission(DEFAULT_CONFIG, 'en', generate=_raising(MissingInputError()))
        assert outcome.status == SubmissionStatus.FAILED
        assert outcome.error == I18n.get('error_base_image_missing', 'en')

    def test_configuration_error_localized(self, config):
        outcome = run_submission(config, 'zh', generate=_raising(ConfigurationError("no key")))
        assert outcome.error == I18n.get('error_api_key_missing', 'zh')

    def test_remote_error_uses_mapped_key(self, config):
        exc = RemoteCallError("429 RESOURCE_EXHAUSTED", 'error_quota')
        outcome = run_submission(config, 'en', generate=_raising(exc))
        assert outcome.status == SubmissionStatus.FAILED
        assert outcome.error == I18n.get('error_quota', 'en')

    def test_unexpected_exception_becomes_message(self, config):
        outcome = run_submission(config, 'en', generate=_raising(ValueError("boom")))
        assert outcome.status == SubmissionStatus.FAILED
        assert outcome.error == "boom"

    def test_unexpected_exception_without_text(self, config):
        outcome = run_submission(config, 'en', generate=_raising(RuntimeError()))
        assert outcome.error == I18n.get('error_unknown', 'en')

    def test_no_image_with_metadata(self, config):
        generate = _returning(GenerationResult(metadata={"ambiance": "night"}))
        outcome = run_submission(config, 'en', generate=generate)
        assert outcome.status == SubmissionStatus.SUCCEEDED
        assert outcome.image_b64 is None
        assert outcome.metadata == {"ambiance": "night"}
        assert outcome.error == I18n.get('error_model_no_image', 'en')

    def test_empty_reply_fails(self, config):
        outcome = run_submission(config, 'en', generate=_returning(GenerationResult()))
        assert outcome.status == SubmissionStatus.FAILED
        assert outcome.error == I18n.get('error_model_no_image', 'en')

    def test_random_seed_used_once(self, config):
        config = update_field(config, 'use_fixed_seed', False)
        generate = _returning(GenerationResult(image_b64="aGVsbG8="))
        outcome = run_submission(config, 'en', generate=generate, rng=random.Random(3))
        sent = generate.calls[0][0]
        assert outcome.seed == sent.seed
        assert config.seed == 42


class TestErrorMessage:

    def test_falls_back_to_english(self):
        assert error_message(MissingInputError(), 'fr') == I18n.get('error_base_image_missing', 'en')
