"""
Interior Studio - Submission Session
Lifecycle of one generate request, from the click to a displayable outcome.

    IDLE -> SUBMITTING -> SUCCEEDED | FAILED -> IDLE

Every failure ends as a localized message; nothing escapes to the UI.
"""

import random
import sys
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from core.editor_state import EditorConfiguration, resolve_submission_seed
from core.errors import PartialResponseError, StudioError
from core.gemini_client import GenerationResult, generate_image_edit
from core.i18n import I18n


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SubmissionOutcome:
    status: SubmissionStatus
    result: Optional[GenerationResult] = None
    error: Optional[str] = None
    seed: Optional[int] = None

    @property
    def image_b64(self) -> Optional[str]:
        return self.result.image_b64 if self.result else None

    @property
    def metadata(self) -> Optional[dict]:
        return self.result.metadata if self.result else None


def begin_submission() -> SubmissionOutcome:
    """Outcome shown while a request is in flight: previous result and error cleared."""
    return SubmissionOutcome(status=SubmissionStatus.SUBMITTING)


def error_message(exc: StudioError, lang: str) -> str:
    return I18n.get(exc.message_key, lang)


def run_submission(
    config: EditorConfiguration,
    lang: str,
    generate: Callable[[EditorConfiguration, str], GenerationResult] = generate_image_edit,
    rng: Optional[random.Random] = None,
) -> SubmissionOutcome:
    """
    Submit *config* and convert the reply (or failure) into an outcome.

    Args:
        config: Current editor configuration (not modified)
        lang: UI language, also used for the prompt
        generate: Request function, injectable for tests
        rng: Random source for unfixed seeds

    Returns:
        SubmissionOutcome: SUCCEEDED when an image or metadata came back,
        FAILED otherwise; error holds the message to display
    """
    submission = resolve_submission_seed(config, rng)

    try:
        result = generate(submission, lang)
    except StudioError as exc:
        print(f"[Interior Studio] Submission failed: {exc.__class__.__name__}: {exc.detail}")
        return SubmissionOutcome(
            status=SubmissionStatus.FAILED,
            error=error_message(exc, lang),
            seed=submission.seed,
        )
    except Exception as exc:
        print(f"[Interior Studio] Unexpected error: {exc}", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)
        return SubmissionOutcome(
            status=SubmissionStatus.FAILED,
            error=str(exc) or I18n.get('error_unknown', lang),
            seed=submission.seed,
        )

    error = None
    if result.image_b64 is None:
        error = error_message(PartialResponseError(), lang)

    status = SubmissionStatus.SUCCEEDED
    if result.image_b64 is None and result.metadata is None:
        status = SubmissionStatus.FAILED

    return SubmissionOutcome(status=status, result=result, error=error, seed=submission.seed)
