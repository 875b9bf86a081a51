"""
Interior Studio - Gemini Client
Packages the editor configuration into one multi-part request for the
image model and parses the reply.

Handles:
  - API client creation from an explicit key or the environment
  - Ordered request parts: base image, texture/mask attachments, prompt
  - Reply parsing: first inline image plus a fenced ```json metadata block
"""

import base64
import json
import re
import sys
import traceback
from dataclasses import dataclass
from typing import List, Optional

from google import genai
from google.genai import types

from config import ModelConfig
from core.editor_state import EditorConfiguration
from core.errors import (
    ConfigurationError,
    MalformedMetadataError,
    MissingInputError,
    RemoteCallError,
)
from core.image_io import load_image_part
from core.prompt_builder import attachment_caption, build_prompt


LOG_TAG = "[Gemini Client]"

_JSON_FENCE_RE = re.compile(r"```json\n([\s\S]*?)\n```")

# (attachment kind, config field) in request order
TEXTURE_ATTACHMENTS = (
    ('wall_texture', 'wall_texture_image'),
    ('cabinet_texture', 'cabinet_texture_image'),
    ('floor_texture', 'floor_texture_image'),
)


@dataclass
class GenerationResult:
    image_b64: Optional[str] = None
    metadata: Optional[dict] = None
    text: str = ""


# ---------------------------------------------------------------------------
# Client helpers
# ---------------------------------------------------------------------------
def get_gemini_client(api_key: str = "") -> genai.Client:
    """
    Create a `genai.Client`.
    Priority: explicit key → GEMINI_API_KEY → API_KEY env-var.
    """
    key = api_key.strip() if api_key else ""
    if not key:
        key = ModelConfig.get_env_api_key()
    if not key:
        raise ConfigurationError(
            "No API key found. Set GEMINI_API_KEY (or API_KEY) in the environment."
        )
    return genai.Client(api_key=key)


def _to_remote_error(exc: Exception) -> RemoteCallError:
    """Map common API failures to a user-facing message key."""
    msg = str(exc)
    low = msg.lower()
    print(f"{LOG_TAG} Error: {msg}", file=sys.stderr)
    print(f"{LOG_TAG} Traceback:\n{traceback.format_exc()}", file=sys.stderr)

    if "API_KEY_INVALID" in msg or "API key not valid" in msg:
        return RemoteCallError(msg, 'error_api_key_invalid')
    if "UNAUTHENTICATED" in msg:
        return RemoteCallError(msg, 'error_unauthenticated')
    if "RESOURCE_EXHAUSTED" in msg or "quota" in low:
        return RemoteCallError(msg, 'error_quota')
    if "PERMISSION_DENIED" in msg:
        return RemoteCallError(msg, 'error_permission')
    if "rate limit" in low or "429" in msg:
        return RemoteCallError(msg, 'error_rate_limit')
    if "safety" in low or "blocked" in low:
        return RemoteCallError(msg, 'error_safety')
    return RemoteCallError(msg)


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------
def build_contents(config: EditorConfiguration, language: str) -> List[types.Part]:
    """
    Ordered request parts.

    Base image first; each present texture preceded by its caption; the mask
    (manual mode only) preceded by its caption; the prompt text last.
    """
    if not config.base_image:
        raise MissingInputError("Base image is missing.")

    parts = [load_image_part(config.base_image)]

    for kind, field_name in TEXTURE_ATTACHMENTS:
        path = getattr(config, field_name)
        if path:
            parts.append(types.Part.from_text(text=attachment_caption(kind, language)))
            parts.append(load_image_part(path))

    if config.mask_mode == 'manual' and config.mask_image:
        parts.append(types.Part.from_text(text=attachment_caption('mask', language)))
        parts.append(load_image_part(config.mask_image))

    parts.append(types.Part.from_text(text=build_prompt(config, language)))
    return parts


def build_generation_config(config: EditorConfiguration) -> types.GenerateContentConfig:
    """Request both image and text back; pass the seed and, when supported, the aspect ratio."""
    kwargs = {
        "response_modalities": list(ModelConfig.RESPONSE_MODALITIES),
        "seed": config.seed,
    }
    if config.target_aspect in ModelConfig.NATIVE_ASPECT_RATIOS:
        kwargs["image_config"] = types.ImageConfig(aspect_ratio=config.target_aspect)
    return types.GenerateContentConfig(**kwargs)


# ---------------------------------------------------------------------------
# Reply parsing
# ---------------------------------------------------------------------------
def extract_json_metadata(text: str) -> Optional[dict]:
    """
    Parse the first ```json fenced block in *text*.

    Returns None when there is no fenced block.

    Raises:
        MalformedMetadataError: Block present but not a JSON object
    """
    if not text:
        return None
    match = _JSON_FENCE_RE.search(text)
    if not match:
        return None
    try:
        data = json.loads(match.group(1))
    except ValueError as exc:
        raise MalformedMetadataError(str(exc)) from exc
    if not isinstance(data, dict):
        raise MalformedMetadataError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _inline_bytes(part) -> Optional[bytes]:
    inline = getattr(part, "inline_data", None)
    if inline is None:
        return None
    data = getattr(inline, "data", None)
    if isinstance(data, str):
        data = base64.b64decode(data)
    return data or None


def parse_generation_response(response) -> GenerationResult:
    """
    Walk the first candidate's parts.

    The first inline image becomes the result image. Text parts are joined
    and scanned for metadata; unparsable metadata is logged and dropped
    because the image may still be valid.
    """
    result = GenerationResult()
    candidates = getattr(response, "candidates", None) if response else None
    if not candidates:
        return result

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []

    texts = []
    for part in parts:
        data = _inline_bytes(part)
        if data is not None:
            if result.image_b64 is None:
                result.image_b64 = base64.b64encode(data).decode("ascii")
            continue

        text = getattr(part, "text", None)
        if not text:
            continue
        texts.append(text)
        if result.metadata is None:
            try:
                result.metadata = extract_json_metadata(text)
            except MalformedMetadataError as exc:
                print(f"{LOG_TAG} Failed to parse JSON from model response: {exc.detail}")

    result.text = "\n".join(texts)
    return result


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def generate_image_edit(
    config: EditorConfiguration,
    language: str,
    client: Optional[genai.Client] = None,
) -> GenerationResult:
    """
    Send one edit request for *config*.

    Args:
        config: Editor configuration; base_image is required
        language: Prompt language ('en' or 'zh')
        client: Optional pre-built client (the environment key is used otherwise)

    Returns:
        GenerationResult: image_b64 is None when the model returned no image

    Raises:
        MissingInputError: No base image
        ConfigurationError: No API key available
        ImageReadError: An attached file could not be read
        RemoteCallError: The request failed
    """
    if not config.base_image:
        raise MissingInputError("Base image is missing.")

    if client is None:
        client = get_gemini_client()

    contents = build_contents(config, language)
    model_name = ModelConfig.get_model_name()

    print(f"{LOG_TAG} Model: {model_name} | Parts: {len(contents)} | "
          f"AR: {config.target_aspect} | Seed: {config.seed} | Lang: {language}")

    try:
        response = client.models.generate_content(
            model=model_name,
            contents=contents,
            config=build_generation_config(config),
        )
    except Exception as exc:
        raise _to_remote_error(exc) from exc

    result = parse_generation_response(response)
    print(f"{LOG_TAG} Image: {'yes' if result.image_b64 else 'no'} | "
          f"Metadata: {'yes' if result.metadata else 'no'}")
    return result
