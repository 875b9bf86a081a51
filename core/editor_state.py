"""
Interior Studio - Editor State
The editor configuration record and its update rules.

Every update returns a new EditorConfiguration; the record itself is frozen.
"""

import dataclasses
import random
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from config import CanvasConfig
from core.catalog import ENUM_FIELDS, STYLE_NAMES, Preset


MAX_RANDOM_SEED = 1000000

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class EditorConfiguration:
    # Image settings
    base_image: Optional[str] = None
    target_aspect: str = '16:9'
    output_px_w: int = 1920
    output_px_h: int = 1080
    seed: int = 42
    use_fixed_seed: bool = True

    # Materials
    ceiling_color_hex: str = '#FFFFFF'
    wall_color_hex: str = ''
    wall_texture_image: Optional[str] = None
    cabinet_color_hex: str = ''
    cabinet_texture_image: Optional[str] = None
    wood_grain_direction: str = 'vertical'
    floor_material: str = ''
    floor_texture_image: Optional[str] = None
    roughness: float = 0.4
    glossiness: float = 0.35

    # Lighting
    light_color_hex: str = ''
    light_temp_k: int = 4000
    use_light_temp: bool = True
    light_intensity: float = 0.6
    lamp_style: str = ''
    shadow_softness: float = 0.5
    contact_shadows: bool = True

    # Bathroom
    bathroom_replace: bool = False
    bath_style: str = ''
    fixture_color_hex: str = '#FFFFFF'

    # Masking
    mask_mode: str = 'auto'
    mask_image: Optional[str] = None
    negative_prompts: str = 'cartoon, over-saturated, plastic, distorted perspective'

    # Style and ambiance
    selected_style: str = ''
    night_mode: bool = False

    # Cinematic effects
    cinematic_look: str = ''
    film_grain: float = 0.1
    vignette: float = 0.2
    bloom: float = 0.15
    lens_flare: bool = False


DEFAULT_CONFIG = EditorConfiguration()

FILE_FIELDS = (
    'base_image',
    'wall_texture_image',
    'cabinet_texture_image',
    'floor_texture_image',
    'mask_image',
)

INT_FIELDS = ('output_px_w', 'output_px_h', 'seed', 'light_temp_k')
FLOAT_FIELDS = (
    'roughness', 'glossiness', 'light_intensity', 'shadow_softness',
    'film_grain', 'vignette', 'bloom',
)
BOOL_FIELDS = (
    'use_fixed_seed', 'use_light_temp', 'contact_shadows',
    'bathroom_replace', 'night_mode', 'lens_flare',
)

FIELD_NAMES = tuple(f.name for f in dataclasses.fields(EditorConfiguration))


def derive_output_size(aspect: str) -> Optional[Tuple[int, int]]:
    """
    Pixel size for an aspect ratio string such as '16:9' or '2.39:1'.

    Width is pinned to CanvasConfig.BASE_WIDTH; height is rounded.
    Returns None when the ratio cannot be parsed.
    """
    try:
        w_str, h_str = aspect.split(':')
        w, h = float(w_str), float(h_str)
    except (AttributeError, ValueError):
        return None
    if not w or not h:
        return None
    base = CanvasConfig.BASE_WIDTH
    # Round half up
    return base, int(base * h / w + 0.5)


def is_hex_color(value: str) -> bool:
    return bool(value) and bool(_HEX_COLOR_RE.match(value))


def _coerce(field_name: str, value):
    if field_name in INT_FIELDS:
        return int(round(float(value))) if value is not None else 0
    if field_name in FLOAT_FIELDS:
        return float(value) if value is not None else 0.0
    if field_name in BOOL_FIELDS:
        return bool(value)
    if value is None:
        return ''
    return str(value)


def update_field(config: EditorConfiguration, field_name: str, value) -> EditorConfiguration:
    """
    Set a single non-file field.

    Args:
        config: Current configuration
        field_name: Field identifier (attribute name)
        value: New value, coerced to the field's type

    Returns:
        EditorConfiguration: New record; aspect changes re-derive the pixel size

    Raises:
        KeyError: Unknown field, or a file field (use update_file)
        ValueError: Value outside an enumerated field's domain
    """
    if field_name not in FIELD_NAMES or field_name in FILE_FIELDS:
        raise KeyError(field_name)

    value = _coerce(field_name, value)

    if field_name in ENUM_FIELDS:
        options, allow_empty = ENUM_FIELDS[field_name]
        if value not in options and not (allow_empty and value == ''):
            raise ValueError(f"Invalid value for {field_name}: {value!r}")

    if field_name == 'selected_style' and value and value not in STYLE_NAMES:
        raise ValueError(f"Unknown style: {value!r}")

    changes = {field_name: value}
    if field_name == 'target_aspect':
        size = derive_output_size(value)
        if size:
            changes['output_px_w'], changes['output_px_h'] = size

    return dataclasses.replace(config, **changes)


def update_file(config: EditorConfiguration, field_name: str, path: Optional[str]) -> EditorConfiguration:
    """Attach or clear (path=None) one of the image fields."""
    if field_name not in FILE_FIELDS:
        raise KeyError(field_name)
    return dataclasses.replace(config, **{field_name: path or None})


def apply_preset(config: EditorConfiguration, preset: Preset) -> EditorConfiguration:
    """Merge the preset's fields over the config and clear the selected style."""
    changes = {}
    for name, value in preset.settings.items():
        if name not in FIELD_NAMES:
            raise KeyError(name)
        changes[name] = value
    changes['selected_style'] = ''
    return dataclasses.replace(config, **changes)


def resolve_submission_seed(config: EditorConfiguration, rng: Optional[random.Random] = None) -> EditorConfiguration:
    """
    Copy of the config to send with a submission.

    When the seed is not fixed, the copy carries a fresh random seed.
    The caller's record is left untouched.
    """
    if config.use_fixed_seed:
        return config
    rng = rng or random
    return dataclasses.replace(config, seed=rng.randrange(MAX_RANDOM_SEED))
