"""
Interior Studio - Catalogs
Static option lists, presets and the interior style catalog
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from config import CanvasConfig


# ═══════════════════════════════════════════════════════════════
# Dropdown option lists
# ═══════════════════════════════════════════════════════════════

ASPECT_RATIOS = CanvasConfig.ASPECT_RATIOS
WOOD_GRAIN_DIRECTIONS = ('vertical', 'horizontal')
FLOOR_MATERIALS = ('wood', 'marble', 'tile', 'concrete')
LAMP_STYLES = ('downlight', 'track', 'chandelier', 'panel')
BATH_STYLES = ('modern', 'minimal', 'classic')
MASK_MODES = ('auto', 'manual')
CINEMATIC_LOOKS = ('teal_orange', 'film_noir', 'vintage_film', 'cyberpunk_neon')

# field -> (options, empty value allowed)
ENUM_FIELDS: Dict[str, Tuple[Tuple[str, ...], bool]] = {
    'target_aspect': (ASPECT_RATIOS, False),
    'wood_grain_direction': (WOOD_GRAIN_DIRECTIONS, False),
    'floor_material': (FLOOR_MATERIALS, True),
    'lamp_style': (LAMP_STYLES, True),
    'bath_style': (BATH_STYLES, True),
    'mask_mode': (MASK_MODES, False),
    'cinematic_look': (CINEMATIC_LOOKS, True),
}

# field -> (minimum, maximum, step)
SLIDER_RANGES: Dict[str, Tuple[float, float, float]] = {
    'roughness': (0, 1, 0.01),
    'glossiness': (0, 1, 0.01),
    'light_temp_k': (1000, 10000, 100),
    'light_intensity': (0, 2, 0.05),
    'shadow_softness': (0, 1, 0.01),
    'bloom': (0, 1, 0.01),
    'vignette': (0, 1, 0.01),
    'film_grain': (0, 1, 0.01),
}


# ═══════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Preset:
    """Named partial configuration overlay."""
    name: str
    settings: Dict[str, object] = field(default_factory=dict)


PRESETS: List[Preset] = [
    Preset(
        name='minimal',
        settings={
            'wall_color_hex': '#F5F5F3',
            'ceiling_color_hex': '#FFFFFF',
            'cabinet_color_hex': '#C6AE8B',
            'wood_grain_direction': 'vertical',
            'floor_material': 'wood',
            'roughness': 0.45,
            'glossiness': 0.25,
            'use_light_temp': True,
            'light_temp_k': 3200,
            'light_intensity': 0.6,
            'lamp_style': 'downlight',
            'target_aspect': '16:9',
            'output_px_w': 1920,
            'output_px_h': 1080,
            'seed': 42,
            'use_fixed_seed': True,
        },
    ),
    Preset(
        name='business',
        settings={
            'wall_color_hex': '#EDEDED',
            'ceiling_color_hex': '#FFFFFF',
            'cabinet_color_hex': '#3A3A3A',
            'floor_material': 'marble',
            'glossiness': 0.6,
            'use_light_temp': True,
            'light_temp_k': 3800,
            'lamp_style': 'panel',
            'light_intensity': 0.55,
            'seed': 101,
            'use_fixed_seed': True,
        },
    ),
    Preset(
        name='industrial',
        settings={
            'wall_color_hex': '#D9D9D9',
            'ceiling_color_hex': '#2B2B2B',
            'cabinet_color_hex': '#4A4A4A',
            'floor_material': 'concrete',
            'roughness': 0.65,
            'glossiness': 0.15,
            'use_light_temp': False,
            'light_color_hex': '#FFD8A8',
            'lamp_style': 'track',
            'light_intensity': 0.7,
            'seed': 204,
            'use_fixed_seed': True,
        },
    ),
]


def get_preset(name: str) -> Optional[Preset]:
    for preset in PRESETS:
        if preset.name == name:
            return preset
    return None


# ═══════════════════════════════════════════════════════════════
# Interior styles
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class StyleDefinition:
    name: str
    preview_image: str


def _preview(seed: str) -> str:
    return f"https://picsum.photos/seed/{seed}/100/75"


INTERIOR_STYLES: List[StyleDefinition] = [
    StyleDefinition('Modern', _preview('modern')),
    StyleDefinition('Minimalist', _preview('minimalist')),
    StyleDefinition('Industrial', _preview('industrial')),
    StyleDefinition('Scandinavian', _preview('scandinavian')),
    StyleDefinition('Bohemian', _preview('bohemian')),
    StyleDefinition('Coastal', _preview('coastal')),
    StyleDefinition('Farmhouse', _preview('farmhouse')),
    StyleDefinition('MidCenturyModern', _preview('midcentury')),
    StyleDefinition('ArtDeco', _preview('artdeco')),
    StyleDefinition('Japandi', _preview('japandi')),
    StyleDefinition('Maximalist', _preview('maximalist')),
    StyleDefinition('Gothic', _preview('gothic')),
    StyleDefinition('Cyberpunk', _preview('cyberpunk')),
    StyleDefinition('Steampunk', _preview('steampunk')),
    StyleDefinition('HollywoodRegency', _preview('hollywood')),
    StyleDefinition('Rustic', _preview('rustic')),
    StyleDefinition('ShabbyChic', _preview('shabbychic')),
    StyleDefinition('Transitional', _preview('transitional')),
    StyleDefinition('Tropical', _preview('tropical')),
    StyleDefinition('Victorian', _preview('victorian')),
    StyleDefinition('Zen', _preview('zen')),
]

STYLE_NAMES = tuple(style.name for style in INTERIOR_STYLES)
