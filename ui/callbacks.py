"""
Interior Studio - UI Callbacks
UI event handling callback functions
"""

import json
import re

import gradio as gr

from config import CanvasConfig, ServerConfig
from core.catalog import ENUM_FIELDS, INTERIOR_STYLES, get_preset
from core.editor_state import (
    EditorConfiguration,
    apply_preset,
    is_hex_color,
    update_field,
    update_file,
)
from core.i18n import I18n
from core.image_io import decode_result_image, save_result_png
from core.session import SubmissionOutcome, SubmissionStatus, begin_submission, run_submission


# (config field, component key) for every widget that shows a config value.
# Colour fields appear twice: the hex textbox and its picker.
FORM_BINDINGS = (
    ('target_aspect', 'dropdown_target_aspect'),
    ('seed', 'num_seed'),
    ('use_fixed_seed', 'checkbox_use_fixed_seed'),
    ('ceiling_color_hex', 'textbox_ceiling_color'),
    ('ceiling_color_hex', 'color_ceiling_color'),
    ('wall_color_hex', 'textbox_wall_color'),
    ('wall_color_hex', 'color_wall_color'),
    ('cabinet_color_hex', 'textbox_cabinet_color'),
    ('cabinet_color_hex', 'color_cabinet_color'),
    ('wood_grain_direction', 'dropdown_wood_grain_direction'),
    ('floor_material', 'dropdown_floor_material'),
    ('roughness', 'slider_roughness'),
    ('glossiness', 'slider_glossiness'),
    ('light_color_hex', 'textbox_light_color'),
    ('light_color_hex', 'color_light_color'),
    ('use_light_temp', 'checkbox_use_light_temp'),
    ('light_temp_k', 'slider_light_temp'),
    ('light_intensity', 'slider_light_intensity'),
    ('lamp_style', 'dropdown_lamp_style'),
    ('night_mode', 'checkbox_night_mode'),
    ('shadow_softness', 'slider_shadow_softness'),
    ('contact_shadows', 'checkbox_contact_shadows'),
    ('cinematic_look', 'dropdown_cinematic_look'),
    ('bloom', 'slider_bloom'),
    ('vignette', 'slider_vignette'),
    ('film_grain', 'slider_film_grain'),
    ('lens_flare', 'checkbox_lens_flare'),
    ('bathroom_replace', 'checkbox_bathroom_replace'),
    ('bath_style', 'dropdown_bath_style'),
    ('fixture_color_hex', 'textbox_fixture_color'),
    ('fixture_color_hex', 'color_fixture_color'),
    ('mask_mode', 'radio_mask_mode'),
    ('negative_prompts', 'textbox_negative_prompts'),
)

_RGB_RE = re.compile(r"rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)")


# ═══════════════════════════════════════════════════════════════
# Display helpers
# ═══════════════════════════════════════════════════════════════

def option_choices(field_name, lang):
    """(label, value) pairs for an enumerated field; optional fields start with 'None'."""
    options, allow_empty = ENUM_FIELDS[field_name]
    choices = [(I18n.option_label(field_name, opt, lang), opt) for opt in options]
    if allow_empty:
        choices.insert(0, (I18n.get('none', lang), ''))
    return choices


def style_gallery_items(lang):
    """Gallery value: (preview url, localized caption) per style."""
    return [(s.preview_image, I18n.get(f"style_{s.name}", lang)) for s in INTERIOR_STYLES]


def get_size_text(config, lang):
    return I18n.get('output_size', lang).format(w=config.output_px_w, h=config.output_px_h)


def get_aspect_info(aspect, lang):
    return I18n.get('target_aspect_info', lang).format(sizes=CanvasConfig.get_size_suggestion(aspect))


def get_selected_style_text(config, lang):
    if config.selected_style:
        style = I18n.get(f"style_{config.selected_style}", lang)
    else:
        style = I18n.get('none', lang)
    return I18n.get('selected_style', lang).format(style=style)


def get_status_text(outcome, lang):
    """Status line for the result panel."""
    if outcome is None or outcome.status == SubmissionStatus.IDLE:
        return I18n.get('status_empty', lang)
    if outcome.status == SubmissionStatus.SUBMITTING:
        return I18n.get('status_loading', lang)
    if outcome.error:
        return f"{I18n.get('error_title', lang)}: {outcome.error}"
    return I18n.get('status_success', lang).format(seed=outcome.seed)


def format_metadata(metadata):
    """Pretty-printed JSON for the metadata panel, or None when absent."""
    if metadata is None:
        return None
    return json.dumps(metadata, indent=2, ensure_ascii=False)


def normalize_color(value):
    """
    Normalize a colour picker value to #RRGGBB.

    Pickers report '#rrggbb' or 'rgba(r, g, b, a)' depending on the
    Gradio version. Returns '' for anything unrecognised.
    """
    if not value:
        return ''
    value = str(value).strip()
    if is_hex_color(value):
        return value.upper()
    m = _RGB_RE.match(value)
    if not m:
        return ''
    r, g, b = (max(0, min(255, int(float(c) + 0.5))) for c in m.groups())
    return f"#{r:02X}{g:02X}{b:02X}"


def _binding_update(config, field_name, key, lang):
    value = getattr(config, field_name)
    if key.startswith('color_'):
        return gr.update(value=value or None, interactive=_color_interactive(config, field_name))
    if key.startswith('textbox_') and field_name.endswith('_hex'):
        return gr.update(value=value, interactive=_color_interactive(config, field_name))
    if field_name == 'seed':
        return gr.update(value=value, interactive=config.use_fixed_seed)
    if field_name == 'target_aspect':
        return gr.update(value=value, info=get_aspect_info(value, lang))
    return gr.update(value=value)


def _color_interactive(config, field_name):
    if field_name == 'light_color_hex':
        return not config.use_light_temp
    return True


def form_updates(config, lang):
    """
    Updates that make every form widget reflect *config*.

    Returns:
        list: One update per FORM_BINDINGS entry, then
              (size readout, selected style readout,
               bath options visibility, mask upload visibility)
    """
    updates = [_binding_update(config, field_name, key, lang) for field_name, key in FORM_BINDINGS]
    updates.append(gr.update(value=get_size_text(config, lang)))
    updates.append(gr.update(value=get_selected_style_text(config, lang)))
    updates.append(gr.update(visible=config.bathroom_replace))
    updates.append(gr.update(visible=config.mask_mode == 'manual'))
    return updates


# ═══════════════════════════════════════════════════════════════
# Field Callbacks
# ═══════════════════════════════════════════════════════════════

def on_field_input(field_name, config, value):
    """
    Generic handler: write one widget value into the configuration.

    Invalid values leave the configuration unchanged.

    Returns:
        EditorConfiguration: updated configuration
    """
    try:
        return update_field(config, field_name, value)
    except (KeyError, ValueError, TypeError) as e:
        print(f"[Interior Studio] Ignored {field_name}={value!r}: {e}")
        return config


def make_field_handler(field_name):
    """Bind on_field_input to a field for use as a Gradio event function."""
    def handler(config, value):
        return on_field_input(field_name, config, value)
    return handler


def on_aspect_change(config, aspect, lang):
    """
    Aspect ratio changed: re-derive output size.

    Returns:
        tuple: (config, size_readout_update, aspect_dropdown_update)
    """
    config = on_field_input('target_aspect', config, aspect)
    return (
        config,
        gr.update(value=get_size_text(config, lang)),
        gr.update(info=get_aspect_info(config.target_aspect, lang)),
    )


def on_fixed_seed_toggle(config, fixed):
    """
    Returns:
        tuple: (config, seed_number_update)
    """
    config = on_field_input('use_fixed_seed', config, fixed)
    return config, gr.update(interactive=config.use_fixed_seed)


def on_light_temp_toggle(config, enabled):
    """
    Colour temperature on: the explicit light colour is ignored and locked.

    Returns:
        tuple: (config, light_color_textbox_update, light_color_picker_update)
    """
    config = on_field_input('use_light_temp', config, enabled)
    interactive = not config.use_light_temp
    return config, gr.update(interactive=interactive), gr.update(interactive=interactive)


def on_bathroom_toggle(config, enabled):
    """
    Returns:
        tuple: (config, bath_options_visibility_update)
    """
    config = on_field_input('bathroom_replace', config, enabled)
    return config, gr.update(visible=config.bathroom_replace)


def on_mask_mode_change(config, mode):
    """
    Returns:
        tuple: (config, mask_upload_visibility_update)
    """
    config = on_field_input('mask_mode', config, mode)
    return config, gr.update(visible=config.mask_mode == 'manual')


def make_color_text_handler(field_name):
    """
    Hex textbox typed into: store the text, sync the picker once it is a full hex.

    Returns a Gradio event function: (config, text) -> (config, picker_update)
    """
    def handler(config, text):
        text = (text or '').strip()
        config = on_field_input(field_name, config, text)
        if is_hex_color(text):
            return config, gr.update(value=text)
        return config, gr.update()
    return handler


def make_color_pick_handler(field_name):
    """
    Picker changed: store the normalized hex and mirror it into the textbox.

    Returns a Gradio event function: (config, picked) -> (config, textbox_update)
    """
    def handler(config, picked):
        hex_value = normalize_color(picked)
        if not hex_value:
            return config, gr.update()
        config = on_field_input(field_name, config, hex_value)
        return config, gr.update(value=hex_value)
    return handler


# ═══════════════════════════════════════════════════════════════
# File Callbacks
# ═══════════════════════════════════════════════════════════════

def make_file_handler(field_name):
    """Attach or clear an image field. Returns a Gradio event function: (config, path) -> config"""
    def handler(config, path):
        return update_file(config, field_name, path)
    return handler


def on_base_image_change(config, path, outcome):
    """
    Base image uploaded or cleared.

    Before any result exists the output panel previews the base image.

    Returns:
        tuple: (config, result_image_update)
    """
    config = update_file(config, 'base_image', path)
    if outcome is not None and outcome.image_b64:
        return config, gr.update()
    return config, gr.update(value=config.base_image)


# ═══════════════════════════════════════════════════════════════
# Preset & Style Callbacks
# ═══════════════════════════════════════════════════════════════

def on_preset(preset_name, config, lang):
    """
    Apply a named preset.

    Returns:
        list: [config] + form_updates(config, lang)
    """
    preset = get_preset(preset_name)
    if preset is None:
        print(f"[Interior Studio] Unknown preset: {preset_name}")
        return [config] + [gr.update() for _ in range(len(FORM_BINDINGS) + 4)]
    config = apply_preset(config, preset)
    print(f"[Interior Studio] Applied preset: {preset_name}")
    return [config] + form_updates(config, lang)


def make_preset_handler(preset_name):
    def handler(config, lang):
        return on_preset(preset_name, config, lang)
    return handler


def on_style_select(config, lang, evt: gr.SelectData):
    """
    Gallery tile clicked.

    Returns:
        tuple: (config, selected_style_update)
    """
    index = evt.index
    if isinstance(index, (list, tuple)):
        index = index[0]
    if index is None or not 0 <= index < len(INTERIOR_STYLES):
        return config, gr.update()
    config = on_field_input('selected_style', config, INTERIOR_STYLES[index].name)
    return config, gr.update(value=get_selected_style_text(config, lang))


def on_style_clear(config, lang):
    """
    Returns:
        tuple: (config, selected_style_update)
    """
    config = on_field_input('selected_style', config, '')
    return config, gr.update(value=get_selected_style_text(config, lang))


# ═══════════════════════════════════════════════════════════════
# Generation Callback
# ═══════════════════════════════════════════════════════════════

def on_generate(config: EditorConfiguration, lang: str, generate=None):
    """
    Submit the configuration and stream the two UI states (running, finished).

    Args:
        config: Current editor configuration
        lang: UI language
        generate: Optional request function (see run_submission)

    Yields:
        tuple: (generate_btn_update, status_update, result_image,
                metadata_json, download_file, result_state)
    """
    pending = begin_submission()
    yield (
        gr.update(value=I18n.get('generating_btn', lang), interactive=False),
        gr.update(value=get_status_text(pending, lang)),
        gr.update(value=config.base_image),
        gr.update(value=None),
        gr.update(value=None),
        None,
    )

    if generate is None:
        outcome = run_submission(config, lang)
    else:
        outcome = run_submission(config, lang, generate=generate)

    download = None
    image = config.base_image
    if outcome.image_b64:
        try:
            image = decode_result_image(outcome.image_b64)
        except (OSError, ValueError) as e:
            print(f"[Interior Studio] Could not decode result: {e}")
            outcome = SubmissionOutcome(
                status=SubmissionStatus.FAILED,
                result=outcome.result,
                error=I18n.get('error_model_no_image', lang),
                seed=outcome.seed,
            )
        else:
            # A failed save only loses the download link
            try:
                download = save_result_png(outcome.image_b64, ServerConfig.DOWNLOAD_DIR)
            except OSError as e:
                print(f"[Interior Studio] Could not save result: {e}")

    yield (
        gr.update(value=I18n.get('generate_btn', lang), interactive=True),
        gr.update(value=get_status_text(outcome, lang)),
        gr.update(value=image),
        gr.update(value=format_metadata(outcome.metadata)),
        gr.update(value=download),
        outcome,
    )
