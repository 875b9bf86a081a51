"""
Interior Studio - UI Layout
Main Gradio Blocks layout: control panel, result panel and i18n switching
"""

import gradio as gr     # type:ignore

from config import CanvasConfig, ServerConfig
from core.catalog import PRESETS, SLIDER_RANGES
from core.editor_state import DEFAULT_CONFIG
from core.i18n import I18n
from ui.callbacks import (
    FORM_BINDINGS,
    get_aspect_info,
    get_selected_style_text,
    get_size_text,
    get_status_text,
    make_color_pick_handler,
    make_color_text_handler,
    make_field_handler,
    make_file_handler,
    make_preset_handler,
    on_aspect_change,
    on_base_image_change,
    on_bathroom_toggle,
    on_fixed_seed_toggle,
    on_generate,
    on_light_temp_toggle,
    on_mask_mode_change,
    on_style_clear,
    on_style_select,
    option_choices,
    style_gallery_items,
)
from ui.styles import CUSTOM_CSS


# Fields whose widget change also updates other widgets
_SPECIAL_FIELDS = ('target_aspect', 'use_fixed_seed', 'use_light_temp', 'bathroom_replace', 'mask_mode')

# (config field, component key) for image uploads, excluding the base image
_TEXTURE_UPLOADS = (
    ('wall_texture_image', 'image_wall_texture'),
    ('cabinet_texture_image', 'image_cabinet_texture'),
    ('floor_texture_image', 'image_floor_texture'),
)


def _color_pair(components, name, value, lang, interactive=True):
    """Hex textbox + colour picker side by side, registered as textbox_<name> / color_<name>."""
    with gr.Row(equal_height=True):
        components[f'textbox_{name}'] = gr.Textbox(
            label=I18n.get(name, lang),
            value=value,
            placeholder="#RRGGBB",
            max_lines=1,
            interactive=interactive,
            scale=3,
        )
        components[f'color_{name}'] = gr.ColorPicker(
            label=I18n.get(name, lang),
            value=value or None,
            show_label=False,
            interactive=interactive,
            scale=1,
            min_width=60,
        )


def _slider(components, key, field_name, lang):
    minimum, maximum, step = SLIDER_RANGES[field_name]
    components[f'slider_{key}'] = gr.Slider(
        minimum=minimum,
        maximum=maximum,
        step=step,
        value=getattr(DEFAULT_CONFIG, field_name),
        label=I18n.get(key, lang),
    )


def _dropdown(components, field_name, lang):
    components[f'dropdown_{field_name}'] = gr.Dropdown(
        choices=option_choices(field_name, lang),
        value=getattr(DEFAULT_CONFIG, field_name),
        label=I18n.get(field_name, lang),
        interactive=True,
    )


def create_app():
    """Build the Gradio app (controls, result panel, i18n, events) and return the Blocks instance."""
    lang = ServerConfig.DEFAULT_LANGUAGE
    config = DEFAULT_CONFIG

    with gr.Blocks(title="Interior Studio") as app:
        gr.HTML(f"<style>{CUSTOM_CSS}</style>")

        lang_state = gr.State(value=lang)
        config_state = gr.State(value=config)
        result_state = gr.State(value=None)

        components = {}

        # Header
        with gr.Row(elem_classes=["header-row"], equal_height=True):
            with gr.Column(scale=10):
                header_html = gr.HTML(value=_get_header_html(lang), elem_id="app-header")
            with gr.Column(scale=1, min_width=140, elem_classes=["header-controls"]):
                lang_btn = gr.Button(
                    value=I18n.get('lang_btn_zh', lang),
                    size="sm",
                    elem_id="lang-btn"
                )

        with gr.Row():
            # ========== Control panel ==========
            with gr.Column(scale=2, elem_classes=["control-panel"]):
                components['md_presets_title'] = gr.Markdown(I18n.get('presets_title', lang))
                with gr.Row():
                    for preset in PRESETS:
                        components[f'btn_preset_{preset.name}'] = gr.Button(
                            I18n.get(f'preset_{preset.name}', lang),
                            size="sm",
                            elem_classes=["preset-btn"],
                        )

                # Image settings
                components['md_section_image_settings'] = gr.Markdown(I18n.get('section_image_settings', lang))
                components['image_base_image'] = gr.Image(
                    label=I18n.get('base_image', lang),
                    type="filepath",
                    sources=["upload", "clipboard"],
                    height=220,
                )
                components['dropdown_target_aspect'] = gr.Dropdown(
                    choices=list(CanvasConfig.ASPECT_RATIOS),
                    value=config.target_aspect,
                    label=I18n.get('target_aspect', lang),
                    info=get_aspect_info(config.target_aspect, lang),
                    interactive=True,
                )
                components['md_output_size'] = gr.Markdown(get_size_text(config, lang))
                with gr.Row():
                    components['num_seed'] = gr.Number(
                        label=I18n.get('seed', lang),
                        value=config.seed,
                        precision=0,
                        minimum=0,
                        interactive=config.use_fixed_seed,
                    )
                    components['checkbox_use_fixed_seed'] = gr.Checkbox(
                        label=I18n.get('use_fixed_seed', lang),
                        value=config.use_fixed_seed,
                    )

                # Style
                components['md_section_style'] = gr.Markdown(I18n.get('section_style', lang))
                components['gallery_style_gallery'] = gr.Gallery(
                    value=style_gallery_items(lang),
                    label=I18n.get('style_gallery', lang),
                    columns=4,
                    height=280,
                    allow_preview=False,
                    elem_classes=["style-gallery"],
                )
                with gr.Row(equal_height=True):
                    components['md_selected_style'] = gr.Markdown(get_selected_style_text(config, lang))
                    components['btn_style_none_btn'] = gr.Button(
                        I18n.get('style_none_btn', lang),
                        size="sm",
                        scale=0,
                        min_width=120,
                    )

                # Materials
                with gr.Accordion(I18n.get('section_material_surface', lang), open=True) as acc_materials:
                    components['accordion_section_material_surface'] = acc_materials
                    _color_pair(components, 'ceiling_color', config.ceiling_color_hex, lang)
                    _color_pair(components, 'wall_color', config.wall_color_hex, lang)
                    components['image_wall_texture'] = gr.Image(
                        label=I18n.get('wall_texture', lang), type="filepath", height=140,
                    )
                    _color_pair(components, 'cabinet_color', config.cabinet_color_hex, lang)
                    components['image_cabinet_texture'] = gr.Image(
                        label=I18n.get('cabinet_texture', lang), type="filepath", height=140,
                    )
                    _dropdown(components, 'wood_grain_direction', lang)
                    _dropdown(components, 'floor_material', lang)
                    components['image_floor_texture'] = gr.Image(
                        label=I18n.get('floor_texture', lang), type="filepath", height=140,
                    )
                    _slider(components, 'roughness', 'roughness', lang)
                    _slider(components, 'glossiness', 'glossiness', lang)

                # Lighting
                with gr.Accordion(I18n.get('section_lighting', lang), open=True) as acc_lighting:
                    components['accordion_section_lighting'] = acc_lighting
                    _color_pair(components, 'light_color', config.light_color_hex, lang,
                                interactive=not config.use_light_temp)
                    components['checkbox_use_light_temp'] = gr.Checkbox(
                        label=I18n.get('use_light_temp', lang),
                        value=config.use_light_temp,
                    )
                    _slider(components, 'light_temp', 'light_temp_k', lang)
                    _slider(components, 'light_intensity', 'light_intensity', lang)
                    _dropdown(components, 'lamp_style', lang)
                    components['checkbox_night_mode'] = gr.Checkbox(
                        label=I18n.get('night_mode', lang),
                        value=config.night_mode,
                    )
                    _slider(components, 'shadow_softness', 'shadow_softness', lang)
                    components['checkbox_contact_shadows'] = gr.Checkbox(
                        label=I18n.get('contact_shadows', lang),
                        value=config.contact_shadows,
                    )

                # Cinematic effects
                with gr.Accordion(I18n.get('section_cinematic', lang), open=False) as acc_cinematic:
                    components['accordion_section_cinematic'] = acc_cinematic
                    _dropdown(components, 'cinematic_look', lang)
                    _slider(components, 'bloom', 'bloom', lang)
                    _slider(components, 'vignette', 'vignette', lang)
                    _slider(components, 'film_grain', 'film_grain', lang)
                    components['checkbox_lens_flare'] = gr.Checkbox(
                        label=I18n.get('lens_flare', lang),
                        value=config.lens_flare,
                    )

                # Advanced
                with gr.Accordion(I18n.get('section_advanced', lang), open=False) as acc_advanced:
                    components['accordion_section_advanced'] = acc_advanced
                    components['checkbox_bathroom_replace'] = gr.Checkbox(
                        label=I18n.get('bathroom_replace', lang),
                        value=config.bathroom_replace,
                    )
                    with gr.Column(visible=config.bathroom_replace) as bath_options:
                        _dropdown(components, 'bath_style', lang)
                        _color_pair(components, 'fixture_color', config.fixture_color_hex, lang)
                    components['radio_mask_mode'] = gr.Radio(
                        choices=option_choices('mask_mode', lang),
                        value=config.mask_mode,
                        label=I18n.get('mask_mode', lang),
                    )
                    components['image_mask_image'] = gr.Image(
                        label=I18n.get('mask_image', lang),
                        type="filepath",
                        height=160,
                        visible=config.mask_mode == 'manual',
                    )
                    components['textbox_negative_prompts'] = gr.Textbox(
                        label=I18n.get('negative_prompts', lang),
                        value=config.negative_prompts,
                        lines=2,
                    )

                components['btn_generate_btn'] = gr.Button(
                    I18n.get('generate_btn', lang),
                    variant="primary",
                    size="lg",
                    elem_id="generate-btn",
                )

            # ========== Result panel ==========
            with gr.Column(scale=3, elem_classes=["result-panel"]):
                components['md_output_title'] = gr.Markdown(I18n.get('output_title', lang))
                components['md_status'] = gr.Markdown(get_status_text(None, lang), elem_id="status-line")
                components['image_result_image'] = gr.Image(
                    label=I18n.get('result_image', lang),
                    type="pil",
                    format="png",
                    interactive=False,
                    height=560,
                )
                components['file_download_file'] = gr.File(
                    label=I18n.get('download_file', lang),
                    interactive=False,
                )
                components['code_json_title'] = gr.Code(
                    label=I18n.get('json_title', lang),
                    language="json",
                    interactive=False,
                )

        footer_html = gr.HTML(value=_get_footer_html(lang), elem_id="footer")

        # ========== Language switching ==========
        def change_language(current_lang, current_config, outcome):
            """Switch UI language and return updates for all i18n components."""
            new_lang = "zh" if current_lang == "en" else "en"
            updates = []
            updates.append(gr.update(value=I18n.get('lang_btn_en' if new_lang == "zh" else 'lang_btn_zh', new_lang)))
            updates.append(gr.update(value=_get_header_html(new_lang)))
            updates.extend(_get_all_component_updates(new_lang, components, current_config, outcome))
            updates.append(gr.update(value=_get_footer_html(new_lang)))
            updates.append(new_lang)
            print(f"[Interior Studio] Language: {new_lang}")
            return updates

        output_list = [lang_btn, header_html]
        output_list.extend(_get_component_list(components))
        output_list.extend([footer_html, lang_state])

        lang_btn.click(
            change_language,
            inputs=[lang_state, config_state, result_state],
            outputs=output_list
        )

        # ========== Presets ==========
        form_outputs = [components[key] for _, key in FORM_BINDINGS]
        form_outputs.extend([
            components['md_output_size'],
            components['md_selected_style'],
            bath_options,
            components['image_mask_image'],
        ])
        for preset in PRESETS:
            components[f'btn_preset_{preset.name}'].click(
                make_preset_handler(preset.name),
                inputs=[config_state, lang_state],
                outputs=[config_state] + form_outputs,
            )

        # ========== Field inputs ==========
        components['dropdown_target_aspect'].input(
            on_aspect_change,
            inputs=[config_state, components['dropdown_target_aspect'], lang_state],
            outputs=[config_state, components['md_output_size'], components['dropdown_target_aspect']],
        )
        components['checkbox_use_fixed_seed'].input(
            on_fixed_seed_toggle,
            inputs=[config_state, components['checkbox_use_fixed_seed']],
            outputs=[config_state, components['num_seed']],
        )
        components['checkbox_use_light_temp'].input(
            on_light_temp_toggle,
            inputs=[config_state, components['checkbox_use_light_temp']],
            outputs=[config_state, components['textbox_light_color'], components['color_light_color']],
        )
        components['checkbox_bathroom_replace'].input(
            on_bathroom_toggle,
            inputs=[config_state, components['checkbox_bathroom_replace']],
            outputs=[config_state, bath_options],
        )
        components['radio_mask_mode'].input(
            on_mask_mode_change,
            inputs=[config_state, components['radio_mask_mode']],
            outputs=[config_state, components['image_mask_image']],
        )

        for field_name, key in FORM_BINDINGS:
            if field_name in _SPECIAL_FIELDS:
                continue
            component = components[key]
            if key.startswith('color_'):
                component.input(
                    make_color_pick_handler(field_name),
                    inputs=[config_state, component],
                    outputs=[config_state, components['textbox_' + key[6:]]],
                )
            elif key.startswith('textbox_') and field_name.endswith('_hex'):
                component.input(
                    make_color_text_handler(field_name),
                    inputs=[config_state, component],
                    outputs=[config_state, components['color_' + key[8:]]],
                )
            else:
                component.input(
                    make_field_handler(field_name),
                    inputs=[config_state, component],
                    outputs=[config_state],
                )

        # ========== Uploads ==========
        components['image_base_image'].change(
            on_base_image_change,
            inputs=[config_state, components['image_base_image'], result_state],
            outputs=[config_state, components['image_result_image']],
        )
        for field_name, key in _TEXTURE_UPLOADS + (('mask_image', 'image_mask_image'),):
            components[key].change(
                make_file_handler(field_name),
                inputs=[config_state, components[key]],
                outputs=[config_state],
            )

        # ========== Style gallery ==========
        components['gallery_style_gallery'].select(
            on_style_select,
            inputs=[config_state, lang_state],
            outputs=[config_state, components['md_selected_style']],
        )
        components['btn_style_none_btn'].click(
            on_style_clear,
            inputs=[config_state, lang_state],
            outputs=[config_state, components['md_selected_style']],
        )

        # ========== Generate ==========
        components['btn_generate_btn'].click(
            on_generate,
            inputs=[config_state, lang_state],
            outputs=[
                components['btn_generate_btn'],
                components['md_status'],
                components['image_result_image'],
                components['code_json_title'],
                components['file_download_file'],
                result_state,
            ],
            concurrency_limit=ServerConfig.GENERATION_CONCURRENCY,
            trigger_mode="once",
        )

    return app


def _get_header_html(lang: str) -> str:
    """Return header HTML (title + subtitle) for the given language."""
    return f"<h1>{I18n.get('app_title', lang)}</h1><p>{I18n.get('app_subtitle', lang)}</p>"


def _get_footer_html(lang: str) -> str:
    """Return footer HTML for the given language."""
    return f"""
    <div class="footer">
        <p>{I18n.get('footer_tip', lang)}</p>
    </div>
    """


def _get_all_component_updates(lang: str, components: dict, config=None, outcome=None) -> list:
    """Build a list of gr.update() for all components to apply i18n.

    Readouts that depend on state (size, selected style, status) are
    re-rendered from the current config / outcome instead of a fixed text.

    Args:
        lang: Target language code ('en' or 'zh').
        components: Dict of component key -> Gradio component.
        config: Current EditorConfiguration (defaults when None).
        outcome: Current SubmissionOutcome or None.

    Returns:
        list: One gr.update() per component, in dict iteration order.
    """
    from gradio.blocks import Block
    config = config or DEFAULT_CONFIG
    updates = []
    for key, component in components.items():
        if not isinstance(component, Block):
            continue

        if key == 'md_output_size':
            updates.append(gr.update(value=get_size_text(config, lang)))
            continue
        if key == 'md_selected_style':
            updates.append(gr.update(value=get_selected_style_text(config, lang)))
            continue
        if key == 'md_status':
            updates.append(gr.update(value=get_status_text(outcome, lang)))
            continue
        if key == 'dropdown_target_aspect':
            updates.append(gr.update(
                label=I18n.get('target_aspect', lang),
                info=get_aspect_info(config.target_aspect, lang),
            ))
            continue
        if key == 'gallery_style_gallery':
            updates.append(gr.update(
                label=I18n.get('style_gallery', lang),
                value=style_gallery_items(lang),
            ))
            continue

        if key.startswith('md_'):
            updates.append(gr.update(value=I18n.get(key[3:], lang)))
        elif key.startswith('btn_'):
            updates.append(gr.update(value=I18n.get(key[4:], lang)))
        elif key.startswith('radio_'):
            radio_key = key[6:]
            updates.append(gr.update(
                label=I18n.get(radio_key, lang),
                choices=option_choices(radio_key, lang),
            ))
        elif key.startswith('dropdown_'):
            dropdown_key = key[9:]
            updates.append(gr.update(
                label=I18n.get(dropdown_key, lang),
                choices=option_choices(dropdown_key, lang),
            ))
        elif key.startswith('slider_'):
            updates.append(gr.update(label=I18n.get(key[7:], lang)))
        elif key.startswith('color_'):
            updates.append(gr.update(label=I18n.get(key[6:], lang)))
        elif key.startswith('checkbox_'):
            updates.append(gr.update(label=I18n.get(key[9:], lang)))
        elif key.startswith('image_'):
            updates.append(gr.update(label=I18n.get(key[6:], lang)))
        elif key.startswith('file_'):
            updates.append(gr.update(label=I18n.get(key[5:], lang)))
        elif key.startswith('textbox_'):
            updates.append(gr.update(label=I18n.get(key[8:], lang)))
        elif key.startswith('num_'):
            updates.append(gr.update(label=I18n.get(key[4:], lang)))
        elif key.startswith('code_'):
            updates.append(gr.update(label=I18n.get(key[5:], lang)))
        elif key.startswith('accordion_'):
            updates.append(gr.update(label=I18n.get(key[10:], lang)))
        else:
            updates.append(gr.update())

    return updates


def _get_component_list(components: dict) -> list:
    """Return component values in dict order (for Gradio outputs).

    Filters out event objects (Dependency) which are not valid outputs.
    """
    from gradio.blocks import Block
    result = []
    for v in components.values():
        if isinstance(v, Block):
            result.append(v)
    return result
