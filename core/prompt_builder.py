"""
Interior Studio - Prompt Builder
Turns an EditorConfiguration into the instruction text sent to the image model.

One assembly routine (_assemble) consumes a per-language phrase table, so the
English and Chinese prompts always carry the same clauses in the same order.
The builder is pure: identical (config, language) input gives identical text.
"""

import json
from typing import Dict

from core.editor_state import EditorConfiguration


DEFAULT_PROMPT_LANGUAGE = 'en'

# Appended after the user's negative prompts in every prompt
FIXED_NEGATIVE_TERMS = {
    'en': 'flat lighting, sterile CG look, perfectly clean surfaces, artificial lines',
    'zh': '平面光，呆板的 CG 感，過於乾淨的表面，人工線條',
}


# ═══════════════════════════════════════════════════════════════
# Phrase tables
# ═══════════════════════════════════════════════════════════════

_EN_PREAMBLE = """**PRIME DIRECTIVE: ABSOLUTE PHOTOREALISM (Enscape/V-Ray Quality)**

**Core Task: Photorealistic "Overpainting" of a Geometric Guide**
The user has provided a **GEOMETRIC GUIDE** image (a 3D model with visible wireframe lines). Your task is to act as a master digital artist performing a photorealistic "render pass" over this guide. You are NOT just editing colors; you are **completely painting over every pixel** of the original image with new, hyper-realistic materials and lighting. The goal is to create an image indistinguishable from a photograph taken of a real space, with the quality of a top-tier rendering engine like **Enscape** or V-Ray.

**NON-NEGOTIABLE RULE #1: OBLITERATE THE WIREFRAME**
This is the most critical instruction. The original wireframe lines are for geometric reference ONLY. They MUST be **completely covered and obliterated** in the final output.
- **FAILURE CONDITION:** If a single artificial line from the guide is visible, the task is a FAILURE.
- **HOW EDGES ARE FORMED:** In your final "painting," edges are defined **ONLY** by the meeting of different material planes and the realistic interaction of light and shadow (especially soft contact shadows). There are NO lines in a photograph.
- **FORBIDDEN ACTION:** Do not trace or preserve the wireframe. Your new "paint" must be so thick and opaque that the underlying guide is 100% invisible.

**Mandatory Rendering Workflow:**
You must follow this professional CGI process strictly.

**Step 1: SCENE RECONSTRUCTION & HYPER-REALISTIC PBR MATERIALS**
- Reconstruct the 3D geometry from the blueprint, but without any of the lines.
- Apply high-quality Physically-Based Rendering (PBR) materials to all surfaces. These materials **MUST** have realistic properties and imperfections.
- **Imperfection is Key:** Surfaces must NOT be perfectly uniform. Add microscopic imperfections: subtle dust, faint scratches, minor smudges, and natural variations in glossiness and color.
- **Material Specifics:** Wood should have visible grain, pores, and slight variations in stain. Metal should have faint anisotropic reflections. Concrete and plaster should show subtle trowel marks and color variations. Fabrics must have visible weave and texture.
- **Reflections:** Shiny surfaces (glass, polished metal, marble) must clearly and accurately reflect their environment with proper Fresnel falloff.

**Step 2: PHYSICALLY-ACCURATE GLOBAL ILLUMINATION (GI)**
- **DISCARD** the original blueprint's lighting.
- Light the scene from scratch using physically accurate GI. Light must behave like real-world photons.
- **Light Bouncing & Color Bleed:** Light must bounce realistically off surfaces, subtly taking on the color of those surfaces and casting it onto nearby objects (color bleed).
- **Shadows:** Ensure soft, diffuse shadows from large light sources (like windows) and sharper, more defined shadows from small, intense sources (like a downlight).

**Step 3: VIRTUAL CAMERA & POST-PROCESSING**
- "Photograph" the rendered scene with a virtual high-end camera (e.g., Sony A7R IV with a 24mm G Master lens).
- Apply subtle, professional camera effects as specified below."""

_ZH_PREAMBLE = """**首要指令：絕對的照片級真實感 (Enscape/V-Ray 品質)**

**核心任務：對幾何指南進行照片級“覆蓋繪製”**
使用者提供了一張「幾何指南」圖像（一個帶有可見線框的3D模型）。你的任務是扮演一位大師級的數位藝術家，對這份指南進行照片級的“渲染遍歷”。你不僅僅是編輯顏色；你是在用全新的、超真實的材質和光影「完全覆蓋繪製原始圖像的每一個像素」。目標是創造出一張與真實空間的照片無法區分的圖像，其品質要達到像 **Enscape** 或 V-Ray 這樣的頂級渲染引擎水準。

**不可協商規則 #1：徹底消除線框**
這是最關鍵的指令。原始的線框線條「僅供幾何參考」。在最終輸出中，它們必須被「完全覆蓋並徹底清除」。
- **失敗條件：** 如果最終成品中出現任何一條來自指南的人工線條，則任務視為「失敗」。
- **邊緣的形成方式：** 在你最終的“畫作”中，邊緣「只能」由不同材質平面的交界以及光影的真實互動（特別是柔和的接觸陰影）來定義。照片中沒有線條。
- **禁止行為：** 不要描摹或保留線框。你新的“顏料”必須厚實且不透明，以至於底層的指南100%不可見。

**強制性渲染工作流程：**
你必須嚴格遵循這個專業的CGI流程。

**步驟一：場景重建與超真實的PBR材質**
- 根據藍圖重建3D幾何結構，但要完全去掉所有線條。
- 為所有表面應用高品質的基於物理的渲染 (PBR) 材質。這些材質「必須」具有真實的屬性和瑕疵。
- **瑕疵是關鍵：** 表面「絕不能」是完美均勻的。加入微觀的瑕疵：細微的灰塵、輕微的刮痕、微小的污跡，以及光澤度和顏色上的自然變化。
- **材質細節：** 木材應有可見的紋理、毛孔和染色上的輕微變化。金屬應有微弱的各向異性反射。混凝土和石膏應顯示出細微的鏝刀痕跡和顏色變化。織物必須有可見的編織紋理。
- **反射：** 光亮的表面（玻璃、拋光金屬、大理石）必須清晰且準確地反射其周遭環境，並具有正確的菲涅爾衰減效果。

**步驟二：物理準確的全域照明 (GI)**
- 「拋棄」藍圖原始的燈光設定。
- 使用物理準確的全域照明從頭開始為場景布光。光線的行為必須如同真實世界的光子。
- **光線反彈與色彩溢出：** 光線必須能夠在物體表面之間真實地反彈，並巧妙地吸收這些表面的顏色，將其投射到附近的物體上（色彩溢出）。
- **陰影：** 確保來自大型光源（如窗戶）的陰影是柔和、漫反射的，而來自小型、強烈光源（如嵌燈）的陰影則更為銳利、清晰。

**步驟三：虛擬相機與後期處理**
- 用一個虛擬的高階相機（例如：配備 24mm G Master 鏡頭的 Sony A7R IV）來「拍攝」渲染好的場景。
- 應用下方指定的微妙且專業的相機效果。"""

PHRASES: Dict[str, Dict[str, str]] = {
    'en': {
        'preamble': _EN_PREAMBLE,
        'night_mode': (
            "\n- Render a highly realistic and atmospheric nighttime scene.\n"
            "- Illumination MUST ONLY come from artificial light sources located within the room "
            "(e.g., lamps, chandeliers, specified lamp style).\n"
            "- Do NOT use any ambient daylight. The scene must be lit as if it were completely dark outside.\n"
            "- This lighting should create a high-contrast effect with distinct, realistic highlights and "
            "deep, natural shadows. Areas not directly illuminated by a fixture must be appropriately dark.\n"
        ),
        'day_mode': "- Render the scene in a bright, natural daylight setting.",
        'post_header': "**Cinematic Post-Processing:**",
        'grading_label': "*   **Color Grading:** ",
        'grading_look': "Apply a professional '{look}' cinematic color grade.",
        'grading_default': "Apply standard professional color grading for a cohesive, atmospheric final image.",
        'effects_label': "*   **Effects:**",
        'dof': "    *   Depth of Field: A slight, natural depth of field (bokeh) is required.",
        'bloom_label': "    *   Bloom: ",
        'bloom_on': "Apply a soft, physically-based bloom effect to highlights and light sources with an intensity of approximately {value}.",
        'bloom_off': "No excessive bloom effect.",
        'vignette_label': "    *   Vignette: ",
        'vignette_on': "Add a subtle, optical-style dark vignette at the corners of the image with an intensity of approximately {value}.",
        'vignette_off': "No noticeable vignette.",
        'grain_label': "    *   Film Grain: ",
        'grain_on': "Overlay a fine, realistic film grain with an intensity of approximately {value}.",
        'grain_off': "The image should be clean, without digital noise or artificial grain.",
        'flare_label': "    *   Lens Flare: ",
        'flare_on': "If there are bright, visible light sources, add a natural and subtle lens flare effect appropriate to a high-end lens.",
        'flare_off': "Avoid adding any artificial lens flare effects.",
        'immutable_rules': (
            "**Immutable Rules:**\n"
            "- **Window Integrity:** Do NOT alter the window frames, glass, or structure. Treat windows as transparent portals.\n"
            "- **Outdoor View:** Preserve the original daytime outdoor scenery unless Night Mode is ON, in which case the view must be a realistic nighttime scene.\n"
            "- **Interior-Only Edits:** All material/style changes apply ONLY to the interior."
        ),
        'params_header': "**User Specifications for Reconstruction:**",
        'aspect': "*   **Image Aspect Ratio:** The final image must be strictly rendered in a **{aspect}** aspect ratio.",
        'realism_first': "*   **Photorealism Framework FIRST:** Before considering style, establish the baseline of absolute photorealism.",
        'style': (
            "*   **Aesthetic Style (Secondary Influence):** After achieving photorealism, use the following style as a "
            "guideline for decor, furniture choices, and color palette. The aesthetic style of '{style}' must be "
            "expressed *through* realistic objects and lighting, not by sacrificing realism itself."
        ),
        'default_style': 'modern',
        'ambiance': "*   **Ambiance:** {instruction}",
        'ceiling': "*   **Ceiling:** {clause}",
        'ceiling_color': "Color: {color}.",
        'ceiling_none': "No specific ceiling color.",
        'walls': "*   **Walls:** {clause} If wall texture is provided, use it.",
        'walls_color': "Color: {color}.",
        'walls_none': "No specific wall color.",
        'cabinets': "*   **Cabinets/Woodwork:** {clause} If cabinet texture is provided, use it. Wood grain direction: **{grain}**.",
        'cabinets_color': "Color: {color}.",
        'cabinets_none': "No specific cabinet color.",
        'floor': "*   **Floor:** {clause} If floor texture is provided, use it.",
        'floor_material': "Material: {material}.",
        'floor_none': "No specific floor material.",
        'finish': "*   **Surface Finish:** Overall roughness of **{roughness}** and glossiness of **{glossiness}**.",
        'lighting': "*   **Lighting:** {clause} Intensity: **{intensity}**.",
        'light_temp': "Primary light temperature: {temp}K.",
        'light_color': "Primary light color: {color}.",
        'shadows': "*   **Shadows:** Overall shadow softness/diffusion must be **{softness}** (0.0 for sharp, 1.0 for very soft). {clause}",
        'contact_on': "Ensure prominent and realistic contact shadows (ambient occlusion) are present where surfaces meet to ground objects.",
        'contact_off': "Use natural, subtle contact shadows.",
        'lamps': "*   **Lamp Fixtures:** {clause}",
        'lamp_style': "Incorporate '{lamp}' style fixtures.",
        'lamp_none': "Use subtle, integrated lighting.",
        'bathroom': "*   **Bathroom:** {clause}",
        'bath_replace': "Replace fixtures with new ones in a **'{style}'** style, colored **{color}**.",
        'bath_keep': "Do not modify bathroom fixtures.",
        'negative': "*   **AVOID (Negative Prompts):** {user}, {fixed}.",
        'json_header': (
            "**JSON Output Requirement:**\n"
            "After your main instructions, provide a single, clean, parsable JSON object that summarizes the key "
            "parameters you applied. Do not include any other text before or after the JSON block."
        ),
        'caption_wall_texture': "Use the following image as a texture for the walls:",
        'caption_cabinet_texture': "Use the following image as a texture for the cabinets:",
        'caption_floor_texture': "Use the following image as a texture for the floor:",
        'caption_mask': "IMPORTANT: Apply edits ONLY to the white areas of the following mask image:",
    },
    'zh': {
        'preamble': _ZH_PREAMBLE,
        'night_mode': (
            "\n- 渲染一個高度真實且富有氛圍的夜間場景。\n"
            "- 照明「只能」來自房間內部的人造光源（例如：檯燈、吊燈、指定的燈具風格）。\n"
            "- 「絕對不要」使用任何環境日光。場景必須被照亮得如同室外完全黑暗一樣。\n"
            "- 這種照明應創造出高對比度的效果，具有清晰、真實的高光和深邃、自然的陰影。未被燈具直接照射的區域必須是適當的暗度。\n"
        ),
        'day_mode': "- 在明亮的自然日光設定下渲染場景。",
        'post_header': "**電影級後期處理:**",
        'grading_label': "*   **色彩分級:** ",
        'grading_look': "套用專業的 '{look}' 電影色彩風格。",
        'grading_default': "套用標準的專業色彩分級，以打造有凝聚力、有氛圍的最終圖像。",
        'effects_label': "*   **效果:**",
        'dof': "    *   景深: 需要輕微、自然的景深效果 (散景)。",
        'bloom_label': "    *   光暈 (Bloom): ",
        'bloom_on': "為高光和光源應用基於物理的柔和光暈效果，強度約為 {value}。",
        'bloom_off': "無過度的光暈效果。",
        'vignette_label': "    *   暗角 (Vignette): ",
        'vignette_on': "在圖像角落添加細微、光學風格的暗角，強度約為 {value}。",
        'vignette_off': "無明顯的暗角。",
        'grain_label': "    *   膠片顆粒 (Film Grain): ",
        'grain_on': "疊加一層細膩、真實的膠片顆粒，強度約為 {value}。",
        'grain_off': "圖像應該乾淨，沒有數位雜訊或人工顆粒。",
        'flare_label': "    *   鏡頭光暈 (Lens Flare): ",
        'flare_on': "如果有明亮可見的光源，從它們發出適合高階鏡頭的自然且細微的鏡頭光暈效果。",
        'flare_off': "避免添加任何人工的鏡頭光暈效果。",
        'immutable_rules': (
            "**不變的規則：**\n"
            "- **窗戶完整性：** 「絕對不能」更改窗框、玻璃或其結構。將窗戶視為透明的通道。\n"
            "- **戶外景觀：** 保留原始的白天戶外景色，除非「夜間模式」開啟，此時景觀必須是真實的夜景。\n"
            "- **僅限室內編輯：** 所有的材質/風格變更「僅適用於」室內。"
        ),
        'params_header': "**使用者指定的重建參數：**",
        'aspect': "*   **圖片長寬比：** 最終圖片必須嚴格以 **{aspect}** 的長寬比渲染。",
        'realism_first': "*   **照片真實感框架優先：** 在考慮風格之前，先建立絕對照片級真實感的基準。",
        'style': (
            "*   **美學風格 (次要影響)：** 在實現照片真實感之後，使用以下風格作為裝飾、家具選擇和調色板的指導方針。"
            "'{style}' 的美學風格必須「透過」真實的物體和光線來表達，而不是犧牲真實感本身。"
        ),
        'default_style': '現代風',
        'ambiance': "*   **氛圍：** {instruction}",
        'ceiling': "*   **天花板：** {clause}",
        'ceiling_color': "顏色: {color}。",
        'ceiling_none': "不指定天花板顏色。",
        'walls': "*   **牆壁：** {clause} 如果提供了牆壁紋理，請使用它。",
        'walls_color': "顏色: {color}。",
        'walls_none': "不指定牆壁顏色。",
        'cabinets': "*   **櫥櫃/木製品：** {clause} 如果提供了櫥櫃紋理，請使用它。木紋方向: **{grain}**。",
        'cabinets_color': "顏色: {color}。",
        'cabinets_none': "不指定櫥櫃顏色。",
        'floor': "*   **地板：** {clause} 如果提供了地板紋理，請使用它。",
        'floor_material': "材質: {material}。",
        'floor_none': "不指定地板材質。",
        'finish': "*   **表面處理：** 整體粗糙度為 **{roughness}**，光澤度為 **{glossiness}**。",
        'lighting': "*   **照明：** {clause} 強度: **{intensity}**。",
        'light_temp': "主要光溫: {temp}K。",
        'light_color': "主要光色: {color}。",
        'shadows': "*   **陰影:** 整體陰影的柔和/擴散度必須為 **{softness}** (0.0 為銳利, 1.0 為非常柔和)。{clause}",
        'contact_on': "確保在物體表面相接處有顯著且真實的接觸陰影（環境光遮蔽），以增加物體的落地感。",
        'contact_off': "使用自然、細膩的接觸陰影。",
        'lamps': "*   **燈具：** {clause}",
        'lamp_style': "融入 '{lamp}' 風格的燈具。",
        'lamp_none': "使用細微的、整合式的照明。",
        'bathroom': "*   **浴室：** {clause}",
        'bath_replace': "將衛浴設備更換為 **'{style}'** 風格、顏色為 **{color}** 的新設備。",
        'bath_keep': "不要修改浴室設備。",
        'negative': "*   **避免 (負面提示):** {user}，{fixed}。",
        'json_header': (
            "**JSON 輸出要求：**\n"
            "在主要說明之後，提供一個單一、乾淨、可解析的 JSON 物件，總結您為此次生成所套用的關鍵參數。"
            "請勿在 JSON 區塊前後包含任何其他文字。"
        ),
        'caption_wall_texture': "請將下一張圖片作為牆壁的紋理：",
        'caption_cabinet_texture': "請將下一張圖片作為櫥櫃的紋理：",
        'caption_floor_texture': "請將下一張圖片作為地板的紋理：",
        'caption_mask': "重要：僅對下一張遮罩圖片中的白色區域進行編輯：",
    },
}

# Values shown inside the prompt for enumerated fields, per language.
# English uses the raw option with underscores replaced by spaces.
_ZH_CINEMATIC_LOOKS = {
    'teal_orange': '青橙色調 (Teal & Orange)',
    'film_noir': '黑色電影 (Film Noir)',
    'vintage_film': '復古膠片 (Vintage Film)',
    'cyberpunk_neon': '賽博龐克霓虹 (Cyberpunk Neon)',
}

_ZH_GRAIN_DIRECTIONS = {
    'vertical': '垂直',
    'horizontal': '水平',
}


def _resolve_language(language: str) -> str:
    return language if language in PHRASES else DEFAULT_PROMPT_LANGUAGE


def format_number(value) -> str:
    """Render a number the way it reads in the UI: 1.0 -> '1', 0.15 -> '0.15'."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _cinematic_look_text(look: str, lang: str) -> str:
    if not look:
        return ''
    if lang == 'zh':
        return _ZH_CINEMATIC_LOOKS.get(look, look)
    return look.replace('_', ' ')


def _grain_direction_text(direction: str, lang: str) -> str:
    if lang == 'zh':
        return _ZH_GRAIN_DIRECTIONS.get(direction, direction)
    return direction


def _effect_line(p: Dict[str, str], name: str, value) -> str:
    if value and value > 0:
        return p[f'{name}_label'] + p[f'{name}_on'].format(value=format_number(value))
    return p[f'{name}_label'] + p[f'{name}_off']


def _summary_number(value):
    """Same rounding as format_number, but kept numeric for the JSON summary."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_summary_template(config: EditorConfiguration) -> dict:
    """The JSON summary the model is asked to echo back."""
    return {
        'applied_style': config.selected_style or 'modern',
        'ambiance': 'night' if config.night_mode else 'day',
        'materials': {
            'wall_color': config.wall_color_hex or 'unchanged',
            'ceiling_color': config.ceiling_color_hex or 'unchanged',
            'floor_material': config.floor_material or 'unchanged',
        },
        'lighting': {
            'type': 'temperature' if config.use_light_temp else 'hex',
            'value': format_number(config.light_temp_k) if config.use_light_temp else config.light_color_hex,
            'intensity': _summary_number(config.light_intensity),
            'shadow_softness': _summary_number(config.shadow_softness),
            'contact_shadows': config.contact_shadows,
        },
        'cinematic_effects': {
            'look': config.cinematic_look or 'none',
            'film_grain': _summary_number(config.film_grain),
            'vignette': _summary_number(config.vignette),
            'bloom': _summary_number(config.bloom),
            'lens_flare': config.lens_flare,
        },
    }


def attachment_caption(kind: str, language: str) -> str:
    """
    Text placed before an attached image.

    Args:
        kind: 'wall_texture', 'cabinet_texture', 'floor_texture' or 'mask'
        language: 'en' or 'zh'
    """
    p = PHRASES[_resolve_language(language)]
    return p[f'caption_{kind}']


def _assemble(config: EditorConfiguration, lang: str) -> str:
    p = PHRASES[lang]

    ambiance = p['night_mode'] if config.night_mode else p['day_mode']

    look = _cinematic_look_text(config.cinematic_look, lang)
    grading = p['grading_look'].format(look=look) if look else p['grading_default']

    if config.lens_flare:
        flare = p['flare_label'] + p['flare_on']
    else:
        flare = p['flare_label'] + p['flare_off']

    if config.use_light_temp:
        light_clause = p['light_temp'].format(temp=format_number(config.light_temp_k))
    else:
        light_clause = p['light_color'].format(color=config.light_color_hex)

    if config.bathroom_replace:
        bath_clause = p['bath_replace'].format(style=config.bath_style, color=config.fixture_color_hex)
    else:
        bath_clause = p['bath_keep']

    def color_clause(prefix: str, color: str) -> str:
        if color:
            return p[f'{prefix}_color'].format(color=color)
        return p[f'{prefix}_none']

    floor_clause = (
        p['floor_material'].format(material=config.floor_material)
        if config.floor_material else p['floor_none']
    )
    lamp_clause = (
        p['lamp_style'].format(lamp=config.lamp_style)
        if config.lamp_style else p['lamp_none']
    )
    contact_clause = p['contact_on'] if config.contact_shadows else p['contact_off']

    summary = json.dumps(build_summary_template(config), indent=2, ensure_ascii=False)

    lines = [
        p['preamble'],
        '',
        p['post_header'],
        p['grading_label'] + grading,
        p['effects_label'],
        p['dof'],
        _effect_line(p, 'bloom', config.bloom),
        _effect_line(p, 'vignette', config.vignette),
        _effect_line(p, 'grain', config.film_grain),
        flare,
        '',
        p['immutable_rules'],
        '',
        p['params_header'],
        p['aspect'].format(aspect=config.target_aspect),
        p['realism_first'],
        p['style'].format(style=config.selected_style or p['default_style']),
        p['ambiance'].format(instruction=ambiance),
        p['ceiling'].format(clause=color_clause('ceiling', config.ceiling_color_hex)),
        p['walls'].format(clause=color_clause('walls', config.wall_color_hex)),
        p['cabinets'].format(
            clause=color_clause('cabinets', config.cabinet_color_hex),
            grain=_grain_direction_text(config.wood_grain_direction, lang),
        ),
        p['floor'].format(clause=floor_clause),
        p['finish'].format(
            roughness=format_number(config.roughness),
            glossiness=format_number(config.glossiness),
        ),
        p['lighting'].format(clause=light_clause, intensity=format_number(config.light_intensity)),
        p['shadows'].format(softness=format_number(config.shadow_softness), clause=contact_clause),
        p['lamps'].format(clause=lamp_clause),
        p['bathroom'].format(clause=bath_clause),
        p['negative'].format(user=config.negative_prompts, fixed=FIXED_NEGATIVE_TERMS[lang]),
        '',
        p['json_header'],
        '```json',
        summary,
        '```',
    ]
    return '\n'.join(lines).strip()


def build_prompt(config: EditorConfiguration, language: str = DEFAULT_PROMPT_LANGUAGE) -> str:
    """
    Build the full model instruction for a configuration.

    Args:
        config: Editor configuration to describe
        language: 'en' or 'zh'; anything else falls back to English

    Returns:
        str: Prompt text ending with a fenced JSON summary template
    """
    return _assemble(config, _resolve_language(language))
