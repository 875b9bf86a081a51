"""
Interior Studio - Internationalization Module
English / Chinese translation dictionary for the editor UI
"""


class I18n:
    """
    Internationalization management class
    Provides English-Chinese translation and language switching functionality
    """

    TEXTS = {
        # ==================== Header ====================
        'app_title': {
            'en': '🏠 Interior Studio',
            'zh': '🏠 室內設計工作室'
        },
        'app_subtitle': {
            'en': 'Photorealistic material, lighting & cinematic editing',
            'zh': '照片級材質、燈光與電影感編輯'
        },
        'lang_btn_zh': {
            'en': '🌐 中文',
            'zh': '🌐 中文'
        },
        'lang_btn_en': {
            'en': '🌐 English',
            'zh': '🌐 English'
        },

        # ==================== Presets ====================
        'presets_title': {
            'en': '#### ⚡ Quick Presets',
            'zh': '#### ⚡ 快速預設'
        },
        'preset_minimal': {
            'en': 'Minimal',
            'zh': '極簡'
        },
        'preset_business': {
            'en': 'Business',
            'zh': '商務'
        },
        'preset_industrial': {
            'en': 'Industrial',
            'zh': '工業風'
        },

        # ==================== Image Settings ====================
        'section_image_settings': {
            'en': '#### 🖼️ Image Settings',
            'zh': '#### 🖼️ 圖像設定'
        },
        'base_image': {
            'en': 'Base Image',
            'zh': '基礎圖像'
        },
        'target_aspect': {
            'en': 'Target Aspect Ratio',
            'zh': '目標長寬比'
        },
        'target_aspect_info': {
            'en': 'Common sizes: {sizes}',
            'zh': '常用尺寸：{sizes}'
        },
        'output_size': {
            'en': 'Output size: **{w} × {h} px**',
            'zh': '輸出尺寸：**{w} × {h} px**'
        },
        'seed': {
            'en': 'Seed',
            'zh': '種子'
        },
        'use_fixed_seed': {
            'en': 'Use Fixed Seed',
            'zh': '使用固定種子'
        },

        # ==================== Style ====================
        'section_style': {
            'en': '#### 🎨 Interior Style',
            'zh': '#### 🎨 室內風格'
        },
        'style_gallery': {
            'en': 'Styles',
            'zh': '風格'
        },
        'style_none_btn': {
            'en': 'No Style',
            'zh': '不指定風格'
        },
        'selected_style': {
            'en': 'Selected style: **{style}**',
            'zh': '已選風格：**{style}**'
        },
        'style_Modern': {'en': 'Modern', 'zh': '現代'},
        'style_Minimalist': {'en': 'Minimalist', 'zh': '極簡主義'},
        'style_Industrial': {'en': 'Industrial', 'zh': '工業風'},
        'style_Scandinavian': {'en': 'Scandinavian', 'zh': '北歐風'},
        'style_Bohemian': {'en': 'Bohemian', 'zh': '波希米亞'},
        'style_Coastal': {'en': 'Coastal', 'zh': '海岸風'},
        'style_Farmhouse': {'en': 'Farmhouse', 'zh': '農舍風'},
        'style_MidCenturyModern': {'en': 'Mid-Century Modern', 'zh': '中世紀現代'},
        'style_ArtDeco': {'en': 'Art Deco', 'zh': '裝飾藝術'},
        'style_Japandi': {'en': 'Japandi', 'zh': '日式北歐'},
        'style_Maximalist': {'en': 'Maximalist', 'zh': '繁複主義'},
        'style_Gothic': {'en': 'Gothic', 'zh': '哥德式'},
        'style_Cyberpunk': {'en': 'Cyberpunk', 'zh': '賽博龐克'},
        'style_Steampunk': {'en': 'Steampunk', 'zh': '蒸汽龐克'},
        'style_HollywoodRegency': {'en': 'Hollywood Regency', 'zh': '好萊塢攝政風'},
        'style_Rustic': {'en': 'Rustic', 'zh': '鄉村風'},
        'style_ShabbyChic': {'en': 'Shabby Chic', 'zh': '復古優雅'},
        'style_Transitional': {'en': 'Transitional', 'zh': '過渡風'},
        'style_Tropical': {'en': 'Tropical', 'zh': '熱帶風'},
        'style_Victorian': {'en': 'Victorian', 'zh': '維多利亞'},
        'style_Zen': {'en': 'Zen', 'zh': '禪風'},

        # ==================== Materials ====================
        'section_material_surface': {
            'en': '🧱 Materials & Surfaces',
            'zh': '🧱 材質與表面'
        },
        'ceiling_color': {
            'en': 'Ceiling Color',
            'zh': '天花板顏色'
        },
        'wall_color': {
            'en': 'Wall Color',
            'zh': '牆壁顏色'
        },
        'wall_texture': {
            'en': 'Wall Texture',
            'zh': '牆壁紋理'
        },
        'cabinet_color': {
            'en': 'Cabinet Color',
            'zh': '櫥櫃顏色'
        },
        'cabinet_texture': {
            'en': 'Cabinet Texture',
            'zh': '櫥櫃紋理'
        },
        'wood_grain_direction': {
            'en': 'Wood Grain Direction',
            'zh': '木紋方向'
        },
        'wood_grain_direction_vertical': {'en': 'Vertical', 'zh': '垂直'},
        'wood_grain_direction_horizontal': {'en': 'Horizontal', 'zh': '水平'},
        'floor_material': {
            'en': 'Floor Material',
            'zh': '地板材質'
        },
        'floor_material_wood': {'en': 'Wood', 'zh': '木材'},
        'floor_material_marble': {'en': 'Marble', 'zh': '大理石'},
        'floor_material_tile': {'en': 'Tile', 'zh': '磁磚'},
        'floor_material_concrete': {'en': 'Concrete', 'zh': '混凝土'},
        'floor_texture': {
            'en': 'Floor Texture',
            'zh': '地板紋理'
        },
        'roughness': {
            'en': 'Roughness',
            'zh': '粗糙度'
        },
        'glossiness': {
            'en': 'Glossiness',
            'zh': '光澤度'
        },

        # ==================== Lighting ====================
        'section_lighting': {
            'en': '💡 Lighting',
            'zh': '💡 燈光'
        },
        'light_color': {
            'en': 'Light Color',
            'zh': '光色'
        },
        'use_light_temp': {
            'en': 'Use Color Temperature',
            'zh': '使用色溫'
        },
        'light_temp': {
            'en': 'Light Temperature (K)',
            'zh': '色溫 (K)'
        },
        'light_intensity': {
            'en': 'Light Intensity',
            'zh': '燈光強度'
        },
        'lamp_style': {
            'en': 'Lamp Style',
            'zh': '燈具風格'
        },
        'lamp_style_downlight': {'en': 'Downlight', 'zh': '嵌燈'},
        'lamp_style_track': {'en': 'Track', 'zh': '軌道燈'},
        'lamp_style_chandelier': {'en': 'Chandelier', 'zh': '吊燈'},
        'lamp_style_panel': {'en': 'Panel', 'zh': '平板燈'},
        'night_mode': {
            'en': 'Night Mode',
            'zh': '夜間模式'
        },
        'shadow_softness': {
            'en': 'Shadow Softness',
            'zh': '陰影柔和度'
        },
        'contact_shadows': {
            'en': 'Contact Shadows',
            'zh': '接觸陰影'
        },

        # ==================== Cinematic Effects ====================
        'section_cinematic': {
            'en': '🎬 Cinematic Effects',
            'zh': '🎬 電影效果'
        },
        'cinematic_look': {
            'en': 'Cinematic Look',
            'zh': '電影風格'
        },
        'cinematic_look_teal_orange': {'en': 'Teal & Orange', 'zh': '青橙色調'},
        'cinematic_look_film_noir': {'en': 'Film Noir', 'zh': '黑色電影'},
        'cinematic_look_vintage_film': {'en': 'Vintage Film', 'zh': '復古膠片'},
        'cinematic_look_cyberpunk_neon': {'en': 'Cyberpunk Neon', 'zh': '賽博龐克霓虹'},
        'bloom': {
            'en': 'Bloom',
            'zh': '光暈'
        },
        'vignette': {
            'en': 'Vignette',
            'zh': '暗角'
        },
        'film_grain': {
            'en': 'Film Grain',
            'zh': '膠片顆粒'
        },
        'lens_flare': {
            'en': 'Lens Flare',
            'zh': '鏡頭光暈'
        },

        # ==================== Advanced ====================
        'section_advanced': {
            'en': '🛠️ Advanced',
            'zh': '🛠️ 進階設定'
        },
        'bathroom_replace': {
            'en': 'Replace Bathroom Fixtures',
            'zh': '更換衛浴設備'
        },
        'bath_style': {
            'en': 'Bathroom Style',
            'zh': '衛浴風格'
        },
        'bath_style_modern': {'en': 'Modern', 'zh': '現代'},
        'bath_style_minimal': {'en': 'Minimal', 'zh': '極簡'},
        'bath_style_classic': {'en': 'Classic', 'zh': '經典'},
        'fixture_color': {
            'en': 'Fixture Color',
            'zh': '設備顏色'
        },
        'mask_mode': {
            'en': 'Masking Mode',
            'zh': '遮罩模式'
        },
        'mask_mode_auto': {'en': 'Automatic', 'zh': '自動'},
        'mask_mode_manual': {'en': 'Manual', 'zh': '手動'},
        'mask_image': {
            'en': 'Mask Image (white = editable area)',
            'zh': '遮罩圖像（白色為可編輯區域）'
        },
        'negative_prompts': {
            'en': 'Negative Prompts',
            'zh': '負面提示'
        },
        'none': {
            'en': 'None',
            'zh': '無'
        },

        # ==================== Actions ====================
        'generate_btn': {
            'en': '🚀 Generate',
            'zh': '🚀 生成'
        },
        'generating_btn': {
            'en': '⏳ Generating...',
            'zh': '⏳ 生成中...'
        },

        # ==================== Result ====================
        'output_title': {
            'en': '#### 👁️ Output',
            'zh': '#### 👁️ 輸出'
        },
        'result_image': {
            'en': 'Result',
            'zh': '結果'
        },
        'status_empty': {
            'en': '💡 Upload a base image and adjust the settings, then press Generate.',
            'zh': '💡 上傳基礎圖像並調整設定，然後按下生成。'
        },
        'status_loading': {
            'en': '⏳ Rendering your design... This can take up to a minute.',
            'zh': '⏳ 正在渲染您的設計……可能需要一分鐘。'
        },
        'status_success': {
            'en': '✅ Done (seed {seed})',
            'zh': '✅ 完成（種子 {seed}）'
        },
        'error_title': {
            'en': '❌ Error',
            'zh': '❌ 錯誤'
        },
        'download_file': {
            'en': 'Download PNG',
            'zh': '下載 PNG'
        },
        'json_title': {
            'en': 'Applied Parameters (JSON)',
            'zh': '套用參數 (JSON)'
        },
        'footer_tip': {
            'en': '💡 Tip: a clean wireframe or render of the room gives the most faithful results.',
            'zh': '💡 提示：使用乾淨的線框圖或房間渲染圖可獲得最準確的結果。'
        },

        # ==================== Errors ====================
        'error_unknown': {
            'en': 'An unknown error occurred.',
            'zh': '發生未知錯誤。'
        },
        'error_base_image_missing': {
            'en': 'Please upload a base image first.',
            'zh': '請先上傳基礎圖像。'
        },
        'error_api_key_missing': {
            'en': 'API key not found. Set GEMINI_API_KEY (or API_KEY) in the environment.',
            'zh': '找不到 API 金鑰。請在環境變數中設定 GEMINI_API_KEY（或 API_KEY）。'
        },
        'error_image_read': {
            'en': 'One of the uploaded images could not be read.',
            'zh': '無法讀取其中一張上傳的圖像。'
        },
        'error_remote': {
            'en': 'The image model request failed. Please try again.',
            'zh': '圖像模型請求失敗，請再試一次。'
        },
        'error_model_no_image': {
            'en': 'The model did not return an image. Try adjusting the settings.',
            'zh': '模型未返回圖像。請嘗試調整設定。'
        },
        'error_malformed_metadata': {
            'en': 'The model returned unreadable parameter data.',
            'zh': '模型返回的參數資料無法解析。'
        },
        'error_api_key_invalid': {
            'en': 'Invalid API key. Check your key in Google AI Studio.',
            'zh': 'API 金鑰無效。請在 Google AI Studio 檢查您的金鑰。'
        },
        'error_unauthenticated': {
            'en': 'Authentication failed. Verify API key permissions.',
            'zh': '驗證失敗。請確認 API 金鑰權限。'
        },
        'error_quota': {
            'en': 'Quota exceeded. Check usage limits in Google AI Studio.',
            'zh': '配額已用盡。請在 Google AI Studio 檢查用量限制。'
        },
        'error_permission': {
            'en': 'Permission denied. Your key may lack access to this model.',
            'zh': '權限被拒。您的金鑰可能無法使用此模型。'
        },
        'error_rate_limit': {
            'en': 'Rate limit exceeded. Wait a moment and retry.',
            'zh': '請求過於頻繁。請稍候再試。'
        },
        'error_safety': {
            'en': 'Content blocked by safety filters. Try adjusting your settings.',
            'zh': '內容被安全過濾器阻擋。請嘗試調整設定。'
        },
    }

    @staticmethod
    def get(key: str, lang: str = 'en') -> str:
        """
        Get text in specified language

        Args:
            key: Text key name
            lang: Language code ('en' or 'zh')

        Returns:
            str: Translated text, returns key itself if key doesn't exist
        """
        if key in I18n.TEXTS:
            return I18n.TEXTS[key].get(lang, I18n.TEXTS[key].get('en', key))
        return key

    @staticmethod
    def get_all(lang: str = 'en') -> dict:
        """
        Get all texts in specified language version

        Args:
            lang: Language code ('en' or 'zh')

        Returns:
            dict: {key: translated_text}
        """
        return {key: I18n.get(key, lang) for key in I18n.TEXTS.keys()}

    @staticmethod
    def option_label(field_name: str, option: str, lang: str = 'en') -> str:
        """Display label for a dropdown option, e.g. ('floor_material', 'wood')."""
        if option == '':
            return I18n.get('none', lang)
        key = f"{field_name}_{option}"
        if key in I18n.TEXTS:
            return I18n.get(key, lang)
        return option[:1].upper() + option[1:]
