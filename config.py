"""
Interior Studio - Configuration
Compiled-in constants and environment lookups
"""

import os
import tempfile


class CanvasConfig:
    """Output canvas settings"""

    BASE_WIDTH = 1920

    ASPECT_RATIOS = ('16:9', '21:9', '2.39:1', '4:3', '1:1')

    SIZE_SUGGESTIONS = {
        '16:9': '1920×1080, 2560×1440, 3840×2160',
        '4:3': '1600×1200, 2048×1536',
        '1:1': '1080×1080, 2048×2048',
        '21:9': '2560×1080, 3440×1440',
        '2.39:1': '2560×1071, 3840×1607',
    }

    @staticmethod
    def get_size_suggestion(aspect: str) -> str:
        return CanvasConfig.SIZE_SUGGESTIONS.get(aspect, '')


class ModelConfig:
    """Remote image model settings"""

    DEFAULT_MODEL = 'gemini-2.5-flash-image'
    MODEL_ENV_VAR = 'INTERIOR_STUDIO_MODEL'

    # Checked in order; the first non-empty value wins.
    API_KEY_ENV_VARS = ('GEMINI_API_KEY', 'API_KEY')

    RESPONSE_MODALITIES = ['IMAGE', 'TEXT']

    # Ratios the image model accepts in ImageConfig; others are only
    # requested through the prompt text.
    NATIVE_ASPECT_RATIOS = ('1:1', '4:3', '16:9', '21:9')

    @staticmethod
    def get_model_name() -> str:
        return os.environ.get(ModelConfig.MODEL_ENV_VAR, '').strip() or ModelConfig.DEFAULT_MODEL

    @staticmethod
    def get_env_api_key() -> str:
        for name in ModelConfig.API_KEY_ENV_VARS:
            value = os.environ.get(name, '').strip()
            if value:
                return value
        return ''


class ServerConfig:
    """Gradio server settings"""

    DEFAULT_PORT = 7860
    PORT_ENV_VAR = 'INTERIOR_STUDIO_PORT'

    # Result PNGs for download live in the system temp dir
    DOWNLOAD_DIR = tempfile.gettempdir()

    # Set INTERIOR_STUDIO_NO_BROWSER=1 on headless hosts
    OPEN_BROWSER = not os.environ.get('INTERIOR_STUDIO_NO_BROWSER')

    # One generation in flight at a time
    GENERATION_CONCURRENCY = 1

    DEFAULT_LANGUAGE = 'en'
    LANGUAGES = ('en', 'zh')

    @staticmethod
    def get_start_port() -> int:
        raw = os.environ.get(ServerConfig.PORT_ENV_VAR, '').strip()
        if raw.isdigit():
            return int(raw)
        return ServerConfig.DEFAULT_PORT
