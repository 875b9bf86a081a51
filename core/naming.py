"""Naming: file names for downloadable results.

Result images are offered as `{base}_{YYYYMMDD_HHmmss}.png` so repeated
downloads sort by time. Saved copies may carry an extra `_{random}` part
before the extension; the timestamp alone only has one-second resolution.
"""

import re
from datetime import datetime
from typing import Dict, Optional


DEFAULT_BASE_NAME = "interior-design"


def _get_timestamp() -> str:
    """Current local time as YYYYMMDD_HHmmss."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _sanitize(name: str) -> str:
    """Replace characters the OS forbids in file names with underscores."""
    forbidden = '<>:"/\\|?*'
    for ch in forbidden:
        name = name.replace(ch, "_")
    return name


def generate_result_filename(
    base_name: str = DEFAULT_BASE_NAME,
    extension: str = ".png",
) -> str:
    """Build a result file name.

    Format: {base_name}_{timestamp}{ext}

    - empty or whitespace base_name falls back to "interior-design"
    """
    base = _sanitize(base_name.strip()) if base_name.strip() else DEFAULT_BASE_NAME
    ts = _get_timestamp()
    return f"{base}_{ts}{extension}"


_TS_PATTERN = r"\d{8}_\d{6}"

# Optional random part added by tempfile.mkstemp
_RESULT_RE = re.compile(rf"^(.+)_({_TS_PATTERN})(?:_[A-Za-z0-9_]+)?(\.[\w]+)$")


def parse_result_filename(filename: str) -> Optional[Dict[str, str]]:
    """Split a result file name into base_name, timestamp and extension.

    Returns None for names that do not follow the result format.
    """
    if not isinstance(filename, str) or not filename:
        return None
    m = _RESULT_RE.match(filename)
    if not m:
        return None
    return {
        "base_name": m.group(1),
        "timestamp": m.group(2),
        "extension": m.group(3),
    }
