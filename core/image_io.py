"""
Interior Studio - Image I/O
Attachment loading and result image decoding.
"""

import base64
import os
import tempfile
from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError
from google.genai import types

from core.errors import ImageReadError
from core.naming import generate_result_filename


def read_image_file(path: str):
    """
    Read an image file and detect its MIME type with Pillow.

    Returns:
        tuple: (raw_bytes, mime_type)

    Raises:
        ImageReadError: File missing, unreadable or not an image
    """
    try:
        with open(path, 'rb') as fh:
            data = fh.read()
        with Image.open(BytesIO(data)) as img:
            mime_type = Image.MIME.get(img.format or '', 'image/png')
    except (OSError, UnidentifiedImageError) as exc:
        raise ImageReadError(f"{os.path.basename(str(path))}: {exc}") from exc
    return data, mime_type


def load_image_part(path: str) -> types.Part:
    """Inline-data Part for an image file."""
    data, mime_type = read_image_file(path)
    return types.Part.from_bytes(data=data, mime_type=mime_type)


def decode_result_image(image_b64: str) -> Image.Image:
    """Decode the model's base64 image into an RGB PIL image."""
    raw = base64.b64decode(image_b64)
    return Image.open(BytesIO(raw)).convert('RGB')


def save_result_png(image_b64: str, output_dir: Optional[str] = None) -> str:
    """
    Write the result image as a timestamped PNG for download.

    The file goes to the system temp dir unless output_dir is given.
    mkstemp appends a random suffix, so two results saved within the
    same second get distinct files.

    Returns:
        str: Absolute path to the written file
    """
    image = decode_result_image(image_b64)
    prefix = generate_result_filename(extension='') + '_'
    fd, path = tempfile.mkstemp(prefix=prefix, suffix='.png', dir=output_dir)
    try:
        with os.fdopen(fd, 'wb') as fh:
            image.save(fh, format='PNG')
    except OSError:
        os.remove(path)
        raise
    print(f"[Interior Studio] Saved result: {path}")
    return os.path.abspath(path)
