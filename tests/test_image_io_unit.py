"""Unit tests for attachment reading and result saving (core/image_io.py)."""

import base64
import os
from io import BytesIO

import pytest
from PIL import Image

from core.errors import ImageReadError
from core.image_io import decode_result_image, read_image_file, save_result_png
from core.naming import parse_result_filename


def _png_b64(color=(120, 90, 60)):
    buf = BytesIO()
    Image.new('RGB', (4, 4), color).save(buf, format='PNG')
    return base64.b64encode(buf.getvalue()).decode('ascii')


class TestReadImageFile:

    def test_detects_png(self, tmp_path):
        path = tmp_path / "room.png"
        Image.new('RGB', (2, 2)).save(path, format='PNG')
        data, mime_type = read_image_file(str(path))
        assert mime_type == 'image/png'
        assert data == path.read_bytes()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageReadError):
            read_image_file(str(tmp_path / "missing.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(ImageReadError):
            read_image_file(str(path))


class TestSaveResultPng:

    def test_writes_png_into_dir(self, tmp_path):
        path = save_result_png(_png_b64(), str(tmp_path))
        assert os.path.dirname(path) == str(tmp_path)
        with Image.open(path) as img:
            assert img.format == 'PNG'
            assert img.getpixel((0, 0)) == (120, 90, 60)

    def test_name_follows_result_format(self, tmp_path):
        parsed = parse_result_filename(os.path.basename(save_result_png(_png_b64(), str(tmp_path))))
        assert parsed["base_name"] == "interior-design"
        assert parsed["extension"] == ".png"

    def test_same_second_saves_do_not_collide(self, tmp_path, monkeypatch):
        monkeypatch.setattr('core.naming._get_timestamp', lambda: "20250101_120000")
        first = save_result_png(_png_b64((255, 0, 0)), str(tmp_path))
        second = save_result_png(_png_b64((0, 0, 255)), str(tmp_path))
        assert first != second
        assert len(os.listdir(tmp_path)) == 2
        with Image.open(first) as img:
            assert img.getpixel((0, 0)) == (255, 0, 0)

    def test_defaults_to_temp_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr('tempfile.tempdir', str(tmp_path))
        path = save_result_png(_png_b64())
        assert os.path.dirname(path) == str(tmp_path)

    def test_bad_image_writes_nothing(self, tmp_path):
        with pytest.raises(OSError):
            save_result_png(base64.b64encode(b"not a png").decode('ascii'), str(tmp_path))
        assert os.listdir(tmp_path) == []


class TestDecodeResultImage:

    def test_rgb(self):
        assert decode_result_image(_png_b64()).mode == 'RGB'
