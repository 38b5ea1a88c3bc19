"""
Shared fixtures: synthetic images built with Pillow.
"""
import pytest
from PIL import Image


def make_gradient(width, height):
    """RGB image with smooth horizontal/vertical colour ramps."""
    horizontal = Image.linear_gradient("L").resize((width, height))
    vertical = horizontal.transpose(Image.Transpose.ROTATE_90).resize((width, height))
    blue = Image.new("L", (width, height), 96)
    return Image.merge("RGB", (horizontal, vertical, blue))


@pytest.fixture
def flat_image():
    return Image.new("RGB", (1000, 1000), color=(120, 130, 140))


@pytest.fixture
def gradient_image():
    return make_gradient(256, 256)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "input.png"
    make_gradient(400, 300).save(path, format="PNG")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CRUSH_MAX_DIMENSION", "CRUSH_INITIAL_QUALITY", "CRUSH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
