"""
Pytest configuration and shared fixtures.
"""
import base64
import io

import pytest
from PIL import Image

from imagery_ui.config import Settings

from .fakes import FakeClient


def _encode(fmt: str, mode: str = "RGB") -> str:
    buffer = io.BytesIO()
    Image.new(mode, (8, 6), color="white").save(buffer, format=fmt)
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


@pytest.fixture
def png_b64():
    return _encode("PNG", mode="RGBA")


@pytest.fixture
def jpeg_b64():
    return _encode("JPEG")


@pytest.fixture
def settings():
    return Settings(api_base="http://backend.test", request_timeout=5.0)


@pytest.fixture
def full_response(png_b64, jpeg_b64):
    return {
        "youtube_url": "https://youtu.be/abc123",
        "save_dir": "out/abc123",
        "products": [
            {
                "name": "Sony WH-1000XM5",
                "confidence": 0.93,
                "reason": "Shown in close-up during unboxing",
                "frame_b64": jpeg_b64,
                "segmentation": {"cropped_b64": png_b64, "mask_b64": png_b64},
                "enhanced": [png_b64, png_b64, png_b64],
            },
            {
                "name": None,
                "confidence": 0,
                "reason": None,
                "frame_b64": None,
                "segmentation": None,
                "enhanced": [],
            },
        ],
    }


@pytest.fixture
def fake_client():
    return FakeClient()
