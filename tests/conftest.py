import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to sys.path so tests can import packages like 'services' and 'domain'
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_image_bytes(size, fmt="PNG", mode="RGB", color=(200, 30, 30)):
    img = Image.new(mode, size, color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_1000x500():
    return make_image_bytes((1000, 500))


@pytest.fixture
def rgba_png():
    return make_image_bytes((64, 32), mode="RGBA", color=(10, 20, 30, 128))
