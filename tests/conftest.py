import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import mystery_letter
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


WHITE = (255, 255, 255)
QUADRANT_COLORS = [
    (200, 30, 30),   # top-left
    (30, 200, 30),   # top-right
    (30, 30, 200),   # bottom-left
    (200, 200, 30),  # bottom-right
]


def gradient_image(width: int, height: int) -> Image.Image:
    """RGB image where no pixel is white and neighbouring pixels differ."""
    img = Image.new("RGB", (width, height))
    img.putdata([
        ((x * 7) % 250, (y * 11) % 250, 100)
        for y in range(height)
        for x in range(width)
    ])
    return img


# Common test fixtures
@pytest.fixture
def quadrant_image():
    """Create a 40x40 image with one solid colour per 2x2 grid cell."""
    img = Image.new("RGB", (40, 40), color="white")
    for i, color in enumerate(QUADRANT_COLORS):
        left = (i % 2) * 20
        top = (i // 2) * 20
        img.paste(color, (left, top, left + 20, top + 20))
    return img


@pytest.fixture
def sample_image_path(tmp_path: Path):
    """Create a small test image on disk."""
    img = gradient_image(60, 90)
    img_path = tmp_path / "letter.png"
    img.save(img_path)
    return img_path
