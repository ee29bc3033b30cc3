"""Test configuration and fixtures for cl_image_resizer.

This module provides:
- Image fixtures generated with Pillow (in memory and on disk)
- Dispatcher and API client fixtures
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from cl_image_resizer.common.config import ResizerDefaults
from cl_image_resizer.dispatcher import ResizeDispatcher
from cl_image_resizer.routes import create_router
from image_helpers import make_image, to_b64

# ============================================================================
# Image fixtures
# ============================================================================


@pytest.fixture
def image_200x100() -> Image.Image:
    return make_image(200, 100)


@pytest.fixture
def b64_200x100(image_200x100: Image.Image) -> str:
    """200x100 PNG as base64 text."""
    return to_b64(image_200x100)


@pytest.fixture
def b64_100x100() -> str:
    return to_b64(make_image(100, 100))


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate an 800x600 JPEG on disk."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def not_an_image(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    _ = path.write_text("this is not an image")
    return path


# ============================================================================
# Service fixtures
# ============================================================================


@pytest.fixture
def dispatcher() -> ResizeDispatcher:
    return ResizeDispatcher()


@pytest.fixture
def api_client() -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    app = FastAPI()
    app.include_router(create_router(ResizerDefaults()))
    return TestClient(app)
