"""Pytest configuration and shared fixtures for sigpad tests."""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add scripts to path
SIGPAD_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(SIGPAD_ROOT / "scripts"))

SCRIPTS = SIGPAD_ROOT / "scripts"

TRANSPARENT = (0, 0, 0, 0)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def tmp_output(tmp_path):
    return tmp_path


@pytest.fixture
def blank_bitmap():
    return Image.new("RGBA", (100, 100), TRANSPARENT)


# --- Helpers used across test files ---

def make_strokes(tmp_path, strokes, wrap=True):
    """Write a strokes JSON file and return its path."""
    strokes_path = tmp_path / "strokes.json"
    data = {"strokes": strokes} if wrap else strokes
    strokes_path.write_text(json.dumps(data))
    return strokes_path


def run_render(strokes_path, output_png, extra_args=None):
    """Run render_signature.py and return (parsed stdout or None, result)."""
    cmd = [sys.executable, str(SCRIPTS / "render_signature.py"),
           str(strokes_path), str(output_png)]
    if extra_args:
        cmd.extend(extra_args)
    result = subprocess.run(cmd, capture_output=True, text=True, timeout=60)
    report = json.loads(result.stdout) if result.stdout.strip() else None
    return report, result


def opaque_pixels(image):
    """Coordinates of every pixel with non-zero alpha."""
    alpha = image.getchannel("A")
    width, height = image.size
    data = alpha.load()
    return {(x, y) for y in range(height) for x in range(width) if data[x, y]}
