"""Shared pytest configuration."""

import os
import tempfile
from pathlib import Path

import pytest

# Settings are read at import time, so the log directory is redirected first.
os.environ.setdefault("CHATVEZ_LOG_DIR", tempfile.mkdtemp(prefix="chatvez-logs-"))

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app_path():
    """Absolute path of the Streamlit entry script."""
    return APP_PATH


def image_elements(node):
    """Collect image elements below an AppTest block, under either proto name."""
    found = []
    if getattr(node, "type", None) in ("image", "imgs"):
        found.append(node)
    for child in getattr(node, "children", {}).values():
        found.extend(image_elements(child))
    return found


@pytest.fixture
def find_images():
    """Return a callable listing the images rendered in an AppTest block."""
    return image_elements
