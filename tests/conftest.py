"""Shared fixtures for deckedit tests."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest
from pptx import Presentation

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# Layout indices of python-pptx's default template
TITLE_AND_CONTENT = 1
TITLE_ONLY = 5


# ── Environment isolation ───────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Isolate every test from real env vars and filesystem side effects."""
    monkeypatch.setenv("DECKEDIT_LOG_FILE", str(tmp_path / "deckedit.log"))
    monkeypatch.setenv("DECKEDIT_LOG_LEVEL", "INFO")
    monkeypatch.chdir(tmp_path)

    # Clear the cached settings singleton so each test picks up monkeypatched env
    from deckedit.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ── Reusable fixtures ──────────────────────────────────────────────────


def build_deck(titles: list[str], layout_index: int = TITLE_AND_CONTENT):
    """Return an in-memory presentation with one titled slide per entry."""
    prs = Presentation()
    for title in titles:
        slide = prs.slides.add_slide(prs.slide_layouts[layout_index])
        slide.shapes.title.text = title
    return prs


def reopen(prs):
    """Save *prs* to memory and load it back."""
    buf = io.BytesIO()
    prs.save(buf)
    buf.seek(0)
    return Presentation(buf)


def slide_titles(prs) -> list[str]:
    return [slide.shapes.title.text if slide.shapes.title is not None else "" for slide in prs.slides]


@pytest.fixture
def deck():
    """Four-slide deck titled A..D."""
    return build_deck(["A", "B", "C", "D"])


@pytest.fixture
def make_deck_file(tmp_path):
    """Factory fixture that writes a titled deck to disk and returns its path."""

    def _factory(titles: list[str], name: str = "Presentation.pptx") -> Path:
        path = tmp_path / name
        build_deck(titles).save(str(path))
        return path

    return _factory


@pytest.fixture
def jpeg_bytes():
    """Small valid JPEG image."""
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", (32, 24), (30, 90, 200)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def jpeg_file(tmp_path, jpeg_bytes):
    path = tmp_path / "earth.jpg"
    path.write_bytes(jpeg_bytes)
    return path


@pytest.fixture
def restore_root_logger():
    """Put back whatever handlers pytest had installed on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
