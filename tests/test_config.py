"""Tests for deckedit.config — Pydantic-based configuration."""

from __future__ import annotations

import pytest

from deckedit.config import Box, EditorConfig, get_settings


class TestEditorConfig:
    """Validate EditorConfig defaults and validators."""

    def test_defaults(self):
        cfg = get_settings()
        assert cfg.image_page == 1
        assert cfg.text_page == 2
        assert (cfg.move_from, cfg.move_to) == (2, 1)
        assert cfg.new_slide_position == 3
        assert cfg.new_slide_title == "New Slide"
        assert cfg.table_page == 3
        assert cfg.text_content == "Hello\nWorld"

    def test_geometry_groups(self):
        cfg = get_settings()
        assert cfg.image_box == Box(7_500_000, 2_000_000, 3_000_000, 3_000_000)
        assert cfg.text_box == Box(2_000_000, 2_000_000, 3_000_000, 5_000_000)
        assert cfg.table_offset == Box(250_000, 2_000_000)

    def test_table_defaults(self):
        cfg = get_settings()
        assert cfg.table_data_columns == 5
        assert cfg.table_body_rows == 5
        assert cfg.table_column_width == 1_948_000
        assert cfg.table_row_height == 370_840
        assert cfg.table_remarks_header == "Remarks"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DECKEDIT_IMAGE_PAGE", "0")
        monkeypatch.setenv("DECKEDIT_NEW_SLIDE_TITLE", "From env")
        get_settings.cache_clear()
        cfg = get_settings()
        assert cfg.image_page == 0
        assert cfg.new_slide_title == "From env"

    def test_move_must_change_position(self):
        with pytest.raises(Exception):
            EditorConfig(move_from=1, move_to=1)

    def test_negative_geometry_rejected(self):
        with pytest.raises(Exception):
            EditorConfig(image_left=-1)

    def test_negative_page_rejected(self):
        with pytest.raises(Exception):
            EditorConfig(text_page=-1)

    def test_table_needs_a_column(self):
        with pytest.raises(Exception):
            EditorConfig(table_data_columns=0)

    def test_log_level_normalised(self):
        cfg = EditorConfig(log_level="  debug ")
        assert cfg.log_level == "DEBUG"

    def test_log_level_rejects_unknown(self):
        with pytest.raises(Exception):
            EditorConfig(log_level="chatty")
