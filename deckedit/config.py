"""Centralised editor configuration using pydantic-settings.

Every path, slide index, geometry constant and literal string used by the
edit sequence lives here.  Distances are EMU (English Metric Units):
914400 per inch, 360000 per centimetre.

Usage:
    from deckedit.config import settings
    print(settings.image_box)
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Box(NamedTuple):
    """Position and size of a shape, in EMU."""

    left: int
    top: int
    width: int = 0
    height: int = 0


class EditorConfig(BaseSettings):
    """Single source of truth for every tuneable parameter."""

    model_config = SettingsConfigDict(
        env_prefix="DECKEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # silently ignore unknown env vars
        case_sensitive=False,
    )

    # ── Files ───────────────────────────────────────────────────────────
    source_path: str = Field(default="Resources/Presentation.pptx", description="Deck to edit")
    output_path: str = Field(default="Resources/NewPresentation.pptx", description="Where the edited copy goes")
    image_path: str = Field(default="Resources/earth.jpg", description="Image embedded by the edit run")

    # ── Image (EMU) ─────────────────────────────────────────────────────
    image_page: int = Field(default=1, ge=0)
    image_left: int = Field(default=7_500_000, ge=0)
    image_top: int = Field(default=2_000_000, ge=0)
    image_width: int = Field(default=3_000_000, ge=0)
    image_height: int = Field(default=3_000_000, ge=0)

    # ── Text box (EMU) ──────────────────────────────────────────────────
    text_page: int = Field(default=2, ge=0)
    text_content: str = Field(default="Hello\nWorld")
    text_left: int = Field(default=2_000_000, ge=0)
    text_top: int = Field(default=2_000_000, ge=0)
    text_width: int = Field(default=3_000_000, ge=0)
    text_height: int = Field(default=5_000_000, ge=0)

    # ── Slide order ─────────────────────────────────────────────────────
    move_from: int = Field(default=2, ge=0)
    move_to: int = Field(default=1, ge=0)
    new_slide_position: int = Field(default=3, ge=0)
    new_slide_title: str = Field(default="New Slide")

    # ── Table (EMU) ─────────────────────────────────────────────────────
    table_page: int = Field(default=3, ge=0)
    table_left: int = Field(default=250_000, ge=0)
    table_top: int = Field(default=2_000_000, ge=0)
    table_data_columns: int = Field(default=5, ge=1)
    table_body_rows: int = Field(default=5, ge=1)
    table_column_width: int = Field(default=1_948_000, ge=1)
    table_row_height: int = Field(default=370_840, ge=1)
    table_remarks_header: str = Field(default="Remarks")

    # ── Logging ─────────────────────────────────────────────────────────
    log_file: str = Field(default="deckedit.log")
    log_max_bytes: int = Field(default=5 * 1024 * 1024)  # 5 MB
    log_backup_count: int = Field(default=3)
    log_json: bool = Field(default=True, description="JSON lines instead of plain text")
    log_level: str = Field(default="INFO")

    # ── Validators ──────────────────────────────────────────────────────
    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.strip().upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v

    @model_validator(mode="after")
    def _validate_move(self) -> EditorConfig:
        if self.move_from == self.move_to:
            raise ValueError(f"move_from and move_to must differ, both are {self.move_from}")
        return self

    # ── Grouped geometry ────────────────────────────────────────────────
    @property
    def image_box(self) -> Box:
        return Box(self.image_left, self.image_top, self.image_width, self.image_height)

    @property
    def text_box(self) -> Box:
        return Box(self.text_left, self.text_top, self.text_width, self.text_height)

    @property
    def table_offset(self) -> Box:
        """Top-left corner of the table frame; size follows from the grid."""
        return Box(self.table_left, self.table_top)


@lru_cache(maxsize=1)
def get_settings() -> EditorConfig:
    """Return the cached singleton settings instance."""
    return EditorConfig()


# Module-level shortcut for convenience
settings = get_settings()
