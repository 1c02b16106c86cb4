"""Edit run — copy a deck, apply the fixed edit sequence, save.

Orchestrates: slide-list edits + shape edits + config geometry.
Does *not* touch any XML itself (that's in deckedit.editing).
"""

from __future__ import annotations

from pathlib import Path
from typing import IO

from pptx import Presentation

from deckedit.config import EditorConfig, get_settings
from deckedit.core.log import safe_print, session_context, timed
from deckedit.editing.shapes import append_table, append_text, embed_image
from deckedit.editing.slides import count_slides, insert_slide, move_slide


def duplicate_file(src: str | Path, dst: str | Path) -> Path:
    """Open *src* and save it as *dst*; the source file is left untouched."""
    src, dst = Path(src), Path(dst)
    if not src.is_file():
        raise FileNotFoundError(f"Source deck not found: {src}")
    dst.parent.mkdir(parents=True, exist_ok=True)

    prs = Presentation(str(src))
    prs.save(str(dst))
    return dst


def run(
    src_path: str | Path,
    dst_path: str | Path,
    image: str | Path | bytes | IO[bytes],
    cfg: EditorConfig | None = None,
) -> Path:
    """Copy *src_path* to *dst_path* and apply every edit to the copy.

    Steps, in order: embed image, append text, move slide, insert slide,
    append table, save.  Any failure aborts the run and propagates; the
    destination is then left partially edited.
    """
    cfg = cfg or get_settings()
    dst = Path(dst_path)

    with session_context() as sid:
        safe_print(f"[{sid}] Editing {src_path} -> {dst}")

        with timed("duplicate_file", path=str(dst)):
            duplicate_file(src_path, dst)

        prs = Presentation(str(dst))
        safe_print(f"[{sid}] Opened copy with {count_slides(prs)} slide(s)")

        with timed("embed_image", page=cfg.image_page):
            if isinstance(image, (str, Path)):
                with open(image, "rb") as fh:
                    embed_image(prs, cfg.image_page, fh, cfg.image_box)
            else:
                embed_image(prs, cfg.image_page, image, cfg.image_box)

        with timed("append_text", page=cfg.text_page):
            append_text(prs, cfg.text_page, cfg.text_content, cfg.text_box)

        with timed("move_slide", page=cfg.move_from):
            move_slide(prs, cfg.move_from, cfg.move_to)

        with timed("insert_slide", page=cfg.new_slide_position):
            insert_slide(prs, cfg.new_slide_position, cfg.new_slide_title)

        with timed("append_table", page=cfg.table_page):
            append_table(
                prs,
                cfg.table_page,
                cfg.table_offset,
                data_columns=cfg.table_data_columns,
                body_rows=cfg.table_body_rows,
                column_width=cfg.table_column_width,
                row_height=cfg.table_row_height,
                remarks_header=cfg.table_remarks_header,
            )

        with timed("save", path=str(dst)):
            prs.save(str(dst))

        safe_print(f"[{sid}] Saved as {dst} ({count_slides(prs)} slide(s))")
    return dst
