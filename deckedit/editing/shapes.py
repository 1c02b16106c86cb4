"""Shape edits appended to an existing slide: picture, text box, table.

Geometry is taken as :class:`~deckedit.config.Box` values in EMU.
"""

from __future__ import annotations

import io
import os
from typing import IO

from pptx.dml.color import RGBColor
from pptx.enum.lang import MSO_LANGUAGE_ID
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Emu

from deckedit.config import Box
from deckedit.core.log import safe_print
from deckedit.editing.slides import get_slide

IMAGE_SHAPE_NAME = "Image Shape"
TEXT_SHAPE_NAME = "My Text"
TABLE_SHAPE_NAME = "Table Shape"

BULLET_CHAR = "-"
BULLET_FONT = "Arial"
OUTLINE_COLOR = RGBColor(0xFF, 0xFF, 0xFF)


def embed_image(prs, page: int, image: str | os.PathLike | bytes | IO[bytes], box: Box):
    """Add *image* to the slide at *page* and place a picture shape on it.

    *image* may be a path, raw bytes or a binary stream.  python-pptx stores
    the bytes as an image part related to the slide and the picture's blip
    references it by relationship ID.
    """
    slide = get_slide(prs, page)
    if isinstance(image, bytes):
        image = io.BytesIO(image)
    elif isinstance(image, os.PathLike):
        image = os.fspath(image)

    picture = slide.shapes.add_picture(image, Emu(box.left), Emu(box.top), Emu(box.width), Emu(box.height))
    picture.name = IMAGE_SHAPE_NAME
    safe_print(f"Embedded {picture.image.content_type} on slide {page} (rId={picture._element.blip_rId})")
    return picture


def append_text(prs, page: int, text: str, box: Box):
    """Append a bulleted, left-aligned text box with a white outline.

    Each line of *text* becomes its own paragraph.
    """
    slide = get_slide(prs, page)
    shape = slide.shapes.add_textbox(Emu(box.left), Emu(box.top), Emu(box.width), Emu(box.height))
    shape.name = TEXT_SHAPE_NAME

    tf = shape.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = MSO_ANCHOR.TOP
    # keep the requested extents; add_textbox defaults to shape-to-fit
    tf.auto_size = MSO_AUTO_SIZE.NONE
    tf.text = text
    for p in tf.paragraphs:
        p.alignment = PP_ALIGN.LEFT
        _add_char_bullet(p)

    shape.line.fill.solid()
    shape.line.color.rgb = OUTLINE_COLOR
    return shape


def generate_table_cells(
    data_columns: int = 5,
    body_rows: int = 5,
    remarks_header: str = "Remarks",
) -> list[list[str]]:
    """Return the placeholder text grid: one header row, then *body_rows*.

    Every row has ``data_columns + 1`` cells; the last column holds the
    remarks header and stays empty in body rows.
    """
    header = [f"Header Column:{c}" for c in range(data_columns)] + [remarks_header]
    body = [[f"Body Row:{r} Column:{c}" for c in range(data_columns)] + [""] for r in range(body_rows)]
    return [header, *body]


def append_table(
    prs,
    page: int,
    offset: Box,
    *,
    data_columns: int = 5,
    body_rows: int = 5,
    column_width: int = 1_948_000,
    row_height: int = 370_840,
    remarks_header: str = "Remarks",
):
    """Append a graphic frame hosting the placeholder table at *offset*.

    Returns the graphic frame; the table itself is ``frame.table``.
    """
    slide = get_slide(prs, page)
    cells = generate_table_cells(data_columns, body_rows, remarks_header)
    rows, cols = len(cells), len(cells[0])

    frame = slide.shapes.add_table(
        rows,
        cols,
        Emu(offset.left),
        Emu(offset.top),
        Emu(cols * column_width),
        Emu(rows * row_height),
    )
    frame.name = TABLE_SHAPE_NAME

    table = frame.table
    table.first_row = True
    table.horz_banding = True
    table.vert_banding = True
    for column in table.columns:
        column.width = Emu(column_width)
    for row in table.rows:
        row.height = Emu(row_height)

    for r, values in enumerate(cells):
        for c, value in enumerate(values):
            cell = table.cell(r, c)
            cell.text = value
            for run in cell.text_frame.paragraphs[0].runs:
                run.font.language_id = MSO_LANGUAGE_ID.ENGLISH_US

    safe_print(f"Appended {rows}x{cols} table on slide {page}")
    return frame


# ── Internal helpers ─────────────────────────────────────────────────────


def _add_char_bullet(paragraph) -> None:
    pPr = paragraph._p.get_or_add_pPr()
    bu_font = OxmlElement("a:buFont")
    bu_font.set("typeface", BULLET_FONT)
    bu_char = OxmlElement("a:buChar")
    bu_char.set("char", BULLET_CHAR)
    # buFont must precede buChar in a:pPr
    pPr.append(bu_font)
    pPr.append(bu_char)
