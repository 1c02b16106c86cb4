"""Typed, read-only outline of a deck.

python-pptx hands back a polymorphic shape tree; this module folds it into
a discriminated union of pydantic models so callers (tests, the CLI) can
match on ``kind`` instead of probing attributes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pptx import Presentation
from pptx.shapes.graphfrm import GraphicFrame
from pptx.shapes.picture import Picture
from pydantic import BaseModel, Field

from deckedit.editing.slides import is_hidden


class _ShapeBase(BaseModel):
    shape_id: int
    name: str
    left: int | None = None
    top: int | None = None
    width: int | None = None
    height: int | None = None


class ShapeOutline(_ShapeBase):
    """Auto shape, text box, placeholder, group or connector."""

    kind: Literal["shape"] = "shape"
    is_placeholder: bool = False
    text: str | None = None


class PictureOutline(_ShapeBase):
    kind: Literal["picture"] = "picture"
    content_type: str


class TableOutline(_ShapeBase):
    """Graphic frame hosting a table; ``cells`` is row-major."""

    kind: Literal["table"] = "table"
    cells: list[list[str]]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def columns(self) -> int:
        return len(self.cells[0]) if self.cells else 0


class GraphicFrameOutline(_ShapeBase):
    """Any other graphic frame (chart, OLE object, diagram)."""

    kind: Literal["graphic_frame"] = "graphic_frame"


ShapeNode = Annotated[
    Union[ShapeOutline, PictureOutline, TableOutline, GraphicFrameOutline],
    Field(discriminator="kind"),
]


class SlideOutline(BaseModel):
    index: int
    slide_id: int
    hidden: bool = False
    layout: str = ""
    title: str | None = None
    shapes: list[ShapeNode] = Field(default_factory=list)

    def of_kind(self, kind: str) -> list:
        return [s for s in self.shapes if s.kind == kind]


class DeckOutline(BaseModel):
    slides: list[SlideOutline] = Field(default_factory=list)

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def slide_ids(self) -> list[int]:
        return [s.slide_id for s in self.slides]


def _emu(value) -> int | None:
    # Length subclasses int; store plain ints
    return None if value is None else int(value)


def outline_shape(shape) -> ShapeNode:
    """Map one python-pptx shape onto its outline variant."""
    common = {
        "shape_id": shape.shape_id,
        "name": shape.name,
        "left": _emu(shape.left),
        "top": _emu(shape.top),
        "width": _emu(shape.width),
        "height": _emu(shape.height),
    }
    if isinstance(shape, Picture):
        return PictureOutline(content_type=shape.image.content_type, **common)
    if isinstance(shape, GraphicFrame):
        if shape.has_table:
            cells = [[cell.text for cell in row.cells] for row in shape.table.rows]
            return TableOutline(cells=cells, **common)
        return GraphicFrameOutline(**common)
    return ShapeOutline(
        is_placeholder=shape.is_placeholder,
        text=shape.text_frame.text if shape.has_text_frame else None,
        **common,
    )


def outline_presentation(prs) -> DeckOutline:
    """Build the outline of an open presentation, in display order."""
    slides = []
    for index, slide in enumerate(prs.slides):
        title_shape = slide.shapes.title
        slides.append(
            SlideOutline(
                index=index,
                slide_id=slide.slide_id,
                hidden=is_hidden(slide),
                layout=slide.slide_layout.name,
                title=title_shape.text_frame.text if title_shape is not None else None,
                shapes=[outline_shape(shape) for shape in slide.shapes],
            )
        )
    return DeckOutline(slides=slides)


def outline_file(path: str | Path) -> DeckOutline:
    return outline_presentation(Presentation(str(path)))
