"""Slide-list edits: counting, lookup, reordering and insertion.

Display order is the order of ``<p:sldId>`` children in the presentation's
``<p:sldIdLst>``.  Reordering touches only that list; slide parts and their
relationship IDs are left alone.
"""

from __future__ import annotations

from pptx.enum.shapes import PP_PLACEHOLDER
from pptx.oxml.simpletypes import ST_Direction, ST_PlaceholderSize

from deckedit.core.errors import EmptyPresentationError, SlideIndexError
from deckedit.core.log import safe_print

# XML boolean spellings of false for the ``show`` attribute
_HIDDEN_VALUES = ("0", "false")


def _require_presentation(prs) -> None:
    if prs is None:
        raise ValueError("presentation is required")


def _slide_id_list(prs):
    _require_presentation(prs)
    return prs.slides._sldIdLst


def is_hidden(slide) -> bool:
    """Return ``True`` when *slide* is explicitly flagged ``show="0"``."""
    return slide._element.get("show") in _HIDDEN_VALUES


def count_slides(prs, include_hidden: bool = True) -> int:
    """Return the number of slides, optionally leaving out hidden ones."""
    _require_presentation(prs)
    if include_hidden:
        return len(prs.slides)
    return sum(1 for slide in prs.slides if not is_hidden(slide))


def get_slide_id_at_index(prs, page: int):
    """Return the ``<p:sldId>`` element at display position *page*."""
    count = count_slides(prs)
    if page < 0 or page >= count:
        raise SlideIndexError("page", page, count)
    return _slide_id_list(prs)[page]


def get_slide(prs, page: int):
    """Resolve the slide at *page* through its relationship ID."""
    sld_id = get_slide_id_at_index(prs, page)
    return prs.part.related_slide(sld_id.rId)


def move_slide(prs, from_index: int, to_index: int) -> None:
    """Move the slide at *from_index* so that it ends up at *to_index*.

    The source id is reinserted after an anchor picked before removal:
    the element at *to_index* when moving forward, the one at
    ``to_index - 1`` when moving back, the list head when *to_index* is 0.
    """
    count = count_slides(prs)
    if from_index < 0 or from_index >= count:
        raise SlideIndexError("from_index", from_index, count)
    if to_index < 0 or to_index >= count:
        raise SlideIndexError("to_index", to_index, count)
    if to_index == from_index:
        raise SlideIndexError("to_index", to_index, count, f"to_index must differ from from_index ({from_index})")

    sld_id_lst = _slide_id_list(prs)
    source = sld_id_lst[from_index]
    if to_index == 0:
        anchor = None
    elif from_index < to_index:
        anchor = sld_id_lst[to_index]
    else:
        anchor = sld_id_lst[to_index - 1]

    sld_id_lst.remove(source)
    _insert_after(sld_id_lst, source, anchor)
    safe_print(f"Moved slide {from_index} -> {to_index}")


def insert_slide(prs, position: int, title: str):
    """Insert a new title + body slide so that it lands at *position*.

    The layout is borrowed from the slide just before *position* (the first
    slide when *position* is 0).  Returns the new slide.
    """
    _require_presentation(prs)
    if title is None:
        raise ValueError("title is required")

    count = count_slides(prs)
    if count == 0:
        raise EmptyPresentationError("the presentation has no slides to take a layout from")
    if position < 0 or position > count:
        raise SlideIndexError("position", position, count)

    sld_id_lst = _slide_id_list(prs)
    anchor = sld_id_lst[position - 1] if position > 0 else None
    layout = get_slide(prs, max(position - 1, 0)).slide_layout

    slide = prs.slides.add_slide(layout)
    _reset_placeholders(slide)
    slide.shapes.title.text = title

    # add_slide appends the new id at the end of the list, numbered one
    # above the largest id in use
    new_sld_id = sld_id_lst[-1]
    sld_id_lst.remove(new_sld_id)
    _insert_after(sld_id_lst, new_sld_id, anchor)

    safe_print(f"Inserted slide id={new_sld_id.id} at {position} (layout '{layout.name}')")
    return slide


# ── Internal helpers ─────────────────────────────────────────────────────


def _insert_after(sld_id_lst, element, anchor) -> None:
    if anchor is None:
        sld_id_lst.insert(0, element)
    else:
        anchor.addnext(element)


def _reset_placeholders(slide) -> None:
    """Replace whatever the layout cloned with exactly a title and a body."""
    sp_tree = slide.shapes._spTree
    for ph in list(sp_tree.iter_ph_elms()):
        sp_tree.remove(ph)
    horz, full = ST_Direction.HORZ, ST_PlaceholderSize.FULL
    sp_tree.add_placeholder(2, "Title", PP_PLACEHOLDER.TITLE, horz, full, 0)
    sp_tree.add_placeholder(3, "Content Placeholder", PP_PLACEHOLDER.OBJECT, horz, full, 1)
