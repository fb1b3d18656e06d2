"""Field-by-field merging of partially specified text and paragraph styles."""

from __future__ import annotations

import copy
import logging
from dataclasses import fields
from typing import Iterable, Optional, TypeVar

from .text_models import ParagraphStyle, TextStyle

LOGGER = logging.getLogger(__name__)

S = TypeVar("S", TextStyle, ParagraphStyle)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def merge_text_styles(
    specific: Optional[TextStyle], inherited: Optional[TextStyle]
) -> TextStyle:
    """Overlay ``specific`` onto ``inherited``.

    Every field present in ``specific`` replaces the inherited value as a
    whole (colours and weighted fonts are never merged internally). Absent
    fields fall through to ``inherited``. Neither argument is modified.
    """

    return _merge(specific, inherited, TextStyle)


def merge_paragraph_styles(
    specific: Optional[ParagraphStyle], inherited: Optional[ParagraphStyle]
) -> ParagraphStyle:
    """Paragraph counterpart of :func:`merge_text_styles`."""

    return _merge(specific, inherited, ParagraphStyle)


def fold_text_styles(styles: Iterable[Optional[TextStyle]]) -> TextStyle:
    """Merge ``styles`` ordered from most general to most specific."""

    result = TextStyle()
    for style in styles:
        result = merge_text_styles(style, result)
    return result


def fold_paragraph_styles(
    styles: Iterable[Optional[ParagraphStyle]],
) -> ParagraphStyle:
    result = ParagraphStyle()
    for style in styles:
        result = merge_paragraph_styles(style, result)
    return result


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _merge(specific: Optional[S], inherited: Optional[S], style_cls: type) -> S:
    merged = copy.deepcopy(inherited) if inherited is not None else style_cls()
    if specific is not None:
        for style_field in fields(style_cls):
            value = getattr(specific, style_field.name)
            if value is not None:
                setattr(merged, style_field.name, copy.deepcopy(value))
    LOGGER.debug(
        "Merged %s: specific=%r inherited=%r result=%r",
        style_cls.__name__,
        specific,
        inherited,
        merged,
    )
    return merged
