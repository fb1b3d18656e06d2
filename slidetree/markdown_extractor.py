"""Plain text / markdown extraction from a presentation."""

from __future__ import annotations

import math
from typing import List, Optional

from .slide_models import Page, PageElement, Presentation, Shape, Table
from .text_models import TextContent

TEXT_BOX = "TEXT_BOX"


def extract_text_from_presentation(presentation: Presentation) -> str:
    """Render slide text as markdown, one ``## Slide N`` section per slide.

    Slides without text are skipped but still consume their number.
    """

    parts: List[str] = ["# Presentation\n"]
    parts.append(f"{presentation.title}\n\n" if presentation.title is not None else "\n")

    first = True
    for number, slide in enumerate(presentation.slides, start=1):
        content = extract_text_from_slide(slide)
        if content is None:
            continue
        if not first:
            parts.append("\n---\n\n")
        first = False
        parts.append(f"## Slide {number}\n\n{content}\n")
    return "".join(parts)


def extract_text_from_slide(slide: Page) -> Optional[str]:
    texts = [
        text
        for text in (
            _element_text(element)
            for element in sorted(slide.page_elements, key=_translate_y)
        )
        if text
    ]
    return "\n".join(texts) if texts else None


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _translate_y(element: PageElement) -> float:
    if element.transform is None or element.transform.translate_y is None:
        return math.inf
    return float(element.transform.translate_y)


def _element_text(element: PageElement) -> Optional[str]:
    if isinstance(element.kind, Shape):
        return _shape_text(element.kind)
    if isinstance(element.kind, Table):
        return _table_text(element.kind)
    return None


def _run_text(text: Optional[TextContent]) -> str:
    if text is None:
        return ""
    return "".join(run.content or "" for run in text.iter_runs())


def _shape_text(shape: Shape) -> Optional[str]:
    if shape.shape_type != TEXT_BOX:
        return None
    return _run_text(shape.text).strip() or None


def _table_text(table: Table) -> Optional[str]:
    rows: List[str] = []
    for row in table.table_rows:
        cells = [_run_text(cell.text).strip() for cell in row.table_cells]
        line = " ".join(cell for cell in cells if cell)
        if line:
            rows.append(line)
    return "\n".join(rows) or None
