"""Placeholder inheritance: element index, ancestor lookup and effective styles."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import MissingAncestorError
from .slide_models import Page, PageElement, Placeholder, Presentation
from .style_merge import (
    fold_paragraph_styles,
    fold_text_styles,
    merge_paragraph_styles,
    merge_text_styles,
)
from .text_models import ParagraphStyle, TextStyle

LOGGER = logging.getLogger(__name__)


class ElementIndex:
    """Read-only lookup tables spanning every page of one presentation."""

    __slots__ = ("_elements", "_layouts", "_masters")

    def __init__(
        self,
        elements: Dict[str, PageElement],
        layouts: Dict[str, Page],
        masters: Dict[str, Page],
    ) -> None:
        self._elements: Mapping[str, PageElement] = MappingProxyType(dict(elements))
        self._layouts: Mapping[str, Page] = MappingProxyType(dict(layouts))
        self._masters: Mapping[str, Page] = MappingProxyType(dict(masters))

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def elements(self) -> Mapping[str, PageElement]:
        return self._elements

    def get(self, object_id: str) -> Optional[PageElement]:
        return self._elements.get(object_id)

    def layout(self, object_id: Optional[str]) -> Optional[Page]:
        if object_id is None:
            return None
        return self._layouts.get(object_id)

    def master(self, object_id: Optional[str]) -> Optional[Page]:
        if object_id is None:
            return None
        return self._masters.get(object_id)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def build_index(presentation: Presentation) -> ElementIndex:
    """Flatten every element (through nested groups) of every page by object id."""

    elements: Dict[str, PageElement] = {}
    for page in presentation.iter_pages():
        for element in page.iter_elements():
            if element.object_id in elements:
                LOGGER.warning(
                    "Duplicate element id %s on page %s; keeping the first occurrence",
                    element.object_id,
                    page.object_id,
                )
                continue
            elements[element.object_id] = element

    layouts = {page.object_id: page for page in presentation.layouts}
    masters = {page.object_id: page for page in presentation.masters}
    LOGGER.debug(
        "Indexed %d elements, %d layouts, %d masters",
        len(elements),
        len(layouts),
        len(masters),
    )
    return ElementIndex(elements, layouts, masters)


def find_ancestor_placeholder(
    placeholder: Placeholder,
    slide_layout_id: Optional[str],
    index: ElementIndex,
    *,
    strict: bool = False,
) -> Optional[PageElement]:
    """Return the element named by ``placeholder.parent_object_id``.

    Only the immediate parent is returned. A placeholder without a parent
    id is a root and yields ``None`` silently. A dangling reference is
    logged and yields ``None``, or raises :class:`MissingAncestorError`
    when ``strict`` is set.
    """

    parent_id = placeholder.parent_object_id
    if parent_id is None:
        return None

    found = index.get(parent_id)
    if found is not None:
        return found

    layout = index.layout(slide_layout_id)
    if layout is not None:
        found = _search_page(layout, parent_id)
        if found is not None:
            return found
        master_id = (
            layout.layout_properties.master_object_id
            if layout.layout_properties
            else None
        )
        master = index.master(master_id)
        if master is not None:
            found = _search_page(master, parent_id)
            if found is not None:
                return found

    message = f"placeholder parent {parent_id} not found (layout {slide_layout_id})"
    if strict:
        raise MissingAncestorError(message, context="find_ancestor_placeholder")
    LOGGER.warning("Could not resolve %s", message)
    return None


def ancestor_chain(
    element: PageElement,
    index: ElementIndex,
    slide_layout_id: Optional[str] = None,
) -> List[PageElement]:
    """Ancestors of ``element`` from its direct parent up to the root placeholder."""

    chain: List[PageElement] = []
    seen = {element.object_id}
    current = element.placeholder
    while current is not None and current.parent_object_id is not None:
        parent = find_ancestor_placeholder(current, slide_layout_id, index)
        if parent is None:
            break
        if parent.object_id in seen:
            LOGGER.warning(
                "Placeholder cycle detected at %s while resolving %s",
                parent.object_id,
                element.object_id,
            )
            break
        seen.add(parent.object_id)
        chain.append(parent)
        current = parent.placeholder
    return chain


def default_text_style(element: PageElement) -> Optional[TextStyle]:
    """Base text style a placeholder element hands down to its descendants.

    The level 0 bullet style of the first referenced list wins; otherwise the
    style of the first styled text run in document order is used.
    """

    shape = element.shape
    if shape is None or shape.text is None:
        return None
    text = shape.text

    list_id = next(
        (
            item.paragraph_marker.bullet.list_id
            for item in text.text_elements
            if item.paragraph_marker is not None
            and item.paragraph_marker.bullet is not None
            and item.paragraph_marker.bullet.list_id is not None
        ),
        None,
    )
    if list_id is not None:
        text_list = text.lists.get(list_id)
        level = text_list.nesting_level.get(0) if text_list is not None else None
        if level is not None and level.bullet_style is not None:
            return level.bullet_style

    run_style = next(
        (run.style for run in text.iter_runs() if run.style is not None), None
    )
    if run_style is None:
        LOGGER.debug("No default text style found on %s", element.object_id)
    return run_style


def default_paragraph_style(element: PageElement) -> Optional[ParagraphStyle]:
    shape = element.shape
    if shape is None or shape.text is None:
        return None
    return next(
        (
            item.paragraph_marker.style
            for item in shape.text.text_elements
            if item.paragraph_marker is not None
            and item.paragraph_marker.style is not None
        ),
        None,
    )


def inherited_styles(
    element: PageElement,
    index: ElementIndex,
    slide_layout_id: Optional[str] = None,
) -> Tuple[TextStyle, ParagraphStyle]:
    """Fold the defaults of every ancestor, most general (master) first."""

    general_first = list(reversed(ancestor_chain(element, index, slide_layout_id)))
    return (
        fold_text_styles(default_text_style(item) for item in general_first),
        fold_paragraph_styles(default_paragraph_style(item) for item in general_first),
    )


def effective_style(
    element: PageElement,
    index: ElementIndex,
    slide_layout_id: Optional[str] = None,
) -> Tuple[TextStyle, ParagraphStyle]:
    """Inherited placeholder styles with the element's own styles on top."""

    text_style, paragraph_style = inherited_styles(element, index, slide_layout_id)
    return (
        merge_text_styles(default_text_style(element), text_style),
        merge_paragraph_styles(default_paragraph_style(element), paragraph_style),
    )


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _search_page(page: Page, object_id: str) -> Optional[PageElement]:
    return _search_elements(page.page_elements, object_id)


def _search_elements(
    elements: Iterable[PageElement], object_id: str
) -> Optional[PageElement]:
    stack = list(elements)
    while stack:
        element = stack.pop()
        if element.object_id == object_id:
            return element
        group = element.group
        if group is not None:
            stack.extend(group.children)
    return None
