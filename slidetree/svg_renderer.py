"""Render presentation slides as standalone SVG documents."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .colors import format_color, format_hex, resolve_color_scheme
from .config import Settings
from .errors import RenderError
from .placeholders import ElementIndex, build_index, inherited_styles
from .slide_models import (
    ContentAlignment,
    DashStyle,
    Group,
    Image,
    Line,
    Page,
    PageElement,
    Presentation,
    PropertyState,
    Shape,
    Table,
)
from .svg_text import escape_attr, escape_text, format_pt, text_content_to_html
from .text_models import (
    AffineTransform,
    ColorScheme,
    Dimension,
    Size,
    TextStyle,
    ThemeColorType,
    Unit,
)

LOGGER = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XHTML_NS = "http://www.w3.org/1999/xhtml"

RECT_SHAPES = {"RECTANGLE", "TEXT_BOX"}
ROUND_RECT_SHAPES = {"ROUND_RECTANGLE"}
ELLIPSE_SHAPES = {"ELLIPSE"}

MIN_PLACEHOLDER_WIDTH_PT = 20.0
MIN_PLACEHOLDER_HEIGHT_PT = 10.0

_DASH_ARRAYS = {
    DashStyle.DOT: "1 2",
    DashStyle.DASH: "4 2",
    DashStyle.DASH_DOT: "4 2 1 2",
    DashStyle.LONG_DASH: "8 3",
    DashStyle.LONG_DASH_DOT: "8 3 1 3",
}

_JUSTIFY = {
    ContentAlignment.MIDDLE: "center",
    ContentAlignment.BOTTOM: "flex-end",
}


def convert_presentation_to_svg(
    presentation: Presentation, settings: Optional[Settings] = None
) -> List[str]:
    """Return one SVG document per slide, in slide order."""

    return SlideSvgRenderer(presentation, settings).render_all()


class SlideSvgRenderer:
    """Render the slides of one presentation, sharing a single element index."""

    def __init__(
        self, presentation: Presentation, settings: Optional[Settings] = None
    ) -> None:
        self.presentation = presentation
        self.settings = settings or Settings()
        self.index: ElementIndex = build_index(presentation)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_all(self) -> List[str]:
        if not self.presentation.slides:
            LOGGER.warning("Presentation has no slides to convert")
        return [self.render_slide(slide) for slide in self.presentation.slides]

    def render_slide(self, slide: Page) -> str:
        width_pt, height_pt = self._page_size_pt()
        scheme = resolve_color_scheme(slide, self.index)
        layout_id = (
            slide.slide_properties.layout_object_id if slide.slide_properties else None
        )

        out: List[str] = [
            f'<svg xmlns="{SVG_NS}" width="{format_pt(width_pt)}pt" '
            f'height="{format_pt(height_pt)}pt" '
            f'viewBox="0 0 {format_pt(width_pt)} {format_pt(height_pt)}">',
            f'<rect width="100%" height="100%" fill="{self._background(slide, scheme)}"/>',
        ]
        for element in slide.page_elements:
            self._render_element(element, layout_id, scheme, out)
        out.append("</svg>")
        return "\n".join(out)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _page_size_pt(self) -> Tuple[float, float]:
        size = self.presentation.page_size
        width = size.width.to_pt() if size and size.width else None
        height = size.height.to_pt() if size and size.height else None
        if width is None or height is None:
            raise RenderError("presentation page size is missing", context="render_slide")
        return width, height

    def _background(self, slide: Page, scheme: Optional[ColorScheme]) -> str:
        fill = slide.page_properties.page_background_fill if slide.page_properties else None
        if fill is not None and fill.is_rendered() and fill.solid_fill is not None:
            return format_color(
                fill.solid_fill.color, scheme, self.settings.default_background_color
            )
        background = scheme.lookup(ThemeColorType.BACKGROUND1) if scheme else None
        if background is not None:
            return format_hex(background)
        return self.settings.default_background_color

    def _render_element(
        self,
        element: PageElement,
        layout_id: Optional[str],
        scheme: Optional[ColorScheme],
        out: List[str],
    ) -> None:
        kind = element.kind
        if isinstance(kind, Shape):
            self._render_shape(element, kind, layout_id, scheme, out)
        elif isinstance(kind, Table):
            self._render_table(element, kind, scheme, out)
        elif isinstance(kind, Image):
            self._render_image(element, kind, out)
        elif isinstance(kind, Line):
            self._render_line(element, kind, scheme, out)
        elif isinstance(kind, Group):
            out.append(_open_group(element))
            for child in kind.children:
                self._render_element(child, layout_id, scheme, out)
            out.append("</g>")
        else:
            self._render_placeholder_box(element, type(kind).__name__, out)

    def _render_shape(
        self,
        element: PageElement,
        shape: Shape,
        layout_id: Optional[str],
        scheme: Optional[ColorScheme],
        out: List[str],
    ) -> None:
        width, height = _size_pt(element.size)
        style = escape_attr(self._shape_style(shape, scheme))
        shape_type = shape.shape_type or "TYPE_UNSPECIFIED"

        out.append(_open_group(element))
        if shape_type in RECT_SHAPES:
            out.append(
                f'<rect width="{format_pt(width)}" height="{format_pt(height)}" style="{style}"/>'
            )
        elif shape_type in ROUND_RECT_SHAPES:
            radius = min(width, height) * 0.1
            out.append(
                f'<rect width="{format_pt(width)}" height="{format_pt(height)}" '
                f'rx="{format_pt(radius)}" ry="{format_pt(radius)}" style="{style}"/>'
            )
        elif shape_type in ELLIPSE_SHAPES:
            out.append(
                f'<ellipse cx="{format_pt(width / 2)}" cy="{format_pt(height / 2)}" '
                f'rx="{format_pt(width / 2)}" ry="{format_pt(height / 2)}" style="{style}"/>'
            )
        else:
            LOGGER.debug("Shape type %s drawn as outline box", shape_type)
            out.append(
                f'<rect width="{format_pt(width)}" height="{format_pt(height)}" '
                'style="fill:none; stroke:gray; stroke-dasharray:4 2;">'
                f"<title>{escape_text(shape_type)}</title></rect>"
            )

        if shape.text is not None and shape.text.text_elements:
            text_style, paragraph_style = inherited_styles(element, self.index, layout_id)
            body = text_content_to_html(
                shape.text, paragraph_style, text_style, scheme, self.settings
            )
            alignment = (
                shape.shape_properties.content_alignment if shape.shape_properties else None
            )
            justify = _JUSTIFY.get(alignment, "flex-start")
            out.append(
                f'<foreignObject x="0" y="0" width="{format_pt(width)}" '
                f'height="{format_pt(height)}">'
                f'<div xmlns="{XHTML_NS}" style="display:flex; flex-direction:column; '
                f"justify-content:{justify}; width:100%; height:100%; "
                f'box-sizing:border-box; padding:7.2pt; overflow:hidden;">{body}</div>'
                "</foreignObject>"
            )
        out.append("</g>")

    def _shape_style(self, shape: Shape, scheme: Optional[ColorScheme]) -> str:
        declarations: List[str] = []
        properties = shape.shape_properties
        fill = properties.shape_background_fill if properties else None
        if fill is not None and fill.is_rendered() and fill.solid_fill is not None:
            color = format_color(
                fill.solid_fill.color, scheme, self.settings.default_background_color
            )
            alpha = fill.solid_fill.alpha if fill.solid_fill.alpha is not None else 1.0
            declarations.append(f"fill:{color}; fill-opacity:{format_pt(alpha)}")
        else:
            declarations.append("fill:none")

        outline = properties.outline if properties else None
        if (
            outline is not None
            and outline.property_state != PropertyState.NOT_RENDERED
            and outline.outline_fill is not None
        ):
            color = format_color(
                outline.outline_fill.color, scheme, self.settings.default_text_color
            )
            weight = outline.weight.to_pt() if outline.weight else None
            declarations.append(f"stroke:{color}; stroke-width:{format_pt(weight or 1.0)}pt")
            dash = _DASH_ARRAYS.get(outline.dash_style)
            if dash:
                declarations.append(f"stroke-dasharray:{dash}")
        else:
            declarations.append("stroke:none")
        return "; ".join(declarations) + ";"

    def _render_table(
        self,
        element: PageElement,
        table: Table,
        scheme: Optional[ColorScheme],
        out: List[str],
    ) -> None:
        width, height = _size_pt(element.size)
        rows: List[str] = []
        for row in table.table_rows:
            row_height = row.row_height.to_pt() if row.row_height else None
            row_attr = f' style="height:{format_pt(row_height)}pt;"' if row_height else ""
            cells: List[str] = []
            for cell in row.table_cells:
                attrs = ""
                if cell.column_span and cell.column_span > 1:
                    attrs += f' colspan="{cell.column_span}"'
                if cell.row_span and cell.row_span > 1:
                    attrs += f' rowspan="{cell.row_span}"'
                cell_style = "border:1px solid #cccccc; padding:2pt; vertical-align:top;"
                properties = cell.table_cell_properties
                fill = properties.table_cell_background_fill if properties else None
                if fill is not None and fill.is_rendered() and fill.solid_fill is not None:
                    background = format_color(
                        fill.solid_fill.color, scheme, self.settings.default_background_color
                    )
                    cell_style += f" background-color:{background};"
                body = (
                    text_content_to_html(cell.text, None, TextStyle(), scheme, self.settings)
                    if cell.text is not None
                    else ""
                )
                cells.append(f'<td{attrs} style="{escape_attr(cell_style)}">{body}</td>')
            rows.append(f"<tr{row_attr}>{''.join(cells)}</tr>")

        out.append(_open_group(element))
        out.append(
            f'<foreignObject x="0" y="0" width="{format_pt(width)}" height="{format_pt(height)}">'
            f'<div xmlns="{XHTML_NS}" style="width:100%; height:100%;">'
            '<table style="border-collapse:collapse; width:100%;">'
            f"{''.join(rows)}</table></div></foreignObject>"
        )
        out.append("</g>")

    def _render_image(self, element: PageElement, image: Image, out: List[str]) -> None:
        if not image.content_url:
            self._render_placeholder_box(element, "Image", out)
            return
        width, height = _size_pt(element.size)
        out.append(_open_group(element))
        out.append(
            f'<image href="{escape_attr(image.content_url)}" width="{format_pt(width)}" '
            f'height="{format_pt(height)}" preserveAspectRatio="none"/>'
        )
        out.append("</g>")

    def _render_line(
        self,
        element: PageElement,
        line: Line,
        scheme: Optional[ColorScheme],
        out: List[str],
    ) -> None:
        width, height = _size_pt(element.size)
        properties = line.line_properties
        if properties is not None and properties.line_fill is not None:
            stroke = format_color(
                properties.line_fill.color, scheme, self.settings.default_text_color
            )
        else:
            stroke = self.settings.default_text_color
        weight = properties.weight.to_pt() if properties and properties.weight else None
        style = f"stroke:{stroke}; stroke-width:{format_pt(weight or 1.0)}pt;"
        dash = _DASH_ARRAYS.get(properties.dash_style) if properties else None
        if dash:
            style += f" stroke-dasharray:{dash};"
        out.append(_open_group(element))
        out.append(
            f'<line x1="0" y1="0" x2="{format_pt(width)}" y2="{format_pt(height)}" '
            f'style="{escape_attr(style)}"/>'
        )
        out.append("</g>")

    def _render_placeholder_box(
        self, element: PageElement, label: str, out: List[str]
    ) -> None:
        width, height = _size_pt(element.size)
        width = max(width, MIN_PLACEHOLDER_WIDTH_PT)
        height = max(height, MIN_PLACEHOLDER_HEIGHT_PT)
        out.append(_open_group(element))
        out.append(
            f'<rect width="{format_pt(width)}" height="{format_pt(height)}" '
            'style="fill:#f0f0f0; stroke:lightgray; stroke-dasharray:3 3; fill-opacity:0.5;"/>'
        )
        out.append(
            '<text x="2" y="2" dy="0.8em" style="font-family:sans-serif; font-size:8pt; '
            f'fill:gray;">{escape_text(label)} Placeholder</text>'
        )
        out.append("</g>")


def _size_pt(size: Optional[Size]) -> Tuple[float, float]:
    if size is None:
        return 0.0, 0.0
    width = size.width.to_pt() if size.width else None
    height = size.height.to_pt() if size.height else None
    return width or 0.0, height or 0.0


def _transform_attr(transform: Optional[AffineTransform]) -> str:
    if transform is None:
        return ""
    unit = transform.unit or Unit.EMU
    translate_x = Dimension(transform.translate_x or 0.0, unit).to_pt() or 0.0
    translate_y = Dimension(transform.translate_y or 0.0, unit).to_pt() or 0.0
    values = (
        transform.scale_x if transform.scale_x is not None else 1.0,
        transform.shear_y or 0.0,
        transform.shear_x or 0.0,
        transform.scale_y if transform.scale_y is not None else 1.0,
        translate_x,
        translate_y,
    )
    return ' transform="matrix({})"'.format(" ".join(format_pt(value) for value in values))


def _open_group(element: PageElement) -> str:
    return f'<g data-object-id="{escape_attr(element.object_id)}"{_transform_attr(element.transform)}>'
