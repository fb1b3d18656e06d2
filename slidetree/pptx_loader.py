"""Build a :class:`Presentation` model from a ``.pptx`` file using python-pptx."""

from __future__ import annotations

import logging
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Dict, List, Optional, Tuple, Union
from xml.etree import ElementTree as ET

from pptx import Presentation as open_pptx
from pptx.enum.dml import MSO_COLOR_TYPE, MSO_FILL
from pptx.enum.shapes import MSO_AUTO_SHAPE_TYPE
from pptx.enum.text import PP_ALIGN
from pptx.exc import PackageNotFoundError
from pptx.opc.constants import RELATIONSHIP_TYPE as RT
from pptx.shapes.autoshape import Shape as PptxShape
from pptx.shapes.connector import Connector
from pptx.shapes.group import GroupShape
from pptx.shapes.picture import Picture

from .errors import DocumentError
from .slide_models import (
    BackgroundFill,
    Group,
    Image,
    LayoutProperties,
    Line,
    LineProperties,
    MasterProperties,
    Page,
    PageElement,
    PageProperties,
    PageType,
    Placeholder,
    PlaceholderType,
    Presentation,
    Shape,
    ShapeProperties,
    SlideProperties,
    SolidFill,
    Table,
    TableCell,
    TableRow,
)
from .text_models import (
    AffineTransform,
    Alignment,
    ColorScheme,
    Dimension,
    OpaqueColor,
    OptionalColor,
    ParagraphMarker,
    ParagraphStyle,
    RgbColor,
    Size,
    TextContent,
    TextElement,
    TextRun,
    TextStyle,
    ThemeColorPair,
    ThemeColorType,
    Unit,
)

LOGGER = logging.getLogger(__name__)

DRAWINGML_NS = {"a": "http://schemas.openxmlformats.org/drawingml/2006/main"}

_PLACEHOLDER_TYPES = {
    "TITLE": PlaceholderType.TITLE,
    "VERTICAL_TITLE": PlaceholderType.TITLE,
    "CENTER_TITLE": PlaceholderType.CENTERED_TITLE,
    "BODY": PlaceholderType.BODY,
    "VERTICAL_BODY": PlaceholderType.BODY,
    "SUBTITLE": PlaceholderType.SUBTITLE,
    "OBJECT": PlaceholderType.OBJECT,
    "VERTICAL_OBJECT": PlaceholderType.OBJECT,
    "CHART": PlaceholderType.CHART,
    "TABLE": PlaceholderType.TABLE,
    "PICTURE": PlaceholderType.PICTURE,
    "BITMAP": PlaceholderType.PICTURE,
    "MEDIA_CLIP": PlaceholderType.MEDIA,
    "ORG_CHART": PlaceholderType.DIAGRAM,
    "DATE": PlaceholderType.DATE_AND_TIME,
    "FOOTER": PlaceholderType.FOOTER,
    "HEADER": PlaceholderType.HEADER,
    "SLIDE_NUMBER": PlaceholderType.SLIDE_NUMBER,
    "SLIDE_IMAGE": PlaceholderType.SLIDE_IMAGE,
}

# Layout placeholders inherit from the master placeholder of this base type.
_MASTER_BASE_TYPES = {
    "BODY": "BODY",
    "CHART": "BODY",
    "BITMAP": "BODY",
    "CENTER_TITLE": "TITLE",
    "ORG_CHART": "BODY",
    "DATE": "DATE",
    "FOOTER": "FOOTER",
    "MEDIA_CLIP": "BODY",
    "OBJECT": "BODY",
    "PICTURE": "BODY",
    "SLIDE_NUMBER": "SLIDE_NUMBER",
    "SUBTITLE": "BODY",
    "TABLE": "BODY",
    "TITLE": "TITLE",
}

_AUTO_SHAPES = {
    MSO_AUTO_SHAPE_TYPE.RECTANGLE: "RECTANGLE",
    MSO_AUTO_SHAPE_TYPE.ROUNDED_RECTANGLE: "ROUND_RECTANGLE",
    MSO_AUTO_SHAPE_TYPE.OVAL: "ELLIPSE",
}

_ALIGNMENTS = {
    PP_ALIGN.LEFT: Alignment.START,
    PP_ALIGN.CENTER: Alignment.CENTER,
    PP_ALIGN.RIGHT: Alignment.END,
    PP_ALIGN.JUSTIFY: Alignment.JUSTIFIED,
    PP_ALIGN.DISTRIBUTE: Alignment.JUSTIFIED,
}

_THEME_SLOTS = (
    ("dk1", (ThemeColorType.DARK1, ThemeColorType.TEXT1)),
    ("lt1", (ThemeColorType.LIGHT1, ThemeColorType.BACKGROUND1)),
    ("dk2", (ThemeColorType.DARK2, ThemeColorType.TEXT2)),
    ("lt2", (ThemeColorType.LIGHT2, ThemeColorType.BACKGROUND2)),
    ("accent1", (ThemeColorType.ACCENT1,)),
    ("accent2", (ThemeColorType.ACCENT2,)),
    ("accent3", (ThemeColorType.ACCENT3,)),
    ("accent4", (ThemeColorType.ACCENT4,)),
    ("accent5", (ThemeColorType.ACCENT5,)),
    ("accent6", (ThemeColorType.ACCENT6,)),
    ("hlink", (ThemeColorType.HYPERLINK,)),
    ("folHlink", (ThemeColorType.FOLLOWED_HYPERLINK,)),
)

Source = Union[str, Path, IO[bytes]]


@dataclass(slots=True)
class _PlaceholderRegistry:
    """Placeholder element ids collected while walking templates."""

    master_by_type: Dict[str, Dict[str, str]] = field(default_factory=dict)
    layout_by_idx: Dict[str, Dict[int, str]] = field(default_factory=dict)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def load_pptx(source: Source) -> Presentation:
    """Read ``source`` (path or binary stream) into a :class:`Presentation`."""

    try:
        prs = open_pptx(str(source) if isinstance(source, Path) else source)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as exc:
        raise DocumentError(
            "not a readable PowerPoint file", context="load_pptx", original_error=exc
        ) from exc
    return PptxConverter(prs).convert()


class PptxConverter:
    """Convert an opened python-pptx presentation into the document model."""

    def __init__(self, prs) -> None:
        self.prs = prs
        self.registry = _PlaceholderRegistry()
        self._master_ids: Dict[str, str] = {}
        self._layout_ids: Dict[str, str] = {}

    def convert(self) -> Presentation:
        masters: List[Page] = []
        layouts: List[Page] = []
        for master in self.prs.slide_masters:
            master_page = self._convert_master(master, len(masters) + 1)
            masters.append(master_page)
            for layout in master.slide_layouts:
                layouts.append(
                    self._convert_layout(layout, len(layouts) + 1, master_page.object_id)
                )

        slides = [
            self._convert_slide(slide, number)
            for number, slide in enumerate(self.prs.slides, start=1)
        ]
        title = self.prs.core_properties.title or None
        LOGGER.info(
            "Loaded pptx with %d slides, %d layouts, %d masters",
            len(slides),
            len(layouts),
            len(masters),
        )
        return Presentation(
            page_size=_page_size(self.prs),
            slides=slides,
            title=title,
            masters=masters,
            layouts=layouts,
        )

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------
    def _convert_master(self, master, number: int) -> Page:
        page_id = f"master_{number}"
        self._master_ids[str(master.part.partname)] = page_id
        by_type: Dict[str, str] = {}
        self.registry.master_by_type[page_id] = by_type

        elements = []
        for shape in master.shapes:
            element = self._convert_shape(shape, page_id, parent_id=None)
            if shape.is_placeholder:
                by_type.setdefault(shape.placeholder_format.type.name, element.object_id)
            elements.append(element)

        scheme = _theme_color_scheme(master)
        return Page(
            object_id=page_id,
            page_type=PageType.MASTER,
            page_elements=elements,
            page_properties=PageProperties(color_scheme=scheme) if scheme else None,
            master_properties=MasterProperties(display_name=master.name or None),
        )

    def _convert_layout(self, layout, number: int, master_id: str) -> Page:
        page_id = f"layout_{number}"
        self._layout_ids[str(layout.part.partname)] = page_id
        by_idx: Dict[int, str] = {}
        self.registry.layout_by_idx[page_id] = by_idx
        master_placeholders = self.registry.master_by_type.get(master_id, {})

        elements = []
        for shape in layout.shapes:
            parent_id = None
            if shape.is_placeholder:
                base = _MASTER_BASE_TYPES.get(shape.placeholder_format.type.name)
                parent_id = master_placeholders.get(base) if base else None
            element = self._convert_shape(shape, page_id, parent_id=parent_id)
            if shape.is_placeholder:
                by_idx.setdefault(shape.placeholder_format.idx, element.object_id)
            elements.append(element)

        return Page(
            object_id=page_id,
            page_type=PageType.LAYOUT,
            page_elements=elements,
            layout_properties=LayoutProperties(
                master_object_id=master_id,
                name=layout.name or None,
                display_name=layout.name or None,
            ),
        )

    def _convert_slide(self, slide, number: int) -> Page:
        page_id = f"slide_{number}"
        layout = slide.slide_layout
        layout_id = self._layout_ids.get(str(layout.part.partname))
        master_id = self._master_ids.get(str(layout.slide_master.part.partname))
        layout_placeholders = self.registry.layout_by_idx.get(layout_id or "", {})

        elements = []
        for shape in slide.shapes:
            parent_id = None
            if shape.is_placeholder:
                parent_id = layout_placeholders.get(shape.placeholder_format.idx)
            elements.append(self._convert_shape(shape, page_id, parent_id=parent_id))

        return Page(
            object_id=page_id,
            page_type=PageType.SLIDE,
            page_elements=elements,
            slide_properties=SlideProperties(
                layout_object_id=layout_id, master_object_id=master_id
            ),
        )

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------
    def _convert_shape(self, shape, page_id: str, parent_id: Optional[str]) -> PageElement:
        object_id = f"{page_id}_e{shape.shape_id}"
        placeholder = _placeholder(shape, parent_id)

        if isinstance(shape, GroupShape):
            kind = Group(
                children=[
                    self._convert_shape(child, page_id, parent_id=None)
                    for child in shape.shapes
                ]
            )
            # Child offsets are kept as stored, so they are slide coordinates only when
            # the group's chOff/chExt equal its off/ext. Grouped placeholders lose
            # their parent link.
            return PageElement(object_id=object_id, kind=kind, title=shape.name or None)

        if isinstance(shape, Picture):
            kind = Image(placeholder=placeholder)
        elif isinstance(shape, Connector):
            kind = Line(
                line_type="STRAIGHT_CONNECTOR_1",
                line_category="STRAIGHT",
                line_properties=_line_properties(shape),
            )
        elif getattr(shape, "has_table", False):
            kind = _table(shape.table)
        elif isinstance(shape, PptxShape):
            kind = Shape(
                shape_type=_shape_type(shape),
                text=_text_content(shape.text_frame) if shape.has_text_frame else None,
                shape_properties=_shape_properties(shape),
                placeholder=placeholder,
            )
        else:
            LOGGER.debug("Unsupported pptx shape %s on %s; importing as outline", shape.name, page_id)
            kind = Shape(shape_type="CUSTOM", placeholder=placeholder)

        return PageElement(
            object_id=object_id,
            kind=kind,
            size=_size(shape),
            transform=_transform(shape),
            title=shape.name or None,
        )


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _emu(value) -> Optional[Dimension]:
    if value is None:
        return None
    return Dimension(magnitude=int(value), unit=Unit.EMU)


def _page_size(prs) -> Optional[Size]:
    if prs.slide_width is None or prs.slide_height is None:
        return None
    return Size(width=_emu(prs.slide_width), height=_emu(prs.slide_height))


def _size(shape) -> Optional[Size]:
    if shape.width is None and shape.height is None:
        return None
    return Size(width=_emu(shape.width), height=_emu(shape.height))


def _transform(shape) -> Optional[AffineTransform]:
    if shape.left is None and shape.top is None:
        return None
    return AffineTransform(
        scale_x=1.0,
        scale_y=1.0,
        translate_x=int(shape.left or 0),
        translate_y=int(shape.top or 0),
        unit=Unit.EMU,
    )


def _placeholder(shape, parent_id: Optional[str]) -> Optional[Placeholder]:
    if not shape.is_placeholder:
        return None
    fmt = shape.placeholder_format
    return Placeholder(
        type=_PLACEHOLDER_TYPES.get(fmt.type.name, PlaceholderType.NONE),
        index=int(fmt.idx),
        parent_object_id=parent_id,
    )


def _shape_type(shape) -> str:
    if shape.is_placeholder:
        return "TEXT_BOX"
    try:
        auto_shape = shape.auto_shape_type
    except ValueError:
        return "TEXT_BOX"
    return _AUTO_SHAPES.get(auto_shape, "CUSTOM")


def _opaque_color(color_format) -> Optional[OpaqueColor]:
    color_type = color_format.type
    if color_type == MSO_COLOR_TYPE.RGB:
        red, green, blue = color_format.rgb
        return OpaqueColor(rgb_color=RgbColor(red / 255, green / 255, blue / 255))
    if color_type == MSO_COLOR_TYPE.SCHEME:
        name = re.sub(r"_(\d)$", r"\1", color_format.theme_color.name)
        try:
            return OpaqueColor(theme_color=ThemeColorType(name))
        except ValueError:
            LOGGER.debug("Theme colour %s has no counterpart", name)
    return None


def _solid_fill(fill) -> Optional[SolidFill]:
    if fill.type != MSO_FILL.SOLID:
        return None
    color = _opaque_color(fill.fore_color)
    return SolidFill(color=color, alpha=1.0) if color is not None else None


def _shape_properties(shape) -> Optional[ShapeProperties]:
    solid = _solid_fill(shape.fill)
    if solid is None:
        return None
    return ShapeProperties(shape_background_fill=BackgroundFill(solid_fill=solid))


def _line_properties(shape) -> LineProperties:
    line = shape.line
    return LineProperties(line_fill=_solid_fill(line.fill), weight=_emu(line.width or None))


def _text_style(font) -> Optional[TextStyle]:
    underline = font.underline
    style = TextStyle(
        font_family=font.name,
        font_size=Dimension(magnitude=font.size.pt, unit=Unit.PT) if font.size else None,
        bold=font.bold,
        italic=font.italic,
        underline=None if underline is None else bool(underline),
    )
    color = _opaque_color(font.fill.fore_color) if font.fill.type == MSO_FILL.SOLID else None
    if color is not None:
        style.foreground_color = OptionalColor(opaque_color=color)
    return style if style != TextStyle() else None


def _text_content(text_frame) -> TextContent:
    elements: List[TextElement] = []
    position = 0
    for paragraph in text_frame.paragraphs:
        alignment = _ALIGNMENTS.get(paragraph.alignment)
        runs: List[Tuple[str, Optional[TextStyle]]] = [
            (run.text, _text_style(run.font)) for run in paragraph.runs
        ]
        if runs:
            text, style = runs[-1]
            runs[-1] = (text + "\n", style)
        else:
            runs.append(("\n", None))

        length = sum(len(text) for text, _ in runs)
        elements.append(
            TextElement(
                start_index=position,
                end_index=position + length,
                paragraph_marker=ParagraphMarker(
                    style=ParagraphStyle(alignment=alignment) if alignment else None
                ),
            )
        )
        for text, style in runs:
            elements.append(
                TextElement(
                    start_index=position,
                    end_index=position + len(text),
                    text_run=TextRun(content=text, style=style),
                )
            )
            position += len(text)
    return TextContent(text_elements=elements)


def _table(table) -> Table:
    rows: List[TableRow] = []
    for row_index, row in enumerate(table.rows):
        cells = []
        for column_index, cell in enumerate(row.cells):
            if cell.is_spanned:
                continue
            cells.append(
                TableCell(
                    row_index=row_index,
                    column_index=column_index,
                    row_span=cell.span_height if cell.is_merge_origin else 1,
                    column_span=cell.span_width if cell.is_merge_origin else 1,
                    text=_text_content(cell.text_frame),
                )
            )
        rows.append(TableRow(row_height=_emu(row.height), table_cells=cells))
    return Table(
        rows=len(table.rows),
        columns=len(table.columns),
        table_rows=rows,
        column_widths=[_emu(column.width) for column in table.columns],
    )


def _theme_color_scheme(master) -> Optional[ColorScheme]:
    try:
        theme_part = master.part.part_related_by(RT.THEME)
    except KeyError:
        LOGGER.debug("Master %s has no theme part", master.name)
        return None
    try:
        root = ET.fromstring(theme_part.blob)
    except ET.ParseError as exc:
        LOGGER.warning("Could not parse theme XML: %s", exc)
        return None

    scheme = root.find(".//a:clrScheme", DRAWINGML_NS)
    if scheme is None:
        return None
    pairs: List[ThemeColorPair] = []
    for slot, theme_types in _THEME_SLOTS:
        rgb = _theme_slot_rgb(scheme.find(f"a:{slot}", DRAWINGML_NS))
        if rgb is None:
            continue
        pairs.extend(ThemeColorPair(type=theme_type, color=rgb) for theme_type in theme_types)
    return ColorScheme(colors=pairs) if pairs else None


def _theme_slot_rgb(slot) -> Optional[RgbColor]:
    if slot is None:
        return None
    srgb = slot.find("a:srgbClr", DRAWINGML_NS)
    value = srgb.get("val") if srgb is not None else None
    if value is None:
        sys_clr = slot.find("a:sysClr", DRAWINGML_NS)
        value = sys_clr.get("lastClr") if sys_clr is not None else None
    if not value or len(value) != 6:
        return None
    red, green, blue = (int(value[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return RgbColor(red=red, green=green, blue=blue)
