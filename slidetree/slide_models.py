"""Data models representing presentations, pages and page elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .errors import DocumentError
from .text_models import (
    AffineTransform,
    ColorScheme,
    Dimension,
    Link,
    OpaqueColor,
    Size,
    TextContent,
    compact_dict,
    enum_value,
    from_optional,
    parse_enum,
    to_dict_or_none,
)


def _require_object_id(data: Dict[str, Any], owner: str) -> str:
    object_id = data.get("objectId")
    if not isinstance(object_id, str) or not object_id:
        raise DocumentError("missing objectId", context=owner)
    return object_id


# ------------------------------------------------------------------
# Placeholders and fills
# ------------------------------------------------------------------
class PlaceholderType(Enum):
    NONE = "NONE"
    BODY = "BODY"
    CHART = "CHART"
    CLIP_ART = "CLIP_ART"
    CENTERED_TITLE = "CENTERED_TITLE"
    DIAGRAM = "DIAGRAM"
    DATE_AND_TIME = "DATE_AND_TIME"
    FOOTER = "FOOTER"
    HEADER = "HEADER"
    MEDIA = "MEDIA"
    OBJECT = "OBJECT"
    PICTURE = "PICTURE"
    SLIDE_NUMBER = "SLIDE_NUMBER"
    SUBTITLE = "SUBTITLE"
    TABLE = "TABLE"
    TITLE = "TITLE"
    SLIDE_IMAGE = "SLIDE_IMAGE"


@dataclass(slots=True)
class Placeholder:
    """Link from an element to the layout/master element it inherits from."""

    type: Optional[PlaceholderType] = None
    index: Optional[int] = None
    parent_object_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Placeholder":
        return cls(
            type=parse_enum(PlaceholderType, data.get("type"), "Placeholder.type"),
            index=data.get("index"),
            parent_object_id=data.get("parentObjectId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "type": enum_value(self.type),
                "index": self.index,
                "parentObjectId": self.parent_object_id,
            }
        )


class PropertyState(Enum):
    RENDERED = "RENDERED"
    NOT_RENDERED = "NOT_RENDERED"
    INHERIT = "INHERIT"


@dataclass(slots=True)
class SolidFill:
    color: Optional[OpaqueColor] = None
    alpha: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolidFill":
        return cls(
            color=from_optional(OpaqueColor.from_dict, data.get("color")),
            alpha=data.get("alpha"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"color": to_dict_or_none(self.color), "alpha": self.alpha})


@dataclass(slots=True)
class BackgroundFill:
    """Fill used by shapes, table cells and page backgrounds."""

    property_state: Optional[PropertyState] = None
    solid_fill: Optional[SolidFill] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BackgroundFill":
        return cls(
            property_state=parse_enum(
                PropertyState, data.get("propertyState"), "BackgroundFill.propertyState"
            ),
            solid_fill=from_optional(SolidFill.from_dict, data.get("solidFill")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "propertyState": enum_value(self.property_state),
                "solidFill": to_dict_or_none(self.solid_fill),
            }
        )

    def is_rendered(self) -> bool:
        return self.property_state != PropertyState.NOT_RENDERED


class DashStyle(Enum):
    DASH_STYLE_UNSPECIFIED = "DASH_STYLE_UNSPECIFIED"
    SOLID = "SOLID"
    DOT = "DOT"
    DASH = "DASH"
    DASH_DOT = "DASH_DOT"
    LONG_DASH = "LONG_DASH"
    LONG_DASH_DOT = "LONG_DASH_DOT"


@dataclass(slots=True)
class Outline:
    outline_fill: Optional[SolidFill] = None
    weight: Optional[Dimension] = None
    dash_style: Optional[DashStyle] = None
    property_state: Optional[PropertyState] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Outline":
        outline_fill = (data.get("outlineFill") or {}).get("solidFill")
        return cls(
            outline_fill=from_optional(SolidFill.from_dict, outline_fill),
            weight=from_optional(Dimension.from_dict, data.get("weight")),
            dash_style=parse_enum(DashStyle, data.get("dashStyle"), "Outline.dashStyle"),
            property_state=parse_enum(
                PropertyState, data.get("propertyState"), "Outline.propertyState"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        fill = (
            {"solidFill": self.outline_fill.to_dict()}
            if self.outline_fill is not None
            else None
        )
        return compact_dict(
            {
                "outlineFill": fill,
                "weight": to_dict_or_none(self.weight),
                "dashStyle": enum_value(self.dash_style),
                "propertyState": enum_value(self.property_state),
            }
        )


class ContentAlignment(Enum):
    CONTENT_ALIGNMENT_UNSPECIFIED = "CONTENT_ALIGNMENT_UNSPECIFIED"
    CONTENT_ALIGNMENT_UNSUPPORTED = "CONTENT_ALIGNMENT_UNSUPPORTED"
    TOP = "TOP"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"


class AutofitType(Enum):
    AUTOFIT_TYPE_UNSPECIFIED = "AUTOFIT_TYPE_UNSPECIFIED"
    NONE = "NONE"
    TEXT_AUTOFIT = "TEXT_AUTOFIT"
    SHAPE_AUTOFIT = "SHAPE_AUTOFIT"


@dataclass(slots=True)
class Autofit:
    autofit_type: Optional[AutofitType] = None
    font_scale: Optional[float] = None
    line_spacing_reduction: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Autofit":
        return cls(
            autofit_type=parse_enum(AutofitType, data.get("autofitType"), "Autofit.autofitType"),
            font_scale=data.get("fontScale"),
            line_spacing_reduction=data.get("lineSpacingReduction"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "autofitType": enum_value(self.autofit_type),
                "fontScale": self.font_scale,
                "lineSpacingReduction": self.line_spacing_reduction,
            }
        )


@dataclass(slots=True)
class ShapeProperties:
    shape_background_fill: Optional[BackgroundFill] = None
    outline: Optional[Outline] = None
    link: Optional[Link] = None
    content_alignment: Optional[ContentAlignment] = None
    autofit: Optional[Autofit] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShapeProperties":
        return cls(
            shape_background_fill=from_optional(
                BackgroundFill.from_dict, data.get("shapeBackgroundFill")
            ),
            outline=from_optional(Outline.from_dict, data.get("outline")),
            link=from_optional(Link.from_dict, data.get("link")),
            content_alignment=parse_enum(
                ContentAlignment, data.get("contentAlignment"), "ShapeProperties.contentAlignment"
            ),
            autofit=from_optional(Autofit.from_dict, data.get("autofit")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "shapeBackgroundFill": to_dict_or_none(self.shape_background_fill),
                "outline": to_dict_or_none(self.outline),
                "link": to_dict_or_none(self.link),
                "contentAlignment": enum_value(self.content_alignment),
                "autofit": to_dict_or_none(self.autofit),
            }
        )


# ------------------------------------------------------------------
# Element kinds
# ------------------------------------------------------------------
@dataclass(slots=True)
class Shape:
    """Geometric shape or text box; ``shape_type`` keeps the API's open vocabulary."""

    shape_type: Optional[str] = None
    text: Optional[TextContent] = None
    shape_properties: Optional[ShapeProperties] = None
    placeholder: Optional[Placeholder] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Shape":
        return cls(
            shape_type=data.get("shapeType"),
            text=from_optional(TextContent.from_dict, data.get("text")),
            shape_properties=from_optional(ShapeProperties.from_dict, data.get("shapeProperties")),
            placeholder=from_optional(Placeholder.from_dict, data.get("placeholder")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "shapeType": self.shape_type,
                "text": to_dict_or_none(self.text),
                "shapeProperties": to_dict_or_none(self.shape_properties),
                "placeholder": to_dict_or_none(self.placeholder),
            }
        )


@dataclass(slots=True)
class Image:
    content_url: Optional[str] = None
    source_url: Optional[str] = None
    placeholder: Optional[Placeholder] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        return cls(
            content_url=data.get("contentUrl"),
            source_url=data.get("sourceUrl"),
            placeholder=from_optional(Placeholder.from_dict, data.get("placeholder")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "contentUrl": self.content_url,
                "sourceUrl": self.source_url,
                "placeholder": to_dict_or_none(self.placeholder),
            }
        )


@dataclass(slots=True)
class Video:
    id: Optional[str] = None
    source: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Video":
        return cls(id=data.get("id"), source=data.get("source"), url=data.get("url"))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"id": self.id, "source": self.source, "url": self.url})


@dataclass(slots=True)
class LineProperties:
    line_fill: Optional[SolidFill] = None
    weight: Optional[Dimension] = None
    dash_style: Optional[DashStyle] = None
    start_arrow: Optional[str] = None
    end_arrow: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineProperties":
        line_fill = (data.get("lineFill") or {}).get("solidFill")
        return cls(
            line_fill=from_optional(SolidFill.from_dict, line_fill),
            weight=from_optional(Dimension.from_dict, data.get("weight")),
            dash_style=parse_enum(DashStyle, data.get("dashStyle"), "LineProperties.dashStyle"),
            start_arrow=data.get("startArrow"),
            end_arrow=data.get("endArrow"),
        )

    def to_dict(self) -> Dict[str, Any]:
        fill = {"solidFill": self.line_fill.to_dict()} if self.line_fill is not None else None
        return compact_dict(
            {
                "lineFill": fill,
                "weight": to_dict_or_none(self.weight),
                "dashStyle": enum_value(self.dash_style),
                "startArrow": self.start_arrow,
                "endArrow": self.end_arrow,
            }
        )


@dataclass(slots=True)
class Line:
    line_type: Optional[str] = None
    line_category: Optional[str] = None
    line_properties: Optional[LineProperties] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Line":
        return cls(
            line_type=data.get("lineType"),
            line_category=data.get("lineCategory"),
            line_properties=from_optional(LineProperties.from_dict, data.get("lineProperties")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "lineType": self.line_type,
                "lineCategory": self.line_category,
                "lineProperties": to_dict_or_none(self.line_properties),
            }
        )


@dataclass(slots=True)
class TableCellProperties:
    table_cell_background_fill: Optional[BackgroundFill] = None
    content_alignment: Optional[ContentAlignment] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableCellProperties":
        return cls(
            table_cell_background_fill=from_optional(
                BackgroundFill.from_dict, data.get("tableCellBackgroundFill")
            ),
            content_alignment=parse_enum(
                ContentAlignment,
                data.get("contentAlignment"),
                "TableCellProperties.contentAlignment",
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "tableCellBackgroundFill": to_dict_or_none(self.table_cell_background_fill),
                "contentAlignment": enum_value(self.content_alignment),
            }
        )


@dataclass(slots=True)
class TableCell:
    row_index: Optional[int] = None
    column_index: Optional[int] = None
    row_span: Optional[int] = None
    column_span: Optional[int] = None
    text: Optional[TextContent] = None
    table_cell_properties: Optional[TableCellProperties] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableCell":
        location = data.get("location") or {}
        return cls(
            row_index=location.get("rowIndex"),
            column_index=location.get("columnIndex"),
            row_span=data.get("rowSpan"),
            column_span=data.get("columnSpan"),
            text=from_optional(TextContent.from_dict, data.get("text")),
            table_cell_properties=from_optional(
                TableCellProperties.from_dict, data.get("tableCellProperties")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        location = compact_dict(
            {"rowIndex": self.row_index, "columnIndex": self.column_index}
        )
        return compact_dict(
            {
                "location": location or None,
                "rowSpan": self.row_span,
                "columnSpan": self.column_span,
                "text": to_dict_or_none(self.text),
                "tableCellProperties": to_dict_or_none(self.table_cell_properties),
            }
        )


@dataclass(slots=True)
class TableRow:
    row_height: Optional[Dimension] = None
    table_cells: List[TableCell] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableRow":
        return cls(
            row_height=from_optional(Dimension.from_dict, data.get("rowHeight")),
            table_cells=[TableCell.from_dict(item) for item in data.get("tableCells", [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = compact_dict({"rowHeight": to_dict_or_none(self.row_height)})
        payload["tableCells"] = [cell.to_dict() for cell in self.table_cells]
        return payload


@dataclass(slots=True)
class Table:
    rows: Optional[int] = None
    columns: Optional[int] = None
    table_rows: List[TableRow] = field(default_factory=list)
    column_widths: List[Optional[Dimension]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        return cls(
            rows=data.get("rows"),
            columns=data.get("columns"),
            table_rows=[TableRow.from_dict(item) for item in data.get("tableRows", [])],
            column_widths=[
                from_optional(Dimension.from_dict, item.get("columnWidth"))
                for item in data.get("tableColumns", [])
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = compact_dict({"rows": self.rows, "columns": self.columns})
        payload["tableRows"] = [row.to_dict() for row in self.table_rows]
        payload["tableColumns"] = [
            compact_dict({"columnWidth": to_dict_or_none(width)})
            for width in self.column_widths
        ]
        return payload


@dataclass(slots=True)
class Group:
    children: List["PageElement"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        return cls(
            children=[PageElement.from_dict(item) for item in data.get("children", [])]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"children": [child.to_dict() for child in self.children]}


@dataclass(slots=True)
class WordArt:
    rendered_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordArt":
        return cls(rendered_text=data.get("renderedText"))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"renderedText": self.rendered_text})


@dataclass(slots=True)
class SheetsChart:
    spreadsheet_id: Optional[str] = None
    chart_id: Optional[int] = None
    content_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SheetsChart":
        return cls(
            spreadsheet_id=data.get("spreadsheetId"),
            chart_id=data.get("chartId"),
            content_url=data.get("contentUrl"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "spreadsheetId": self.spreadsheet_id,
                "chartId": self.chart_id,
                "contentUrl": self.content_url,
            }
        )


@dataclass(slots=True)
class SpeakerSpotlight:
    """Speaker video overlay; its properties are kept as raw JSON."""

    speaker_spotlight_properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpeakerSpotlight":
        return cls(
            speaker_spotlight_properties=dict(data.get("speakerSpotlightProperties") or {})
        )

    def to_dict(self) -> Dict[str, Any]:
        if not self.speaker_spotlight_properties:
            return {}
        return {"speakerSpotlightProperties": dict(self.speaker_spotlight_properties)}


ElementKind = Union[
    Shape, Image, Video, Line, Table, Group, WordArt, SheetsChart, SpeakerSpotlight
]

KIND_KEYS: Tuple[Tuple[str, type], ...] = (
    ("shape", Shape),
    ("image", Image),
    ("video", Video),
    ("line", Line),
    ("table", Table),
    ("elementGroup", Group),
    ("wordArt", WordArt),
    ("sheetsChart", SheetsChart),
    ("speakerSpotlight", SpeakerSpotlight),
)


@dataclass(slots=True)
class PageElement:
    """Visual element on a page; ``kind`` holds exactly one variant."""

    object_id: str
    kind: ElementKind
    size: Optional[Size] = None
    transform: Optional[AffineTransform] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageElement":
        object_id = _require_object_id(data, "PageElement")
        present = [(key, kind_cls) for key, kind_cls in KIND_KEYS if key in data]
        if len(present) != 1:
            names = ", ".join(key for key, _ in present) or "none"
            raise DocumentError(
                f"expected exactly one element kind, found {names}",
                context=f"PageElement {object_id}",
            )
        key, kind_cls = present[0]
        return cls(
            object_id=object_id,
            kind=kind_cls.from_dict(data[key] or {}),
            size=from_optional(Size.from_dict, data.get("size")),
            transform=from_optional(AffineTransform.from_dict, data.get("transform")),
            title=data.get("title"),
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = compact_dict(
            {
                "objectId": self.object_id,
                "size": to_dict_or_none(self.size),
                "transform": to_dict_or_none(self.transform),
                "title": self.title,
                "description": self.description,
            }
        )
        payload[self.kind_key] = self.kind.to_dict()
        return payload

    @property
    def kind_key(self) -> str:
        for key, kind_cls in KIND_KEYS:
            if isinstance(self.kind, kind_cls):
                return key
        raise TypeError(f"unsupported element kind {type(self.kind).__name__}")

    @property
    def shape(self) -> Optional[Shape]:
        return self.kind if isinstance(self.kind, Shape) else None

    @property
    def group(self) -> Optional[Group]:
        return self.kind if isinstance(self.kind, Group) else None

    @property
    def placeholder(self) -> Optional[Placeholder]:
        if isinstance(self.kind, (Shape, Image)):
            return self.kind.placeholder
        return None

    def iter_tree(self) -> Iterator["PageElement"]:
        """Yield this element followed by every nested group child, depth first."""

        yield self
        if isinstance(self.kind, Group):
            for child in self.kind.children:
                yield from child.iter_tree()


# ------------------------------------------------------------------
# Pages
# ------------------------------------------------------------------
class PageType(Enum):
    SLIDE = "SLIDE"
    MASTER = "MASTER"
    LAYOUT = "LAYOUT"
    NOTES = "NOTES"
    NOTES_MASTER = "NOTES_MASTER"


@dataclass(slots=True)
class PageProperties:
    page_background_fill: Optional[BackgroundFill] = None
    color_scheme: Optional[ColorScheme] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageProperties":
        return cls(
            page_background_fill=from_optional(
                BackgroundFill.from_dict, data.get("pageBackgroundFill")
            ),
            color_scheme=from_optional(ColorScheme.from_dict, data.get("colorScheme")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "pageBackgroundFill": to_dict_or_none(self.page_background_fill),
                "colorScheme": to_dict_or_none(self.color_scheme),
            }
        )


@dataclass(slots=True)
class SlideProperties:
    layout_object_id: Optional[str] = None
    master_object_id: Optional[str] = None
    notes_page: Optional["Page"] = None
    is_skipped: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlideProperties":
        return cls(
            layout_object_id=data.get("layoutObjectId"),
            master_object_id=data.get("masterObjectId"),
            notes_page=from_optional(Page.from_dict, data.get("notesPage")),
            is_skipped=data.get("isSkipped"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "layoutObjectId": self.layout_object_id,
                "masterObjectId": self.master_object_id,
                "notesPage": to_dict_or_none(self.notes_page),
                "isSkipped": self.is_skipped,
            }
        )


@dataclass(slots=True)
class LayoutProperties:
    master_object_id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutProperties":
        return cls(
            master_object_id=data.get("masterObjectId"),
            name=data.get("name"),
            display_name=data.get("displayName"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "masterObjectId": self.master_object_id,
                "name": self.name,
                "displayName": self.display_name,
            }
        )


@dataclass(slots=True)
class MasterProperties:
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MasterProperties":
        return cls(display_name=data.get("displayName"))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"displayName": self.display_name})


@dataclass(slots=True)
class NotesProperties:
    speaker_notes_object_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NotesProperties":
        return cls(speaker_notes_object_id=data.get("speakerNotesObjectId"))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"speakerNotesObjectId": self.speaker_notes_object_id})


@dataclass(slots=True)
class Page:
    """A slide, layout, master or notes page."""

    object_id: str
    page_type: Optional[PageType] = None
    page_elements: List[PageElement] = field(default_factory=list)
    revision_id: Optional[str] = None
    page_properties: Optional[PageProperties] = None
    slide_properties: Optional[SlideProperties] = None
    layout_properties: Optional[LayoutProperties] = None
    notes_properties: Optional[NotesProperties] = None
    master_properties: Optional[MasterProperties] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        return cls(
            object_id=_require_object_id(data, "Page"),
            page_type=parse_enum(PageType, data.get("pageType"), "Page.pageType"),
            page_elements=[
                PageElement.from_dict(item) for item in data.get("pageElements", [])
            ],
            revision_id=data.get("revisionId"),
            page_properties=from_optional(PageProperties.from_dict, data.get("pageProperties")),
            slide_properties=from_optional(SlideProperties.from_dict, data.get("slideProperties")),
            layout_properties=from_optional(
                LayoutProperties.from_dict, data.get("layoutProperties")
            ),
            notes_properties=from_optional(NotesProperties.from_dict, data.get("notesProperties")),
            master_properties=from_optional(
                MasterProperties.from_dict, data.get("masterProperties")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = compact_dict(
            {"objectId": self.object_id, "pageType": enum_value(self.page_type)}
        )
        payload["pageElements"] = [element.to_dict() for element in self.page_elements]
        payload.update(
            compact_dict(
                {
                    "revisionId": self.revision_id,
                    "pageProperties": to_dict_or_none(self.page_properties),
                    "slideProperties": to_dict_or_none(self.slide_properties),
                    "layoutProperties": to_dict_or_none(self.layout_properties),
                    "notesProperties": to_dict_or_none(self.notes_properties),
                    "masterProperties": to_dict_or_none(self.master_properties),
                }
            )
        )
        return payload

    def iter_elements(self) -> Iterator[PageElement]:
        for element in self.page_elements:
            yield from element.iter_tree()

    @property
    def color_scheme(self) -> Optional[ColorScheme]:
        if self.page_properties is None:
            return None
        return self.page_properties.color_scheme


@dataclass(slots=True)
class Presentation:
    """Root of the document tree."""

    presentation_id: Optional[str] = None
    page_size: Optional[Size] = None
    slides: List[Page] = field(default_factory=list)
    title: Optional[str] = None
    masters: List[Page] = field(default_factory=list)
    layouts: List[Page] = field(default_factory=list)
    locale: Optional[str] = None
    revision_id: Optional[str] = None
    notes_master: Optional[Page] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Presentation":
        if not isinstance(data, dict):
            raise DocumentError(
                f"expected a JSON object, got {type(data).__name__}", context="Presentation"
            )
        return cls(
            presentation_id=data.get("presentationId"),
            page_size=from_optional(Size.from_dict, data.get("pageSize")),
            slides=[Page.from_dict(item) for item in data.get("slides", [])],
            title=data.get("title"),
            masters=[Page.from_dict(item) for item in data.get("masters", [])],
            layouts=[Page.from_dict(item) for item in data.get("layouts", [])],
            locale=data.get("locale"),
            revision_id=data.get("revisionId"),
            notes_master=from_optional(Page.from_dict, data.get("notesMaster")),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = compact_dict(
            {
                "presentationId": self.presentation_id,
                "pageSize": to_dict_or_none(self.page_size),
            }
        )
        payload["slides"] = [page.to_dict() for page in self.slides]
        payload.update(compact_dict({"title": self.title}))
        payload["masters"] = [page.to_dict() for page in self.masters]
        payload["layouts"] = [page.to_dict() for page in self.layouts]
        payload.update(
            compact_dict(
                {
                    "locale": self.locale,
                    "revisionId": self.revision_id,
                    "notesMaster": to_dict_or_none(self.notes_master),
                }
            )
        )
        return payload

    def iter_pages(self) -> Iterator[Page]:
        """Yield every page: slides (with notes), layouts, masters, notes master."""

        for slide in self.slides:
            yield slide
            notes = slide.slide_properties.notes_page if slide.slide_properties else None
            if notes is not None:
                yield notes
        yield from self.layouts
        yield from self.masters
        if self.notes_master is not None:
            yield self.notes_master
