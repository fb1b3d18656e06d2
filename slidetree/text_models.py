"""Value objects for dimensions, colours, text styles and text content."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from .errors import DocumentError

EMU_PER_PT = 12700

E = TypeVar("E", bound=Enum)


# ------------------------------------------------------------------
# Serialization helpers
# ------------------------------------------------------------------
def compact_dict(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Drop absent (``None``) entries while keeping key order."""

    return {key: value for key, value in payload.items() if value is not None}


def parse_enum(enum_cls: Type[E], value: Any, field_name: str) -> Optional[E]:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise DocumentError(
            f"unknown {enum_cls.__name__} value {value!r}", context=field_name
        ) from exc


def enum_value(value: Optional[Enum]) -> Optional[str]:
    return value.value if value is not None else None


def from_optional(factory, data: Any):
    return factory(data) if data is not None else None


def to_dict_or_none(value: Any) -> Optional[Dict[str, Any]]:
    return value.to_dict() if value is not None else None


# ------------------------------------------------------------------
# Geometry
# ------------------------------------------------------------------
class Unit(Enum):
    UNIT_UNSPECIFIED = "UNIT_UNSPECIFIED"
    EMU = "EMU"
    PT = "PT"


@dataclass(slots=True)
class Dimension:
    magnitude: Optional[float] = None
    unit: Optional[Unit] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dimension":
        return cls(
            magnitude=data.get("magnitude"),
            unit=parse_enum(Unit, data.get("unit"), "Dimension.unit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {"magnitude": self.magnitude, "unit": enum_value(self.unit)}
        )

    def to_pt(self) -> Optional[float]:
        """Return the magnitude in points, or ``None`` when it cannot be known."""

        if self.magnitude is None:
            return None
        if self.unit == Unit.PT:
            return float(self.magnitude)
        if self.unit == Unit.EMU:
            return float(self.magnitude) / EMU_PER_PT
        return None


@dataclass(slots=True)
class Size:
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Size":
        return cls(
            width=from_optional(Dimension.from_dict, data.get("width")),
            height=from_optional(Dimension.from_dict, data.get("height")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "width": to_dict_or_none(self.width),
                "height": to_dict_or_none(self.height),
            }
        )


@dataclass(slots=True)
class AffineTransform:
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    shear_x: Optional[float] = None
    shear_y: Optional[float] = None
    translate_x: Optional[float] = None
    translate_y: Optional[float] = None
    unit: Optional[Unit] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AffineTransform":
        return cls(
            scale_x=data.get("scaleX"),
            scale_y=data.get("scaleY"),
            shear_x=data.get("shearX"),
            shear_y=data.get("shearY"),
            translate_x=data.get("translateX"),
            translate_y=data.get("translateY"),
            unit=parse_enum(Unit, data.get("unit"), "AffineTransform.unit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "scaleX": self.scale_x,
                "scaleY": self.scale_y,
                "shearX": self.shear_x,
                "shearY": self.shear_y,
                "translateX": self.translate_x,
                "translateY": self.translate_y,
                "unit": enum_value(self.unit),
            }
        )


# ------------------------------------------------------------------
# Colours
# ------------------------------------------------------------------
class ThemeColorType(Enum):
    THEME_COLOR_TYPE_UNSPECIFIED = "THEME_COLOR_TYPE_UNSPECIFIED"
    DARK1 = "DARK1"
    LIGHT1 = "LIGHT1"
    DARK2 = "DARK2"
    LIGHT2 = "LIGHT2"
    ACCENT1 = "ACCENT1"
    ACCENT2 = "ACCENT2"
    ACCENT3 = "ACCENT3"
    ACCENT4 = "ACCENT4"
    ACCENT5 = "ACCENT5"
    ACCENT6 = "ACCENT6"
    HYPERLINK = "HYPERLINK"
    FOLLOWED_HYPERLINK = "FOLLOWED_HYPERLINK"
    TEXT1 = "TEXT1"
    BACKGROUND1 = "BACKGROUND1"
    TEXT2 = "TEXT2"
    BACKGROUND2 = "BACKGROUND2"


@dataclass(slots=True)
class RgbColor:
    """RGB triple with components in ``0..1``; a missing component means 0."""

    red: Optional[float] = None
    green: Optional[float] = None
    blue: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RgbColor":
        return cls(
            red=data.get("red"), green=data.get("green"), blue=data.get("blue")
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {"red": self.red, "green": self.green, "blue": self.blue}
        )


@dataclass(slots=True)
class OpaqueColor:
    """Either a concrete RGB value or a symbolic theme colour."""

    rgb_color: Optional[RgbColor] = None
    theme_color: Optional[ThemeColorType] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OpaqueColor":
        return cls(
            rgb_color=from_optional(RgbColor.from_dict, data.get("rgbColor")),
            theme_color=parse_enum(
                ThemeColorType, data.get("themeColor"), "OpaqueColor.themeColor"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "rgbColor": to_dict_or_none(self.rgb_color),
                "themeColor": enum_value(self.theme_color),
            }
        )


@dataclass(slots=True)
class OptionalColor:
    """Colour that may be transparent (``opaque_color`` absent)."""

    opaque_color: Optional[OpaqueColor] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OptionalColor":
        return cls(opaque_color=from_optional(OpaqueColor.from_dict, data.get("opaqueColor")))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"opaqueColor": to_dict_or_none(self.opaque_color)})


@dataclass(slots=True)
class ThemeColorPair:
    type: ThemeColorType
    color: RgbColor

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThemeColorPair":
        theme_type = parse_enum(ThemeColorType, data.get("type"), "ThemeColorPair.type")
        if theme_type is None:
            raise DocumentError("missing theme colour type", context="ThemeColorPair")
        return cls(type=theme_type, color=RgbColor.from_dict(data.get("color", {})))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "color": self.color.to_dict()}


@dataclass(slots=True)
class ColorScheme:
    colors: List[ThemeColorPair] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorScheme":
        return cls(
            colors=[ThemeColorPair.from_dict(item) for item in data.get("colors", [])]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"colors": [pair.to_dict() for pair in self.colors]}

    def lookup(self, theme_type: ThemeColorType) -> Optional[RgbColor]:
        return next(
            (pair.color for pair in self.colors if pair.type == theme_type), None
        )


# ------------------------------------------------------------------
# Text style
# ------------------------------------------------------------------
@dataclass(slots=True)
class Link:
    url: Optional[str] = None
    relative_link: Optional[str] = None
    page_object_id: Optional[str] = None
    slide_index: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        return cls(
            url=data.get("url"),
            relative_link=data.get("relativeLink"),
            page_object_id=data.get("pageObjectId"),
            slide_index=data.get("slideIndex"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "url": self.url,
                "relativeLink": self.relative_link,
                "pageObjectId": self.page_object_id,
                "slideIndex": self.slide_index,
            }
        )


@dataclass(slots=True)
class WeightedFontFamily:
    font_family: Optional[str] = None
    weight: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightedFontFamily":
        return cls(font_family=data.get("fontFamily"), weight=data.get("weight"))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"fontFamily": self.font_family, "weight": self.weight})


class BaselineOffset(Enum):
    BASELINE_OFFSET_UNSPECIFIED = "BASELINE_OFFSET_UNSPECIFIED"
    NONE = "NONE"
    SUPERSCRIPT = "SUPERSCRIPT"
    SUBSCRIPT = "SUBSCRIPT"


@dataclass(slots=True)
class TextStyle:
    """Character level style; every field is optional and ``None`` means inherit."""

    background_color: Optional[OptionalColor] = None
    foreground_color: Optional[OptionalColor] = None
    font_family: Optional[str] = None
    font_size: Optional[Dimension] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    strikethrough: Optional[bool] = None
    small_caps: Optional[bool] = None
    baseline_offset: Optional[BaselineOffset] = None
    link: Optional[Link] = None
    weighted_font_family: Optional[WeightedFontFamily] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextStyle":
        return cls(
            background_color=from_optional(OptionalColor.from_dict, data.get("backgroundColor")),
            foreground_color=from_optional(OptionalColor.from_dict, data.get("foregroundColor")),
            font_family=data.get("fontFamily"),
            font_size=from_optional(Dimension.from_dict, data.get("fontSize")),
            bold=data.get("bold"),
            italic=data.get("italic"),
            underline=data.get("underline"),
            strikethrough=data.get("strikethrough"),
            small_caps=data.get("smallCaps"),
            baseline_offset=parse_enum(
                BaselineOffset, data.get("baselineOffset"), "TextStyle.baselineOffset"
            ),
            link=from_optional(Link.from_dict, data.get("link")),
            weighted_font_family=from_optional(
                WeightedFontFamily.from_dict, data.get("weightedFontFamily")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "backgroundColor": to_dict_or_none(self.background_color),
                "foregroundColor": to_dict_or_none(self.foreground_color),
                "fontFamily": self.font_family,
                "fontSize": to_dict_or_none(self.font_size),
                "bold": self.bold,
                "italic": self.italic,
                "underline": self.underline,
                "strikethrough": self.strikethrough,
                "smallCaps": self.small_caps,
                "baselineOffset": enum_value(self.baseline_offset),
                "link": to_dict_or_none(self.link),
                "weightedFontFamily": to_dict_or_none(self.weighted_font_family),
            }
        )


class Alignment(Enum):
    ALIGNMENT_UNSPECIFIED = "ALIGNMENT_UNSPECIFIED"
    START = "START"
    CENTER = "CENTER"
    END = "END"
    JUSTIFIED = "JUSTIFIED"


class TextDirection(Enum):
    TEXT_DIRECTION_UNSPECIFIED = "TEXT_DIRECTION_UNSPECIFIED"
    LEFT_TO_RIGHT = "LEFT_TO_RIGHT"
    RIGHT_TO_LEFT = "RIGHT_TO_LEFT"


class SpacingMode(Enum):
    SPACING_MODE_UNSPECIFIED = "SPACING_MODE_UNSPECIFIED"
    NEVER_COLLAPSE = "NEVER_COLLAPSE"
    COLLAPSE_LISTS = "COLLAPSE_LISTS"


@dataclass(slots=True)
class ParagraphStyle:
    alignment: Optional[Alignment] = None
    direction: Optional[TextDirection] = None
    indent_start: Optional[Dimension] = None
    indent_end: Optional[Dimension] = None
    indent_first_line: Optional[Dimension] = None
    line_spacing: Optional[float] = None
    space_above: Optional[Dimension] = None
    space_below: Optional[Dimension] = None
    spacing_mode: Optional[SpacingMode] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParagraphStyle":
        return cls(
            alignment=parse_enum(Alignment, data.get("alignment"), "ParagraphStyle.alignment"),
            direction=parse_enum(
                TextDirection, data.get("direction"), "ParagraphStyle.direction"
            ),
            indent_start=from_optional(Dimension.from_dict, data.get("indentStart")),
            indent_end=from_optional(Dimension.from_dict, data.get("indentEnd")),
            indent_first_line=from_optional(Dimension.from_dict, data.get("indentFirstLine")),
            line_spacing=data.get("lineSpacing"),
            space_above=from_optional(Dimension.from_dict, data.get("spaceAbove")),
            space_below=from_optional(Dimension.from_dict, data.get("spaceBelow")),
            spacing_mode=parse_enum(
                SpacingMode, data.get("spacingMode"), "ParagraphStyle.spacingMode"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "alignment": enum_value(self.alignment),
                "direction": enum_value(self.direction),
                "indentStart": to_dict_or_none(self.indent_start),
                "indentEnd": to_dict_or_none(self.indent_end),
                "indentFirstLine": to_dict_or_none(self.indent_first_line),
                "lineSpacing": self.line_spacing,
                "spaceAbove": to_dict_or_none(self.space_above),
                "spaceBelow": to_dict_or_none(self.space_below),
                "spacingMode": enum_value(self.spacing_mode),
            }
        )


# ------------------------------------------------------------------
# Text content
# ------------------------------------------------------------------
@dataclass(slots=True)
class Bullet:
    list_id: Optional[str] = None
    nesting_level: Optional[int] = None
    glyph: Optional[str] = None
    bullet_style: Optional[TextStyle] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bullet":
        return cls(
            list_id=data.get("listId"),
            nesting_level=data.get("nestingLevel"),
            glyph=data.get("glyph"),
            bullet_style=from_optional(TextStyle.from_dict, data.get("bulletStyle")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "listId": self.list_id,
                "nestingLevel": self.nesting_level,
                "glyph": self.glyph,
                "bulletStyle": to_dict_or_none(self.bullet_style),
            }
        )


@dataclass(slots=True)
class ParagraphMarker:
    style: Optional[ParagraphStyle] = None
    bullet: Optional[Bullet] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParagraphMarker":
        return cls(
            style=from_optional(ParagraphStyle.from_dict, data.get("style")),
            bullet=from_optional(Bullet.from_dict, data.get("bullet")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {"style": to_dict_or_none(self.style), "bullet": to_dict_or_none(self.bullet)}
        )


@dataclass(slots=True)
class TextRun:
    content: Optional[str] = None
    style: Optional[TextStyle] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextRun":
        return cls(
            content=data.get("content"),
            style=from_optional(TextStyle.from_dict, data.get("style")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {"content": self.content, "style": to_dict_or_none(self.style)}
        )


class AutoTextType(Enum):
    TYPE_UNSPECIFIED = "TYPE_UNSPECIFIED"
    SLIDE_NUMBER = "SLIDE_NUMBER"


@dataclass(slots=True)
class AutoText:
    type: Optional[AutoTextType] = None
    content: Optional[str] = None
    style: Optional[TextStyle] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AutoText":
        return cls(
            type=parse_enum(AutoTextType, data.get("type"), "AutoText.type"),
            content=data.get("content"),
            style=from_optional(TextStyle.from_dict, data.get("style")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "type": enum_value(self.type),
                "content": self.content,
                "style": to_dict_or_none(self.style),
            }
        )


@dataclass(slots=True)
class TextElement:
    """One entry of a text body: a paragraph marker, a text run or auto text."""

    start_index: Optional[int] = None
    end_index: Optional[int] = None
    paragraph_marker: Optional[ParagraphMarker] = None
    text_run: Optional[TextRun] = None
    auto_text: Optional[AutoText] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextElement":
        return cls(
            start_index=data.get("startIndex"),
            end_index=data.get("endIndex"),
            paragraph_marker=from_optional(ParagraphMarker.from_dict, data.get("paragraphMarker")),
            text_run=from_optional(TextRun.from_dict, data.get("textRun")),
            auto_text=from_optional(AutoText.from_dict, data.get("autoText")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict(
            {
                "startIndex": self.start_index,
                "endIndex": self.end_index,
                "paragraphMarker": to_dict_or_none(self.paragraph_marker),
                "textRun": to_dict_or_none(self.text_run),
                "autoText": to_dict_or_none(self.auto_text),
            }
        )


@dataclass(slots=True)
class NestingLevel:
    bullet_style: Optional[TextStyle] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NestingLevel":
        return cls(bullet_style=from_optional(TextStyle.from_dict, data.get("bulletStyle")))

    def to_dict(self) -> Dict[str, Any]:
        return compact_dict({"bulletStyle": to_dict_or_none(self.bullet_style)})


@dataclass(slots=True)
class TextList:
    list_id: Optional[str] = None
    nesting_level: Dict[int, NestingLevel] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextList":
        levels: Dict[int, NestingLevel] = {}
        for key, value in (data.get("nestingLevel") or {}).items():
            try:
                level = int(key)
            except (TypeError, ValueError) as exc:
                raise DocumentError(
                    f"nesting level key {key!r} is not an integer", context="TextList"
                ) from exc
            levels[level] = NestingLevel.from_dict(value)
        return cls(list_id=data.get("listId"), nesting_level=levels)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = compact_dict({"listId": self.list_id})
        if self.nesting_level:
            payload["nestingLevel"] = {
                str(level): entry.to_dict()
                for level, entry in sorted(self.nesting_level.items())
            }
        return payload


@dataclass(slots=True)
class TextContent:
    text_elements: List[TextElement] = field(default_factory=list)
    lists: Dict[str, TextList] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextContent":
        return cls(
            text_elements=[
                TextElement.from_dict(item) for item in data.get("textElements", [])
            ],
            lists={
                list_id: TextList.from_dict(value)
                for list_id, value in (data.get("lists") or {}).items()
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "textElements": [element.to_dict() for element in self.text_elements]
        }
        if self.lists:
            payload["lists"] = {
                list_id: entry.to_dict() for list_id, entry in self.lists.items()
            }
        return payload

    def iter_runs(self) -> Iterator[TextRun]:
        for element in self.text_elements:
            if element.text_run is not None:
                yield element.text_run

    def plain_text(self) -> str:
        """Concatenate run and auto-text content in document order."""

        parts: List[str] = []
        for element in self.text_elements:
            if element.text_run is not None and element.text_run.content:
                parts.append(element.text_run.content)
            elif element.auto_text is not None and element.auto_text.content:
                parts.append(element.auto_text.content)
        return "".join(parts)
