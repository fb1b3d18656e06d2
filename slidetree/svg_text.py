"""XHTML text rendering used inside SVG ``foreignObject`` blocks."""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from .colors import format_optional_color
from .config import Settings
from .style_merge import merge_text_styles
from .text_models import (
    Alignment,
    BaselineOffset,
    ColorScheme,
    ParagraphStyle,
    TextContent,
    TextStyle,
)

LOGGER = logging.getLogger(__name__)

_TEXT_ALIGN = {
    Alignment.CENTER: "center",
    Alignment.END: "end",
    Alignment.JUSTIFIED: "justify",
}

# Vertical tab marks a soft line break in slide text and never a bullet.
_SOFT_BREAK = "\u000b"


def escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def escape_attr(value: str) -> str:
    return html.escape(value, quote=False).replace('"', "&quot;")


def format_pt(value: float) -> str:
    """Compact point value: integers lose their trailing ``.0``."""

    rounded = round(value, 3)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def text_style_css(
    style: TextStyle, scheme: Optional[ColorScheme], settings: Settings
) -> str:
    """CSS declarations for a fully merged text style."""

    declarations: List[str] = [
        f"font-family:'{style.font_family or settings.default_font_family}'"
    ]
    size_pt = style.font_size.to_pt() if style.font_size is not None else None
    if not size_pt or size_pt <= 0:
        size_pt = settings.default_font_size_pt
    declarations.append(f"font-size:{format_pt(size_pt)}pt")

    color, _ = format_optional_color(
        style.foreground_color, scheme, settings.default_text_color
    )
    if color != "none":
        declarations.append(f"color:{color}")
    if style.background_color is not None:
        background, _ = format_optional_color(
            style.background_color, scheme, settings.default_background_color
        )
        if background != "none":
            declarations.append(f"background-color:{background}")

    if style.bold:
        declarations.append("font-weight:bold")
    if style.italic:
        declarations.append("font-style:italic")
    decorations = [
        name
        for name, enabled in (("underline", style.underline), ("line-through", style.strikethrough))
        if enabled
    ]
    if decorations:
        declarations.append(f"text-decoration:{' '.join(decorations)}")
    if style.baseline_offset == BaselineOffset.SUPERSCRIPT:
        declarations.append("vertical-align:super; font-size:smaller")
    elif style.baseline_offset == BaselineOffset.SUBSCRIPT:
        declarations.append("vertical-align:sub; font-size:smaller")
    if style.small_caps:
        declarations.append("font-variant:small-caps")
    return "; ".join(declarations) + ";"


def paragraph_style_css(style: Optional[ParagraphStyle]) -> str:
    declarations = ["margin:0", "padding:0", "position:relative"]
    if style is None:
        return "; ".join(declarations) + ";"
    declarations.append(f"text-align:{_TEXT_ALIGN.get(style.alignment, 'start')}")
    indent_start = style.indent_start.to_pt() if style.indent_start else None
    if indent_start:
        declarations.append(f"padding-left:{format_pt(indent_start)}pt")
    indent_first = style.indent_first_line.to_pt() if style.indent_first_line else None
    if indent_first:
        declarations.append(f"text-indent:{format_pt(indent_first)}pt")
    space_above = style.space_above.to_pt() if style.space_above else None
    if space_above:
        declarations.append(f"margin-top:{format_pt(space_above)}pt")
    space_below = style.space_below.to_pt() if style.space_below else None
    if space_below:
        declarations.append(f"margin-bottom:{format_pt(space_below)}pt")
    if style.line_spacing:
        declarations.append(f"line-height:{format_pt(style.line_spacing)}%")
    return "; ".join(declarations) + ";"


def text_content_to_html(
    text: TextContent,
    inherited_paragraph: Optional[ParagraphStyle],
    inherited_text: TextStyle,
    scheme: Optional[ColorScheme],
    settings: Settings,
) -> str:
    """Convert a text body into ``<p>``/``<span>`` markup.

    Each paragraph starts from the inherited text style with its bullet style
    merged on top, and each run merges its own style over that paragraph base.
    """

    parts: List[str] = []
    paragraph_open = False
    paragraph_base = inherited_text

    for element in text.text_elements:
        marker = element.paragraph_marker
        if marker is not None:
            if paragraph_open:
                parts.append("</p>\n")
            bullet = marker.bullet
            paragraph_base = merge_text_styles(
                bullet.bullet_style if bullet is not None else None, inherited_text
            )
            paragraph_style = marker.style or inherited_paragraph
            parts.append(f'<p style="{escape_attr(paragraph_style_css(paragraph_style))}">')
            if bullet is not None and bullet.glyph and bullet.glyph != _SOFT_BREAK:
                parts.append(
                    '<span aria-hidden="true" style="{}">{} </span>'.format(
                        escape_attr(text_style_css(paragraph_base, scheme, settings)),
                        escape_text(bullet.glyph),
                    )
                )
            paragraph_open = True
            continue

        run = element.text_run or element.auto_text
        if run is None or not run.content:
            continue
        if not paragraph_open:
            LOGGER.warning("Text run found outside a paragraph; opening one")
            parts.append(f'<p style="{escape_attr(paragraph_style_css(inherited_paragraph))}">')
            paragraph_open = True
        run_style = merge_text_styles(run.style, paragraph_base)
        content = escape_text(run.content).replace("\n", "<br/>").replace(_SOFT_BREAK, "<br/>")
        parts.append(
            f'<span style="{escape_attr(text_style_css(run_style, scheme, settings))}">'
            f"{content}</span>"
        )

    if paragraph_open:
        parts.append("</p>")
    return "".join(parts).strip()
