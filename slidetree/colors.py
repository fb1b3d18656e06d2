"""Colour scheme lookup and conversion of theme/RGB colours to hex strings."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .placeholders import ElementIndex
from .slide_models import Page
from .text_models import ColorScheme, OpaqueColor, OptionalColor, RgbColor

LOGGER = logging.getLogger(__name__)


def resolve_color_scheme(slide: Page, index: ElementIndex) -> Optional[ColorScheme]:
    """First colour scheme defined on the slide, its layout, then its master."""

    if slide.color_scheme is not None:
        return slide.color_scheme

    properties = slide.slide_properties
    layout = index.layout(properties.layout_object_id if properties else None)
    if layout is not None and layout.color_scheme is not None:
        return layout.color_scheme

    master_id = properties.master_object_id if properties else None
    if master_id is None and layout is not None and layout.layout_properties:
        master_id = layout.layout_properties.master_object_id
    master = index.master(master_id)
    if master is not None and master.color_scheme is not None:
        return master.color_scheme

    LOGGER.debug("No colour scheme defined for slide %s", slide.object_id)
    return None


def resolve_color(
    color: OpaqueColor, scheme: Optional[ColorScheme]
) -> Optional[RgbColor]:
    if color.rgb_color is not None:
        return color.rgb_color
    if color.theme_color is None:
        return None
    resolved = scheme.lookup(color.theme_color) if scheme is not None else None
    if resolved is None:
        LOGGER.warning("Theme colour %s not found in colour scheme", color.theme_color.value)
    return resolved


def format_hex(rgb: RgbColor) -> str:
    return "#{:02x}{:02x}{:02x}".format(
        _to_byte(rgb.red), _to_byte(rgb.green), _to_byte(rgb.blue)
    )


def format_color(
    color: Optional[OpaqueColor], scheme: Optional[ColorScheme], default: str
) -> str:
    if color is None:
        return default
    rgb = resolve_color(color, scheme)
    return format_hex(rgb) if rgb is not None else default


def format_optional_color(
    color: Optional[OptionalColor], scheme: Optional[ColorScheme], default: str
) -> Tuple[str, str]:
    """Return ``(fill, opacity)`` for an SVG/CSS attribute pair."""

    if color is None:
        return default, "1"
    if color.opaque_color is None:
        return "none", "0"
    return format_color(color.opaque_color, scheme, default), "1"


def _to_byte(component: Optional[float]) -> int:
    value = round((component or 0.0) * 255)
    return max(0, min(255, value))
