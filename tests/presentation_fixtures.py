"""Shared sample snapshots for the test-suite."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from slidetree.slide_models import Presentation

EMU_PER_INCH = 914400


def pt(value: float) -> Dict[str, Any]:
    return {"magnitude": value, "unit": "PT"}


def rgb(red: float, green: float, blue: float) -> Dict[str, Any]:
    return {"red": red, "green": green, "blue": blue}


def text_body(*runs: Dict[str, Any], paragraph_style: Optional[Dict[str, Any]] = None):
    """One paragraph holding ``runs`` (``{"content": ..., "style": ...}``)."""

    elements: List[Dict[str, Any]] = []
    total = sum(len(run["content"]) for run in runs)
    marker: Dict[str, Any] = {}
    if paragraph_style is not None:
        marker["style"] = paragraph_style
    elements.append({"startIndex": 0, "endIndex": total, "paragraphMarker": marker})
    position = 0
    for run in runs:
        end = position + len(run["content"])
        elements.append({"startIndex": position, "endIndex": end, "textRun": run})
        position = end
    return {"textElements": elements}


def text_shape(
    object_id: str,
    text: Optional[Dict[str, Any]] = None,
    *,
    placeholder: Optional[Dict[str, Any]] = None,
    shape_type: str = "TEXT_BOX",
    translate_y: float = 0,
) -> Dict[str, Any]:
    shape: Dict[str, Any] = {"shapeType": shape_type}
    if text is not None:
        shape["text"] = text
    if placeholder is not None:
        shape["placeholder"] = placeholder
    return {
        "objectId": object_id,
        "size": {
            "width": {"magnitude": 3 * EMU_PER_INCH, "unit": "EMU"},
            "height": {"magnitude": EMU_PER_INCH, "unit": "EMU"},
        },
        "transform": {
            "scaleX": 1,
            "scaleY": 1,
            "translateX": 12700,
            "translateY": translate_y,
            "unit": "EMU",
        },
        "shape": shape,
    }


SAMPLE_SNAPSHOT: Dict[str, Any] = {
    "presentationId": "deck-1",
    "pageSize": {
        "width": {"magnitude": 9144000, "unit": "EMU"},
        "height": {"magnitude": 5143500, "unit": "EMU"},
    },
    "title": "Quarterly Review",
    "slides": [
        {
            "objectId": "slide_1",
            "pageType": "SLIDE",
            "slideProperties": {
                "layoutObjectId": "layout_1",
                "masterObjectId": "master_1",
            },
            "pageElements": [
                text_shape(
                    "slide_1_body",
                    text_body({"content": "Revenue grew\n"}),
                    translate_y=2 * EMU_PER_INCH,
                ),
                text_shape(
                    "slide_1_title",
                    text_body({"content": "Results\n", "style": {"fontSize": pt(12)}}),
                    placeholder={
                        "type": "TITLE",
                        "index": 0,
                        "parentObjectId": "layout_1_title",
                    },
                    translate_y=EMU_PER_INCH,
                ),
            ],
        },
        {
            "objectId": "slide_2",
            "pageType": "SLIDE",
            "slideProperties": {
                "layoutObjectId": "layout_1",
                "masterObjectId": "master_1",
            },
            "pageElements": [
                {
                    "objectId": "slide_2_table",
                    "size": {
                        "width": {"magnitude": 200, "unit": "PT"},
                        "height": {"magnitude": 60, "unit": "PT"},
                    },
                    "table": {
                        "rows": 1,
                        "columns": 2,
                        "tableRows": [
                            {
                                "rowHeight": pt(30),
                                "tableCells": [
                                    {
                                        "location": {"rowIndex": 0, "columnIndex": 0},
                                        "text": text_body({"content": "Region\n"}),
                                    },
                                    {
                                        "location": {"rowIndex": 0, "columnIndex": 1},
                                        "text": text_body({"content": "EMEA\n"}),
                                    },
                                ],
                            }
                        ],
                    },
                }
            ],
        },
    ],
    "layouts": [
        {
            "objectId": "layout_1",
            "pageType": "LAYOUT",
            "layoutProperties": {"masterObjectId": "master_1", "name": "TITLE_ONLY"},
            "pageElements": [
                text_shape(
                    "layout_1_title",
                    text_body({"content": "Title\n", "style": {"bold": True}}),
                    placeholder={
                        "type": "TITLE",
                        "index": 0,
                        "parentObjectId": "master_1_title",
                    },
                )
            ],
        }
    ],
    "masters": [
        {
            "objectId": "master_1",
            "pageType": "MASTER",
            "pageProperties": {
                "colorScheme": {
                    "colors": [
                        {"type": "DARK1", "color": rgb(0, 0, 0)},
                        {"type": "LIGHT1", "color": rgb(1, 1, 1)},
                        {"type": "ACCENT1", "color": rgb(1, 0, 0)},
                        {"type": "BACKGROUND1", "color": rgb(0.9375, 0.9375, 0.9375)},
                    ]
                }
            },
            "pageElements": [
                text_shape(
                    "master_1_title",
                    text_body(
                        {
                            "content": "Master title\n",
                            "style": {
                                "fontSize": pt(24),
                                "bold": False,
                                "fontFamily": "Georgia",
                                "foregroundColor": {
                                    "opaqueColor": {"themeColor": "ACCENT1"}
                                },
                            },
                        }
                    ),
                    placeholder={"type": "TITLE", "index": 0},
                )
            ],
        }
    ],
}


def sample_snapshot() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_SNAPSHOT)


def sample_presentation() -> Presentation:
    return Presentation.from_dict(sample_snapshot())
