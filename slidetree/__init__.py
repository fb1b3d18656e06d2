"""Slide document model with placeholder-aware styling, tree diffs and SVG export."""

from .comparer import Comparer, ComparerBuilder, ComparisonResult
from .config import Settings, configure_logging, load_settings
from .diff_formatting import (
    SvgDiffReport,
    compare_svg_content,
    generate_git_diff,
    generate_markdown_diff,
    generate_readable_summary,
)
from .errors import (
    ComparisonError,
    DocumentError,
    FormattingError,
    MissingAncestorError,
    RenderError,
    SerializationError,
    SlideTreeError,
)
from .markdown_extractor import extract_text_from_presentation
from .placeholders import (
    ElementIndex,
    build_index,
    effective_style,
    find_ancestor_placeholder,
    inherited_styles,
)
from .pptx_loader import load_pptx
from .slide_models import Page, PageElement, Presentation
from .snapshot_store import PresentationSnapshotStore, load_presentation_json
from .style_merge import merge_paragraph_styles, merge_text_styles
from .svg_renderer import SlideSvgRenderer, convert_presentation_to_svg
from .tree_diff import Change, ChangeType, ValueSummary, diff

__all__ = [
    "Presentation",
    "Page",
    "PageElement",
    "Settings",
    "load_settings",
    "configure_logging",
    "SlideTreeError",
    "DocumentError",
    "SerializationError",
    "ComparisonError",
    "FormattingError",
    "RenderError",
    "MissingAncestorError",
    "merge_text_styles",
    "merge_paragraph_styles",
    "ElementIndex",
    "build_index",
    "find_ancestor_placeholder",
    "inherited_styles",
    "effective_style",
    "Change",
    "ChangeType",
    "ValueSummary",
    "diff",
    "Comparer",
    "ComparerBuilder",
    "ComparisonResult",
    "generate_git_diff",
    "generate_readable_summary",
    "generate_markdown_diff",
    "compare_svg_content",
    "SvgDiffReport",
    "extract_text_from_presentation",
    "SlideSvgRenderer",
    "convert_presentation_to_svg",
    "PresentationSnapshotStore",
    "load_presentation_json",
    "load_pptx",
]
