"""Human readable reports built from structured diffs and text/SVG diffs."""

from __future__ import annotations

import difflib
import json
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .errors import FormattingError
from .tree_diff import Change, ChangeType, ValueKind, ValueSummary

DEFAULT_CONTEXT_LINES = 3
NO_CHANGES = "No changes detected."

FRIENDLY_PATH_SEGMENTS: Tuple[Tuple[str, str], ...] = (
    (".pageElements", ".Element"),
    (".textElements", ".Text"),
    (".shape.text", ".Shape Text"),
    (".shape.shapeProperties", ".Shape Properties"),
    (".textRun.content", ".Content"),
    (".textRun.style", ".Style"),
    (".style.foregroundColor", ".Color"),
    (".style.fontSize", ".Font Size"),
    (".style.bold", ".Bold"),
)

_TYPE_NAMES = {
    ValueKind.OBJECT: "Object",
    ValueKind.ARRAY: "Item in Array",
    ValueKind.STRING: "Text",
    ValueKind.NUMBER: "Number",
    ValueKind.BOOLEAN: "Boolean",
    ValueKind.NULL: "Null value",
}


@dataclass(slots=True)
class SvgDiffReport:
    markdown_report: str
    has_differences: bool


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def to_pretty_json(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise FormattingError(
            "value cannot be rendered as JSON", context="to_pretty_json", original_error=exc
        ) from exc


def unified_diff(
    before_text: str,
    after_text: str,
    fromfile: str,
    tofile: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    before = [line + "\n" for line in before_text.splitlines()]
    after = [line + "\n" for line in after_text.splitlines()]
    return "".join(
        difflib.unified_diff(before, after, fromfile=fromfile, tofile=tofile, n=context_lines)
    )


def count_line_changes(before_text: str, after_text: str) -> Tuple[int, int]:
    """Return ``(added, removed)`` line counts between two texts."""

    matcher = difflib.SequenceMatcher(
        None, before_text.splitlines(), after_text.splitlines(), autojunk=False
    )
    added = removed = 0
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag in ("replace", "delete"):
            removed += i2 - i1
        if tag in ("replace", "insert"):
            added += j2 - j1
    return added, removed


def generate_git_diff(
    base_json: str,
    other_json: str,
    changes: Sequence[Change],
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    """Unified diff of two pretty-printed presentation JSON documents."""

    output = unified_diff(
        base_json,
        other_json,
        "a/presentation.json",
        "b/presentation.json",
        context_lines,
    )
    if not changes:
        output += f"\n{NO_CHANGES}\n"
    return output


def generate_readable_summary(changes: Sequence[Change], simplify: bool = False) -> str:
    if not changes:
        return NO_CHANGES

    added = sum(1 for change in changes if change.change_type is ChangeType.ADDED)
    removed = sum(1 for change in changes if change.change_type is ChangeType.REMOVED)
    modified = len(changes) - added - removed

    header = (
        "## Summary:\n"
        f"Detected {len(changes)} changes: {added} additions, "
        f"{removed} removals, {modified} modifications."
    )
    if simplify:
        lines = _grouped_lines(changes)
    else:
        lines = [describe_change(change) for change in changes]
    return header + "\n\n## Details:\n" + "\n".join(lines)


def describe_change(change: Change) -> str:
    path = friendly_path(change.path)
    if change.change_type is ChangeType.ADDED:
        return f"- Added {_type_name(change.new_value)} at `{path}`"
    if change.change_type is ChangeType.REMOVED:
        return f"- Removed {_type_name(change.old_value)} from `{path}`"

    old_text = _display(change.old_value)
    new_text = _display(change.new_value)
    if _both_scalar(change.old_value, change.new_value) or _either_null(
        change.old_value, change.new_value
    ):
        return f"- Changed `{path}` from {old_text} to {new_text}"
    return f"- Modified `{path}` ({old_text} -> {new_text})"


def friendly_path(path: str) -> str:
    # Prefix keeps the first segment matchable by the dotted patterns.
    result = "." + path
    for raw, friendly in FRIENDLY_PATH_SEGMENTS:
        result = result.replace(raw, friendly)
    return result[1:] if result.startswith(".") else result


def generate_markdown_diff(
    base_text: str,
    changed_text: str,
    base_filename: str,
    changed_filename: str,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    added, removed = count_line_changes(base_text, changed_text)
    summary = (
        "## Summary of Changes (Text Content)\n\n"
        f"- Lines Added: {added}\n- Lines Removed: {removed}\n\n---\n\n"
    )
    return summary + unified_diff(
        base_text, changed_text, base_filename, changed_filename, context_lines
    )


def compare_svg_content(
    base_svg: str,
    changed_svg: str,
    base_filename: str,
    changed_filename: str,
    *,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> SvgDiffReport:
    has_differences = base_svg != changed_svg
    parts: List[str] = [
        "# Summary of SVG Changes\n\n",
        "---\n",
        f"## Comparison: `{base_filename}` vs `{changed_filename}`\n\n",
    ]
    if has_differences:
        added, removed = count_line_changes(base_svg, changed_svg)
        hunks = unified_diff(
            base_svg, changed_svg, base_filename, changed_filename, context_lines
        )
        parts.extend(
            [
                "> SVG files differ.\n",
                f"> - Lines Added: {added}\n",
                f"> - Lines Removed: {removed}\n\n",
                "```diff\n",
                hunks if hunks.endswith("\n") or not hunks else hunks + "\n",
                "```\n",
            ]
        )
    else:
        parts.append("> No textual differences found between SVG files.\n")
    parts.append("\n---\n")
    return SvgDiffReport(markdown_report="".join(parts), has_differences=has_differences)


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _type_name(summary: Optional[ValueSummary]) -> str:
    if summary is None:
        return "Item"
    return _TYPE_NAMES[summary.kind]


def _display(summary: Optional[ValueSummary]) -> str:
    return summary.format_for_display() if summary is not None else "null"


def _both_scalar(old: Optional[ValueSummary], new: Optional[ValueSummary]) -> bool:
    return old is not None and new is not None and old.is_scalar and new.is_scalar


def _either_null(old: Optional[ValueSummary], new: Optional[ValueSummary]) -> bool:
    return any(
        summary is None or summary.kind is ValueKind.NULL for summary in (old, new)
    )


def _group_key(path: str) -> str:
    bracket = path.find("]")
    if bracket != -1:
        return path[: bracket + 1]
    return path.split(".", 1)[0]


def _grouped_lines(changes: Iterable[Change]) -> List[str]:
    groups: "OrderedDict[str, List[int]]" = OrderedDict()
    for change in changes:
        counts = groups.setdefault(_group_key(change.path), [0, 0, 0])
        if change.change_type is ChangeType.ADDED:
            counts[0] += 1
        elif change.change_type is ChangeType.REMOVED:
            counts[1] += 1
        else:
            counts[2] += 1
    return [
        f"- `{key}`: {sum(counts)} changes "
        f"({counts[0]} added, {counts[1]} removed, {counts[2]} modified)"
        for key, counts in groups.items()
    ]
