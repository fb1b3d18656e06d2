import pytest

from slidetree.diff_formatting import (
    NO_CHANGES,
    compare_svg_content,
    count_line_changes,
    describe_change,
    friendly_path,
    generate_git_diff,
    generate_markdown_diff,
    generate_readable_summary,
    to_pretty_json,
)
from slidetree.errors import FormattingError
from slidetree.tree_diff import diff


def test_readable_summary_without_changes():
    assert generate_readable_summary([]) == NO_CHANGES


def test_readable_summary_counts_each_change_type():
    changes = diff({"a": 1, "b": 2}, {"a": 3, "c": [1]})

    summary = generate_readable_summary(changes)

    assert summary.startswith("## Summary:\nDetected 3 changes: 1 additions, 1 removals, 1 modifications.")
    assert "## Details:" in summary
    assert "- Changed `a` from 1 to 3" in summary
    assert "- Removed Number from `b`" in summary
    assert "- Added Item in Array at `c`" in summary


def test_structural_modification_uses_arrow_form():
    (change,) = diff({"v": [1]}, {"v": {"x": 1}})

    assert describe_change(change) == "- Modified `v` ([Array len=1] -> {Object})"


def test_modification_to_null_is_a_change():
    (change,) = diff({"v": {"x": 1}}, {"v": None})

    assert describe_change(change) == "- Changed `v` from {Object} to null"


def test_friendly_path_renames_known_segments():
    path = "slides[0].pageElements[1].shape.text.textElements[2].textRun.content"

    assert friendly_path(path) == "slides[0].Element[1].Shape Text.Text[2].Content"


def test_simplified_summary_groups_by_page():
    base = {"slides": [{"a": 1, "b": 1}, {"a": 1}]}
    other = {"slides": [{"a": 2, "b": 2}, {"a": 1, "c": 1}]}

    summary = generate_readable_summary(diff(base, other), simplify=True)

    assert "- `slides[0]`: 2 changes (0 added, 0 removed, 2 modified)" in summary
    assert "- `slides[1]`: 1 changes (1 added, 0 removed, 0 modified)" in summary


def test_git_diff_uses_presentation_headers():
    base_json = to_pretty_json({"title": "Old"})
    other_json = to_pretty_json({"title": "New"})

    output = generate_git_diff(base_json, other_json, diff({"title": "Old"}, {"title": "New"}))

    assert output.startswith("--- a/presentation.json\n+++ b/presentation.json\n")
    assert '-  "title": "Old"' in output
    assert '+  "title": "New"' in output


def test_git_diff_without_changes_reports_none():
    text = to_pretty_json({"title": "Same"})

    assert generate_git_diff(text, text, []).strip() == NO_CHANGES


def test_pretty_json_rejects_unserializable_values():
    with pytest.raises(FormattingError):
        to_pretty_json({"value": object()})


def test_line_change_counts():
    assert count_line_changes("a\nb\nc", "a\nB\nc\nd") == (2, 1)


def test_markdown_diff_has_summary_and_hunks():
    report = generate_markdown_diff("one\ntwo\n", "one\nthree\n", "base.md", "changed.md")

    assert report.startswith("## Summary of Changes (Text Content)\n\n- Lines Added: 1\n- Lines Removed: 1\n")
    assert "--- base.md" in report
    assert "+three" in report


def test_svg_comparison_reports_differences():
    report = compare_svg_content("<svg>\n<a/>\n</svg>", "<svg>\n<b/>\n</svg>", "1.svg", "2.svg")

    assert report.has_differences is True
    assert "> SVG files differ." in report.markdown_report
    assert "```diff\n--- 1.svg" in report.markdown_report
    assert report.markdown_report.rstrip().endswith("---")


def test_svg_comparison_of_identical_files():
    report = compare_svg_content("<svg/>", "<svg/>", "1.svg", "2.svg")

    assert report.has_differences is False
    assert "No textual differences found" in report.markdown_report
