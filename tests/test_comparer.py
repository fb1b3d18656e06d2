import pytest

from slidetree.comparer import Comparer, ComparerBuilder
from slidetree.config import Settings
from slidetree.errors import ComparisonError
from slidetree.tree_diff import ChangeType

from tests.presentation_fixtures import sample_presentation


def test_builder_requires_base():
    with pytest.raises(ComparisonError, match="Base presentation not set"):
        ComparerBuilder().build()


def test_comparing_identical_snapshots():
    comparer = ComparerBuilder().set_base(sample_presentation()).build()

    result = comparer.compare(sample_presentation())

    assert result.has_changes() is False
    assert result.get_structured_diff() == []
    assert result.get_readable_diff() == "No changes detected."
    assert result.get_git_diff().strip() == "No changes detected."


def test_text_edit_is_reported_in_all_formats():
    base = sample_presentation()
    other = sample_presentation()
    other.slides[0].page_elements[0].shape.text.text_elements[1].text_run.content = (
        "Revenue fell\n"
    )

    result = Comparer(base).compare(other)

    (change,) = result.get_structured_diff()
    assert change.change_type is ChangeType.MODIFIED
    assert change.path == "slides[0].pageElements[0].shape.text.textElements[1].textRun.content"
    assert "Revenue fell" in result.get_git_diff()
    assert "`slides[0].Element[0].Shape Text.Text[1].Content`" in result.get_readable_diff()
    assert result.to_dict()["changes"][0]["changeType"] == "Modified"


def test_settings_control_context_and_simplify():
    base = sample_presentation()
    other = sample_presentation()
    other.title = "Annual Review"

    comparer = (
        ComparerBuilder()
        .set_base(base)
        .set_simplify(True)
        .set_settings(Settings(diff_context_lines=0))
        .build()
    )
    result = comparer.compare(other)

    assert result.context_lines == 0
    assert "- `title`: 1 changes (0 added, 0 removed, 1 modified)" in result.get_readable_diff()
    assert "Quarterly Review" in result.get_git_diff()
    assert '"presentationId"' not in result.get_git_diff()
